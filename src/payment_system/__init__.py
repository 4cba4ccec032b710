"""payment-system: factory, validator and service patterns over toy payments."""

__version__ = "0.1.0"
