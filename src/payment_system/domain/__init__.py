"""Domain layer - Payment variants, validation policies and construction.

This layer contains:
- Entities: Payment and its Card/Crypto variants
- Validation: Predicate policies deciding whether a payment may be processed
- Factory: Construction of payment variants from a kind label
- Domain Exceptions: Business rule violations

The domain layer depends only on structlog for event logging.
"""
