"""Infrastructure layer - Process-level wiring.

This layer contains:
- Logging: structlog configuration for console output
"""

from payment_system.infrastructure.logging_config import configure_logging

__all__ = ["configure_logging"]
