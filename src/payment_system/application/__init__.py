"""Application layer - Orchestration of domain operations.

This layer contains:
- PaymentService: validate-then-process sequencing with event logging

The application layer depends only on the domain layer.
Validation policies are injected into the service at construction.
"""

from payment_system.application.payment_service import PaymentService

__all__ = ["PaymentService"]
