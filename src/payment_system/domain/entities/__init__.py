"""Domain entities - Payment and its variants."""

from payment_system.domain.entities.payment import (
    CardPayment,
    CryptoPayment,
    Payment,
    PaymentKind,
)

__all__ = [
    "CardPayment",
    "CryptoPayment",
    "Payment",
    "PaymentKind",
]
