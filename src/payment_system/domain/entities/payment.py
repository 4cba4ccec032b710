"""Payment entity and its processing variants.

A Payment is an immutable amount tagged with a kind. Each variant knows how
to process itself; in this system processing never fails.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import ClassVar

import structlog

logger = structlog.get_logger()

Amount = int | float | Decimal


class PaymentKind(Enum):
    """Payment variants. Values are the exact labels accepted by the factory."""

    CARD = "CARD"
    CRYPTO = "CRYPTO"


@dataclass(frozen=True, slots=True)
class Payment(ABC):
    """Base payment entity.

    Payment is immutable (frozen dataclass). The amount is set once at
    construction and is not range-checked here: zero and negative amounts
    are legal to construct and are left to a PaymentValidator to reject.

    Concrete variants set the class-level ``kind`` and implement process().
    """

    kind: ClassVar[PaymentKind]

    amount: Amount

    @abstractmethod
    def process(self) -> bool:
        """Process the payment.

        Implementations emit a ``payment.processed`` event naming the
        variant and amount.

        Returns:
            Always True; payment processing has no failure path.
        """


@dataclass(frozen=True, slots=True)
class CardPayment(Payment):
    """Payment settled by card."""

    kind: ClassVar[PaymentKind] = PaymentKind.CARD

    def process(self) -> bool:
        logger.info("payment.processed", kind=PaymentKind.CARD.value, amount=self.amount)
        return True


@dataclass(frozen=True, slots=True)
class CryptoPayment(Payment):
    """Payment settled in cryptocurrency."""

    kind: ClassVar[PaymentKind] = PaymentKind.CRYPTO

    def process(self) -> bool:
        logger.info("payment.processed", kind=PaymentKind.CRYPTO.value, amount=self.amount)
        return True
