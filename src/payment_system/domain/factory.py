from __future__ import annotations

from typing import TYPE_CHECKING

from payment_system.domain.entities import CardPayment, CryptoPayment, PaymentKind
from payment_system.domain.exceptions import InvalidPaymentKindError

if TYPE_CHECKING:
    from payment_system.domain.entities import Payment
    from payment_system.domain.entities.payment import Amount

_KINDS_BY_LABEL: dict[str, PaymentKind] = {kind.value: kind for kind in PaymentKind}

_VARIANTS: dict[PaymentKind, type[Payment]] = {
    PaymentKind.CARD: CardPayment,
    PaymentKind.CRYPTO: CryptoPayment,
}


def create_payment(kind: str, amount: Amount) -> Payment:
    """Create the payment variant named by ``kind``.

    Args:
        kind: Exact, case-sensitive label ("CARD" or "CRYPTO"). PaymentKind
            members are not labels and are rejected.
        amount: Payment amount; not range-checked.

    Returns:
        A CardPayment or CryptoPayment.

    Raises:
        InvalidPaymentKindError: If the label matches no PaymentKind.
    """
    payment_kind = _KINDS_BY_LABEL.get(kind) if isinstance(kind, str) else None
    if payment_kind is None:
        raise InvalidPaymentKindError(f"Unknown payment kind: {kind}")

    return _VARIANTS[payment_kind](amount=amount)
