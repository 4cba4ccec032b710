"""Validation policies deciding whether a payment may be processed.

A policy is any callable taking a Payment and returning True to accept it.
Policies are pure predicates over ``payment.amount``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeAlias

if TYPE_CHECKING:
    from collections.abc import Callable

    from payment_system.domain.entities import Payment
    from payment_system.domain.entities.payment import Amount

PaymentValidator: TypeAlias = "Callable[[Payment], bool]"

MAX_PAYMENT_AMOUNT = 10_000


def default_validator(payment: Payment) -> bool:
    """Accept any strictly positive amount."""
    return payment.amount > 0


def make_max_limit_validator(limit: Amount) -> PaymentValidator:
    """Build a policy accepting amounts in the open interval (0, limit).

    Args:
        limit: Exclusive upper bound.

    Returns:
        A validator rejecting zero, negative, and amounts >= limit.
    """

    def max_limit_validator(payment: Payment) -> bool:
        return 0 < payment.amount < limit

    return max_limit_validator


max_limit_validator = make_max_limit_validator(MAX_PAYMENT_AMOUNT)
