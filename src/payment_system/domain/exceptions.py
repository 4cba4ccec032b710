"""Domain exceptions for payment-system.

Exception hierarchy:
    DomainException (base)
    └── Validation Errors
        └── InvalidPaymentKindError

Validation rejection by a PaymentValidator is a normal outcome and is
never signalled with an exception.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base exception for errors raised by payment construction.

    The command-line entry point catches this type to abort a run with a
    non-zero exit status; anything else propagates unchanged.
    """


# =============================================================================
# Validation Errors
# =============================================================================


class InvalidPaymentKindError(DomainException, ValueError):
    """Raised when a payment kind label is not recognised.

    Labels are matched exactly against PaymentKind values ("CARD", "CRYPTO").
    Also a ValueError, so callers treating it as a bad argument can catch it
    without importing the domain hierarchy.
    """
