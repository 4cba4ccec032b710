"""Command-line demonstration of the payment workflow.

Creates a fixed set of payments through the factory and executes them
against two services: one using the default validator and one using the
max-limit validator.
"""

from __future__ import annotations

import argparse
import sys
from typing import TYPE_CHECKING

import structlog

from payment_system.application import PaymentService
from payment_system.config import load_config
from payment_system.domain.exceptions import DomainException
from payment_system.domain.factory import create_payment
from payment_system.domain.validation import default_validator, max_limit_validator
from payment_system.infrastructure import configure_logging

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = structlog.get_logger()

# (kind, amount) pairs; indexes 0 and 2 go to the default service,
# 1 and 3 to the max-limit service.
DEMO_PAYMENTS: tuple[tuple[str, int], ...] = (
    ("CARD", 100),
    ("CRYPTO", 500),
    ("CARD", -10),
    ("CRYPTO", 15000),
)


def build_parser() -> argparse.ArgumentParser:
    return argparse.ArgumentParser(
        prog="payment-system",
        description="Run the payment factory/validator/service demonstration.",
    )


def run_demo() -> None:
    """Run the demonstration sequence.

    Raises:
        InvalidPaymentKindError: If a demo entry names an unknown kind.
    """
    config = load_config()
    print(f"Environment: {config.environment}")

    default_service = PaymentService(default_validator)
    limited_service = PaymentService(max_limit_validator)

    payments = [create_payment(kind, amount) for kind, amount in DEMO_PAYMENTS]

    print("\n--- Execute with default validator ---")
    default_service.execute(payments[0])
    default_service.execute(payments[2])

    print("\n--- Execute with max limit validator ---")
    limited_service.execute(payments[1])
    limited_service.execute(payments[3])


def main(argv: Sequence[str] | None = None) -> int:
    build_parser().parse_args(argv)
    configure_logging()

    try:
        run_demo()
    except DomainException as e:
        logger.error("demo.aborted", error=str(e))
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
