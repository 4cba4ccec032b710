from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from payment_system.domain.entities import Payment
    from payment_system.domain.validation import PaymentValidator

logger = structlog.get_logger()


class PaymentService:
    """Orchestrates the validate-then-process workflow.

    The service is bound to one validation policy for its lifetime and
    keeps no state between calls. Rejection by the policy is a normal
    outcome, reported as False rather than raised.
    """

    def __init__(self, validator: PaymentValidator) -> None:
        self._validator = validator

    def execute(self, payment: Payment) -> bool:
        """Validate the payment and, if accepted, process it.

        Args:
            payment: The payment to execute.

        Returns:
            False if the validator rejects the payment (process() is not
            called), otherwise the result of payment.process().
        """
        logger.info("payment.started", amount=payment.amount)

        if not self._validator(payment):
            logger.info("payment.validation_failed", amount=payment.amount)
            return False

        result = payment.process()
        logger.info("payment.completed", result=result)
        return result
