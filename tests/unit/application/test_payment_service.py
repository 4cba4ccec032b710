"""Tests for PaymentService.

Tests cover:
- Successful validate-then-process flow
- Short-circuit on validation failure (process() never called)
- Logged events for each step
- Swapping validators per service instance
"""

import pytest
from structlog.testing import capture_logs

from payment_system.application import PaymentService
from payment_system.domain.entities import CardPayment, CryptoPayment, Payment
from payment_system.domain.validation import default_validator, max_limit_validator

# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def default_service() -> PaymentService:
    return PaymentService(default_validator)


@pytest.fixture
def limited_service() -> PaymentService:
    return PaymentService(max_limit_validator)


# =============================================================================
# Execute Tests
# =============================================================================


class TestExecuteSuccess:
    def test_valid_payment_returns_true(self, default_service: PaymentService) -> None:
        assert default_service.execute(CardPayment(amount=100)) is True

    def test_logs_start_process_and_result(self, default_service: PaymentService) -> None:
        with capture_logs() as logs:
            default_service.execute(CardPayment(amount=100))

        assert [entry["event"] for entry in logs] == [
            "payment.started",
            "payment.processed",
            "payment.completed",
        ]
        assert logs[0]["amount"] == 100
        assert logs[2]["result"] is True


class TestExecuteValidationFailure:
    def test_negative_amount_returns_false(self, default_service: PaymentService) -> None:
        assert default_service.execute(CardPayment(amount=-1)) is False

    def test_rejection_does_not_process(self, default_service: PaymentService) -> None:
        with capture_logs() as logs:
            default_service.execute(CardPayment(amount=-1))

        events = [entry["event"] for entry in logs]
        assert events == ["payment.started", "payment.validation_failed"]
        assert "payment.processed" not in events

    def test_process_is_never_called(self, default_service: PaymentService) -> None:
        calls: list[Payment] = []

        class TrackingPayment(CardPayment):
            def process(self) -> bool:
                calls.append(self)
                return True

        default_service.execute(TrackingPayment(amount=0))

        assert calls == []


class TestExecuteWithMaxLimitValidator:
    def test_boundary(self, limited_service: PaymentService) -> None:
        assert limited_service.execute(CryptoPayment(amount=9999)) is True
        assert limited_service.execute(CryptoPayment(amount=10000)) is False

    def test_same_payment_differs_by_validator(
        self,
        default_service: PaymentService,
        limited_service: PaymentService,
    ) -> None:
        payment = CryptoPayment(amount=15000)

        assert default_service.execute(payment) is True
        assert limited_service.execute(payment) is False


class TestExecuteWithCustomValidator:
    def test_any_callable_is_accepted(self) -> None:
        service = PaymentService(lambda payment: isinstance(payment, CryptoPayment))

        assert service.execute(CryptoPayment(amount=-5)) is True
        assert service.execute(CardPayment(amount=5)) is False

    def test_service_is_stateless_across_calls(self, default_service: PaymentService) -> None:
        assert default_service.execute(CardPayment(amount=-1)) is False
        assert default_service.execute(CardPayment(amount=1)) is True
        assert default_service.execute(CardPayment(amount=-1)) is False
