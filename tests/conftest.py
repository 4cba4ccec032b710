"""Shared pytest fixtures for the test suite."""

import pytest

from payment_system.domain.entities import CardPayment, CryptoPayment


@pytest.fixture
def card_payment() -> CardPayment:
    """A valid card payment."""
    return CardPayment(amount=100)


@pytest.fixture
def crypto_payment() -> CryptoPayment:
    """A valid crypto payment."""
    return CryptoPayment(amount=200)
