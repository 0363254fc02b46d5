"""Unit tests for the payment variants."""

import pytest

from shopcart.domain.exceptions import ValidationError
from shopcart.domain.model.payment import (
    CreditCardPayment,
    PaymentMethod,
    PayPalPayment,
    payment_for,
)
from shopcart.domain.model.value_objects import Money

AMOUNT = Money.of("31.50")


class TestCreditCard:

    def test_pays_with_card_number(self):
        assert CreditCardPayment("1234", "Alice").pay(AMOUNT) is True

    @pytest.mark.parametrize("card", ["", "   "])
    def test_declined_without_card_number(self, card):
        assert CreditCardPayment(card, "Alice").pay(AMOUNT) is False

    def test_tag(self):
        assert CreditCardPayment("1").method is PaymentMethod.CREDIT_CARD


class TestPayPal:

    def test_pays_with_email(self):
        assert PayPalPayment("alice@mail.com").pay(AMOUNT) is True

    def test_declined_without_email(self):
        assert PayPalPayment("").pay(AMOUNT) is False

    def test_tag(self):
        assert PayPalPayment("a@b").method is PaymentMethod.PAYPAL


class TestPaymentFor:

    def test_builds_credit_card(self):
        payment = payment_for(PaymentMethod.CREDIT_CARD, card_number="1234", name_on_card="Alice")
        assert payment == CreditCardPayment("1234", "Alice")

    def test_builds_paypal(self):
        payment = payment_for(PaymentMethod.PAYPAL, account_email="alice@mail.com")
        assert payment == PayPalPayment("alice@mail.com")

    def test_wrong_details_rejected(self):
        with pytest.raises(ValidationError, match="Invalid details"):
            payment_for(PaymentMethod.PAYPAL, card_number="1234")
