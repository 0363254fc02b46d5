"""Payment methods accepted at checkout.

The set of methods is closed: each variant is an immutable value tagged
with its ``PaymentMethod`` and offers a single ``pay(amount)`` call.
Paying is synchronous and single-shot. A False result means the
payment was declined; no settlement with any external gateway happens.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Union

from shopcart.domain.exceptions import ValidationError
from shopcart.domain.model.value_objects import Money

logger = logging.getLogger(__name__)


class PaymentMethod(Enum):
    CREDIT_CARD = "card"
    PAYPAL = "paypal"


@dataclass(frozen=True)
class CreditCardPayment:
    card_number: str
    name_on_card: str = ""

    method: ClassVar[PaymentMethod] = PaymentMethod.CREDIT_CARD

    def pay(self, amount: Money) -> bool:
        logger.info("Processing credit card payment for %s", amount)
        if not self.card_number.strip():
            logger.info("Credit card payment declined: no card number")
            return False
        logger.info("Paid %s by credit card (%s)", amount, self.name_on_card or "unnamed")
        return True


@dataclass(frozen=True)
class PayPalPayment:
    account_email: str

    method: ClassVar[PaymentMethod] = PaymentMethod.PAYPAL

    def pay(self, amount: Money) -> bool:
        logger.info("Processing PayPal payment for %s", amount)
        if not self.account_email.strip():
            logger.info("PayPal payment declined: no account e-mail")
            return False
        logger.info("Paid %s by PayPal (%s)", amount, self.account_email)
        return True


Payment = Union[CreditCardPayment, PayPalPayment]


def payment_for(method: PaymentMethod, **details: str) -> Payment:
    """Build the payment variant for *method* from its account details.

    ``card_number``/``name_on_card`` apply to credit cards and
    ``account_email`` to PayPal. Unknown detail names raise
    ValidationError.
    """
    try:
        if method is PaymentMethod.CREDIT_CARD:
            return CreditCardPayment(**details)
        if method is PaymentMethod.PAYPAL:
            return PayPalPayment(**details)
    except TypeError as exc:
        raise ValidationError(f"Invalid details for {method.value} payment: {exc}") from exc
    raise ValidationError(f"Unsupported payment method: {method!r}")
