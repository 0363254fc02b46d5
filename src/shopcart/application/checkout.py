"""Application service: Checkout use case.

Checkout is a short, linear state machine:

1. An empty cart is refused; nothing changes.
2. The payment is charged the cart total. A declined payment leaves the
   cart as it is. Stock committed when the items were added is *not*
   returned to the Inventory.
3. On success an Order snapshot is built from the cart lines, taking the
   next id from the OrderSequence, and the cart is cleared.

Ids are only drawn once payment has succeeded, so declined checkouts
never leave gaps in the order numbering.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from shopcart.application.dto import OrderDTO
from shopcart.domain.model.cart import ShoppingCart
from shopcart.domain.model.order import Order, OrderSequence
from shopcart.domain.model.payment import Payment

logger = logging.getLogger(__name__)


class CheckoutStatus(Enum):
    COMPLETED = "COMPLETED"
    EMPTY_CART = "EMPTY_CART"
    PAYMENT_DECLINED = "PAYMENT_DECLINED"


@dataclass(frozen=True)
class CheckoutResult:
    status: CheckoutStatus
    order: OrderDTO | None = None

    @property
    def succeeded(self) -> bool:
        return self.status is CheckoutStatus.COMPLETED


class CheckoutHandler:

    def __init__(self, cart: ShoppingCart, order_sequence: OrderSequence) -> None:
        self._cart = cart
        self._order_sequence = order_sequence

    def handle(self, payment: Payment) -> CheckoutResult:
        if self._cart.is_empty():
            logger.info("Checkout refused: cart is empty")
            return CheckoutResult(CheckoutStatus.EMPTY_CART)

        total = self._cart.total()
        if not payment.pay(total):
            logger.info("Checkout aborted: %s payment of %s declined", payment.method.value, total)
            return CheckoutResult(CheckoutStatus.PAYMENT_DECLINED)

        order = Order.create(self._order_sequence.next_id(), self._cart.items)
        self._cart.clear()
        logger.info("Order #%s placed for %s", order.id, order.amount)
        return CheckoutResult(CheckoutStatus.COMPLETED, OrderDTO.from_order(order))
