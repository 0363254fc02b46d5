"""Order — the immutable record of a completed checkout.

An Order only ever exists for a checkout whose payment succeeded, so it
carries no status. Its ids come from an OrderSequence owned by whoever
creates orders; there is no process-wide counter.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Iterable

from shopcart.domain.exceptions import ValidationError
from shopcart.domain.model.cart import CartItem
from shopcart.domain.model.value_objects import Money


class OrderSequence:
    """Hands out strictly increasing order ids, starting at 1."""

    def __init__(self, start: int = 1) -> None:
        if start < 1:
            raise ValidationError("Order ids start at 1 or above")
        self._next = start

    def next_id(self) -> int:
        order_id = self._next
        self._next += 1
        return order_id

    def peek(self) -> int:
        """The id the next order will receive."""
        return self._next


@dataclass(frozen=True)
class Order:
    """Snapshot of the cart lines and the amount paid for them.

    Build new orders through ``Order.create()``, which copies the lines
    and computes ``amount`` exactly once.
    """

    id: int
    items: tuple[CartItem, ...]
    amount: Money
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def create(order_id: int, items: Iterable[CartItem]) -> Order:
        lines = tuple(CartItem(item.product.snapshot(), item.quantity) for item in items)
        if not lines:
            raise ValidationError("Order must contain at least one item")

        amount = Money.zero()
        for line in lines:
            amount = amount + line.subtotal
        return Order(id=order_id, items=lines, amount=amount)
