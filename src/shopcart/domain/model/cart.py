"""Shopping cart and its line items.

A cart line holds a *copy* of the product taken when it was added, so
later price or stock changes in the Inventory never alter a cart that
already exists. The cart does not talk to the Inventory: committing
stock is the caller's job and happens before a line is added.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from shopcart.domain.model.product import Product
from shopcart.domain.model.value_objects import Money, Quantity

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CartItem:
    """One cart line: a product snapshot and how many units of it."""

    product: Product
    quantity: Quantity

    @staticmethod
    def of(product: Product, quantity: int) -> CartItem:
        return CartItem(product=product.snapshot(), quantity=Quantity(quantity))

    @property
    def subtotal(self) -> Money:
        return self.product.price * self.quantity.value


class ShoppingCart:
    """Ordered, session-scoped selection of products.

    The same product may appear on several lines; each ``add_to_cart``
    call produces its own entry.
    """

    def __init__(self) -> None:
        self._items: list[CartItem] = []

    @property
    def items(self) -> tuple[CartItem, ...]:
        return tuple(self._items)

    def add_to_cart(self, product: Product, qty: int) -> CartItem:
        item = CartItem.of(product, qty)
        self._items.append(item)
        logger.debug("Added %s x %s to cart", item.product.name, qty)
        return item

    def remove_from_cart(self, product_id: int, qty: int) -> int:
        """Remove up to *qty* units of a product, newest lines first.

        Lines that drop to zero are discarded. Returns the number of units
        actually removed, which is 0 when the product is not in the cart.
        """
        remaining = qty
        for index in range(len(self._items) - 1, -1, -1):
            if remaining <= 0:
                break
            item = self._items[index]
            if item.product.id != product_id:
                continue
            taken = min(remaining, item.quantity.value)
            left = item.quantity.value - taken
            if left:
                self._items[index] = CartItem(item.product, Quantity(left))
            else:
                del self._items[index]
            remaining -= taken
        removed = max(qty, 0) - max(remaining, 0)
        if removed:
            logger.debug("Removed %s unit(s) of product #%s from cart", removed, product_id)
        return removed

    def total(self) -> Money:
        result = Money.zero()
        for item in self._items:
            result = result + item.subtotal
        return result

    def clear(self) -> None:
        self._items.clear()

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)
