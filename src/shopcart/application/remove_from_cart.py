"""Application service: Remove From Cart use case.

Units taken out of the cart go back on the shelf.
"""

from __future__ import annotations

from shopcart.domain.model.cart import ShoppingCart
from shopcart.domain.model.inventory import Inventory
from shopcart.domain.model.value_objects import Quantity


class RemoveFromCartHandler:

    def __init__(self, inventory: Inventory, cart: ShoppingCart) -> None:
        self._inventory = inventory
        self._cart = cart

    def handle(self, product_id: int, quantity: int) -> int:
        """Return the number of units removed (0 if the product is not in the cart)."""
        qty = Quantity(quantity)
        removed = self._cart.remove_from_cart(product_id, qty.value)
        if removed:
            self._inventory.increase_stock(product_id, removed)
        return removed
