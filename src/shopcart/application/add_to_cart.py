"""Application service: Add To Cart use case.

Stock is committed in the Inventory *before* the cart line is created,
so a cart entry always stands for units that were actually taken off
the shelf.
"""

from __future__ import annotations

from shopcart.domain.model.cart import ShoppingCart
from shopcart.domain.model.inventory import Inventory
from shopcart.domain.model.value_objects import Quantity


class AddToCartHandler:

    def __init__(self, inventory: Inventory, cart: ShoppingCart) -> None:
        self._inventory = inventory
        self._cart = cart

    def handle(self, product_id: int, quantity: int) -> bool:
        """Add *quantity* units of a product to the cart.

        Returns False, leaving both cart and Inventory unchanged, when
        there is not enough stock. Raises EntityNotFoundError for an
        unknown product and ValidationError for a non-positive quantity.
        """
        qty = Quantity(quantity)
        self._inventory.get_product(product_id)

        if not self._inventory.reduce_stock(product_id, qty.value):
            return False

        # Snapshot taken after the commit, so it shows the remaining stock
        self._cart.add_to_cart(self._inventory.get_product(product_id), qty.value)
        return True
