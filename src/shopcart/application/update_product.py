"""Application service: Update Product use case (administrators only)."""

from __future__ import annotations

import logging

from shopcart.domain.exceptions import PermissionDeniedError, ValidationError
from shopcart.domain.model.inventory import Inventory
from shopcart.domain.model.user import User

logger = logging.getLogger(__name__)


class UpdateProductHandler:

    def __init__(self, inventory: Inventory) -> None:
        self._inventory = inventory

    def handle(
        self,
        user: User,
        product_id: int,
        price: str | None = None,
        stock: int | None = None,
    ) -> None:
        """Change a product's price and/or stock level.

        Carts and orders that already hold the product keep the values
        they copied. Both values are validated before either is applied.
        """
        if not user.can_manage_catalog:
            raise PermissionDeniedError(
                f"User '{user.username}' ({user.role.value}) cannot update products"
            )
        if price is None and stock is None:
            raise ValidationError("Nothing to update: give a price, a stock level or both")

        product = self._inventory.get_product(product_id)
        if price is not None:
            product.set_price(price)
        if stock is not None:
            product.set_stock(stock)

        self._inventory.add_product(product)
        logger.info("Product #%s updated by %s: %s", product_id, user.username, product)
