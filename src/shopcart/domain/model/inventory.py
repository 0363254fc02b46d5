"""Inventory — the catalog that owns authoritative stock levels.

There is exactly one Inventory per shopping session. It is constructed by
the composition root and passed to every handler that needs it, so all
mutations are immediately visible to every collaborator holding it.

Products go in and come out as *copies*: nobody outside the Inventory can
change a stored price or stock level except through its methods.
"""

from __future__ import annotations

import logging

from shopcart.domain.exceptions import EntityNotFoundError
from shopcart.domain.model.product import Product

logger = logging.getLogger(__name__)


class Inventory:

    def __init__(self, products: list[Product] | None = None) -> None:
        self._products: dict[int, Product] = {}
        for product in products or []:
            self.add_product(product)

    # --- Catalog --------------------------------------------------------------

    def add_product(self, product: Product) -> None:
        """Insert or replace the product stored under ``product.id``."""
        self._products[product.id] = product.snapshot()

    def has_product(self, product_id: int) -> bool:
        return product_id in self._products

    def get_product(self, product_id: int) -> Product:
        """Return a copy of the stored product.

        Raises EntityNotFoundError when the id is unknown.
        """
        return self._get(product_id).snapshot()

    def list_all(self) -> list[Product]:
        """Return copies of every product, ordered by ascending id."""
        return sorted(
            (p.snapshot() for p in self._products.values()),
            key=lambda p: p.id,
        )

    def products(self) -> list[Product]:
        """Return copies of every product in storage order."""
        return [p.snapshot() for p in self._products.values()]

    def __len__(self) -> int:
        return len(self._products)

    # --- Stock ----------------------------------------------------------------

    def reduce_stock(self, product_id: int, qty: int) -> bool:
        """Commit *qty* units of a product.

        Returns False for an unknown product or when the product refuses
        the reduction; stock is then left as it was.
        """
        product = self._products.get(product_id)
        if product is None:
            logger.info("Stock reduction for unknown product id %s", product_id)
            return False
        if not product.reduce_stock(qty):
            logger.info(
                "Refused to take %s of '%s' (stock: %s)",
                qty, product.name, product.stock,
            )
            return False
        logger.debug("Committed %s of '%s', %s left", qty, product.name, product.stock)
        return True

    def increase_stock(self, product_id: int, qty: int) -> bool:
        product = self._products.get(product_id)
        if product is None:
            return False
        return product.increase_stock(qty)

    # --- Internal helpers -----------------------------------------------------

    def _get(self, product_id: int) -> Product:
        product = self._products.get(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product #{product_id} not found")
        return product
