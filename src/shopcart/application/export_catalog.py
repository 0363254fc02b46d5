"""Application service: Export Catalog use case."""

from __future__ import annotations

import logging

from shopcart.domain.model.inventory import Inventory
from shopcart.domain.repository.catalog_repository import CatalogRepository

logger = logging.getLogger(__name__)


class ExportCatalogHandler:

    def __init__(self, inventory: Inventory, catalog_repo: CatalogRepository) -> None:
        self._inventory = inventory
        self._catalog_repo = catalog_repo

    def handle(self, sort_by_id: bool = False) -> int:
        """Write the current catalog; returns the number of products written.

        Products are written in storage order unless *sort_by_id* is set.
        """
        products = self._inventory.list_all() if sort_by_id else self._inventory.products()
        self._catalog_repo.save_all(products)
        logger.info("Exported %d product(s)", len(products))
        return len(products)
