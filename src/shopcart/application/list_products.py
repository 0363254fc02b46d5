"""Application service: List Products use case (query)."""

from __future__ import annotations

from shopcart.application.dto import ProductDTO
from shopcart.domain.model.inventory import Inventory


class ListProductsHandler:

    def __init__(self, inventory: Inventory) -> None:
        self._inventory = inventory

    def handle(self) -> list[ProductDTO]:
        return [ProductDTO.from_product(p) for p in self._inventory.list_all()]
