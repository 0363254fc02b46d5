"""Abstract repository for the product catalog.

Defined in the domain layer so the domain never depends on
infrastructure. The flat-file implementation lives in the
infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from shopcart.domain.model.product import Product


class CatalogRepository(ABC):

    @abstractmethod
    def load_all(self) -> list[Product]:
        """Return every stored product, in stored order."""

    @abstractmethod
    def save_all(self, products: list[Product]) -> None:
        """Replace the stored catalog with *products*, keeping their order."""
