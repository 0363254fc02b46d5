"""In-memory fakes for testing.

These implement the same abstract interfaces as the CSV repository
but keep everything in a list. No file I/O, no side effects.
"""

from __future__ import annotations

from shopcart.domain.model.product import Product
from shopcart.domain.repository.catalog_repository import CatalogRepository


class FakeCatalogRepository(CatalogRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._store: list[Product] = [p.snapshot() for p in products or []]
        self.save_calls = 0

    def load_all(self) -> list[Product]:
        return [p.snapshot() for p in self._store]

    def save_all(self, products: list[Product]) -> None:
        self._store = [p.snapshot() for p in products]
        self.save_calls += 1

    @property
    def stored_ids(self) -> list[int]:
        return [p.id for p in self._store]
