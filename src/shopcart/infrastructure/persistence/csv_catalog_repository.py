"""Flat-file implementation of CatalogRepository.

One product per line as ``id,name,price,stock`` with no header row.
"""

from __future__ import annotations

import csv
from pathlib import Path

from shopcart.domain.exceptions import ValidationError
from shopcart.domain.model.product import Product
from shopcart.domain.model.value_objects import Money
from shopcart.domain.repository.catalog_repository import CatalogRepository


class CsvCatalogRepository(CatalogRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    # --- CatalogRepository interface ------------------------------------------

    def load_all(self) -> list[Product]:
        if not self._file_path.exists():
            return []
        try:
            with self._file_path.open(newline="", encoding="utf-8") as fh:
                rows = list(enumerate(csv.reader(fh), start=1))
        except (UnicodeDecodeError, csv.Error) as exc:
            raise ValidationError(
                f"{self._file_path.name}: not a readable UTF-8 catalog ({exc})"
            ) from exc
        return [self._to_domain(row, line_no) for line_no, row in rows if row]

    def save_all(self, products: list[Product]) -> None:
        self._file_path.parent.mkdir(parents=True, exist_ok=True)
        with self._file_path.open("w", newline="", encoding="utf-8") as fh:
            writer = csv.writer(fh, lineterminator="\n")
            for product in products:
                writer.writerow(self._to_row(product))

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_row(product: Product) -> list[str]:
        return [
            str(product.id),
            product.name,
            f"{product.price.amount:.2f}",
            str(product.stock),
        ]

    def _to_domain(self, row: list[str], line_no: int) -> Product:
        if len(row) != 4:
            raise ValidationError(
                f"{self._file_path.name}:{line_no}: expected 'id,name,price,stock', "
                f"got {len(row)} field(s)"
            )
        raw_id, name, raw_price, raw_stock = (field.strip() for field in row)
        try:
            product_id = int(raw_id)
            stock = int(raw_stock)
        except ValueError as exc:
            raise ValidationError(f"{self._file_path.name}:{line_no}: {exc}") from exc
        try:
            return Product(id=product_id, name=name, price=Money.of(raw_price), stock=stock)
        except ValidationError as exc:
            raise ValidationError(f"{self._file_path.name}:{line_no}: {exc}") from exc
