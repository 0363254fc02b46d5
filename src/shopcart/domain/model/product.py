"""Product entity.

Products are seeded into the Inventory and copied into carts and orders.
Price and stock are the only mutable fields; every mutation is guarded.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from decimal import Decimal

from shopcart.domain.exceptions import ValidationError
from shopcart.domain.model.value_objects import Money


@dataclass(eq=False)
class Product:
    """A sellable item in the catalog.

    Two products are the same product when their ids match, regardless
    of the price or stock each copy currently carries.
    """

    id: int
    name: str
    price: Money
    stock: int = 0

    def __post_init__(self) -> None:
        if not isinstance(self.id, int) or self.id < 0:
            raise ValidationError(f"Product id must be a non-negative integer, got {self.id!r}")
        if not self.name or not self.name.strip():
            raise ValidationError("Product name is required")
        if not isinstance(self.price, Money):
            self.price = Money.of(self.price)
        if self.stock < 0:
            raise ValidationError("Stock cannot be negative")

    # --- Stock ----------------------------------------------------------------

    def reduce_stock(self, qty: int) -> bool:
        """Take *qty* units out of stock.

        Returns False, leaving stock untouched, when *qty* is not positive
        or exceeds the units on hand. Never raises: running out of stock is
        an ordinary outcome the caller decides how to report.
        """
        if qty <= 0 or qty > self.stock:
            return False
        self.stock -= qty
        return True

    def increase_stock(self, qty: int) -> bool:
        if qty <= 0:
            return False
        self.stock += qty
        return True

    # --- Administrative setters -----------------------------------------------

    def set_price(self, price: Money | str | int | float | Decimal) -> None:
        self.price = price if isinstance(price, Money) else Money.of(price)

    def set_stock(self, stock: int) -> None:
        if stock < 0:
            raise ValidationError("Stock cannot be negative")
        self.stock = stock

    # --- Copies & display -----------------------------------------------------

    def snapshot(self) -> Product:
        """Return an independent copy of this product."""
        return replace(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Product):
            return NotImplemented
        return self.id == other.id

    def __str__(self) -> str:
        return f"[{self.id}] {self.name} - {self.price} (stock: {self.stock})"
