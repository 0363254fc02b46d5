"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
It also owns the defaults: where data files live and which products a
fresh session starts with.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from shopcart.domain.model.cart import ShoppingCart
from shopcart.domain.model.inventory import Inventory
from shopcart.domain.model.order import OrderSequence
from shopcart.domain.model.product import Product
from shopcart.domain.model.user import Role, User
from shopcart.domain.model.value_objects import Money
from shopcart.domain.repository.catalog_repository import CatalogRepository
from shopcart.infrastructure.persistence.csv_catalog_repository import (
    CsvCatalogRepository,
)

logger = logging.getLogger(__name__)

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
DATA_DIR = Path(__file__).resolve().parents[3] / "data"
DEFAULT_EXPORT_PATH = DATA_DIR / "products.csv"


def default_catalog() -> list[Product]:
    return [
        Product(id=1, name="Book", price=Money.of("10.50"), stock=10),
        Product(id=2, name="Pen", price=Money.of("2.50"), stock=20),
        Product(id=3, name="Laptop", price=Money.of("800.00"), stock=5),
    ]


def catalog_repository(path: Path | None = None) -> CsvCatalogRepository:
    return CsvCatalogRepository(path or DEFAULT_EXPORT_PATH)


def build_inventory(repo: CatalogRepository | None = None) -> Inventory:
    """Seed an Inventory from *repo*, or from the default catalog."""
    if repo is None:
        return Inventory(default_catalog())

    products = repo.load_all()
    if not products:
        logger.warning("Catalog source is empty; starting with no products")
    return Inventory(products)


@dataclass
class ShopSession:
    """Everything one shopper's session works on."""

    user: User
    inventory: Inventory
    cart: ShoppingCart = field(default_factory=ShoppingCart)
    orders: OrderSequence = field(default_factory=OrderSequence)


def build_session(
    username: str = "guest",
    email: str = "",
    admin: bool = False,
    catalog_path: Path | None = None,
) -> ShopSession:
    repo = CsvCatalogRepository(catalog_path) if catalog_path is not None else None
    user = User(username=username, email=email, role=Role.ADMIN if admin else Role.USER)
    return ShopSession(user=user, inventory=build_inventory(repo))
