"""Tests for the composition root and logging setup."""

import logging

import pytest

from shopcart.domain.model.user import Role
from shopcart.infrastructure.bootstrap import (
    build_inventory,
    build_session,
    default_catalog,
)
from shopcart.infrastructure.logging_config import configure_logging
from tests.fakes import FakeCatalogRepository


class TestBuildInventory:

    def test_default_seed(self):
        inv = build_inventory()
        assert [p.name for p in inv.list_all()] == ["Book", "Pen", "Laptop"]

    def test_seed_from_repository(self):
        repo = FakeCatalogRepository(default_catalog()[:1])
        assert [p.id for p in build_inventory(repo).list_all()] == [1]

    def test_each_call_builds_a_fresh_inventory(self):
        first, second = build_inventory(), build_inventory()
        first.reduce_stock(1, 10)
        assert second.get_product(1).stock == 10


class TestBuildSession:

    def test_shopper_session(self):
        session = build_session("Alice", "alice@mail.com")
        assert session.user.role is Role.USER
        assert session.cart.is_empty()
        assert session.orders.peek() == 1

    def test_admin_session(self):
        assert build_session("root", admin=True).user.role is Role.ADMIN

    def test_session_from_csv(self, tmp_path):
        path = tmp_path / "catalog.csv"
        path.write_text("7,Mouse,15.00,10\n", encoding="utf-8")
        session = build_session(catalog_path=path)
        assert session.inventory.get_product(7).name == "Mouse"


@pytest.fixture
def restore_package_logger():
    logger = logging.getLogger("shopcart")
    saved = (logger.level, list(logger.handlers), logger.propagate)
    yield logger
    logger.setLevel(saved[0])
    logger.handlers[:] = saved[1]
    logger.propagate = saved[2]


class TestConfigureLogging:

    def test_single_handler_even_when_called_twice(self, restore_package_logger):
        configure_logging(logging.DEBUG)
        configure_logging(logging.INFO)
        assert len(restore_package_logger.handlers) == 1
        assert restore_package_logger.level == logging.INFO
