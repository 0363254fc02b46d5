import pytest

from shopcart.domain.model.cart import ShoppingCart
from shopcart.domain.model.inventory import Inventory
from shopcart.domain.model.order import OrderSequence
from shopcart.domain.model.product import Product
from shopcart.domain.model.value_objects import Money


@pytest.fixture
def inventory() -> Inventory:
    return Inventory([
        Product(id=1, name="Book", price=Money.of("10.50"), stock=10),
        Product(id=2, name="Pen", price=Money.of("2.50"), stock=20),
        Product(id=3, name="Laptop", price=Money.of("800.00"), stock=5),
    ])


@pytest.fixture
def cart() -> ShoppingCart:
    return ShoppingCart()


@pytest.fixture
def orders() -> OrderSequence:
    return OrderSequence()
