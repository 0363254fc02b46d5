"""Unit tests for the Product entity."""

from decimal import Decimal

import pytest

from shopcart.domain.exceptions import ValidationError
from shopcart.domain.model.product import Product
from shopcart.domain.model.value_objects import Money


def _book(stock: int = 10) -> Product:
    return Product(id=1, name="Book", price=Money.of("10.50"), stock=stock)


class TestReduceStock:

    @pytest.mark.parametrize("qty", [1, 4, 10])
    def test_within_stock_reduces_exactly(self, qty):
        book = _book()
        assert book.reduce_stock(qty) is True
        assert book.stock == 10 - qty

    @pytest.mark.parametrize("qty", [11, 100])
    def test_more_than_stock_fails_without_change(self, qty):
        book = _book()
        assert book.reduce_stock(qty) is False
        assert book.stock == 10

    @pytest.mark.parametrize("qty", [0, -1])
    def test_non_positive_fails_without_change(self, qty):
        book = _book()
        assert book.reduce_stock(qty) is False
        assert book.stock == 10

    def test_out_of_stock(self):
        book = _book(stock=0)
        assert book.reduce_stock(1) is False


class TestIncreaseStock:

    def test_positive_adds(self):
        book = _book()
        assert book.increase_stock(5) is True
        assert book.stock == 15

    def test_non_positive_ignored(self):
        book = _book()
        assert book.increase_stock(0) is False
        assert book.stock == 10


class TestSetters:

    def test_set_price(self):
        book = _book()
        book.set_price("12.00")
        assert book.price == Money.of("12.00")

    def test_set_price_accepts_money(self):
        book = _book()
        book.set_price(Money.of("0"))
        assert book.price.amount == Decimal("0")

    def test_negative_price_rejected_and_unchanged(self):
        book = _book()
        with pytest.raises(ValidationError, match="cannot be negative"):
            book.set_price(-1)
        assert book.price == Money.of("10.50")

    def test_set_stock(self):
        book = _book()
        book.set_stock(0)
        assert book.stock == 0

    def test_negative_stock_rejected_and_unchanged(self):
        book = _book()
        with pytest.raises(ValidationError, match="Stock cannot be negative"):
            book.set_stock(-1)
        assert book.stock == 10


class TestConstruction:

    def test_negative_stock_rejected(self):
        with pytest.raises(ValidationError):
            Product(id=1, name="Book", price=Money.of("1"), stock=-1)

    def test_negative_id_rejected(self):
        with pytest.raises(ValidationError, match="non-negative integer"):
            Product(id=-1, name="Book", price=Money.of("1"))

    def test_raw_price_is_coerced_to_money(self):
        product = Product(id=1, name="Gum", price="0.50", stock=3)
        assert product.price == Money.of("0.50")

    @pytest.mark.parametrize("price", [-1.0, "-0.01", "abc"])
    def test_invalid_raw_price_rejected(self, price):
        with pytest.raises(ValidationError):
            Product(id=1, name="Gum", price=price, stock=3)

    def test_negative_zero_price_displays_as_zero(self):
        product = Product(id=1, name="Gum", price=Money.of("1"), stock=3)
        product.set_price("-0")
        assert str(product) == "[1] Gum - $0.00 (stock: 3)"

    def test_sub_cent_price_rejected_and_unchanged(self):
        product = Product(id=1, name="Gum", price=Money.of("1"), stock=3)
        with pytest.raises(ValidationError, match="fractions of a cent"):
            product.set_price("0.335")
        assert product.price == Money.of("1")

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError, match="name is required"):
            Product(id=1, name="  ", price=Money.of("1"))


class TestIdentityAndDisplay:

    def test_equal_by_id(self):
        assert _book(stock=1) == _book(stock=9)
        assert _book() != Product(id=2, name="Book", price=Money.of("10.50"))

    def test_snapshot_is_independent(self):
        book = _book()
        copy = book.snapshot()
        book.reduce_stock(3)
        book.set_price("99")
        assert copy.stock == 10
        assert copy.price == Money.of("10.50")

    def test_str(self):
        assert str(_book()) == "[1] Book - $10.50 (stock: 10)"
