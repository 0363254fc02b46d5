"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from shopcart.domain.model.cart import CartItem
from shopcart.domain.model.order import Order
from shopcart.domain.model.product import Product


@dataclass(frozen=True)
class ProductDTO:
    id: int
    name: str
    price: str  # formatted, e.g. "$10.50"
    stock: int

    @staticmethod
    def from_product(product: Product) -> ProductDTO:
        return ProductDTO(
            id=product.id,
            name=product.name,
            price=str(product.price),
            stock=product.stock,
        )


@dataclass(frozen=True)
class CartLineDTO:
    """A single cart or order line as displayed to the user."""

    product_id: int
    product_name: str
    quantity: int
    unit_price: str
    subtotal: str

    @staticmethod
    def from_item(item: CartItem) -> CartLineDTO:
        return CartLineDTO(
            product_id=item.product.id,
            product_name=item.product.name,
            quantity=item.quantity.value,
            unit_price=str(item.product.price),
            subtotal=str(item.subtotal),
        )


@dataclass(frozen=True)
class CartDTO:
    items: list[CartLineDTO]
    total: str

    @property
    def is_empty(self) -> bool:
        return not self.items


@dataclass(frozen=True)
class OrderDTO:
    """Output: a completed order as displayed to the user."""

    id: int
    items: list[CartLineDTO]
    total: str
    created_at: str

    @staticmethod
    def from_order(order: Order) -> OrderDTO:
        return OrderDTO(
            id=order.id,
            items=[CartLineDTO.from_item(item) for item in order.items],
            total=str(order.amount),
            created_at=order.created_at.strftime("%Y-%m-%d %H:%M UTC"),
        )
