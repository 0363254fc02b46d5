"""Application service: Show Cart use case (query)."""

from __future__ import annotations

from shopcart.application.dto import CartDTO, CartLineDTO
from shopcart.domain.model.cart import ShoppingCart


class ShowCartHandler:

    def __init__(self, cart: ShoppingCart) -> None:
        self._cart = cart

    def handle(self) -> CartDTO:
        return CartDTO(
            items=[CartLineDTO.from_item(item) for item in self._cart.items],
            total=str(self._cart.total()),
        )
