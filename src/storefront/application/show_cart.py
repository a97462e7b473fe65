"""Application service: Show Cart use case (query)."""

from __future__ import annotations

from storefront.application.cart_store import CartStore
from storefront.application.dto import CartDTO, CartLineDTO


class ShowCartHandler:

    def __init__(self, cart_store: CartStore) -> None:
        self._cart_store = cart_store

    def handle(self) -> CartDTO:
        totals = self._cart_store.totals()
        return CartDTO(
            lines=[
                CartLineDTO(
                    product_id=line.product_id,
                    name=line.name,
                    brand=line.brand,
                    quantity=line.quantity,
                    stock_limit=line.stock_limit,
                    unit_price=str(line.unit_price),
                    line_total=str(line.line_total),
                )
                for line in self._cart_store.lines
            ],
            item_count=totals.item_count,
            total=str(totals.amount),
        )
