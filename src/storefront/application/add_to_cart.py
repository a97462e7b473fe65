"""Application service: Add To Cart use case.

Looks up the live stock figure from the catalog and hands it to the
cart store as the stock snapshot for the line.
"""

from __future__ import annotations

from storefront.application.cart_store import CartStore
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.cart import CartResult
from storefront.domain.repository.product_catalog import ProductCatalog


class AddToCartHandler:

    def __init__(self, catalog: ProductCatalog, cart_store: CartStore) -> None:
        self._catalog = catalog
        self._cart_store = cart_store

    def handle(self, product_id: str) -> CartResult:
        product = self._catalog.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")
        return self._cart_store.add(product, product.stock)
