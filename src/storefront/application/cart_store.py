"""Application service: the cart and its durable mirror.

Each mutation runs as one commit-then-sync step: the Cart aggregate
validates and applies the change, then the whole cart is written to
storage before control returns.  Rejected operations never write.  A
failed write is reported as a warning; the in-memory cart stays
authoritative for the rest of the session.
"""

from __future__ import annotations

import logging
from dataclasses import replace

from storefront.domain.exceptions import PersistenceError, ValidationError
from storefront.domain.model.cart import (
    Cart,
    CartLine,
    CartResult,
    CartTotals,
    PersistenceWarning,
)
from storefront.domain.model.product import Product
from storefront.domain.repository.cart_storage import CartStorage
from storefront.domain.service.cart_codec import decode_cart, encode_cart

logger = logging.getLogger(__name__)


class CartStore:
    """Authoritative cart for one session.

    The persisted cart is read on first access.  Anything unreadable or
    invalid is discarded as a whole and the session starts empty.
    """

    def __init__(self, storage: CartStorage) -> None:
        self._storage = storage
        self._cart: Cart | None = None
        self.load_warning: PersistenceWarning | None = None

    # --- Mutations ------------------------------------------------------------

    def add(self, product: Product, requested_stock_limit: int) -> CartResult:
        return self._commit(self.cart.add(product, requested_stock_limit))

    def remove(self, product_id: str) -> CartResult:
        return self._commit(self.cart.remove(product_id))

    def set_quantity(self, product_id: str, quantity: int) -> CartResult:
        return self._commit(self.cart.set_quantity(product_id, quantity))

    def clear(self) -> CartResult:
        result = self.cart.clear()
        try:
            self._storage.delete()
        except PersistenceError as exc:
            return replace(result, warning=self._warn("clear", exc))
        return result

    # --- Queries --------------------------------------------------------------

    @property
    def cart(self) -> Cart:
        if self._cart is None:
            self._cart = self._load()
        return self._cart

    @property
    def lines(self) -> tuple[CartLine, ...]:
        return tuple(replace(line) for line in self.cart.lines)

    @property
    def is_empty(self) -> bool:
        return self.cart.is_empty

    def totals(self) -> CartTotals:
        return self.cart.totals()

    # --- Sync helpers ---------------------------------------------------------

    def _load(self) -> Cart:
        try:
            payload = self._storage.load()
        except PersistenceError as exc:
            self.load_warning = self._warn("load", exc)
            return Cart()

        if payload is None or not payload.strip():
            return Cart()

        try:
            return Cart(lines=decode_cart(payload))
        except ValidationError as exc:
            logger.warning("Discarding persisted cart: %s", exc)
            return Cart()

    def _commit(self, result: CartResult) -> CartResult:
        if not result.outcome.mutates:
            return result
        try:
            self._storage.save(encode_cart(self.cart.lines))
        except PersistenceError as exc:
            return replace(result, warning=self._warn("save", exc))
        logger.debug("Cart saved after %s of %s", result.outcome.value, result.product_id)
        return result

    @staticmethod
    def _warn(operation: str, exc: PersistenceError) -> PersistenceWarning:
        warning = PersistenceWarning(operation=operation, detail=str(exc))
        logger.warning("%s", warning)
        return warning
