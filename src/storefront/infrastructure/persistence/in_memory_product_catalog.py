"""In-memory implementation of ProductCatalog.

Executes a QueryDescription against a plain list of products the way
the remote store would: AND of all predicates, one sort clause, then the
offset/limit window.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any

from storefront.domain.model.product import Product
from storefront.domain.model.query import (
    MatchNothingPredicate,
    MembershipPredicate,
    Predicate,
    QueryDescription,
    RangePredicate,
    StockPredicate,
    SubstringPredicate,
)
from storefront.domain.repository.product_catalog import ProductCatalog, ProductPage


class InMemoryProductCatalog(ProductCatalog):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._store: dict[str, Product] = {}
        for p in products or []:
            self._store[p.id] = p

    # --- ProductCatalog interface ---------------------------------------------

    def get_by_id(self, product_id: str) -> Product | None:
        return self._products().get(product_id)

    def fetch_page(self, query: QueryDescription) -> ProductPage:
        matched = [
            p
            for p in self._products().values()
            if all(self._matches(p, predicate) for predicate in query.predicates)
        ]
        matched.sort(
            key=lambda p: self._sort_value(p, query.sort.field),
            reverse=not query.sort.ascending,
        )
        window = query.pagination
        return ProductPage(
            products=matched[window.offset : window.offset + window.limit],
            total_count=len(matched),
        )

    # --- Query execution ------------------------------------------------------

    def _products(self) -> dict[str, Product]:
        return self._store

    @staticmethod
    def _value(product: Product, field: str) -> Any:
        value = getattr(product, field)
        if field == "price":
            return value.amount
        return value

    @classmethod
    def _matches(cls, product: Product, predicate: Predicate) -> bool:
        if isinstance(predicate, MatchNothingPredicate):
            return False
        value = cls._value(product, predicate.field)
        if isinstance(predicate, MembershipPredicate):
            return value in predicate.values
        if isinstance(predicate, SubstringPredicate):
            if predicate.case_insensitive:
                return predicate.text.casefold() in str(value).casefold()
            return predicate.text in str(value)
        if isinstance(predicate, RangePredicate):
            amount = Decimal(value)
            if predicate.lower is not None and amount < predicate.lower:
                return False
            if predicate.upper is not None and amount > predicate.upper:
                return False
            return True
        if isinstance(predicate, StockPredicate):
            return product.in_stock
        raise TypeError(f"Unsupported predicate: {predicate!r}")

    @classmethod
    def _sort_value(cls, product: Product, field: str) -> Any:
        value = cls._value(product, field)
        if isinstance(value, str):
            return value.casefold()
        return value
