"""Abstract product catalog backed by the remote store."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from storefront.domain.model.product import Product
from storefront.domain.model.query import QueryDescription


@dataclass(frozen=True)
class ProductPage:
    products: list[Product]
    total_count: int


class ProductCatalog(ABC):

    @abstractmethod
    def get_by_id(self, product_id: str) -> Product | None:
        """Return a product with its live stock, or None if not found."""

    @abstractmethod
    def fetch_page(self, query: QueryDescription) -> ProductPage:
        """Execute *query* and return one page plus the unpaged match count."""
