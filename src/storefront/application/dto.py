"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CartLineDTO:
    """Output: a single cart line as displayed to the user."""

    product_id: str
    name: str
    brand: str
    quantity: int
    stock_limit: int
    unit_price: str  # formatted, e.g. "R$ 15.00"
    line_total: str


@dataclass(frozen=True)
class CartDTO:
    """Output: the whole cart as displayed to the user."""

    lines: list[CartLineDTO]
    item_count: int
    total: str


@dataclass(frozen=True)
class ProductSummaryDTO:
    id: str
    name: str
    brand: str
    price: str
    stock: int


@dataclass(frozen=True)
class ProductPageDTO:
    """Output: one page of the product list."""

    products: list[ProductSummaryDTO]
    total_count: int
    total_pages: int
    current_page: int
