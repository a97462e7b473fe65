"""Filter, sort and pagination criteria for the product list.

``FilterCriteria`` has no durable copy of its own: it is derived from the
URL query string on every navigation and re-encoded after every change.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


class Brand(Enum):
    TSSAPER = "Tssaper"
    BUFFALO = "Buffalo"
    TOYAMA = "Toyama"


class SortKey(Enum):
    CREATED_AT_DESC = "created_at-desc"
    NAME_ASC = "name-asc"
    NAME_DESC = "name-desc"
    PRICE_ASC = "price-asc"
    PRICE_DESC = "price-desc"

    @property
    def field(self) -> str:
        return self.value.rsplit("-", 1)[0]

    @property
    def ascending(self) -> bool:
        return self.value.endswith("-asc")


# ---------------------------------------------------------------------------
# Deployment defaults
# ---------------------------------------------------------------------------
DEFAULT_SORT_KEY = SortKey.CREATED_AT_DESC
DEFAULT_PAGE_SIZE = 12


@dataclass(frozen=True)
class FilterCriteria:
    """Everything the product list is filtered, sorted and paged by.

    Every field defaults to "no restriction".  ``category_ids`` and
    ``brands`` are ordered sets: order is irrelevant for matching but is
    kept so the encoding is stable.  ``price_min > price_max`` is allowed
    here; the query compiler turns it into a predicate that matches nothing.
    """

    search_text: str = ""
    category_ids: tuple[str, ...] = ()
    brands: tuple[Brand, ...] = ()
    price_min: Decimal | None = None
    price_max: Decimal | None = None
    in_stock_only: bool = False
    sort_key: SortKey = DEFAULT_SORT_KEY
    page: int = 1
    page_size: int = DEFAULT_PAGE_SIZE

    @property
    def has_active_filters(self) -> bool:
        """True if anything narrows the result set (sort and page do not)."""
        return (
            self.search_text != ""
            or bool(self.category_ids)
            or bool(self.brands)
            or self.price_min is not None
            or self.price_max is not None
            or self.in_stock_only
        )

    @property
    def has_inverted_price_range(self) -> bool:
        return (
            self.price_min is not None
            and self.price_max is not None
            and self.price_min > self.price_max
        )
