"""Application service: product-list criteria kept in sync with the URL.

The location is the only durable copy of the criteria.  Every update
merges the change, re-decodes the canonical encoding and replaces the
query string in the same call, so the in-memory criteria and the URL
never disagree between calls.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from storefront.domain.model.filters import DEFAULT_PAGE_SIZE, FilterCriteria
from storefront.domain.model.query import QueryDescription
from storefront.domain.repository.query_location import QueryLocation
from storefront.domain.service.filter_codec import (
    FIELD_KEYS,
    SORT_BY,
    decode_with_fallbacks,
    encode_criteria,
    encode_field,
)
from storefront.domain.service.query_compiler import compile_query

logger = logging.getLogger(__name__)

_UNCHANGED: Any = object()


class FilterQueryState:

    def __init__(
        self,
        location: QueryLocation,
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> None:
        if page_size < 1:
            raise ValueError(f"page_size must be at least 1, got {page_size}")
        self._location = location
        self._page_size = page_size
        self.decode_fallbacks = 0
        self._criteria = self.decode(location.read())

    @property
    def criteria(self) -> FilterCriteria:
        return self._criteria

    @property
    def is_synchronized(self) -> bool:
        """True if the location still decodes to the in-memory criteria."""
        return self.decode(self._location.read(), count=False) == self._criteria

    # --- Codec ----------------------------------------------------------------

    def decode(self, params: Mapping[str, str], count: bool = True) -> FilterCriteria:
        criteria, fallbacks = decode_with_fallbacks(params, self._page_size)
        if count and fallbacks:
            self.decode_fallbacks += len(fallbacks)
        return criteria

    def encode(self, criteria: FilterCriteria) -> dict[str, str]:
        return encode_criteria(criteria)

    # --- Mutations ------------------------------------------------------------

    def sync_from_location(self) -> FilterCriteria:
        """Re-read the criteria after a navigation event."""
        self._criteria = self.decode(self._location.read())
        return self._criteria

    def update(
        self,
        *,
        search_text: Any = _UNCHANGED,
        category_ids: Any = _UNCHANGED,
        brands: Any = _UNCHANGED,
        price_min: Any = _UNCHANGED,
        price_max: Any = _UNCHANGED,
        in_stock_only: Any = _UNCHANGED,
        sort_key: Any = _UNCHANGED,
        page: Any = _UNCHANGED,
    ) -> FilterCriteria:
        """Replace only the given fields, then re-encode.

        ``price_min=None`` / ``price_max=None`` unset a bound.  Values are
        canonicalized exactly like query input, so a malformed value ends up
        as that field's default.
        """
        changes = {
            "search_text": search_text,
            "category_ids": category_ids,
            "brands": brands,
            "price_min": price_min,
            "price_max": price_max,
            "in_stock_only": in_stock_only,
            "sort_key": sort_key,
            "page": page,
        }
        params = self.encode(self._criteria)
        for field_name, value in changes.items():
            if value is _UNCHANGED:
                continue
            key = FIELD_KEYS[field_name]
            token = encode_field(field_name, value)
            if token is None:
                params.pop(key, None)
            else:
                params[key] = token
        return self._replace(params)

    def clear(self) -> FilterCriteria:
        """Reset every filter; the sort order is a preference and survives."""
        params = self.encode(self._criteria)
        kept = {SORT_BY: params[SORT_BY]} if SORT_BY in params else {}
        return self._replace(kept)

    # --- Compilation ----------------------------------------------------------

    def compile_query(self, criteria: FilterCriteria | None = None) -> QueryDescription:
        return compile_query(self._criteria if criteria is None else criteria)

    # --- Internal helpers -----------------------------------------------------

    def _replace(self, params: dict[str, str]) -> FilterCriteria:
        criteria = self.decode(params)
        encoded = self.encode(criteria)
        self._location.replace(encoded)
        self._criteria = criteria
        logger.debug("Filter query replaced: %s", encoded)
        return criteria
