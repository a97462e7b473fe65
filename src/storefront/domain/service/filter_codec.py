"""Canonical codec between ``FilterCriteria`` and URL query parameters.

Encoding rules:

- fields at their default value are omitted entirely
- multi-valued fields are one comma-joined token, in set insertion order
- keys always come out in the same order

Decoding never fails.  A malformed value falls back to that field's
default and is reported as a ``DecodeFallback`` so it can be counted.
Together these make ``encode(decode(x))`` a fixed point for any input.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any, Iterable, Mapping

from storefront.domain.model.filters import (
    DEFAULT_PAGE_SIZE,
    DEFAULT_SORT_KEY,
    Brand,
    FilterCriteria,
    SortKey,
)

logger = logging.getLogger(__name__)

SEARCH = "search"
CATEGORIES = "categories"
BRANDS = "brands"
MIN_PRICE = "minPrice"
MAX_PRICE = "maxPrice"
IN_STOCK = "inStock"
SORT_BY = "sortBy"
PAGE = "page"

# criteria field -> query key, in canonical output order
FIELD_KEYS: dict[str, str] = {
    "search_text": SEARCH,
    "category_ids": CATEGORIES,
    "brands": BRANDS,
    "price_min": MIN_PRICE,
    "price_max": MAX_PRICE,
    "in_stock_only": IN_STOCK,
    "sort_key": SORT_BY,
    "page": PAGE,
}

DELIMITER = ","

MAX_PAGE = 999_999_999

_PAGE_PATTERN = re.compile(r"[0-9]+")
_MAX_PRICE_DIGITS = 15
_BRANDS_BY_TOKEN = {brand.value: brand for brand in Brand}
_SORT_KEYS_BY_TOKEN = {key.value: key for key in SortKey}


@dataclass(frozen=True)
class DecodeFallback:
    """A query value that could not be used and was replaced by the default."""

    key: str
    raw_value: str
    reason: str


# --- Encoding -----------------------------------------------------------------


def encode_criteria(criteria: FilterCriteria) -> dict[str, str]:
    params: dict[str, str] = {}
    for field_name, key in FIELD_KEYS.items():
        token = encode_field(field_name, getattr(criteria, field_name))
        if token is not None:
            params[key] = token
    return params


def encode_field(field_name: str, value: Any) -> str | None:
    """Encode one criteria field, or return None if it is at its default.

    Accepts raw values as well as domain values (plain strings for brands
    and sort keys, numbers for prices).  Whatever comes out is validated
    again by ``decode_criteria``.
    """
    if field_name == "search_text":
        text = "" if value is None else str(value).strip()
        return text or None
    if field_name == "category_ids":
        return _join(_tokens(value)) or None
    if field_name == "brands":
        items = [value] if isinstance(value, (str, Brand)) else value or ()
        return _join(_tokens(b.value if isinstance(b, Brand) else b for b in items)) or None
    if field_name in ("price_min", "price_max"):
        return None if value is None else _format_decimal(value)
    if field_name == "in_stock_only":
        if isinstance(value, str):
            return "true" if value.strip() == "true" else None
        return "true" if value else None
    if field_name == "sort_key":
        token = value.value if isinstance(value, SortKey) else str(value or "")
        return None if token in ("", DEFAULT_SORT_KEY.value) else token
    if field_name == "page":
        token = str(value).strip()
        return None if token in ("", "1") else token
    raise KeyError(field_name)


# --- Decoding -----------------------------------------------------------------


def decode_criteria(
    params: Mapping[str, str],
    page_size: int = DEFAULT_PAGE_SIZE,
) -> FilterCriteria:
    criteria, _ = decode_with_fallbacks(params, page_size)
    return criteria


def decode_with_fallbacks(
    params: Mapping[str, str],
    page_size: int = DEFAULT_PAGE_SIZE,
) -> tuple[FilterCriteria, list[DecodeFallback]]:
    """Parse query parameters into fully-defaulted criteria.

    Unknown keys are ignored and an empty value means "absent".  Returns
    the criteria plus one ``DecodeFallback`` per malformed value.
    """
    fallbacks: list[DecodeFallback] = []

    def raw(key: str) -> str:
        value = params.get(key)
        return value.strip() if isinstance(value, str) else ""

    def fallback(key: str, reason: str) -> None:
        item = DecodeFallback(key=key, raw_value=str(params.get(key)), reason=reason)
        logger.debug("Ignoring query value %s=%r: %s", item.key, item.raw_value, reason)
        fallbacks.append(item)

    criteria = FilterCriteria(
        search_text=raw(SEARCH),
        category_ids=_tokens([raw(CATEGORIES)]),
        brands=_decode_brands(raw(BRANDS), fallback),
        price_min=_decode_price(MIN_PRICE, raw(MIN_PRICE), fallback),
        price_max=_decode_price(MAX_PRICE, raw(MAX_PRICE), fallback),
        in_stock_only=_decode_in_stock(raw(IN_STOCK), fallback),
        sort_key=_decode_sort_key(raw(SORT_BY), fallback),
        page=_decode_page(raw(PAGE), fallback),
        page_size=page_size,
    )
    return criteria, fallbacks


def _decode_brands(token: str, fallback) -> tuple[Brand, ...]:
    names = _tokens([token])
    unknown = [name for name in names if name not in _BRANDS_BY_TOKEN]
    if unknown:
        fallback(BRANDS, f"unrecognized brand {unknown[0]!r}")
        return ()
    return tuple(_BRANDS_BY_TOKEN[name] for name in names)


def _decode_price(key: str, token: str, fallback) -> Decimal | None:
    if not token:
        return None
    try:
        value = Decimal(token)
    except InvalidOperation:
        fallback(key, "not a number")
        return None
    if not value.is_finite():
        fallback(key, "not a finite number")
        return None
    if value < 0:
        fallback(key, "negative price")
        return None
    if value.adjusted() > _MAX_PRICE_DIGITS or value.as_tuple().exponent < -_MAX_PRICE_DIGITS:
        fallback(key, "price out of range")
        return None
    return abs(value) if value.is_zero() else value


def _decode_in_stock(token: str, fallback) -> bool:
    if token in ("", "false"):
        return False
    if token == "true":
        return True
    fallback(IN_STOCK, "expected 'true'")
    return False


def _decode_sort_key(token: str, fallback) -> SortKey:
    if not token:
        return DEFAULT_SORT_KEY
    key = _SORT_KEYS_BY_TOKEN.get(token)
    if key is None:
        fallback(SORT_BY, "unrecognized sort key")
        return DEFAULT_SORT_KEY
    return key


def _decode_page(token: str, fallback) -> int:
    if not token:
        return 1
    digits = token.lstrip("0")
    if not _PAGE_PATTERN.fullmatch(token) or not digits:
        fallback(PAGE, "expected a positive integer")
        return 1
    if len(digits) > len(str(MAX_PAGE)):
        fallback(PAGE, f"page above {MAX_PAGE}")
        return 1
    return int(digits)


# --- Token helpers ------------------------------------------------------------


def _tokens(values: Iterable[Any] | None) -> tuple[str, ...]:
    """Split, trim and de-duplicate delimited tokens, keeping first-seen order."""
    if isinstance(values, str):
        values = [values]
    result: list[str] = []
    for value in values or ():
        for token in str(value).split(DELIMITER):
            token = token.strip()
            if token and token not in result:
                result.append(token)
    return tuple(result)


def _join(tokens: tuple[str, ...]) -> str:
    return DELIMITER.join(tokens)


def _format_decimal(value: Any) -> str:
    """Plain fixed-point notation; unparsable input passes through as text."""
    if isinstance(value, bool):
        return str(value)
    try:
        number = Decimal(str(value).strip())
    except InvalidOperation:
        return str(value)
    if not number.is_finite():
        return str(value)
    return format(number, "f")
