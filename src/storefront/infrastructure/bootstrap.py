"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import os
from pathlib import Path

from storefront.application.cart_store import CartStore
from storefront.application.filter_query_state import FilterQueryState
from storefront.domain.model.filters import DEFAULT_PAGE_SIZE
from storefront.infrastructure.navigation.url_query_location import UrlQueryLocation
from storefront.infrastructure.persistence.json_cart_storage import JsonCartStorage
from storefront.infrastructure.persistence.json_product_catalog import (
    JsonProductCatalog,
)

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


def data_dir() -> Path:
    return Path(os.environ.get("STOREFRONT_DATA_DIR", _DEFAULT_DATA_DIR))


def page_size() -> int:
    raw = os.environ.get("STOREFRONT_PAGE_SIZE", "")
    return int(raw) if raw.isdigit() and int(raw) > 0 else DEFAULT_PAGE_SIZE


def product_catalog() -> JsonProductCatalog:
    return JsonProductCatalog(data_dir() / "products.json")


def cart_store() -> CartStore:
    return CartStore(JsonCartStorage(data_dir() / "local_storage.json"))


def filter_query_state(url: str) -> tuple[FilterQueryState, UrlQueryLocation]:
    location = UrlQueryLocation(url)
    return FilterQueryState(location, page_size=page_size()), location
