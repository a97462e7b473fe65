"""JSON-file-backed implementation of ProductCatalog.

Stands in for the remote catalog: the file is re-read on every call so
stock edits show up immediately, and queries run in memory.
"""

from __future__ import annotations

import json
from decimal import Decimal
from pathlib import Path

from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from storefront.infrastructure.persistence.in_memory_product_catalog import (
    InMemoryProductCatalog,
)


class JsonProductCatalog(InMemoryProductCatalog):

    def __init__(self, file_path: Path) -> None:
        super().__init__()
        self._file_path = file_path
        self._ensure_file()

    # --- Serialization helpers ------------------------------------------------

    def _products(self) -> dict[str, Product]:
        raw = json.loads(self._file_path.read_text(encoding="utf-8"), parse_float=Decimal)
        return {
            item["id"]: Product(
                id=item["id"],
                name=item["name"],
                brand=item.get("brand", ""),
                price=Money.of(item["price"], item.get("currency", "BRL")),
                stock=item.get("stock", 0),
                category_id=item.get("category_id"),
                image_url=item.get("image_url", ""),
                created_at=item.get("created_at", ""),
            )
            for item in raw
        }

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
