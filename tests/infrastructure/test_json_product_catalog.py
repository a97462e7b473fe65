"""Tests for the JSON-file product catalog."""

import json
from decimal import Decimal

from storefront.domain.model.filters import FilterCriteria
from storefront.domain.service.query_compiler import compile_query
from storefront.infrastructure.persistence.json_product_catalog import JsonProductCatalog


def _write(path, products):
    path.write_text(json.dumps(products), encoding="utf-8")


class TestJsonProductCatalog:

    def test_creates_empty_file(self, tmp_path):
        path = tmp_path / "data" / "products.json"
        catalog = JsonProductCatalog(path)
        assert path.exists()
        assert catalog.fetch_page(compile_query(FilterCriteria())).total_count == 0

    def test_reads_products(self, tmp_path):
        path = tmp_path / "products.json"
        _write(path, [{"id": "1", "name": "Drill", "brand": "Tssaper", "price": "289.90", "stock": 4}])
        product = JsonProductCatalog(path).get_by_id("1")
        assert product.price.amount == Decimal("289.90")
        assert product.stock == 4

    def test_stock_changes_are_seen(self, tmp_path):
        path = tmp_path / "products.json"
        _write(path, [{"id": "1", "name": "Drill", "brand": "Tssaper", "price": 10, "stock": 4}])
        catalog = JsonProductCatalog(path)
        _write(path, [{"id": "1", "name": "Drill", "brand": "Tssaper", "price": 10, "stock": 0}])
        assert catalog.get_by_id("1").stock == 0

    def test_numeric_prices_are_exact(self, tmp_path):
        path = tmp_path / "products.json"
        path.write_text(
            '[{"id": "1", "name": "Drill", "brand": "Tssaper", "price": 0.1, "currency": "EUR", "stock": 1}]',
            encoding="utf-8",
        )
        product = JsonProductCatalog(path).get_by_id("1")
        assert product.price.amount == Decimal("0.1")
        assert product.price.currency == "EUR"
