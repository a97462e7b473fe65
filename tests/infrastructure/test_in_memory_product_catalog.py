"""Tests for executing query descriptions against the in-memory catalog."""

from decimal import Decimal

from storefront.domain.model.filters import Brand, FilterCriteria, SortKey
from storefront.domain.service.query_compiler import compile_query
from storefront.infrastructure.persistence.in_memory_product_catalog import (
    InMemoryProductCatalog,
)
from tests.fakes import make_product


def _catalog() -> InMemoryProductCatalog:
    return InMemoryProductCatalog(
        [
            make_product("1", name="Furadeira", price="289.90", stock=8, brand="Tssaper",
                         category_id="tools", created_at="2024-03-01"),
            make_product("2", name="Serra Circular", price="459.00", stock=3, brand="Buffalo",
                         category_id="tools", created_at="2024-03-05"),
            make_product("3", name="Motor", price="1299.00", stock=0, brand="Toyama",
                         category_id="engines", created_at="2024-03-08"),
            make_product("4", name="Gerador", price="2890.00", stock=2, brand="Toyama",
                         category_id="generators", created_at="2024-03-10"),
        ]
    )


def _ids(criteria: FilterCriteria) -> list[str]:
    return [p.id for p in _catalog().fetch_page(compile_query(criteria)).products]


class TestInMemoryProductCatalog:

    def test_default_is_newest_first(self):
        assert _ids(FilterCriteria()) == ["4", "3", "2", "1"]

    def test_search_is_case_insensitive_substring(self):
        assert _ids(FilterCriteria(search_text="SERRA")) == ["2"]

    def test_category_and_brand_membership(self):
        assert _ids(FilterCriteria(category_ids=("tools", "engines"), brands=(Brand.BUFFALO, Brand.TOYAMA))) == ["3", "2"]

    def test_price_range_is_inclusive(self):
        criteria = FilterCriteria(
            price_min=Decimal("459.00"), price_max=Decimal("1299"), sort_key=SortKey.PRICE_ASC
        )
        assert _ids(criteria) == ["2", "3"]

    def test_in_stock_only(self):
        assert _ids(FilterCriteria(in_stock_only=True, sort_key=SortKey.NAME_ASC)) == ["1", "4", "2"]

    def test_pagination_and_total(self):
        page = _catalog().fetch_page(compile_query(FilterCriteria(page=2, page_size=3)))
        assert [p.id for p in page.products] == ["1"]
        assert page.total_count == 4

    def test_get_by_id(self):
        catalog = _catalog()
        assert catalog.get_by_id("4").stock == 2
        assert catalog.get_by_id("nope") is None
