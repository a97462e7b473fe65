"""Unit tests for the URL query codec."""

from decimal import Decimal

import pytest

from storefront.domain.model.filters import Brand, FilterCriteria, SortKey
from storefront.domain.service.filter_codec import (
    MAX_PAGE,
    decode_criteria,
    decode_with_fallbacks,
    encode_criteria,
    encode_field,
)


class TestDecode:

    def test_empty_query_is_all_defaults(self):
        assert decode_criteria({}) == FilterCriteria()

    def test_absent_page_is_one(self):
        assert decode_criteria({"search": "drill"}).page == 1

    def test_full_query(self):
        criteria = decode_criteria(
            {
                "search": "  drill ",
                "categories": "tools,garden",
                "brands": "Toyama,Buffalo",
                "minPrice": "10.50",
                "maxPrice": "200",
                "inStock": "true",
                "sortBy": "price-asc",
                "page": "3",
            },
            page_size=24,
        )
        assert criteria == FilterCriteria(
            search_text="drill",
            category_ids=("tools", "garden"),
            brands=(Brand.TOYAMA, Brand.BUFFALO),
            price_min=Decimal("10.50"),
            price_max=Decimal("200"),
            in_stock_only=True,
            sort_key=SortKey.PRICE_ASC,
            page=3,
            page_size=24,
        )

    def test_unknown_keys_ignored(self):
        assert decode_criteria({"utm_source": "mail", "foo": "bar"}) == FilterCriteria()

    def test_categories_are_deduplicated_and_trimmed(self):
        criteria = decode_criteria({"categories": " b, a,,b "})
        assert criteria.category_ids == ("b", "a")

    @pytest.mark.parametrize(
        "params, field, default",
        [
            ({"minPrice": "cheap"}, "price_min", None),
            ({"maxPrice": "NaN"}, "price_max", None),
            ({"maxPrice": "-5"}, "price_max", None),
            ({"minPrice": "1e400"}, "price_min", None),
            ({"sortBy": "rating-desc"}, "sort_key", SortKey.CREATED_AT_DESC),
            ({"brands": "Buffalo,Acme"}, "brands", ()),
            ({"brands": "buffalo"}, "brands", ()),
            ({"inStock": "yes"}, "in_stock_only", False),
            ({"page": "0"}, "page", 1),
            ({"page": "-2"}, "page", 1),
            ({"page": "2.5"}, "page", 1),
            ({"page": "two"}, "page", 1),
            ({"page": "00"}, "page", 1),
            ({"page": "1234567890"}, "page", 1),
        ],
    )
    def test_malformed_values_fall_back(self, params, field, default):
        criteria, fallbacks = decode_with_fallbacks(params)
        assert getattr(criteria, field) == default
        assert len(fallbacks) == 1
        assert fallbacks[0].key == next(iter(params))

    def test_malformed_field_does_not_affect_others(self):
        criteria = decode_criteria({"minPrice": "abc", "search": "saw", "page": "2"})
        assert criteria.search_text == "saw"
        assert criteria.page == 2
        assert criteria.price_min is None

    def test_page_range_upper_bound(self):
        assert decode_criteria({"page": str(MAX_PAGE)}).page == MAX_PAGE
        assert decode_criteria({"page": "0004"}).page == 4
        _, fallbacks = decode_with_fallbacks({"page": str(MAX_PAGE + 1)})
        assert fallbacks[0].reason == f"page above {MAX_PAGE}"

    def test_valid_values_report_no_fallbacks(self):
        _, fallbacks = decode_with_fallbacks({"inStock": "false", "page": "1", "minPrice": ""})
        assert fallbacks == []


class TestEncode:

    @pytest.mark.parametrize(
        "value, token",
        [(True, "true"), (1, "true"), ("true", "true"), (False, None), (0, None), ("false", None), (None, None)],
    )
    def test_in_stock_flag(self, value, token):
        assert encode_field("in_stock_only", value) == token

    def test_defaults_encode_to_nothing(self):
        assert encode_criteria(FilterCriteria()) == {}

    def test_page_one_and_default_sort_omitted(self):
        criteria = FilterCriteria(page=1, sort_key=SortKey.CREATED_AT_DESC)
        assert encode_criteria(criteria) == {}

    def test_canonical_key_order(self):
        criteria = FilterCriteria(
            search_text="saw",
            category_ids=("tools",),
            brands=(Brand.TSSAPER, Brand.TOYAMA),
            price_min=Decimal("5"),
            price_max=Decimal("99.90"),
            in_stock_only=True,
            sort_key=SortKey.NAME_DESC,
            page=2,
        )
        encoded = encode_criteria(criteria)
        assert list(encoded) == [
            "search", "categories", "brands", "minPrice", "maxPrice", "inStock", "sortBy", "page",
        ]
        assert encoded["brands"] == "Tssaper,Toyama"
        assert encoded["maxPrice"] == "99.90"
        assert encoded["inStock"] == "true"

    def test_prices_use_plain_notation(self):
        criteria = decode_criteria({"minPrice": "1E+2"})
        assert encode_criteria(criteria) == {"minPrice": "100"}

    def test_zero_price_is_kept(self):
        criteria = decode_criteria({"minPrice": "0"})
        assert criteria.price_min == Decimal("0")
        assert encode_criteria(criteria) == {"minPrice": "0"}


class TestRoundTrip:

    QUERIES = [
        {},
        {"search": "furadeira de impacto"},
        {"categories": "z,a,m", "brands": "Toyama,Tssaper"},
        {"minPrice": "50", "maxPrice": "10", "inStock": "true"},
        {"sortBy": "name-asc", "page": "12"},
        {"minPrice": "0.000001", "maxPrice": "999999.99"},
    ]

    MALFORMED = [
        {"page": "007", "sortBy": "nope", "brands": ",Buffalo,,"},
        {"search": "   ", "categories": ",,,", "inStock": "TRUE"},
        {"minPrice": " 12.0 ", "maxPrice": "1_000", "page": "1"},
        {"brands": "Buffalo,Buffalo", "categories": "x, x ,y"},
        {"minPrice": "-0", "sortBy": "created_at-desc"},
    ]

    @pytest.mark.parametrize("params", QUERIES + MALFORMED)
    def test_decode_encode_decode(self, params):
        criteria = decode_criteria(params)
        assert decode_criteria(encode_criteria(criteria)) == criteria

    @pytest.mark.parametrize("params", QUERIES + MALFORMED)
    def test_encoding_is_a_fixed_point(self, params):
        once = encode_criteria(decode_criteria(params))
        assert encode_criteria(decode_criteria(once)) == once

    @pytest.mark.parametrize("params", QUERIES)
    def test_canonical_input_survives_unchanged(self, params):
        assert encode_criteria(decode_criteria(params)) == params
