"""Tests for the URL-backed query location."""

from storefront.application.filter_query_state import FilterQueryState
from storefront.domain.model.filters import Brand
from storefront.infrastructure.navigation.url_query_location import UrlQueryLocation


class TestUrlQueryLocation:

    def test_reads_first_value_per_key(self):
        location = UrlQueryLocation("/products?page=2&page=5&search=a%20b")
        assert location.read() == {"page": "2", "search": "a b"}

    def test_replace_keeps_path_and_drops_old_query(self):
        location = UrlQueryLocation("/products?utm=x&page=2#top")
        location.replace({"search": "serra circular", "brands": "Buffalo,Toyama"})
        assert location.url == "/products?search=serra%20circular&brands=Buffalo,Toyama#top"

    def test_replace_with_nothing(self):
        location = UrlQueryLocation("/products?page=2")
        location.replace({})
        assert location.url == "/products"

    def test_state_round_trip_through_url(self):
        location = UrlQueryLocation("/products?brands=Toyama&minPrice=abc&sortBy=price-asc")
        state = FilterQueryState(location)
        assert state.criteria.brands == (Brand.TOYAMA,)
        state.update(page=2)
        assert location.url == "/products?brands=Toyama&sortBy=price-asc&page=2"
        assert FilterQueryState(UrlQueryLocation(location.url)).criteria == state.criteria
