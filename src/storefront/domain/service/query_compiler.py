"""Domain service: compile filter criteria into a query description.

The output is handed to the product-listing collaborator verbatim.
Predicate order is fixed (categories, brands, search, price, stock) so
identical criteria always produce identical descriptions.
"""

from __future__ import annotations

from storefront.domain.model.filters import FilterCriteria
from storefront.domain.model.query import (
    MatchNothingPredicate,
    MembershipPredicate,
    Pagination,
    Predicate,
    QueryDescription,
    RangePredicate,
    SortClause,
    StockPredicate,
    SubstringPredicate,
)


def compile_query(criteria: FilterCriteria) -> QueryDescription:
    predicates: list[Predicate] = []

    if criteria.category_ids:
        predicates.append(MembershipPredicate("category_id", criteria.category_ids))

    if criteria.brands:
        predicates.append(
            MembershipPredicate("brand", tuple(brand.value for brand in criteria.brands))
        )

    if criteria.search_text:
        predicates.append(SubstringPredicate("name", criteria.search_text))

    if criteria.has_inverted_price_range:
        # An inverted range is kept as state but never swapped.
        predicates.append(
            MatchNothingPredicate(
                f"minimum price {criteria.price_min} is above maximum price {criteria.price_max}"
            )
        )
    elif criteria.price_min is not None or criteria.price_max is not None:
        predicates.append(RangePredicate("price", criteria.price_min, criteria.price_max))

    if criteria.in_stock_only:
        predicates.append(StockPredicate("stock"))

    return QueryDescription(
        predicates=tuple(predicates),
        sort=SortClause(criteria.sort_key.field, criteria.sort_key.ascending),
        pagination=Pagination(
            offset=(criteria.page - 1) * criteria.page_size,
            limit=criteria.page_size,
        ),
    )
