"""Declarative description of a product-list query.

Pure data: predicates, one sort clause and a page window.  Whoever
executes it (the remote store, or the in-memory catalog used in tests and
the CLI) decides how.  Predicates are implicitly AND-ed, in order.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Union


@dataclass(frozen=True)
class MembershipPredicate:
    """``field`` must equal one of ``values``."""

    field: str
    values: tuple[str, ...]


@dataclass(frozen=True)
class SubstringPredicate:
    field: str
    text: str
    case_insensitive: bool = True


@dataclass(frozen=True)
class RangePredicate:
    """Inclusive bounds; a missing bound is open."""

    field: str
    lower: Decimal | None = None
    upper: Decimal | None = None


@dataclass(frozen=True)
class StockPredicate:
    """``field`` must be greater than zero."""

    field: str = "stock"


@dataclass(frozen=True)
class MatchNothingPredicate:
    reason: str


Predicate = Union[
    MembershipPredicate,
    SubstringPredicate,
    RangePredicate,
    StockPredicate,
    MatchNothingPredicate,
]


@dataclass(frozen=True)
class SortClause:
    field: str
    ascending: bool


@dataclass(frozen=True)
class Pagination:
    offset: int
    limit: int


@dataclass(frozen=True)
class QueryDescription:
    predicates: tuple[Predicate, ...]
    sort: SortClause
    pagination: Pagination

    @property
    def matches_nothing(self) -> bool:
        return any(isinstance(p, MatchNothingPredicate) for p in self.predicates)
