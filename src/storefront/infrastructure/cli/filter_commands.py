"""CLI commands for the product-list filters kept in the URL."""

from __future__ import annotations

from typing import Any

import click

from storefront.domain.model.filters import Brand, SortKey
from storefront.infrastructure.bootstrap import filter_query_state

_URL_OPTION = click.option("--url", default="/products", show_default=True, help="Current URL.")


@click.command("show")
@_URL_OPTION
def filters_show(url: str) -> None:
    """Show the criteria decoded from a URL and the compiled query."""
    state, _ = filter_query_state(url)
    criteria = state.criteria
    query = state.compile_query()

    click.echo(f"Search:     {criteria.search_text or '-'}")
    click.echo(f"Categories: {', '.join(criteria.category_ids) or '-'}")
    click.echo(f"Brands:     {', '.join(b.value for b in criteria.brands) or '-'}")
    low = "-" if criteria.price_min is None else criteria.price_min
    high = "-" if criteria.price_max is None else criteria.price_max
    click.echo(f"Price:      {low} .. {high}")
    click.echo(f"In stock:   {'yes' if criteria.in_stock_only else 'no'}")
    click.echo(f"Sort:       {criteria.sort_key.value}")
    click.echo(f"Page:       {criteria.page}")
    click.echo()
    for predicate in query.predicates:
        click.echo(f"  where {predicate}")
    click.echo(f"  order by {query.sort.field} {'asc' if query.sort.ascending else 'desc'}")
    click.echo(f"  offset {query.pagination.offset} limit {query.pagination.limit}")
    if state.decode_fallbacks:
        click.echo(f"{state.decode_fallbacks} malformed value(s) ignored", err=True)


@click.command("update")
@_URL_OPTION
@click.option("--search", default=None, help="Search text (empty string clears it).")
@click.option("--category", "categories", multiple=True, help="Category ID (repeatable).")
@click.option(
    "--brand",
    "brands",
    multiple=True,
    type=click.Choice([b.value for b in Brand]),
    help="Brand (repeatable).",
)
@click.option("--min-price", default=None, help="Minimum price.")
@click.option("--max-price", default=None, help="Maximum price.")
@click.option("--no-min-price", is_flag=True, default=False, help="Remove the minimum price.")
@click.option("--no-max-price", is_flag=True, default=False, help="Remove the maximum price.")
@click.option("--in-stock/--any-stock", default=None, help="Only products in stock.")
@click.option("--sort", default=None, type=click.Choice([k.value for k in SortKey]))
@click.option("--page", default=None, type=int, help="Page number.")
def filters_update(
    url: str,
    search: str | None,
    categories: tuple[str, ...],
    brands: tuple[str, ...],
    min_price: str | None,
    max_price: str | None,
    no_min_price: bool,
    no_max_price: bool,
    in_stock: bool | None,
    sort: str | None,
    page: int | None,
) -> None:
    """Apply filter changes to a URL and print the canonical result."""
    changes: dict[str, Any] = {}
    if search is not None:
        changes["search_text"] = search
    if categories:
        changes["category_ids"] = categories
    if brands:
        changes["brands"] = brands
    if min_price is not None or no_min_price:
        changes["price_min"] = None if no_min_price else min_price
    if max_price is not None or no_max_price:
        changes["price_max"] = None if no_max_price else max_price
    if in_stock is not None:
        changes["in_stock_only"] = in_stock
    if sort is not None:
        changes["sort_key"] = sort
    if page is not None:
        changes["page"] = page

    state, location = filter_query_state(url)
    state.update(**changes)
    click.echo(location.url)


@click.command("clear")
@_URL_OPTION
def filters_clear(url: str) -> None:
    """Drop every filter from a URL, keeping the sort order."""
    state, location = filter_query_state(url)
    state.clear()
    click.echo(location.url)
