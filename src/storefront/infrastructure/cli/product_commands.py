"""CLI commands for browsing the product catalog."""

from __future__ import annotations

import click

from storefront.application.list_products import ListProductsHandler
from storefront.infrastructure.bootstrap import filter_query_state, product_catalog


@click.command("list")
@click.option("--url", default="/products", show_default=True, help="Product list URL with filters.")
def product_list(url: str) -> None:
    """List one page of products matching the URL's filters."""
    state, _ = filter_query_state(url)
    dto = ListProductsHandler(catalog=product_catalog()).handle(state.criteria)

    if not dto.products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<10} {'Name':<28} {'Brand':<10} {'Price':>12} {'Stock':>6}")
    click.echo("-" * 70)
    for p in dto.products:
        click.echo(f"{p.id:<10} {p.name:<28} {p.brand:<10} {p.price:>12} {p.stock:>6}")
    click.echo(
        f"Page {dto.current_page} of {max(dto.total_pages, 1)} "
        f"({dto.total_count} products)"
    )
