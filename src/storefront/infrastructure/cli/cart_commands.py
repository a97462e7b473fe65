"""CLI commands for the shopping cart."""

from __future__ import annotations

import click

from storefront.application.add_to_cart import AddToCartHandler
from storefront.application.show_cart import ShowCartHandler
from storefront.domain.exceptions import DomainException
from storefront.domain.model.cart import CartResult
from storefront.infrastructure.bootstrap import cart_store, product_catalog


def _report(result: CartResult) -> None:
    """Echo the outcome; rejections exit non-zero, warnings go to stderr."""
    if result.warning is not None:
        click.echo(f"Warning: {result.warning}", err=True)
    if not result.ok:
        raise click.ClickException(result.message)
    click.echo(result.message)


@click.command("add")
@click.option("--product", "product_id", required=True, help="Product ID.")
def cart_add(product_id: str) -> None:
    """Add one unit of a product to the cart."""
    handler = AddToCartHandler(catalog=product_catalog(), cart_store=cart_store())

    try:
        result = handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _report(result)


@click.command("remove")
@click.option("--product", "product_id", required=True, help="Product ID.")
def cart_remove(product_id: str) -> None:
    """Remove a product from the cart."""
    _report(cart_store().remove(product_id))


@click.command("set")
@click.option("--product", "product_id", required=True, help="Product ID.")
@click.option("--quantity", required=True, type=int, help="New quantity.")
def cart_set(product_id: str, quantity: int) -> None:
    """Set the quantity of a product already in the cart."""
    _report(cart_store().set_quantity(product_id, quantity))


@click.command("clear")
def cart_clear() -> None:
    """Empty the cart."""
    _report(cart_store().clear())


@click.command("show")
def cart_show() -> None:
    """Show the cart contents and totals."""
    store = cart_store()
    dto = ShowCartHandler(cart_store=store).handle()
    if store.load_warning is not None:
        click.echo(f"Warning: {store.load_warning}", err=True)

    if not dto.lines:
        click.echo("Cart is empty.")
        return

    click.echo(f"  {'Product':<24} {'Qty':>5} {'Stock':>6} {'Price':>12} {'Total':>12}")
    click.echo(f"  {'-'*63}")
    for line in dto.lines:
        click.echo(
            f"  {line.name:<24} {line.quantity:>5} {line.stock_limit:>6} "
            f"{line.unit_price:>12} {line.line_total:>12}"
        )
    click.echo(f"  {'-'*63}")
    click.echo(f"  {'Items':<24} {dto.item_count:>5}")
    click.echo(f"  {'Cart Total':<31} {dto.total:>31}")
