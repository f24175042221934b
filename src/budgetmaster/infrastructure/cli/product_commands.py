"""CLI commands for the product catalog."""

from __future__ import annotations

import click

from budgetmaster.domain.exceptions import DomainException
from budgetmaster.infrastructure.bootstrap import Container


@click.command("list")
@click.pass_obj
def product_list(container: Container) -> None:
    """List all products and services, by name."""
    try:
        products = container.list_products().handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<30} {'Type':<8} {'Base price':>12}")
    click.echo("-" * 59)
    for p in products:
        click.echo(f"{p.id:<6} {p.name:<30} {p.item_type:<8} {p.base_price:>12.2f}")


@click.command("add")
@click.option("--name", required=True, help="Product or service name.")
@click.option("--price", required=True, help="Base price (e.g. 15.00).")
@click.option(
    "--type",
    "item_type",
    default="Product",
    show_default=True,
    help="'Product' or 'Service'.",
)
@click.pass_obj
def product_add(container: Container, name: str, price: str, item_type: str) -> None:
    """Add a product or service to the catalog."""
    try:
        dto = container.add_product().handle(
            name=name, base_price=price, item_type=item_type
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"{dto.item_type} #{dto.id} '{dto.name}' added at {dto.base_price:.2f}")


@click.command("delete")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.pass_obj
def product_delete(container: Container, product_id: int) -> None:
    """Remove a product from the catalog. Existing budgets are unaffected."""
    try:
        container.delete_product().handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} deleted.")
