"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from ordering.application.add_product import AddProductHandler
from ordering.application.dto import ProductResponse
from ordering.application.list_products import ListProductsHandler
from ordering.application.remove_product import RemoveProductHandler
from ordering.application.show_product import ShowProductHandler
from ordering.application.update_product import UpdateProductHandler
from ordering.domain.exceptions import DomainException
from ordering.domain.model.product import ProductCategory
from ordering.infrastructure.bootstrap import product_repository

_CATEGORIES = click.Choice([c.value for c in ProductCategory], case_sensitive=False)


def _require_valid(response: ProductResponse) -> None:
    """Turn a response carrying notifications into a CLI error."""
    if not response.is_valid:
        raise click.ClickException("\n".join(response.notifications))


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Price (e.g. 15.00).")
@click.option("--category", required=True, type=_CATEGORIES, help="Product category.")
@click.option("--description", default="", help="Optional description.")
def product_add(name: str, price: str, category: str, description: str) -> None:
    """Add a new product to the catalog."""
    handler = AddProductHandler(product_repo=product_repository())

    try:
        response = handler.handle(
            name=name, price=price, category_id=category, description=description
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _require_valid(response)
    p = response.product
    click.echo(f"Product {p.id} '{p.name}' added at {p.price}")


@click.command("list")
@click.option("--category", default=None, type=_CATEGORIES, help="Only this category.")
def product_list(category: str | None) -> None:
    """List products in the catalog."""
    products = ListProductsHandler(product_repository()).handle(category_id=category)

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<34} {'Name':<20} {'Category':<10} {'Price':>10}")
    click.echo("-" * 77)
    for p in products:
        click.echo(f"{p.id:<34} {p.name:<20} {p.category:<10} {p.price:>10}")


@click.command("show")
@click.option("--id", "product_id", required=True, help="Product ID.")
def product_show(product_id: str) -> None:
    """Show one product."""
    response = ShowProductHandler(product_repository()).handle(product_id)
    _require_valid(response)

    p = response.product
    click.echo(f"Product {p.id}")
    click.echo(f"Name:        {p.name}")
    click.echo(f"Description: {p.description}")
    click.echo(f"Category:    {p.category}")
    click.echo(f"Price:       {p.price}")


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--name", default=None, help="New name.")
@click.option("--description", default=None, help="New description.")
@click.option("--price", default=None, help="New price (e.g. 29.99).")
@click.option("--category", default=None, type=_CATEGORIES, help="New category.")
def product_update(
    product_id: str,
    name: str | None,
    description: str | None,
    price: str | None,
    category: str | None,
) -> None:
    """Update a product's fields."""
    handler = UpdateProductHandler(product_repo=product_repository())

    try:
        response = handler.handle(
            product_id,
            name=name,
            description=description,
            price=price,
            category_id=category,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _require_valid(response)
    click.echo(f"Product {product_id} updated.")


@click.command("remove")
@click.option("--id", "product_id", required=True, help="Product ID.")
def product_remove(product_id: str) -> None:
    """Remove a product from the catalog."""
    response = RemoveProductHandler(product_repository()).handle(product_id)
    _require_valid(response)
    click.echo(f"Product {product_id} removed.")
