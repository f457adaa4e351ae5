import logging

import click

from ordering.infrastructure.bootstrap import settings
from ordering.infrastructure.cli.order_commands import (
    order_create,
    order_list,
    order_remove,
    order_show,
    order_status,
)
from ordering.infrastructure.cli.product_commands import (
    product_add,
    product_list,
    product_remove,
    product_show,
    product_update,
)


@click.group()
def cli() -> None:
    """Ordering — food order management"""
    logging.basicConfig(
        level=settings().log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@cli.group()
def order() -> None:
    """Manage orders."""


@cli.group()
def product() -> None:
    """Manage the product catalog."""


# Register subcommands
order.add_command(order_create)
order.add_command(order_list)
order.add_command(order_remove)
order.add_command(order_show)
order.add_command(order_status)
product.add_command(product_add)
product.add_command(product_list)
product.add_command(product_remove)
product.add_command(product_show)
product.add_command(product_update)
