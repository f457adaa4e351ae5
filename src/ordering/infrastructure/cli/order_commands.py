"""CLI commands for the Order aggregate."""

from __future__ import annotations

import click

from ordering.application.create_order import CreateOrderHandler
from ordering.application.dto import OrderDTO, OrderItemSpec
from ordering.application.list_orders import ListOrdersHandler
from ordering.application.remove_order import RemoveOrderHandler
from ordering.application.show_order import ShowOrderHandler
from ordering.application.update_order_status import UpdateOrderStatusHandler
from ordering.domain.exceptions import DomainException, ValidationError
from ordering.domain.model.order import OrderStatus
from ordering.domain.repository.order_repository import OrderFilter
from ordering.infrastructure.bootstrap import order_repository, product_repository

_STATUSES = click.Choice([s.value for s in OrderStatus], case_sensitive=False)


def _parse_items(raw: str) -> list[OrderItemSpec]:
    """Parse 'id1:3,id2:5' into OrderItemSpec list."""
    specs: list[OrderItemSpec] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'ProductId:Quantity'."
            )
        product_id, qty_str = pair.rsplit(":", 1)
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity '{qty_str}' for product '{product_id}'."
            )
        specs.append(OrderItemSpec(product_id=product_id.strip(), quantity=qty))
    return specs


def _fail(exc: DomainException) -> click.ClickException:
    message = str(exc)
    if isinstance(exc, ValidationError) and exc.notifications:
        message += "\n" + "\n".join(f"  - {n}" for n in exc.notifications)
    return click.ClickException(message)


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order {dto.id}  (status={dto.status})")
    click.echo(f"User:    {dto.user_id}")
    click.echo(f"Created: {dto.created_at}")
    click.echo()
    click.echo(f"  {'Product':<20} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*47}")
    for item in dto.items:
        click.echo(
            f"  {item.name:<20} {item.quantity:>5} {item.unit_price:>10} {item.line_total:>10}"
        )
    click.echo(f"  {'-'*47}")
    click.echo(f"  {'Order Total':<27} {dto.total_price:>20}")


@click.command("create")
@click.option("--user", "user_id", required=True, help="ID of the ordering user.")
@click.option("--items", required=True, help="Items as 'ProductId:Qty,ProductId:Qty'.")
def order_create(user_id: str, items: str) -> None:
    """Create a new order."""
    specs = _parse_items(items)

    handler = CreateOrderHandler(
        order_repo=order_repository(),
        product_repo=product_repository(),
    )

    try:
        dto = handler.handle(user_id=user_id, item_specs=specs)
    except DomainException as exc:
        raise _fail(exc)

    click.echo("Order created.")
    _display_order(dto)


@click.command("list")
@click.option("--status", default=None, type=_STATUSES, help="Only orders in this status.")
@click.option("--user", "user_id", default=None, help="Only orders of this user.")
def order_list(status: str | None, user_id: str | None) -> None:
    """List orders."""
    filters = OrderFilter(
        status=OrderStatus.parse(status) if status else None,
        user_id=user_id,
    )
    orders = ListOrdersHandler(order_repository()).handle(filters)

    if not orders:
        click.echo("No orders found.")
        return

    click.echo(f"{'ID':<34} {'User':<15} {'Status':<15} {'Total':>10}")
    click.echo("-" * 77)
    for dto in orders:
        click.echo(f"{dto.id:<34} {dto.user_id:<15} {dto.status:<15} {dto.total_price:>10}")


@click.command("show")
@click.option("--id", "order_id", required=True, help="Order ID to display.")
def order_show(order_id: str) -> None:
    """Show details of an existing order."""
    handler = ShowOrderHandler(order_repo=order_repository())

    try:
        dto = handler.handle(order_id)
    except DomainException as exc:
        raise _fail(exc)

    _display_order(dto)


@click.command("status")
@click.option("--id", "order_id", required=True, help="Order ID.")
@click.option("--to", "new_status", required=True, help="Target status (e.g. READY).")
def order_status(order_id: str, new_status: str) -> None:
    """Move an order to another status."""
    handler = UpdateOrderStatusHandler(order_repo=order_repository())

    try:
        handler.handle(order_id, new_status)
    except DomainException as exc:
        raise _fail(exc)

    click.echo(f"Order {order_id} status updated to {OrderStatus.parse(new_status).label}.")


@click.command("remove")
@click.option("--id", "order_id", required=True, help="Order ID to remove.")
def order_remove(order_id: str) -> None:
    """Remove an order."""
    handler = RemoveOrderHandler(order_repo=order_repository())

    try:
        handler.handle(order_id)
    except DomainException as exc:
        raise _fail(exc)

    click.echo(f"Order {order_id} removed.")
