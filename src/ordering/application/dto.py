"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ordering.domain.model.order import Order
from ordering.domain.model.product import Product


@dataclass(frozen=True)
class OrderItemSpec:
    """Input: what the customer asked for (product ID + quantity)."""

    product_id: str
    quantity: int


@dataclass(frozen=True)
class OrderLineItemDTO:
    """Output: a single line item as displayed to the user."""

    product_id: str
    name: str
    unit_price: str  # formatted, e.g. "$15.00"
    quantity: int
    line_total: str


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete order as displayed to the user."""

    id: str
    user_id: str
    status: str  # human-readable label
    total_price: str
    items: list[OrderLineItemDTO]
    created_at: str


@dataclass(frozen=True)
class ProductDTO:
    id: str
    name: str
    description: str
    price: str
    category: str


@dataclass(frozen=True)
class ProductResponse:
    """Output of catalog use cases.

    Invalid requests are answered, not raised: the caller checks
    ``is_valid`` and shows ``notifications``.
    """

    product: ProductDTO | None = None
    notifications: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.notifications


# --- Mapping ------------------------------------------------------------------


def order_to_dto(order: Order) -> OrderDTO:
    return OrderDTO(
        id=order.id,
        user_id=order.user_id,
        status=order.status.label,
        total_price=str(order.total_price),
        items=[
            OrderLineItemDTO(
                product_id=item.product_id,
                name=item.product_name,
                unit_price=str(item.unit_price),
                quantity=item.quantity,
                line_total=str(item.line_total),
            )
            for item in order.items
        ],
        created_at=order.created_at.strftime("%Y-%m-%d %H:%M UTC"),
    )


def product_to_dto(product: Product) -> ProductDTO:
    category = product.category
    return ProductDTO(
        id=product.id,
        name=product.name,
        description=product.description,
        price=str(product.price),
        category=category.label if category is not None else product.category_id,
    )
