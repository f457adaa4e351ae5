"""Order aggregate — the core of the domain.

The Order is an aggregate root that owns its line items.  It validates
itself into a notification ledger on construction and every time a line
item is added; the application layer decides what an invalid order means.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import uuid4

from ordering.domain.exceptions import ValidationError
from ordering.domain.model.notification import NotificationLedger
from ordering.domain.model.order_status import OrderStatus
from ordering.domain.model.product import Product
from ordering.domain.model.value_objects import Money

__all__ = ["Order", "OrderLineItem", "OrderStatus"]


@dataclass(frozen=True)
class OrderLineItem:
    """Captures the price snapshot of a product at order-creation time.

    Never mutated after creation.  ``unit_price`` is locked; later
    catalog price changes do not reach it.
    """

    order_id: str
    product_id: str
    unit_price: Money  # locked at order-creation time
    quantity: int
    product_name: str = ""
    product_description: str = ""

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity


def new_order_id() -> str:
    return uuid4().hex


@dataclass
class Order:
    """Aggregate root for customer orders.

    ``status`` starts at CREATED and is only changed through
    ``set_status``, which the status-update use case calls after the
    transition policy has accepted the move.
    """

    user_id: str
    id: str = field(default_factory=new_order_id)
    status: OrderStatus = OrderStatus.CREATED
    items: list[OrderLineItem] = field(default_factory=list)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    notifications: NotificationLedger = field(
        default_factory=NotificationLedger, init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        for item in self.items:
            self._assert_owned(item)
        self.validate()

    # --- Line items -----------------------------------------------------------

    def add_item(self, item: OrderLineItem) -> None:
        self._assert_owned(item)
        self.items.append(item)
        self.validate()

    def add_product(self, product: Product, quantity: int) -> OrderLineItem:
        """Append a line item for *product*, snapshotting its current price."""
        item = OrderLineItem(
            order_id=self.id,
            product_id=product.id,
            unit_price=product.price,  # <-- price snapshot
            quantity=quantity,
            product_name=product.name,
            product_description=product.description,
        )
        self.add_item(item)
        return item

    # --- State ----------------------------------------------------------------

    def set_status(self, new_status: OrderStatus) -> None:
        self.status = new_status

    # --- Validation -----------------------------------------------------------

    @property
    def is_valid(self) -> bool:
        return not self.notifications

    def validate(self) -> None:
        self.notifications.clear()

        if not self.items:
            self.notifications.add("Order must contain at least one item", "items")

        for item in self.items:
            if item.quantity <= 0:
                self.notifications.add(
                    f"Quantity for product '{item.product_id}' must be greater than zero",
                    "items",
                )

        if not self.user_id or not str(self.user_id).strip():
            self.notifications.add("User is required", "user_id")

    # --- Computed properties --------------------------------------------------

    @property
    def total_price(self) -> Money:
        result = Money.zero()
        for item in self.items:
            result = result + item.line_total
        return result

    # --- Internal helpers -----------------------------------------------------

    def _assert_owned(self, item: OrderLineItem) -> None:
        if item.order_id != self.id:
            raise ValidationError(
                f"Line item for product '{item.product_id}' belongs to another order"
            )
