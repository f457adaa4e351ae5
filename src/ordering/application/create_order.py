"""Application service: Create Order use case.

Orchestrates the flow between repositories and the domain model.
This is the only place that coordinates multiple aggregates (Product
lookup + Order creation).
"""

from __future__ import annotations

import logging

from ordering.application.dto import OrderDTO, OrderItemSpec, order_to_dto
from ordering.domain.exceptions import EntityNotFoundError, ValidationError
from ordering.domain.model.order import Order
from ordering.domain.model.product import Product
from ordering.domain.repository.order_repository import OrderRepository
from ordering.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class CreateOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._order_repo = order_repo
        self._product_repo = product_repo

    def handle(self, user_id: str, item_specs: list[OrderItemSpec]) -> OrderDTO:
        """Create a new order for *user_id*.

        Steps:
        1. Resolve every requested product ID (all-or-nothing).
        2. Build OrderLineItems with *current* prices (snapshot).
        3. Let the Order aggregate validate itself.
        4. Persist only a valid order and return a DTO.
        """
        products = self._resolve_products(item_specs)

        order = Order(user_id=user_id)
        for spec in item_specs:
            order.add_product(products[spec.product_id], spec.quantity)

        if not order.is_valid:
            logger.warning(
                "Rejected order for user %s: %s", user_id, order.notifications.messages
            )
            raise ValidationError("Invalid order.", order.notifications.messages)

        self._order_repo.add(order)
        logger.info(
            "Created order %s for user %s (%d items, total %s)",
            order.id, user_id, len(order.items), order.total_price,
        )
        return order_to_dto(order)

    def _resolve_products(self, item_specs: list[OrderItemSpec]) -> dict[str, Product]:
        requested = {spec.product_id for spec in item_specs}
        resolved: dict[str, Product] = {}

        for product_id in requested:
            product = self._product_repo.get_by_id(product_id)
            if product is not None and product.is_valid:
                resolved[product_id] = product

        if len(resolved) != len(requested):
            missing = sorted(requested - resolved.keys())
            logger.warning("Order references unknown or invalid products: %s", missing)
            raise EntityNotFoundError("Invalid product(s).")

        return resolved
