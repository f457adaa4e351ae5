"""Application service: Update Order Status use case.

Owns the transition decision.  The Order entity only stores the new
status; whether the move is allowed is asked of a TransitionPolicy,
permissive by default (only a same-status request is rejected).
"""

from __future__ import annotations

import logging

from ordering.domain.exceptions import EntityNotFoundError, InvalidOperationError
from ordering.domain.model.order_status import (
    OrderStatus,
    TransitionPolicy,
    permissive_transition_policy,
)
from ordering.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class UpdateOrderStatusHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        policy: TransitionPolicy = permissive_transition_policy,
    ) -> None:
        self._order_repo = order_repo
        self._policy = policy

    def handle(self, order_id: str, new_status: str | OrderStatus) -> None:
        # Unknown status values are rejected before the order is loaded.
        target = OrderStatus.parse(new_status)

        order = self._order_repo.get_by_id(order_id)
        if order is None:
            logger.warning("Cannot update status of order %s: not found", order_id)
            raise EntityNotFoundError("Invalid order.")

        current = order.status
        if target == current:
            raise InvalidOperationError(f"Order already has status {current.label}")
        if not self._policy(current, target):
            logger.warning(
                "Rejected transition %s -> %s for order %s",
                current.value, target.value, order_id,
            )
            raise InvalidOperationError(
                f"Cannot change order status from {current.label} to {target.label}"
            )

        order.set_status(target)
        self._order_repo.update(order)
        logger.info(
            "Order %s status changed %s -> %s", order_id, current.value, target.value
        )
