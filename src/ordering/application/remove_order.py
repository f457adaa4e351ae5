"""Application service: Remove Order use case.

The only rule is existence; line items go with their order.
"""

from __future__ import annotations

import logging

from ordering.domain.exceptions import EntityNotFoundError
from ordering.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class RemoveOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: str) -> None:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            logger.warning("Cannot remove order %s: not found", order_id)
            raise EntityNotFoundError("Invalid order.")

        self._order_repo.remove(order)
        logger.info("Removed order %s", order_id)
