"""Application service: List Orders use case (query).

Pure projection: no business rule beyond mapping each order to its
read view.
"""

from __future__ import annotations

from ordering.application.dto import OrderDTO, order_to_dto
from ordering.domain.repository.order_repository import OrderFilter, OrderRepository


class ListOrdersHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, filters: OrderFilter | None = None) -> list[OrderDTO]:
        return [order_to_dto(order) for order in self._order_repo.get_orders(filters)]
