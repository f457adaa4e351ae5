"""Abstract repository for Order aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from ordering.domain.model.order import Order, OrderStatus


@dataclass(frozen=True)
class OrderFilter:
    """Optional listing criteria, combined with AND."""

    status: OrderStatus | None = None
    user_id: str | None = None

    def matches(self, order: Order) -> bool:
        if self.status is not None and order.status != self.status:
            return False
        if self.user_id is not None and order.user_id != self.user_id:
            return False
        return True


class OrderRepository(ABC):

    @abstractmethod
    def get_by_id(self, order_id: str) -> Order | None:
        """Return an order by its ID, or None if not found."""

    @abstractmethod
    def get_orders(self, filters: OrderFilter | None = None) -> list[Order]:
        """Return orders matching *filters*, oldest first."""

    @abstractmethod
    def add(self, order: Order) -> None:
        """Persist a new order."""

    @abstractmethod
    def update(self, order: Order) -> None:
        """Persist changes to an existing order."""

    @abstractmethod
    def remove(self, order: Order) -> None:
        """Delete an order together with its line items."""
