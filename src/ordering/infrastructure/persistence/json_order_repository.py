"""JSON-file-backed implementation of OrderRepository."""

from __future__ import annotations

import json
import logging
from datetime import datetime
from decimal import Decimal
from pathlib import Path

from ordering.domain.model.order import Order, OrderLineItem, OrderStatus
from ordering.domain.model.value_objects import Money
from ordering.domain.repository.order_repository import OrderFilter, OrderRepository

logger = logging.getLogger(__name__)


class JsonOrderRepository(OrderRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- OrderRepository interface --------------------------------------------

    def get_by_id(self, order_id: str) -> Order | None:
        for raw in self._load_raw():
            if raw["id"] == order_id:
                return self._to_domain(raw)
        return None

    def get_orders(self, filters: OrderFilter | None = None) -> list[Order]:
        orders = [self._to_domain(raw) for raw in self._load_raw()]
        if filters is not None:
            orders = [o for o in orders if filters.matches(o)]
        return sorted(orders, key=lambda o: o.created_at)

    def add(self, order: Order) -> None:
        orders = self._load_raw()
        orders.append(self._to_raw(order))
        self._persist_raw(orders)

    def update(self, order: Order) -> None:
        orders = self._load_raw()

        # Upsert: replace if exists, otherwise append
        for i, raw in enumerate(orders):
            if raw["id"] == order.id:
                orders[i] = self._to_raw(order)
                break
        else:
            logger.warning("Updating order %s that was not stored yet", order.id)
            orders.append(self._to_raw(order))

        self._persist_raw(orders)

    def remove(self, order: Order) -> None:
        orders = [raw for raw in self._load_raw() if raw["id"] != order.id]
        self._persist_raw(orders)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: Order) -> dict:
        return {
            "id": order.id,
            "user_id": order.user_id,
            "status": order.status.value,
            "created_at": order.created_at.isoformat(),
            "items": [
                {
                    "product_id": item.product_id,
                    "product_name": item.product_name,
                    "product_description": item.product_description,
                    "quantity": item.quantity,
                    "unit_price": str(item.unit_price.amount),
                    "currency": item.unit_price.currency,
                }
                for item in order.items
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Order:
        items = [
            OrderLineItem(
                order_id=raw["id"],
                product_id=i["product_id"],
                unit_price=Money(Decimal(i["unit_price"]), i.get("currency", "USD")),
                quantity=i["quantity"],
                product_name=i.get("product_name", ""),
                product_description=i.get("product_description", ""),
            )
            for i in raw["items"]
        ]
        return Order(
            id=raw["id"],
            user_id=raw["user_id"],
            items=items,
            status=OrderStatus(raw["status"]),
            created_at=datetime.fromisoformat(raw["created_at"]),
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, orders: list[dict]) -> None:
        self._file_path.write_text(
            json.dumps(orders, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
