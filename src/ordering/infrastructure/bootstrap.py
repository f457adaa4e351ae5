"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from ordering.config import Settings
from ordering.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from ordering.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)


def settings() -> Settings:
    return Settings()


def product_repository() -> JsonProductRepository:
    return JsonProductRepository(settings().products_file)


def order_repository() -> JsonOrderRepository:
    return JsonOrderRepository(settings().orders_file)
