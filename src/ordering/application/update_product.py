"""Application service: Update Product use case."""

from __future__ import annotations

import logging
from dataclasses import replace

from ordering.application.dto import ProductResponse, product_to_dto
from ordering.application.show_product import PRODUCT_NOT_FOUND
from ordering.domain.model.value_objects import Money
from ordering.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        product_id: str,
        name: str | None = None,
        description: str | None = None,
        price: str | None = None,
        category_id: str | None = None,
    ) -> ProductResponse:
        """Change any of a product's fields.

        The changes are applied to a copy, which validates itself; the
        stored product is only replaced when the copy is valid.  This
        does NOT affect any existing orders — they captured a price
        snapshot at creation time.
        """
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            return ProductResponse(notifications=[PRODUCT_NOT_FOUND])

        changes: dict[str, object] = {}
        if name is not None:
            changes["name"] = name.strip()
        if description is not None:
            changes["description"] = description
        if price is not None:
            changes["price"] = Money.of(price)
        if category_id is not None:
            changes["category_id"] = category_id.strip().upper()

        candidate = replace(product, **changes)
        if not candidate.is_valid:
            logger.warning(
                "Rejected update of product %s: %s",
                product_id, candidate.notifications.messages,
            )
            return ProductResponse(notifications=candidate.notifications.messages)

        self._product_repo.update(candidate)
        logger.info("Updated product %s: %s", product_id, sorted(changes))
        return ProductResponse(product=product_to_dto(candidate))
