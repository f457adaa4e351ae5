"""Application service: Add Product use case."""

from __future__ import annotations

import logging

from ordering.application.dto import ProductResponse, product_to_dto
from ordering.domain.model.product import Product
from ordering.domain.model.value_objects import Money
from ordering.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        name: str,
        price: str,
        category_id: str,
        description: str = "",
    ) -> ProductResponse:
        """Add a new product to the catalog.

        An invalid product is answered with its notifications and never
        reaches the repository.
        """
        product = Product(
            name=name.strip() if name else "",
            price=Money.of(price),
            category_id=category_id.strip().upper() if category_id else "",
            description=description or "",
        )

        if not product.is_valid:
            logger.warning("Rejected product %r: %s", name, product.notifications.messages)
            return ProductResponse(notifications=product.notifications.messages)

        self._product_repo.add(product)
        logger.info("Added product %s (%s) at %s", product.id, product.name, product.price)
        return ProductResponse(product=product_to_dto(product))
