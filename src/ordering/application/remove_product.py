"""Application service: Remove Product use case.

Existing orders are unaffected: their line items carry their own
snapshot of the product.
"""

from __future__ import annotations

import logging

from ordering.application.dto import ProductResponse, product_to_dto
from ordering.application.show_product import PRODUCT_NOT_FOUND
from ordering.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class RemoveProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str) -> ProductResponse:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            return ProductResponse(notifications=[PRODUCT_NOT_FOUND])

        self._product_repo.remove(product)
        logger.info("Removed product %s (%s)", product.id, product.name)
        return ProductResponse(product=product_to_dto(product))
