"""Application service: Show Product use case (query)."""

from __future__ import annotations

from ordering.application.dto import ProductResponse, product_to_dto
from ordering.domain.repository.product_repository import ProductRepository

PRODUCT_NOT_FOUND = "The product does not exist"


class ShowProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str) -> ProductResponse:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            return ProductResponse(notifications=[PRODUCT_NOT_FOUND])
        return ProductResponse(product=product_to_dto(product))
