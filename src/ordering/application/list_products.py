"""Application service: List Products use case (query)."""

from __future__ import annotations

from ordering.application.dto import ProductDTO, product_to_dto
from ordering.domain.model.product import ProductCategory
from ordering.domain.repository.product_repository import ProductRepository


class ListProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, category_id: str | None = None) -> list[ProductDTO]:
        """List the catalog, optionally restricted to one category."""
        products = self._product_repo.list_all()
        if category_id:
            wanted = ProductCategory.lookup(category_id)
            products = [p for p in products if wanted is not None and p.category is wanted]
        return [product_to_dto(p) for p in products]
