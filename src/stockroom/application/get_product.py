"""Application service: read-only product lookups (queries)."""

from __future__ import annotations

from stockroom.domain.exceptions import EntityNotFoundError
from stockroom.domain.model.product import Product
from stockroom.domain.repository.product_repository import ProductRepository


class GetProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: int) -> Product:
        product = self._product_repo.get(product_id)
        if product is None:
            raise EntityNotFoundError(f"A product with id={product_id} was not found")
        return product


class GetStockHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._lookup = GetProductHandler(product_repo)

    def handle(self, product_id: int) -> int:
        return self._lookup.handle(product_id).quantity
