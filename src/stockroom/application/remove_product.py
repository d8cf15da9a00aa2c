"""Application service: Remove Product use case."""

from __future__ import annotations

import structlog

from stockroom.domain.exceptions import EntityNotFoundError
from stockroom.domain.model.product import Product
from stockroom.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class RemoveProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: int) -> Product:
        """Delete a product. Its id is retired and will not be reissued."""
        product = self._product_repo.remove(product_id)
        if product is None:
            raise EntityNotFoundError(
                f"Couldn't delete a product with id={product_id}. Product not found"
            )
        logger.info("Product removed", product_id=product_id)
        return product
