"""Application service: Update Product use case."""

from __future__ import annotations

import structlog

from stockroom.application.clock import Clock, utc_now
from stockroom.application.dto import ProductPayload
from stockroom.application.validation import validate_product_payload
from stockroom.domain.exceptions import EntityNotFoundError
from stockroom.domain.model.product import Product
from stockroom.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository, clock: Clock = utc_now) -> None:
        self._product_repo = product_repo
        self._clock = clock

    def handle(self, product_id: int, payload: ProductPayload) -> Product:
        """Overwrite name, category and quantity; ``created_at`` is kept."""
        product = self._product_repo.get(product_id)
        if product is None:
            raise EntityNotFoundError(
                f"Couldn't update a product with id={product_id}. Product not found"
            )

        validate_product_payload(payload)

        product.revise(payload.name, payload.category, payload.quantity, now=self._clock())
        self._product_repo.insert(product)
        logger.info("Product updated", product_id=product_id, quantity=product.quantity)
        return product
