"""Application service: Add Product use case."""

from __future__ import annotations

import structlog

from stockroom.application.clock import Clock, utc_now
from stockroom.application.dto import ProductPayload
from stockroom.application.validation import validate_product_payload
from stockroom.domain.model.product import Product
from stockroom.domain.repository.product_repository import ProductRepository
from stockroom.domain.service.id_allocator import IdAllocator

logger = structlog.get_logger(__name__)


class AddProductHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        id_allocator: IdAllocator,
        clock: Clock = utc_now,
    ) -> None:
        self._product_repo = product_repo
        self._id_allocator = id_allocator
        self._clock = clock

    def handle(self, payload: ProductPayload) -> Product:
        """Create a new product record.

        Validation runs before the id is allocated, so a rejected payload
        leaves the counter untouched.
        """
        validate_product_payload(payload)

        product = Product(
            id=self._id_allocator.next_id(),
            name=payload.name,
            category=payload.category,
            quantity=payload.quantity,
            created_at=self._clock(),
        )
        self._product_repo.insert(product)
        logger.info(
            "Product added",
            product_id=product.id,
            category=product.category.value,
            quantity=product.quantity,
        )
        return product
