"""Application services: stock adjustment use cases.

Both handlers follow the same protocol: resolve the record, validate the
payload, mutate through the aggregate, stamp ``updated_at`` and write the
record back. A rejected adjustment never reaches the repository.
"""

from __future__ import annotations

import structlog

from stockroom.application.clock import Clock, utc_now
from stockroom.application.dto import StockPayload
from stockroom.application.validation import validate_stock_payload
from stockroom.domain.exceptions import EntityNotFoundError, InvalidOperationError
from stockroom.domain.model.product import Product
from stockroom.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class AddQuantityHandler:

    def __init__(self, product_repo: ProductRepository, clock: Clock = utc_now) -> None:
        self._product_repo = product_repo
        self._clock = clock

    def handle(self, product_id: int, payload: StockPayload) -> Product:
        product = self._product_repo.get(product_id)
        if product is None:
            raise EntityNotFoundError(
                f"Couldn't add quantity to product with id={product_id}. Product not found"
            )

        validate_stock_payload(payload)

        product.add_stock(payload.amount, now=self._clock())
        self._product_repo.insert(product)
        logger.info(
            "Stock added",
            product_id=product_id,
            amount=payload.amount,
            quantity=product.quantity,
        )
        return product


class OffloadQuantityHandler:

    def __init__(self, product_repo: ProductRepository, clock: Clock = utc_now) -> None:
        self._product_repo = product_repo
        self._clock = clock

    def handle(self, product_id: int, payload: StockPayload) -> Product:
        product = self._product_repo.get(product_id)
        if product is None:
            raise EntityNotFoundError(
                f"Couldn't offload a product with id={product_id}. Product not found"
            )

        validate_stock_payload(payload)

        try:
            product.offload(payload.amount, now=self._clock())
        except InvalidOperationError:
            logger.warning(
                "Offload rejected",
                product_id=product_id,
                requested=payload.amount,
                available=product.quantity,
            )
            raise

        self._product_repo.insert(product)
        logger.info(
            "Stock offloaded",
            product_id=product_id,
            amount=payload.amount,
            quantity=product.quantity,
        )
        return product
