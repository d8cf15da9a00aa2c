"""Bounded byte encoding for Product records.

Records are stored as compact UTF-8 JSON. The encoded size is capped at
``MAX_ENCODED_SIZE``; an oversized record fails to encode instead of being
truncated. Both encode and decode failures raise CodecError, which is
fatal for the operation in progress.
"""

from __future__ import annotations

import json
from datetime import datetime

from stockroom.domain.exceptions import CodecError
from stockroom.domain.model.product import MAX_QUANTITY, Category, Product
from stockroom.domain.service.id_allocator import MAX_ID

MAX_ENCODED_SIZE = 1024


class ProductCodec:

    def __init__(self, max_size: int = MAX_ENCODED_SIZE) -> None:
        self._max_size = max_size

    def encode(self, product: Product) -> bytes:
        data = json.dumps(
            self._to_raw(product), ensure_ascii=False, separators=(",", ":")
        ).encode("utf-8")
        if len(data) > self._max_size:
            raise CodecError(
                f"Encoded product with id={product.id} is {len(data)} bytes, "
                f"exceeding the {self._max_size}-byte limit"
            )
        return data

    def decode(self, data: bytes) -> Product:
        if len(data) > self._max_size:
            raise CodecError(
                f"Stored record is {len(data)} bytes, exceeding the {self._max_size}-byte limit"
            )
        try:
            return self._to_domain(json.loads(data.decode("utf-8")))
        except (ValueError, KeyError, TypeError) as exc:
            raise CodecError(f"Cannot decode product record: {exc}") from exc

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "id": product.id,
            "name": product.name,
            "category": product.category.value,
            "quantity": product.quantity,
            "created_at": product.created_at.isoformat(),
            "updated_at": product.updated_at.isoformat() if product.updated_at else None,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        product_id = int(raw["id"])
        if not 0 <= product_id <= MAX_ID:
            raise CodecError(f"Stored id {product_id} is out of range")
        quantity = int(raw["quantity"])
        if not 0 <= quantity <= MAX_QUANTITY:
            raise CodecError(
                f"Stored quantity {quantity} for product with id={product_id} is out of range"
            )
        updated_at = raw["updated_at"]
        return Product(
            id=product_id,
            name=raw["name"],
            category=Category(raw["category"]),
            quantity=quantity,
            created_at=datetime.fromisoformat(raw["created_at"]),
            updated_at=datetime.fromisoformat(updated_at) if updated_at is not None else None,
        )
