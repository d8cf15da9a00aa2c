"""ProductRepository built on a durable RecordMap.

Products are encoded with ProductCodec before they reach the map and
decoded on the way out, so every read returns a fresh object and callers
can never alias stored state.
"""

from __future__ import annotations

from stockroom.domain.exceptions import CodecError
from stockroom.domain.model.product import Product
from stockroom.domain.repository.product_repository import ProductRepository
from stockroom.domain.repository.storage import RecordMap
from stockroom.infrastructure.persistence.codec import ProductCodec


class StableProductRepository(ProductRepository):

    def __init__(self, records: RecordMap, codec: ProductCodec | None = None) -> None:
        self._records = records
        self._codec = codec or ProductCodec()

    def get(self, product_id: int) -> Product | None:
        data = self._records.get(product_id)
        if data is None:
            return None
        return self._decode(product_id, data)

    def insert(self, product: Product) -> None:
        self._records.insert(product.id, self._codec.encode(product))

    def remove(self, product_id: int) -> Product | None:
        # Decode first so a corrupt record is reported before it is deleted.
        product = self.get(product_id)
        if product is None:
            return None
        self._records.remove(product_id)
        return product

    def _decode(self, product_id: int, data: bytes) -> Product:
        product = self._codec.decode(data)
        if product.id != product_id:
            raise CodecError(f"Record stored under id={product_id} carries id={product.id}")
        return product
