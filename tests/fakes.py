"""In-memory fakes for testing.

These implement the same abstract interfaces as the JSON-backed
implementations but keep everything in a dict. No file I/O, no side
effects. The fake repository stores copies so tests catch any handler
that relies on aliasing stored records.
"""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timedelta, timezone

from stockroom.domain.exceptions import StorageError
from stockroom.domain.model.product import Product
from stockroom.domain.repository.product_repository import ProductRepository
from stockroom.domain.repository.storage import CounterCell, RecordMap


class FakeCounterCell(CounterCell):

    def __init__(self, value: int = 0) -> None:
        self.value = value
        self.fail_writes = False

    def get(self) -> int:
        return self.value

    def set(self, value: int) -> None:
        if self.fail_writes:
            raise StorageError("counter write failed")
        self.value = value


class FakeRecordMap(RecordMap):

    def __init__(self) -> None:
        self._store: dict[int, bytes] = {}

    def get(self, key: int) -> bytes | None:
        return self._store.get(key)

    def insert(self, key: int, value: bytes) -> None:
        self._store[key] = value

    def remove(self, key: int) -> bytes | None:
        return self._store.pop(key, None)


class FakeProductRepository(ProductRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._store: dict[int, Product] = {}
        self.insert_count = 0
        for p in products or []:
            self._store[p.id] = replace(p)

    def get(self, product_id: int) -> Product | None:
        product = self._store.get(product_id)
        return replace(product) if product is not None else None

    def insert(self, product: Product) -> None:
        self.insert_count += 1
        self._store[product.id] = replace(product)

    def remove(self, product_id: int) -> Product | None:
        return self._store.pop(product_id, None)


class FakeClock:
    """Deterministic clock that advances one second per reading."""

    def __init__(self, start: datetime | None = None) -> None:
        self.now = start or datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        current = self.now
        self.now = self.now + timedelta(seconds=1)
        return current
