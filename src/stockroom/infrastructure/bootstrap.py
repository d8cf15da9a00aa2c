"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions. Each call to
``inventory_service`` builds one self-contained object graph; nothing is
kept in module-level state.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from stockroom.application.inventory_service import InventoryService
from stockroom.domain.service.id_allocator import IdAllocator
from stockroom.infrastructure.persistence.codec import ProductCodec
from stockroom.infrastructure.persistence.json_storage import JsonCounterCell, JsonRecordMap
from stockroom.infrastructure.persistence.stable_product_repository import (
    StableProductRepository,
)
from stockroom.infrastructure.persistence.store_lock import store_lock
from stockroom.infrastructure.settings import Settings

COUNTER_FILE = "id_counter.json"
PRODUCTS_FILE = "products.json"


def id_allocator(settings: Settings) -> IdAllocator:
    return IdAllocator(JsonCounterCell(settings.data_dir / COUNTER_FILE))


def product_repository(settings: Settings) -> StableProductRepository:
    return StableProductRepository(
        JsonRecordMap(settings.data_dir / PRODUCTS_FILE), ProductCodec()
    )


def inventory_service(settings: Settings | None = None) -> InventoryService:
    """Build a service without locking; the caller must be the only user."""
    settings = settings or Settings.from_env()
    return InventoryService(
        product_repo=product_repository(settings),
        id_allocator=id_allocator(settings),
    )


@contextmanager
def open_inventory(settings: Settings | None = None) -> Iterator[InventoryService]:
    """Yield a service holding the data directory's exclusive lock.

    Other processes opening the same directory wait until the block exits.
    """
    settings = settings or Settings.from_env()
    with store_lock(settings.data_dir):
        yield inventory_service(settings)
