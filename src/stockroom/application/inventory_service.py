"""The store's boundary operations.

``InventoryService`` owns the repository and allocator for one store and
routes each external call to its use-case handler. Reads and writes are
kept apart the way a remote caller sees them: ``get_product`` and
``get_stock`` never modify state.
"""

from __future__ import annotations

from stockroom.application.add_product import AddProductHandler
from stockroom.application.adjust_stock import AddQuantityHandler, OffloadQuantityHandler
from stockroom.application.clock import Clock, utc_now
from stockroom.application.dto import ProductPayload, StockPayload
from stockroom.application.get_product import GetProductHandler, GetStockHandler
from stockroom.application.remove_product import RemoveProductHandler
from stockroom.application.update_product import UpdateProductHandler
from stockroom.domain.model.product import Product
from stockroom.domain.repository.product_repository import ProductRepository
from stockroom.domain.service.id_allocator import IdAllocator


class InventoryService:

    def __init__(
        self,
        product_repo: ProductRepository,
        id_allocator: IdAllocator,
        clock: Clock = utc_now,
    ) -> None:
        self._get_product = GetProductHandler(product_repo)
        self._get_stock = GetStockHandler(product_repo)
        self._add_product = AddProductHandler(product_repo, id_allocator, clock)
        self._update_product = UpdateProductHandler(product_repo, clock)
        self._add_quantity = AddQuantityHandler(product_repo, clock)
        self._offload_quantity = OffloadQuantityHandler(product_repo, clock)
        self._remove_product = RemoveProductHandler(product_repo)

    # --- Queries --------------------------------------------------------------

    def get_product(self, product_id: int) -> Product:
        return self._get_product.handle(product_id)

    def get_stock(self, product_id: int) -> int:
        return self._get_stock.handle(product_id)

    # --- Commands -------------------------------------------------------------

    def add_product(self, payload: ProductPayload) -> Product:
        return self._add_product.handle(payload)

    def update_product(self, product_id: int, payload: ProductPayload) -> Product:
        return self._update_product.handle(product_id, payload)

    def add_quantity(self, product_id: int, payload: StockPayload) -> Product:
        return self._add_quantity.handle(product_id, payload)

    def offload_quantity(self, product_id: int, payload: StockPayload) -> Product:
        return self._offload_quantity.handle(product_id, payload)

    def remove_product(self, product_id: int) -> Product:
        return self._remove_product.handle(product_id)
