"""Abstract repository for Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Every method is keyed strictly by id: there are no scans
and no secondary indexes. Implementations must hand out copies, never
references to what they store.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from stockroom.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def get(self, product_id: int) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def insert(self, product: Product) -> None:
        """Persist a product at ``product.id``, overwriting any previous value."""

    @abstractmethod
    def remove(self, product_id: int) -> Product | None:
        """Delete a product and return its last value, or None if not found."""
