"""Product aggregate.

A product is the only record kind in the store. Its id is allocated once
and never changes; name, category and quantity change through the methods
below, each of which refreshes ``updated_at``.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from stockroom.domain.exceptions import InvalidOperationError, QuantityOverflowError

# Quantities and amounts are unsigned 32-bit values.
MAX_QUANTITY = 2**32 - 1


class Category(Enum):
    BAKERY = "Bakery"
    CAKE = "Cake"
    COOKIES = "Cookies"

    @classmethod
    def default(cls) -> Category:
        return cls.BAKERY


@dataclass
class Product:
    """Aggregate root for inventory records.

    Invariant: ``0 <= quantity <= MAX_QUANTITY``. Payload checks (non-empty
    name, positive amounts) happen in the application layer before any of
    these methods are called; the methods only guard what would corrupt the
    record itself.
    """

    id: int
    name: str
    category: Category
    quantity: int
    created_at: datetime
    updated_at: datetime | None = None

    def revise(self, name: str, category: Category, quantity: int, now: datetime) -> None:
        """Overwrite the descriptive fields, keeping id and ``created_at``."""
        self.name = name
        self.category = category
        self.quantity = quantity
        self.updated_at = now

    def add_stock(self, amount: int, now: datetime) -> None:
        new_quantity = self.quantity + amount
        if new_quantity > MAX_QUANTITY:
            raise QuantityOverflowError(
                f"Adding {amount} to product with id={self.id} would overflow "
                f"its quantity of {self.quantity}"
            )
        self.quantity = new_quantity
        self.updated_at = now

    def offload(self, amount: int, now: datetime) -> None:
        """Remove *amount* units from stock.

        Both checks run before the subtraction, so quantity never drops
        below zero.
        """
        if self.quantity == 0:
            raise InvalidOperationError(
                f"Product with id={self.id} cannot be offloaded because the quantity is 0"
            )
        if amount > self.quantity:
            raise InvalidOperationError(
                "Cannot offload more than available quantity. "
                f"Available: {self.quantity}, Trying to offload: {amount}"
            )
        self.quantity -= amount
        self.updated_at = now
