"""Data Transfer Objects: the payloads callers send with write operations.

Payloads are plain containers. Constructing one never fails on business
rules; validation runs separately (see ``validation.py``) so that id-keyed
operations can report a missing record before complaining about input.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from stockroom.domain.exceptions import InvalidOperationError
from stockroom.domain.model.product import Category


@dataclass(frozen=True)
class ProductPayload:
    """Input for creating or updating a product."""

    name: str
    quantity: int
    category: Category = field(default_factory=Category.default)

    @staticmethod
    def of(name: str, quantity: int, category: Category | str | None = None) -> ProductPayload:
        """Build a payload, coercing a category display name to ``Category``.

        A missing category falls back to the default (Bakery).
        """
        if category is None:
            return ProductPayload(name=name, quantity=quantity)
        return ProductPayload(name=name, quantity=quantity, category=parse_category(category))


@dataclass(frozen=True)
class StockPayload:
    """Input for increasing or decreasing stock."""

    amount: int


def parse_category(value: Category | str) -> Category:
    if isinstance(value, Category):
        return value
    for member in Category:
        if member.value.lower() == str(value).strip().lower():
            return member
    choices = ", ".join(c.value for c in Category)
    raise InvalidOperationError(f"Unknown category {value!r}. Expected one of: {choices}")
