"""Payload validation shared by every write use case.

Creation and update payloads are checked by the same function, so both
paths enforce identical rules.
"""

from __future__ import annotations

from stockroom.application.dto import ProductPayload, StockPayload
from stockroom.domain.exceptions import InvalidOperationError
from stockroom.domain.model.product import MAX_QUANTITY, Category


def validate_product_payload(payload: ProductPayload) -> None:
    if not isinstance(payload.name, str) or not payload.name.strip():
        raise InvalidOperationError("Product name cannot be empty.")
    _check_positive(payload.quantity, "Product quantity")
    if not isinstance(payload.category, Category):
        raise InvalidOperationError(f"Unknown category {payload.category!r}.")


def validate_stock_payload(payload: StockPayload) -> None:
    _check_positive(payload.amount, "Stock amount")


def _check_positive(value: int, label: str) -> None:
    # bool is an int subclass but never a meaningful quantity
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidOperationError(f"{label} must be an integer, got {value!r}.")
    if value <= 0:
        raise InvalidOperationError(f"{label} must be greater than zero.")
    if value > MAX_QUANTITY:
        raise InvalidOperationError(f"{label} cannot exceed {MAX_QUANTITY}.")
