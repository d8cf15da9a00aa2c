"""Integration tests for the AddQuantity and OffloadQuantity use cases."""

from datetime import datetime, timezone

import pytest

from stockroom.application.adjust_stock import AddQuantityHandler, OffloadQuantityHandler
from stockroom.application.dto import StockPayload
from stockroom.domain.exceptions import (
    EntityNotFoundError,
    InvalidOperationError,
    QuantityOverflowError,
)
from stockroom.domain.model.product import MAX_QUANTITY, Category, Product
from tests.fakes import FakeClock, FakeProductRepository

CREATED = datetime(2023, 6, 1, tzinfo=timezone.utc)


def _setup(quantity: int = 10):
    repo = FakeProductRepository([
        Product(id=1, name="Bread", category=Category.BAKERY, quantity=quantity, created_at=CREATED),
    ])
    clock = FakeClock()
    return AddQuantityHandler(repo, clock), OffloadQuantityHandler(repo, clock), repo


class TestAddQuantity:

    def test_increases_and_stamps_updated_at(self):
        add, _, repo = _setup(10)
        product = add.handle(1, StockPayload(5))
        assert product.quantity == 15
        assert product.updated_at is not None
        assert repo.get(1).quantity == 15

    def test_zero_amount_rejected(self):
        add, _, repo = _setup(10)
        with pytest.raises(InvalidOperationError, match="greater than zero"):
            add.handle(1, StockPayload(0))
        assert repo.get(1).quantity == 10

    def test_unknown_id_rejected(self):
        add, _, _ = _setup()
        with pytest.raises(EntityNotFoundError, match="Couldn't add quantity"):
            add.handle(2, StockPayload(1))

    def test_overflow_is_fatal_and_not_persisted(self):
        add, _, repo = _setup(MAX_QUANTITY)
        with pytest.raises(QuantityOverflowError):
            add.handle(1, StockPayload(1))
        assert repo.get(1).quantity == MAX_QUANTITY
        assert repo.insert_count == 0


class TestOffloadQuantity:

    def test_decreases_quantity(self):
        _, offload, repo = _setup(10)
        product = offload.handle(1, StockPayload(3))
        assert product.quantity == 7
        assert repo.get(1).quantity == 7

    def test_more_than_available_rejected_with_both_amounts(self):
        _, offload, repo = _setup(10)
        with pytest.raises(InvalidOperationError, match="Available: 10, Trying to offload: 15"):
            offload.handle(1, StockPayload(15))
        assert repo.get(1).quantity == 10
        assert repo.insert_count == 0

    def test_offload_from_zero_rejected(self):
        _, offload, repo = _setup(1)
        offload.handle(1, StockPayload(1))
        with pytest.raises(InvalidOperationError, match="quantity is 0"):
            offload.handle(1, StockPayload(1))
        assert repo.get(1).quantity == 0

    def test_zero_amount_rejected(self):
        _, offload, _ = _setup(10)
        with pytest.raises(InvalidOperationError, match="greater than zero"):
            offload.handle(1, StockPayload(0))

    def test_unknown_id_rejected(self):
        _, offload, _ = _setup()
        with pytest.raises(EntityNotFoundError, match="Couldn't offload"):
            offload.handle(99, StockPayload(1))

    def test_offload_then_add_restores_quantity(self):
        add, offload, _ = _setup(10)
        offload.handle(1, StockPayload(4))
        assert add.handle(1, StockPayload(4)).quantity == 10
