"""Unit tests for payload validation and payload construction."""

import pytest

from stockroom.application.dto import ProductPayload, StockPayload, parse_category
from stockroom.application.validation import validate_product_payload, validate_stock_payload
from stockroom.domain.exceptions import InvalidOperationError
from stockroom.domain.model.product import MAX_QUANTITY, Category


class TestProductPayloadValidation:

    def test_valid_payload_passes(self):
        validate_product_payload(ProductPayload("Bread", 10, Category.BAKERY))

    @pytest.mark.parametrize("name", ["", "   ", "\t\n"])
    def test_blank_name_rejected(self, name):
        with pytest.raises(InvalidOperationError, match="name cannot be empty"):
            validate_product_payload(ProductPayload(name, 5))

    def test_long_name_accepted(self):
        validate_product_payload(ProductPayload("B" * 200, 1))

    @pytest.mark.parametrize("quantity", [0, -1])
    def test_non_positive_quantity_rejected(self, quantity):
        with pytest.raises(InvalidOperationError, match="greater than zero"):
            validate_product_payload(ProductPayload("Bread", quantity))

    def test_quantity_above_maximum_rejected(self):
        with pytest.raises(InvalidOperationError, match="cannot exceed"):
            validate_product_payload(ProductPayload("Bread", MAX_QUANTITY + 1))

    def test_non_integer_quantity_rejected(self):
        with pytest.raises(InvalidOperationError, match="must be an integer"):
            validate_product_payload(ProductPayload("Bread", 2.5))

    def test_bool_quantity_rejected(self):
        with pytest.raises(InvalidOperationError, match="must be an integer"):
            validate_product_payload(ProductPayload("Bread", True))


class TestStockPayloadValidation:

    def test_positive_amount_passes(self):
        validate_stock_payload(StockPayload(1))

    @pytest.mark.parametrize("amount", [0, -3])
    def test_non_positive_amount_rejected(self, amount):
        with pytest.raises(InvalidOperationError, match="Stock amount must be greater than zero"):
            validate_stock_payload(StockPayload(amount))


class TestPayloadConstruction:

    def test_category_defaults_to_bakery(self):
        assert ProductPayload("Bread", 1).category is Category.BAKERY
        assert ProductPayload.of("Bread", 1).category is Category.BAKERY

    def test_category_parsed_case_insensitively(self):
        assert ProductPayload.of("Muffin", 1, "cookies").category is Category.COOKIES

    def test_category_member_passes_through(self):
        assert parse_category(Category.CAKE) is Category.CAKE

    def test_unknown_category_rejected(self):
        with pytest.raises(InvalidOperationError, match="Unknown category"):
            parse_category("Pastry")
