"""
Tests for Pydantic models and the product catalog
"""

import json
from decimal import Decimal

import pytest
from pydantic import ValidationError

from shopcart.routers.models import CartItemRequest, RemoveCartItemRequest
from shopcart.services.catalog import DEFAULT_PRODUCTS, ProductCatalog
from shopcart.services.models import Product
from shopcart.services.money import round_money, to_decimal, to_float


class TestProduct:
    """Tests for Product model."""

    def test_price_converted_to_decimal(self):
        product = Product(id=1, name="Mug", price=7.5, stock=2)

        assert product.price == Decimal("7.5")
        assert isinstance(product.price, Decimal)

    def test_stock_defaults_to_zero(self):
        assert Product(id=1, name="Mug", price="1.00").stock == 0

    @pytest.mark.parametrize("field, value", [("price", -1), ("stock", -1)])
    def test_negative_values_rejected(self, field, value):
        data = {"id": 1, "name": "Mug", "price": 1, "stock": 1}
        data[field] = value

        with pytest.raises(ValidationError):
            Product(**data)

    @pytest.mark.parametrize("price", ["10,00", "abc", "", None])
    def test_malformed_price_rejected(self, price):
        """A bad catalog price must not load as a free product."""
        with pytest.raises(ValidationError):
            ProductCatalog.from_dicts([{"id": 1, "name": "Mug", "price": price, "stock": 5}])


class TestCatalog:
    """Tests for ProductCatalog."""

    @pytest.mark.asyncio
    async def test_get_by_id(self, catalog):
        product = await catalog.get_by_id(3)

        assert product.name == "Enamel Pin"
        assert await catalog.get_by_id(9999) is None

    @pytest.mark.asyncio
    async def test_get_all_sorted(self):
        catalog = ProductCatalog.from_dicts([
            {"id": 5, "name": "B", "price": 1, "stock": 1},
            {"id": 2, "name": "A", "price": 1, "stock": 1},
        ])

        assert [p.id for p in await catalog.get_all()] == [2, 5]

    @pytest.mark.asyncio
    async def test_set_stock(self, catalog):
        updated = await catalog.set_stock(1, 3)

        assert updated.stock == 3
        assert (await catalog.get_by_id(1)).stock == 3

    @pytest.mark.asyncio
    async def test_set_stock_rejects_negative(self, catalog):
        with pytest.raises(ValueError):
            await catalog.set_stock(1, -1)

    @pytest.mark.asyncio
    async def test_from_file(self, tmp_path):
        path = tmp_path / "catalog.json"
        path.write_text(json.dumps(DEFAULT_PRODUCTS), encoding="utf-8")

        catalog = ProductCatalog.from_file(path)

        assert len(catalog) == len(DEFAULT_PRODUCTS)
        assert (await catalog.get_by_id(1)).price == Decimal("10.00")

    def test_from_file_requires_list(self, tmp_path):
        path = tmp_path / "catalog.json"
        path.write_text(json.dumps({"id": 1}), encoding="utf-8")

        with pytest.raises(ValueError):
            ProductCatalog.from_file(path)


class TestRequestModels:
    """Tests for cart request bodies."""

    def test_camel_case_alias(self):
        request = CartItemRequest.model_validate({"productId": 1, "quantity": 3})

        assert request.product_id == 1
        assert request.quantity == 3

    def test_quantity_defaults_to_one(self):
        assert CartItemRequest.model_validate({"productId": 1}).quantity == 1

    def test_zero_quantity_left_to_cart_rules(self):
        assert CartItemRequest.model_validate({"productId": 1, "quantity": 0}).quantity == 0

    @pytest.mark.parametrize("payload", [
        {"productId": 1, "quantity": True},
        {"productId": 1, "quantity": "2"},
        {"productId": "1", "quantity": 1},
    ])
    def test_no_coercion_to_int(self, payload):
        with pytest.raises(ValidationError):
            CartItemRequest.model_validate(payload)

    def test_remove_requires_product_id(self):
        with pytest.raises(ValidationError):
            RemoveCartItemRequest.model_validate({})


class TestMoney:
    """Tests for money helpers."""

    @pytest.mark.parametrize("value, expected", [
        (None, Decimal("0")),
        ("abc", Decimal("0")),
        (0.1, Decimal("0.1")),
        ("2.50", Decimal("2.50")),
    ])
    def test_to_decimal(self, value, expected):
        assert to_decimal(value) == expected

    def test_round_money(self):
        assert round_money("2.345") == Decimal("2.35")

    def test_to_float(self):
        assert to_float(Decimal("22.50")) == 22.5
