"""Tests for the JSON wire mapping."""

import json
from decimal import Decimal

from dms.application.dto import (
    PercentageBasedDiscountDTO,
    ProductDTO,
    ProductPriceDTO,
    QuantityBasedDiscountDTO,
)
from dms.infrastructure.serialization import dumps, price_to_json, product_to_json


def _discounts():
    return [
        PercentageBasedDiscountDTO(id="p", percentage_rate=10),
        QuantityBasedDiscountDTO(id="q", percentage_rate=30, lower_items_threshold=6, upper_items_threshold=None),
    ]


class TestSerialization:

    def test_product_shape(self):
        dto = ProductDTO(
            id="1",
            name=None,
            description="d",
            price=Decimal("1000.000"),
            currency="KWD",
            discounts=_discounts(),
        )
        data = product_to_json(dto)
        assert data == {
            "id": "1",
            "name": None,
            "description": "d",
            "price": "1000.000",
            "currency": "KWD",
            "discounts": [
                {"id": "p", "percentageRate": 10},
                {"id": "q", "percentageRate": 30, "lowerItemsThreshold": 6, "upperItemsThreshold": None},
            ],
        }

    def test_price_shape_keeps_decimal_scale(self):
        dto = ProductPriceDTO(
            product_id="1",
            product_quantity=3,
            total_price=Decimal("0.00"),
            item_price=Decimal("0.00"),
            base_item_price=Decimal("1000.00"),
            currency="EUR",
            applied_discounts=_discounts()[:1],
        )
        data = json.loads(dumps(price_to_json(dto)))
        assert data["productId"] == "1"
        assert data["productQuantity"] == 3
        assert data["totalPrice"] == "0.00"
        assert data["itemPrice"] == "0.00"
        assert data["baseItemPrice"] == "1000.00"
        assert data["currency"] == "EUR"
        assert data["appliedDiscounts"] == [{"id": "p", "percentageRate": 10}]
