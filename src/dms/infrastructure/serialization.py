"""JSON wire mapping for product and price DTOs.

Field names follow the public ``/v1/product`` API. Decimal amounts are
emitted as strings so their scale ("1000.00", "1000.000") survives.
"""

from __future__ import annotations

import json
from typing import Any

from dms.application.dto import (
    DiscountDTO,
    ProductDTO,
    ProductPriceDTO,
    QuantityBasedDiscountDTO,
)


def discount_to_json(discount: DiscountDTO) -> dict[str, Any]:
    data: dict[str, Any] = {
        "id": discount.id,
        "percentageRate": discount.percentage_rate,
    }
    if isinstance(discount, QuantityBasedDiscountDTO):
        data["lowerItemsThreshold"] = discount.lower_items_threshold
        data["upperItemsThreshold"] = discount.upper_items_threshold
    return data


def product_to_json(dto: ProductDTO) -> dict[str, Any]:
    return {
        "id": dto.id,
        "name": dto.name,
        "description": dto.description,
        "price": str(dto.price),
        "currency": dto.currency,
        "discounts": [discount_to_json(d) for d in dto.discounts],
    }


def price_to_json(dto: ProductPriceDTO) -> dict[str, Any]:
    return {
        "productId": dto.product_id,
        "productQuantity": dto.product_quantity,
        "totalPrice": str(dto.total_price),
        "itemPrice": str(dto.item_price),
        "baseItemPrice": str(dto.base_item_price),
        "currency": dto.currency,
        "appliedDiscounts": [discount_to_json(d) for d in dto.applied_discounts],
    }


def dumps(data: Any) -> str:
    return json.dumps(data, indent=2)
