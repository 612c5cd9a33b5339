"""Builders for domain test data."""

from __future__ import annotations

import uuid
from decimal import Decimal

from dms.domain.model.discount import PercentageBasedDiscount, QuantityBasedDiscount
from dms.domain.model.product import Product
from dms.domain.model.value_objects import Currency

PRODUCT_ID = "11111111-1111-1111-1111-111111111111"


def build_currency(code: str = "EUR", fraction_digits: int = 2) -> Currency:
    return Currency(code=code, fraction_digits=fraction_digits, id=str(uuid.uuid4()))


def build_percentage_discount(rate: int) -> PercentageBasedDiscount:
    return PercentageBasedDiscount(id=str(uuid.uuid4()), percentage_rate=rate)


def build_quantity_discount(
    rate: int, lower: int, upper: int | None
) -> QuantityBasedDiscount:
    return QuantityBasedDiscount(
        id=str(uuid.uuid4()),
        percentage_rate=rate,
        lower_items_threshold=lower,
        upper_items_threshold=upper,
    )


def build_product(
    price: str = "1000.00",
    currency: Currency | None = None,
    percentage_discount: PercentageBasedDiscount | None = None,
    quantity_discounts: list[QuantityBasedDiscount] | None = None,
    product_id: str = PRODUCT_ID,
) -> Product:
    return Product(
        id=product_id,
        name="NAME",
        description="DESCRIPTION",
        price=Decimal(price),
        currency=currency or build_currency(),
        percentage_based_discount=percentage_discount,
        quantity_based_discounts=frozenset(quantity_discounts or []),
    )
