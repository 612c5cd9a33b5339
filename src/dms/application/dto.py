"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Union

from dms.domain.model.discount import (
    Discount,
    PercentageBasedDiscount,
    QuantityBasedDiscount,
)
from dms.domain.model.price_quote import PriceQuote
from dms.domain.model.product import Product


@dataclass(frozen=True)
class PercentageBasedDiscountDTO:

    id: str
    percentage_rate: int


@dataclass(frozen=True)
class QuantityBasedDiscountDTO:

    id: str
    percentage_rate: int
    lower_items_threshold: int
    upper_items_threshold: int | None


DiscountDTO = Union[PercentageBasedDiscountDTO, QuantityBasedDiscountDTO]


@dataclass(frozen=True)
class ProductDTO:
    """Output: a product as displayed to the user."""

    id: str
    name: str | None
    description: str | None
    price: Decimal  # rounded to the currency's fraction digits
    currency: str
    discounts: list[DiscountDTO]


@dataclass(frozen=True)
class ProductPriceDTO:
    """Output: a calculated price quote."""

    product_id: str
    product_quantity: int
    total_price: Decimal
    item_price: Decimal
    base_item_price: Decimal
    currency: str
    applied_discounts: list[DiscountDTO]


# --- Mapping ------------------------------------------------------------------


def discount_to_dto(discount: Discount) -> DiscountDTO:
    if isinstance(discount, QuantityBasedDiscount):
        return QuantityBasedDiscountDTO(
            id=discount.id,
            percentage_rate=discount.percentage_rate,
            lower_items_threshold=discount.lower_items_threshold,
            upper_items_threshold=discount.upper_items_threshold,
        )
    if isinstance(discount, PercentageBasedDiscount):
        return PercentageBasedDiscountDTO(
            id=discount.id, percentage_rate=discount.percentage_rate
        )
    raise TypeError(f"Unknown discount type: {type(discount).__name__}")


def product_to_dto(product: Product) -> ProductDTO:
    return ProductDTO(
        id=product.id,
        name=product.name,
        description=product.description,
        price=product.currency.round(product.price),
        currency=product.currency.code,
        discounts=[discount_to_dto(d) for d in product.discounts],
    )


def quote_to_dto(quote: PriceQuote) -> ProductPriceDTO:
    return ProductPriceDTO(
        product_id=quote.product_id,
        product_quantity=quote.product_quantity,
        total_price=quote.total_price,
        item_price=quote.item_price,
        base_item_price=quote.base_item_price,
        currency=quote.currency_code,
        applied_discounts=[discount_to_dto(d) for d in quote.applied_discounts],
    )
