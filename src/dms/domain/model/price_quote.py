"""PriceQuote value object: the result of one price calculation."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from dms.domain.model.discount import Discount


@dataclass(frozen=True)
class PriceQuote:
    """Prices and applied discounts for one product and quantity."""

    product_id: str
    product_quantity: int
    total_price: Decimal
    item_price: Decimal
    base_item_price: Decimal
    currency_code: str
    applied_discounts: tuple[Discount, ...] = ()
