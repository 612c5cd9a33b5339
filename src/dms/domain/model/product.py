"""Product aggregate.

Products are read-only here: records are populated by the persistence
layer and the pricing code never mutates them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal

from dms.domain.exceptions import ValidationError
from dms.domain.model.discount import (
    Discount,
    PercentageBasedDiscount,
    QuantityBasedDiscount,
)
from dms.domain.model.value_objects import Currency


@dataclass(frozen=True)
class Product:
    """A product in the catalog with its currency and discounts.

    ``price`` is the unrounded base unit price; rounding to the currency's
    precision only happens on output.
    """

    id: str
    price: Decimal
    currency: Currency
    name: str | None = None
    description: str | None = None
    percentage_based_discount: PercentageBasedDiscount | None = None
    quantity_based_discounts: frozenset[QuantityBasedDiscount] = field(
        default_factory=frozenset
    )

    def __post_init__(self) -> None:
        if not isinstance(self.price, Decimal):
            raise ValidationError(
                f"Product price must be a Decimal, got {type(self.price).__name__}"
            )
        if self.price < Decimal("0"):
            raise ValidationError(f"Product price cannot be negative, got {self.price}")
        # Accept any iterable (or None) from callers but store a frozenset
        discounts = self.quantity_based_discounts
        object.__setattr__(
            self, "quantity_based_discounts", frozenset(discounts or ())
        )

    @property
    def discounts(self) -> list[Discount]:
        """Every attached discount, percentage-based first."""
        result: list[Discount] = []
        if self.percentage_based_discount is not None:
            result.append(self.percentage_based_discount)
        result.extend(
            sorted(
                self.quantity_based_discounts,
                key=lambda d: (d.percentage_rate, d.lower_items_threshold, d.id),
            )
        )
        return result
