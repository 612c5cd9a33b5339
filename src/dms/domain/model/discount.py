"""Discount value objects.

Exactly two kinds of discount exist. They share ``percentage_rate`` but are
kept as separate variants of a closed union rather than a class hierarchy,
so matching logic stays a flat comparison.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from dms.domain.exceptions import ValidationError


def _check_rate(rate: int) -> None:
    if isinstance(rate, bool) or not isinstance(rate, int):
        raise ValidationError(
            f"Discount percentage rate must be an integer, got {type(rate).__name__}"
        )
    if not 0 <= rate <= 100:
        raise ValidationError(
            f"Discount percentage rate must be between 0 and 100, got {rate}"
        )


@dataclass(frozen=True)
class PercentageBasedDiscount:
    """Unconditional discount. A product carries at most one."""

    id: str
    percentage_rate: int

    def __post_init__(self) -> None:
        _check_rate(self.percentage_rate)


@dataclass(frozen=True)
class QuantityBasedDiscount:
    """Discount applicable when the purchased quantity falls in a range.

    Both thresholds are inclusive. ``upper_items_threshold`` of None means
    the range is unbounded above; it is never treated as zero.
    """

    id: str
    percentage_rate: int
    lower_items_threshold: int
    upper_items_threshold: int | None = None

    def __post_init__(self) -> None:
        _check_rate(self.percentage_rate)
        if self.lower_items_threshold < 0:
            raise ValidationError(
                f"Lower items threshold cannot be negative, got {self.lower_items_threshold}"
            )
        if (
            self.upper_items_threshold is not None
            and self.lower_items_threshold >= self.upper_items_threshold
        ):
            raise ValidationError(
                "Lower items threshold must be less than upper items threshold "
                f"({self.lower_items_threshold} >= {self.upper_items_threshold})"
            )

    @property
    def is_unbounded(self) -> bool:
        return self.upper_items_threshold is None

    def matches(self, quantity: int) -> bool:
        if quantity < self.lower_items_threshold:
            return False
        return self.is_unbounded or quantity <= self.upper_items_threshold  # type: ignore[operator]


Discount = Union[PercentageBasedDiscount, QuantityBasedDiscount]
