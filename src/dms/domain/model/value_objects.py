"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from decimal import (
    MAX_PREC,
    ROUND_HALF_UP,
    Context,
    Decimal,
    InvalidOperation,
    localcontext,
)
from typing import Iterator

from dms.domain.exceptions import InvalidQuantityError, ValidationError


@contextmanager
def exact_arithmetic() -> Iterator[Context]:
    """Decimal context in which +, -, * and scaleb never round.

    Only exact operations may run inside it: an inexact division would
    try to expand to MAX_PREC digits.
    """
    with localcontext() as ctx:
        ctx.prec = MAX_PREC
        yield ctx


@dataclass(frozen=True)
class Currency:
    """A currency and the precision its amounts are rounded to.

    All monetary rounding goes through ``round`` and ``divide`` and is
    always ROUND_HALF_UP, never the Decimal default of ROUND_HALF_EVEN.
    """

    code: str
    fraction_digits: int
    id: str | None = None

    def __post_init__(self) -> None:
        if not self.code or not self.code.strip():
            raise ValidationError("Currency code is required")
        if isinstance(self.fraction_digits, bool) or not isinstance(self.fraction_digits, int):
            raise ValidationError(
                f"Currency fraction digits must be an integer, got {type(self.fraction_digits).__name__}"
            )
        if self.fraction_digits < 0:
            raise ValidationError(
                f"Currency fraction digits cannot be negative, got {self.fraction_digits}"
            )

    @property
    def exponent(self) -> Decimal:
        return Decimal(1).scaleb(-self.fraction_digits)

    def round(self, amount: Decimal) -> Decimal:
        """Round ``amount`` half-up to this currency's fraction digits."""
        with exact_arithmetic():
            return amount.quantize(self.exponent, rounding=ROUND_HALF_UP)

    def divide(self, amount: Decimal, divisor: int) -> Decimal:
        """Divide a non-negative ``amount`` by ``divisor``, rounding half-up.

        Done on integer minor units so the quotient is rounded exactly
        once, whatever the size of ``amount``.
        """
        with exact_arithmetic():
            units = int(self.round(amount).scaleb(self.fraction_digits))
            quotient, remainder = divmod(units, divisor)
            if 2 * remainder >= divisor:
                quotient += 1
            return Decimal(quotient).scaleb(-self.fraction_digits)

    def format(self, amount: Decimal) -> str:
        return f"{self.round(amount)} {self.code}"

    def __str__(self) -> str:
        return self.code


@dataclass(frozen=True)
class Quantity:
    """A positive integer quantity of product items."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise InvalidQuantityError(
                f"Product quantity must be an integer, got {type(self.value).__name__}"
            )
        if self.value <= 0:
            raise InvalidQuantityError()

    def __str__(self) -> str:
        return str(self.value)


def to_decimal(amount: str | int | Decimal) -> Decimal:
    """Coerce a stored amount to Decimal without passing through float."""
    if isinstance(amount, float):
        raise ValidationError(f"Monetary amounts must not be floats, got {amount!r}")
    try:
        value = Decimal(str(amount))
    except (InvalidOperation, ValueError) as exc:
        raise ValidationError(f"Invalid money amount: {amount!r}") from exc
    if not value.is_finite():
        raise ValidationError(f"Invalid money amount: {amount!r}")
    return value
