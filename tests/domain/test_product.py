"""Unit tests for the Product aggregate."""

from decimal import Decimal

import pytest

from dms.domain.exceptions import ValidationError
from dms.domain.model.product import Product
from dms.domain.model.value_objects import Currency
from tests.builders import build_percentage_discount, build_product, build_quantity_discount


class TestProduct:

    def test_optional_fields_default_to_absent(self):
        p = Product(id="p1", price=Decimal("10"), currency=Currency("USD", 2))
        assert p.name is None
        assert p.description is None
        assert p.percentage_based_discount is None
        assert p.quantity_based_discounts == frozenset()

    def test_none_quantity_discounts_treated_as_empty(self):
        p = Product(
            id="p1",
            price=Decimal("10"),
            currency=Currency("USD", 2),
            quantity_based_discounts=None,  # type: ignore[arg-type]
        )
        assert p.quantity_based_discounts == frozenset()
        assert p.discounts == []

    def test_list_of_discounts_stored_as_frozenset(self):
        q = build_quantity_discount(15, 3, 5)
        p = Product(
            id="p1",
            price=Decimal("10"),
            currency=Currency("USD", 2),
            quantity_based_discounts=[q, q],  # type: ignore[arg-type]
        )
        assert p.quantity_based_discounts == frozenset({q})

    def test_negative_price_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            build_product(price="-0.01")

    def test_float_price_rejected(self):
        with pytest.raises(ValidationError, match="must be a Decimal"):
            Product(id="p1", price=9.99, currency=Currency("USD", 2))  # type: ignore[arg-type]

    def test_is_immutable(self):
        p = build_product()
        with pytest.raises(AttributeError):
            p.price = Decimal("1")  # type: ignore[misc]


class TestProductDiscounts:

    def test_percentage_discount_listed_first_then_by_rate(self):
        pct = build_percentage_discount(10)
        q20 = build_quantity_discount(20, 6, None)
        q15 = build_quantity_discount(15, 3, 5)
        p = build_product(percentage_discount=pct, quantity_discounts=[q20, q15])
        assert p.discounts == [pct, q15, q20]

    def test_only_quantity_discounts(self):
        q15 = build_quantity_discount(15, 3, 5)
        p = build_product(quantity_discounts=[q15])
        assert p.discounts == [q15]
