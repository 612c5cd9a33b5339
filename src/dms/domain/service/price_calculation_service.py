"""Domain service: Price Calculation.

Selects the discounts that apply to a product for a requested quantity
and computes the discounted total and per-item prices.

The calculation is a pure function of ``(product, quantity)``:
  1. The percentage-based discount, if attached, always applies.
  2. Among quantity-based discounts whose inclusive range contains the
     quantity, the one with the highest rate applies.
  3. A combined rate of 100% or more yields a total of exactly zero.
  4. The total is rounded half-up to the currency's fraction digits; the
     item price is that rounded total divided by the quantity, rounded
     half-up again.
"""

from __future__ import annotations

import logging
from decimal import Decimal

from dms.domain.model.discount import Discount, QuantityBasedDiscount
from dms.domain.model.price_quote import PriceQuote
from dms.domain.model.product import Product
from dms.domain.model.value_objects import Quantity, exact_arithmetic

logger = logging.getLogger(__name__)

ONE_HUNDRED = 100


class PriceCalculationService:

    def calculate(self, product: Product, quantity: Quantity) -> PriceQuote:
        currency = product.currency
        applied: list[Discount] = []
        discount_rate = 0

        percentage_discount = product.percentage_based_discount
        if percentage_discount is not None:
            logger.info(
                "Found matching percentage based discount for product with id '%s' "
                "with rate of '%d'%%.",
                product.id,
                percentage_discount.percentage_rate,
            )
            discount_rate += percentage_discount.percentage_rate
            applied.append(percentage_discount)

        quantity_discount = self.matching_quantity_discount(product, quantity)
        if quantity_discount is not None:
            logger.info(
                "Found matching quantity based discount for product with id '%s' "
                "with rate of '%d'%%.",
                product.id,
                quantity_discount.percentage_rate,
            )
            discount_rate += quantity_discount.percentage_rate
            applied.append(quantity_discount)

        total_price = self._discounted_total(product, quantity, discount_rate)
        item_price = currency.divide(total_price, quantity.value)

        logger.info(
            "Product price calculated for product with id '%s' and quantity '%s', "
            "total price is '%s' and item price is '%s'.",
            product.id,
            quantity,
            currency.format(total_price),
            currency.format(item_price),
        )
        return PriceQuote(
            product_id=product.id,
            product_quantity=quantity.value,
            total_price=total_price,
            item_price=item_price,
            base_item_price=currency.round(product.price),
            currency_code=currency.code,
            applied_discounts=tuple(applied),
        )

    @staticmethod
    def matching_quantity_discount(
        product: Product, quantity: Quantity
    ) -> QuantityBasedDiscount | None:
        """Return the highest-rate quantity discount whose range holds ``quantity``.

        When several matches share the top rate, which one is returned is
        unspecified (it follows set iteration order); only the rate affects
        the calculated prices.
        """
        matching = [
            discount
            for discount in product.quantity_based_discounts
            if discount.matches(quantity.value)
        ]
        if not matching:
            return None
        return max(matching, key=lambda discount: discount.percentage_rate)

    @staticmethod
    def _discounted_total(product: Product, quantity: Quantity, discount_rate: int) -> Decimal:
        currency = product.currency
        if discount_rate >= ONE_HUNDRED:
            logger.info(
                "Product discounts sum to equals to or more than 100%, returning price of zero."
            )
            return currency.round(Decimal(0))

        with exact_arithmetic():
            total_price = product.price * quantity.value
            discount = (total_price * discount_rate).scaleb(-2)
            discounted_price = total_price - discount
        return currency.round(discounted_price)
