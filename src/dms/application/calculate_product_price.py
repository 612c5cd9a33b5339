"""Application service: Calculate Product Price use case (query)."""

from __future__ import annotations

import logging

from dms.application.dto import ProductPriceDTO, quote_to_dto
from dms.application.get_product import find_product
from dms.domain.exceptions import InvalidQuantityError
from dms.domain.model.value_objects import Quantity
from dms.domain.repository.product_repository import ProductRepository
from dms.domain.service.price_calculation_service import PriceCalculationService

logger = logging.getLogger(__name__)


class CalculateProductPriceHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        calculator: PriceCalculationService | None = None,
    ) -> None:
        self._product_repo = product_repo
        self._calculator = calculator or PriceCalculationService()

    def handle(self, product_id: str, product_quantity: int) -> ProductPriceDTO:
        """Quote the price of ``product_quantity`` items of a product.

        The quantity is validated before the product is looked up, so a
        bad quantity is reported even for an unknown product.
        """
        try:
            quantity = Quantity(product_quantity)
        except InvalidQuantityError as exc:
            logger.error("%s", exc)
            raise

        product = find_product(self._product_repo, product_id)
        quote = self._calculator.calculate(product, quantity)
        return quote_to_dto(quote)
