"""Application service: Get Product use case (query)."""

from __future__ import annotations

import logging

from dms.application.dto import ProductDTO, product_to_dto
from dms.domain.exceptions import ProductNotFoundError
from dms.domain.model.product import Product
from dms.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


def find_product(product_repo: ProductRepository, product_id: str) -> Product:
    """Load a product or raise ProductNotFoundError.

    Shared by every query that starts from a product identifier.
    """
    product = product_repo.get_by_id(product_id)
    if product is None:
        logger.error("Product with id '%s' not found.", product_id)
        raise ProductNotFoundError(product_id)
    logger.info("Found product with id '%s'.", product_id)
    return product


class GetProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str) -> ProductDTO:
        product = find_product(self._product_repo, product_id)
        return product_to_dto(product)
