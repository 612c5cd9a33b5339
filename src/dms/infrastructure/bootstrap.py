"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import os
from pathlib import Path

from dms.application.calculate_product_price import CalculateProductPriceHandler
from dms.application.get_product import GetProductHandler
from dms.application.list_products import ListProductsHandler
from dms.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)

DATA_FILE_ENV = "DMS_DATA_FILE"
LOG_LEVEL_ENV = "DMS_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


def data_file(override: str | Path | None = None) -> Path:
    """Explicit override first, then ``DMS_DATA_FILE``, then the bundled file."""
    if override:
        return Path(override)
    env_value = os.environ.get(DATA_FILE_ENV)
    if env_value:
        return Path(env_value)
    return _DATA_DIR / "products.json"


def product_repository(path: str | Path | None = None) -> JsonProductRepository:
    return JsonProductRepository(data_file(path))


def get_product_handler(path: str | Path | None = None) -> GetProductHandler:
    return GetProductHandler(product_repo=product_repository(path))


def calculate_product_price_handler(
    path: str | Path | None = None,
) -> CalculateProductPriceHandler:
    return CalculateProductPriceHandler(product_repo=product_repository(path))


def list_products_handler(path: str | Path | None = None) -> ListProductsHandler:
    return ListProductsHandler(product_repo=product_repository(path))
