"""Shared fixtures for infrastructure tests."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

LAPTOP_ID = "80280a99-7426-4e8d-9706-0387e754d790"
MONITOR_ID = "3c1f9a52-8d47-4e0b-a6c3-1b2d5e8f7a10"
PERCENTAGE_DISCOUNT_ID = "93a92164-a1d0-4c15-aaeb-2022d4b31440"
QUANTITY_DISCOUNT_ID_1 = "1b49c8fc-f01c-4f1d-aff6-402b9c4d5abf"
QUANTITY_DISCOUNT_ID_2 = "0d4731ab-4697-46b9-b7d6-f99f6d20096e"


def catalog() -> dict:
    return {
        "currencies": [
            {"id": "cur-usd", "code": "USD", "fraction_digits": 2},
            {"id": "cur-eur", "code": "EUR", "fraction_digits": 2},
        ],
        "products": [
            {
                "id": LAPTOP_ID,
                "name": "Laptop",
                "description": "15-inch laptop",
                "price": "2999.99",
                "currency": "USD",
                "percentage_based_discount": {
                    "id": PERCENTAGE_DISCOUNT_ID,
                    "percentage_rate": 10,
                },
                "quantity_based_discounts": [
                    {
                        "id": QUANTITY_DISCOUNT_ID_1,
                        "percentage_rate": 10,
                        "lower_items_threshold": 3,
                        "upper_items_threshold": 5,
                    },
                    {
                        "id": QUANTITY_DISCOUNT_ID_2,
                        "percentage_rate": 30,
                        "lower_items_threshold": 6,
                        "upper_items_threshold": None,
                    },
                ],
            },
            {
                "id": MONITOR_ID,
                "name": "Monitor",
                "price": "1000",
                "currency": "EUR",
            },
        ],
    }


@pytest.fixture
def data_file(tmp_path: Path) -> Path:
    path = tmp_path / "products.json"
    path.write_text(json.dumps(catalog()), encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def restore_root_logger():
    """The CLI reconfigures the root logger; undo that after each test."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
