"""JSON-file-backed implementation of ProductRepository.

The file holds currencies and products side by side; products refer to
their currency by code. The repository only reads.
"""

from __future__ import annotations

import json
from pathlib import Path

from dms.domain.exceptions import DomainException, RepositoryError
from dms.domain.model.discount import PercentageBasedDiscount, QuantityBasedDiscount
from dms.domain.model.product import Product
from dms.domain.model.value_objects import Currency, to_decimal
from dms.domain.repository.product_repository import ProductRepository


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: str) -> Product | None:
        return self._load().get(product_id)

    def list_all(self) -> list[Product]:
        return list(self._load().values())

    # --- Deserialization ------------------------------------------------------

    def _load(self) -> dict[str, Product]:
        raw = self._load_raw()
        try:
            currencies = {
                c["code"]: self._to_currency(c) for c in raw.get("currencies", [])
            }
            products = {}
            for item in raw.get("products", []):
                product = self._to_domain(item, currencies)
                products[product.id] = product
        except RepositoryError:
            raise
        except (KeyError, TypeError) as exc:
            raise RepositoryError(
                f"Malformed product data in {self._file_path}: {exc!r}"
            ) from exc
        except DomainException as exc:
            raise RepositoryError(
                f"Invalid product data in {self._file_path}: {exc}"
            ) from exc
        return products

    @staticmethod
    def _to_currency(raw: dict) -> Currency:
        return Currency(
            code=raw["code"],
            fraction_digits=raw["fraction_digits"],
            id=raw.get("id"),
        )

    @staticmethod
    def _to_domain(raw: dict, currencies: dict[str, Currency]) -> Product:
        code = raw["currency"]
        if code not in currencies:
            raise RepositoryError(
                f"Product '{raw['id']}' references unknown currency '{code}'"
            )

        percentage = raw.get("percentage_based_discount")
        return Product(
            id=raw["id"],
            name=raw.get("name"),
            description=raw.get("description"),
            price=to_decimal(raw["price"]),
            currency=currencies[code],
            percentage_based_discount=(
                PercentageBasedDiscount(
                    id=percentage["id"],
                    percentage_rate=percentage["percentage_rate"],
                )
                if percentage is not None
                else None
            ),
            quantity_based_discounts=frozenset(
                QuantityBasedDiscount(
                    id=d["id"],
                    percentage_rate=d["percentage_rate"],
                    lower_items_threshold=d["lower_items_threshold"],
                    upper_items_threshold=d.get("upper_items_threshold"),
                )
                for d in raw.get("quantity_based_discounts") or []
            ),
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> dict:
        try:
            text = self._file_path.read_text(encoding="utf-8")
        except OSError as exc:
            raise RepositoryError(
                f"Product data file {self._file_path} cannot be read: {exc.strerror or exc}"
            ) from exc
        try:
            raw = json.loads(text)
        except json.JSONDecodeError as exc:
            raise RepositoryError(
                f"Product data file {self._file_path} is not valid JSON: {exc}"
            ) from exc
        if not isinstance(raw, dict):
            raise RepositoryError(
                f"Product data file {self._file_path} must contain a JSON object"
            )
        return raw
