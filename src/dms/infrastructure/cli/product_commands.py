"""CLI commands for the Product aggregate."""

from __future__ import annotations

from typing import NoReturn

import click

from dms.application.dto import (
    DiscountDTO,
    ProductDTO,
    ProductPriceDTO,
    QuantityBasedDiscountDTO,
)
from dms.domain.exceptions import (
    DomainException,
    EntityNotFoundError,
    ValidationError,
)
from dms.infrastructure.bootstrap import (
    calculate_product_price_handler,
    get_product_handler,
    list_products_handler,
)
from dms.infrastructure.serialization import dumps, price_to_json, product_to_json


class NotFoundException(click.ClickException):
    """Missing entity; exits with 4, the CLI analogue of HTTP 404."""

    exit_code = 4


def _raise_for(exc: DomainException, param_hint: str | None = None) -> NoReturn:
    if isinstance(exc, EntityNotFoundError):
        raise NotFoundException(str(exc)) from exc
    if isinstance(exc, ValidationError):
        raise click.BadParameter(str(exc), param_hint=param_hint) from exc
    raise click.ClickException(str(exc)) from exc


def _describe_discount(discount: DiscountDTO) -> str:
    if isinstance(discount, QuantityBasedDiscountDTO):
        upper = (
            "no limit" if discount.upper_items_threshold is None else discount.upper_items_threshold
        )
        return (
            f"{discount.percentage_rate}% for "
            f"[{discount.lower_items_threshold}, {upper}] items"
        )
    return f"{discount.percentage_rate}%"


@click.command("list")
@click.pass_obj
def product_list(obj: dict) -> None:
    """List all products in the catalog."""
    handler = list_products_handler(obj.get("data_file"))

    try:
        products = handler.handle()
    except DomainException as exc:
        _raise_for(exc)

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<38} {'Name':<20} {'Price':>12} {'Currency':>8}")
    click.echo("-" * 81)
    for p in products:
        click.echo(f"{p.id:<38} {p.name or '':<20} {str(p.price):>12} {p.currency:>8}")


@click.command("show")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--json", "as_json", is_flag=True, help="Print the product as JSON.")
@click.pass_obj
def product_show(obj: dict, product_id: str, as_json: bool) -> None:
    """Show a product with its discounts."""
    handler = get_product_handler(obj.get("data_file"))

    try:
        dto = handler.handle(product_id=product_id)
    except DomainException as exc:
        _raise_for(exc)

    if as_json:
        click.echo(dumps(product_to_json(dto)))
        return
    _display_product(dto)


@click.command("price")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--quantity", "product_quantity", required=True, type=int, help="Number of items.")
@click.option("--json", "as_json", is_flag=True, help="Print the quote as JSON.")
@click.pass_obj
def product_price(obj: dict, product_id: str, product_quantity: int, as_json: bool) -> None:
    """Calculate the discounted price for a quantity of a product."""
    handler = calculate_product_price_handler(obj.get("data_file"))

    try:
        dto = handler.handle(product_id=product_id, product_quantity=product_quantity)
    except DomainException as exc:
        _raise_for(exc, param_hint="'--quantity'")

    if as_json:
        click.echo(dumps(price_to_json(dto)))
        return
    _display_price(dto)


def _display_product(dto: ProductDTO) -> None:
    click.echo(f"Product {dto.id}")
    click.echo(f"Name:        {dto.name or '-'}")
    click.echo(f"Description: {dto.description or '-'}")
    click.echo(f"Price:       {dto.price} {dto.currency}")
    if not dto.discounts:
        click.echo("Discounts:   none")
        return
    click.echo("Discounts:")
    for discount in dto.discounts:
        click.echo(f"  - {_describe_discount(discount)}")


def _display_price(dto: ProductPriceDTO) -> None:
    click.echo(f"Product {dto.product_id} x {dto.product_quantity}")
    click.echo(f"  {'Base item price':<18} {str(dto.base_item_price):>14} {dto.currency}")
    click.echo(f"  {'Item price':<18} {str(dto.item_price):>14} {dto.currency}")
    click.echo(f"  {'Total price':<18} {str(dto.total_price):>14} {dto.currency}")
    if dto.applied_discounts:
        applied = ", ".join(_describe_discount(d) for d in dto.applied_discounts)
        click.echo(f"  Applied discounts: {applied}")
    else:
        click.echo("  Applied discounts: none")
