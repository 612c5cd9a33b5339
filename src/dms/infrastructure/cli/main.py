import click

from dms.infrastructure.bootstrap import DATA_FILE_ENV, DEFAULT_LOG_LEVEL, LOG_LEVEL_ENV
from dms.infrastructure.cli.product_commands import product_list, product_price, product_show
from dms.infrastructure.logging import setup_logging


@click.group()
@click.option(
    "--data-file",
    type=click.Path(dir_okay=False),
    envvar=DATA_FILE_ENV,
    default=None,
    help="Product data file (JSON).",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    envvar=LOG_LEVEL_ENV,
    default=DEFAULT_LOG_LEVEL,
    show_default=True,
    help="Log level.",
)
@click.option("--json-logs", is_flag=True, help="Emit logs as JSON lines.")
@click.pass_context
def cli(ctx: click.Context, data_file: str | None, log_level: str, json_logs: bool) -> None:
    """DMS — Discount Management System"""
    setup_logging(level=log_level, json_format=json_logs)
    ctx.ensure_object(dict)
    ctx.obj["data_file"] = data_file


@cli.group()
def product() -> None:
    """Read products and quote prices."""


# Register subcommands
product.add_command(product_list)
product.add_command(product_price)
product.add_command(product_show)
