from __future__ import annotations

from pathlib import Path

import click

from stockroom.infrastructure.cli.product_commands import (
    product_add,
    product_remove,
    product_show,
    product_update,
)
from stockroom.infrastructure.cli.stock_commands import stock_add, stock_offload, stock_show
from stockroom.infrastructure.logging import LOG_LEVELS, configure_logging
from stockroom.infrastructure.settings import (
    DATA_DIR_ENV,
    DEFAULT_DATA_DIR,
    DEFAULT_LOG_LEVEL,
    LOG_LEVEL_ENV,
    Settings,
)


@click.group()
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=DEFAULT_DATA_DIR,
    envvar=DATA_DIR_ENV,
    show_default=True,
    help="Directory holding the store's files.",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=DEFAULT_LOG_LEVEL,
    envvar=LOG_LEVEL_ENV,
    show_default=True,
    help="Minimum level of log events written to stderr.",
)
@click.pass_context
def cli(ctx: click.Context, data_dir: Path, log_level: str) -> None:
    """Stockroom: durable bakery inventory store."""
    settings = Settings(data_dir=data_dir, log_level=log_level.upper())
    configure_logging(settings.log_level)
    ctx.obj = settings


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group()
def stock() -> None:
    """Inspect and adjust stock levels."""


# Register subcommands
product.add_command(product_add)
product.add_command(product_remove)
product.add_command(product_show)
product.add_command(product_update)
stock.add_command(stock_add)
stock.add_command(stock_offload)
stock.add_command(stock_show)
