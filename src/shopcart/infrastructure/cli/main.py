import logging

import click

from shopcart.infrastructure.cli.catalog_commands import catalog_export, products_list
from shopcart.infrastructure.cli.shop_commands import shop_run
from shopcart.infrastructure.logging_config import configure_logging


@click.group()
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log debug details to stderr.")
def cli(verbose: bool) -> None:
    """shop — Online Shopping Cart"""
    configure_logging(logging.DEBUG if verbose else logging.WARNING)


# Register subcommands
cli.add_command(products_list)
cli.add_command(catalog_export)
cli.add_command(shop_run)
