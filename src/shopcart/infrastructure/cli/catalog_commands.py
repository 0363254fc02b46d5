"""CLI commands for the product catalog."""

from __future__ import annotations

from pathlib import Path

import click

from shopcart.application.export_catalog import ExportCatalogHandler
from shopcart.application.list_products import ListProductsHandler
from shopcart.domain.exceptions import DomainException
from shopcart.domain.model.inventory import Inventory
from shopcart.infrastructure.bootstrap import (
    DEFAULT_EXPORT_PATH,
    build_inventory,
    catalog_repository,
)
from shopcart.infrastructure.cli.formatting import display_products

catalog_option = click.option(
    "--catalog",
    "catalog_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="CSV catalog (id,name,price,stock) to start from instead of the built-in one.",
)


def _load_inventory(catalog_path: Path | None) -> Inventory:
    try:
        return build_inventory(catalog_repository(catalog_path) if catalog_path else None)
    except DomainException as exc:
        raise click.ClickException(str(exc))


@click.command("products")
@catalog_option
def products_list(catalog_path: Path | None) -> None:
    """List all products in the catalog."""
    inventory = _load_inventory(catalog_path)
    display_products(ListProductsHandler(inventory).handle())


@click.command("export")
@catalog_option
@click.option(
    "--out",
    "out_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Destination file (defaults to data/products.csv).",
)
@click.option("--sorted", "sort_by_id", is_flag=True, default=False, help="Write products by ascending id.")
def catalog_export(catalog_path: Path | None, out_path: Path | None, sort_by_id: bool) -> None:
    """Dump the catalog as 'id,name,price,stock' lines."""
    inventory = _load_inventory(catalog_path)
    repo = catalog_repository(out_path)

    count = ExportCatalogHandler(inventory, repo).handle(sort_by_id=sort_by_id)
    click.echo(f"Exported {count} product(s) to {out_path or DEFAULT_EXPORT_PATH}")
