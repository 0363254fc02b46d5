"""Interactive shopping session (menu loop)."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import click

from shopcart.application.add_to_cart import AddToCartHandler
from shopcart.application.checkout import CheckoutHandler, CheckoutStatus
from shopcart.application.export_catalog import ExportCatalogHandler
from shopcart.application.list_products import ListProductsHandler
from shopcart.application.remove_from_cart import RemoveFromCartHandler
from shopcart.application.show_cart import ShowCartHandler
from shopcart.application.update_product import UpdateProductHandler
from shopcart.domain.exceptions import DomainException
from shopcart.domain.model.payment import Payment, PaymentMethod, payment_for
from shopcart.infrastructure.bootstrap import (
    ShopSession,
    build_session,
    catalog_repository,
)
from shopcart.infrastructure.cli.catalog_commands import catalog_option
from shopcart.infrastructure.cli.formatting import (
    display_cart,
    display_order,
    display_products,
)

EXIT = 0


def _menu(session: ShopSession) -> dict[int, tuple[str, Callable[[ShopSession], None]]]:
    entries = {
        1: ("Show products", _show_products),
        2: ("Add to cart", _add_to_cart),
        3: ("View cart", _view_cart),
        4: ("Checkout", _checkout),
        5: ("Remove from cart", _remove_from_cart),
    }
    if session.user.can_manage_catalog:
        entries[6] = ("Update product", _update_product)
    return entries


# --- Menu actions -------------------------------------------------------------


def _show_products(session: ShopSession) -> None:
    display_products(ListProductsHandler(session.inventory).handle())


def _add_to_cart(session: ShopSession) -> None:
    product_id = click.prompt("Product id", type=int)
    quantity = click.prompt("Quantity", type=int)

    handler = AddToCartHandler(session.inventory, session.cart)
    if handler.handle(product_id, quantity):
        click.echo(f"Added {quantity} x product #{product_id} to cart.")
    else:
        click.echo(f"Not enough stock for product #{product_id}.")


def _remove_from_cart(session: ShopSession) -> None:
    product_id = click.prompt("Product id", type=int)
    quantity = click.prompt("Quantity", type=int)

    removed = RemoveFromCartHandler(session.inventory, session.cart).handle(product_id, quantity)
    if removed:
        click.echo(f"Removed {removed} x product #{product_id} from cart.")
    else:
        click.echo(f"Product #{product_id} is not in the cart.")


def _view_cart(session: ShopSession) -> None:
    display_cart(ShowCartHandler(session.cart).handle())


def _prompt_payment(session: ShopSession) -> Payment:
    method = PaymentMethod(
        click.prompt(
            "Payment method",
            type=click.Choice([m.value for m in PaymentMethod]),
            default=PaymentMethod.CREDIT_CARD.value,
        )
    )
    if method is PaymentMethod.CREDIT_CARD:
        return payment_for(
            method,
            card_number=click.prompt("Card number", default="", show_default=False),
            name_on_card=click.prompt("Name on card", default=session.user.username),
        )
    return payment_for(
        method,
        account_email=click.prompt(
            "PayPal e-mail",
            default=session.user.email,
            show_default=bool(session.user.email),
        ),
    )


def _checkout(session: ShopSession) -> None:
    handler = CheckoutHandler(session.cart, session.orders)
    if session.cart.is_empty():
        click.echo("Cart is empty!")
        return

    result = handler.handle(_prompt_payment(session))
    if result.status is CheckoutStatus.PAYMENT_DECLINED:
        click.echo("Payment declined. Your cart has been kept.")
    elif result.status is CheckoutStatus.EMPTY_CART:
        click.echo("Cart is empty!")
    else:
        display_order(result.order)


def _update_product(session: ShopSession) -> None:
    product_id = click.prompt("Product id", type=int)
    price = click.prompt("New price (blank to keep)", default="", show_default=False)
    stock = click.prompt("New stock (blank to keep)", default="", show_default=False)

    try:
        new_stock = int(stock) if stock.strip() else None
    except ValueError:
        click.echo(f"Invalid stock level '{stock}'.", err=True)
        return

    UpdateProductHandler(session.inventory).handle(
        session.user,
        product_id,
        price=price.strip() or None,
        stock=new_stock,
    )
    click.echo(f"Product #{product_id} updated.")


# --- Command --------------------------------------------------------------------


@click.command("run")
@click.option("--user", "username", default="guest", show_default=True, help="Shopper name.")
@click.option("--email", default="", help="Shopper e-mail (used as the default PayPal account).")
@click.option("--admin", is_flag=True, default=False, help="Start the session as an administrator.")
@catalog_option
@click.option(
    "--export",
    "export_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Dump the catalog to this CSV file when the session ends.",
)
def shop_run(
    username: str,
    email: str,
    admin: bool,
    catalog_path: Path | None,
    export_path: Path | None,
) -> None:
    """Start an interactive shopping session."""
    try:
        session = build_session(username, email, admin=admin, catalog_path=catalog_path)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Welcome, {session.user.username} ({session.user.role.value})")
    entries = _menu(session)

    while True:
        click.echo()
        for number, (label, _) in entries.items():
            click.echo(f"{number}. {label}")
        click.echo(f"{EXIT}. Exit")

        choice = click.prompt("Choice", type=click.IntRange(min=0), default=EXIT, show_default=False)
        if choice == EXIT:
            break
        if choice not in entries:
            click.echo("Unknown option.")
            continue

        _, action = entries[choice]
        try:
            action(session)
        except DomainException as exc:
            click.echo(f"Error: {exc}", err=True)

    if export_path is not None:
        count = ExportCatalogHandler(session.inventory, catalog_repository(export_path)).handle()
        click.echo(f"Exported {count} product(s) to {export_path}")
    click.echo("Goodbye!")
