"""Shared table formatting for the CLI commands."""

from __future__ import annotations

import click

from shopcart.application.dto import CartDTO, CartLineDTO, OrderDTO, ProductDTO


def display_products(products: list[ProductDTO]) -> None:
    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Price':>10} {'Stock':>7}")
    click.echo("-" * 46)
    for p in products:
        click.echo(f"{p.id:<6} {p.name:<20} {p.price:>10} {p.stock:>7}")


def _display_lines(lines: list[CartLineDTO]) -> None:
    click.echo(f"  {'Product':<20} {'Qty':>5} {'Price':>10} {'Subtotal':>10}")
    click.echo(f"  {'-'*48}")
    for line in lines:
        click.echo(
            f"  {line.product_name:<20} {line.quantity:>5} {line.unit_price:>10} {line.subtotal:>10}"
        )
    click.echo(f"  {'-'*48}")


def display_cart(cart: CartDTO) -> None:
    if cart.is_empty:
        click.echo("Cart is empty!")
        return

    _display_lines(cart.items)
    click.echo(f"  {'Total':<27} {cart.total:>21}")


def display_order(order: OrderDTO) -> None:
    click.echo(f"Order #{order.id} Summary  ({order.created_at})")
    _display_lines(order.items)
    click.echo(f"  {'Total':<27} {order.total:>21}")
