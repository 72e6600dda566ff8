"""CLI command for the checkout use case."""

from __future__ import annotations

import click

from shopcart.application.checkout import CheckoutHandler
from shopcart.application.dto import CartItemSpec, ReceiptDTO
from shopcart.domain.exceptions import DomainException
from shopcart.infrastructure.bootstrap import product_catalog


def _parse_items(raw: str) -> list[CartItemSpec]:
    """Parse 'Cheese:2,TV:1' into CartItemSpec list.

    Blank entries (e.g. from a trailing comma) are ignored.
    """
    specs: list[CartItemSpec] = []
    for entry in filter(None, (part.strip() for part in raw.split(","))):
        name, sep, qty_str = entry.rpartition(":")
        if not sep or not name.strip():
            raise click.BadParameter(
                f"Invalid item '{entry}'. Expected 'ProductName:Quantity'."
            )
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Quantity for '{name.strip()}' must be a whole number, got '{qty_str}'."
            )
        specs.append(CartItemSpec(product_name=name.strip(), quantity=qty))
    return specs


def _display_receipt(dto: ReceiptDTO) -> None:
    """Print the shipment notice (if any) followed by the receipt."""
    if dto.has_shipment:
        click.echo("** Shipment notice **")
        for item in dto.shipment_lines:
            click.echo(f"{item.quantity}x {item.product_name:<16} {item.grams:>10}")
        click.echo(f"Total package weight {dto.package_weight}")
        click.echo()

    click.echo("** Checkout receipt **")
    for item in dto.lines:
        click.echo(f"{item.quantity}x {item.product_name:<16} {item.line_total:>10}")
    click.echo("-" * 30)
    click.echo(f"{'Subtotal':<19} {dto.subtotal:>10}")
    click.echo(f"{'Shipping':<19} {dto.shipping_fee:>10}")
    click.echo(f"{'Amount':<19} {dto.total:>10}")
    click.echo(f"{'Balance left':<19} {dto.balance_left:>10}")


@click.command("checkout")
@click.option("--customer", required=True, help="Customer name.")
@click.option("--balance", required=True, help="Customer balance (e.g. 10000).")
@click.option("--items", required=True, help="Items as 'Product:Qty,Product:Qty'.")
def checkout(customer: str, balance: str, items: str) -> None:
    """Buy items from the sample catalog and print the receipt."""
    specs = _parse_items(items)

    handler = CheckoutHandler(catalog=product_catalog())

    try:
        dto = handler.handle(customer_name=customer, balance=balance, item_specs=specs)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_receipt(dto)
