"""CLI commands for the product catalog."""

from __future__ import annotations

import click

from shopcart.application.show_catalog import ShowCatalogHandler
from shopcart.infrastructure.bootstrap import product_catalog


@click.command("list")
def catalog_list() -> None:
    """List all products in the catalog."""
    lines = ShowCatalogHandler(product_catalog()).handle()

    if not lines:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<4} {'Name':<16} {'Price':>10} {'Stock':>6} {'Weight':>8}  Expires")
    click.echo("-" * 70)
    for p in lines:
        click.echo(
            f"{p.id:<4} {p.name:<16} {p.price:>10} {p.stock:>6} "
            f"{p.weight or '-':>8}  {p.expires_at or '-'}"
        )
