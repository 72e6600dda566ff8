import click

from shopcart.infrastructure.cli.catalog_commands import catalog_list
from shopcart.infrastructure.cli.checkout_commands import checkout
from shopcart.infrastructure.logging import configure_logging


@click.group()
@click.option("-v", "--verbose", count=True, help="Log more (repeat for debug).")
def cli(verbose: int) -> None:
    """shopcart: point-of-sale cart and checkout"""
    configure_logging(verbose)


@cli.group()
def catalog() -> None:
    """Browse the product catalog."""


# Register subcommands
catalog.add_command(catalog_list)
cli.add_command(checkout)
