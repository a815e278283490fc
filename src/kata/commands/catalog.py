"""Command: publish a product."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from kata.commands._base import KataCommand

if TYPE_CHECKING:
    from kata.commands._context import AppContext


@click.command(
    cls=KataCommand,
    examples='  kata product --name Candy --price 20',
)
@click.option("--name", default=None, help="Product name.")
@click.option("--price", type=float, default=None, help="Product price.")
@click.pass_obj
def product(app: AppContext, name: str | None, price: float | None) -> None:
    """Publish a product with a name and a positive price."""
    from kata.services.catalog import CatalogService

    app.emit(CatalogService(app.config).create_product({"name": name, "price": price}))
