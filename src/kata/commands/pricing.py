"""Commands: coupon catalog, discounts, and price ranges."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from kata.commands._base import KataCommand

if TYPE_CHECKING:
    from kata.commands._context import AppContext


@click.command(cls=KataCommand, examples="  kata coupons\n  kata --json coupons")
@click.pass_obj
def coupons(app: AppContext) -> None:
    """List the configured coupon codes."""
    from kata.services.pricing import PricingService

    app.emit(PricingService(app.config).get_coupons())


@click.command(
    cls=KataCommand,
    examples="""\
  kata discount 10 SAVE10
  kata --json discount 49.99 SAVE20""",
)
@click.argument("price", type=float)
@click.argument("code")
@click.pass_obj
def discount(app: AppContext, price: float, code: str) -> None:
    """Apply discount CODE to PRICE."""
    from kata.services.pricing import PricingService

    app.emit(PricingService(app.config).calculate_discount(price, code))


@click.command(
    "price-range",
    cls=KataCommand,
    examples="  kata price-range 20 0 100",
)
@click.argument("price", type=float)
@click.argument("minimum", type=float)
@click.argument("maximum", type=float)
@click.pass_obj
def price_range(app: AppContext, price: float, minimum: float, maximum: float) -> None:
    """Check whether PRICE lies within [MINIMUM, MAXIMUM]."""
    from kata.services.pricing import PricingService

    app.emit(PricingService(app.config).is_price_in_range(price, minimum, maximum))
