"""Subcommand modules for kata.

Provides register_commands() which uses deferred imports to keep
``kata --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all command groups and standalone commands on the root CLI group."""
    # --- Groups ---
    from kata.commands.lessons import stack
    from kata.commands.validate import validate

    cli.add_command(validate)
    cli.add_command(stack)

    # --- Standalone commands ---
    from kata.commands.accounts import drive
    from kata.commands.catalog import product
    from kata.commands.lessons import factorial, fetch, fizzbuzz, summarize
    from kata.commands.pricing import coupons, discount, price_range

    cli.add_command(coupons)
    cli.add_command(discount)
    cli.add_command(price_range)
    cli.add_command(drive)
    cli.add_command(product)
    cli.add_command(fizzbuzz)
    cli.add_command(summarize)
    cli.add_command(factorial)
    cli.add_command(fetch)
