"""Command: driving-age eligibility."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from kata.commands._base import KataCommand

if TYPE_CHECKING:
    from kata.commands._context import AppContext


@click.command(
    cls=KataCommand,
    examples="""\
  kata drive 16 US
  kata --json drive 17 UK""",
)
@click.argument("age", type=int)
@click.argument("country")
@click.pass_obj
def drive(app: AppContext, age: int, country: str) -> None:
    """Check whether AGE may drive in COUNTRY."""
    from kata.services.accounts import AccountService

    app.emit(AccountService(app.config).can_drive(age, country))
