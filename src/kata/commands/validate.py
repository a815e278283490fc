"""Command group: input validation."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from kata.commands._base import KataGroup

if TYPE_CHECKING:
    from kata.commands._context import AppContext


@click.group(
    cls=KataGroup,
    examples="""\
  kata validate user alice 27
  kata validate username aakashgolui
  kata validate password 'AkashGolui@123'""",
)
def validate() -> None:
    """Validate user-supplied input."""


@validate.command(examples="  kata validate user alice 27")
@click.argument("username")
@click.argument("age", type=int)
@click.pass_obj
def user(app: AppContext, username: str, age: int) -> None:
    """Validate a USERNAME and AGE pair."""
    from kata.services.accounts import AccountService

    app.emit(AccountService(app.config).validate_user_input(username, age))


@validate.command(examples="  kata validate username aakashgolui")
@click.argument("name")
@click.pass_obj
def username(app: AppContext, name: str) -> None:
    """Check NAME against the username length rules."""
    from kata.services.accounts import AccountService

    app.emit(AccountService(app.config).check_username(name))


@validate.command(examples="  kata validate password 'AkashGolui@123'")
@click.argument("value")
@click.pass_obj
def password(app: AppContext, value: str) -> None:
    """Check VALUE against the password strength rules."""
    from kata.services.accounts import AccountService

    app.emit(AccountService(app.config).check_password(value))
