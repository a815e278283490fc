"""Commands: introductory helpers, the stack, and the async fetch stub."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from kata.commands._base import KataCommand, KataGroup

if TYPE_CHECKING:
    from kata.commands._context import AppContext


@click.command(cls=KataCommand, examples="  kata fizzbuzz 15")
@click.argument("limit", type=int)
@click.pass_obj
def fizzbuzz(app: AppContext, limit: int) -> None:
    """Print FizzBuzz for 1..LIMIT."""
    from kata.services.lessons import LessonService

    app.emit(LessonService(app.config).fizz_buzz(limit))


@click.command(cls=KataCommand, examples="  kata summarize 1 2 3")
@click.argument("numbers", nargs=-1, type=float)
@click.pass_obj
def summarize(app: AppContext, numbers: tuple[float, ...]) -> None:
    """Report max, average and product of NUMBERS."""
    from kata.services.lessons import LessonService

    app.emit(LessonService(app.config).summarize(list(numbers)))


@click.command(cls=KataCommand, examples="  kata factorial 5")
@click.argument("n", type=int)
@click.pass_obj
def factorial(app: AppContext, n: int) -> None:
    """Compute N!."""
    from kata.services.lessons import LessonService

    app.emit(LessonService(app.config).factorial(n))


@click.command(cls=KataCommand, examples="  kata --json fetch")
@click.pass_obj
def fetch(app: AppContext) -> None:
    """Await the data-fetch stub and print its records."""
    from kata.services.lessons import LessonService

    app.emit(LessonService(app.config).fetch())


@click.group(cls=KataGroup, examples="  kata stack reverse a b c")
def stack() -> None:
    """Stack exercises."""


@stack.command(examples="  kata stack reverse a b c")
@click.argument("items", nargs=-1)
@click.pass_obj
def reverse(app: AppContext, items: tuple[str, ...]) -> None:
    """Push ITEMS onto a stack and pop them back off."""
    from kata.services.lessons import LessonService

    app.emit(LessonService(app.config).reverse(items))
