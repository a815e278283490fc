"""Rich/JSON output helpers.

The CLI renders ServiceResult for humans (Rich output, colors) or
machines (--json). The formatter layer adapts ServiceResult to the
requested output mode.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel
from rich.markup import escape

from kata.output.console import create_console, get_output, style_for_value

if TYPE_CHECKING:
    from kata.services.result import ServiceResult


class OutputSettings(BaseModel):
    """Rendering switches derived from the global CLI flags."""

    model_config = {"frozen": True}

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def _format_value(value: Any) -> str:
    if isinstance(value, (dict, list)):
        return escape(_json.dumps(value, separators=(",", ":")))
    style = style_for_value(value)
    text = escape(str(value))
    return f"[{style}]{text}[/{style}]" if style else text


def _render_human(result: ServiceResult, settings: OutputSettings) -> str:
    console = create_console(no_color=True)
    if result.ok:
        console.print(f"[kata.ok]OK[/kata.ok]: [kata.op]{result.op}[/kata.op]")
        if settings.quiet:
            return get_output(console).rstrip("\n")
        for key, value in result.data.items():
            console.print(f"  [kata.key]{key}[/kata.key]: {_format_value(value)}")
        if settings.verbose and result.meta:
            console.print(f"  [kata.key]meta[/kata.key]: {_format_value(result.meta)}")
    else:
        message = result.error.message if result.error else "Unknown error"
        code = result.error.code if result.error else "UNKNOWN"
        console.print(
            f"[kata.error]ERROR[/kata.error]: [kata.op]{result.op}[/kata.op] "
            f"({code}) {escape(message)}"
        )
        if settings.verbose and result.error and result.error.detail:
            console.print(f"  [kata.key]detail[/kata.key]: {_format_value(result.error.detail)}")
    return get_output(console).rstrip("\n")


def format_result(
    result: ServiceResult,
    *,
    settings: OutputSettings | None = None,
    json_output: bool = False,
) -> str:
    """Format a ServiceResult for display.

    Args:
        result: The service result to format.
        settings: Output switches. When given, *json_output* is ignored.
        json_output: Shorthand for ``OutputSettings(json_output=True)``.
    """
    if settings is None:
        settings = OutputSettings(json_output=json_output)
    if settings.json_output:
        return result.model_dump_json(indent=2)
    return _render_human(result, settings)
