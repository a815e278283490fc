"""Tests for the format_result dispatcher and OutputSettings."""

import json

from kata.output.formatters import OutputSettings, format_result
from kata.services.result import ServiceError, ServiceResult


def _ok(op: str = "test", **data: object) -> ServiceResult:
    return ServiceResult(ok=True, op=op, data=dict(data))


def _err(op: str = "test", msg: str = "fail", **detail: object) -> ServiceResult:
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code="ERR", message=msg, detail=dict(detail)),
    )


class TestOutputSettings:
    def test_defaults(self) -> None:
        s = OutputSettings()
        assert s.json_output is False
        assert s.quiet is False
        assert s.verbose is False


class TestFormatResultJSON:
    def test_json_mode_returns_valid_json(self) -> None:
        output = format_result(_ok("calculate_discount", price=9.0), json_output=True)
        data = json.loads(output)
        assert data["ok"] is True
        assert data["op"] == "calculate_discount"
        assert data["data"]["price"] == 9.0

    def test_json_mode_error(self) -> None:
        settings = OutputSettings(json_output=True)
        data = json.loads(format_result(_err("can_drive", "Bad"), settings=settings))
        assert data["ok"] is False
        assert data["error"]["message"] == "Bad"

    def test_settings_overrides_kwarg(self) -> None:
        output = format_result(_ok(), settings=OutputSettings(), json_output=True)
        assert output.startswith("OK")


class TestFormatResultHuman:
    def test_success_lists_data(self) -> None:
        output = format_result(_ok("can_drive", allowed=True, country="US"))
        lines = output.splitlines()
        assert lines[0] == "OK: can_drive"
        assert "  allowed: True" in lines
        assert "  country: US" in lines

    def test_nested_values_as_compact_json(self) -> None:
        output = format_result(_ok("reverse", items=["c", "b", "a"]))
        assert '  items: ["c","b","a"]' in output.splitlines()

    def test_quiet_hides_data(self) -> None:
        output = format_result(_ok("fetch", count=3), settings=OutputSettings(quiet=True))
        assert output == "OK: fetch"

    def test_error_line(self) -> None:
        output = format_result(_err("calculate_discount", "Invalid price"))
        assert output == "ERROR: calculate_discount (ERR) Invalid price"

    def test_verbose_error_detail(self) -> None:
        result = _err("validate_user_input", "Invalid age", fields=["age"])
        output = format_result(result, settings=OutputSettings(verbose=True))
        assert 'detail: {"fields":["age"]}' in output

    def test_markup_in_values_is_literal(self) -> None:
        output = format_result(_ok("reverse", item="[bold]x[/bold]"))
        assert "[bold]x[/bold]" in output
