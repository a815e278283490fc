"""Shared pytest fixtures and test helpers for kata tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from kata.config.models import AccountsConfig, DataConfig, KataConfig, PricingConfig
from kata.domain.coupons import Coupon
from kata.domain.stack import Stack


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every test from an empty temp dir with no config overrides.

    Keeps a stray ``kata.toml`` or ``KATA_*`` env var on the host from
    leaking into settings discovery.
    """
    monkeypatch.delenv("KATA_CONFIG", raising=False)
    monkeypatch.delenv("KATA_JSON_OUTPUT", raising=False)
    monkeypatch.delenv("KATA_VERBOSE", raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root logger state after each test (the CLI reconfigures it)."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    kata = logging.getLogger("kata")
    kata_level = kata.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    kata.setLevel(kata_level)


@pytest.fixture
def stack() -> Stack[int]:
    """A fresh, empty stack."""
    return Stack()


@pytest.fixture
def config() -> KataConfig:
    """Default configuration with an instant fetch stub."""
    return KataConfig(data=DataConfig(fetch_delay=0))


@pytest.fixture
def custom_config() -> KataConfig:
    """Configuration with non-default tables, to prove services read config."""
    return KataConfig(
        pricing=PricingConfig(coupons=[Coupon(code="HALF", discount=0.5)]),
        accounts=AccountsConfig(driving_ages={"IN": 18}, age_min=21),
        data=DataConfig(fetch_delay=0, records=[7]),
    )
