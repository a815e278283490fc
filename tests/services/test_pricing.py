"""Tests for PricingService."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

from kata.config.models import KataConfig
from kata.services.pricing import PricingService


@pytest.fixture
def svc(config: KataConfig) -> PricingService:
    return PricingService(config)


class TestGetCoupons:
    def test_returns_non_empty_list(self, svc: PricingService) -> None:
        result = svc.get_coupons()
        assert result.ok
        assert isinstance(result.data["coupons"], list)
        assert result.data["count"] > 0

    def test_coupon_shape(self, svc: PricingService) -> None:
        for coupon in svc.get_coupons().data["coupons"]:
            assert isinstance(coupon["code"], str)
            assert coupon["code"]
            assert 0 < coupon["discount"] < 1

    def test_reads_config(self, custom_config: KataConfig) -> None:
        result = PricingService(custom_config).get_coupons()
        assert result.data["coupons"] == [{"code": "HALF", "discount": 0.5}]


class TestCalculateDiscount:
    @pytest.mark.parametrize(("code", "expected"), [("SAVE10", 9), ("SAVE20", 8)])
    def test_valid_code(self, svc: PricingService, code: str, expected: float) -> None:
        result = svc.calculate_discount(10, code)
        assert result.ok
        assert result.data["price"] == expected
        assert result.data["original_price"] == 10
        assert result.data["coupon"]["code"] == code

    def test_unknown_code_keeps_price(self, svc: PricingService) -> None:
        result = svc.calculate_discount(10, "INVALID")
        assert result.ok
        assert result.data["price"] == 10
        assert result.data["coupon"] is None
        assert result.warnings == ["Unknown discount code: INVALID"]

    @pytest.mark.parametrize("price", [-1, 0, "10", None, True, float("nan")])
    def test_invalid_price(self, svc: PricingService, price: Any) -> None:
        result = svc.calculate_discount(price, "SAVE10")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "INVALID_PRICE"
        assert "invalid price" in result.error.message.lower()

    def test_non_string_code(self, svc: PricingService) -> None:
        result = svc.calculate_discount(10, 0)
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "INVALID_DISCOUNT_CODE"
        assert "invalid discount code" in result.error.message.lower()

    def test_price_checked_before_code(self, svc: PricingService) -> None:
        result = svc.calculate_discount(-1, 0)
        assert result.error is not None
        assert result.error.code == "INVALID_PRICE"

    def test_configured_catalog(self, custom_config: KataConfig) -> None:
        svc = PricingService(custom_config)
        assert svc.calculate_discount(10, "HALF").data["price"] == 5
        assert svc.calculate_discount(10, "SAVE10").data["price"] == 10

    def test_default_config_when_omitted(self) -> None:
        assert PricingService().calculate_discount(10, "SAVE10").data["price"] == 9

    def test_omitted_config_reads_kata_toml(self, tmp_path: Path) -> None:
        (tmp_path / "kata.toml").write_text('[[pricing.coupons]]\ncode = "HALF"\ndiscount = 0.5\n')
        assert PricingService().calculate_discount(10, "HALF").data["price"] == 5


class TestIsPriceInRange:
    @pytest.mark.parametrize(
        ("price", "expected"),
        [(-10, False), (0, True), (20, True), (100, True), (200, False)],
    )
    def test_in_range(self, svc: PricingService, price: float, expected: bool) -> None:
        result = svc.is_price_in_range(price, 0, 100)
        assert result.ok
        assert result.data["in_range"] is expected

    def test_non_numeric(self, svc: PricingService) -> None:
        result = svc.is_price_in_range("5", 0, 10)
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "INVALID_PRICE"

    def test_inverted_bounds(self, svc: PricingService) -> None:
        result = svc.is_price_in_range(5, 10, 0)
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "INVALID_RANGE"
