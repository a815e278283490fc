"""Tests for CatalogService.create_product."""

from __future__ import annotations

from typing import Any

import pytest

from kata.services.catalog import CatalogService


class TestCreateProduct:
    @pytest.mark.parametrize(
        ("product", "code"),
        [
            pytest.param({"price": 10}, "INVALID_NAME", id="name missing"),
            pytest.param({"name": "", "price": 10}, "INVALID_NAME", id="name empty"),
            pytest.param({"name": "Akash", "price": -10}, "INVALID_PRICE", id="price negative"),
            pytest.param({"name": "Akash"}, "INVALID_PRICE", id="price missing"),
        ],
    )
    def test_rejects(self, product: dict[str, Any], code: str) -> None:
        result = CatalogService().create_product(product)
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == code
        assert "missing" in result.error.message.lower()

    def test_success(self) -> None:
        result = CatalogService().create_product({"name": "Candy", "price": 20})
        assert result.ok is True
        assert "success" in result.data["message"].lower()
        assert result.data["product"] == {"name": "Candy", "price": 20}
