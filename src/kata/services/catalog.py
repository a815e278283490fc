"""CatalogService: product publishing."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from kata.domain.validation import is_positive_number
from kata.services.base import BaseService
from kata.services.result import ServiceResult


class CatalogService(BaseService):
    def create_product(self, product: Mapping[str, Any]) -> ServiceResult:
        """Publish *product* if it carries a name and a positive price."""
        op = "create_product"
        name = product.get("name")
        if not isinstance(name, str) or not name:
            return ServiceResult.failure(op, "INVALID_NAME", "Name is missing")
        price = product.get("price")
        if not is_positive_number(price):
            return ServiceResult.failure(op, "INVALID_PRICE", "Price is missing")
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "message": "Product was successfully published",
                "product": {"name": name, "price": price},
            },
        )
