"""PricingService: coupon catalog, discounts, and price ranges."""

from __future__ import annotations

import logging
from typing import Any

from kata.domain.coupons import find_coupon
from kata.domain.validation import is_number, is_positive_number
from kata.domain.validation import is_price_in_range as _in_range
from kata.services.base import BaseService
from kata.services.result import ServiceResult

logger = logging.getLogger(__name__)


class PricingService(BaseService):
    """Price computations over the configured coupon catalog."""

    def get_coupons(self) -> ServiceResult:
        coupons = [c.model_dump() for c in self._config.pricing.coupons]
        return ServiceResult(
            ok=True,
            op="get_coupons",
            data={"coupons": coupons, "count": len(coupons)},
        )

    def calculate_discount(self, price: Any, code: Any) -> ServiceResult:
        """Apply the coupon named *code* to *price*.

        An unknown code is not an error: the price comes back unchanged
        with a warning attached.
        """
        op = "calculate_discount"
        if not is_positive_number(price):
            return ServiceResult.failure(op, "INVALID_PRICE", "Invalid price", price=repr(price))
        if not isinstance(code, str):
            return ServiceResult.failure(
                op, "INVALID_DISCOUNT_CODE", "Invalid discount code", discount_code=repr(code)
            )

        coupon = find_coupon(self._config.pricing.coupons, code)
        if coupon is None:
            logger.debug("No coupon matches code %r", code)
            return ServiceResult(
                ok=True,
                op=op,
                data={"price": price, "original_price": price, "coupon": None},
                warnings=[f"Unknown discount code: {code}"],
            )

        discounted = price * (1 - coupon.discount)
        logger.debug("Applied %s to %s -> %s", coupon.code, price, discounted)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "price": discounted,
                "original_price": price,
                "coupon": coupon.model_dump(),
            },
        )

    def is_price_in_range(self, price: Any, minimum: Any, maximum: Any) -> ServiceResult:
        op = "is_price_in_range"
        if not all(is_number(v) for v in (price, minimum, maximum)):
            return ServiceResult.failure(op, "INVALID_PRICE", "Price and bounds must be numbers")
        if minimum > maximum:
            return ServiceResult.failure(
                op, "INVALID_RANGE", "Minimum exceeds maximum", minimum=minimum, maximum=maximum
            )
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "price": price,
                "minimum": minimum,
                "maximum": maximum,
                "in_range": _in_range(price, minimum, maximum),
            },
        )
