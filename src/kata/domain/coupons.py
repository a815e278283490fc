"""Coupon records and catalog lookup."""

from __future__ import annotations

from collections.abc import Iterable

from pydantic import BaseModel, Field


class Coupon(BaseModel):
    """A code/discount-rate pair used to compute a reduced price."""

    model_config = {"frozen": True}

    code: str = Field(min_length=1)
    discount: float = Field(gt=0, lt=1)


DEFAULT_COUPONS: tuple[Coupon, ...] = (
    Coupon(code="SAVE10", discount=0.1),
    Coupon(code="SAVE20", discount=0.2),
)


def find_coupon(catalog: Iterable[Coupon], code: str) -> Coupon | None:
    """Return the coupon whose code matches *code* exactly, or None.

    Examples:
        >>> find_coupon(DEFAULT_COUPONS, "SAVE10").discount
        0.1
        >>> find_coupon(DEFAULT_COUPONS, "save10") is None
        True
    """
    for coupon in catalog:
        if coupon.code == code:
            return coupon
    return None
