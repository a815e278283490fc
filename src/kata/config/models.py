"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, kata.toml only contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from kata.domain.coupons import DEFAULT_COUPONS, Coupon


class PricingConfig(BaseModel):
    """[pricing] section."""

    model_config = {"frozen": True}

    coupons: list[Coupon] = Field(default_factory=lambda: list(DEFAULT_COUPONS))


class AccountsConfig(BaseModel):
    """[accounts] section."""

    model_config = {"frozen": True}

    username_min_length: int = 4
    username_max_length: int = 255
    age_min: int = 18
    age_max: int = 100
    driving_ages: dict[str, int] = Field(default_factory=lambda: {"US": 16, "UK": 17})


class DataConfig(BaseModel):
    """[data] section."""

    model_config = {"frozen": True}

    fetch_delay: float = 0.1
    records: list[int] = Field(default_factory=lambda: [1, 2, 3])


class KataConfig(BaseModel):
    """Root configuration composing all sections."""

    model_config = {"frozen": True}

    pricing: PricingConfig = Field(default_factory=PricingConfig)
    accounts: AccountsConfig = Field(default_factory=AccountsConfig)
    data: DataConfig = Field(default_factory=DataConfig)
