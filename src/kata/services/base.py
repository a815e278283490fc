"""BaseService: shared foundation for kata services.

Every service receives a :class:`KataConfig` at construction time and
reads its tables (coupons, age limits, country rules) from it rather
than from module-level constants. Without one, the service loads
``kata.toml`` through :func:`load_config` (defaults if none is found).
"""

from __future__ import annotations

from kata.config.discovery import load_config
from kata.config.models import KataConfig


class BaseService:
    """Base for all service-layer classes.

    Usage::

        class PricingService(BaseService):
            def calculate_discount(self, price, code) -> ServiceResult:
                coupons = self._config.pricing.coupons
                ...
    """

    def __init__(self, config: KataConfig | None = None) -> None:
        self._config = config if config is not None else load_config()

    @property
    def config(self) -> KataConfig:
        return self._config
