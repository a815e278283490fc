"""Service layer: every public operation returns a ServiceResult."""

from kata.services.accounts import AccountService
from kata.services.catalog import CatalogService
from kata.services.lessons import LessonService
from kata.services.pricing import PricingService
from kata.services.result import ServiceError, ServiceResult

__all__ = [
    "AccountService",
    "CatalogService",
    "LessonService",
    "PricingService",
    "ServiceError",
    "ServiceResult",
]
