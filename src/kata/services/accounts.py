"""AccountService: user input, credential and driving-age checks."""

from __future__ import annotations

import logging
from typing import Any

from kata.domain.validation import is_number, is_strong_password, is_valid_username
from kata.services.base import BaseService
from kata.services.result import ServiceResult

logger = logging.getLogger(__name__)


class AccountService(BaseService):
    """Validation of account-related input against the [accounts] config."""

    def validate_user_input(self, username: Any, age: Any) -> ServiceResult:
        """Validate a signup form.

        Both fields are always checked so a single failure result can
        name every offending field. Messages are joined username first.
        """
        op = "validate_user_input"
        cfg = self._config.accounts
        failed: list[str] = []
        messages: list[str] = []

        if not is_valid_username(username, cfg.username_min_length, cfg.username_max_length):
            failed.append("username")
            messages.append("Invalid username")
        if not is_number(age) or not cfg.age_min <= age <= cfg.age_max:
            failed.append("age")
            messages.append("Invalid age")

        if failed:
            logger.debug("User input rejected: %s", ", ".join(failed))
            return ServiceResult.failure(op, "INVALID_INPUT", "; ".join(messages), fields=failed)
        return ServiceResult(ok=True, op=op, data={"message": "Validation successful"})

    def check_username(self, name: Any) -> ServiceResult:
        return ServiceResult(ok=True, op="check_username", data={"valid": is_valid_username(name)})

    def check_password(self, password: Any) -> ServiceResult:
        return ServiceResult(
            ok=True, op="check_password", data={"valid": is_strong_password(password)}
        )

    def can_drive(self, age: Any, country_code: Any) -> ServiceResult:
        op = "can_drive"
        min_age = None
        if isinstance(country_code, str):
            min_age = self._config.accounts.driving_ages.get(country_code)
        if min_age is None:
            return ServiceResult.failure(
                op, "INVALID_COUNTRY", "Invalid country code", country=repr(country_code)
            )
        if not is_number(age):
            return ServiceResult.failure(op, "INVALID_AGE", "Invalid age", age=repr(age))
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "age": age,
                "country": country_code,
                "min_age": min_age,
                "allowed": age >= min_age,
            },
        )
