"""LessonService: arithmetic helpers and the stack, behind ServiceResult."""

from __future__ import annotations

import asyncio
from collections.abc import Sequence
from typing import Any

from kata.domain.arithmetic import calculate_average, factorial, fizz_buzz, max_of, product_of
from kata.domain.stack import Stack
from kata.domain.validation import is_whole_number
from kata.services.base import BaseService
from kata.services.data import fetch_data
from kata.services.result import ServiceResult


class LessonService(BaseService):
    """Wraps the introductory helpers so the CLI can render them."""

    def fizz_buzz(self, limit: Any) -> ServiceResult:
        op = "fizz_buzz"
        if not is_whole_number(limit) or limit < 1:
            msg = "Limit must be a whole number of at least 1"
            return ServiceResult.failure(op, "INVALID_NUMBER", msg, limit=repr(limit))
        return ServiceResult(
            ok=True,
            op=op,
            data={"values": [fizz_buzz(n) for n in range(1, int(limit) + 1)]},
        )

    def reverse(self, items: Sequence[str]) -> ServiceResult:
        """Reverse *items* by pushing them all and popping until empty."""
        stack: Stack[str] = Stack()
        for item in items:
            stack.push(item)
        reversed_items: list[str] = []
        while not stack.is_empty():
            reversed_items.append(stack.pop())
        return ServiceResult(ok=True, op="reverse", data={"items": reversed_items})

    def summarize(self, numbers: Sequence[float]) -> ServiceResult:
        op = "summarize"
        if not numbers:
            return ServiceResult.failure(op, "EMPTY_INPUT", "At least one number is required")
        largest = numbers[0]
        for n in numbers[1:]:
            largest = max_of(largest, n)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "count": len(numbers),
                "max": largest,
                "average": calculate_average(numbers),
                "product": product_of(numbers),
            },
        )

    def factorial(self, n: Any) -> ServiceResult:
        op = "factorial"
        if not is_whole_number(n):
            return ServiceResult.failure(op, "INVALID_NUMBER", "n must be a whole number", n=repr(n))
        value = factorial(n)
        if value is None:
            return ServiceResult.failure(op, "INVALID_NUMBER", "Factorial is undefined for n < 0")
        return ServiceResult(ok=True, op=op, data={"n": n, "value": value})

    def fetch(self) -> ServiceResult:
        """Run the async fetch stub to completion."""
        records = asyncio.run(fetch_data(self._config.data))
        return ServiceResult(ok=True, op="fetch", data={"records": records, "count": len(records)})
