"""Last-in-first-out stack.

INVARIANT: ``size() >= 0``; ``pop()`` and ``peek()`` are defined only
when the stack holds at least one item.
"""

from __future__ import annotations

from typing import Generic, TypeVar

T = TypeVar("T")


class EmptyStackError(IndexError):
    """Raised when removing or inspecting the top of an empty stack."""

    def __init__(self, operation: str) -> None:
        super().__init__(f"Cannot {operation} from an empty stack")
        self.operation = operation


class Stack(Generic[T]):
    """Single-owner LIFO container. Not thread-safe."""

    def __init__(self) -> None:
        self._items: list[T] = []

    def push(self, item: T) -> None:
        self._items.append(item)

    def pop(self) -> T:
        """Remove and return the top item.

        Raises:
            EmptyStackError: If the stack is empty.
        """
        if not self._items:
            raise EmptyStackError("pop")
        return self._items.pop()

    def peek(self) -> T:
        """Return the top item without removing it.

        Raises:
            EmptyStackError: If the stack is empty.
        """
        if not self._items:
            raise EmptyStackError("peek")
        return self._items[-1]

    def size(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        return not self._items

    def clear(self) -> None:
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"Stack({self._items!r})"
