"""A last-in, first-out stack holding values of any type."""

from __future__ import annotations

from typing import Any


class Stack:
    """A LIFO stack; popping an empty stack returns ``None``."""

    def __init__(self) -> None:
        self._items: list[Any] = []

    def push(self, value: Any) -> None:
        """Put ``value`` on top of the stack."""
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top value, or ``None`` if the stack is empty."""
        if not self._items:
            return None
        return self._items.pop()

    def __len__(self) -> int:
        return len(self._items)