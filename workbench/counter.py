"""A decrementing counter, a shared counter instance and a model that uses one."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Counter:
    """A counter that is stepped backwards and reports its value."""

    value: int = 0

    def back(self) -> int:
        """Decrement the counter, print the new value and return it."""
        self.value -= 1
        print(self.value)
        return self.value

    def display(self) -> str:
        """Print and return a line describing the current value."""
        line = f"now id is {self.value}"
        print(line)
        return line


_instance: Counter | None = None


def get_instance() -> Counter:
    """Return the shared counter, creating it at 4 on first use.

    Prints ``nil`` when the counter is created and displays it on every call.
    """
    global _instance
    if _instance is None:
        print("nil")
        _instance = Counter(4)
    _instance.display()
    return _instance


def report_error(counter: Counter) -> None:
    """Step ``counter`` back once and display it."""
    counter.back()
    counter.display()


@dataclass
class Model:
    """A small record whose ``run`` reports through a fresh counter."""

    id: int = 1
    name: str = "stanza"
    gname: str = "Mr.stanza"

    def run(self) -> None:
        report_error(Counter())