"""Points in cartesian and polar form sharing an x/y view."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class CartesianPoint:
    """A point given by its x and y coordinates."""

    x: float
    y: float

    def __str__(self) -> str:
        return f"({self.x:f}, {self.y:f})"


@dataclass(frozen=True)
class PolarPoint:
    """A point given by its radius and angle in radians."""

    r: float
    theta: float

    @property
    def x(self) -> float:
        return self.r * math.cos(self.theta)

    @property
    def y(self) -> float:
        return self.r * math.sin(self.theta)

    def __str__(self) -> str:
        return f"({self.r:f}, {self.theta:f}°)"


def make_point(x: float, y: float) -> CartesianPoint:
    """Return a cartesian point at ``(x, y)``."""
    return CartesianPoint(float(x), float(y))