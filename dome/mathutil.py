"""Small numeric helpers: a 2D vector, interpolation, clamping and gcd."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Vec:
    """An immutable 2D vector of floats."""

    x: float
    y: float

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def __add__(self, other: Vec) -> Vec:
        return Vec(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec) -> Vec:
        return Vec(self.x - other.x, self.y - other.y)

    def __mul__(self, scale: float) -> Vec:
        return Vec(self.x * scale, self.y * scale)

    __rmul__ = __mul__

    def __neg__(self) -> Vec:
        return self * -1

    def dot(self, other: Vec) -> float:
        return self.x * other.x + self.y * other.y

    def perp(self) -> Vec:
        """Return the vector rotated a quarter turn anticlockwise."""
        return Vec(-self.y, self.x)


def lerp(a: float, b: float, f: float) -> float:
    """Linearly interpolate from a to b by the fraction f."""
    return a * (1.0 - f) + b * f


def _middle(n1, n2, n3):
    if n1 > n3:
        n1, n3 = n3, n1
    if n1 > n2:
        n1, n2 = n2, n1
    return n2 if n2 < n3 else n3


def mid(n1: int, n2: int, n3: int) -> int:
    """Return the median of three integers; clamps n2 between n1 and n3."""
    return int(_middle(int(n1), int(n2), int(n3)))


def fmid(n1: float, n2: float, n3: float) -> float:
    """Return the median of three floats."""
    return float(_middle(float(n1), float(n2), float(n3)))


def gcd(a: int, b: int) -> int:
    """Return the greatest common divisor of two non-negative integers."""
    if a < 0 or b < 0:
        raise ValueError("gcd takes non-negative integers")
    while b:
        a, b = b, a % b
    return a