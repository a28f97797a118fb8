"""A mutable 2-dimensional vector."""

from __future__ import annotations

import math
from dataclasses import dataclass

from gadgetry.num import EPSILON_EQ_VEC, RAD2DEG, clamp, clamp01


@dataclass
class Vec2:
    """A 2-dimensional vector.

    Methods without a ``safe`` variant divide without checking for zero
    and raise ``ZeroDivisionError`` in that case.
    """

    x: float = 0.0
    y: float = 0.0

    @staticmethod
    def one() -> "Vec2":
        return Vec2(1.0, 1.0)

    @staticmethod
    def right() -> "Vec2":
        return Vec2(1.0, 0.0)

    @staticmethod
    def up() -> "Vec2":
        return Vec2(0.0, 1.0)

    @staticmethod
    def zero() -> "Vec2":
        return Vec2(0.0, 0.0)

    @staticmethod
    def lerp(from_: "Vec2", to: "Vec2", t: float) -> "Vec2":
        """Interpolate from ``from_`` to ``to`` by ``t`` clamped to [0, 1]."""
        t = clamp01(t)
        return Vec2(t * (to.x - from_.x) + from_.x, t * (to.y - from_.y) + from_.y)

    @staticmethod
    def maximum(left: "Vec2", right: "Vec2") -> "Vec2":
        return Vec2(max(left.x, right.x), max(left.y, right.y))

    @staticmethod
    def minimum(left: "Vec2", right: "Vec2") -> "Vec2":
        return Vec2(min(left.x, right.x), min(left.y, right.y))

    def add(self, vec: "Vec2") -> None:
        """Add ``vec`` to this vector in place."""
        self.x, self.y = self.x + vec.x, self.y + vec.y

    def added_div(self, a: "Vec2", d: float) -> "Vec2":
        """Return this vector plus ``a`` divided by ``d``."""
        d = 1 / d
        return Vec2(a.x * d + self.x, a.y * d + self.y)

    def angle_deg(self, to: "Vec2") -> float:
        return RAD2DEG * self.angle_rad(to)

    def angle_rad(self, to: "Vec2") -> float:
        return math.acos(clamp(self.normalized().dot(to.normalized()), -1.0, 1.0))

    def clamp_magnitude(self, max_length: float) -> "Vec2":
        """Return a copy scaled down to ``max_length``, or this vector if shorter."""
        sq = self.length()
        if sq > max_length * max_length:
            return self.scaled(max_length * (1 / math.sqrt(sq)))
        return self

    def clear(self) -> None:
        self.x, self.y = 0.0, 0.0

    def distance(self, vec: "Vec2") -> float:
        return self.sub(vec).magnitude()

    def div(self, vec: "Vec2") -> "Vec2":
        """Return the component-wise quotient of this vector and ``vec``."""
        return Vec2(self.x / vec.x, self.y / vec.y)

    def divide(self, d: float) -> None:
        d = 1 / d
        self.x, self.y = self.x * d, self.y * d

    def divided(self, d: float) -> "Vec2":
        d = 1 / d
        return Vec2(self.x * d, self.y * d)

    def div_safe(self, vec: "Vec2") -> "Vec2":
        """Return the component-wise quotient; components divided by zero become 0."""
        return Vec2(
            self.x / vec.x if vec.x != 0 else 0.0,
            self.y / vec.y if vec.y != 0 else 0.0,
        )

    def dot(self, vec: "Vec2") -> float:
        return self.x * vec.x + self.y * vec.y

    def eq(self, vec: "Vec2") -> bool:
        """Return whether this vector is approximately equal to ``vec``."""
        return self.sub(vec).length() < EPSILON_EQ_VEC

    def length(self) -> float:
        """Return the squared length of this vector."""
        return self.dot(self)

    def magnitude(self) -> float:
        return math.sqrt(self.length())

    def move_towards(self, target: "Vec2", max_distance_delta: float) -> "Vec2":
        a = target.sub(self)
        m = a.magnitude()
        if m <= max_distance_delta or m == 0:
            return target
        return self.added_div(a, m * max_distance_delta)

    def mult(self, vec: "Vec2") -> "Vec2":
        return Vec2(self.x * vec.x, self.y * vec.y)

    def negate(self) -> "Vec2":
        """Return a new vector with both components negated."""
        return Vec2(-self.x, -self.y)

    def normalize(self) -> None:
        self.divide(self.magnitude())

    def normalize_safe(self) -> None:
        mag = self.magnitude()
        if mag > 0:
            self.divide(mag)
        else:
            self.clear()

    def normalized(self) -> "Vec2":
        return self.divided(self.magnitude())

    def normalized_safe(self) -> "Vec2":
        mag = self.magnitude()
        if mag > 0:
            return self.divided(mag)
        return Vec2(0.0, 0.0)

    def normalized_scaled(self, factor: float) -> "Vec2":
        return self.normalized().scaled(factor)

    def normalized_scaled_safe(self, factor: float) -> "Vec2":
        return self.normalized_safe().scaled(factor)

    def scale(self, factor: float) -> None:
        self.x, self.y = self.x * factor, self.y * factor

    def scaled(self, factor: float) -> "Vec2":
        return Vec2(self.x * factor, self.y * factor)

    def set(self, x: float, y: float) -> None:
        self.x, self.y = x, y

    def sub(self, vec: "Vec2") -> "Vec2":
        return Vec2(self.x - vec.x, self.y - vec.y)

    def subtract(self, vec: "Vec2") -> None:
        self.x, self.y = self.x - vec.x, self.y - vec.y

    def __str__(self) -> str:
        return "{X:%1.2f Y:%1.2f}" % (self.x, self.y)