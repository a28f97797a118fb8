"""A mutable 4-dimensional vector."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

from gadgetry.num import EPSILON_EQ_VEC, clamp01


@dataclass
class Vec4:
    """An arbitrary 4-dimensional vector.

    Matrices are taken as sequences of 16 floats in column-major order;
    3-dimensional vectors as any objects with ``x``, ``y`` and ``z``.
    """

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    @staticmethod
    def one() -> "Vec4":
        return Vec4(1.0, 1.0, 1.0, 1.0)

    @staticmethod
    def zero() -> "Vec4":
        return Vec4(0.0, 0.0, 0.0, 0.0)

    @staticmethod
    def lerp(from_: "Vec4", to: "Vec4", t: float) -> "Vec4":
        """Interpolate from ``from_`` to ``to`` by ``t`` clamped to [0, 1]."""
        t = clamp01(t)
        return Vec4(
            t * (to.x - from_.x) + from_.x,
            t * (to.y - from_.y) + from_.y,
            t * (to.z - from_.z) + from_.z,
            t * (to.w - from_.w) + from_.w,
        )

    @staticmethod
    def maximum(left: "Vec4", right: "Vec4") -> "Vec4":
        return Vec4(
            max(left.x, right.x), max(left.y, right.y),
            max(left.z, right.z), max(left.w, right.w),
        )

    @staticmethod
    def minimum(left: "Vec4", right: "Vec4") -> "Vec4":
        return Vec4(
            min(left.x, right.x), min(left.y, right.y),
            min(left.z, right.z), min(left.w, right.w),
        )

    def added_div(self, a: "Vec4", d: float) -> "Vec4":
        """Return this vector plus ``a`` divided by ``d``."""
        d = 1 / d
        return Vec4(a.x * d + self.x, a.y * d + self.y, a.z * d + self.z, a.w * d + self.w)

    def clear(self) -> None:
        self.x = self.y = self.z = self.w = 0.0

    def clone(self) -> "Vec4":
        return Vec4(self.x, self.y, self.z, self.w)

    def conjugate(self) -> None:
        """Negate ``x``, ``y`` and ``z`` in place, but not ``w``."""
        self.x, self.y, self.z = -self.x, -self.y, -self.z

    def conjugated(self) -> "Vec4":
        return Vec4(-self.x, -self.y, -self.z, self.w)

    def distance(self, vec: "Vec4") -> float:
        return self.sub(vec).magnitude()

    def divide(self, d: float) -> None:
        self.scale(1 / d)

    def divided(self, d: float) -> "Vec4":
        return self.scaled(1 / d)

    def dot(self, vec: "Vec4") -> float:
        return self.x * vec.x + self.y * vec.y + self.z * vec.z + self.w * vec.w

    def eq(self, vec: "Vec4") -> bool:
        """Return whether this vector is approximately equal to ``vec``."""
        return self.sub(vec).length() < EPSILON_EQ_VEC

    def length(self) -> float:
        """Return the squared length of this vector."""
        return self.dot(self)

    def magnitude(self) -> float:
        return math.sqrt(self.length())

    def move_towards(self, target: "Vec4", max_distance_delta: float) -> "Vec4":
        a = target.sub(self)
        m = a.magnitude()
        if m <= max_distance_delta or m == 0:
            return target
        return self.added_div(a, m * max_distance_delta)

    def mult_mat4(self, mat: Sequence[float]) -> None:
        """Set this vector to ``mat`` times itself."""
        self.mult_mat4_vec4(mat, self.clone())

    def mult_mat4_vec3(self, mat: Sequence[float], vec) -> None:
        """Set this vector to ``mat`` times ``vec`` extended with ``w = 1``."""
        self.x = mat[0] * vec.x + mat[4] * vec.y + mat[8] * vec.z + mat[12]
        self.y = mat[1] * vec.x + mat[5] * vec.y + mat[9] * vec.z + mat[13]
        self.z = mat[2] * vec.x + mat[6] * vec.y + mat[10] * vec.z + mat[14]
        self.w = mat[3] * vec.x + mat[7] * vec.y + mat[11] * vec.z + mat[15]

    def mult_mat4_vec4(self, mat: Sequence[float], vec: "Vec4") -> None:
        """Set this vector to ``mat`` times ``vec``."""
        x, y, z, w = vec.x, vec.y, vec.z, vec.w
        self.x = mat[0] * x + mat[4] * y + mat[8] * z + mat[12] * w
        self.y = mat[1] * x + mat[5] * y + mat[9] * z + mat[13] * w
        self.z = mat[2] * x + mat[6] * y + mat[10] * z + mat[14] * w
        self.w = mat[3] * x + mat[7] * y + mat[11] * z + mat[15] * w

    def negate(self) -> None:
        self.x, self.y, self.z, self.w = -self.x, -self.y, -self.z, -self.w

    def negated(self) -> "Vec4":
        return Vec4(-self.x, -self.y, -self.z, -self.w)

    def normalize(self) -> None:
        self.normalize_from(self.magnitude())

    def normalize_from(self, magnitude: float) -> None:
        """Divide by ``magnitude`` if positive, otherwise zero this vector."""
        if magnitude > 0:
            self.divide(magnitude)
        else:
            self.clear()

    def normalized(self) -> "Vec4":
        mag = self.magnitude()
        if mag > 0:
            return self.divided(mag)
        return Vec4(0.0, 0.0, 0.0, 0.0)

    def project(self, vec: "Vec4") -> None:
        self.scale(self.dot(vec) / vec.length())

    def projected(self, vec: "Vec4") -> "Vec4":
        """Return the projection of this vector onto ``vec``."""
        return vec.scaled(self.dot(vec) / vec.length())

    def set_from_conjugated(self, c: "Vec4") -> None:
        self.x, self.y, self.z, self.w = -c.x, -c.y, -c.z, c.w

    def set_from_mult(self, left: "Vec4", right: "Vec4") -> None:
        """Set this vector to the quaternion product ``left * right``."""
        l, r = left, right
        w = l.w * r.w - l.x * r.x - l.y * r.y - l.z * r.z
        x = l.x * r.w + l.w * r.x + l.y * r.z - l.z * r.y
        y = l.y * r.w + l.w * r.y + l.z * r.x - l.x * r.z
        z = l.z * r.w + l.w * r.z + l.x * r.y - l.y * r.x
        self.x, self.y, self.z, self.w = x, y, z, w

    def set_from_mult3(self, q: "Vec4", v) -> None:
        """Set this vector to the quaternion ``q`` times the pure quaternion ``v``."""
        w = -(q.x * v.x) - (q.y * v.y) - (q.z * v.z)
        x = q.w * v.x + q.y * v.z - q.z * v.y
        y = q.w * v.y + q.z * v.x - q.x * v.z
        z = q.w * v.z + q.x * v.y - q.y * v.x
        self.x, self.y, self.z, self.w = x, y, z, w

    def set_from_vec3(self, vec) -> None:
        """Copy ``x``, ``y`` and ``z`` from ``vec``; ``w`` is left as is."""
        self.x, self.y, self.z = vec.x, vec.y, vec.z

    def scale(self, v: float) -> None:
        self.x, self.y, self.z, self.w = self.x * v, self.y * v, self.z * v, self.w * v

    def scaled(self, v: float) -> "Vec4":
        return Vec4(self.x * v, self.y * v, self.z * v, self.w * v)

    def sub(self, vec: "Vec4") -> "Vec4":
        return Vec4(self.x - vec.x, self.y - vec.y, self.z - vec.z, self.w - vec.w)

    def subtract(self, vec: "Vec4") -> None:
        self.x, self.y, self.z, self.w = (
            self.x - vec.x, self.y - vec.y, self.z - vec.z, self.w - vec.w,
        )

    def __str__(self) -> str:
        return "{X:%1.2f Y:%1.2f Z:%1.2f W:%1.2f}" % (self.x, self.y, self.z, self.w)