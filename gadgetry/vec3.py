"""A mutable 3-dimensional vector."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass
from typing import Sequence

from gadgetry.num import EPSILON_EQ_VEC, RAD2DEG
from gadgetry.num import clamp as _clamp
from gadgetry.num import clamp01 as _clamp01
from gadgetry.num import deg_to_rad as _deg_to_rad
from gadgetry.num import eq as _eq
from gadgetry.num import sign as _sign
from gadgetry.vec4 import Vec4


@dataclass
class Vec3:
    """A 3-dimensional vector.

    Matrices are taken as sequences of 16 floats in column-major order.
    Division by zero raises ``ZeroDivisionError`` unless a ``safe``
    variant is used.
    """

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @staticmethod
    def back() -> "Vec3":
        return Vec3(0.0, 0.0, -1.0)

    @staticmethod
    def down() -> "Vec3":
        return Vec3(0.0, -1.0, 0.0)

    @staticmethod
    def fwd() -> "Vec3":
        return Vec3(0.0, 0.0, 1.0)

    @staticmethod
    def left() -> "Vec3":
        return Vec3(-1.0, 0.0, 0.0)

    @staticmethod
    def one() -> "Vec3":
        return Vec3(1.0, 1.0, 1.0)

    @staticmethod
    def right() -> "Vec3":
        return Vec3(1.0, 0.0, 0.0)

    @staticmethod
    def up() -> "Vec3":
        return Vec3(0.0, 1.0, 0.0)

    @staticmethod
    def zero() -> "Vec3":
        return Vec3(0.0, 0.0, 0.0)

    @staticmethod
    def lerp(from_: "Vec3", to: "Vec3", t: float) -> "Vec3":
        """Interpolate from ``from_`` to ``to`` by ``t`` clamped to [0, 1]."""
        t = _clamp01(t)
        return Vec3(
            t * (to.x - from_.x) + from_.x,
            t * (to.y - from_.y) + from_.y,
            t * (to.z - from_.z) + from_.z,
        )

    @staticmethod
    def maximum(left: "Vec3", right: "Vec3") -> "Vec3":
        return Vec3(max(left.x, right.x), max(left.y, right.y), max(left.z, right.z))

    @staticmethod
    def minimum(left: "Vec3", right: "Vec3") -> "Vec3":
        return Vec3(min(left.x, right.x), min(left.y, right.y), min(left.z, right.z))

    def add(self, vec: "Vec3") -> None:
        """Add ``vec`` to this vector in place."""
        self.x, self.y, self.z = self.x + vec.x, self.y + vec.y, self.z + vec.z

    def added(self, vec: "Vec3") -> "Vec3":
        return Vec3(self.x + vec.x, self.y + vec.y, self.z + vec.z)

    def add1(self, val: float) -> None:
        """Add ``val`` to all three components."""
        self.x, self.y, self.z = self.x + val, self.y + val, self.z + val

    def add3(self, x: float, y: float, z: float) -> None:
        self.x, self.y, self.z = self.x + x, self.y + y, self.z + z

    def all_eq(self, val: float) -> bool:
        """Return whether every component is approximately equal to ``val``."""
        return _eq(self.x, val) and _eq(self.y, val) and _eq(self.z, val)

    def all_geq(self, vec: "Vec3") -> bool:
        return self.x >= vec.x and self.y >= vec.y and self.z >= vec.z

    def all_in(self, lo: "Vec3", hi: "Vec3") -> bool:
        """Return whether every component lies strictly between ``lo`` and ``hi``."""
        return lo.x < self.x < hi.x and lo.y < self.y < hi.y and lo.z < self.z < hi.z

    def all_leq(self, vec: "Vec3") -> bool:
        return self.x <= vec.x and self.y <= vec.y and self.z <= vec.z

    def angle_deg(self, to: "Vec3") -> float:
        return RAD2DEG * self.angle_rad(to)

    def angle_rad(self, to: "Vec3") -> float:
        return math.acos(_clamp(self.normalized().dot(to.normalized()), -1.0, 1.0))

    def clamp(self, lo: "Vec3", hi: "Vec3") -> None:
        """Clamp each component between those of ``lo`` and ``hi``, in place."""
        self.x = _clamp(self.x, lo.x, hi.x)
        self.y = _clamp(self.y, lo.y, hi.y)
        self.z = _clamp(self.z, lo.z, hi.z)

    def clamp01(self) -> None:
        self.x, self.y, self.z = _clamp01(self.x), _clamp01(self.y), _clamp01(self.z)

    def clamp_magnitude(self, max_length: float) -> "Vec3":
        """Return a copy scaled down to ``max_length``, or this vector if shorter."""
        sq = self.length()
        if sq > max_length * max_length:
            return self.scaled(max_length * (1 / math.sqrt(sq)))
        return self

    def clear(self) -> None:
        self.x = self.y = self.z = 0.0

    def cross(self, vec: "Vec3") -> "Vec3":
        return Vec3(
            self.y * vec.z - self.z * vec.y,
            self.z * vec.x - self.x * vec.z,
            self.x * vec.y - self.y * vec.x,
        )

    def cross_normalized(self, vec: "Vec3") -> "Vec3":
        r = self.cross(vec)
        r.normalize()
        return r

    def distance(self, vec: "Vec3") -> float:
        return math.sqrt(self.sub(vec).length())

    def distance_manhattan(self, vec: "Vec3") -> float:
        return abs(vec.x - self.x) + abs(vec.y - self.y) + abs(vec.z - self.z)

    def div(self, vec: "Vec3") -> "Vec3":
        """Return the component-wise quotient of this vector and ``vec``."""
        return Vec3(self.x / vec.x, self.y / vec.y, self.z / vec.z)

    def divide(self, d: float) -> None:
        self.scale(1 / d)

    def divided(self, d: float) -> "Vec3":
        return self.scaled(1 / d)

    def dot(self, vec: "Vec3") -> float:
        return self.x * vec.x + self.y * vec.y + self.z * vec.z

    def dot_sub(self, vec1: "Vec3", vec2: "Vec3") -> float:
        """Return the dot product of this vector and ``vec1 - vec2``."""
        return (
            self.x * (vec1.x - vec2.x)
            + self.y * (vec1.y - vec2.y)
            + self.z * (vec1.z - vec2.z)
        )

    def eq(self, vec: "Vec3") -> bool:
        """Return whether this vector is approximately equal to ``vec``."""
        return self.sub(vec).length() < EPSILON_EQ_VEC

    def length(self) -> float:
        """Return the squared length of this vector."""
        return self.dot(self)

    def magnitude(self) -> float:
        return math.sqrt(self.length())

    def max(self) -> float:
        """Return the largest component."""
        return max(self.x, self.y, self.z)

    def max_abs(self) -> float:
        return max(abs(self.x), abs(self.y), abs(self.z))

    def min(self) -> float:
        """Return the smallest component."""
        return min(self.x, self.y, self.z)

    def mult(self, vec: "Vec3") -> "Vec3":
        return Vec3(self.x * vec.x, self.y * vec.y, self.z * vec.z)

    def mult3(self, x: float, y: float, z: float) -> "Vec3":
        return Vec3(self.x * x, self.y * y, self.z * z)

    def negate(self) -> None:
        self.x, self.y, self.z = -self.x, -self.y, -self.z

    def negated(self) -> "Vec3":
        return Vec3(-self.x, -self.y, -self.z)

    def normalize(self) -> None:
        self.divide(self.magnitude())

    def normalize_safe(self) -> None:
        mag = self.magnitude()
        if mag > 0:
            self.divide(mag)
        else:
            self.clear()

    def normalized(self) -> "Vec3":
        return self.divided(self.magnitude())

    def normalized_scaled(self, factor: float) -> "Vec3":
        return self.normalized().scaled(factor)

    def rcp(self) -> "Vec3":
        """Return the component-wise reciprocal."""
        return Vec3(1 / self.x, 1 / self.y, 1 / self.z)

    def rotate_deg(self, angle_deg: float, axis: "Vec3") -> None:
        """Rotate this vector ``angle_deg`` degrees around the unit ``axis``."""
        self.rotate_rad(_deg_to_rad(angle_deg / 2), axis)

    def rotate_rad(self, angle_rad: float, axis: "Vec3") -> None:
        """Rotate by the quaternion built from ``axis`` and the half-angle ``angle_rad``."""
        s, c = math.sin(angle_rad), math.cos(angle_rad)
        qr = Vec4(axis.x * s, axis.y * s, axis.z * s, c)
        qc = Vec4()
        qc.set_from_conjugated(qr)
        q = Vec4()
        q.set_from_mult3(qr, self)
        qw = Vec4()
        qw.set_from_mult(q, qc)
        self.x, self.y, self.z = qw.x, qw.y, qw.z

    def scale(self, factor: float) -> None:
        self.x, self.y, self.z = self.x * factor, self.y * factor, self.z * factor

    def scale_add(self, factor: "Vec3", add: "Vec3") -> None:
        """Multiply component-wise by ``factor``, then add ``add``, in place."""
        self.x = self.x * factor.x + add.x
        self.y = self.y * factor.y + add.y
        self.z = self.z * factor.z + add.z

    def scaled(self, factor: float) -> "Vec3":
        return Vec3(self.x * factor, self.y * factor, self.z * factor)

    def scaled_added(self, factor: float, add: "Vec3") -> "Vec3":
        return Vec3(self.x * factor + add.x, self.y * factor + add.y, self.z * factor + add.z)

    def set(self, x: float, y: float, z: float) -> None:
        self.x, self.y, self.z = x, y, z

    def set_from_add(self, vec1: "Vec3", vec2: "Vec3") -> None:
        self.set(vec1.x + vec2.x, vec1.y + vec2.y, vec1.z + vec2.z)

    def set_from_add_add(self, a: "Vec3", b: "Vec3", c: "Vec3") -> None:
        self.set(a.x + b.x + c.x, a.y + b.y + c.y, a.z + b.z + c.z)

    def set_from_add_scaled(self, vec1: "Vec3", vec2: "Vec3", mul: float) -> None:
        """Set to ``mul * vec2 + vec1``."""
        self.set(mul * vec2.x + vec1.x, mul * vec2.y + vec1.y, mul * vec2.z + vec1.z)

    def set_from_add_sub(self, a: "Vec3", b: "Vec3", c: "Vec3") -> None:
        self.set(a.x + b.x - c.x, a.y + b.y - c.y, a.z + b.z - c.z)

    def set_from_cross(self, vec: "Vec3") -> None:
        """Set to the cross product of this vector and ``vec``."""
        self.set_from_cross_of(Vec3(self.x, self.y, self.z), vec)

    def set_from_cross_of(self, one: "Vec3", two: "Vec3") -> None:
        self.set(
            one.y * two.z - one.z * two.y,
            one.z * two.x - one.x * two.z,
            one.x * two.y - one.y * two.x,
        )

    def set_from_deg_to_rad(self, deg: "Vec3") -> None:
        self.set(_deg_to_rad(deg.x), _deg_to_rad(deg.y), _deg_to_rad(deg.z))

    def set_from_mad(self, mul1: "Vec3", mul2: "Vec3", add: "Vec3") -> None:
        """Set to ``mul1 * mul2 + add`` component-wise."""
        self.set(
            mul1.x * mul2.x + add.x, mul1.y * mul2.y + add.y, mul1.z * mul2.z + add.z
        )

    def set_from_divided(self, vec: "Vec3", d: float) -> None:
        d = 1 / d
        self.set(vec.x * d, vec.y * d, vec.z * d)

    def set_from_mult(self, v1: "Vec3", v2: "Vec3") -> None:
        self.set(v1.x * v2.x, v1.y * v2.y, v1.z * v2.z)

    def set_from_scaled(self, vec: "Vec3", mul: float) -> None:
        self.set(vec.x * mul, vec.y * mul, vec.z * mul)

    def set_from_scaled_sub(self, vec1: "Vec3", vec2: "Vec3", mul: float) -> None:
        """Set to ``(vec1 - vec2) * mul``."""
        self.set((vec1.x - vec2.x) * mul, (vec1.y - vec2.y) * mul, (vec1.z - vec2.z) * mul)

    def set_from_negated(self, vec: "Vec3") -> None:
        self.set(-vec.x, -vec.y, -vec.z)

    def set_from_normalized(self, vec: "Vec3") -> None:
        self.set_from_divided(vec, vec.magnitude())

    def set_from_rcp(self, vec: "Vec3") -> None:
        self.set(1 / vec.x, 1 / vec.y, 1 / vec.z)

    def set_from_rotation(self, pos: "Vec3", rot_cos: "Vec3", rot_sin: "Vec3") -> None:
        """Set to ``pos`` rotated as expressed by the cosines and sines of the angles."""
        tmp = pos.y * rot_sin.x + pos.z * rot_cos.x
        self.set(
            pos.x * rot_cos.y + tmp * rot_sin.y,
            pos.y * rot_cos.x - pos.z * rot_sin.x,
            -pos.x * rot_sin.y + tmp * rot_cos.y,
        )

    def set_from_sub(self, vec1: "Vec3", vec2: "Vec3") -> None:
        self.set(vec1.x - vec2.x, vec1.y - vec2.y, vec1.z - vec2.z)

    def set_from_sub_add(self, a: "Vec3", b: "Vec3", c: "Vec3") -> None:
        self.set(a.x - b.x + c.x, a.y - b.y + c.y, a.z - b.z + c.z)

    def set_from_sub_scaled(self, v1: "Vec3", v2: "Vec3", v2_scale: float) -> None:
        """Set to ``v1 - v2 * v2_scale``."""
        self.set(v1.x - v2.x * v2_scale, v1.y - v2.y * v2_scale, v1.z - v2.z * v2_scale)

    def set_from_sub_sub(self, a: "Vec3", b: "Vec3", c: "Vec3") -> None:
        self.set(a.x - b.x - c.x, a.y - b.y - c.y, a.z - b.z - c.z)

    def set_from_sub_mult(self, sub1: "Vec3", sub2: "Vec3", mul: "Vec3") -> None:
        """Set to ``(sub1 - sub2) * mul`` component-wise."""
        self.set(
            mul.x * (sub1.x - sub2.x), mul.y * (sub1.y - sub2.y), mul.z * (sub1.z - sub2.z)
        )

    def set_to_max(self) -> None:
        self.x = self.y = self.z = sys.float_info.max

    def set_to_min(self) -> None:
        self.x = self.y = self.z = -sys.float_info.max

    def sign(self) -> "Vec3":
        """Return the sign (-1, 0 or 1) of each component."""
        return Vec3(_sign(self.x), _sign(self.y), _sign(self.z))

    def sub(self, vec: "Vec3") -> "Vec3":
        return Vec3(self.x - vec.x, self.y - vec.y, self.z - vec.z)

    def sub_div_mult(self, sub: "Vec3", div: "Vec3", mul: "Vec3") -> "Vec3":
        """Return ``((self - sub) / div) * mul`` component-wise."""
        return Vec3(
            mul.x * ((self.x - sub.x) / div.x),
            mul.y * ((self.y - sub.y) / div.y),
            mul.z * ((self.z - sub.z) / div.z),
        )

    def sub_floor_div_mult(self, div: float, mul: float) -> "Vec3":
        """Return ``self - mul * floor(self / div)`` component-wise."""
        div = 1 / div
        return self.sub(
            Vec3(
                mul * math.floor(self.x * div),
                mul * math.floor(self.y * div),
                mul * math.floor(self.z * div),
            )
        )

    def sub_from(self, val: float) -> "Vec3":
        """Return ``val`` minus each component."""
        return Vec3(val - self.x, val - self.y, val - self.z)

    def sub_scaled(self, vec: "Vec3", val: float) -> "Vec3":
        """Return ``(self - vec) * val``."""
        return Vec3(val * (self.x - vec.x), val * (self.y - vec.y), val * (self.z - vec.z))

    def subtract(self, vec: "Vec3") -> None:
        self.x, self.y, self.z = self.x - vec.x, self.y - vec.y, self.z - vec.z

    def transform_coord(self, mat: Sequence[float]) -> None:
        """Transform this coordinate by ``mat``, including the perspective divide."""
        q = Vec4()
        q.mult_mat4_vec3(mat, self)
        w = 1 / q.w
        self.set(q.x * w, q.y * w, q.z * w)

    def transform_normal(self, mat: Sequence[float], abs_mat: bool) -> None:
        """Transform this normal by the upper 3x3 part of ``mat``.

        With ``abs_mat`` the absolute values of the matrix cells are used.
        """
        cells = [mat[i] for i in (0, 1, 2, 4, 5, 6, 8, 9, 10)]
        if abs_mat:
            cells = [abs(c) for c in cells]
        m11, m21, m31, m12, m22, m32, m13, m23, m33 = cells
        x = self.x * m11 + self.y * m21 + self.z * m31
        y = self.x * m12 + self.y * m22 + self.z * m32
        z = self.x * m13 + self.y * m23 + self.z * m33
        self.set(x, y, z)

    def __str__(self) -> str:
        return "{X:%1.2f Y:%1.2f Z:%1.2f}" % (self.x, self.y, self.z)