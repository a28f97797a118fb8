"""Quaternions."""

from __future__ import annotations

import math
from dataclasses import dataclass

from gadgetry.num import RAD2DEG
from gadgetry.vec4 import Vec4


@dataclass
class Quat(Vec4):
    """A quaternion stored as ``x``, ``y``, ``z`` and ``w``."""

    @staticmethod
    def identity() -> "Quat":
        return Quat(0.0, 0.0, 0.0, 1.0)

    def angle_deg(self, q: Vec4) -> float:
        """Return the angle in degrees between this rotation and ``q``."""
        return RAD2DEG * self.angle_rad(q)

    def angle_rad(self, q: Vec4) -> float:
        """Return the angle in radians between this rotation and ``q``."""
        return 2 * math.acos(min(1.0, abs(self.dot(q))))

    def eq(self, vec: Vec4) -> bool:
        """Return whether the dot product with ``vec`` exceeds 0.999999."""
        return self.dot(vec) > 0.999999

    def mul(self, q: Vec4) -> "Quat":
        """Return the product of this quaternion and ``q``."""
        return Quat(
            self.w * q.x + self.x * q.w + self.y * q.z - self.z * q.y,
            self.w * q.y + self.y * q.w + self.z * q.x - self.x * q.z,
            self.w * q.z + self.z * q.w + self.x * q.y - self.y * q.x,
            self.w * q.w - self.x * q.x - self.y * q.y - self.z * q.z,
        )