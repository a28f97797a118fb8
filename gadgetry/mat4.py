"""A 4x4 column-major matrix."""

from __future__ import annotations

import math
from typing import Iterable, Iterator, Optional, Sequence

from gadgetry.num import deg_to_rad
from gadgetry.vec3 import Vec3

_SIZE = 16

#: The cells of the 4x4 identity matrix, column-major.
MAT4_IDENTITY: tuple[float, ...] = tuple(1.0 if i % 5 == 0 else 0.0 for i in range(_SIZE))


def _from_rows(*rows: Sequence[float]) -> list[float]:
    """Lay out four rows of four values in column-major order."""
    return [float(rows[r][c]) for c in range(4) for r in range(4)]


def _product(one: Sequence[float], two: Sequence[float]) -> list[float]:
    return [
        sum(one[k * 4 + row] * two[col * 4 + k] for k in range(4))
        for col in range(4)
        for row in range(4)
    ]


class Mat4:
    """A 4x4 matrix of 16 floats in column-major order.

    A new matrix is all zeros unless ``cells`` are given. Most methods
    change the matrix in place; the ``new_*`` constructors return fresh
    matrices.
    """

    __slots__ = ("_m",)

    def __init__(self, cells: Optional[Iterable[float]] = None) -> None:
        if cells is None:
            self._m = [0.0] * _SIZE
            return
        m = [float(c) for c in cells]
        if len(m) != _SIZE:
            raise ValueError(f"a 4x4 matrix needs {_SIZE} cells, got {len(m)}")
        self._m = m

    def __getitem__(self, index: int) -> float:
        return self._m[index]

    def __setitem__(self, index: int, value: float) -> None:
        self._m[index] = float(value)

    def __len__(self) -> int:
        return _SIZE

    def __iter__(self) -> Iterator[float]:
        return iter(self._m)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Mat4):
            return self._m == other._m
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Mat4({self._m!r})"

    def _set(self, cells: Iterable[float]) -> None:
        self._m = [float(c) for c in cells]

    def abs(self) -> "Mat4":
        """Return a new matrix holding the absolute value of every cell."""
        return Mat4(abs(c) for c in self._m)

    def add(self, mat: Sequence[float]) -> None:
        """Add ``mat`` to this matrix in place."""
        self._set(a + b for a, b in zip(self._m, mat))

    def clear(self) -> None:
        """Set every cell to zero."""
        self._m = [0.0] * _SIZE

    def clone(self) -> "Mat4":
        return Mat4(self._m)

    def copy_from(self, mat: Sequence[float]) -> None:
        self._set(mat)

    def copy_to(self, mat: "Mat4") -> None:
        mat.copy_from(self)

    def frustum(
        self, left: float, right: float, bottom: float, top: float, near: float, far: float
    ) -> None:
        """Set this matrix to the given perspective frustum."""
        self._m = _from_rows(
            ((near * 2) / (right - left), 0, (right + left) / (right - left), 0),
            (0, (near * 2) / (top - bottom), (top + bottom) / (top - bottom), 0),
            (0, 0, -(far + near) / (far - near), -(far * near * 2) / (far - near)),
            (0, 0, -1, 0),
        )

    def identity(self) -> None:
        self._set(MAT4_IDENTITY)

    def lookat(self, eye_pos: Vec3, look_target: Vec3, up_vec: Vec3) -> None:
        """Set this matrix to the look-at matrix of the given vectors."""
        l = look_target.sub(eye_pos)
        l.normalize()
        s = l.cross(up_vec)
        s.normalize()
        u = s.cross(l)
        self._m = _from_rows(
            (s.x, u.x, -l.x, -eye_pos.x),
            (s.y, u.y, -l.y, -eye_pos.y),
            (s.z, u.z, -l.z, -eye_pos.z),
            (0, 0, 0, 1),
        )

    def orient(self, look_target: Vec3, world_up: Vec3) -> None:
        """Set this matrix to the orientation matrix of the given vectors."""
        n, u, v = Vec3(), Vec3(), Vec3()
        n.set_from_normalized(look_target)
        u.set_from_cross_of(world_up.normalized(), look_target)
        v.set_from_cross_of(n, u)
        self._m = _from_rows(
            (u.x, u.y, u.z, 0),
            (v.x, v.y, v.z, 0),
            (n.x, n.y, n.z, 0),
            (0, 0, 0, 1),
        )

    def mult1(self, v: float) -> None:
        """Multiply every cell by ``v``."""
        self._set(c * v for c in self._m)

    def perspective(self, fov_y_deg: float, aspect: float, near: float, far: float) -> float:
        """Set this matrix to a perspective projection; return half the vertical FOV in radians."""
        fov_y_rad_half = deg_to_rad(fov_y_deg) * 0.5
        s = 1 / math.tan(fov_y_rad_half)
        self._m = _from_rows(
            (s / aspect, 0, 0, 0),
            (0, s, 0, 0),
            (0, 0, (far + near) / (near - far), (2 * far * near) / (near - far)),
            (0, 0, -1, 0),
        )
        return fov_y_rad_half

    def rotation_x(self, rad: float) -> None:
        sin, cos = math.sin(rad), math.cos(rad)
        self._m = _from_rows((1, 0, 0, 0), (0, cos, -sin, 0), (0, sin, cos, 0), (0, 0, 0, 1))

    def rotation_y(self, rad: float) -> None:
        sin, cos = math.sin(rad), math.cos(rad)
        self._m = _from_rows((cos, 0, sin, 0), (0, 1, 0, 0), (-sin, 0, cos, 0), (0, 0, 0, 1))

    def rotation_z(self, rad: float) -> None:
        sin, cos = math.sin(rad), math.cos(rad)
        self._m = _from_rows((cos, -sin, 0, 0), (sin, cos, 0, 0), (0, 0, 1, 0), (0, 0, 0, 1))

    def scaling(self, vec: Vec3) -> None:
        """Set this matrix to "scale by ``vec``"."""
        self._m = _from_rows(
            (vec.x, 0, 0, 0), (0, vec.y, 0, 0), (0, 0, vec.z, 0), (0, 0, 0, 1)
        )

    def set_from_mult4(self, one: Sequence[float], two: Sequence[float]) -> None:
        """Set this matrix to ``one`` times ``two``."""
        self._m = _product(one, two)

    def set_from_mult_n(self, *mats: Optional[Sequence[float]]) -> None:
        """Set this matrix to the product of all ``mats`` in order.

        ``None`` entries after the first are skipped. With a single matrix,
        this matrix is left unchanged.
        """
        if not mats:
            raise ValueError("at least one matrix is required")
        acc = mats[0]
        for m in mats[1:]:
            if m is not None:
                self._m = _product(acc, m)
                acc = list(self._m)

    def set_from_transpose_of(self, mat: Sequence[float]) -> None:
        self._m = [float(mat[r * 4 + c]) for c in range(4) for r in range(4)]

    def transposed(self) -> "Mat4":
        mat = Mat4()
        mat.set_from_transpose_of(self)
        return mat

    def sub(self, mat: Sequence[float]) -> None:
        """Subtract ``mat`` from this matrix in place."""
        self._set(a - b for a, b in zip(self._m, mat))

    def translation(self, vec: Vec3) -> None:
        """Set this matrix to "translate by ``vec``"."""
        self._m = _from_rows(
            (1, 0, 0, vec.x), (0, 1, 0, vec.y), (0, 0, 1, vec.z), (0, 0, 0, 1)
        )

    @staticmethod
    def new_identity() -> "Mat4":
        return Mat4(MAT4_IDENTITY)

    @staticmethod
    def new_add(a: Sequence[float], b: Sequence[float]) -> "Mat4":
        return Mat4(x + y for x, y in zip(a, b))

    @staticmethod
    def new_sub(a: Sequence[float], b: Sequence[float]) -> "Mat4":
        return Mat4(x - y for x, y in zip(a, b))

    @staticmethod
    def new_frustum(
        left: float, right: float, bottom: float, top: float, near: float, far: float
    ) -> "Mat4":
        mat = Mat4()
        mat.frustum(left, right, bottom, top, near, far)
        return mat

    @staticmethod
    def new_orient(look_target: Vec3, world_up: Vec3) -> "Mat4":
        mat = Mat4()
        mat.orient(look_target, world_up)
        return mat

    @staticmethod
    def new_lookat(eye_pos: Vec3, look_target: Vec3, up_vec: Vec3) -> "Mat4":
        mat = Mat4()
        mat.lookat(eye_pos, look_target, up_vec)
        return mat

    @staticmethod
    def new_mult1(m: Sequence[float], v: float) -> "Mat4":
        return Mat4(c * v for c in m)

    @staticmethod
    def new_mult4(one: Sequence[float], two: Sequence[float]) -> "Mat4":
        return Mat4(_product(one, two))

    @staticmethod
    def new_mult_n(*mats: Optional[Sequence[float]]) -> "Mat4":
        mat = Mat4()
        mat.set_from_mult_n(*mats)
        return mat

    @staticmethod
    def new_perspective(fov_y: float, aspect: float, near: float, far: float) -> "Mat4":
        mat = Mat4()
        mat.perspective(fov_y, aspect, near, far)
        return mat

    @staticmethod
    def new_rotation_x(rad: float) -> "Mat4":
        mat = Mat4()
        mat.rotation_x(rad)
        return mat

    @staticmethod
    def new_rotation_y(rad: float) -> "Mat4":
        mat = Mat4()
        mat.rotation_y(rad)
        return mat

    @staticmethod
    def new_rotation_z(rad: float) -> "Mat4":
        mat = Mat4()
        mat.rotation_z(rad)
        return mat

    @staticmethod
    def new_scaling(vec: Vec3) -> "Mat4":
        mat = Mat4()
        mat.scaling(vec)
        return mat

    @staticmethod
    def new_translation(vec: Vec3) -> "Mat4":
        mat = Mat4()
        mat.translation(vec)
        return mat


def mat4_identities(*mats: Mat4) -> None:
    """Set every one of ``mats`` to the identity matrix."""
    for mat in mats:
        mat.identity()