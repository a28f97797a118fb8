"""A 3x3 matrix."""

from __future__ import annotations

from typing import Iterable, Iterator, Optional

_SIZE = 9

#: The cells of the 3x3 identity matrix.
MAT3_IDENTITY: tuple[float, ...] = tuple(1.0 if i % 4 == 0 else 0.0 for i in range(_SIZE))


class Mat3:
    """A 3x3 matrix of 9 floats; all zeros unless ``cells`` are given."""

    __slots__ = ("_m",)

    def __init__(self, cells: Optional[Iterable[float]] = None) -> None:
        if cells is None:
            self._m = [0.0] * _SIZE
            return
        m = [float(c) for c in cells]
        if len(m) != _SIZE:
            raise ValueError(f"a 3x3 matrix needs {_SIZE} cells, got {len(m)}")
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
        if isinstance(other, Mat3):
            return self._m == other._m
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Mat3({self._m!r})"

    def identity(self) -> None:
        self._m = list(MAT3_IDENTITY)

    def transpose(self) -> None:
        """Transpose this matrix in place."""
        m = self._m
        m[1], m[2], m[3], m[5], m[6], m[7] = m[3], m[6], m[1], m[7], m[2], m[5]

    @staticmethod
    def new_identity() -> "Mat3":
        return Mat3(MAT3_IDENTITY)


def mat3_identities(*mats: Mat3) -> None:
    """Set every one of ``mats`` to the identity matrix."""
    for mat in mats:
        mat.identity()