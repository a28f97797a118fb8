"""Helpers for common graphics and imaging needs."""

from __future__ import annotations

import math
import struct
import zlib
from dataclasses import dataclass, fields
from typing import Sequence

_PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"


def _to_float32(value: float) -> float:
    return struct.unpack("<f", struct.pack("<f", value))[0]


def _rgba_values(vals: Sequence[float]) -> tuple[float, float, float, float]:
    r, g, b, a = (list(vals[:4]) + [0.0] * 4)[:4]
    if len(vals) == 3:
        a = 1.0
    return float(r), float(g), float(b), float(a)


@dataclass
class Rgba64:
    """A colour as four double-precision floats in RGBA order."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0
    a: float = 0.0

    @classmethod
    def from_values(cls, *vals: float) -> "Rgba64":
        """Build a colour from up to four values in RGBA order.

        With exactly three values, alpha becomes 1; missing values are 0.
        """
        return cls(*_rgba_values(vals))


@dataclass
class Rgba32(Rgba64):
    """A colour as four single-precision floats in RGBA order."""

    def __post_init__(self) -> None:
        for f in fields(self):
            setattr(self, f.name, _to_float32(getattr(self, f.name)))

    @classmethod
    def from_values(cls, *vals: float) -> "Rgba32":
        """Build a colour from up to four values in RGBA order.

        With exactly three values, alpha becomes 1; missing values are 0.
        Each component is rounded to single precision.
        """
        return cls(*_rgba_values(vals))


def gamma_to_linear_space(f: float) -> float:
    """Convert a value from gamma (sRGB) to linear colour space."""
    if f > 0.0404482362771082:
        return math.pow((f + 0.055) / 1.055, 2.4)
    return f / 12.92


def linear_to_gamma_space(f: float) -> float:
    """Convert a value from linear to gamma (sRGB) colour space."""
    if f > 0.00313066844250063:
        return 1.055 * math.pow(f, 1 / 2.4) - 0.055
    return f * 12.92


def index_2d(x: int, y: int, ysize: int) -> int:
    """Return the flat index of 2D coordinate ``(x, y)``."""
    return (x * ysize) + y


def index_3d(x: int, y: int, z: int, xsize: int, ysize: int) -> int:
    """Return the flat index of 3D coordinate ``(x, y, z)``."""
    return (((z * xsize) + x) * ysize) + y


def _pixel(p: Sequence[int]) -> tuple[int, ...]:
    px = tuple(p)
    if len(px) == 3:
        px += (255,)
    if len(px) != 4:
        raise ValueError(f"pixel must have 3 or 4 components, got {len(px)}")
    return px


def _chunk(tag: bytes, data: bytes) -> bytes:
    crc = zlib.crc32(tag + data) & 0xFFFFFFFF
    return struct.pack(">I", len(data)) + tag + data + struct.pack(">I", crc)


def save_png_image_file(rows: Sequence[Sequence[Sequence[int]]], file_path: str) -> None:
    """Save an image as an 8-bit RGBA PNG file.

    ``rows`` runs top to bottom; each row holds pixels of 3 (RGB, opaque)
    or 4 (RGBA) integer components from 0 to 255.
    """
    pixels = [[_pixel(p) for p in row] for row in rows]
    height = len(pixels)
    width = len(pixels[0]) if pixels else 0
    if width == 0 or height == 0:
        raise ValueError("invalid image size")
    if any(len(row) != width for row in pixels):
        raise ValueError("all rows must have the same width")
    raw = b"".join(b"\x00" + bytes(c for px in row for c in px) for row in pixels)
    header = struct.pack(">IIBBBBB", width, height, 8, 6, 0, 0, 0)
    data = (
        _PNG_SIGNATURE
        + _chunk(b"IHDR", header)
        + _chunk(b"IDAT", zlib.compress(raw))
        + _chunk(b"IEND", b"")
    )
    with open(file_path, "wb") as handle:
        handle.write(data)