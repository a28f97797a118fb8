"""Numeric helpers for common maths needs."""

from __future__ import annotations

import math

DEG2RAD = math.pi / 180
RAD2DEG = 180 / math.pi

INFINITY = math.inf
NEGATIVE_INFINITY = -math.inf
#: The difference between 1.0 and the next larger float.
EPSILON = math.nextafter(1.0, math.inf) - 1.0
EPSILON_EQ_FLOAT = 1.121039e-44
EPSILON_EQ_FLOAT_FACTOR = 1e-06
EPSILON_EQ_VEC = 9.99999944e-11

_U32 = 0xFFFFFFFF


def _check_u32(v: int) -> int:
    if not 0 <= v <= _U32:
        raise ValueError(f"value {v} is not an unsigned 32-bit integer")
    return v


def clamp(val: float, c0: float, c1: float) -> float:
    """Clamp ``val`` between ``c0`` and ``c1``."""
    if val < c0:
        return c0
    if val > c1:
        return c1
    return val


def clamp01(v: float) -> float:
    """Clamp ``v`` between 0 and 1."""
    return clamp(v, 0.0, 1.0)


def next_power_of_two(v: int) -> int:
    """Return ``v`` if it is a power of two, else the next higher one.

    Works on unsigned 32-bit values, so 0 and values above 2**31 wrap to 0.
    """
    v = (_check_u32(v) - 1) & _U32
    for shift in (1, 2, 4, 8, 16):
        v |= v >> shift
    return (v + 1) & _U32


def closest_power_of_two(v: int) -> int:
    """Return ``v`` if it is a power of two, else the closest one (ties go up)."""
    nxt = next_power_of_two(v)
    prev = nxt // 2
    if ((v - prev) & _U32) < ((nxt - v) & _U32):
        nxt = prev
    return nxt


def is_power_of_two(x: int) -> bool:
    """Return whether the unsigned 32-bit ``x`` is a power of two (0 counts)."""
    x = _check_u32(x)
    return x == (x & ~(x & ((x - 1) & _U32)) & _U32)


def deg_to_rad(degrees: float) -> float:
    """Convert ``degrees`` to radians."""
    return degrees * DEG2RAD


def rad_to_deg(radians: float) -> float:
    """Convert ``radians`` to degrees."""
    return radians * RAD2DEG


def delta_angle(cur: float, target: float) -> float:
    """Return the shortest signed difference, in radians, from ``cur`` to ``target``."""
    diff = target - cur
    return math.atan2(math.sin(diff), math.cos(diff))


def eq(a: float, b: float) -> bool:
    """Return whether ``a`` and ``b`` are approximately equal."""
    if a == b:
        return True
    diff = abs(b - a)
    return diff <= EPSILON or diff < max(
        EPSILON_EQ_FLOAT, EPSILON_EQ_FLOAT_FACTOR * max(abs(a), abs(b))
    )


def inv_lerp(from_: float, to: float, val: float) -> float:
    """Return the interpolation parameter of ``val`` between ``from_`` and ``to``."""
    return (val - from_) / (to - from_)


def lerp(a: float, b: float, t: float) -> float:
    """Linearly interpolate from ``a`` to ``b`` by ``t``."""
    return ((b - a) * t) + a


def lerp_angle(a: float, b: float, t: float) -> float:
    """Return ``t`` times the shortest angular difference in degrees from ``a`` to ``b``."""
    return t * (math.fmod(math.fmod(b - a, 360) + 540, 360) - 180)


def percent(p: float, of: float) -> float:
    """Return ``p`` percent of ``of``."""
    return p * of * 0.01


def ping_pong(t: float, length: float) -> float:
    """Return ``2 * length`` minus ``t`` wrapped into ``2 * length``."""
    length = length * 2
    return length - math.fmod(t, length)


def round_even(v: float) -> float:
    """Round ``v``; a fraction of exactly 0.5 rounds towards the even integer."""
    frac, fint = math.modf(v)
    if frac > 0.5 or (frac == 0.5 and math.fmod(fint, 2) != 0):
        fint += 1
    return fint


def sign(v: float) -> float:
    """Return -1 if ``v`` is negative, 1 if positive, else 0."""
    if v > 0:
        return 1.0
    if v < 0:
        return -1.0
    return 0.0


def smooth_step(from_: float, to: float, t: float) -> float:
    """Interpolate between ``from_`` and ``to`` with smoothing at the limits."""
    t = clamp01((t - from_) / (to - from_))
    return (t * t) * (3 - 2 * t)


def smoother_step(from_: float, to: float, t: float) -> float:
    """Interpolate between ``from_`` and ``to`` with smoother smoothing at the limits."""
    t = clamp01((t - from_) / (to - from_))
    return t * t * t * (t * (t * 6 - 15) + 10)


def sum_from_to(from_: int, to: int) -> int:
    """Return the sum of all integers from ``from_`` to ``to`` inclusive."""
    return (to * (to + 1)) // 2 - ((from_ - 1) * from_) // 2


def sum_from_1_to(to: int) -> int:
    """Return the sum of all integers from 1 to ``to`` inclusive."""
    return (to * (to + 1)) // 2