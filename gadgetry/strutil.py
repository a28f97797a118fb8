"""Helpers for common string-processing needs."""

from __future__ import annotations

import math
import re
import unicodedata
from typing import Callable, Mapping

_INT64_MIN = -(1 << 63)
_INT64_MAX = (1 << 63) - 1
_UINT64_MAX = (1 << 64) - 1

_INT_BODY = re.compile(r"[0-9A-Za-z_]+")
_DECIMAL = re.compile(r"[+-]?[0-9]+")
_DEC_FLOAT = re.compile(
    r"[+-]?(?:inf(?:inity)?|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:e[+-]?[0-9]+)?)|nan",
    re.IGNORECASE,
)
_HEX_FLOAT = re.compile(
    r"[+-]?0x(?:[0-9a-f]+\.?[0-9a-f]*|\.[0-9a-f]+)p[+-]?[0-9]+", re.IGNORECASE
)
_TRUE_WORDS = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_SOFT_Y_ENDINGS = ("ay", "ey", "oy", "uy", "iy")


def _category(c: str) -> str:
    return unicodedata.category(c)


def _is_letter(c: str) -> bool:
    return _category(c).startswith("L")


def _is_number(c: str) -> bool:
    return _category(c).startswith("N")


def _is_digit(c: str) -> bool:
    return _category(c) == "Nd"


def _is_upper_rune(c: str) -> bool:
    return _category(c) == "Lu"


def _is_lower_rune(c: str) -> bool:
    return _category(c) == "Ll"


def _single(converted: str, original: str) -> str:
    return converted if len(converted) == 1 else original


def _replace_rune(s: str, i: int, convert: Callable[[str], str]) -> str:
    if not 0 <= i < len(s):
        raise IndexError(f"rune index {i} out of range")
    return s[:i] + _single(convert(s[i]), s[i]) + s[i + 1:]


def both(s1: str, join: str, s2: str) -> str:
    """Join ``s1`` and ``s2`` with ``join`` if both are non-empty, else return the non-empty one."""
    if s1 and s2:
        return s1 + join + s2
    return s1 or s2


def ensure_lower(s: str, i: int) -> str:
    """Return ``s`` with the character at position ``i`` lower-cased."""
    return _replace_rune(s, i, str.lower)


def ensure_upper(s: str, i: int) -> str:
    """Return ``s`` with the character at position ``i`` upper-cased."""
    return _replace_rune(s, i, str.upper)


def begins_upper(s: str) -> bool:
    """Return whether the first character of ``s`` is an upper-case letter."""
    return bool(s) and _is_upper_rune(s[0])


def first_rune(s: str) -> str:
    """Return the first character of ``s``, or ``""``."""
    return s[:1]


def pad_right(s: str, ensure_len: int) -> str:
    """Pad ``s`` with spaces on the right to at least ``ensure_len`` characters."""
    return s.ljust(ensure_len)


def longest(*vals: str) -> int:
    """Return the length of the longest of ``vals``, or 0."""
    return max((len(v) for v in vals), default=0)


def after(val: str, needle: str, else_empty: bool) -> str:
    """Return what follows the first character of the first ``needle`` in ``val``.

    If ``needle`` is absent, returns ``""`` if ``else_empty``, else ``val``.
    """
    i = val.find(needle)
    if i >= 0:
        return val[i + 1:]
    return "" if else_empty else val


def after_last(val: str, needle: str, else_empty: bool) -> str:
    """Like :func:`after`, using the last occurrence of ``needle``."""
    i = val.rfind(needle)
    if i >= 0:
        return val[i + 1:]
    return "" if else_empty else val


def before(val: str, needle: str, else_empty: bool) -> str:
    """Return what precedes the first ``needle`` in ``val``.

    If ``needle`` is absent, returns ``""`` if ``else_empty``, else ``val``.
    """
    i = val.find(needle)
    if i >= 0:
        return val[:i]
    return "" if else_empty else val


def dist_between(val: str, needle1: str, needle2: str) -> int:
    """Return the number of characters between ``needle1`` and the next ``needle2``.

    An empty ``needle2`` means the end of ``val``. Returns -1 if not found.
    """
    i1 = val.find(needle1)
    if i1 >= 0:
        start = i1 + len(needle1)
        if not needle2:
            return len(val) - start
        i2 = val[start:].find(needle2)
        if i2 >= 0:
            return i2
    return -1


def not_prefixed(pref: str) -> Callable[[str], bool]:
    """Return a predicate that is true for strings not starting with ``pref``."""
    return lambda val: not val.startswith(pref)


def break_at(val: str, index: int) -> tuple[str, str]:
    """Split ``val`` into the parts before and from position ``index``."""
    if not 0 <= index <= len(val):
        raise IndexError(f"index {index} out of range")
    return val[:index], val[index:]


def break_on(val: str, on: str) -> tuple[str, str]:
    """Split ``val`` around the first ``on``; ``("", val)`` if absent."""
    idx = val.find(on)
    if idx < 0:
        return "", val
    return val[:idx], val[idx + 1:]


def break_on_last(val: str, on: str) -> tuple[str, str]:
    """Split ``val`` around the last ``on``; ``("", val)`` if absent."""
    idx = val.rfind(on)
    if idx < 0:
        return "", val
    return val[:idx], val[idx + 1:]


def extract_first_identifier(src: str, prefix: str, min_pos: int) -> str:
    """Return the first identifier in ``src`` at or after ``min_pos`` that starts with ``prefix``.

    An identifier is a run of letters, numbers and underscores ending in
    some other character; ``""`` if there is none.
    """
    sub = src[min_pos:]
    pos = sub.find(prefix)
    if pos >= 0:
        for i, c in enumerate(sub[pos:]):
            if not (_is_number(c) or _is_letter(c) or c == "_"):
                return sub[pos:pos + i]
    return ""


def extract_all_identifiers(src: str, prefix: str) -> list[str]:
    """Return all identifiers in ``src`` starting with ``prefix``, unique, in order of occurrence."""
    identifiers: list[str] = []
    min_pos = 0
    ident = extract_first_identifier(src, prefix, min_pos)
    while ident:
        min_pos = src.find(ident, min_pos) + 1
        if ident not in identifiers:
            identifiers.append(ident)
        ident = extract_first_identifier(src, prefix, min_pos)
    return identifiers


def first(check: Callable[[str], bool], step: int, *vals: str) -> str:
    """Return the first of ``vals`` passing ``check``, visiting every ``step``-th value.

    A negative ``step`` walks backwards from the last value.
    """
    if step == 0:
        raise ValueError("step must not be zero")
    return next((v for v in vals[::step] if check(v)), "")


def first_non_empty(*vals: str) -> str:
    """Return the first non-empty of ``vals``, or ``""``."""
    return next((v for v in vals if v), "")


def has_any(s: str, *subs: str) -> bool:
    """Return whether ``s`` contains any of ``subs``."""
    return any(sub in s for sub in subs)


def has_any_case(s1: str, s2: str) -> bool:
    """Return whether ``s1`` contains ``s2``, case-sensitively or not."""
    return s2 in s1 or s2.lower() in s1.lower()


def has_any_prefix(s: str, *prefixes: str) -> bool:
    """Return whether ``s`` starts with any of ``prefixes``."""
    return s.startswith(prefixes)


def has_any_suffix(s: str, *suffixes: str) -> bool:
    """Return whether ``s`` ends with any of ``suffixes``."""
    return s.endswith(suffixes)


def has_once(s1: str, s2: str) -> bool:
    """Return whether ``s2`` occurs in ``s1`` exactly once."""
    first_pos = s1.find(s2)
    return first_pos >= 0 and first_pos == s1.rfind(s2)


def index_any(s: str, *seps: str) -> int:
    """Return the smallest position at which any of ``seps`` first occurs, or -1."""
    pos = -1
    for sep in seps:
        index = s.find(sep)
        if pos < 0 or 0 <= index < pos:
            pos = index
    return pos


def is_ascii(s: str) -> bool:
    """Return whether ``s`` consists of ASCII characters only."""
    return s.isascii()


def is_lower(s: str) -> bool:
    """Return whether every letter in ``s`` is lower-case."""
    return all(not _is_letter(c) or _is_lower_rune(c) for c in s)


def is_upper(s: str) -> bool:
    """Return whether ``s`` holds only upper-case letters, white space and numbers."""
    return all(
        (_is_letter(c) and _is_upper_rune(c)) or c.isspace() or _is_digit(c) or _is_number(c)
        for c in s
    )


def is_upper_ascii(s: str) -> bool:
    """Return whether ``s`` is ASCII and every letter in it is upper-case."""
    return all(c.isascii() and (not _is_letter(c) or _is_upper_rune(c)) for c in s)


def letters_only(s: str) -> str:
    """Return ``s`` with every non-letter removed."""
    return "".join(c for c in s if _is_letter(c))


def non_empties(break_at_first_empty: bool, *vals: str) -> list[str]:
    """Return the non-empty ``vals``, stopping at the first empty one if asked to."""
    result: list[str] = []
    for s in vals:
        if s:
            result.append(s)
        elif break_at_first_empty:
            break
    return result


def parse_bool(s: str) -> bool:
    """Return whether ``s`` is one of the accepted spellings of true."""
    return s in _TRUE_WORDS


def _parse_float(s: str) -> tuple[float, bool]:
    if _HEX_FLOAT.fullmatch(s):
        try:
            return float.fromhex(s), True
        except OverflowError:
            return (-math.inf if s.startswith("-") else math.inf), False
    if not _DEC_FLOAT.fullmatch(s):
        return 0.0, False
    value = float(s)
    if math.isinf(value) and "inf" not in s.lower():
        return value, False
    return value, True


def parse_float(s: str) -> float:
    """Parse ``s`` as a float; 0.0 if malformed, infinity if out of range."""
    return _parse_float(s)[0]


def parse_floats(*vals: str) -> list[float] | None:
    """Parse every one of ``vals`` as a float, or return ``None`` if any fails."""
    result: list[float] = []
    for s in vals:
        value, ok = _parse_float(s)
        if not ok:
            return None
        result.append(value)
    return result


def _parse_unsigned_base0(body: str) -> int | None:
    if not _INT_BODY.fullmatch(body):
        return None
    if len(body) > 1 and body[0] == "0" and body[1] not in "xXoObB":
        body = "0o" + body[1:]
    try:
        return int(body, 0)
    except ValueError:
        return None


def _clamp(value: int, lo: int, hi: int) -> int:
    return max(lo, min(hi, value))


def parse_int(s: str) -> int:
    """Parse ``s`` as a 64-bit integer with optional base prefix.

    A leading ``0`` means octal. Malformed input gives 0; out-of-range
    values are clamped.
    """
    negative = s[:1] == "-"
    body = s[1:] if s[:1] in ("+", "-") else s
    value = _parse_unsigned_base0(body)
    if value is None:
        return 0
    return _clamp(-value if negative else value, _INT64_MIN, _INT64_MAX)


def parse_uint(s: str) -> int:
    """Parse ``s`` as an unsigned 64-bit integer with optional base prefix.

    Malformed input gives 0; out-of-range values are clamped.
    """
    value = _parse_unsigned_base0(s)
    if value is None:
        return 0
    return min(value, _UINT64_MAX)


def to_int(s: str) -> int:
    """Parse ``s`` as a decimal integer; 0 if malformed, clamped if out of range."""
    if not _DECIMAL.fullmatch(s):
        return 0
    return _clamp(int(s), _INT64_MIN, _INT64_MAX)


def pluralize(s: str) -> str:
    """Return a simplistic English plural of ``s``."""
    if s.endswith("s"):
        return s + "es"
    if len(s) > 1 and s.endswith("y") and s[-2:] not in _SOFT_Y_ENDINGS:
        return s[:-1] + "ies"
    return s + "s"


def prefix_with_sep(prefix: str, sep: str, v: str) -> str:
    """Return ``prefix + sep + v``, or just ``v`` if ``prefix`` is empty."""
    return prefix + sep + v if prefix else v


def prepend_if(s: str, p: str) -> str:
    """Prepend ``p`` to ``s`` unless ``s`` already starts with it."""
    return s if s.startswith(p) else p + s


def reduce_spaces(s: str) -> str:
    """Collapse every run of spaces in ``s`` into a single space."""
    while "  " in s:
        s = s.replace("  ", " ")
    return s


def replace(s: str, repls: Mapping[str, str]) -> str:
    """Replace in ``s`` every occurrence of each key of ``repls`` with its value."""
    for old, new in repls.items():
        s = s.replace(old, new)
    return s


def _is_title_separator(c: str) -> bool:
    if c.isascii():
        return not (c.isalnum() or c == "_")
    if _is_letter(c) or _is_digit(c):
        return False
    return c.isspace()


def _title(s: str) -> str:
    out = []
    prev = " "
    for c in s:
        out.append(_single(c.upper(), c) if _is_title_separator(prev) else c)
        prev = c
    return "".join(out)


def safe_identifier(s: str) -> str:
    """Return a Pascal-cased identifier made from the letters and digits of ``s``."""
    chars: list[str] = []
    last = False
    for i, c in enumerate(s):
        letter, digit = _is_letter(c), _is_digit(c)
        if letter or digit or (c == "_" and i == 0):
            if i > 0 and letter != last:
                chars.append(" ")
            chars.append(c)
        else:
            chars.append(" ")
        last = letter
    words = split(_title("".join(chars)), " ")
    return "".join(
        _title(w.lower()) if len(w) > 1 and is_upper(w) else w for w in words
    )


def split(v: str, sep: str) -> list[str]:
    """Split ``v`` on ``sep``; an empty ``v`` gives an empty list."""
    if not v:
        return []
    if not sep:
        return list(v)
    return v.split(sep)


def split_once(v: str, sep: str) -> tuple[str, str]:
    """Split ``v`` around the first ``sep`` unless it is at the very start.

    Otherwise returns ``("", v)``.
    """
    i = v.find(sep)
    if i > 0:
        return v[:i], v[i + 1:]
    return "", v


def strip_prefix(val: str, prefix: str) -> str:
    """Repeatedly remove ``prefix`` from the start of ``val``."""
    if not prefix:
        return val
    while val.startswith(prefix):
        val = val[len(prefix):]
    return val


def strip_suffix(val: str, suffix: str) -> str:
    """Repeatedly remove ``suffix`` from the end of ``val``."""
    if not suffix:
        return val
    while val.endswith(suffix):
        val = val[:-len(suffix)]
    return val


def to_lower_if_upper(s: str) -> str:
    """Lower-case ``s`` only if it is fully upper-case as per :func:`is_upper`."""
    return s.lower() if is_upper(s) else s


def to_upper_if_lower(s: str) -> str:
    """Upper-case ``s`` only if it is fully lower-case as per :func:`is_lower`."""
    return s.upper() if is_lower(s) else s


def until(s: str, r: str) -> str:
    """Return ``s`` up to the first ``r``, or all of ``s``."""
    i = s.find(r)
    return s if i < 0 else s[:i]