"""Small helpers for common miscellaneous needs."""

from __future__ import annotations

import json
import logging
import re
from typing import Any

#: Format used by :func:`log_error`; receives the error as its only argument.
LOG_ERROR_FORMAT = "%s"

_logger = logging.getLogger(__name__)
_DIGITS = re.compile(r"[0-9]+")
_UINT8_MAX = 255


def as_float(thing: Any) -> float:
    """Return ``thing`` if it is a float, otherwise ``0.0``."""
    return thing if isinstance(thing, float) else 0.0


def as_str(thing: Any) -> str:
    """Return ``thing`` if it is a string, otherwise ``""``."""
    return thing if isinstance(thing, str) else ""


def to_str(thing: Any) -> str:
    """Return the default string form of ``thing``."""
    return str(thing)


def if_then(cond: bool, if_true: Any, if_false: Any) -> Any:
    """Return ``if_true`` when ``cond`` holds, else ``if_false``."""
    return if_true if cond else if_false


def json_decode_from_file(from_file_path: str) -> Any:
    """Decode and return the JSON document stored in ``from_file_path``."""
    with open(from_file_path, encoding="utf-8") as handle:
        return json.load(handle)


def json_encode_to_file(obj: Any, to_file_path: str) -> None:
    """Write ``obj`` as JSON, followed by a newline, to ``to_file_path``."""
    with open(to_file_path, "w", encoding="utf-8") as handle:
        json.dump(obj, handle)
        handle.write("\n")


def log_error(err: BaseException | None) -> None:
    """Log ``err`` using :data:`LOG_ERROR_FORMAT` unless it is ``None``."""
    if err is not None:
        _logger.error(LOG_ERROR_FORMAT, err)


def parse_version(verstr: str) -> tuple[tuple[int, int], float]:
    """Extract major and minor version numbers from the start of ``verstr``.

    Returns ``((major, minor), major + minor * 0.1)``; components that
    cannot be read stay zero.
    """
    parts = [0, 0]
    found = 0
    for piece in verstr.split("."):
        pos = piece.find(" ")
        if pos > 0:
            piece = piece[:pos]
        if not _DIGITS.fullmatch(piece) or int(piece) > _UINT8_MAX:
            break
        parts[found] = int(piece)
        found += 1
        if found >= len(parts):
            break
    major, minor = parts
    return (major, minor), float(major) + minor * 0.1