"""Helpers for working with lists of simple values."""

from __future__ import annotations

from typing import Any, Callable, Sequence


def append_unique(seq: list, v: Any) -> None:
    """Append ``v`` to ``seq`` unless ``seq`` already contains it."""
    if not has(seq, v):
        seq.append(v)


def append_uniques(seq: list, *vals: Any) -> None:
    """Append each of ``vals`` to ``seq`` unless already contained."""
    for v in vals:
        append_unique(seq, v)


def index_of(seq: Sequence, val: Any) -> int:
    """Return the position of ``val`` in ``seq``, or -1."""
    return next((i for i, v in enumerate(seq) if v == val), -1)


def _is_kind(value: Any, kind: type) -> bool:
    if isinstance(value, bool) and kind is not bool:
        return False
    return isinstance(value, kind)


def convert(src: Sequence, kind: type, sparse: bool) -> list:
    """Convert ``src`` to a list of ``kind`` values.

    When ``sparse`` is true only values of ``kind`` are kept; otherwise the
    result has the length of ``src`` and other values become ``kind()``.
    """
    if sparse:
        return [v for v in src if _is_kind(v, kind)]
    return [v if _is_kind(v, kind) else kind() for v in src]


def each(seq: list, *fns: Callable[[Any], Any]) -> list:
    """Replace every item of ``seq`` by passing it through each of ``fns``.

    ``seq`` is modified in place and also returned.
    """
    for fn in fns:
        seq[:] = [fn(v) for v in seq]
    return seq


def set_len(seq: list, length: int, zero: Any) -> None:
    """Truncate ``seq`` or pad it with ``zero`` to exactly ``length`` items."""
    del seq[length:]
    seq.extend([zero] * (length - len(seq)))


def ensure_len(seq: list, length: int, zero: Any) -> None:
    """Pad ``seq`` with ``zero`` if it is shorter than ``length``."""
    if len(seq) < length:
        set_len(seq, length, zero)


def equivalent(one: Sequence, two: Sequence) -> bool:
    """Return whether both have equal length and every item of ``one`` is in ``two``."""
    return len(one) == len(two) and all(has(two, v) for v in one)


def has(seq: Sequence, val: Any) -> bool:
    """Return whether ``val`` is in ``seq``."""
    return index_of(seq, val) >= 0


def has_any(seq: Sequence, *vals: Any) -> bool:
    """Return whether at least one of ``vals`` is in ``seq``."""
    return any(has(seq, v) for v in vals)


def remove(seq: list, v: Any, all_: bool) -> None:
    """Remove the first occurrence of ``v`` from ``seq``, or every one if ``all_``.

    An item directly following a removed one is not examined.
    """
    i = 0
    while i < len(seq):
        if seq[i] == v:
            del seq[i]
            if not all_:
                break
        i += 1


def without(seq: Sequence, keep_order: bool, *vals: Any) -> list:
    """Return a copy of ``seq`` with every occurrence of ``vals`` removed.

    Unless ``keep_order`` is true, each removed item is replaced by the
    last item instead of shifting the rest.
    """
    result = list(seq)
    for w in vals:
        while (pos := index_of(result, w)) >= 0:
            if keep_order:
                del result[pos]
            else:
                result[pos] = result[-1]
                result.pop()
    return result


def index_ignore_case(vals: Sequence[str], val: str) -> int:
    """Return the position of ``val`` in ``vals`` ignoring case, or -1."""
    lowered = val.lower()
    return next(
        (i for i, v in enumerate(vals) if v == val or v.lower() == lowered), -1
    )


def has_ignore_case(vals: Sequence[str], val: str) -> bool:
    """Return whether ``val`` is in ``vals`` ignoring case."""
    return index_ignore_case(vals, val) >= 0


def filtered(vals: list, check: Callable[[Any], bool] | None) -> list:
    """Return the items of ``vals`` passing ``check``; ``vals`` itself if no check."""
    if check is None:
        return vals
    return [v for v in vals if check(v)]


def mapped(vals: list, fn: Callable[[Any], Any] | None) -> list:
    """Return ``fn`` applied to every item; ``vals`` itself if no function."""
    if fn is None:
        return vals
    return [fn(v) for v in vals]


def shortest(vals: Sequence[str]) -> str:
    """Return the first shortest non-empty string in ``vals``, or ``""``."""
    result = ""
    for s in vals:
        if not result or len(s) < len(result):
            result = s
    return result


def with_fewest(
    vals: Sequence[str],
    substr: str,
    otherwise: Callable[[Sequence[str]], str] | None,
) -> str:
    """Return the first string containing the fewest occurrences of ``substr``.

    If all strings contain it equally often and ``otherwise`` is given, the
    result of ``otherwise(vals)`` is returned instead.
    """
    found = ""
    fewest = None
    counts = set()
    for s in vals:
        num = s.count(substr)
        counts.add(num)
        if fewest is None or num < fewest:
            found, fewest = s, num
    if len(counts) == 1 and otherwise is not None:
        found = otherwise(vals)
    return found


def reverse(vals: list) -> list:
    """Reverse ``vals`` in place and return it."""
    vals.reverse()
    return vals