"""A string buffer with formatted writing."""

from __future__ import annotations

import io
from typing import Any


class Buffer:
    """Accumulates text, optionally %-formatting each piece."""

    def __init__(self) -> None:
        self._buf = io.StringIO()

    def write(self, fmt: str, *args: Any) -> None:
        """Append ``fmt``, formatted with ``args`` if any are given."""
        if args:
            fmt = fmt % args
        self._buf.write(fmt)

    def writeln(self, fmt: str, *args: Any) -> None:
        """Like :meth:`write`, followed by a newline."""
        self.write(fmt, *args)
        self._buf.write("\n")

    def getvalue(self) -> str:
        """Return everything written so far."""
        return self._buf.getvalue()

    def __str__(self) -> str:
        return self.getvalue()

    def __len__(self) -> int:
        return len(self.getvalue())