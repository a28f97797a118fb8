"""Recursive directory walking with a variety of options."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Callable, Optional

#: Called with the full path of each visited item; returning ``False``
#: stops visiting the remaining items of the current directory.
WalkerVisitor = Callable[[str], Optional[bool]]


def _visit(visitor: Optional[WalkerVisitor], path: str) -> bool:
    """Call ``visitor`` on ``path`` if set; return whether to keep walking."""
    if visitor is None:
        return True
    return visitor(path) is not False


@dataclass
class DirWalker:
    """Walks a directory tree, calling visitors for directories and files.

    Entries of each directory are visited in name order. By default the
    files of a directory are visited before its sub-directories; set
    ``visit_dirs_first`` to reverse that. ``visit_sub_dirs`` controls
    whether sub-directories are descended into, and ``visit_self`` whether
    the starting directory is passed to ``dir_visitor``. Errors met while
    reading directories are collected; with ``break_on_error`` the walk
    stops at the first one.
    """

    dir_visitor: Optional[WalkerVisitor] = None
    file_visitor: Optional[WalkerVisitor] = None
    visit_sub_dirs: bool = True
    visit_self: bool = True
    visit_dirs_first: bool = False
    break_on_error: bool = False

    def walk(self, dir_path: str) -> list[OSError]:
        """Walk from ``dir_path`` and return all errors encountered."""
        errors: list[OSError] = []
        self._walk(self.visit_self, dir_path, errors)
        return errors

    def _walk(self, walk_self: bool, dir_path: str, errors: list[OSError]) -> bool:
        """Walk one directory; return ``True`` if the whole walk must abort."""
        if walk_self and not _visit(self.dir_visitor, dir_path):
            return False
        try:
            with os.scandir(dir_path) as it:
                entries = sorted(
                    (entry.name, entry.is_dir(follow_symlinks=False)) for entry in it
                )
        except OSError as err:
            errors.append(err)
            return self.break_on_error
        passes = [(False, self.file_visitor), (True, self.dir_visitor)]
        if self.visit_dirs_first:
            passes.reverse()
        for is_dir, visitor in passes:
            keep, abort = self._walk_entries(dir_path, entries, is_dir, visitor, errors)
            if abort:
                return True
            if not keep:
                return False
        return False

    def _walk_entries(
        self,
        dir_path: str,
        entries: list[tuple[str, bool]],
        is_dir: bool,
        visitor: Optional[WalkerVisitor],
        errors: list[OSError],
    ) -> tuple[bool, bool]:
        for name, entry_is_dir in entries:
            if entry_is_dir != is_dir:
                continue
            full_path = os.path.join(dir_path, name)
            if not _visit(visitor, full_path):
                return False, False
            if is_dir and self.visit_sub_dirs and self._walk(False, full_path, errors):
                return True, True
        return True, False