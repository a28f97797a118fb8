"""Helpers for common file-system needs."""

from __future__ import annotations

import os
import re
import shutil
import sys
import zipfile
from typing import BinaryIO, Optional

from gadgetry.matcher import Matcher
from gadgetry.walker import DirWalker, WalkerVisitor

#: Permission bits used when creating directories and writing files.
MODE_PERM = 0o777

_FS_NAME_TABLE = str.maketrans({c: "_" for c in ':*."/\\<>|?'})


def abs_path(path: str, root: str) -> str:
    """Return ``path`` made absolute against ``root`` (if relative) and cleaned."""
    if not os.path.isabs(path):
        path = os.path.join(root, path)
    return os.path.normpath(path)


def path_prefix(val: str, prefix: str) -> bool:
    """Return whether ``val`` starts with ``prefix``; case-insensitive on Windows."""
    if sys.platform.startswith("win"):
        return val.lower().startswith(prefix.lower())
    return val.startswith(prefix)


def _remove_all(path: str) -> None:
    if os.path.isdir(path) and not os.path.islink(path):
        shutil.rmtree(path)
    elif os.path.lexists(path):
        os.remove(path)


def _sorted_entries(dir_path: str) -> list[tuple[str, bool]]:
    with os.scandir(dir_path) as it:
        return sorted((e.name, e.is_dir(follow_symlinks=False)) for e in it)


def clear_directory(dir_path: str, *keep_name_patterns: str) -> None:
    """Remove everything inside ``dir_path`` except names matching ``keep_name_patterns``."""
    matcher = Matcher(*keep_name_patterns)
    for name, _ in _sorted_entries(dir_path):
        if not matcher.is_match(name):
            _remove_all(os.path.join(dir_path, name))


def clear_empty_directories(dir_path: str) -> bool:
    """Remove all directories inside ``dir_path`` that hold no files, however deep.

    Returns whether ``dir_path`` itself is now empty of files and could be
    deleted too.
    """
    can_delete = True
    for name, is_dir in _sorted_entries(dir_path):
        if is_dir:
            sub_dir = os.path.join(dir_path, name)
            if clear_empty_directories(sub_dir):
                shutil.rmtree(sub_dir)
            else:
                can_delete = False
        else:
            can_delete = False
    return can_delete


def copy_all(
    src_dir_path: str,
    dst_dir_path: str,
    skip_dirs: Optional[Matcher] = None,
    skip_file_suffix: str = "",
) -> None:
    """Copy everything inside ``src_dir_path`` to ``dst_dir_path``.

    Sub-directories whose names match ``skip_dirs``, or whose paths end in
    ``skip_file_suffix``, are skipped. Only failure to read the top-level
    source directory is raised; failures further down are ignored.
    """
    entries = _sorted_entries(src_dir_path)
    try:
        ensure_dir_exists(dst_dir_path)
    except OSError:
        pass
    for name, is_dir in entries:
        src_path = os.path.join(src_dir_path, name)
        dst_path = os.path.join(dst_dir_path, name)
        try:
            if is_dir:
                if skip_dirs is not None and skip_dirs.is_match(name):
                    continue
                if skip_file_suffix and src_path.endswith(skip_file_suffix):
                    continue
                copy_all(src_path, dst_path, skip_dirs, skip_file_suffix)
            else:
                copy_file(src_path, dst_path)
        except OSError:
            continue


def copy_file(src_file_path: str, dst_file_path: str) -> None:
    """Copy the contents of one file to another, creating or truncating it."""
    with open(src_file_path, "rb") as src:
        save_to_file(src, dst_file_path)


def dir_exists(dir_path: str) -> bool:
    """Return whether a directory (not a file) exists at ``dir_path``."""
    return bool(dir_path) and os.path.isdir(dir_path)


def dirs_or_files_exist_in(dir_path: str, *names: str) -> bool:
    """Return whether all of ``names`` exist inside ``dir_path``."""
    return all(os.path.exists(os.path.join(dir_path, name)) for name in names)


def ensure_dir_exists(dir_path: str) -> None:
    """Create ``dir_path`` and any missing parents unless it already exists."""
    dir_path = os.path.normpath(dir_path)
    if dir_exists(dir_path):
        return
    parent = os.path.dirname(dir_path)
    if parent and parent != dir_path:
        ensure_dir_exists(parent)
    os.mkdir(dir_path, MODE_PERM)


def extract_zip_file(
    zip_file_path: str,
    target_dir_path: str,
    delete_zip_file: bool,
    file_names_prefix: str,
    *file_names_to_extract: str,
) -> None:
    """Extract a ZIP archive into ``target_dir_path``.

    If ``file_names_to_extract`` are given only those entries are
    extracted. Names among them that start with ``file_names_prefix`` have
    the prefix stripped for lookup, and then every extracted file is
    written with that prefix prepended to its name. The archive is deleted
    afterwards if ``delete_zip_file`` is true.
    """
    names = list(file_names_to_extract)
    out_prefix = ""
    for i, name in enumerate(names):
        if name.startswith(file_names_prefix):
            names[i] = name[len(file_names_prefix):]
            out_prefix = file_names_prefix
    with zipfile.ZipFile(zip_file_path) as archive:
        for info in archive.infolist():
            if names and info.filename not in names:
                continue
            target = os.path.join(target_dir_path, out_prefix + info.filename)
            with archive.open(info) as src, open(target, "wb") as dst:
                shutil.copyfileobj(src, dst)
    if delete_zip_file:
        os.remove(zip_file_path)


def file_exists(file_path: str) -> bool:
    """Return whether a regular file (not a directory) exists at ``file_path``."""
    return os.path.isfile(file_path)


def is_newer_than(src_file_path: str, dst_file_path: str) -> bool:
    """Return whether ``src_file_path`` was modified later than ``dst_file_path``."""
    dst_time = os.stat(dst_file_path).st_mtime_ns
    src_time = os.stat(src_file_path).st_mtime_ns
    return src_time > dst_time


def is_newer_than_time(src_file_path: str, time_ns: int) -> bool:
    """Return whether ``src_file_path`` was modified after ``time_ns`` (ns since epoch).

    A ``time_ns`` of zero or less always counts as older.
    """
    if time_ns <= 0:
        return True
    return os.stat(src_file_path).st_mtime_ns > time_ns


def all_file_paths_in(dir_path: str, ignore_sub_path: str = "") -> list[str]:
    """Return the paths of all files below ``dir_path``.

    Files whose paths start with ``ignore_sub_path`` (taken relative to
    ``dir_path`` unless it already starts with it) are left out.
    """
    if ignore_sub_path and not ignore_sub_path.startswith(dir_path):
        ignore_sub_path = os.path.join(dir_path, ignore_sub_path)
    paths: list[str] = []

    def visit(path: str) -> bool:
        if not (ignore_sub_path and path.startswith(ignore_sub_path)):
            paths.append(path)
        return True

    walk_all_files(dir_path, visit)
    return paths


def is_any_in_newer_than_any_of(dir_path: str, *file_paths: str) -> bool:
    """Return whether any file below ``dir_path`` is newer than the oldest of ``file_paths``.

    Also true if no ``file_paths`` are given, if any of them or of the
    walked files cannot be examined, or if walking fails.
    """
    if not file_paths:
        return True
    oldest = 0
    for fp in file_paths:
        try:
            mod_time = os.stat(fp).st_mtime_ns
        except OSError:
            return True
        if mod_time > 0 and (oldest == 0 or mod_time < oldest):
            oldest = mod_time
    found = False

    def visit(path: str) -> bool:
        nonlocal found
        if path not in file_paths:
            try:
                newer = os.stat(path).st_mtime_ns > oldest
            except OSError:
                newer = True
            if newer:
                found = True
        return not found

    if walk_all_files(dir_path, visit):
        return True
    return found


def _class_char(pattern: str, i: int) -> tuple[str, int]:
    if i >= len(pattern) or pattern[i] in "-]":
        raise ValueError(f"syntax error in pattern: {pattern!r}")
    if pattern[i] == "\\":
        i += 1
        if i >= len(pattern):
            raise ValueError(f"syntax error in pattern: {pattern!r}")
    return pattern[i], i + 1


def _translate(pattern: str) -> str:
    out: list[str] = []
    i, n = 0, len(pattern)
    while i < n:
        c = pattern[i]
        if c == "*":
            out.append("[^/]*")
            i += 1
        elif c == "?":
            out.append("[^/]")
            i += 1
        elif c == "\\":
            if i + 1 >= n:
                raise ValueError(f"syntax error in pattern: {pattern!r}")
            out.append(re.escape(pattern[i + 1]))
            i += 2
        elif c == "[":
            i += 1
            negate = i < n and pattern[i] == "^"
            if negate:
                i += 1
            items: list[str] = []
            while True:
                if i >= n:
                    raise ValueError(f"syntax error in pattern: {pattern!r}")
                if pattern[i] == "]" and items:
                    i += 1
                    break
                lo, i = _class_char(pattern, i)
                if i < n and pattern[i] == "-":
                    hi, i = _class_char(pattern, i + 1)
                    if lo > hi:
                        raise ValueError(f"syntax error in pattern: {pattern!r}")
                    items.append(f"{re.escape(lo)}-{re.escape(hi)}")
                else:
                    items.append(re.escape(lo))
            body = "".join(items)
            out.append(f"[^{body}]" if negate else f"[{body}]")
        else:
            out.append(re.escape(c))
            i += 1
    return "".join(out)


def matches_any(name: str, *patterns: str) -> str:
    """Return the first of the shell-style ``patterns`` that matches ``name`` whole.

    ``*`` and ``?`` do not match ``/``. Returns ``""`` if none match;
    raises ``ValueError`` if none match and some pattern was malformed.
    """
    bad: Optional[ValueError] = None
    for pattern in patterns:
        try:
            regex = _translate(pattern)
        except ValueError as err:
            bad = err
            continue
        if re.fullmatch(regex, name, re.DOTALL):
            return pattern
    if bad is not None:
        raise bad
    return ""


def read_binary_file(file_path: str) -> bytes:
    """Return the contents of ``file_path`` as bytes."""
    with open(file_path, "rb") as handle:
        return handle.read()


def read_text_file(file_path: str, default: Optional[str] = None) -> str:
    """Return the text in ``file_path``.

    If it cannot be read, ``default`` is returned, or the error is raised
    when no default is given.
    """
    try:
        with open(file_path, encoding="utf-8") as handle:
            return handle.read()
    except OSError:
        if default is None:
            raise
        return default


def sanitize_fs_name(name: str) -> str:
    """Replace characters unsafe in file names with underscores."""
    return name.translate(_FS_NAME_TABLE)


def save_to_file(src: BinaryIO, dst_file_path: str) -> None:
    """Copy everything readable from the binary stream ``src`` into a file."""
    with open(dst_file_path, "wb") as dst:
        shutil.copyfileobj(src, dst)


def walk_all_dirs(dir_path: str, visitor: WalkerVisitor) -> list[OSError]:
    """Call ``visitor`` for ``dir_path`` and every directory below it."""
    return DirWalker(dir_visitor=visitor, visit_sub_dirs=True).walk(dir_path)


def walk_all_files(dir_path: str, visitor: WalkerVisitor) -> list[OSError]:
    """Call ``visitor`` for every file below ``dir_path``, however deep."""
    return DirWalker(file_visitor=visitor, visit_sub_dirs=True).walk(dir_path)


def walk_dirs_in(dir_path: str, visitor: WalkerVisitor) -> list[OSError]:
    """Call ``visitor`` for the directories directly inside ``dir_path``."""
    walker = DirWalker(dir_visitor=visitor, visit_sub_dirs=False, visit_self=False)
    return walker.walk(dir_path)


def walk_files_in(dir_path: str, visitor: WalkerVisitor) -> list[OSError]:
    """Call ``visitor`` for the files directly inside ``dir_path``."""
    walker = DirWalker(file_visitor=visitor, visit_sub_dirs=False, visit_self=False)
    return walker.walk(dir_path)


def write_binary_file(file_path: str, contents: bytes) -> None:
    """Write ``contents`` to ``file_path``, creating its directory if needed."""
    try:
        ensure_dir_exists(os.path.dirname(file_path) or ".")
    except OSError:
        pass
    fd = os.open(file_path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, MODE_PERM)
    with os.fdopen(fd, "wb") as handle:
        handle.write(contents)


def write_text_file(file_path: str, contents: str) -> None:
    """Write ``contents`` as UTF-8 to ``file_path``, creating its directory if needed."""
    write_binary_file(file_path, contents.encode("utf-8"))