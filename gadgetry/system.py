"""Helpers for operating-system and user-environment needs."""

from __future__ import annotations

import functools
import os

from gadgetry.fs import dir_exists

#: Look-up table for :func:`os_name`.
OS_NAMES = {
    "windows": "Windows",
    "darwin": "Mac OS X",
    "linux": "Linux",
    "freebsd": "FreeBSD",
    "appengine": "Google App Engine",
}


def os_name(go_os: str) -> str:
    """Return the human-readable name of the platform identifier ``go_os``.

    Unknown identifiers are returned upper-cased.
    """
    return OS_NAMES.get(go_os) or go_os.upper()


def _account_home() -> str:
    try:
        import pwd
    except ImportError:
        return ""
    try:
        return pwd.getpwuid(os.getuid()).pw_dir
    except (KeyError, AttributeError, OSError):
        return ""


@functools.lru_cache(maxsize=None)
def user_home_dir_path() -> str:
    """Return the current user's home directory; the result is cached."""
    home = _account_home()
    if home and dir_exists(home):
        return home
    path = os.environ.get("USERPROFILE", "")
    if not path or not dir_exists(path):
        path = os.environ.get("HOME", "")
    return path


@functools.lru_cache(maxsize=None)
def user_data_dir_path(prefer_cache_over_config: bool) -> str:
    """Return a directory suited to per-user application data; the result is cached.

    Tries the XDG config and cache directories (in preference order),
    ``LOCALAPPDATA`` and ``APPDATA``, then well-known sub-directories of
    the home directory, and finally the home directory itself.
    """
    env_vars = ["XDG_CONFIG_HOME", "XDG_CACHE_HOME", "LOCALAPPDATA", "APPDATA"]
    home_subdirs = [".config", ".cache", "Library/Caches", "Library/Application Support"]
    if prefer_cache_over_config:
        env_vars[0], env_vars[1] = env_vars[1], env_vars[0]
        home_subdirs[0], home_subdirs[1] = home_subdirs[1], home_subdirs[0]
    for var in env_vars:
        candidate = os.environ.get(var, "")
        if candidate and dir_exists(candidate):
            return candidate
    home = user_home_dir_path()
    for sub in home_subdirs:
        candidate = os.path.join(home, sub)
        if dir_exists(candidate):
            return candidate
    return home