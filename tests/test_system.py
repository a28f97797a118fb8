import os

import pytest

from gadgetry.system import os_name, user_data_dir_path, user_home_dir_path

_ENV_VARS = ("XDG_CONFIG_HOME", "XDG_CACHE_HOME", "LOCALAPPDATA", "APPDATA")


@pytest.fixture
def clean_env(monkeypatch):
    for var in _ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    user_data_dir_path.cache_clear()
    yield monkeypatch
    user_data_dir_path.cache_clear()


@pytest.mark.parametrize(
    "key, expected",
    [
        ("windows", "Windows"),
        ("darwin", "Mac OS X"),
        ("linux", "Linux"),
        ("freebsd", "FreeBSD"),
        ("appengine", "Google App Engine"),
    ],
)
def test_os_name_known(key, expected):
    assert os_name(key) == expected


def test_os_name_unknown_is_upper_cased():
    assert os_name("plan9") == "PLAN9"


def test_user_home_dir_path_is_stable():
    first = user_home_dir_path()
    assert user_home_dir_path() == first
    assert first == "" or os.path.isdir(first) or first == os.environ.get("HOME", "")


def test_data_dir_prefers_config(clean_env, tmp_path):
    cfg, cache = tmp_path / "cfg", tmp_path / "cache"
    cfg.mkdir()
    cache.mkdir()
    clean_env.setenv("XDG_CONFIG_HOME", str(cfg))
    clean_env.setenv("XDG_CACHE_HOME", str(cache))
    assert user_data_dir_path(False) == str(cfg)
    assert user_data_dir_path(True) == str(cache)


def test_data_dir_skips_missing_dirs(clean_env, tmp_path):
    cache = tmp_path / "cache"
    cache.mkdir()
    clean_env.setenv("XDG_CONFIG_HOME", str(tmp_path / "missing"))
    clean_env.setenv("XDG_CACHE_HOME", str(cache))
    assert user_data_dir_path(False) == str(cache)


def test_data_dir_uses_appdata(clean_env, tmp_path):
    appdata = tmp_path / "appdata"
    appdata.mkdir()
    clean_env.setenv("APPDATA", str(appdata))
    assert user_data_dir_path(False) == str(appdata)


def test_data_dir_falls_back_to_home(clean_env):
    home = user_home_dir_path()
    allowed = [
        os.path.join(home, sub)
        for sub in (".config", ".cache", "Library/Caches", "Library/Application Support")
    ] + [home]
    assert user_data_dir_path(False) in allowed


def test_data_dir_is_cached(clean_env, tmp_path):
    first, second = tmp_path / "first", tmp_path / "second"
    first.mkdir()
    second.mkdir()
    clean_env.setenv("XDG_CONFIG_HOME", str(first))
    assert user_data_dir_path(False) == str(first)
    clean_env.setenv("XDG_CONFIG_HOME", str(second))
    assert user_data_dir_path(False) == str(first)