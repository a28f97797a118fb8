import logging

import pytest

from gadgetry.misc import (
    as_float,
    as_str,
    if_then,
    json_decode_from_file,
    json_encode_to_file,
    log_error,
    parse_version,
    to_str,
)


def test_as_float_accepts_only_floats():
    assert as_float(2.5) == 2.5
    assert as_float("2.5") == 0.0
    assert as_float(3) == 0.0


def test_as_str_accepts_only_strings():
    assert as_str("hello") == "hello"
    assert as_str(12) == ""
    assert as_str(None) == ""


def test_to_str():
    assert to_str(42) == "42"
    assert to_str("abc") == "abc"


@pytest.mark.parametrize("cond,expected", [(True, "yes"), (False, "no")])
def test_if_then(cond, expected):
    assert if_then(cond, "yes", "no") == expected


def test_parse_version_documented_example():
    major_minor, both = parse_version("3.2.0 - Build 8.15.10.2761")
    assert major_minor == (3, 2)
    assert both == pytest.approx(3.2)


def test_parse_version_single_component():
    major_minor, both = parse_version("7")
    assert major_minor == (7, 0)
    assert both == 7.0


def test_parse_version_garbage():
    assert parse_version("abc") == ((0, 0), 0.0)


def test_parse_version_component_out_of_byte_range():
    assert parse_version("256.1") == ((0, 0), 0.0)


def test_parse_version_stops_at_bad_minor():
    assert parse_version("4.x") == ((4, 0), 4.0)


def test_json_round_trip(tmp_path):
    path = tmp_path / "data.json"
    data = {"name": "widget", "values": [1, 2.5, None, True]}
    json_encode_to_file(data, str(path))
    assert json_decode_from_file(str(path)) == data
    assert path.read_text(encoding="utf-8").endswith("\n")


def test_json_decode_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        json_decode_from_file(str(tmp_path / "missing.json"))


def test_json_decode_invalid(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(ValueError):
        json_decode_from_file(str(path))


def test_log_error_logs_message(caplog):
    with caplog.at_level(logging.ERROR, logger="gadgetry.misc"):
        log_error(ValueError("boom"))
    assert [r.getMessage() for r in caplog.records] == ["boom"]


def test_log_error_ignores_none(caplog):
    with caplog.at_level(logging.DEBUG, logger="gadgetry.misc"):
        log_error(None)
    assert caplog.records == []