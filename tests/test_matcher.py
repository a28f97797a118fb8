import pytest

from gadgetry.matcher import Matcher, Pattern, matches_any


def test_matches_any_suffix():
    assert matches_any("main.go", "*.txt", "*.go") is True
    assert matches_any("main.go", "*.txt", "*.md") is False


def test_matches_any_without_patterns_is_false():
    assert matches_any("anything") is False


@pytest.mark.parametrize("pattern", ["", "*"])
def test_match_everything_patterns(pattern):
    m = Matcher()
    m.add_patterns(pattern)
    assert m.is_match("whatever") is True
    assert m.has_wildcard_patterns() is True


def test_matcher_exact_only_has_no_wildcards():
    m = Matcher("exact")
    assert m.has_wildcard_patterns() is False
    assert m.is_match("exact") is True
    assert m.is_match("exactly") is False


def test_matcher_prefix_suffix_contains():
    m = Matcher("pre*", "*post", "*mid*")
    assert m.has_wildcard_patterns() is True
    assert m.is_match("prefix") is True
    assert m.is_match("signpost") is True
    assert m.is_match("amidst") is True
    assert m.is_match("nothing") is False


def test_matcher_double_star_is_not_a_wildcard():
    m = Matcher("**")
    assert m.has_wildcard_patterns() is False
    assert m.is_match("**") is True
    assert m.is_match("abc") is False


def test_matcher_add_patterns_accumulates():
    m = Matcher("a*")
    assert m.is_match("zed") is False
    m.add_patterns("z*")
    assert m.is_match("zed") is True
    assert m.is_match("abc") is True


def test_pattern_is_str():
    p = Pattern("*.go")
    assert p == "*.go"
    assert len(p) == len("*.go")


def test_pattern_basic_matching():
    assert Pattern("*.go").is_match("x.go") is True
    assert Pattern("*.go").is_match("x.py") is False
    assert Pattern("test_*").is_match("test_one") is True
    assert Pattern("test_*").is_match("one_test") is False
    assert Pattern("same").is_match("same") is True
    assert Pattern("same").is_match("other") is False


def test_pattern_empty_and_star_match_everything():
    assert Pattern("").is_match("abc") is True
    assert Pattern("*").is_match("") is True


def test_pattern_contains_drops_last_inner_char():
    assert Pattern("*abc*").is_match("xaby") is True
    assert Pattern("*abc*").is_match("xyz") is False


def test_pattern_double_star_raises():
    with pytest.raises(ValueError):
        Pattern("**").is_match("x")


def test_pattern_all_match():
    assert Pattern("*.go").all_match("a.go", "b.go") is True
    assert Pattern("*.go").all_match("a.go", "b.py") is False
    assert Pattern("*").all_match("a", "b") is True
    assert Pattern("x*").all_match() is True


def test_pattern_any_matches_returns_first():
    assert Pattern("b*").any_matches("a", "b1", "b2") == "b1"
    assert Pattern("b*").any_matches("a", "c") == ""