import re

import pytest

from find_engine.query import (
    QueryError,
    SearchOptions,
    build_literal_query,
    build_pattern_query,
    build_query,
    is_valid,
)


def test_literal_query_escapes_metacharacters() -> None:
    query = build_literal_query("a.b", SearchOptions(match_case=True))

    assert query.is_literal is True
    assert query.pattern.search("axb") is None
    assert query.pattern.search("xa.b").span() == (1, 4)


def test_case_insensitive_literal_matches_lowercase() -> None:
    query = build_literal_query("ABC", SearchOptions(match_case=False))

    found = query.pattern.search("xx abc")

    assert found is not None
    assert found.span() == (3, 6)


def test_case_sensitive_literal_rejects_other_case() -> None:
    query = build_literal_query("ABC", SearchOptions(match_case=True))

    assert query.pattern.search("abc") is None


def test_pattern_query_compiles_groups() -> None:
    query = build_pattern_query(r"(\w+)@(\w+)", SearchOptions())

    found = query.pattern.search("mail user@host now")

    assert query.is_literal is False
    assert found is not None
    assert query.expand(found, r"\2 at \1") == "host at user"


def test_pattern_query_anchors_match_line_starts() -> None:
    query = build_pattern_query("^b", SearchOptions())

    assert query.pattern.search("a\nb").start() == 2


def test_malformed_pattern_raises_query_error() -> None:
    with pytest.raises(QueryError) as excinfo:
        build_pattern_query("(", SearchOptions())

    assert excinfo.value.pattern == "("
    assert isinstance(excinfo.value.__cause__, re.error)


def test_build_query_dispatches_on_regex_flag() -> None:
    literal = build_query("a+", SearchOptions(is_regex=False))
    pattern = build_query("a+", SearchOptions(is_regex=True))

    assert literal.pattern.search("aaa") is None
    assert pattern.pattern.search("aaa").span() == (0, 3)


def test_literal_replacement_is_inserted_verbatim() -> None:
    query = build_literal_query("x", SearchOptions())
    found = query.pattern.search("x")

    assert query.expand(found, r"\1") == "\\1"


def test_bad_replacement_template_raises_query_error() -> None:
    query = build_pattern_query("a", SearchOptions())
    found = query.pattern.search("a")

    with pytest.raises(QueryError):
        query.expand(found, r"\9")


def test_empty_case_insensitive_query_is_invalid() -> None:
    assert is_valid(build_literal_query("", SearchOptions(match_case=False))) is False
    assert is_valid(build_pattern_query("", SearchOptions(match_case=False))) is False


def test_other_queries_are_valid() -> None:
    assert is_valid(build_literal_query("", SearchOptions(match_case=True))) is True
    assert is_valid(build_literal_query("a", SearchOptions())) is True
    assert is_valid(build_pattern_query("^", SearchOptions())) is True


def test_options_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FIND_ENGINE_MATCH_CASE", "yes")
    monkeypatch.setenv("FIND_ENGINE_WRAP_AROUND", "0")
    monkeypatch.delenv("FIND_ENGINE_REGEX", raising=False)

    options = SearchOptions.from_env()

    assert options == SearchOptions(match_case=True, wrap_around=False, is_regex=False)


def test_options_replace_returns_copy() -> None:
    options = SearchOptions()

    updated = options.replace(is_regex=True)

    assert updated.is_regex is True
    assert options.is_regex is False


def test_case_insensitive_literal_folds_non_ascii() -> None:
    query = build_literal_query("CRÈME", SearchOptions(match_case=False))

    found = query.pattern.search("une crème")

    assert found is not None
    assert found.group() == "crème"


def test_pattern_dot_matches_one_character() -> None:
    query = build_pattern_query(".", SearchOptions())

    assert query.pattern.fullmatch("é") is not None
