import re

import pytest

from find_engine.actions import (
    FindIncrementalCommand,
    FindNextCommand,
    FindPreviousCommand,
)
from find_engine.buffer import Buffer
from find_engine.query import QueryError, SearchOptions

WRAP = SearchOptions(wrap_around=True)
NO_WRAP = SearchOptions(wrap_around=False)


def make_buffer(text: str, selection: tuple[int, int] = (0, 0)) -> Buffer:
    buffer = Buffer.from_text(text)
    buffer.set_selection_range(*selection)
    return buffer


def test_incremental_find_keeps_current_match() -> None:
    buffer = make_buffer("foo foo", (0, 3))

    assert FindIncrementalCommand("foo", WRAP).execute(buffer) is True
    assert buffer.state.selection == (0, 3)


def test_find_next_skips_current_selection() -> None:
    buffer = make_buffer("foo foo", (0, 3))

    assert FindNextCommand("foo", WRAP).execute(buffer) is True
    assert buffer.state.selection == (4, 7)


def test_find_next_wraps_around() -> None:
    buffer = make_buffer("foo foo", (4, 7))

    assert FindNextCommand("foo", WRAP).execute(buffer) is True
    assert buffer.state.selection == (0, 3)


def test_find_next_failure_collapses_at_search_start() -> None:
    buffer = make_buffer("foo foo", (4, 7))

    assert FindNextCommand("foo", NO_WRAP).execute(buffer) is False
    assert buffer.state.selection == (7, 7)


def test_incremental_failure_collapses_at_selection_start() -> None:
    buffer = make_buffer("abc def", (4, 7))

    assert FindIncrementalCommand("zzz", WRAP).execute(buffer) is False
    assert buffer.state.selection == (4, 4)


def test_find_previous_selects_preceding_match() -> None:
    buffer = make_buffer("a.a.a", (4, 4))

    assert FindPreviousCommand("a", NO_WRAP).execute(buffer) is True
    assert buffer.state.selection == (2, 3)


def test_find_previous_wraps_to_last_match() -> None:
    buffer = make_buffer(".a.a.a", (0, 0))

    assert FindPreviousCommand("a", WRAP).execute(buffer) is True
    assert buffer.state.selection == (5, 6)


def test_find_previous_without_wrap_fails() -> None:
    buffer = make_buffer(".a.a.a", (1, 1))

    assert FindPreviousCommand("a", NO_WRAP).execute(buffer) is False
    assert buffer.state.selection == (1, 1)


def test_invalid_query_reports_no_match() -> None:
    buffer = make_buffer("abc", (1, 2))

    assert FindNextCommand("", SearchOptions(match_case=False)).execute(buffer) is False
    assert buffer.state.selection == (2, 2)


def test_malformed_pattern_fails_before_execution() -> None:
    with pytest.raises(QueryError):
        FindNextCommand("(", SearchOptions(is_regex=True))


def test_find_next_across_multibyte_text() -> None:
    buffer = make_buffer("ünïcödé foo")

    assert FindNextCommand("foo", WRAP).execute(buffer) is True
    assert buffer.state.selection == (8, 11)
    assert buffer.selected_text() == "foo"


def test_find_next_from_cursor_after_multibyte_text() -> None:
    buffer = make_buffer("é foo é foo", (5, 5))

    assert FindNextCommand("foo", NO_WRAP).execute(buffer) is True
    assert buffer.state.selection == (8, 11)


def test_find_next_ignores_case() -> None:
    buffer = make_buffer("xx abc")

    assert FindNextCommand("ABC", SearchOptions(match_case=False)).execute(buffer)
    assert buffer.state.selection == (3, 6)


def test_find_next_scrolls_to_match_line() -> None:
    buffer = make_buffer("one\ntwo\nneedle")

    assert FindNextCommand("needle", WRAP).execute(buffer) is True
    assert buffer.viewport.top_line == 2


def test_regex_find_selects_empty_match() -> None:
    buffer = make_buffer("ab\ncd", (1, 1))

    assert FindNextCommand("^", SearchOptions(is_regex=True)).execute(buffer)
    assert buffer.state.selection == (3, 3)


def test_find_next_folds_non_ascii_case() -> None:
    buffer = make_buffer("crème CRÈME")

    assert FindNextCommand("CRÈME", SearchOptions(match_case=False)).execute(buffer)
    assert buffer.state.selection == (0, 5)
    assert buffer.selected_text() == "crème"


@pytest.mark.parametrize(
    "pattern",
    [".", r"\w+", "[^a-z ]+", r"\bΩ\w*", "(?i)É.", "語$"],
)
def test_regex_find_selects_matched_characters(pattern: str) -> None:
    text = "café Ωmega\nÉtude 日本語"
    buffer = make_buffer(text)
    options = SearchOptions(is_regex=True, match_case=True)

    assert FindNextCommand(pattern, options).execute(buffer)
    assert buffer.selected_text() == re.search(pattern, text, re.MULTILINE).group()


def test_find_previous_regex_over_multibyte_text() -> None:
    buffer = make_buffer("αβ αβ αβ", (6, 6))

    assert FindPreviousCommand("α.", SearchOptions(is_regex=True)).execute(buffer)
    assert buffer.state.selection == (3, 5)
