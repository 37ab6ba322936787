import pytest

from find_engine.buffer import Buffer
from find_engine.scan import (
    ByteCursor,
    byte_offset_to_char_offset,
    char_offset_to_byte_offset,
    select_range,
    select_range_bytes,
)


def test_byte_offset_counts_multibyte_characters_once() -> None:
    assert byte_offset_to_char_offset("héllo", 3) == 2
    assert byte_offset_to_char_offset("héllo".encode("utf-8"), 3) == 2


def test_byte_offset_inside_character_counts_partial_sequence() -> None:
    assert byte_offset_to_char_offset("é", 1) == 1


def test_char_offset_to_byte_offset() -> None:
    assert char_offset_to_byte_offset("héllo", 2) == 3
    assert char_offset_to_byte_offset("ab", 10) == 2


def test_negative_offsets_rejected() -> None:
    with pytest.raises(ValueError):
        byte_offset_to_char_offset("abc", -1)
    with pytest.raises(ValueError):
        char_offset_to_byte_offset("abc", -1)


def test_select_range_bytes_selects_characters() -> None:
    buffer = Buffer.from_text("ünï foo")

    span = select_range_bytes(buffer, 6, 9)

    assert span == (4, 7)
    assert buffer.selected_text() == "foo"


def test_select_range_scrolls_to_line() -> None:
    buffer = Buffer.from_text("one\ntwo\nthree")

    select_range(buffer, 8, 13)

    assert buffer.state.selection == (8, 13)
    assert buffer.viewport.top_line == 2


def test_select_range_scrolls_left_when_start_is_hidden() -> None:
    buffer = Buffer.from_text("head\n0123456789abcdef")
    buffer.viewport.left_column = 10

    select_range(buffer, 7, 9)

    assert buffer.viewport.left_column == 2


def test_select_range_keeps_horizontal_scroll_when_start_is_visible() -> None:
    buffer = Buffer.from_text("0123456789abcdef")
    buffer.viewport.left_column = 3

    select_range(buffer, 5, 8)

    assert buffer.viewport.left_column == 3


def test_byte_cursor_walks_forward_and_restarts() -> None:
    cursor = ByteCursor("aé日b")

    assert cursor.byte_span(1, 3) == (1, 6)
    assert cursor.byte_offset(4) == 7
    assert cursor.byte_offset(2) == 3
