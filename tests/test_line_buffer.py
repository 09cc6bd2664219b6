"""Test line buffer editing and cursor movement."""

import pytest
from nanoplus.model import LineBuffer, CursorPosition, Direction


def create_buffer(lines, row=0, col=0):
    """Create a buffer with the cursor at (row, col)."""
    buffer = LineBuffer(lines)
    buffer.set_cursor(row, col)
    return buffer


def assert_cursor_valid(buffer):
    cursor = buffer.cursor
    assert 0 <= cursor.row < buffer.line_count
    assert 0 <= cursor.col <= buffer.line_length(cursor.row)


def test_empty_buffer_has_one_empty_line():
    buffer = LineBuffer()
    assert buffer.lines == [b""]
    assert buffer.cursor == CursorPosition(0, 0)


def test_empty_list_gives_one_empty_line():
    buffer = LineBuffer([])
    assert buffer.lines == [b""]


def test_insert_char_in_middle():
    buffer = create_buffer([b"ac"], 0, 1)
    buffer.insert_char(ord('b'))
    assert buffer.lines == [b"abc"]
    assert buffer.cursor == CursorPosition(0, 2)


def test_insert_char_at_end_of_line():
    buffer = create_buffer([b"ab"], 0, 2)
    buffer.insert_char(ord('c'))
    assert buffer.lines == [b"abc"]
    assert buffer.cursor == CursorPosition(0, 3)


def test_insert_high_byte():
    """Bytes above ASCII are stored as-is; columns count bytes."""
    buffer = create_buffer([b""])
    for byte in "é".encode("utf-8"):
        buffer.insert_char(byte)
    assert buffer.lines == ["é".encode("utf-8")]
    assert buffer.cursor.col == 2


def test_insert_newline_splits_line():
    """Buffer ["ab"] with cursor (0,1) becomes ["a","b"] at (1,0)."""
    buffer = create_buffer([b"ab"], 0, 1)
    buffer.insert_newline()
    assert buffer.lines == [b"a", b"b"]
    assert buffer.cursor == CursorPosition(1, 0)


def test_insert_newline_at_end_adds_empty_line():
    buffer = create_buffer([b"ab", b"cd"], 0, 2)
    buffer.insert_newline()
    assert buffer.lines == [b"ab", b"", b"cd"]
    assert buffer.cursor == CursorPosition(1, 0)


def test_insert_newline_at_start_pushes_line_down():
    buffer = create_buffer([b"ab"], 0, 0)
    buffer.insert_newline()
    assert buffer.lines == [b"", b"ab"]
    assert buffer.cursor == CursorPosition(1, 0)


def test_delete_backward_within_line():
    buffer = create_buffer([b"abc"], 0, 2)
    buffer.delete_backward()
    assert buffer.lines == [b"ac"]
    assert buffer.cursor == CursorPosition(0, 1)


def test_delete_backward_whole_line():
    """Backspace five times at the end of "hello" empties the line."""
    buffer = create_buffer([b"hello"], 0, 5)
    for _ in range(5):
        buffer.delete_backward()
    assert buffer.lines == [b""]
    assert buffer.cursor == CursorPosition(0, 0)


def test_delete_backward_joins_with_previous_line():
    buffer = create_buffer([b"ab", b"cd"], 1, 0)
    buffer.delete_backward()
    assert buffer.lines == [b"abcd"]
    assert buffer.cursor == CursorPosition(0, 2)


def test_delete_backward_joins_empty_line():
    buffer = create_buffer([b"ab", b"", b"cd"], 1, 0)
    buffer.delete_backward()
    assert buffer.lines == [b"ab", b"cd"]
    assert buffer.cursor == CursorPosition(0, 2)


def test_delete_backward_at_buffer_start_is_noop():
    buffer = create_buffer([b"ab", b"cd"], 0, 0)
    buffer.delete_backward()
    assert buffer.lines == [b"ab", b"cd"]
    assert buffer.cursor == CursorPosition(0, 0)


def test_insert_then_delete_restores_state():
    buffer = create_buffer([b"one", b"two"], 1, 2)
    buffer.insert_char(ord('x'))
    buffer.delete_backward()
    assert buffer.lines == [b"one", b"two"]
    assert buffer.cursor == CursorPosition(1, 2)


@pytest.mark.parametrize("row,col", [(0, 0), (0, 1), (0, 3), (1, 0), (1, 2)])
def test_newline_then_delete_restores_state(row, col):
    buffer = create_buffer([b"abc", b"de"], row, col)
    buffer.insert_newline()
    buffer.delete_backward()
    assert buffer.lines == [b"abc", b"de"]
    assert buffer.cursor == CursorPosition(row, col)


def test_move_left_and_right_within_line():
    buffer = create_buffer([b"abc"], 0, 1)
    buffer.move(Direction.RIGHT)
    assert buffer.cursor == CursorPosition(0, 2)
    buffer.move(Direction.LEFT)
    buffer.move(Direction.LEFT)
    assert buffer.cursor == CursorPosition(0, 0)


def test_move_left_at_origin_is_idempotent():
    buffer = create_buffer([b"abc", b"def"], 0, 0)
    for _ in range(3):
        buffer.move(Direction.LEFT)
        assert buffer.cursor == CursorPosition(0, 0)
    assert buffer.lines == [b"abc", b"def"]


def test_move_left_does_not_wrap_to_previous_line():
    buffer = create_buffer([b"abc", b"def"], 1, 0)
    buffer.move(Direction.LEFT)
    assert buffer.cursor == CursorPosition(1, 0)


def test_move_right_does_not_wrap_to_next_line():
    buffer = create_buffer([b"abc", b"def"], 0, 3)
    buffer.move(Direction.RIGHT)
    assert buffer.cursor == CursorPosition(0, 3)


def test_move_down_at_last_row_is_idempotent():
    buffer = create_buffer([b"abc", b"de"], 1, 1)
    for _ in range(3):
        buffer.move(Direction.DOWN)
        assert buffer.cursor == CursorPosition(1, 1)


def test_move_up_at_first_row_keeps_column():
    buffer = create_buffer([b"abc"], 0, 2)
    buffer.move(Direction.UP)
    assert buffer.cursor == CursorPosition(0, 2)


def test_move_up_keeps_column_on_long_enough_line():
    buffer = create_buffer([b"abc", b"x", b"hello"], 2, 1)
    buffer.move(Direction.UP)
    assert buffer.cursor == CursorPosition(1, 1)


def test_move_up_clamps_to_shorter_line():
    buffer = create_buffer([b"abc", b"x", b"hello"], 2, 4)
    buffer.move(Direction.UP)
    assert buffer.cursor == CursorPosition(1, 1)


def test_move_down_clamps_to_shorter_line():
    buffer = create_buffer([b"hello", b""], 0, 5)
    buffer.move(Direction.DOWN)
    assert buffer.cursor == CursorPosition(1, 0)


def test_set_cursor_clamps_out_of_range():
    buffer = create_buffer([b"ab", b"c"])
    buffer.set_cursor(5, 9)
    assert buffer.cursor == CursorPosition(1, 1)
    buffer.set_cursor(-1, -1)
    assert buffer.cursor == CursorPosition(0, 0)


def test_accessors_return_copies():
    buffer = create_buffer([b"abc"])
    lines = buffer.lines
    lines[0] = b"changed"
    cursor = buffer.cursor
    cursor.col = 3
    assert buffer.line(0) == b"abc"
    assert buffer.cursor == CursorPosition(0, 0)


def test_invariants_hold_across_mixed_edits():
    buffer = create_buffer([b"first", b"", b"third line"])
    script = [
        Direction.DOWN, Direction.DOWN, Direction.RIGHT, Direction.RIGHT,
        'newline', 'delete', 'delete', 'delete', Direction.UP, Direction.RIGHT,
        ord('z'), 'newline', Direction.DOWN, Direction.DOWN, 'delete',
        Direction.LEFT, Direction.UP, Direction.UP, Direction.UP, 'delete',
    ]
    for step in script:
        if isinstance(step, Direction):
            buffer.move(step)
        elif step == 'newline':
            buffer.insert_newline()
        elif step == 'delete':
            buffer.delete_backward()
        else:
            buffer.insert_char(step)
        assert_cursor_valid(buffer)
        assert buffer.line_count >= 1
