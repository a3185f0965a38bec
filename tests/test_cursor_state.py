from __future__ import annotations

from typing import List

from vimlet.buffer import Buffer, CursorPosition, CursorState


def make_state(
    lines: List[str], *, insert: bool = False, x: int = 0, y: int = 0
) -> CursorState:
    return CursorState(Buffer(lines), allow_past_end=lambda: insert, x=x, y=y)


def test_reads_clamp_to_last_character_outside_insert() -> None:
    state = make_state(["abc", "a"], x=10, y=10)

    assert state.position == CursorPosition(0, 1)

    state.set_y(0)

    assert state.x == 2


def test_insert_mode_allows_one_past_the_end() -> None:
    state = make_state(["abc"], insert=True)

    state.set_x(10)

    assert state.x == 3
    assert state.char_under_cursor() == ""


def test_clamp_follows_the_mode_predicate() -> None:
    flags = {"insert": True}
    state = CursorState(Buffer(["abc"]), allow_past_end=lambda: flags["insert"])
    state.set_x(3)

    flags["insert"] = False

    assert state.x == 2


def test_set_coordinates_accept_callables() -> None:
    state = make_state(["abcdef", "x", "y"])

    state.set_x(lambda x: x + 4)
    state.set_y(lambda y: y + 5)

    assert state.position == (0, 2)
    assert state.buffer.line_count() == 3


def test_remembered_column_is_kept_by_jump_to() -> None:
    state = make_state(["abcdef", "x", "abcdef"], x=4)
    probe = state.fork()
    probe.set_y(2)

    state.jump_to(probe)

    assert state.position == (4, 2)


def test_move_forward_wraps_to_next_line() -> None:
    state = make_state(["ab", "cd"], x=1)

    assert state.move_cursor_forward() is True
    assert state.position == (0, 1)

    state.set_x(1)

    assert state.move_cursor_forward() is False
    assert state.position == (1, 1)


def test_move_backward_wraps_to_previous_line_end() -> None:
    state = make_state(["abc", "d"], y=1)

    assert state.move_cursor_backward() is True
    assert state.position == (2, 0)

    state.set_x(0)

    assert state.move_cursor_backward() is False


def test_position_predicates() -> None:
    state = make_state(["ab", "cd"])

    assert state.is_start_of_file()
    assert not state.is_end_of_line()

    state.set_y(1)
    state.set_x(1)

    assert state.is_end_of_line()
    assert state.is_end_of_file()


def test_is_blank_reads_character_under_cursor() -> None:
    state = make_state(["a b"], x=1)

    assert state.is_blank()
    state.set_x(0)
    assert not state.is_blank()


def test_insert_text_moves_cursor_after_text() -> None:
    state = make_state(["ad"], insert=True, x=1)

    state.insert_text_at_cursor("bc")

    assert state.buffer.get_line(0) == "abcd"
    assert state.x == 3


def test_delete_under_cursor_in_normal_mode() -> None:
    state = make_state(["abc"], x=2)

    state.delete_text_at_cursor()

    assert state.buffer.get_line(0) == "ab"
    assert state.x == 1


def test_backspace_in_insert_mode() -> None:
    state = make_state(["abc"], insert=True, x=2)

    state.delete_text_at_cursor()

    assert state.buffer.get_line(0) == "ac"
    assert state.x == 1


def test_backspace_at_column_zero_joins_lines() -> None:
    state = make_state(["ab", "cd"], insert=True, y=1)

    state.delete_text_at_cursor()

    assert state.buffer.lines() == ("abcd",)
    assert state.position == (2, 0)


def test_backspace_at_start_of_file_is_a_noop() -> None:
    state = make_state(["ab"], insert=True)

    state.delete_text_at_cursor()

    assert state.buffer.lines() == ("ab",)


def test_split_line_at_cursor() -> None:
    state = make_state(["abcd"], insert=True, x=2)

    state.split_line_at_cursor()

    assert state.buffer.lines() == ("ab", "cd")
    assert state.position == (0, 1)


def test_split_line_at_end_opens_empty_line() -> None:
    state = make_state(["ab"], insert=True, x=2)

    state.split_line_at_cursor()

    assert state.buffer.lines() == ("ab", "")


def test_clone_owns_its_buffer_and_fork_shares_it() -> None:
    state = make_state(["abc"], x=1)
    clone = state.clone()
    forked = state.fork()

    assert clone.position == state.position

    clone.buffer.delete_line(0)

    assert state.buffer.get_line(0) == "abc"
    assert state.position == (1, 0)
    assert forked.buffer is state.buffer
