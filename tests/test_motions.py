from __future__ import annotations

from typing import Optional

from vimlet import Vim
from vimlet.actions.motions import resolve_motion
from vimlet.buffer import Buffer, CursorState
from vimlet.keys import KeyChain, KeyEvent

TEST_FILE = "\n".join(
    [
        "The quick brown fox",
        "jumps over the lazy dog",
    ]
    * 3
)


def make_vim(text: str = TEST_FILE) -> Vim:
    return Vim(text)


def press(vim: Vim, *labels: str) -> None:
    for label in labels:
        vim.key_press(label)


def make_tip(*labels: str) -> Optional[KeyEvent]:
    chain = KeyChain()
    for label in labels:
        chain.push(KeyEvent(label))
    return chain.tip


def test_resolver_reports_consumed_tokens() -> None:
    state = CursorState(Buffer.from_text(TEST_FILE))

    plain = resolve_motion(state, make_tip("l"))
    counted = resolve_motion(state, make_tip("3", "l"))
    goto = resolve_motion(state, make_tip("2", "g", "g"))

    assert plain is not None and plain.consumed == 1
    assert counted is not None and counted.consumed == 2
    assert counted.position == (3, 0)
    assert goto is not None and goto.consumed == 3


def test_resolver_never_moves_the_state() -> None:
    state = CursorState(Buffer.from_text(TEST_FILE))

    motion = resolve_motion(state, make_tip("G"))

    assert motion is not None
    assert motion.position == (0, 5)
    assert state.position == (0, 0)


def test_resolver_ignores_incomplete_sequences() -> None:
    state = CursorState(Buffer.from_text(TEST_FILE))

    assert resolve_motion(state, None) is None
    assert resolve_motion(state, make_tip("g")) is None
    assert resolve_motion(state, make_tip("z")) is None
    assert resolve_motion(state, make_tip("2")) is None


def test_h_and_l() -> None:
    vim = make_vim()

    press(vim, "l")
    assert vim.cursor() == (1, 0)

    press(vim, "2", "l")
    assert vim.cursor() == (3, 0)

    press(vim, "h")
    assert vim.cursor() == (2, 0)

    press(vim, "2", "h")
    assert vim.cursor() == (0, 0)


def test_j_and_k() -> None:
    vim = make_vim()

    press(vim, "j")
    assert vim.cursor() == (0, 1)

    press(vim, "2", "j")
    assert vim.cursor() == (0, 3)

    press(vim, "k")
    assert vim.cursor() == (0, 2)

    press(vim, "2", "k")
    assert vim.cursor() == (0, 0)


def test_large_count_clamps_to_last_line() -> None:
    vim = make_vim()

    press(vim, "1", "2", "j")

    assert vim.cursor() == (0, 5)
    assert vim.pending_keys() == ()


def test_arrow_keys_move_like_hjkl() -> None:
    vim = make_vim()

    press(vim, "ArrowDown", "ArrowRight", "ArrowRight", "ArrowLeft", "ArrowUp")

    assert vim.cursor() == (1, 0)


def test_gg_and_G() -> None:
    vim = make_vim()

    press(vim, "2", "g", "g")
    assert vim.cursor() == (0, 1)

    press(vim, "g", "g")
    assert vim.cursor() == (0, 0)

    press(vim, "G")
    assert vim.cursor() == (0, vim.buffer.line_count() - 1)

    press(vim, "2", "G")
    assert vim.cursor() == (0, 1)


def test_zero_and_dollar() -> None:
    vim = make_vim()

    press(vim, "$")
    assert vim.cursor() == (vim.current_line_length() - 1, 0)

    press(vim, "0")
    assert vim.cursor() == (0, 0)

    press(vim, "$", "2", "0")
    assert vim.cursor() != (0, 0)

    press(vim, "Escape", "2", "$")
    assert vim.cursor() == (vim.current_line_length() - 1, 1)


def test_caret_skips_leading_blanks() -> None:
    vim = make_vim("    indented")

    press(vim, "$", "^")

    assert vim.cursor() == (4, 0)


def test_word_motions() -> None:
    vim = make_vim()

    press(vim, "w")
    assert vim.cursor() == (4, 0)

    press(vim, "e")
    assert vim.cursor() == (8, 0)

    press(vim, "b")
    assert vim.cursor() == (4, 0)

    press(vim, "2", "w")
    assert vim.cursor() == (16, 0)


def test_w_crosses_to_next_line() -> None:
    vim = make_vim()

    press(vim, "$", "w")

    assert vim.cursor() == (0, 1)


def test_word_motions_stop_at_buffer_edges() -> None:
    vim = make_vim("one two")

    press(vim, "9", "w")
    assert vim.cursor() == (6, 0)

    press(vim, "9", "e")
    assert vim.cursor() == (6, 0)

    press(vim, "9", "b")
    assert vim.cursor() == (0, 0)


def test_f_and_t_search_the_current_line() -> None:
    vim = make_vim()

    press(vim, "f", "o")
    assert vim.cursor() == (12, 0)

    press(vim, "0", "t", "o")
    assert vim.cursor() == (11, 0)


def test_f_with_count_and_missing_target() -> None:
    vim = make_vim()

    press(vim, "2", "f", "o")
    assert vim.cursor() == (17, 0)

    press(vim, "f", "z")
    assert vim.cursor() == (17, 0)
    assert vim.pending_keys() == ()


def test_f_target_may_be_a_command_key() -> None:
    vim = make_vim("axbx")

    press(vim, "f", "x")

    assert vim.cursor() == (1, 0)
    assert vim.text() == "axbx"
