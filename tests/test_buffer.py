from __future__ import annotations

from vimlet.buffer import Buffer, Span

TEST_FILE = "\n".join(
    [
        "The quick brown fox",
        "jumps over the lazy dog",
        "The quick brown fox",
        "jumps over the lazy dog",
    ]
)


def make_buffer() -> Buffer:
    return Buffer.from_text(TEST_FILE)


def test_from_text_splits_lines() -> None:
    buffer = make_buffer()

    assert buffer.line_count() == 4
    assert buffer.get_line(1) == "jumps over the lazy dog"
    assert buffer.get_line(4) is None
    assert buffer.get_line(-1) is None
    assert buffer.line_length(0) == 19
    assert buffer.to_text() == TEST_FILE


def test_empty_buffer_has_one_empty_line() -> None:
    assert Buffer().lines() == ("",)
    assert Buffer([]).lines() == ("",)
    assert Buffer.from_text("").line_count() == 1


def test_delete_selection_row() -> None:
    buffer = make_buffer()

    buffer.delete_selection(0, 0, buffer.line_length(0) - 1, 0)

    assert buffer.lines() == (
        "",
        "jumps over the lazy dog",
        "The quick brown fox",
        "jumps over the lazy dog",
    )


def test_delete_selection_column() -> None:
    buffer = make_buffer()

    buffer.delete_selection(0, 0, 0, buffer.line_count() - 1)

    assert buffer.lines() == (
        "he quick brown fox",
        "umps over the lazy dog",
        "he quick brown fox",
        "umps over the lazy dog",
    )


def test_delete_selection_normalizes_reversed_corners() -> None:
    buffer = make_buffer()

    buffer.delete_selection(2, 1, 0, 0)

    assert buffer.get_line(0) == " quick brown fox"
    assert buffer.get_line(1) == "ps over the lazy dog"


def test_delete_selection_tombstones_fully_covered_rows() -> None:
    buffer = make_buffer()

    buffer.delete_selection(0, 1, 100, 2, remove_empty_lines=True)

    assert buffer.line_count() == 4
    assert buffer.get_line(1) is None
    assert buffer.get_line(2) is None
    assert buffer.lines() == ("The quick brown fox", "jumps over the lazy dog")

    buffer.compact()

    assert buffer.line_count() == 2


def test_delete_selection_keeps_partially_covered_rows() -> None:
    buffer = make_buffer()

    buffer.delete_selection(4, 0, 100, 0, remove_empty_lines=True)

    assert buffer.get_line(0) == "The "


def test_delete_span_matches_delete_selection() -> None:
    buffer = make_buffer()

    buffer.delete_span(Span(x1=5, y1=1, x2=10, y2=2))

    assert buffer.get_line(1) == "jumpsthe lazy dog"
    assert buffer.get_line(2) == "The qrown fox"


def test_get_selection_row() -> None:
    buffer = make_buffer()

    assert buffer.get_selection(0, 0, buffer.line_length(0) - 1, 0) == (
        "The quick brown fox"
    )


def test_get_selection_past_line_end_yields_empty_rows() -> None:
    buffer = make_buffer()

    assert buffer.get_selection(22, 1, 22, 3) == "g\n\ng"


def test_get_selection_column_and_box() -> None:
    buffer = make_buffer()

    assert buffer.get_selection(0, 0, 0, 3) == "T\nj\nT\nj"
    assert buffer.get_selection(5, 1, 10, 2) == " over \nuick b"


def test_delete_line_and_compact() -> None:
    buffer = make_buffer()

    buffer.delete_line(0)
    buffer.delete_line(99)

    assert buffer.line_count() == 4
    assert buffer.get_line(0) is None

    buffer.compact()

    assert buffer.line_count() == 3
    assert buffer.get_line(0) == "jumps over the lazy dog"


def test_compact_never_leaves_zero_lines() -> None:
    buffer = Buffer(["only"])

    buffer.delete_line(0)
    buffer.compact()

    assert buffer.lines() == ("",)


def test_merge_lines_tombstones_second_row() -> None:
    buffer = make_buffer()

    buffer.merge_lines(0, 1)

    assert buffer.get_line(0) == "The quick brown foxjumps over the lazy dog"
    assert buffer.get_line(1) is None


def test_insert_text_and_line() -> None:
    buffer = Buffer(["ac", ""])

    buffer.insert_text("b", 1, 0)
    buffer.insert_text("new", 5, 1)
    buffer.insert_line(1, "middle")

    assert buffer.lines() == ("abc", "middle", "new")


def test_clone_is_independent() -> None:
    buffer = make_buffer()
    copy = buffer.clone()

    copy.delete_line(0)
    copy.compact()

    assert buffer.line_count() == 4
    assert copy.line_count() == 3


def test_span_normalized() -> None:
    assert Span(5, 3, 1, 0).normalized() == Span(1, 0, 5, 3)
