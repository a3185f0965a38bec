"""Cursor state bound to one buffer snapshot."""

from __future__ import annotations

from typing import Callable, NamedTuple, Optional, Union

from .document import Buffer

Coordinate = Union[int, Callable[[int], int]]


class CursorPosition(NamedTuple):
    x: int
    y: int


def _clamp(low: int, high: int, value: int) -> int:
    return min(high, max(low, value))


def _never() -> bool:
    return False


class CursorState:
    """A cursor over an exclusively owned :class:`Buffer` snapshot.

    The raw coordinates are kept as written; every read clamps them against
    the buffer and the editor's current mode, so a state stays valid after
    its buffer shrinks. ``allow_past_end`` reports whether the cursor may sit
    one past the last character (Insert mode). ``prev``/``next`` link
    snapshots into the undo chain and are maintained by
    :class:`~vimlet.buffer.undo.UndoTimeline`.
    """

    __slots__ = ("buffer", "prev", "next", "_x", "_y", "_allow_past_end")

    def __init__(
        self,
        buffer: Buffer,
        *,
        allow_past_end: Optional[Callable[[], bool]] = None,
        x: int = 0,
        y: int = 0,
    ) -> None:
        self.buffer = buffer
        self.prev: Optional[CursorState] = None
        self.next: Optional[CursorState] = None
        self._allow_past_end = allow_past_end or _never
        self._x = x
        self._y = y

    @property
    def past_end_allowed(self) -> bool:
        return self._allow_past_end()

    def _max_x(self, y: int) -> int:
        slack = 0 if self.past_end_allowed else 1
        return max(0, self.buffer.line_length(y) - slack)

    def _max_y(self) -> int:
        return max(0, self.buffer.line_count() - 1)

    @property
    def x(self) -> int:
        return _clamp(0, self._max_x(self.y), self._x)

    @property
    def y(self) -> int:
        return _clamp(0, self._max_y(), self._y)

    @property
    def position(self) -> CursorPosition:
        return CursorPosition(self.x, self.y)

    def set_x(self, value: Coordinate) -> None:
        target = value(self._x) if callable(value) else value
        self._x = _clamp(0, self._max_x(self.y), target)

    def set_y(self, value: Coordinate) -> None:
        target = value(self._y) if callable(value) else value
        self._y = _clamp(0, self._max_y(), target)

    def jump_to(self, other: "CursorState") -> None:
        """Adopt another state's raw coordinates, keeping its remembered column."""

        self._x = other._x
        self._y = other._y

    def char_under_cursor(self) -> str:
        line = self.buffer.get_line(self.y) or ""
        x = self.x
        return line[x] if x < len(line) else ""

    def is_blank(self) -> bool:
        return self.char_under_cursor().isspace()

    def move_cursor_forward(self) -> bool:
        start = self.position
        self.set_x(start.x + 1)
        if self.x == start.x and start.y < self.buffer.line_count() - 1:
            self.set_y(start.y + 1)
            self.set_x(0)
        return self.position != start

    def move_cursor_backward(self) -> bool:
        start = self.position
        if start.x > 0:
            self.set_x(start.x - 1)
        elif start.y > 0:
            self.set_y(start.y - 1)
            self.set_x(self.buffer.line_length(self.y) - 1)
        return self.position != start

    def is_start_of_file(self) -> bool:
        return self.y == 0 and self.x == 0

    def is_end_of_line(self) -> bool:
        return self.x >= self.buffer.line_length(self.y) - 1

    def is_end_of_file(self) -> bool:
        return self.y == self.buffer.line_count() - 1 and self.is_end_of_line()

    def insert_text_at_cursor(self, text: str) -> None:
        x, y = self.position
        self.buffer.insert_text(text, x, y)
        self.set_x(x + len(text))

    def delete_text_at_cursor(self) -> None:
        """Delete one character: under the cursor, or behind it in Insert mode."""

        x, y = self.position
        if not self.past_end_allowed:
            self.buffer.delete_selection(x, y, x, y)
            return

        if x > 0:
            self.buffer.delete_selection(x - 1, y, x - 1, y)
            self.move_cursor_backward()
            return
        if y == 0:
            return
        # column 0: join onto the previous line
        join_at = self.buffer.line_length(y - 1)
        self.buffer.merge_lines(y - 1, y)
        self.buffer.compact()
        self.set_y(y - 1)
        self.set_x(join_at)

    def split_line_at_cursor(self) -> None:
        x, y = self.position
        line = self.buffer.get_line(y) or ""
        if x < len(line):
            self.buffer.delete_selection(x, y, len(line) - 1, y)
        self.buffer.insert_line(y + 1, line[x:])
        self.set_y(y + 1)
        self.set_x(0)

    def clone(self) -> "CursorState":
        return CursorState(
            self.buffer.clone(),
            allow_past_end=self._allow_past_end,
            x=self._x,
            y=self._y,
        )

    def fork(self) -> "CursorState":
        """Return a probe sharing this state's buffer, for read-only lookahead."""

        return CursorState(
            self.buffer, allow_past_end=self._allow_past_end, x=self._x, y=self._y
        )

    def __repr__(self) -> str:
        return f"CursorState(x={self.x}, y={self.y})"
