"""Core document data structures for vimlet buffers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence


@dataclass(frozen=True, slots=True)
class Span:
    """Inclusive rectangle in buffer coordinates."""

    x1: int
    y1: int
    x2: int
    y2: int

    def normalized(self) -> "Span":
        return Span(
            x1=min(self.x1, self.x2),
            y1=min(self.y1, self.y2),
            x2=max(self.x1, self.x2),
            y2=max(self.y1, self.y2),
        )


class Buffer:
    """List-of-lines text storage with tombstoned deletes.

    Deleted rows are replaced by ``None`` so that row indices stay stable
    while a multi-step edit is in flight; ``compact`` drops them afterwards.
    A compacted buffer always holds at least one (possibly empty) line.
    """

    def __init__(self, lines: Optional[Iterable[Optional[str]]] = None) -> None:
        self._lines: List[Optional[str]] = list(lines) if lines is not None else [""]
        if not self._lines:
            self._lines.append("")

    @classmethod
    def from_text(cls, text: str) -> "Buffer":
        return cls(text.split("\n"))

    def line_count(self) -> int:
        return len(self._lines)

    def get_line(self, y: int) -> Optional[str]:
        if y < 0 or y >= len(self._lines):
            return None
        return self._lines[y]

    def line_length(self, y: int) -> int:
        line = self.get_line(y)
        return len(line) if line is not None else 0

    def lines(self) -> Sequence[str]:
        """Return the live lines without exposing internal mutability."""

        return tuple(line for line in self._lines if line is not None)

    def to_text(self) -> str:
        return "\n".join(self.lines())

    def delete_selection(
        self,
        x1: int,
        y1: int,
        x2: int,
        y2: int,
        remove_empty_lines: bool = False,
    ) -> None:
        span = Span(x1, y1, x2, y2).normalized()
        start = max(span.x1, 0)
        for y, line in enumerate(self._lines):
            if line is None or y < span.y1 or y > span.y2:
                continue
            if remove_empty_lines and start == 0 and span.x2 >= len(line) - 1:
                self._lines[y] = None
            else:
                self._lines[y] = line[:start] + line[span.x2 + 1 :]

    def delete_span(self, span: Span, remove_empty_lines: bool = False) -> None:
        self.delete_selection(
            span.x1, span.y1, span.x2, span.y2, remove_empty_lines=remove_empty_lines
        )

    def delete_line(self, y: int) -> None:
        if 0 <= y < len(self._lines):
            self._lines[y] = None

    def compact(self) -> None:
        self._lines = [line for line in self._lines if line is not None]
        if not self._lines:
            self._lines.append("")

    def get_selection(self, x1: int, y1: int, x2: int, y2: int) -> str:
        span = Span(x1, y1, x2, y2).normalized()
        start = max(span.x1, 0)
        rows = [
            line[start : span.x2 + 1]
            for y, line in enumerate(self._lines)
            if line is not None and span.y1 <= y <= span.y2
        ]
        return "\n".join(rows)

    def merge_lines(self, a: int, b: int) -> None:
        self._lines[a] = (self.get_line(a) or "") + (self.get_line(b) or "")
        self.delete_line(b)

    def insert_text(self, text: str, x: int, y: int) -> None:
        line = self.get_line(y)
        if not line:
            self._lines[y] = text
            return
        self._lines[y] = line[:x] + text + line[x:]

    def insert_line(self, y: int, text: str = "") -> None:
        self._lines.insert(y, text)

    def clone(self) -> "Buffer":
        return Buffer(self.lines())

    def __repr__(self) -> str:
        return f"Buffer({self._lines!r})"
