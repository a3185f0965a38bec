"""Motion resolution.

Motions compute cursor destinations without modifying text. They are shared
by Normal-mode navigation, Visual-mode selection extension and the
``d{motion}`` delete family. The resolver reads the pending key chain through
``prev`` links but never pops it; callers pop ``Motion.consumed`` tokens.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Optional, cast

from vimlet.buffer import CursorState
from vimlet.keys import KeyEvent

CHAR_MOTIONS = ("f", "t")


@dataclass(frozen=True, slots=True)
class Motion:
    """Resolved motion: probe holding the target and tokens it used up."""

    target: CursorState
    consumed: int

    @property
    def position(self) -> tuple[int, int]:
        return self.target.position


MotionFunc = Callable[[CursorState, int], None]


def _count_of(token: Optional[KeyEvent]) -> Optional[int]:
    if token is None:
        return None
    return token.number


def _repeat(count: Optional[int]) -> int:
    return count or 1


def move_left(probe: CursorState, count: int) -> None:
    for _ in range(count):
        probe.move_cursor_backward()


def move_right(probe: CursorState, count: int) -> None:
    for _ in range(count):
        probe.move_cursor_forward()


def move_down(probe: CursorState, count: int) -> None:
    probe.set_y(lambda y: y + count)


def move_up(probe: CursorState, count: int) -> None:
    probe.set_y(lambda y: y - count)


def word_forward(probe: CursorState, count: int) -> None:
    for _ in range(count):
        start_line = probe.y
        while not probe.is_blank() and probe.y == start_line:
            if not probe.move_cursor_forward():
                return
        while probe.is_blank():
            if not probe.move_cursor_forward():
                return


def _at_word_gap(probe: CursorState) -> bool:
    return probe.is_blank() or probe.buffer.line_length(probe.y) == 0


def word_end(probe: CursorState, count: int) -> None:
    for _ in range(count):
        if not probe.move_cursor_forward():
            return
        while _at_word_gap(probe):
            if not probe.move_cursor_forward():
                return
        while True:
            ahead = probe.fork()
            if (
                not ahead.move_cursor_forward()
                or ahead.y != probe.y
                or ahead.is_blank()
            ):
                break
            probe.move_cursor_forward()


def word_backward(probe: CursorState, count: int) -> None:
    for _ in range(count):
        if not probe.move_cursor_backward():
            return
        while probe.is_blank():
            if not probe.move_cursor_backward():
                return
        while True:
            behind = probe.fork()
            if (
                not behind.move_cursor_backward()
                or behind.y != probe.y
                or behind.is_blank()
            ):
                break
            probe.move_cursor_backward()


def line_start(probe: CursorState, count: int) -> None:
    del count
    probe.set_x(0)


def first_non_blank(probe: CursorState, count: int) -> None:
    del count
    probe.set_x(0)
    while probe.is_blank() and not probe.is_end_of_line():
        probe.move_cursor_forward()


def line_end(probe: CursorState, count: int) -> None:
    if count > 1:
        probe.set_y(lambda y: y + count - 1)
    probe.set_x(probe.buffer.line_length(probe.y) - 1)


MOTIONS: Dict[str, MotionFunc] = {
    "h": move_left,
    "ArrowLeft": move_left,
    "l": move_right,
    "ArrowRight": move_right,
    "j": move_down,
    "ArrowDown": move_down,
    "k": move_up,
    "ArrowUp": move_up,
    "w": word_forward,
    "W": word_forward,
    "e": word_end,
    "E": word_end,
    "b": word_backward,
    "B": word_backward,
    "^": first_non_blank,
    "$": line_end,
}


def pending_char_motion(tip: Optional[KeyEvent]) -> bool:
    """True when ``tip`` is the target character of an ``f``/``t`` motion."""

    if tip is None or tip.prev is None:
        return False
    return tip.prev.bare and tip.prev.key in CHAR_MOTIONS


def resolve_motion(state: CursorState, tip: Optional[KeyEvent]) -> Optional[Motion]:
    """Resolve the motion ending at ``tip`` against ``state``.

    Returns ``None`` when the pending tokens do not (yet) form a motion.
    """

    if tip is None or tip.ctrl:
        return None
    if pending_char_motion(tip):
        return _resolve_char_motion(state, tip)

    probe = state.fork()
    count = _count_of(tip.prev)
    consumed = 2 if count is not None else 1

    if tip.key == "0":
        line_start(probe, 1)
        return Motion(target=probe, consumed=1)

    if tip.key == "G":
        probe.set_y(count - 1 if count else probe.buffer.line_count() - 1)
        return Motion(target=probe, consumed=consumed)

    if tip.key == "g":
        previous = tip.prev
        if previous is None or not previous.is_key("g"):
            return None
        count = _count_of(previous.prev)
        probe.set_y(count - 1 if count else 0)
        return Motion(target=probe, consumed=3 if count is not None else 2)

    motion = MOTIONS.get(tip.key)
    if motion is None:
        return None
    motion(probe, _repeat(count))
    if tip.key == "^":
        consumed = 1
    return Motion(target=probe, consumed=consumed)


def _resolve_char_motion(state: CursorState, tip: KeyEvent) -> Optional[Motion]:
    operator = cast(KeyEvent, tip.prev)
    count = _count_of(operator.prev)
    consumed = 3 if count is not None else 2
    probe = state.fork()
    if len(tip.key) != 1:
        # named keys never match
        return Motion(target=probe, consumed=consumed)

    line = probe.buffer.get_line(probe.y) or ""
    found = probe.x
    for _ in range(_repeat(count)):
        found = line.find(tip.key, found + 1)
        if found < 0:
            return Motion(target=probe, consumed=consumed)

    if operator.key == "t":
        found = max(probe.x, found - 1)
    probe.set_x(found)
    return Motion(target=probe, consumed=consumed)


__all__ = [
    "Motion",
    "MOTIONS",
    "resolve_motion",
    "pending_char_motion",
]
