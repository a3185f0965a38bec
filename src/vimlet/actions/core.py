"""Core action implementations for Normal mode."""

from __future__ import annotations

from typing import Optional, cast

from vimlet.keys import KeyEvent
from vimlet.modes.base_mode import ModeContext, ModeName, ModeResult
from vimlet.runtime import telemetry

from .motions import Motion


def _count(token: Optional[KeyEvent]) -> int:
    if token is None or not token.number:
        return 1
    return token.number


def _switch(context: ModeContext, mode: ModeName) -> None:
    manager = context.extras.get("mode_manager")
    switch_mode = getattr(manager, "switch_mode", None)
    if switch_mode is None:
        raise RuntimeError("ModeContext.extras missing 'mode_manager'")
    switch_mode(mode)


def enter_insert_mode(context: ModeContext, key: KeyEvent) -> ModeResult:
    column = 0 if key.key == "I" else context.state.x
    _switch(context, ModeName.INSERT)
    state = context.commit("enter_insert")
    state.set_x(column)
    context.keys.clear()
    return ModeResult(consumed=True, status="insert", message="enter_insert")


def append_after_cursor(context: ModeContext, key: KeyEvent) -> ModeResult:
    state = context.state
    if key.key == "A":
        column = state.buffer.line_length(state.y)
    else:
        column = min(state.x + 1, state.buffer.line_length(state.y))
    _switch(context, ModeName.INSERT)
    state = context.commit("append")
    state.set_x(column)
    context.keys.clear()
    return ModeResult(consumed=True, status="insert", message="append")


def enter_visual_mode(context: ModeContext, key: KeyEvent) -> ModeResult:
    if key.ctrl:
        target = ModeName.VISUAL_BLOCK
    elif key.key == "V":
        target = ModeName.VISUAL_LINE
    else:
        target = ModeName.VISUAL
    context.keys.clear()
    return ModeResult(consumed=True, switch_to=target, message="enter_visual")


def delete_characters(context: ModeContext, key: KeyEvent) -> ModeResult:
    count = _count(key.prev)
    state = context.commit("delete_char")
    for _ in range(count):
        state.delete_text_at_cursor()
    context.keys.clear()
    return ModeResult(consumed=True, status="delete_char")


def delete_lines(context: ModeContext, key: KeyEvent) -> ModeResult:
    first = cast(KeyEvent, key.prev)
    count = _count(first.prev)
    state = context.commit("delete_lines")
    row = state.y
    for offset in range(count):
        state.buffer.delete_line(row + offset)
    state.buffer.compact()
    context.keys.clear()
    return ModeResult(consumed=True, status="delete_lines")


def undo(context: ModeContext, key: KeyEvent) -> ModeResult:
    steps = context.timeline.undo(_count(key.prev))
    context.bus.emit("history.undo", {"steps": steps})
    telemetry.record_event("history.undo", level="debug", data={"steps": steps})
    context.keys.clear()
    return ModeResult(consumed=True, status="undo" if steps else "noop")


def redo(context: ModeContext, key: KeyEvent) -> ModeResult:
    steps = context.timeline.redo(_count(key.prev))
    context.bus.emit("history.redo", {"steps": steps})
    telemetry.record_event("history.redo", level="debug", data={"steps": steps})
    context.keys.clear()
    return ModeResult(consumed=True, status="redo" if steps else "noop")


def apply_motion(context: ModeContext, motion: Motion) -> ModeResult:
    """Move the cursor; a pending ``d`` turns the motion into a delete."""

    state = context.state
    before = state.position
    state.jump_to(motion.target)
    after = state.position
    context.keys.pop(motion.consumed)

    operator = context.keys.tip
    if operator is None or not operator.is_key("d"):
        return ModeResult(consumed=True, status="motion")

    context.keys.pop()
    if before == after:
        return ModeResult(consumed=True, status="noop")
    snapshot = context.commit("delete_motion")
    snapshot.buffer.delete_selection(before.x, before.y, after.x, after.y)
    return ModeResult(consumed=True, status="delete_motion")


__all__ = [
    "enter_insert_mode",
    "append_after_cursor",
    "enter_visual_mode",
    "delete_characters",
    "delete_lines",
    "undo",
    "redo",
    "apply_motion",
]
