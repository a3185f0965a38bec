"""High-level editing verbs reused across modes."""

from .core import (
    append_after_cursor,
    apply_motion,
    delete_characters,
    delete_lines,
    enter_insert_mode,
    enter_visual_mode,
    redo,
    undo,
)
from .motions import MOTIONS, Motion, pending_char_motion, resolve_motion
from .visual import (
    current_highlights,
    delete_highlighted,
    highlight_spans,
    selected_text,
)

__all__ = [
    "append_after_cursor",
    "apply_motion",
    "delete_characters",
    "delete_lines",
    "enter_insert_mode",
    "enter_visual_mode",
    "redo",
    "undo",
    "MOTIONS",
    "Motion",
    "pending_char_motion",
    "resolve_motion",
    "current_highlights",
    "delete_highlighted",
    "highlight_spans",
    "selected_text",
]
