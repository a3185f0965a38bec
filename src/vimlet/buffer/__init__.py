"""Buffer storage, cursor snapshots and the undo/redo chain."""

from .document import Buffer, Span
from .state import CursorPosition, CursorState
from .sync import BufferMirror, BufferSync
from .undo import UndoTimeline

__all__ = [
    "Buffer",
    "Span",
    "CursorPosition",
    "CursorState",
    "BufferMirror",
    "BufferSync",
    "UndoTimeline",
]
