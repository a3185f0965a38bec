"""Base classes and shared utilities for editor modes."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, Optional

from vimlet.buffer import CursorState, UndoTimeline
from vimlet.keys import KeyChain, KeyEvent


class ModeName(str, Enum):
    """The five interpretation contexts a keystroke can land in."""

    NORMAL = "normal"
    INSERT = "insert"
    VISUAL = "visual"
    VISUAL_LINE = "visual line"
    VISUAL_BLOCK = "visual block"

    @property
    def is_visual(self) -> bool:
        return self in (ModeName.VISUAL, ModeName.VISUAL_LINE, ModeName.VISUAL_BLOCK)


@dataclass(slots=True)
class ModeResult:
    """Result returned from ``Mode.handle_key``."""

    consumed: bool
    switch_to: Optional[ModeName] = None
    status: str = "ok"
    message: Optional[str] = None


class ModeBus:
    """Minimal event bus letting modes and hosts exchange structured signals."""

    def __init__(self) -> None:
        self._subscribers: Dict[str, list[Callable[[object], None]]] = {}

    def subscribe(self, event: str, callback: Callable[[object], None]) -> None:
        self._subscribers.setdefault(event, []).append(callback)

    def emit(self, event: str, payload: object | None = None) -> None:
        for callback in self._subscribers.get(event, []):
            callback(payload)


@dataclass(slots=True)
class ModeContext:
    """Per-editor services every mode can access.

    ``anchor`` is the selection start while a visual mode is active.
    """

    timeline: UndoTimeline
    keys: KeyChain
    bus: ModeBus
    anchor: Optional[CursorState] = None
    extras: Dict[str, object] = field(default_factory=dict)

    @property
    def state(self) -> CursorState:
        return self.timeline.current

    def commit(self, label: str) -> CursorState:
        """Start a new snapshot and return it for mutation."""

        snapshot = self.timeline.commit(label=label)
        self.bus.emit("buffer.commit", {"label": label})
        return snapshot


class Mode:
    """Base class all concrete editor modes inherit from."""

    name: ModeName = ModeName.NORMAL

    def __init__(self, context: ModeContext) -> None:
        self.context = context

    def on_enter(
        self, previous: Optional[ModeName]
    ) -> None:  # pragma: no cover - default no-op
        del previous

    def on_exit(
        self, next_mode: Optional[ModeName]
    ) -> None:  # pragma: no cover - default no-op
        del next_mode

    def handle_key(
        self, key: KeyEvent
    ) -> ModeResult:  # pragma: no cover - abstract override
        raise NotImplementedError
