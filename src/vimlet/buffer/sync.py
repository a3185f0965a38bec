"""Adapter boundary types for syncing the engine with host widgets."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol

from .document import Span
from .state import CursorPosition


@dataclass(frozen=True, slots=True)
class BufferMirror:
    """Host-friendly snapshot describing what the renderer should draw."""

    lines: tuple[str, ...]
    cursor: CursorPosition
    mode: str
    highlights: Optional[tuple[Span, ...]] = None
    pending: str = ""

    @property
    def text(self) -> str:
        return "\n".join(self.lines)


class BufferSync(Protocol):
    """Protocol describing how hosts pull state and push keys."""

    def mirror(self) -> BufferMirror:
        """Return the latest snapshot that the host should render."""
        ...

    def submit_key(
        self, label: str, *, ctrl: bool = False, shift: bool = False
    ) -> None:
        """Feed one normalized key descriptor into the engine."""
        ...
