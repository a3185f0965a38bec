"""Minimal Textual adapter that wires a Vim engine into UI callbacks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Optional

from vimlet.buffer import BufferMirror
from vimlet.editor import Vim
from vimlet.keys import KeyEvent

# Textual key name -> engine key label
SPECIAL_KEYS: Dict[str, str] = {
    "escape": "Escape",
    "enter": "Enter",
    "return": "Enter",
    "tab": "Tab",
    "backspace": "Backspace",
    "left": "ArrowLeft",
    "right": "ArrowRight",
    "up": "ArrowUp",
    "down": "ArrowDown",
}

RELAYED_EVENTS = (
    "mode.switch",
    "buffer.commit",
    "history.undo",
    "history.redo",
    "visual.selection",
    "visual.delete",
)


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks invoked by the adapter to update Textual widgets."""

    update_buffer: Callable[[BufferMirror], None]
    update_status: Callable[[str], None] = _noop
    handle_event: Callable[[str, object | None], None] = _noop
    log: Callable[[str], None] = _noop


def translate_key(key: str, character: Optional[str] = None) -> Optional[KeyEvent]:
    """Map a Textual key name (plus its printable character) to a KeyEvent.

    Returns ``None`` for keys the engine has no use for (function keys,
    alt chords and the like).
    """

    if key in SPECIAL_KEYS:
        return KeyEvent(SPECIAL_KEYS[key])
    if key.startswith("ctrl+"):
        rest = key[len("ctrl+") :]
        if len(rest) == 1:
            return KeyEvent(rest, ctrl=True)
        return None
    if character and len(character) == 1 and character.isprintable():
        return KeyEvent(character)
    if len(key) == 1 and key.isprintable():
        return KeyEvent(key)
    return None


def status_line(mirror: BufferMirror) -> str:
    mode = f"-- {mirror.mode.upper()} --"
    position = f"{mirror.cursor.y + 1}:{mirror.cursor.x + 1}"
    parts = [mode, position]
    if mirror.pending:
        parts.append(mirror.pending)
    return "  ".join(parts)


class TextualVimAdapter:
    """Bridges a :class:`~vimlet.editor.Vim` to a Textual-friendly surface."""

    def __init__(self, vim: Vim, hooks: TextualUIHooks) -> None:
        self.vim = vim
        self.hooks = hooks
        self.vim.on_state_change = self.refresh
        self._subscribe_events()
        self.refresh()

    def handle_textual_key(
        self, key: str, *, character: Optional[str] = None
    ) -> Optional[KeyEvent]:
        """Translate and dispatch one Textual key; returns the dispatched event."""

        event = translate_key(key, character)
        if event is None:
            self._log_state("key ignored", key=key)
            return None
        self._log_state("key ->", key=key, token=event.token)
        self.vim.key_press(event)
        return event

    def refresh(self) -> None:
        mirror = self.vim.mirror()
        self.hooks.update_buffer(mirror)
        self.hooks.update_status(status_line(mirror))

    def _subscribe_events(self) -> None:
        bus = self.vim.context.bus
        for event in RELAYED_EVENTS:
            bus.subscribe(
                event, lambda payload, name=event: self._handle_event(name, payload)
            )

    def _handle_event(self, name: str, payload: object | None) -> None:
        self._log_state("event ->", event=name, payload=payload)
        self.hooks.handle_event(name, payload)

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot: Dict[str, object] = {
            "mode": self.vim.mode.value,
            "cursor": tuple(self.vim.cursor()),
            "pending": "".join(self.vim.pending_keys()),
        }
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix] + [f"{key}={value!r}" for key, value in snapshot.items()]
        self.hooks.log(" ".join(parts))


__all__ = ["TextualVimAdapter", "TextualUIHooks", "translate_key", "status_line"]
