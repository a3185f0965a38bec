"""Editor facade: one engine instance and its read-only query surface."""

from __future__ import annotations

from typing import Callable, Optional, Sequence, Union

from vimlet.actions import visual as visual_actions
from vimlet.buffer import (
    Buffer,
    BufferMirror,
    CursorPosition,
    CursorState,
    Span,
    UndoTimeline,
)
from vimlet.keys import KeyChain, KeyEvent
from vimlet.modes import (
    InsertMode,
    ModeBus,
    ModeContext,
    ModeManager,
    ModeName,
    NormalMode,
    VisualMode,
)
from vimlet.runtime import telemetry

StateListener = Callable[[], None]


def create_default_manager(context: ModeContext) -> ModeManager:
    """Build a ModeManager with Normal, Insert and the three visual modes."""

    manager = ModeManager(context)
    manager.register_mode(NormalMode)
    manager.register_mode(InsertMode)
    manager.register_mode(VisualMode, kind=ModeName.VISUAL)
    manager.register_mode(VisualMode, kind=ModeName.VISUAL_LINE)
    manager.register_mode(VisualMode, kind=ModeName.VISUAL_BLOCK)
    return manager


class Vim:
    """A modal editor over a single buffer.

    Keys go in through :meth:`submit_key` (or :meth:`key_press`); every
    keypress is fully processed and then reported to ``on_state_change``.
    Everything else is a read-only query for the rendering side.
    """

    def __init__(
        self,
        text: str = "",
        *,
        on_state_change: Optional[StateListener] = None,
        bus: Optional[ModeBus] = None,
    ) -> None:
        self.on_state_change = on_state_change
        root = CursorState(Buffer.from_text(text), allow_past_end=self._in_insert_mode)
        self.context = ModeContext(
            timeline=UndoTimeline(root),
            keys=KeyChain(),
            bus=bus or ModeBus(),
        )
        self.manager = create_default_manager(self.context)
        self.logger = telemetry.get_logger("vimlet.editor")
        self.logger.debug(f"editor::init lines={self.buffer.line_count()}")

    def _in_insert_mode(self) -> bool:
        return self.mode is ModeName.INSERT

    # -- input -------------------------------------------------------------

    def submit_key(
        self, label: str, *, ctrl: bool = False, shift: bool = False
    ) -> None:
        self.key_press(KeyEvent.from_descriptor(label, ctrl=ctrl, shift=shift))

    def key_press(self, key: Union[KeyEvent, str]) -> None:
        token = self.context.keys.push(KeyEvent.coerce(key))
        self.manager.handle_key(token)
        self.notify_state_change()

    def type_keys(self, labels: Sequence[str]) -> None:
        for label in labels:
            self.key_press(label)

    def notify_state_change(self) -> None:
        self.context.bus.emit("state.change", None)
        if self.on_state_change is not None:
            self.on_state_change()

    # -- queries -----------------------------------------------------------

    @property
    def state(self) -> CursorState:
        return self.context.state

    @property
    def buffer(self) -> Buffer:
        return self.state.buffer

    @property
    def timeline(self) -> UndoTimeline:
        return self.context.timeline

    @property
    def mode(self) -> ModeName:
        return self.manager.mode_name

    def get_mode(self) -> ModeName:
        return self.mode

    def lines(self) -> Sequence[str]:
        return self.buffer.lines()

    def text(self) -> str:
        return self.buffer.to_text()

    def cursor(self) -> CursorPosition:
        return self.state.position

    def highlights(self) -> Optional[list[Span]]:
        return visual_actions.current_highlights(self.context, self.mode)

    def selected_text(self) -> Optional[str]:
        return visual_actions.selected_text(self.context, self.mode)

    def pending_keys(self) -> tuple[str, ...]:
        return self.context.keys.labels()

    def current_line_length(self) -> int:
        return self.buffer.line_length(self.state.y)

    def mirror(self) -> BufferMirror:
        highlights = self.highlights()
        return BufferMirror(
            lines=tuple(self.lines()),
            cursor=self.cursor(),
            mode=self.mode.value,
            highlights=tuple(highlights) if highlights is not None else None,
            pending="".join(self.pending_keys()),
        )

    def __str__(self) -> str:
        return self.text()
