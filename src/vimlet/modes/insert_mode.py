"""Insert mode: every key is handled immediately, nothing is chained."""

from __future__ import annotations

from vimlet.keys import KeyEvent
from vimlet.runtime import telemetry

from .base_mode import Mode, ModeContext, ModeName, ModeResult

TAB_TEXT = "  "


class InsertMode(Mode):
    name = ModeName.INSERT

    def __init__(self, context: ModeContext, *, tab_text: str = TAB_TEXT) -> None:
        super().__init__(context)
        self.logger = telemetry.get_logger("vimlet.modes.insert")
        self._tab_text = tab_text

    def on_exit(self, next_mode: ModeName | None) -> None:
        del next_mode
        self.context.keys.clear()

    def handle_key(self, key: KeyEvent) -> ModeResult:
        try:
            return self._dispatch(key)
        finally:
            self.context.keys.clear()

    def _dispatch(self, key: KeyEvent) -> ModeResult:
        # Edits land in the snapshot opened by the command that entered
        # Insert mode, so a whole insert session undoes as one step.
        state = self.context.state
        label = key.key

        if key.ctrl:
            self.logger.debug(f"insert::ignored key={key.token}")
            return ModeResult(consumed=False, status="ignored")
        if label == "Tab":
            state.insert_text_at_cursor(self._tab_text)
        elif label == "ArrowLeft":
            state.move_cursor_backward()
        elif label == "ArrowRight":
            state.move_cursor_forward()
        elif label == "ArrowUp":
            state.set_y(lambda y: y - 1)
        elif label == "ArrowDown":
            state.set_y(lambda y: y + 1)
        elif label == "Backspace":
            state.delete_text_at_cursor()
        elif label == "Enter":
            state.split_line_at_cursor()
        elif len(label) == 1 and label.isprintable():
            state.insert_text_at_cursor(label)
        else:
            self.logger.debug(f"insert::ignored key={key.token}")
            return ModeResult(consumed=False, status="ignored")
        return ModeResult(consumed=True, status="edit")
