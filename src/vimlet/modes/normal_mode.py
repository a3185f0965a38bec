"""Normal mode: commands, counts and motions."""

from __future__ import annotations

from typing import Callable, Dict, Optional

from vimlet.actions import core as core_actions
from vimlet.actions import motions
from vimlet.keys import KeyEvent
from vimlet.runtime import telemetry

from .base_mode import Mode, ModeContext, ModeName, ModeResult

Command = Callable[[ModeContext, KeyEvent], ModeResult]


class NormalMode(Mode):
    name = ModeName.NORMAL

    def __init__(self, context: ModeContext) -> None:
        super().__init__(context)
        self.logger = telemetry.get_logger("vimlet.modes.normal")

    def handle_key(self, key: KeyEvent) -> ModeResult:
        if motions.pending_char_motion(key):
            return self._handle_motion(key)

        command = self._command_for(key)
        if command is not None:
            with telemetry.span(
                "normal::command",
                component="modes",
                metadata={"key": key.token, "command": command.__name__},
            ):
                return command(self.context, key)
        return self._handle_motion(key)

    def _command_for(self, key: KeyEvent) -> Optional[Command]:
        if key.ctrl:
            return _CTRL_COMMANDS.get(key.key)
        if key.key == "d":
            previous = key.prev
            if previous is not None and previous.is_key("d"):
                return core_actions.delete_lines
            return None
        return _COMMANDS.get(key.key)

    def _handle_motion(self, key: KeyEvent) -> ModeResult:
        motion = motions.resolve_motion(self.context.state, key)
        if motion is None:
            self.logger.debug(f"normal::pending keys={self.context.keys.labels()}")
            return ModeResult(consumed=False, status="pending")
        return core_actions.apply_motion(self.context, motion)


_COMMANDS: Dict[str, Command] = {
    "i": core_actions.enter_insert_mode,
    "I": core_actions.enter_insert_mode,
    "a": core_actions.append_after_cursor,
    "A": core_actions.append_after_cursor,
    "V": core_actions.enter_visual_mode,
    "v": core_actions.enter_visual_mode,
    "x": core_actions.delete_characters,
    "u": core_actions.undo,
}

_CTRL_COMMANDS: Dict[str, Command] = {
    "v": core_actions.enter_visual_mode,
    "r": core_actions.redo,
}
