"""Visual, VisualLine and VisualBlock modes."""

from __future__ import annotations

from typing import Optional

from vimlet.actions import motions
from vimlet.actions import visual as visual_actions
from vimlet.keys import KeyEvent
from vimlet.runtime import telemetry

from .base_mode import Mode, ModeContext, ModeName, ModeResult

DELETE_KEYS = ("x", "d")


class VisualMode(Mode):
    """Selection mode; one instance is registered per visual kind."""

    def __init__(
        self, context: ModeContext, *, kind: ModeName = ModeName.VISUAL
    ) -> None:
        if not kind.is_visual:
            raise ValueError(f"'{kind.value}' is not a visual mode")
        super().__init__(context)
        self.name = kind
        self.logger = telemetry.get_logger("vimlet.modes.visual")

    def on_enter(self, previous: Optional[ModeName]) -> None:
        del previous
        self.context.anchor = self.context.state.clone()
        self.context.keys.clear()

    def on_exit(self, next_mode: Optional[ModeName]) -> None:
        del next_mode
        self.context.anchor = None

    def handle_key(self, key: KeyEvent) -> ModeResult:
        spans = visual_actions.current_highlights(self.context, self.name)
        if not spans:
            self.logger.warning(f"visual::no_selection mode={self.name.value}")
            return ModeResult(consumed=False, status="no_selection")

        motion = motions.resolve_motion(self.context.state, key)
        if motion is not None:
            self.context.state.jump_to(motion.target)
            self.context.keys.pop(motion.consumed)
            self.context.bus.emit(
                "visual.selection",
                {"anchor": self.context.anchor, "cursor": self.context.state.position},
            )
            return ModeResult(consumed=True, status="visual_select")

        if key.bare and key.key in DELETE_KEYS:
            with telemetry.span(
                "visual::delete",
                component="modes",
                metadata={"mode": self.name.value, "spans": len(spans)},
            ):
                return visual_actions.delete_highlighted(self.context, self.name, spans)

        return ModeResult(consumed=False, status="pending")
