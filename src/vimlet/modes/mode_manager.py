"""Mode manager coordinating Normal/Insert/Visual reducers."""

from __future__ import annotations

from typing import Dict, Optional, Type

from vimlet.keys import KeyEvent
from vimlet.runtime import telemetry

from .base_mode import Mode, ModeContext, ModeName, ModeResult

ESCAPE = "Escape"


class ModeManager:
    """Owns the active mode, handles transitions, and dispatches key tokens."""

    def __init__(self, context: ModeContext) -> None:
        self.context = context
        self._modes: Dict[ModeName, Mode] = {}
        self._active: Optional[ModeName] = None
        self.logger = telemetry.get_logger("vimlet.modes")
        self.context.extras.setdefault("mode_manager", self)

    @property
    def active_mode(self) -> Optional[Mode]:
        if self._active is None:
            return None
        return self._modes.get(self._active)

    @property
    def mode_name(self) -> ModeName:
        return self._active or ModeName.NORMAL

    def register_mode(
        self,
        mode_cls: Type[Mode],
        /,
        *mode_args: object,
        **mode_kwargs: object,
    ) -> Mode:
        mode = mode_cls(self.context, *mode_args, **mode_kwargs)
        if mode.name in self._modes:
            raise ValueError(f"Mode '{mode.name.value}' already registered")
        self._modes[mode.name] = mode
        if self._active is None:
            self._active = mode.name
            mode.on_enter(None)
        return mode

    def switch_mode(self, name: ModeName) -> None:
        if name not in self._modes:
            raise KeyError(f"Unknown mode '{name.value}'")
        previous = self.active_mode
        if previous and previous.name == name:
            return
        if previous:
            previous.on_exit(name)
        self._active = name
        self._modes[name].on_enter(previous.name if previous else None)
        self.context.bus.emit("mode.switch", name)
        telemetry.record_event("mode.switch", level="debug", data={"mode": name.value})

    def handle_key(self, key: KeyEvent) -> ModeResult:
        mode = self.active_mode
        if mode is None:
            raise RuntimeError("No active mode registered")
        with telemetry.span(
            name=f"mode::{mode.name.value}",
            component=True,
            metadata={"key": key.token, "mode": mode.name.value},
        ) as span:
            result = self.cancel() if key.key == ESCAPE else mode.handle_key(key)
            span.add_metadata("status", result.status)
        return self._after_mode_result(result)

    def cancel(self) -> ModeResult:
        """Escape: drop pending keys and any selection, return to Normal."""

        self.logger.debug(f"mode::cancel from={self.mode_name.value}")
        self.context.anchor = None
        self.context.keys.clear()
        self.switch_mode(ModeName.NORMAL)
        self.context.state.set_x(lambda x: x)
        return ModeResult(consumed=True, status="cancel", message="escape")

    def _after_mode_result(self, result: ModeResult) -> ModeResult:
        if result.switch_to:
            self.switch_mode(result.switch_to)
        return result
