"""Mode manager and per-mode reducers."""

from .base_mode import Mode, ModeBus, ModeContext, ModeName, ModeResult
from .normal_mode import NormalMode
from .insert_mode import InsertMode
from .visual_mode import VisualMode
from .mode_manager import ModeManager

__all__ = [
    "Mode",
    "ModeBus",
    "ModeContext",
    "ModeName",
    "ModeResult",
    "NormalMode",
    "InsertMode",
    "VisualMode",
    "ModeManager",
]
