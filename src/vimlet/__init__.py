"""UI-agnostic modal (vi-style) editing engine."""

from . import modes  # noqa: F401  (modes must initialise before actions)
from .editor import Vim, create_default_manager
from .keys import KeyCombineError, KeyEvent
from .modes import ModeName

__all__ = [
    "Vim",
    "create_default_manager",
    "KeyEvent",
    "KeyCombineError",
    "ModeName",
]

__version__ = "0.1.0"
