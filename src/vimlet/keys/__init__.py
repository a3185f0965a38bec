"""Key tokens and the pending key chain."""

from .chain import DEFAULT_MAX_DEPTH, KeyChain
from .event import KeyCombineError, KeyEvent

__all__ = [
    "DEFAULT_MAX_DEPTH",
    "KeyChain",
    "KeyCombineError",
    "KeyEvent",
]
