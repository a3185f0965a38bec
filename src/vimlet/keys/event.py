"""Normalized key tokens and numeric-prefix fusion."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Union


class KeyCombineError(ValueError):
    """Raised when two key tokens that cannot fuse are combined."""

    def __init__(self, left: "KeyEvent", right: "KeyEvent") -> None:
        super().__init__(f"Cannot combine key {left.token!r} with {right.token!r}")
        self.left = left
        self.right = right


@dataclass(slots=True, eq=False)
class KeyEvent:
    """Single normalized key press.

    ``key`` is the display label, upper-cased when shift was held. Labels made
    only of digits also carry ``number``, which is how repeat counts travel
    through the chain. ``prev`` points at the token typed just before this
    one in the same pending sequence.
    """

    key: str
    ctrl: bool = False
    shift: bool = False
    number: Optional[int] = field(default=None, init=False)
    prev: Optional["KeyEvent"] = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        if not self.key:
            raise ValueError("key cannot be empty")
        if self.shift:
            self.key = self.key.upper()
        if self.key.isascii() and self.key.isdigit():
            self.number = int(self.key)

    @classmethod
    def from_descriptor(
        cls, label: str, *, ctrl: bool = False, shift: bool = False
    ) -> "KeyEvent":
        return cls(key=label, ctrl=ctrl, shift=shift)

    @classmethod
    def coerce(cls, value: Union["KeyEvent", str]) -> "KeyEvent":
        if isinstance(value, KeyEvent):
            return value
        return cls(key=value)

    @property
    def bare(self) -> bool:
        return not self.ctrl and not self.shift

    @property
    def token(self) -> str:
        held = (("ctrl", self.ctrl), ("shift", self.shift))
        parts = [name for name, pressed in held if pressed]
        return "+".join([*parts, self.key])

    def is_key(self, key: str, *, ctrl: bool = False) -> bool:
        return self.key == key and self.ctrl is ctrl

    def can_be_combined(self, other: "KeyEvent") -> bool:
        return (
            self.number is not None
            and other.number is not None
            and self.bare
            and other.bare
        )

    def combine(self, other: "KeyEvent") -> None:
        if not self.can_be_combined(other):
            raise KeyCombineError(self, other)
        self.key += other.key
        self.number = int(self.key)


__all__ = ["KeyEvent", "KeyCombineError"]
