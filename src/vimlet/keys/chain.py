"""Pending key chain assembled one keystroke at a time."""

from __future__ import annotations

from typing import Optional

from .event import KeyEvent

DEFAULT_MAX_DEPTH = 8


class KeyChain:
    """Backward-linked list of pending key tokens.

    ``push`` either fuses the new token into the tip (adjacent bare digits
    become one repeat count) or links it on top. Commands look back at most a
    few tokens, so links deeper than ``max_depth`` are cut on every push.
    """

    def __init__(self, *, max_depth: int = DEFAULT_MAX_DEPTH) -> None:
        if max_depth < 1:
            raise ValueError("max_depth must be positive")
        self.tip: Optional[KeyEvent] = None
        self._max_depth = max_depth

    def push(self, key: KeyEvent) -> KeyEvent:
        last = self.tip
        if last is not None and last.can_be_combined(key):
            last.combine(key)
            return last
        key.prev = last
        self.tip = key
        self._truncate()
        return key

    def pop(self, count: int = 1) -> None:
        for _ in range(count):
            if self.tip is None:
                return
            self.tip = self.tip.prev

    def clear(self) -> None:
        self.tip = None

    @property
    def depth(self) -> int:
        depth = 0
        node = self.tip
        while node is not None:
            depth += 1
            node = node.prev
        return depth

    def tokens(self) -> tuple[KeyEvent, ...]:
        """Pending tokens, oldest first."""

        collected: list[KeyEvent] = []
        node = self.tip
        while node is not None:
            collected.append(node)
            node = node.prev
        return tuple(reversed(collected))

    def labels(self) -> tuple[str, ...]:
        return tuple(key.token for key in self.tokens())

    def _truncate(self) -> None:
        node = self.tip
        for _ in range(self._max_depth - 1):
            if node is None:
                return
            node = node.prev
        if node is not None:
            node.prev = None

    def __bool__(self) -> bool:
        return self.tip is not None
