"""Copy-on-write snapshot chain backing undo/redo."""

from __future__ import annotations

from vimlet.runtime import telemetry

from .state import CursorState


class UndoTimeline:
    """Linear undo/redo history over linked :class:`CursorState` snapshots.

    Every mutating command calls :meth:`commit`, which clones the current
    state (and its buffer), links it after the current one and makes it
    current. Undo and redo only move the ``current`` pointer along the
    ``prev``/``next`` links, so both are O(1) per step and never rewrite
    history. Committing after an undo re-points ``next`` at the new
    snapshot, dropping the old redo branch.
    """

    def __init__(self, root: CursorState) -> None:
        self.current = root

    def commit(self, *, label: str = "edit") -> CursorState:
        with telemetry.span(
            "history::commit", component="history", metadata={"label": label}
        ):
            snapshot = self.current.clone()
            snapshot.prev = self.current
            self.current.next = snapshot
            self.current = snapshot
        return snapshot

    def can_undo(self) -> bool:
        return self.current.prev is not None

    def can_redo(self) -> bool:
        return self.current.next is not None

    def undo(self, count: int = 1) -> int:
        steps = 0
        while steps < count and self.current.prev is not None:
            self.current = self.current.prev
            steps += 1
        return steps

    def redo(self, count: int = 1) -> int:
        steps = 0
        while steps < count and self.current.next is not None:
            self.current = self.current.next
            steps += 1
        return steps

    @property
    def depth(self) -> int:
        """Number of snapshots behind the current one."""

        depth = 0
        node = self.current.prev
        while node is not None:
            depth += 1
            node = node.prev
        return depth
