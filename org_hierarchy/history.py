"""
Organizational Hierarchy: History Log

One transition sequence split by a cursor:

    entries[:cursor]  -> applied, undoable
    entries[cursor:]  -> reverted, redoable

Recording a new transition discards the redoable half. There is no
branching timeline.

The log only moves its cursor. Replaying a transition against the tree is
the engine's job, and the engine moves the cursor only after the tree
surgery succeeded.
"""

from __future__ import annotations

from typing import List, Tuple

from .domain_types import Transition
from .errors import NothingToRedoError, NothingToUndoError


class HistoryLog:
    """Append-with-truncation transition log with a single cursor."""

    def __init__(self) -> None:
        self._entries: List[Transition] = []
        self._cursor: int = 0

    # -- State access -------------------------------------------------------

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def can_undo(self) -> bool:
        return self._cursor > 0

    @property
    def can_redo(self) -> bool:
        return self._cursor < len(self._entries)

    def undoable(self) -> Tuple[Transition, ...]:
        return tuple(self._entries[:self._cursor])

    def redoable(self) -> Tuple[Transition, ...]:
        return tuple(self._entries[self._cursor:])

    def entries(self) -> Tuple[Transition, ...]:
        return tuple(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    # -- Mutation -----------------------------------------------------------

    def record(self, transition: Transition) -> None:
        """Drop everything after the cursor, append, move cursor to the end."""
        del self._entries[self._cursor:]
        self._entries.append(transition)
        self._cursor = len(self._entries)

    def undo_target(self) -> Transition:
        """The transition the next undo reverts. Does not move the cursor."""
        if not self.can_undo:
            raise NothingToUndoError()
        return self._entries[self._cursor - 1]

    def redo_target(self) -> Transition:
        """The transition the next redo reapplies. Does not move the cursor."""
        if not self.can_redo:
            raise NothingToRedoError()
        return self._entries[self._cursor]

    def rewind(self) -> Transition:
        """Step the cursor back over the last applied transition."""
        transition = self.undo_target()
        self._cursor -= 1
        return transition

    def advance(self) -> Transition:
        """Step the cursor forward over the next redoable transition."""
        transition = self.redo_target()
        self._cursor += 1
        return transition

    def clear(self) -> None:
        self._entries = []
        self._cursor = 0

    def to_dict(self) -> dict:
        return {
            "cursor": self._cursor,
            "length": len(self._entries),
            "can_undo": self.can_undo,
            "can_redo": self.can_redo,
            "transitions": [t.to_dict() for t in self._entries],
        }
