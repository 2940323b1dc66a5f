"""
Organizational Hierarchy: Exception Hierarchy

Every failure leaves the hierarchy unchanged. Nothing is retried.
"""

from __future__ import annotations

from typing import Hashable


class HierarchyError(Exception):
    """Base exception for all hierarchy operations."""


# ── Lookup failures ───────────────────────────────────────────

class UnknownEmployeeError(HierarchyError):
    """Raised when an id is not present in the registry."""

    def __init__(self, employee_id: Hashable) -> None:
        self.employee_id = employee_id
        super().__init__(f"Unknown employee ID {employee_id!r}")


# ── Structural-validity failures ──────────────────────────────

class InvalidMoveError(HierarchyError):
    """Raised when a move would move the root, self-attach or create a cycle."""

    def __init__(
        self, employee_id: Hashable, supervisor_id: Hashable, reason: str,
    ) -> None:
        self.employee_id = employee_id
        self.supervisor_id = supervisor_id
        self.reason = reason
        super().__init__(
            f"Cannot move {employee_id!r} under {supervisor_id!r}: {reason}"
        )


class DuplicateIdentifierError(HierarchyError):
    """Raised at construction when an id appears more than once in the tree."""

    def __init__(self, employee_id: Hashable) -> None:
        self.employee_id = employee_id
        super().__init__(f"Duplicate employee ID {employee_id!r} in tree")


# ── History-boundary failures ─────────────────────────────────

class NothingToUndoError(HierarchyError):
    """Raised by undo() when the cursor is at the start of the history."""

    def __init__(self) -> None:
        super().__init__("No moves to undo")


class NothingToRedoError(HierarchyError):
    """Raised by redo() when the cursor is at the end of the history."""

    def __init__(self) -> None:
        super().__init__("No moves to redo")
