"""
Organizational Hierarchy: Core Domain Types

Pure data. Tree mutation lives in tree.py, history in history.py.

────────────────────────────────────────────────
DOMAIN GLOSSARY
────────────────────────────────────────────────

Supervisor:
    The parent node of an employee in the tree.

Transition:
    A recorded single reassignment of one employee to a new supervisor.

Cursor:
    Position in the transition sequence separating undoable (before)
    from redoable (after) entries.

────────────────────────────────────────────────
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Hashable, List, Optional


# ── Employee ID Validation ────────────────────────────────────

def validate_employee_id(employee_id: Any) -> None:
    """Ids must be hashable and not None/bool. Hard fail."""
    if employee_id is None or isinstance(employee_id, bool):
        raise TypeError(f"Invalid employee ID {employee_id!r}")
    if not isinstance(employee_id, Hashable):
        raise TypeError(
            f"Invalid employee ID {employee_id!r}: must be hashable"
        )


# ── Core Domain Types ─────────────────────────────────────────

@dataclass(eq=False)
class Employee:
    """
    A single node of the organizational tree.

    ``subordinates`` owns the direct reports. ``supervisor`` is a
    non-owning back-reference kept in sync by tree.attach / tree.detach;
    it is None for the root.
    """

    id: Hashable
    name: str
    subordinates: List["Employee"] = field(default_factory=list)
    supervisor: Optional["Employee"] = field(
        default=None, repr=False, compare=False,
    )

    @property
    def subordinate_ids(self) -> List[Hashable]:
        return [s.id for s in self.subordinates]

    def to_dict(self) -> dict:
        """Export the subtree as nested mappings, in current sibling order."""
        out: Dict[str, Any] = {"uniqueId": self.id, "name": self.name, "subordinates": []}
        stack = [(self, out)]
        while stack:
            node, node_dict = stack.pop()
            for sub in node.subordinates:
                sub_dict = {"uniqueId": sub.id, "name": sub.name, "subordinates": []}
                node_dict["subordinates"].append(sub_dict)
                stack.append((sub, sub_dict))
        return out


@dataclass(frozen=True)
class Transition:
    """One completed move. Immutable once recorded."""

    employee_id: Hashable
    from_supervisor_id: Hashable
    to_supervisor_id: Hashable

    def reversed(self) -> "Transition":
        return Transition(
            employee_id=self.employee_id,
            from_supervisor_id=self.to_supervisor_id,
            to_supervisor_id=self.from_supervisor_id,
        )

    def to_dict(self) -> dict:
        return {
            "employee_id": self.employee_id,
            "from_supervisor_id": self.from_supervisor_id,
            "to_supervisor_id": self.to_supervisor_id,
        }
