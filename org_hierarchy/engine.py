"""
Organizational Hierarchy: Engine

Top-level orchestrator. Resolves ids via registry.py, mutates the tree via
tree.py, records transitions in history.py, validates via invariants.py.

Every operation checks everything before it touches the tree, so a raised
error always leaves the hierarchy as it was.
"""

from __future__ import annotations

import logging
from typing import FrozenSet, Hashable, List, Mapping, Optional, Tuple

from .builder import build_employee_tree
from .domain_types import Employee, Transition
from .errors import InvalidMoveError
from .history import HistoryLog
from .invariants import InvariantViolationError, validate_invariants
from .registry import EmployeeRegistry
from .tree import chain_of_command, is_descendant, link_supervisors, reattach

logger = logging.getLogger(__name__)


class OrgHierarchy:
    """
    An organizational tree plus its undo/redo transition log.

    Single-writer: there is no locking here. Callers sharing one instance
    across threads must serialize access themselves.

    strict=True validates every invariant at construction and before each
    mutation (O(n)), so a corrupted tree is reported before it is touched.

    The hierarchy takes over *root*; it must not be attached to a
    supervisor elsewhere.
    """

    def __init__(self, root: Employee, strict: bool = False) -> None:
        if root.supervisor is not None:
            raise ValueError(
                f"Employee {root.id!r} reports to {root.supervisor.id!r} "
                f"and cannot be the root of a new hierarchy"
            )
        self._registry = EmployeeRegistry()
        self._registry.build(root)
        link_supervisors(root)
        self._root = root
        self._history = HistoryLog()
        self._strict = strict
        if strict:
            validate_invariants(self)

    @classmethod
    def from_dict(cls, data: Mapping, strict: bool = False) -> "OrgHierarchy":
        return cls(build_employee_tree(data), strict=strict)

    # -- State access -------------------------------------------------------

    @property
    def root(self) -> Employee:
        """Live view of the root, not a copy."""
        return self._root

    @property
    def registry(self) -> EmployeeRegistry:
        return self._registry

    @property
    def history_log(self) -> HistoryLog:
        return self._history

    @property
    def history(self) -> Tuple[Transition, ...]:
        return self._history.entries()

    @property
    def cursor(self) -> int:
        return self._history.cursor

    @property
    def can_undo(self) -> bool:
        return self._history.can_undo

    @property
    def can_redo(self) -> bool:
        return self._history.can_redo

    def lookup(self, employee_id: Hashable) -> Employee:
        return self._registry.lookup(employee_id)

    def supervisor_of(self, employee_id: Hashable) -> Optional[Employee]:
        return self._registry.lookup(employee_id).supervisor

    def chain_of_command(self, employee_id: Hashable) -> List[Hashable]:
        return chain_of_command(self._registry.lookup(employee_id))

    def employee_ids(self) -> FrozenSet[Hashable]:
        return self._registry.ids()

    def __len__(self) -> int:
        return len(self._registry)

    # -- Public API ---------------------------------------------------------

    def move(
        self, employee_id: Hashable, supervisor_id: Hashable,
    ) -> Optional[Transition]:
        """
        Reassign *employee_id* to *supervisor_id*.

        Returns the recorded Transition, or None when *supervisor_id* is
        already the current supervisor (nothing recorded). A new move
        discards any redoable history.
        """
        employee = self._registry.lookup(employee_id)
        current = employee.supervisor
        supervisor = self._registry.lookup(supervisor_id)

        if current is None:
            self._reject(employee_id, supervisor_id, "the root cannot be moved")
        if supervisor is employee:
            self._reject(employee_id, supervisor_id, "an employee cannot supervise itself")
        if is_descendant(supervisor, employee):
            self._reject(
                employee_id, supervisor_id,
                "the new supervisor reports to the employee (cycle)",
            )

        if supervisor is current:
            logger.debug("move %r -> %r is a no-op", employee_id, supervisor_id)
            return None

        self._before_mutation()
        reattach(employee, supervisor)
        transition = Transition(
            employee_id=employee.id,
            from_supervisor_id=current.id,
            to_supervisor_id=supervisor.id,
        )
        self._history.record(transition)
        logger.debug(
            "moved %r from %r to %r (cursor=%d)",
            employee.id, current.id, supervisor.id, self._history.cursor,
        )
        return transition

    def undo(self) -> Transition:
        """Revert the last applied transition. Raises NothingToUndoError."""
        transition = self._history.undo_target()
        self._before_mutation()
        self._replay(transition.reversed())
        self._history.rewind()
        logger.debug("undid %r (cursor=%d)", transition, self._history.cursor)
        return transition

    def redo(self) -> Transition:
        """Reapply the next reverted transition. Raises NothingToRedoError."""
        transition = self._history.redo_target()
        self._before_mutation()
        self._replay(transition)
        self._history.advance()
        logger.debug("redid %r (cursor=%d)", transition, self._history.cursor)
        return transition

    # -- Internals ----------------------------------------------------------

    def _replay(self, transition: Transition) -> None:
        """
        Apply *transition* as direct tree surgery, recording nothing.

        The employee must currently sit under ``from_supervisor_id``. That
        always holds when the tree is only mutated through this engine.
        """
        employee = self._registry.lookup(transition.employee_id)
        origin = self._registry.lookup(transition.from_supervisor_id)
        target = self._registry.lookup(transition.to_supervisor_id)

        if employee.supervisor is not origin:
            actual = None if employee.supervisor is None else employee.supervisor.id
            raise InvariantViolationError(
                "history_consistency",
                f"Expected {employee.id!r} under {origin.id!r}, found {actual!r}",
            )
        if target is employee or is_descendant(target, employee):
            raise InvariantViolationError(
                "history_consistency",
                f"Replaying {transition!r} would create a cycle",
            )
        reattach(employee, target)

    def _reject(
        self, employee_id: Hashable, supervisor_id: Hashable, reason: str,
    ) -> None:
        logger.info("rejected move %r -> %r: %s", employee_id, supervisor_id, reason)
        raise InvalidMoveError(employee_id, supervisor_id, reason)

    def _before_mutation(self) -> None:
        """
        Strict mode only. A valid tree stays valid under reattach, which
        keeps the supervisor back-reference in sync itself, so checking
        the state before the surgery is enough.
        """
        if self._strict:
            validate_invariants(self)
