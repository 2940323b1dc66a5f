"""
Organizational Hierarchy: Invariant Checks

Hard-fail validation. Every check raises InvariantViolationError on failure.
Run by the engine after every mutation in strict mode, and by the tests.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, Hashable

from .domain_types import Employee
from .tree import iter_employees

if TYPE_CHECKING:
    from .engine import OrgHierarchy


class InvariantViolationError(Exception):
    """Raised when a hierarchy invariant is violated."""

    def __init__(self, rule: str, detail: str) -> None:
        self.rule = rule
        self.detail = detail
        super().__init__(f"[INVARIANT:{rule}] {detail}")


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def validate_invariants(hierarchy: "OrgHierarchy") -> None:
    """
    Run all checks. Raises InvariantViolationError on the first failure.
    """
    _check_root_has_no_supervisor(hierarchy.root)
    reachable = _check_tree_shape(hierarchy.root)
    _check_registry_matches_tree(hierarchy, reachable)
    _check_history_cursor(hierarchy)


# ---------------------------------------------------------------------------
# Individual checks (private)
# ---------------------------------------------------------------------------

def _check_root_has_no_supervisor(root: Employee) -> None:
    if root.supervisor is not None:
        raise InvariantViolationError(
            "root_supervisor",
            f"Root {root.id!r} has supervisor {root.supervisor.id!r}"
        )


def _check_tree_shape(root: Employee) -> Dict[Hashable, Employee]:
    """
    Every node reached exactly once, ids unique, back-references consistent.
    Returns the reachable id -> node map.
    """
    seen: Dict[Hashable, Employee] = {}
    for node in iter_employees(root):
        if node.id in seen:
            raise InvariantViolationError(
                "duplicate_ids",
                f"Employee ID {node.id!r} reached more than once"
            )
        seen[node.id] = node
        for sub in node.subordinates:
            if sub.supervisor is not node:
                actual = None if sub.supervisor is None else sub.supervisor.id
                raise InvariantViolationError(
                    "supervisor_backref",
                    f"Employee {sub.id!r} is listed under {node.id!r} "
                    f"but points at supervisor {actual!r}"
                )
    return seen


def _check_registry_matches_tree(
    hierarchy: "OrgHierarchy", reachable: Dict[Hashable, Employee],
) -> None:
    registry = hierarchy.registry
    registered = registry.ids()
    if registered != frozenset(reachable):
        missing = sorted(map(repr, frozenset(reachable) - registered))
        extra = sorted(map(repr, registered - frozenset(reachable)))
        raise InvariantViolationError(
            "registry_membership",
            f"Registry out of sync with tree: missing={missing} extra={extra}"
        )
    for eid, node in reachable.items():
        if registry.lookup(eid) is not node:
            raise InvariantViolationError(
                "registry_identity",
                f"Registry entry for {eid!r} is not the node in the tree"
            )


def _check_history_cursor(hierarchy: "OrgHierarchy") -> None:
    log = hierarchy.history_log
    if not 0 <= log.cursor <= len(log):
        raise InvariantViolationError(
            "history_cursor",
            f"Cursor {log.cursor} outside [0, {len(log)}]"
        )
