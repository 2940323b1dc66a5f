"""
Organizational Hierarchy: Tree Utilities

Pure node-level helpers. No registry, no history.
Traversals are iterative so deep chains never hit the recursion limit.
"""

from __future__ import annotations

from typing import Hashable, Iterator, List, Tuple

from .domain_types import Employee


# ---------------------------------------------------------------------------
# Traversal
# ---------------------------------------------------------------------------

def iter_employees(root: Employee) -> Iterator[Employee]:
    """Pre-order traversal, siblings in list order."""
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.subordinates))


def iter_with_depth(root: Employee) -> Iterator[Tuple[Employee, int]]:
    """Pre-order traversal yielding ``(node, depth)``; the root has depth 0."""
    stack = [(root, 0)]
    while stack:
        node, depth = stack.pop()
        yield node, depth
        stack.extend((sub, depth + 1) for sub in reversed(node.subordinates))


def link_supervisors(root: Employee) -> None:
    """Point every subordinate's back-reference at the node that owns it."""
    root.supervisor = None
    for node in iter_employees(root):
        for sub in node.subordinates:
            sub.supervisor = node


# ---------------------------------------------------------------------------
# Ancestry
# ---------------------------------------------------------------------------

def is_descendant(candidate: Employee, ancestor: Employee) -> bool:
    """True if *candidate* sits strictly below *ancestor*. O(depth)."""
    node = candidate.supervisor
    while node is not None:
        if node is ancestor:
            return True
        node = node.supervisor
    return False


def chain_of_command(employee: Employee) -> List[Hashable]:
    """Ids from *employee* up to and including the root."""
    chain = []
    node = employee
    while node is not None:
        chain.append(node.id)
        node = node.supervisor
    return chain


# ---------------------------------------------------------------------------
# Surgery
# ---------------------------------------------------------------------------

def detach(employee: Employee) -> Employee:
    """
    Remove *employee* from its supervisor's subordinates and clear the
    back-reference. Returns the former supervisor.
    """
    supervisor = employee.supervisor
    if supervisor is None:
        raise ValueError(f"Employee {employee.id!r} has no supervisor to detach from")
    supervisor.subordinates = [
        s for s in supervisor.subordinates if s is not employee
    ]
    employee.supervisor = None
    return supervisor


def attach(employee: Employee, supervisor: Employee) -> None:
    """Append *employee* as the last subordinate of *supervisor*."""
    if employee.supervisor is not None:
        raise ValueError(f"Employee {employee.id!r} is still attached")
    supervisor.subordinates.append(employee)
    employee.supervisor = supervisor


def reattach(employee: Employee, supervisor: Employee) -> Employee:
    """Detach then attach in one step. Returns the former supervisor."""
    previous = detach(employee)
    attach(employee, supervisor)
    return previous
