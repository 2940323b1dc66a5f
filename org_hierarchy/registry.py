"""
Organizational Hierarchy: Employee Registry

Flat, non-owning index from employee id to tree node.
Moves change edges, never the node set, so the index is built once.
"""

from __future__ import annotations

from typing import Dict, FrozenSet, Hashable, Iterator, Optional

from .domain_types import Employee, validate_employee_id
from .errors import DuplicateIdentifierError, UnknownEmployeeError
from .tree import iter_employees


class EmployeeRegistry:
    """O(1) id -> Employee resolution for one hierarchy."""

    def __init__(self) -> None:
        self._index: Dict[Hashable, Employee] = {}

    def build(self, root: Employee) -> None:
        """
        Index every node reachable from *root*.

        Hard fail on a repeated id. A node object reachable twice (a cycle
        or a shared subtree in the input) surfaces as a repeated id too, so
        the traversal always terminates. The registry is left empty on
        failure.
        """
        index: Dict[Hashable, Employee] = {}
        for node in iter_employees(root):
            validate_employee_id(node.id)
            if node.id in index:
                raise DuplicateIdentifierError(node.id)
            index[node.id] = node
        self._index = index

    def lookup(self, employee_id: Hashable) -> Employee:
        try:
            return self._index[employee_id]
        except (KeyError, TypeError):
            raise UnknownEmployeeError(employee_id) from None

    def get(self, employee_id: Hashable) -> Optional[Employee]:
        try:
            return self._index.get(employee_id)
        except TypeError:
            return None

    def ids(self) -> FrozenSet[Hashable]:
        return frozenset(self._index)

    def __contains__(self, employee_id: object) -> bool:
        return self.get(employee_id) is not None

    def __len__(self) -> int:
        return len(self._index)

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self._index)
