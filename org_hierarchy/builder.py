"""
Organizational Hierarchy: Tree Construction

Builds an Employee tree from nested mappings:

    {"uniqueId": 1, "name": "...", "subordinates": [ {...}, ... ]}

``id`` is accepted in place of ``uniqueId``. Duplicate ids are not checked
here; OrgHierarchy rejects them when it builds its registry.
"""

from __future__ import annotations

from typing import Any, Mapping

from .domain_types import Employee, validate_employee_id


def build_employee_tree(data: Mapping[str, Any]) -> Employee:
    """Create the root Employee (and its whole subtree) from *data*."""
    root = _make_employee(data, "$")
    stack = [(root, data, "$")]
    while stack:
        node, node_data, path = stack.pop()
        subs = node_data.get("subordinates", [])
        if not isinstance(subs, list):
            raise ValueError(
                f"{path}.subordinates must be a list, got {type(subs).__name__}"
            )
        for i, sub_data in enumerate(subs):
            sub_path = f"{path}.subordinates[{i}]"
            sub = _make_employee(sub_data, sub_path)
            sub.supervisor = node
            node.subordinates.append(sub)
            stack.append((sub, sub_data, sub_path))
    return root


def _make_employee(data: Any, path: str) -> Employee:
    if not isinstance(data, Mapping):
        raise ValueError(f"{path} must be an object, got {type(data).__name__}")

    if "uniqueId" in data:
        employee_id = data["uniqueId"]
    elif "id" in data:
        employee_id = data["id"]
    else:
        raise ValueError(f"{path} is missing 'uniqueId'")
    validate_employee_id(employee_id)

    name = data.get("name")
    if not isinstance(name, str):
        raise ValueError(f"{path}.name must be a string")

    return Employee(id=employee_id, name=name)
