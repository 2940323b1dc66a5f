"""
Organizational Hierarchy: Canonical Hashing

Deterministic canonical serialization + SHA-256 hashing of the tree.

Rules:
  - Nested objects {"id", "name", "subordinates"} in that field order
  - Subordinates sorted by (id type name, id), so sibling order left behind by undo/redo
    does not change the hash; only the parent relation and names do
  - UTF-8 JSON, no whitespace
"""

from __future__ import annotations

import hashlib
import json
from typing import Any, Dict, Tuple, Union

from .domain_types import Employee
from .engine import OrgHierarchy


def canonical_serialize(target: Union[OrgHierarchy, Employee]) -> bytes:
    """Canonical serialization of a hierarchy (or bare subtree) to bytes."""
    root = target.root if isinstance(target, OrgHierarchy) else target
    obj = {
        "kernel_version": 1,
        "root": _build_canonical_dict(root),
    }
    return json.dumps(obj, ensure_ascii=True, separators=(",", ":"), sort_keys=False).encode("utf-8")


def canonical_hash(target: Union[OrgHierarchy, Employee]) -> str:
    """SHA-256 of canonical serialization. Lowercase hex string."""
    return hashlib.sha256(canonical_serialize(target)).hexdigest()


def _build_canonical_dict(root: Employee) -> Dict[str, Any]:
    out: Dict[str, Any] = {"id": root.id, "name": root.name, "subordinates": []}
    stack = [(root, out)]
    while stack:
        node, node_dict = stack.pop()
        for sub in sorted(node.subordinates, key=_sibling_key):
            sub_dict = {"id": sub.id, "name": sub.name, "subordinates": []}
            node_dict["subordinates"].append(sub_dict)
            stack.append((sub, sub_dict))
    return out


def _sibling_key(employee: Employee) -> Tuple[str, Any]:
    """Ids of different types never compare directly; group by type name first."""
    return (type(employee.id).__name__, employee.id)
