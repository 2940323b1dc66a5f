"""
Organizational Hierarchy: Diagnostics

Compute a diagnostic snapshot of the current tree and history cursor.
"""

from __future__ import annotations

from .constants import DEEP_HIERARCHY_THRESHOLD, WIDE_SPAN_THRESHOLD
from .engine import OrgHierarchy
from .tree import iter_with_depth


def compute_diagnostics(hierarchy: OrgHierarchy) -> dict:
    """Return a diagnostic dict summarising the current hierarchy."""
    depth = 0
    leaf_count = 0
    max_span = 0
    wide = []
    for node, level in iter_with_depth(hierarchy.root):
        depth = max(depth, level)
        span = len(node.subordinates)
        if span == 0:
            leaf_count += 1
        max_span = max(max_span, span)
        if span > WIDE_SPAN_THRESHOLD:
            wide.append(node.id)

    warnings: list[str] = []

    if wide:
        warnings.append(
            f"{len(wide)} supervisor(s) with more than {WIDE_SPAN_THRESHOLD} "
            f"direct reports: {', '.join(map(str, wide))}"
        )
    if depth > DEEP_HIERARCHY_THRESHOLD:
        warnings.append(
            f"Hierarchy depth {depth} exceeds {DEEP_HIERARCHY_THRESHOLD} levels"
        )

    log = hierarchy.history_log
    return {
        "headcount": len(hierarchy),
        "root_id": hierarchy.root.id,
        "depth": depth,
        "leaf_count": leaf_count,
        "max_span_of_control": max_span,
        "history_length": len(log),
        "cursor": log.cursor,
        "can_undo": log.can_undo,
        "can_redo": log.can_redo,
        "warnings": warnings,
    }
