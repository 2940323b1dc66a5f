"""
Organizational Hierarchy
In-memory employee tree with move + undo/redo of reassignments.
"""

from .domain_types import Employee, Transition, validate_employee_id
from .errors import (
    HierarchyError,
    UnknownEmployeeError,
    InvalidMoveError,
    DuplicateIdentifierError,
    NothingToUndoError,
    NothingToRedoError,
)
from .registry import EmployeeRegistry
from .history import HistoryLog
from .engine import OrgHierarchy
from .builder import build_employee_tree
from .invariants import InvariantViolationError, validate_invariants
from .hashing import canonical_serialize, canonical_hash
from .diagnostics import compute_diagnostics
from .constants import WIDE_SPAN_THRESHOLD, DEEP_HIERARCHY_THRESHOLD

__all__ = [
    "Employee",
    "Transition",
    "validate_employee_id",
    "HierarchyError",
    "UnknownEmployeeError",
    "InvalidMoveError",
    "DuplicateIdentifierError",
    "NothingToUndoError",
    "NothingToRedoError",
    "EmployeeRegistry",
    "HistoryLog",
    "OrgHierarchy",
    "build_employee_tree",
    "InvariantViolationError",
    "validate_invariants",
    "canonical_serialize",
    "canonical_hash",
    "compute_diagnostics",
    "WIDE_SPAN_THRESHOLD",
    "DEEP_HIERARCHY_THRESHOLD",
]
