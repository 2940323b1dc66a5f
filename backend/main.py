"""
FastAPI Backend: Organizational Hierarchy API v1.

One in-memory OrgHierarchy per process. Nothing is persisted; a restart
(or POST /reset) rebuilds the tree from the configured data. Employee ids
must be integers; a data file with any other id is rejected at load.

Endpoints:
  GET  /health
  GET  /state                    - tree + hash + diagnostics + history
  GET  /employees/{employee_id}  - single node summary
  POST /move                     - reassign an employee
  POST /undo, POST /redo         - walk the history cursor
  POST /reset                    - rebuild from data, history cleared
"""
from __future__ import annotations

import copy
import json
import logging
import os
import threading
from typing import Any, Dict, Optional

from dotenv import load_dotenv

env_path = os.path.join(os.path.dirname(__file__), ".env")
if os.path.exists(env_path):
    load_dotenv(env_path)

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from org_hierarchy.diagnostics import compute_diagnostics
from org_hierarchy.domain_types import Transition
from org_hierarchy.engine import OrgHierarchy
from org_hierarchy.errors import (
    HierarchyError,
    InvalidMoveError,
    NothingToRedoError,
    NothingToUndoError,
    UnknownEmployeeError,
)
from org_hierarchy.hashing import canonical_hash
from org_hierarchy.invariants import InvariantViolationError
from org_hierarchy.sample_data import SAMPLE_ORG

# ---------------------------------------------------------------------------
# Config
# ---------------------------------------------------------------------------

FRONTEND_URL = os.environ.get("FRONTEND_URL", "http://localhost:3000")
ORG_DATA_PATH = os.environ.get("ORG_DATA_PATH", "")
ORG_STRICT_INVARIANTS = os.environ.get("ORG_STRICT_INVARIANTS", "").lower() in ("1", "true", "yes")
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# App
# ---------------------------------------------------------------------------

app = FastAPI(
    title="OrgHierarchy API",
    version="1.0.0",
    description="Organizational hierarchy with undoable reassignments",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        FRONTEND_URL,
        "http://localhost:3000",
        "http://localhost:3001",
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ---------------------------------------------------------------------------
# Request models
# ---------------------------------------------------------------------------


class MoveRequest(BaseModel):
    employee_id: int
    supervisor_id: int


# ---------------------------------------------------------------------------
# Hierarchy holder
# ---------------------------------------------------------------------------

# Serializes every request touching the hierarchy: one operation in flight.
_lock = threading.Lock()
_hierarchy: Optional[OrgHierarchy] = None


def _load_org_data() -> Dict[str, Any]:
    if not ORG_DATA_PATH:
        return copy.deepcopy(SAMPLE_ORG)
    with open(ORG_DATA_PATH, "r", encoding="utf-8") as f:
        return json.load(f)


def _build_hierarchy() -> OrgHierarchy:
    """The HTTP API addresses employees by integer id; reject anything else."""
    hierarchy = OrgHierarchy.from_dict(_load_org_data(), strict=ORG_STRICT_INVARIANTS)
    non_int = sorted(
        repr(eid) for eid in hierarchy.employee_ids()
        if not isinstance(eid, int) or isinstance(eid, bool)
    )
    if non_int:
        raise ValueError(
            f"Employee IDs in {ORG_DATA_PATH or 'sample data'} must be integers, "
            f"got {', '.join(non_int)}"
        )
    logger.info(
        "Loaded hierarchy: %d employees (source=%s, strict=%s)",
        len(hierarchy), ORG_DATA_PATH or "sample", ORG_STRICT_INVARIANTS,
    )
    return hierarchy


def _get_hierarchy() -> OrgHierarchy:
    """Caller must hold _lock."""
    global _hierarchy
    if _hierarchy is None:
        _hierarchy = _build_hierarchy()
    return _hierarchy


def _to_http_error(exc: Exception) -> HTTPException:
    if isinstance(exc, UnknownEmployeeError):
        status = 404
    elif isinstance(exc, InvalidMoveError):
        status = 422
    elif isinstance(exc, (NothingToUndoError, NothingToRedoError)):
        status = 409
    elif isinstance(exc, InvariantViolationError):
        status = 500
    else:
        status = 400
    level = logging.ERROR if status >= 500 else logging.WARNING
    logger.log(level, "Request failed (%d): %s", status, exc)
    return HTTPException(status_code=status, detail=str(exc))


def _state_payload(hierarchy: OrgHierarchy) -> dict:
    return {
        "root": hierarchy.root.to_dict(),
        "state_hash": canonical_hash(hierarchy),
        "diagnostics": compute_diagnostics(hierarchy),
        "history": hierarchy.history_log.to_dict(),
    }


def _transition_payload(hierarchy: OrgHierarchy, transition: Optional[Transition]) -> dict:
    payload = _state_payload(hierarchy)
    payload["transition"] = transition.to_dict() if transition else None
    return payload


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------


@app.get("/health")
def health():
    return {"status": "ok", "version": "1.0.0"}


@app.get("/state")
def get_state():
    with _lock:
        return _state_payload(_get_hierarchy())


@app.get("/employees/{employee_id}")
def get_employee(employee_id: int):
    with _lock:
        hierarchy = _get_hierarchy()
        try:
            employee = hierarchy.lookup(employee_id)
        except HierarchyError as exc:
            raise _to_http_error(exc)
        return {
            "id": employee.id,
            "name": employee.name,
            "supervisor_id": employee.supervisor.id if employee.supervisor else None,
            "subordinate_ids": employee.subordinate_ids,
            "chain_of_command": hierarchy.chain_of_command(employee_id),
        }


@app.post("/move")
def move(req: MoveRequest):
    with _lock:
        hierarchy = _get_hierarchy()
        try:
            transition = hierarchy.move(req.employee_id, req.supervisor_id)
        except (HierarchyError, InvariantViolationError) as exc:
            raise _to_http_error(exc)
        return _transition_payload(hierarchy, transition)


@app.post("/undo")
def undo():
    with _lock:
        hierarchy = _get_hierarchy()
        try:
            transition = hierarchy.undo()
        except (HierarchyError, InvariantViolationError) as exc:
            raise _to_http_error(exc)
        return _transition_payload(hierarchy, transition)


@app.post("/redo")
def redo():
    with _lock:
        hierarchy = _get_hierarchy()
        try:
            transition = hierarchy.redo()
        except (HierarchyError, InvariantViolationError) as exc:
            raise _to_http_error(exc)
        return _transition_payload(hierarchy, transition)


@app.post("/reset")
def reset():
    global _hierarchy
    with _lock:
        _hierarchy = _build_hierarchy()
        return _state_payload(_hierarchy)
