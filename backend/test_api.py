"""
Organizational Hierarchy API: Integration Test

Drives the FastAPI app through TestClient against the built-in sample org.
Endpoint tests start from POST /reset; the ORG_DATA_PATH tests build
from a temporary JSON file.

Run:  python -m backend.test_api
"""

from __future__ import annotations

import json
import os
import sys
import tempfile

from fastapi.testclient import TestClient

import backend.main as main_module
from backend.main import app

client = TestClient(app)


def _reset() -> dict:
    r = client.post("/reset")
    assert r.status_code == 200, r.text
    return r.json()


def test_health():
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"


def test_state_shape():
    state = _reset()
    assert state["root"]["uniqueId"] == 1
    assert state["diagnostics"]["headcount"] == 15
    assert state["history"]["cursor"] == 0
    assert len(state["state_hash"]) == 64


def test_move_undo_redo():
    initial = _reset()

    r = client.post("/move", json={"employee_id": 5, "supervisor_id": 14})
    assert r.status_code == 200, r.text
    body = r.json()
    assert body["transition"] == {
        "employee_id": 5, "from_supervisor_id": 2, "to_supervisor_id": 14,
    }
    assert body["history"]["cursor"] == 1
    assert client.get("/employees/5").json()["supervisor_id"] == 14

    r = client.post("/undo")
    assert r.status_code == 200
    assert r.json()["state_hash"] == initial["state_hash"]
    assert client.get("/employees/5").json()["supervisor_id"] == 2

    r = client.post("/redo")
    assert r.status_code == 200
    assert client.get("/employees/5").json()["chain_of_command"] == [5, 14, 8, 1]


def _build_from_file(data: dict):
    """Point the backend at a temporary ORG_DATA_PATH and build from it."""
    fd, path = tempfile.mkstemp(suffix=".json")
    previous = main_module.ORG_DATA_PATH
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump(data, f)
        main_module.ORG_DATA_PATH = path
        return main_module._build_hierarchy()
    finally:
        main_module.ORG_DATA_PATH = previous
        os.remove(path)


def test_org_data_file_with_integer_ids_loads():
    hierarchy = _build_from_file({"uniqueId": 1, "name": "CEO", "subordinates": [
        {"uniqueId": 2, "name": "CTO"},
    ]})
    assert hierarchy.employee_ids() == frozenset({1, 2})


def test_org_data_file_with_string_ids_rejected():
    try:
        _build_from_file({"uniqueId": "ceo", "name": "CEO", "subordinates": [
            {"uniqueId": 2, "name": "CTO"},
        ]})
        assert False, "expected ValueError"
    except ValueError as e:
        assert "'ceo'" in str(e)
        assert "2" not in str(e).split("got ")[1]


def test_no_op_move_returns_null_transition():
    _reset()
    r = client.post("/move", json={"employee_id": 5, "supervisor_id": 2})
    assert r.status_code == 200
    assert r.json()["transition"] is None
    assert r.json()["history"]["length"] == 0


def test_error_status_codes():
    _reset()
    assert client.post("/undo").status_code == 409
    assert client.post("/redo").status_code == 409
    assert client.post("/move", json={"employee_id": 99, "supervisor_id": 2}).status_code == 404
    assert client.post("/move", json={"employee_id": 2, "supervisor_id": 5}).status_code == 422
    assert client.post("/move", json={"employee_id": 1, "supervisor_id": 2}).status_code == 422
    assert client.get("/employees/99").status_code == 404
    assert client.get("/state").json()["history"]["length"] == 0


def test_reset_clears_history():
    _reset()
    client.post("/move", json={"employee_id": 5, "supervisor_id": 14})
    state = _reset()
    assert state["history"]["length"] == 0
    assert client.get("/employees/5").json()["supervisor_id"] == 2


def main() -> None:
    tests = [obj for name, obj in sorted(globals().items()) if name.startswith("test_")]
    failed = 0
    for fn in tests:
        try:
            fn()
            print(f"[PASS] {fn.__name__}")
        except Exception as e:
            failed += 1
            print(f"[FAIL] {fn.__name__}: {e!r}")
    print(f"\n  {len(tests) - failed} passed, {failed} failed out of {len(tests)}")
    sys.exit(1 if failed else 0)


if __name__ == "__main__":
    main()
