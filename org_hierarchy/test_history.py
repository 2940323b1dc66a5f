"""
Organizational Hierarchy: History Log Tests

Cursor movement, truncation and boundary errors of HistoryLog in isolation.

Run:  python -m org_hierarchy.test_history
"""

from __future__ import annotations

import sys

from org_hierarchy.domain_types import Transition
from org_hierarchy.errors import NothingToRedoError, NothingToUndoError
from org_hierarchy.history import HistoryLog


def _t(n: int) -> Transition:
    return Transition(employee_id=n, from_supervisor_id=0, to_supervisor_id=n + 100)


def test_starts_empty():
    log = HistoryLog()
    assert log.cursor == 0
    assert len(log) == 0
    assert not log.can_undo
    assert not log.can_redo


def test_record_moves_cursor_to_end():
    log = HistoryLog()
    log.record(_t(1))
    log.record(_t(2))
    assert log.cursor == 2
    assert log.undoable() == (_t(1), _t(2))
    assert log.redoable() == ()


def test_targets_do_not_move_cursor():
    log = HistoryLog()
    log.record(_t(1))
    assert log.undo_target() == _t(1)
    assert log.cursor == 1
    log.rewind()
    assert log.redo_target() == _t(1)
    assert log.cursor == 0


def test_rewind_and_advance():
    log = HistoryLog()
    for n in range(3):
        log.record(_t(n))
    assert log.rewind() == _t(2)
    assert log.rewind() == _t(1)
    assert log.cursor == 1
    assert log.redoable() == (_t(1), _t(2))
    assert log.advance() == _t(1)
    assert log.cursor == 2


def test_record_discards_redoable_tail():
    log = HistoryLog()
    for n in range(3):
        log.record(_t(n))
    log.rewind()
    log.rewind()
    log.record(_t(9))
    assert log.entries() == (_t(0), _t(9))
    assert log.cursor == 2
    assert not log.can_redo


def test_boundary_errors():
    log = HistoryLog()
    try:
        log.undo_target()
        assert False, "expected NothingToUndoError"
    except NothingToUndoError:
        pass
    try:
        log.advance()
        assert False, "expected NothingToRedoError"
    except NothingToRedoError:
        pass
    assert log.cursor == 0


def test_transition_reversed():
    t = Transition(employee_id=5, from_supervisor_id=2, to_supervisor_id=14)
    r = t.reversed()
    assert r == Transition(employee_id=5, from_supervisor_id=14, to_supervisor_id=2)
    assert r.reversed() == t


def test_to_dict():
    log = HistoryLog()
    log.record(Transition(employee_id=5, from_supervisor_id=2, to_supervisor_id=14))
    log.rewind()
    assert log.to_dict() == {
        "cursor": 0,
        "length": 1,
        "can_undo": False,
        "can_redo": True,
        "transitions": [
            {"employee_id": 5, "from_supervisor_id": 2, "to_supervisor_id": 14},
        ],
    }


def test_clear():
    log = HistoryLog()
    log.record(_t(1))
    log.clear()
    assert log.cursor == 0 and len(log) == 0


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
