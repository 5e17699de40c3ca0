# tests/test_tables.py
import numpy as np
from core.tables import QTable, StateAction, VisitCounter, first_argmax


def test_state_action_equality_and_hash():
    assert StateAction("s", "a") == StateAction("s", "a")
    assert StateAction("s", "a") != StateAction("a", "s")
    assert len({StateAction("s", "a"), StateAction("s", "a")}) == 1


def test_absent_entry_is_none_but_reads_as_zero():
    Q = QTable()
    sa = StateAction("s", "a")
    assert Q.get(sa) is None
    assert Q.value(sa) == 0.0
    assert sa not in Q
    Q.set(sa, 0.0)
    assert Q.get(sa) == 0.0
    assert sa in Q
    assert len(Q) == 1


def test_best_value_skips_absent_entries():
    Q = QTable()
    assert Q.best_value("s", ["a", "b"]) == 0.0
    Q.set(StateAction("s", "a"), -2.0)
    Q.set(StateAction("s", "b"), -1.0)
    # only present entries compete, so an all-negative state stays negative
    assert Q.best_value("s", ["a", "b", "c"]) == -1.0
    assert Q.best_value("s", []) == 0.0
    assert Q.best_value("other", ["a", "b"]) == 0.0


def test_utility_is_max_per_state():
    Q = QTable()
    Q.set(StateAction("s1", "a"), 1.0)
    Q.set(StateAction("s1", "b"), 3.0)
    Q.set(StateAction("s2", "a"), -4.0)
    assert Q.utility() == {"s1": 3.0, "s2": -4.0}
    Q.clear()
    assert Q.utility() == {}


def test_visit_counter_increments_from_zero():
    N = VisitCounter()
    sa = StateAction("s", "a")
    assert N.count(sa) == 0
    assert N.increment(sa) == 1
    assert N.increment(sa) == 2
    assert N.count(sa) == 2
    assert len(N) == 1
    N.clear()
    assert N.count(sa) == 0
    assert len(N) == 0


def test_first_argmax_prefers_earliest_tie():
    assert first_argmax([1.0, 3.0, 3.0, 2.0]) == 1
    assert first_argmax([5.0, 5.0]) == 0
    assert first_argmax([]) is None
    assert first_argmax([-np.inf, -np.inf]) is None
    assert first_argmax([-np.inf, -7.0]) == 1
