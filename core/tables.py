# core/tables.py
# Q-table and visit-count tables keyed by (state, action) pairs, plus argmax helpers.
from __future__ import annotations
import numpy as np
from collections import Counter
from typing import Any, Dict, Hashable, Iterable, Iterator, NamedTuple, Optional, Sequence, Tuple


class StateAction(NamedTuple):
    state: Hashable
    action: Hashable


def first_argmax(x: Sequence[float]) -> Optional[int]:
    """Index of the first maximum (deterministic tie-breaking).

    Returns None for an empty sequence, or when every entry is -inf.
    """
    if len(x) == 0:
        return None
    x = np.asarray(x, dtype=float)
    i = int(np.argmax(x))  # argmax returns the first occurrence among ties
    if x[i] == -np.inf:
        return None
    return i


class QTable:
    """Action values Q(s,a).

    A pair that was never written is *absent*: `get` returns None for it, while
    `value` reads it as 0.0. The two views must stay distinct because the
    exploration function treats an untried pair differently from one whose
    learned value happens to be 0.0.
    """

    def __init__(self):
        self._q: Dict[StateAction, float] = {}

    def get(self, sa: StateAction) -> Optional[float]:
        return self._q.get(sa)

    def value(self, sa: StateAction) -> float:
        q = self._q.get(sa)
        return 0.0 if q is None else q

    def set(self, sa: StateAction, q: float) -> None:
        self._q[sa] = float(q)

    def best_value(self, state: Hashable, actions: Iterable[Hashable]) -> float:
        """max_a Q[state, a] over the entries present; 0.0 if none are."""
        known = [q for q in (self._q.get(StateAction(state, a)) for a in actions) if q is not None]
        if not known:
            return 0.0
        return float(np.max(known))

    def utility(self) -> Dict[Any, float]:
        """U(s) = max_a Q(s,a) for every state that has at least one entry."""
        U: Dict[Any, float] = {}
        for (s, _), q in self._q.items():
            u = U.get(s)
            if u is None or u < q:
                U[s] = q
        return U

    def items(self) -> Iterator[Tuple[StateAction, float]]:
        return iter(self._q.items())

    def clear(self) -> None:
        self._q.clear()

    def __contains__(self, sa) -> bool:
        return sa in self._q

    def __len__(self) -> int:
        return len(self._q)


class VisitCounter:
    """N_sa: how many times each (state, action) pair has been updated."""

    def __init__(self):
        self._n: Counter = Counter()

    def increment(self, sa: StateAction) -> int:
        self._n[sa] += 1
        return self._n[sa]

    def count(self, sa: StateAction) -> int:
        return self._n[sa]

    def items(self) -> Iterator[Tuple[StateAction, int]]:
        return iter(self._n.items())

    def clear(self) -> None:
        self._n.clear()

    def __len__(self) -> int:
        return len(self._n)
