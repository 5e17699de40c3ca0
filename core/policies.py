# core/policies.py
# Pluggable learning-rate schedules alpha(n) and exploration functions f(u, n).
# Any callable with the same signature can be passed to an agent in place of these.
from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Optional

LearningRate = Callable[[int], float]                       # n -> step size in (0, 1]
ExplorationFunction = Callable[[Optional[float], int], float]  # (u or None, n) -> score


@dataclass(frozen=True)
class FixedLearningRate:
    alpha: float = 0.5

    def __post_init__(self):
        if not 0.0 < self.alpha <= 1.0:
            raise ValueError(f"alpha must be in (0, 1], got {self.alpha}")

    def __call__(self, n: int) -> float:
        return self.alpha


@dataclass(frozen=True)
class DecayingLearningRate:
    """alpha(n) = c / (c - 1 + n).

    Equals 1 on the first visit and decays like 1/n afterwards, which satisfies
    the usual stochastic-approximation conditions (sum alpha = inf, sum alpha^2 < inf).
    c = 60 gives the 60/(59+n) schedule from AIMA 3e, p. 836.
    """
    c: float = 60.0

    def __post_init__(self):
        if self.c < 1.0:
            raise ValueError(f"c must be >= 1, got {self.c}")

    def __call__(self, n: int) -> float:
        return self.c / (self.c - 1.0 + n)


@dataclass(frozen=True)
class OptimisticExploration:
    """f(u, n) = R+ if u is unknown or n < Ne, else u.

    Untried and under-tried actions look as good as the best possible reward
    until they have been taken Ne times.
    """
    ne: int = 1
    r_plus: float = 1.0

    def __post_init__(self):
        if self.ne < 0:
            raise ValueError(f"ne must be non-negative, got {self.ne}")

    def __call__(self, u: Optional[float], n: int) -> float:
        if u is None or n < self.ne:
            return self.r_plus
        return u
