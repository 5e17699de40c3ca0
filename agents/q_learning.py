# agents/q_learning.py
# Exploratory tabular Q-learning agent (AIMA 3e Fig. 21.8) with optimistic exploration f(u, n).
# States and actions are opaque hashable values; legal actions come from an injected function.
from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Any, Callable, Collection, Dict, Hashable, Iterable, Optional

from agents.base import EpisodeMemory, ReinforcementAgent
from core.policies import ExplorationFunction, FixedLearningRate, LearningRate, OptimisticExploration
from core.tables import QTable, StateAction, VisitCounter, first_argmax

logger = logging.getLogger(__name__)

ActionsFunction = Callable[[Hashable], Collection[Hashable]]


@dataclass(frozen=True)
class QLearningConfig:
    alpha: float = 0.5    # fixed learning rate used by the default schedule
    gamma: float = 0.9    # discount, in [0, 1)
    ne: int = 1           # visits before an action's own estimate is trusted
    r_plus: float = 1.0   # optimistic reward estimate for under-explored actions

    def __post_init__(self):
        if not 0.0 < self.alpha <= 1.0:
            raise ValueError(f"alpha must be in (0, 1], got {self.alpha}")
        if not 0.0 <= self.gamma < 1.0:
            raise ValueError(f"gamma must be in [0, 1), got {self.gamma}")
        if int(self.ne) != self.ne or self.ne < 0:
            raise ValueError(f"ne must be a non-negative integer, got {self.ne}")


class QLearningAgent(ReinforcementAgent):
    """
    Active Q-learning agent that learns Q(s,a) from percepts without a transition model.

    On every step the previous (s, a) pair is moved towards r + gamma * max_a' Q[s', a'],
    then the next action is the argmax over all actions of f(Q[s', a'], N[s', a']).
    A state with no legal actions is terminal: its reward is stored as Q[s', none],
    the episode memory is dropped and the none-action is returned.
    """

    def __init__(
        self,
        actions_fn: ActionsFunction,
        all_actions: Iterable[Hashable],
        none_action: Hashable,
        cfg: Optional[QLearningConfig] = None,
        learning_rate: Optional[LearningRate] = None,
        exploration: Optional[ExplorationFunction] = None,
    ):
        """
        :param actions_fn: Returns the legal actions in a state; empty means terminal
        :param all_actions: Every action the agent may consider, in tie-breaking order
        :param none_action: NoOp action, used to hold the reward of terminal states
        :param cfg: Fixed parameters (alpha, gamma, Ne, R+)
        :param learning_rate: alpha(n); defaults to the fixed cfg.alpha
        :param exploration: f(u, n); defaults to the optimistic R+/Ne rule
        """
        self.cfg = cfg if cfg is not None else QLearningConfig()
        self.actions_fn = actions_fn
        self.all_actions = tuple(all_actions)
        self.none_action = none_action
        self.learning_rate = learning_rate if learning_rate is not None else FixedLearningRate(self.cfg.alpha)
        self.exploration = (exploration if exploration is not None
                            else OptimisticExploration(self.cfg.ne, self.cfg.r_plus))

        self.Q = QTable()
        self.Nsa = VisitCounter()
        self._memory: Optional[EpisodeMemory] = None

    # --- read access ------------------------------------------------------------

    @property
    def memory(self) -> Optional[EpisodeMemory]:
        return self._memory

    def q_value(self, state, action) -> Optional[float]:
        """Learned Q(s,a), or None if the pair has never been written."""
        return self.Q.get(StateAction(state, action))

    def visit_count(self, state, action) -> int:
        return self.Nsa.count(StateAction(state, action))

    def is_terminal(self, state) -> bool:
        return len(self.actions_fn(state)) == 0

    # --- agent protocol -----------------------------------------------------------

    def step(self, percept) -> Any:
        s_next, r_next = percept
        terminal = self.is_terminal(s_next)

        if terminal:
            self.Q.set(StateAction(s_next, self.none_action), r_next)

        if self._memory is not None:
            s, a, r = self._memory
            sa = StateAction(s, a)
            n = self.Nsa.increment(sa)
            q_sa = self.Q.value(sa)
            target = r + self.cfg.gamma * self.Q.best_value(s_next, self.all_actions)
            self.Q.set(sa, q_sa + self.learning_rate(n) * (target - q_sa))

        if terminal:
            logger.debug("Terminal state %r reached with reward %s", s_next, r_next)
            self._memory = None
            return self.none_action

        a_next = self._explore(s_next)
        self._memory = EpisodeMemory(s_next, a_next, r_next)
        return a_next

    def reset(self) -> None:
        self.Q.clear()
        self.Nsa.clear()
        self._memory = None
        logger.debug("Agent reset; Q and N_sa cleared")

    def utility(self) -> Dict[Any, float]:
        # U(s) = max_a Q(s,a), AIMA 3e eq. 21.6
        return self.Q.utility()

    # --- helpers ----------------------------------------------------------------

    def _explore(self, state) -> Optional[Hashable]:
        """argmax_a f(Q[s,a], N[s,a]); the first action in universe order wins ties."""
        scores = []
        for a in self.all_actions:
            sa = StateAction(state, a)
            scores.append(self.exploration(self.Q.get(sa), self.Nsa.count(sa)))
        i = first_argmax(scores)
        return None if i is None else self.all_actions[i]
