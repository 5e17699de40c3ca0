# agents/base.py
# Percept/memory records and the interface shared by percept-driven learning agents.
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any, Dict, Hashable, NamedTuple


class Percept(NamedTuple):
    state: Hashable
    reward: float


class EpisodeMemory(NamedTuple):
    """Previous state, action and reward; the agent holds all three or None."""
    state: Hashable
    action: Hashable
    reward: float


class ReinforcementAgent(ABC):
    """
    An agent that is fed one percept per time step and answers with an action.

    Implementations keep whatever they learn between calls; `reset` returns
    them to the state they were in before seeing any percept.
    """

    @abstractmethod
    def step(self, percept) -> Any:
        """
        Consume a percept and return the next action.

        :param percept: (state, reward) pair, usually a Percept
        :return: The action to take
        """

    @abstractmethod
    def reset(self) -> None:
        """Forget everything learned so far."""

    @abstractmethod
    def utility(self) -> Dict[Any, float]:
        """
        Currently estimated utility of each state seen so far.

        :return: Mapping state -> U(s); states never seen are absent
        """
