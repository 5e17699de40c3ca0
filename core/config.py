# core/config.py
# YAML-backed agent settings and the factory that builds a configured agent from them.
from __future__ import annotations
import logging
import yaml
from dataclasses import dataclass, field
from typing import Any, Dict, Hashable, Iterable, Literal

from agents.q_learning import ActionsFunction, QLearningAgent, QLearningConfig
from core.policies import DecayingLearningRate, FixedLearningRate, LearningRate

logger = logging.getLogger(__name__)

SCHEDULES = ("fixed", "decaying")


@dataclass
class AgentSettings:
    q_learning: QLearningConfig = field(default_factory=QLearningConfig)
    learning_rate: Literal["fixed", "decaying"] = "fixed"
    decay_c: float = 60.0      # only used by the "decaying" schedule

    def __post_init__(self):
        if self.learning_rate not in SCHEDULES:
            raise ValueError(f"Unknown learning-rate schedule {self.learning_rate!r}; expected one of {SCHEDULES}")


def settings_from_dict(cfg: Dict[str, Any]) -> AgentSettings:
    """Build settings from a parsed YAML mapping; missing keys keep their defaults."""
    cfg = cfg or {}
    qcfg = cfg.get("q_learning", {}) or {}
    defaults = QLearningConfig()
    q = QLearningConfig(
        alpha=float(qcfg.get("alpha", defaults.alpha)),
        gamma=float(qcfg.get("gamma", defaults.gamma)),
        ne=int(qcfg.get("ne", defaults.ne)),
        r_plus=float(qcfg.get("r_plus", defaults.r_plus)),
    )
    return AgentSettings(
        q_learning=q,
        learning_rate=cfg.get("learning_rate", "fixed"),
        decay_c=float(cfg.get("decay_c", 60.0)),
    )


def load_settings(config_path: str) -> AgentSettings:
    with open(config_path, "r") as f:
        cfg = yaml.safe_load(f)
    return settings_from_dict(cfg)


def make_learning_rate(settings: AgentSettings) -> LearningRate:
    if settings.learning_rate == "fixed":
        return FixedLearningRate(settings.q_learning.alpha)
    elif settings.learning_rate == "decaying":
        return DecayingLearningRate(settings.decay_c)
    else:
        raise ValueError(f"Unknown learning-rate schedule {settings.learning_rate}")


def make_agent(settings: AgentSettings, actions_fn: ActionsFunction,
               all_actions: Iterable[Hashable], none_action: Hashable) -> QLearningAgent:
    agent = QLearningAgent(actions_fn, all_actions, none_action,
                           cfg=settings.q_learning,
                           learning_rate=make_learning_rate(settings))
    logger.info("Built Q-learning agent: %s, learning rate %s, %d actions",
                settings.q_learning, settings.learning_rate, len(agent.all_actions))
    return agent
