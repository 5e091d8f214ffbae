# -*- coding: utf-8 -*-
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence, Tuple, TYPE_CHECKING
import logging
import numpy as np

if TYPE_CHECKING:
    from ..api.configuration import RobotConfiguration

logger = logging.getLogger(__name__)


@dataclass
class JointLimits:
    lower: np.ndarray
    upper: np.ndarray

    def __post_init__(self):
        self.lower = np.asarray(self.lower, dtype=float).reshape(-1)
        self.upper = np.asarray(self.upper, dtype=float).reshape(-1)
        if self.lower.shape != self.upper.shape:
            raise ValueError(
                f"Limit size mismatch: {self.lower.shape[0]} lower vs {self.upper.shape[0]} upper"
            )
        if np.any(self.lower > self.upper):
            raise ValueError("Lower joint limit above upper joint limit")

    @classmethod
    def from_pairs(cls, pairs: Iterable[Tuple[float, float]]) -> "JointLimits":
        pairs = [tuple(p) for p in pairs]
        if any(len(p) != 2 for p in pairs):
            raise ValueError("Each joint limit must be a [lower, upper] pair")
        lower = np.array([l for l, _ in pairs], dtype=float)
        upper = np.array([u for _, u in pairs], dtype=float)
        return cls(lower, upper)

    @property
    def dof(self) -> int:
        return int(self.lower.shape[0])

    def contains(self, q: Sequence[float]) -> bool:
        q = np.asarray(q, dtype=float).reshape(-1)
        if q.shape[0] != self.dof:
            raise ValueError(f"Expected {self.dof} joint values, got {q.shape[0]}")
        return bool(np.all(q >= self.lower) and np.all(q <= self.upper))


class ConfigurationChecker:
    """Abstract checker that evaluates a configuration and writes a flag on it."""

    def check(self, config: "RobotConfiguration") -> bool:
        raise NotImplementedError


class JointLimitChecker(ConfigurationChecker):
    """Reachability check: joint positions within the mechanical limits."""

    def __init__(self, limits: JointLimits):
        self.limits = limits

    def check(self, config: "RobotConfiguration") -> bool:
        q = config.q
        if q.shape[0] != self.limits.dof:
            logger.debug("q has %d values, limits cover %d joints", q.shape[0], self.limits.dof)
            reachable = False
        else:
            reachable = self.limits.contains(q)
            if not reachable:
                logger.debug("Joint limits exceeded for q=%s", q)
        config.is_reachable = reachable
        return reachable
