"""
Solution-facing types shared by all heuristics.
Defines the Evaluable capability, the per-round ProposalEvaluation and the timed Outcome.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict


class Evaluable(ABC):
    """Capability every solution type must provide: a scalar fitness, lower is better."""

    @abstractmethod
    def evaluate(self) -> float:
        """
        Score the solution.

        Returns:
            Objective value (lower is better)
        """
        pass


class ProposalEvaluation(Enum):
    """Classification of one round of the improvement loop."""
    IMPROVED_BEST = 'improved_best'
    ACCEPTED = 'accepted'
    REJECTED = 'rejected'


@dataclass(frozen=True)
class Outcome:
    """Best solution of a run together with its wall-clock duration in seconds."""
    solution: Any
    duration: float

    def to_dict(self) -> Dict:
        """Convert outcome to dictionary."""
        return {
            'objective': float(self.solution.evaluate()),
            'duration': float(self.duration)
        }
