"""
Operator selection strategies.
Sequential, uniformly random and adaptive (roulette wheel with learned weights) selection.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

import numpy as np

from heuristics.config import ADAPTIVE_CONFIG
from heuristics.core.exceptions import OperatorSelectionError
from heuristics.core.validators import ConfigValidator
from heuristics.models.solution import ProposalEvaluation

logger = logging.getLogger(__name__)


class OperatorSelector(ABC):
    """
    Base class for operator selectors.

    A selector owns a pool of operators (or destroyers/repairers for LNS)
    and picks one per round. Randomness is passed in by the caller.
    """

    def __init__(self, operators: Optional[List[Any]] = None):
        """
        Initialize selector.

        Args:
            operators: Initial operator pool
        """
        self.operators: List[Any] = []
        self.last_index: Optional[int] = None
        for operator in operators or []:
            self.add_operator(operator)

    def add_operator(self, operator: Any) -> 'OperatorSelector':
        """Add an operator to the pool. Returns self for chaining."""
        self.operators.append(operator)
        return self

    def __len__(self) -> int:
        return len(self.operators)

    def __bool__(self) -> bool:
        # A selector with an empty pool is still a selector
        return True

    def select(self, solution: Any, rng) -> Any:
        """
        Select the next operator.

        Args:
            solution: Current incumbent
            rng: Randomness source

        Returns:
            Selected operator

        Raises:
            OperatorSelectionError: If the pool is empty or the index is invalid
        """
        if not self.operators:
            raise OperatorSelectionError(
                selector=self.__class__.__name__,
                reason="operator pool is empty",
                pool_size=0
            )

        index = self._select_index(solution, rng)
        if not 0 <= index < len(self.operators):
            raise OperatorSelectionError(
                selector=self.__class__.__name__,
                reason="selected index out of range",
                index=index,
                pool_size=len(self.operators)
            )

        self.last_index = index
        return self.operators[index]

    @abstractmethod
    def _select_index(self, solution: Any, rng) -> int:
        """Return the index of the operator to use next."""
        pass

    def feedback(self, evaluation: ProposalEvaluation) -> None:
        """Receive the outcome of the last round. Ignored by non-adaptive selectors."""
        pass

    def reset(self) -> None:
        """Forget all selection state."""
        self.last_index = None


class SequentialSelector(OperatorSelector):
    """
    Cycle through the operators in order.

    Any improvement over the best objective seen so far restarts the cycle at
    the first operator; otherwise the cursor advances by one.
    """

    def __init__(self, operators: Optional[List[Any]] = None):
        super().__init__(operators)
        self.cursor = 0
        self.best_objective = float('inf')

    def _select_index(self, solution: Any, rng) -> int:
        objective = solution.evaluate()
        if objective < self.best_objective:
            self.best_objective = objective
            self.cursor = 0
        else:
            self.cursor = (self.cursor + 1) % len(self.operators)
        return self.cursor

    def reset(self) -> None:
        super().reset()
        self.cursor = 0
        self.best_objective = float('inf')


class RandomSelector(OperatorSelector):
    """Select an operator uniformly at random."""

    def _select_index(self, solution: Any, rng) -> int:
        return int(rng.integers(0, len(self.operators)))


class AdaptiveSelector(OperatorSelector):
    """
    Roulette-wheel selection with weights learned from feedback.

    After each round the weight of the last selected operator is updated as
    ``w <- (1 - decay) * w + decay * reward`` where the reward depends on
    whether the round improved the best solution, was accepted or rejected.

    The wheel picks the first index whose cumulative weight reaches the draw,
    except that operators with weight zero are skipped. A plain cumulative
    comparison would hand a zero-weight operator at the front of the pool any
    draw of exactly 0.0; here a zero weight means the operator is never chosen
    until its weight recovers or every weight is zero, in which case all
    operators are treated as weight one.
    """

    def __init__(self, operators: Optional[List[Any]] = None,
                 decay: Optional[float] = None,
                 reward_improved_best: Optional[float] = None,
                 reward_accepted: Optional[float] = None,
                 reward_rejected: Optional[float] = None):
        """
        Initialize adaptive selector.

        Args:
            operators: Initial operator pool
            decay: Weight of the newest reward in [0, 1]
            reward_improved_best: Reward when the round improved the best solution
            reward_accepted: Reward when the candidate was accepted
            reward_rejected: Reward when the candidate was rejected
        """
        params = {
            'decay': ADAPTIVE_CONFIG['decay'] if decay is None else decay,
            'reward_improved_best': (ADAPTIVE_CONFIG['reward_improved_best']
                                     if reward_improved_best is None else reward_improved_best),
            'reward_accepted': (ADAPTIVE_CONFIG['reward_accepted']
                                if reward_accepted is None else reward_accepted),
            'reward_rejected': (ADAPTIVE_CONFIG['reward_rejected']
                                if reward_rejected is None else reward_rejected),
        }
        ConfigValidator.validate_adaptive_config(params)

        self.decay = float(params['decay'])
        self.rewards: Dict[ProposalEvaluation, float] = {
            ProposalEvaluation.IMPROVED_BEST: float(params['reward_improved_best']),
            ProposalEvaluation.ACCEPTED: float(params['reward_accepted']),
            ProposalEvaluation.REJECTED: float(params['reward_rejected']),
        }
        self.weights: List[float] = []
        super().__init__(operators)

    @classmethod
    def from_config(cls, operators: Optional[List[Any]] = None,
                    config: Optional[Dict] = None) -> 'AdaptiveSelector':
        """
        Build a selector from an ADAPTIVE_CONFIG-shaped dictionary.

        Args:
            operators: Initial operator pool
            config: Configuration dictionary (defaults to ADAPTIVE_CONFIG)

        Returns:
            Configured AdaptiveSelector
        """
        config = config or ADAPTIVE_CONFIG.copy()
        return cls(
            operators,
            decay=config.get('decay'),
            reward_improved_best=config.get('reward_improved_best'),
            reward_accepted=config.get('reward_accepted'),
            reward_rejected=config.get('reward_rejected'),
        )

    def add_operator(self, operator: Any) -> 'AdaptiveSelector':
        super().add_operator(operator)
        self.weights.append(1.0)
        return self

    def _select_index(self, solution: Any, rng) -> int:
        weights = np.asarray(self.weights, dtype=float)
        cumulative = np.cumsum(weights)
        total = cumulative[-1]

        if np.isnan(total) or total < 0:
            raise OperatorSelectionError(
                selector=self.__class__.__name__,
                reason=f"unusable weight total {total}",
                pool_size=len(self.operators)
            )
        if total == 0:
            # All operators punished to zero: fall back to equal weights
            weights = np.ones_like(weights)
            cumulative = np.cumsum(weights)
            total = cumulative[-1]

        # Zero-weight slots span an empty interval and are never chosen
        r = rng.random() * total
        for index, running_sum in enumerate(cumulative):
            if weights[index] > 0 and r <= running_sum:
                return index

        raise OperatorSelectionError(
            selector=self.__class__.__name__,
            reason=f"draw {r} exceeds cumulative weight {total}",
            pool_size=len(self.operators)
        )

    def feedback(self, evaluation: ProposalEvaluation) -> None:
        """
        Update the weight of the last selected operator.

        Args:
            evaluation: Outcome of the round that used the operator
        """
        if self.last_index is None:
            return

        index = self.last_index
        reward = self.rewards[evaluation]
        self.weights[index] = (1.0 - self.decay) * self.weights[index] + self.decay * reward
        logger.debug(f"Operator {index} feedback {evaluation.value}: weight -> {self.weights[index]:.4f}")

    def reset(self) -> None:
        super().reset()
        self.weights = [1.0] * len(self.operators)
