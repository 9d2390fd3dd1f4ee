"""
Abstract base classes for improving heuristics.
Defines the shared propose/accept/terminate loop and the builder base.
"""

import logging
import time
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

import numpy as np

from heuristics.config import RUN_CONFIG
from heuristics.core.exceptions import MissingComponentError
from heuristics.core.validators import ConfigValidator
from heuristics.models.solution import Outcome, ProposalEvaluation
from heuristics.algorithms.selectors import OperatorSelector
from heuristics.algorithms.termination import TerminationCriteria, TerminatorBuilder

logger = logging.getLogger(__name__)


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """
    Create the default randomness source.

    Args:
        seed: Seed for reproducible runs (None for fresh entropy)

    Returns:
        numpy Generator exposing ``random()`` and ``integers(low, high)``
    """
    return np.random.default_rng(seed)


class ImprovingHeuristic(ABC):
    """
    Base class for heuristics that iteratively improve a solution.

    Each round proposes a candidate from the incumbent, updates the best
    solution on strict improvement, lets the algorithm decide acceptance and
    finally asks the termination criteria whether to stop. Concrete
    algorithms only implement ``propose_candidate`` and ``accept_candidate``.
    """

    algorithm_name = 'ImprovingHeuristic'

    def __init__(self, terminator: TerminationCriteria, rng, config: Optional[Dict] = None):
        """
        Initialize heuristic.

        Args:
            terminator: Termination criteria checked after every round
            rng: Randomness source owned by this instance for the run
            config: Run configuration (see RUN_CONFIG)
        """
        self.terminator = terminator
        self.rng = rng
        self.config = RUN_CONFIG.copy()
        if config:
            self.config.update(config)
        ConfigValidator.validate_run_config(self.config)

        self.history: List[Dict] = []
        self.execution_time = 0.0
        self._last_choice = None
        self.stats = self._empty_statistics()

    @abstractmethod
    def propose_candidate(self, incumbent: Any) -> Any:
        """
        Generate a candidate solution from the incumbent.

        Args:
            incumbent: Current working solution

        Returns:
            Newly constructed candidate
        """
        pass

    @abstractmethod
    def accept_candidate(self, candidate: Any, incumbent: Any) -> bool:
        """
        Decide whether the candidate replaces the incumbent.

        Args:
            candidate: Proposed solution
            incumbent: Current working solution

        Returns:
            True if the candidate becomes the new incumbent
        """
        pass

    def should_terminate(self, incumbent: Any) -> bool:
        """Test whether the termination criteria are fulfilled."""
        return self.terminator.terminate(incumbent)

    def selectors(self) -> List[OperatorSelector]:
        """Selectors owned by this algorithm, in a fixed order."""
        return []

    def feedback(self, evaluation: ProposalEvaluation) -> None:
        """Forward the round's outcome to every owned selector."""
        for selector in self.selectors():
            selector.feedback(evaluation)

    def reset(self) -> None:
        """Restore selectors and termination criteria so the instance can run again."""
        for selector in self.selectors():
            selector.reset()
        self.terminator.reset()

    def optimize(self, solution: Any) -> Any:
        """
        Run the improvement loop until termination.

        Args:
            solution: Initial solution

        Returns:
            Best solution observed during the run
        """
        start_time = time.perf_counter()
        self._start_run(solution)

        best = solution
        best_objective = solution.evaluate()
        incumbent = solution
        incumbent_objective = best_objective

        logger.info(f"{self.algorithm_name}: starting from objective {best_objective:.6g}")

        iteration = 0
        while True:
            iteration += 1

            candidate = self.propose_candidate(incumbent)
            candidate_objective = candidate.evaluate()

            improved = candidate_objective < best_objective
            if improved:
                best = candidate
                best_objective = candidate_objective
                self.stats['improvements'] += 1
                logger.debug(f"{self.algorithm_name}: iteration {iteration} improved best to {best_objective:.6g}")

            if self.accept_candidate(candidate, incumbent):
                incumbent = candidate
                incumbent_objective = candidate_objective
                self.stats['accepted'] += 1
                evaluation = ProposalEvaluation.ACCEPTED
            else:
                self.stats['rejected'] += 1
                evaluation = ProposalEvaluation.REJECTED

            if improved:
                evaluation = ProposalEvaluation.IMPROVED_BEST
            self.feedback(evaluation)

            if self.config['record_history']:
                self.history.append({
                    'iteration': iteration,
                    'choice': self._last_choice,
                    'candidate_objective': candidate_objective,
                    'incumbent_objective': incumbent_objective,
                    'best_objective': best_objective,
                    'evaluation': evaluation.value,
                })

            if iteration % self.config['log_every'] == 0:
                logger.debug(f"{self.algorithm_name}: iteration {iteration}, "
                             f"incumbent {incumbent_objective:.6g}, best {best_objective:.6g}")

            if self.should_terminate(incumbent):
                break

        self.execution_time = time.perf_counter() - start_time
        self.stats['iterations'] = iteration
        self.stats['best_objective'] = best_objective

        logger.info(f"{self.algorithm_name}: finished after {iteration} iterations, "
                    f"best objective {best_objective:.6g} ({self.execution_time:.3f}s)")
        return best

    def optimize_timed(self, solution: Any) -> Outcome:
        """
        Run ``optimize`` and measure its wall-clock duration.

        Args:
            solution: Initial solution

        Returns:
            Outcome holding the best solution and the duration in seconds
        """
        start_time = time.perf_counter()
        best = self.optimize(solution)
        return Outcome(solution=best, duration=time.perf_counter() - start_time)

    def get_statistics(self) -> Dict[str, Any]:
        """Get statistics of the last run."""
        return {
            'algorithm': self.algorithm_name,
            'iterations': self.stats['iterations'],
            'improvements': self.stats['improvements'],
            'accepted': self.stats['accepted'],
            'rejected': self.stats['rejected'],
            'initial_objective': self.stats['initial_objective'],
            'best_objective': self.stats['best_objective'],
            'execution_time': self.execution_time,
        }

    def get_convergence_data(self) -> Dict[str, List]:
        """Get convergence data for visualization."""
        return {
            'iterations': [record['iteration'] for record in self.history],
            'best_objective': [record['best_objective'] for record in self.history],
            'incumbent_objective': [record['incumbent_objective'] for record in self.history],
            'candidate_objective': [record['candidate_objective'] for record in self.history],
            'choices': [record['choice'] for record in self.history],
        }

    def _start_run(self, solution: Any) -> None:
        self.history = []
        self.execution_time = 0.0
        self._last_choice = None
        self.stats = self._empty_statistics()
        self.stats['initial_objective'] = solution.evaluate()

    @staticmethod
    def _empty_statistics() -> Dict[str, Any]:
        return {
            'iterations': 0,
            'improvements': 0,
            'accepted': 0,
            'rejected': 0,
            'initial_objective': None,
            'best_objective': None,
        }


class HeuristicBuilder(ABC):
    """
    Base builder for improving heuristics.

    Collects strategy objects and refuses to build while a mandatory one is
    missing, so configuration errors surface before any optimization starts.
    """

    algorithm_name = 'ImprovingHeuristic'

    def __init__(self):
        self._terminator: Optional[TerminationCriteria] = None
        self._rng = None
        self._config: Optional[Dict] = None

    def terminator(self, terminator) -> 'HeuristicBuilder':
        """Set termination criteria (a criterion or a TerminatorBuilder)."""
        if isinstance(terminator, TerminatorBuilder):
            terminator = terminator.build()
        self._terminator = terminator
        return self

    def rng(self, rng) -> 'HeuristicBuilder':
        """Set the source of randomness."""
        self._rng = rng
        return self

    def seed(self, seed: Optional[int]) -> 'HeuristicBuilder':
        """Use a fresh numpy Generator seeded with ``seed``."""
        self._rng = make_rng(seed)
        return self

    def config(self, config: Dict) -> 'HeuristicBuilder':
        """Set run configuration overrides (see RUN_CONFIG)."""
        self._config = config
        return self

    def _require(self, value: Any, component: str) -> Any:
        if value is None:
            raise MissingComponentError(component=component, algorithm=self.algorithm_name)
        return value

    def _require_operators(self, selector: OperatorSelector, component: str = 'operators') -> None:
        if len(selector) == 0:
            raise MissingComponentError(component=component, algorithm=self.algorithm_name)

    @abstractmethod
    def build(self) -> ImprovingHeuristic:
        """Construct the specified heuristic."""
        pass
