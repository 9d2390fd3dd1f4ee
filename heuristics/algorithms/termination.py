"""
Termination criteria for the improvement loop.
Iteration budgets, wall-clock deadlines and their AND/OR composition.
"""

import time
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, List, Optional

from heuristics.config import TERMINATION_CONFIG
from heuristics.core.exceptions import InvalidConfigurationError, MissingComponentError
from heuristics.core.validators import ConfigValidator


class TerminationCriteria(ABC):
    """Decides from the incumbent whether the search must stop."""

    @abstractmethod
    def terminate(self, solution: Any) -> bool:
        """
        Check whether to stop.

        Args:
            solution: Current incumbent

        Returns:
            True if the search must stop
        """
        pass

    def reset(self) -> None:
        """Restore the criterion to its initial state."""
        pass


class IterationTerminator(TerminationCriteria):
    """
    Terminates after ``n`` checks.

    The counter is incremented before comparing, so the n-th call is the
    first to return True. Once tripped it stays tripped.
    """

    def __init__(self, n: int):
        if isinstance(n, bool) or not isinstance(n, int) or n < 1:
            raise InvalidConfigurationError(parameter='n', value=n, expected="integer >= 1")
        self.n = n
        self.iteration = 0

    def terminate(self, solution: Any) -> bool:
        self.iteration += 1
        return self.iteration >= self.n

    def reset(self) -> None:
        self.iteration = 0

    def __repr__(self):
        return f"IterationTerminator(n={self.n}, iteration={self.iteration})"


class TimeTerminator(TerminationCriteria):
    """
    Terminates once a deadline fixed at construction has passed.

    Only checked between iterations, so an in-flight iteration always finishes.
    """

    def __init__(self, seconds: float, clock: Callable[[], float] = time.time):
        """
        Initialize time terminator.

        Args:
            seconds: Time budget measured from construction
            clock: Source of the current time in seconds
        """
        ConfigValidator.validate_termination_config({'time_limit': seconds})
        self.seconds = seconds
        self.clock = clock
        self.time_end = clock() + seconds

    def terminate(self, solution: Any) -> bool:
        return self.clock() >= self.time_end

    def reset(self) -> None:
        """Re-arm the deadline relative to now."""
        self.time_end = self.clock() + self.seconds

    def __repr__(self):
        return f"TimeTerminator(seconds={self.seconds})"


class _CompositeTerminator(TerminationCriteria):
    """Holds sub-criteria. Every child is evaluated on every call to keep counters in step."""

    def __init__(self, terminators: List[TerminationCriteria]):
        self.terminators = list(terminators)

    def _evaluate_all(self, solution: Any) -> List[bool]:
        return [terminator.terminate(solution) for terminator in self.terminators]

    def reset(self) -> None:
        for terminator in self.terminators:
            terminator.reset()

    def __repr__(self):
        return f"{self.__class__.__name__}({self.terminators!r})"


class OrTerminator(_CompositeTerminator):
    """Terminates when at least one sub-criterion does."""

    def terminate(self, solution: Any) -> bool:
        return any(self._evaluate_all(solution))


class AndTerminator(_CompositeTerminator):
    """Terminates when all sub-criteria do."""

    def terminate(self, solution: Any) -> bool:
        return all(self._evaluate_all(solution))


class TerminatorBuilder:
    """Collects termination criteria and aggregates them with OR (default) or AND."""

    def __init__(self):
        self.terminators: List[TerminationCriteria] = []
        self.aggregation = 'any'

    def criterion(self, criterion: TerminationCriteria) -> 'TerminatorBuilder':
        """Add a termination criterion, to be aggregated later."""
        self.terminators.append(criterion)
        return self

    def iterations(self, n: int) -> 'TerminatorBuilder':
        """Add a limit on the number of iterations."""
        return self.criterion(IterationTerminator(n))

    def time_max(self, seconds: float, clock: Callable[[], float] = time.time) -> 'TerminatorBuilder':
        """Add a time limit in seconds, counted from now."""
        return self.criterion(TimeTerminator(seconds, clock=clock))

    def any(self) -> 'TerminatorBuilder':
        """Stop as soon as one criterion is met."""
        self.aggregation = 'any'
        return self

    def all(self) -> 'TerminatorBuilder':
        """Stop only when every criterion is met."""
        self.aggregation = 'all'
        return self

    @classmethod
    def from_config(cls, config: Optional[Dict] = None) -> 'TerminatorBuilder':
        """
        Create a builder from a TERMINATION_CONFIG-shaped dictionary.

        Args:
            config: Termination configuration (defaults to TERMINATION_CONFIG)

        Returns:
            Builder holding the configured criteria
        """
        config = config or TERMINATION_CONFIG.copy()
        ConfigValidator.validate_termination_config(config)

        builder = cls()
        if config.get('max_iterations') is not None:
            builder.iterations(config['max_iterations'])
        if config.get('time_limit') is not None:
            builder.time_max(config['time_limit'])
        if config.get('aggregation', 'any') == 'all':
            builder.all()
        return builder

    def build(self) -> TerminationCriteria:
        """
        Build the aggregated termination criterion.

        Raises:
            MissingComponentError: If no criterion was added
        """
        if not self.terminators:
            raise MissingComponentError(component='termination criteria', algorithm='Terminator')
        if self.aggregation == 'all':
            return AndTerminator(self.terminators)
        return OrTerminator(self.terminators)


class Terminator:
    """Entry point for building termination criteria."""

    @staticmethod
    def builder() -> TerminatorBuilder:
        """Construct a builder for termination criteria."""
        return TerminatorBuilder()
