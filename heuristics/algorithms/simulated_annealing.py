"""
Simulated Annealing.
Shake-based proposals with Metropolis acceptance and an optional cooling schedule.
"""

import logging
from typing import Any, Dict, List, Optional

import numpy as np

from heuristics.config import SA_CONFIG
from heuristics.algorithms.base import HeuristicBuilder, ImprovingHeuristic
from heuristics.algorithms.operators import Operator
from heuristics.algorithms.selectors import OperatorSelector
from heuristics.algorithms.termination import TerminationCriteria
from heuristics.core.exceptions import MissingComponentError
from heuristics.core.validators import ConfigValidator

logger = logging.getLogger(__name__)


class CoolingSchedule:
    """
    Multiplicative cooling: ``T <- T * (1 - factor)`` on every ``cool()``.

    A factor of 0 keeps the temperature constant.
    """

    def __init__(self, initial_temperature: float, factor: float = 0.0):
        """
        Initialize cooling schedule.

        Args:
            initial_temperature: Starting temperature (> 0)
            factor: Relative decrease per proposal in [0, 1)
        """
        ConfigValidator.validate_sa_config({
            'temperature': initial_temperature,
            'cooling_factor': factor
        })
        self.initial_temperature = float(initial_temperature)
        self.factor = float(factor)
        self._temperature = self.initial_temperature

    def temperature(self) -> float:
        return self._temperature

    def cool(self) -> None:
        self._temperature *= (1.0 - self.factor)

    def reset(self) -> None:
        self._temperature = self.initial_temperature

    def __repr__(self):
        return f"CoolingSchedule(initial_temperature={self.initial_temperature}, factor={self.factor})"


def acceptance_probability(temperature: float, objective_incumbent: float,
                           objective_candidate: float) -> float:
    """
    Metropolis acceptance probability ``exp(-delta / T)``.

    ``delta`` is how much worse the candidate is than the incumbent.

    Args:
        temperature: Current temperature
        objective_incumbent: Objective of the incumbent
        objective_candidate: Objective of the candidate

    Returns:
        Probability in [0, 1]
    """
    delta = objective_candidate - objective_incumbent
    if delta <= 0:
        # Not worse: always accept. accept_candidate only gets here for delta == 0.
        return 1.0
    if temperature <= 0:
        return 0.0
    return float(np.exp(-delta / temperature))


class SimulatedAnnealing(ImprovingHeuristic):
    """
    Simulated Annealing.

    Proposals are random neighbors drawn with ``shake``. Improving candidates
    are always accepted; worse ones with probability ``exp(-delta / T)``.
    The temperature used for a decision is read before the schedule cools.
    """

    algorithm_name = 'SA'

    def __init__(self, selector: OperatorSelector, terminator: TerminationCriteria, rng,
                 schedule: CoolingSchedule, config: Optional[Dict] = None):
        """
        Initialize Simulated Annealing.

        Args:
            selector: Operator selector owning shake-capable operators
            terminator: Termination criteria
            rng: Randomness source for selection, shakes and acceptance draws
            schedule: Temperature source
            config: Run configuration overrides
        """
        super().__init__(terminator, rng, config)
        self.selector = selector
        self.schedule = schedule

    @classmethod
    def builder(cls) -> 'SABuilder':
        return SABuilder()

    @property
    def temperature(self) -> float:
        return self.schedule.temperature()

    def selectors(self) -> List[OperatorSelector]:
        return [self.selector]

    def reset(self) -> None:
        super().reset()
        self.schedule.reset()

    def propose_candidate(self, incumbent: Any) -> Any:
        """Select an operator and draw a random neighbor."""
        operator = self.selector.select(incumbent, self.rng)
        self._last_choice = self.selector.last_index
        return operator.shake(incumbent, self.rng)

    def accept_candidate(self, candidate: Any, incumbent: Any) -> bool:
        """
        Accept improvements, otherwise accept with the Metropolis probability.

        One uniform draw is consumed on every call so the random stream does
        not depend on the outcome.
        """
        r = self.rng.random()
        objective_candidate = candidate.evaluate()
        objective_incumbent = incumbent.evaluate()

        if objective_candidate < objective_incumbent:
            accepted = True
        else:
            accepted = r <= acceptance_probability(
                self.schedule.temperature(), objective_incumbent, objective_candidate
            )

        self.schedule.cool()
        return accepted


class SABuilder(HeuristicBuilder):
    """Builder design pattern for SimulatedAnnealing."""

    algorithm_name = 'SA'

    def __init__(self):
        super().__init__()
        self._selector: Optional[OperatorSelector] = None
        self._operators: List[Operator] = []
        self._schedule: Optional[CoolingSchedule] = None

    def selector(self, selector: OperatorSelector) -> 'SABuilder':
        self._selector = selector
        return self

    def operator(self, operator: Operator) -> 'SABuilder':
        """Add an operator; it joins the selector's pool at build time."""
        self._operators.append(operator)
        return self

    def temperature(self, temperature: float) -> 'SABuilder':
        """Use a constant temperature."""
        self._schedule = CoolingSchedule(temperature, 0.0)
        return self

    def cooling_schedule(self, schedule: CoolingSchedule) -> 'SABuilder':
        """Use a cooling schedule."""
        self._schedule = schedule
        return self

    @classmethod
    def from_config(cls, config: Optional[Dict] = None) -> 'SABuilder':
        """Create a builder whose schedule comes from an SA_CONFIG-shaped dictionary."""
        config = config or SA_CONFIG.copy()
        builder = cls()
        builder.cooling_schedule(CoolingSchedule(
            config.get('temperature', SA_CONFIG['temperature']),
            config.get('cooling_factor', SA_CONFIG['cooling_factor'])
        ))
        return builder

    def build(self) -> SimulatedAnnealing:
        """
        Construct the specified heuristic.

        Raises:
            MissingComponentError: If any mandatory component is missing
        """
        selector = self._require(self._selector, 'operator selection strategy')
        for operator in self._operators:
            selector.add_operator(operator)
        self._operators = []
        self._require_operators(selector)

        terminator = self._require(self._terminator, 'termination criteria')
        rng = self._require(self._rng, 'RNG source')
        if self._schedule is None:
            raise MissingComponentError(component='initial temperature', algorithm=self.algorithm_name)

        return SimulatedAnnealing(selector, terminator, rng, self._schedule, self._config)
