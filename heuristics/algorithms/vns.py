"""
Variable Neighborhood Search.
Best-neighbor proposals with strict-improvement acceptance, plus an adaptive variant.
"""

import logging
from typing import Any, Dict, List, Optional

from heuristics.algorithms.base import HeuristicBuilder, ImprovingHeuristic
from heuristics.algorithms.operators import Operator
from heuristics.algorithms.selectors import AdaptiveSelector, OperatorSelector
from heuristics.algorithms.termination import TerminationCriteria
from heuristics.core.exceptions import InvalidConfigurationError

logger = logging.getLogger(__name__)


class VariableNeighborhoodSearch(ImprovingHeuristic):
    """
    Variable Neighborhood Search.

    Every round selects one operator and proposes the best member of its
    neighborhood; the candidate is accepted only if it improves on the
    incumbent.
    """

    algorithm_name = 'VNS'

    def __init__(self, selector: OperatorSelector, terminator: TerminationCriteria, rng,
                 config: Optional[Dict] = None):
        """
        Initialize VNS.

        Args:
            selector: Operator selector owning the neighborhood operators
            terminator: Termination criteria
            rng: Randomness source (consumed by randomized selectors)
            config: Run configuration overrides
        """
        super().__init__(terminator, rng, config)
        self.selector = selector

    @classmethod
    def builder(cls) -> 'VNSBuilder':
        """Return a builder to simplify configuration."""
        return VNSBuilder()

    def selectors(self) -> List[OperatorSelector]:
        return [self.selector]

    def propose_candidate(self, incumbent: Any) -> Any:
        """Select an operator and return the best neighbor of the incumbent."""
        operator = self.selector.select(incumbent, self.rng)
        self._last_choice = self.selector.last_index
        return operator.find_best_neighbor(incumbent)

    def accept_candidate(self, candidate: Any, incumbent: Any) -> bool:
        """Accept iff the candidate is better than the incumbent."""
        return candidate.evaluate() < incumbent.evaluate()


class AdaptiveVariableNeighborhoodSearch(VariableNeighborhoodSearch):
    """
    VNS whose operator choice is learned from round outcomes.

    Requires an AdaptiveSelector; the outcome of every round is fed back to
    it so that operators producing improvements are chosen more often.
    """

    algorithm_name = 'AdaptiveVNS'

    def __init__(self, selector: AdaptiveSelector, terminator: TerminationCriteria, rng,
                 config: Optional[Dict] = None):
        if not isinstance(selector, AdaptiveSelector):
            raise InvalidConfigurationError(
                parameter='selector',
                value=type(selector).__name__,
                expected="AdaptiveSelector"
            )
        super().__init__(selector, terminator, rng, config)

    @classmethod
    def builder(cls) -> 'AdaptiveVNSBuilder':
        """Return a builder to simplify configuration."""
        return AdaptiveVNSBuilder()

    @property
    def weights(self) -> List[float]:
        """Current operator weights of the adaptive selector."""
        return list(self.selector.weights)


class VNSBuilder(HeuristicBuilder):
    """Builder pattern to construct a Variable Neighborhood Search heuristic."""

    algorithm_name = 'VNS'

    def __init__(self):
        super().__init__()
        self._selector: Optional[OperatorSelector] = None
        self._operators: List[Operator] = []

    def selector(self, selector: OperatorSelector) -> 'VNSBuilder':
        """Set operator selector."""
        self._selector = selector
        return self

    def operator(self, operator: Operator) -> 'VNSBuilder':
        """Add an operator; it joins the selector's pool at build time."""
        self._operators.append(operator)
        return self

    def _assemble_selector(self) -> OperatorSelector:
        selector = self._require(self._selector, 'operator selector')
        for operator in self._operators:
            selector.add_operator(operator)
        self._operators = []
        self._require_operators(selector)
        return selector

    def build(self) -> VariableNeighborhoodSearch:
        """
        Construct the specified heuristic.

        Raises:
            MissingComponentError: If selector, operators, terminator or rng is missing
        """
        selector = self._assemble_selector()
        terminator = self._require(self._terminator, 'termination criteria')
        rng = self._require(self._rng, 'RNG source')
        return VariableNeighborhoodSearch(selector, terminator, rng, self._config)


class AdaptiveVNSBuilder(VNSBuilder):
    """
    Builder for the adaptive VNS variant.

    Either pass an AdaptiveSelector explicitly or let the builder create one
    from the configured decay and rewards.
    """

    algorithm_name = 'AdaptiveVNS'

    def __init__(self):
        super().__init__()
        self._selector_params: Dict[str, float] = {}

    def decay(self, decay: float) -> 'AdaptiveVNSBuilder':
        """Set the weight decay of the generated selector."""
        self._selector_params['decay'] = decay
        return self

    def rewards(self, improved_best: float = None, accepted: float = None,
                rejected: float = None) -> 'AdaptiveVNSBuilder':
        """Set the rewards of the generated selector."""
        if improved_best is not None:
            self._selector_params['reward_improved_best'] = improved_best
        if accepted is not None:
            self._selector_params['reward_accepted'] = accepted
        if rejected is not None:
            self._selector_params['reward_rejected'] = rejected
        return self

    def build(self) -> AdaptiveVariableNeighborhoodSearch:
        if self._selector is None:
            self._selector = AdaptiveSelector(**self._selector_params)
        selector = self._assemble_selector()
        terminator = self._require(self._terminator, 'termination criteria')
        rng = self._require(self._rng, 'RNG source')
        return AdaptiveVariableNeighborhoodSearch(selector, terminator, rng, self._config)
