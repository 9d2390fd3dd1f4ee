"""
Large Neighborhood Search (LNS).

Key Concept: "Destroy and Repair"
1. DESTROY: remove part of the incumbent with a selected destroyer
2. REPAIR: rebuild a complete solution with a selected repairer
3. ACCEPT: keep the candidate only if it is better than the incumbent
"""

import logging
from typing import Any, Dict, List, Optional

from heuristics.algorithms.base import HeuristicBuilder, ImprovingHeuristic
from heuristics.algorithms.operators import Destroyer, Repairer
from heuristics.algorithms.selectors import OperatorSelector
from heuristics.algorithms.termination import TerminationCriteria
from heuristics.core.exceptions import InvalidConfigurationError

logger = logging.getLogger(__name__)


class LargeNeighborhoodSearch(ImprovingHeuristic):
    """
    Large Neighborhood Search.

    Destroyers and repairers live in two independent selectors. Each round
    picks one of each, destroys then repairs the incumbent, and accepts the
    result only on strict improvement.
    """

    algorithm_name = 'LNS'

    def __init__(self, selector_destroyer: OperatorSelector, selector_repairer: OperatorSelector,
                 terminator: TerminationCriteria, rng, config: Optional[Dict] = None):
        """
        Initialize LNS.

        Args:
            selector_destroyer: Selector owning the destroyers
            selector_repairer: Selector owning the repairers
            terminator: Termination criteria
            rng: Randomness source for selection, destroy and repair
            config: Run configuration overrides
        """
        super().__init__(terminator, rng, config)
        self.selector_destroyer = selector_destroyer
        self.selector_repairer = selector_repairer

    @classmethod
    def builder(cls) -> 'LNSBuilder':
        return LNSBuilder()

    def selectors(self) -> List[OperatorSelector]:
        return [self.selector_destroyer, self.selector_repairer]

    def propose_candidate(self, incumbent: Any) -> Any:
        """Select a destroyer and a repairer, then return the destroyed and repaired incumbent."""
        destroyer = self.selector_destroyer.select(incumbent, self.rng)
        repairer = self.selector_repairer.select(incumbent, self.rng)
        self._last_choice = (self.selector_destroyer.last_index, self.selector_repairer.last_index)

        partial = destroyer.destroy(incumbent, self.rng)
        return repairer.repair(partial, self.rng)

    def accept_candidate(self, candidate: Any, incumbent: Any) -> bool:
        """Accept a candidate iff it is an improvement."""
        return candidate.evaluate() < incumbent.evaluate()


class LNSBuilder(HeuristicBuilder):
    """Builder design pattern for LargeNeighborhoodSearch."""

    algorithm_name = 'LNS'

    def __init__(self):
        super().__init__()
        self._selector_destroyer: Optional[OperatorSelector] = None
        self._selector_repairer: Optional[OperatorSelector] = None
        self._destroyers: List[Destroyer] = []
        self._repairers: List[Repairer] = []

    def selector_destroyer(self, selector: OperatorSelector) -> 'LNSBuilder':
        self._selector_destroyer = selector
        return self

    def selector_repairer(self, selector: OperatorSelector) -> 'LNSBuilder':
        self._selector_repairer = selector
        return self

    def destroyer(self, destroyer: Destroyer) -> 'LNSBuilder':
        """Add a destroyer; it joins the destroyer selector's pool at build time."""
        self._destroyers.append(destroyer)
        return self

    def repairer(self, repairer: Repairer) -> 'LNSBuilder':
        """Add a repairer; it joins the repairer selector's pool at build time."""
        self._repairers.append(repairer)
        return self

    def build(self) -> LargeNeighborhoodSearch:
        """
        Construct the specified heuristic.

        Raises:
            MissingComponentError: If any selector, pool, terminator or rng is missing
        """
        selector_destroyer = self._require(self._selector_destroyer, 'destroyer selector')
        selector_repairer = self._require(self._selector_repairer, 'repairer selector')
        if selector_destroyer is selector_repairer:
            raise InvalidConfigurationError(
                parameter='selector_repairer',
                value='same instance as selector_destroyer',
                expected='a separate selector per role'
            )

        for destroyer in self._destroyers:
            selector_destroyer.add_operator(destroyer)
        for repairer in self._repairers:
            selector_repairer.add_operator(repairer)
        self._destroyers = []
        self._repairers = []
        self._require_operators(selector_destroyer, 'destroyers')
        self._require_operators(selector_repairer, 'repairers')

        terminator = self._require(self._terminator, 'termination criteria')
        rng = self._require(self._rng, 'RNG source')
        logger.debug(f"LNS built with {len(selector_destroyer)} destroyers and "
                     f"{len(selector_repairer)} repairers")
        return LargeNeighborhoodSearch(selector_destroyer, selector_repairer, terminator, rng,
                                       self._config)
