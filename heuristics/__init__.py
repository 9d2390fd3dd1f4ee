"""
Metaheuristic optimization engine.

One shared improvement loop (propose, accept, track best, terminate) with
pluggable operators, operator selectors and termination criteria, and three
algorithms built on it:
- Variable Neighborhood Search (VNS) and its adaptive variant
- Simulated Annealing (SA)
- Large Neighborhood Search (LNS)
"""

from .models.solution import Evaluable, Outcome, ProposalEvaluation
from .algorithms import (
    ImprovingHeuristic, make_rng,
    Operator, Destroyer, Repairer,
    OperatorSelector, SequentialSelector, RandomSelector, AdaptiveSelector,
    TerminationCriteria, IterationTerminator, TimeTerminator, OrTerminator, AndTerminator,
    Terminator, TerminatorBuilder,
    VariableNeighborhoodSearch, AdaptiveVariableNeighborhoodSearch,
    SimulatedAnnealing, CoolingSchedule,
    LargeNeighborhoodSearch,
)
from .core.exceptions import (
    HeuristicsException, InvalidConfigurationError, MissingComponentError,
    ContractViolationError, EmptyNeighborhoodError, OperatorSelectionError,
)

__version__ = '0.3.0'

__all__ = [
    'Evaluable', 'Outcome', 'ProposalEvaluation',
    'ImprovingHeuristic', 'make_rng',
    'Operator', 'Destroyer', 'Repairer',
    'OperatorSelector', 'SequentialSelector', 'RandomSelector', 'AdaptiveSelector',
    'TerminationCriteria', 'IterationTerminator', 'TimeTerminator', 'OrTerminator',
    'AndTerminator', 'Terminator', 'TerminatorBuilder',
    'VariableNeighborhoodSearch', 'AdaptiveVariableNeighborhoodSearch',
    'SimulatedAnnealing', 'CoolingSchedule',
    'LargeNeighborhoodSearch',
    'HeuristicsException', 'InvalidConfigurationError', 'MissingComponentError',
    'ContractViolationError', 'EmptyNeighborhoodError', 'OperatorSelectionError',
]
