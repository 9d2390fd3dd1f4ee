"""
Improving heuristics and their strategy objects.

This package contains:
- The shared improvement loop and builder base
- Operator, destroyer and repairer roles
- Operator selectors (sequential, random, adaptive)
- Termination criteria and their composition
- VNS, Simulated Annealing and LNS
"""

from .base import ImprovingHeuristic, HeuristicBuilder, make_rng
from .operators import Operator, Destroyer, Repairer
from .selectors import OperatorSelector, SequentialSelector, RandomSelector, AdaptiveSelector
from .termination import (
    TerminationCriteria, IterationTerminator, TimeTerminator, OrTerminator, AndTerminator,
    Terminator, TerminatorBuilder,
)
from .vns import (
    VariableNeighborhoodSearch, AdaptiveVariableNeighborhoodSearch, VNSBuilder, AdaptiveVNSBuilder,
)
from .simulated_annealing import SimulatedAnnealing, SABuilder, CoolingSchedule, acceptance_probability
from .lns import LargeNeighborhoodSearch, LNSBuilder

__all__ = [
    'ImprovingHeuristic', 'HeuristicBuilder', 'make_rng',
    'Operator', 'Destroyer', 'Repairer',
    'OperatorSelector', 'SequentialSelector', 'RandomSelector', 'AdaptiveSelector',
    'TerminationCriteria', 'IterationTerminator', 'TimeTerminator', 'OrTerminator',
    'AndTerminator', 'Terminator', 'TerminatorBuilder',
    'VariableNeighborhoodSearch', 'AdaptiveVariableNeighborhoodSearch', 'VNSBuilder',
    'AdaptiveVNSBuilder',
    'SimulatedAnnealing', 'SABuilder', 'CoolingSchedule', 'acceptance_probability',
    'LargeNeighborhoodSearch', 'LNSBuilder',
]
