"""
Run-history metrics for improving heuristics.
Turns per-iteration records into DataFrames and summary statistics.
"""

import logging
from collections import Counter
from typing import Dict, List, Optional

import numpy as np
import pandas as pd

logger = logging.getLogger(__name__)

HISTORY_COLUMNS = [
    'iteration', 'choice', 'candidate_objective', 'incumbent_objective',
    'best_objective', 'evaluation'
]


def history_to_frame(history: List[Dict]) -> pd.DataFrame:
    """
    Convert a run history to a DataFrame.

    Args:
        history: Records produced by ``ImprovingHeuristic.optimize``

    Returns:
        DataFrame with one row per iteration, indexed by iteration
    """
    frame = pd.DataFrame(history, columns=HISTORY_COLUMNS)
    return frame.set_index('iteration')


def summarize_history(history: List[Dict], initial_objective: Optional[float] = None) -> Dict:
    """
    Calculate summary statistics of a run.

    Args:
        history: Records produced by ``ImprovingHeuristic.optimize``
        initial_objective: Objective of the starting solution, if known

    Returns:
        Dictionary with acceptance rate, improvement count, operator usage
        and objective figures
    """
    if not history:
        logger.debug("Empty run history, returning empty summary")
        return _get_empty_summary()

    evaluations = [record['evaluation'] for record in history]
    best = np.array([record['best_objective'] for record in history], dtype=float)
    candidates = np.array([record['candidate_objective'] for record in history], dtype=float)

    iterations = len(history)
    improvements = evaluations.count('improved_best')
    rejected = evaluations.count('rejected')

    final_best = float(best[-1])
    usage = Counter(str(record['choice']) for record in history)

    summary = {
        'iterations': iterations,
        'improvements': improvements,
        'accepted': iterations - rejected,
        'rejected': rejected,
        'acceptance_rate': (iterations - rejected) / iterations,
        'final_best': final_best,
        'initial_objective': initial_objective,
        'mean_candidate_objective': float(np.mean(candidates)),
        'std_candidate_objective': float(np.std(candidates)),
        'last_improvement_iteration': _last_improvement(history),
        'operator_usage': dict(usage),
    }

    if initial_objective is not None and initial_objective != 0:
        summary['relative_improvement'] = (initial_objective - final_best) / abs(initial_objective)
    else:
        summary['relative_improvement'] = None

    return summary


def _last_improvement(history: List[Dict]):
    for record in reversed(history):
        if record['evaluation'] == 'improved_best':
            return record['iteration']
    return None


def _get_empty_summary() -> Dict:
    return {
        'iterations': 0,
        'improvements': 0,
        'accepted': 0,
        'rejected': 0,
        'acceptance_rate': 0.0,
        'final_best': None,
        'initial_objective': None,
        'mean_candidate_objective': None,
        'std_candidate_objective': None,
        'last_improvement_iteration': None,
        'operator_usage': {},
        'relative_improvement': None,
    }
