"""
Shared test doubles.
"""

import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(os.path.abspath(__file__)), '..'))

from heuristics import ProposalEvaluation, SequentialSelector


class SequenceRandom:
    """Randomness source replaying scripted values; fails when a script runs out."""

    def __init__(self, randoms=None, integers=None):
        self.randoms = list(randoms or [])
        self.ints = list(integers or [])
        self.random_calls = 0
        self.integer_calls = 0

    def random(self) -> float:
        if not self.randoms:
            raise AssertionError("SequenceRandom: no scripted random() value left")
        self.random_calls += 1
        return self.randoms.pop(0)

    def integers(self, low, high) -> int:
        if not self.ints:
            raise AssertionError("SequenceRandom: no scripted integers() value left")
        self.integer_calls += 1
        value = self.ints.pop(0)
        if not low <= value < high:
            raise AssertionError(f"SequenceRandom: {value} outside [{low}, {high})")
        return value


class RecordingSelector(SequentialSelector):
    """Sequential selector that remembers the feedback it received."""

    def __init__(self, operators=None):
        super().__init__(operators)
        self.received = []

    def feedback(self, evaluation: ProposalEvaluation) -> None:
        self.received.append(evaluation)


class Value:
    """Minimal evaluable solution."""

    def __init__(self, objective):
        self.objective = objective

    def evaluate(self):
        return self.objective
