"""
Line search over a fixed sequence of numbers.
A solution is a position in the sequence; its objective is the number stored there.
"""

from dataclasses import dataclass
from typing import Iterator, List, Sequence

from heuristics import Evaluable, Operator


@dataclass(frozen=True)
class Number(Evaluable):
    """Position ``index`` in the sequence holding ``value``."""
    index: int
    value: float

    def evaluate(self) -> float:
        return self.value


def numbers_from(values: Sequence[float]) -> List[Number]:
    """Wrap every value of the sequence as a Number."""
    return [Number(index, float(value)) for index, value in enumerate(values)]


class NeighborsUpUntilN(Operator):
    """
    Jump exactly ``radius`` positions to the left or to the right.

    The neighborhood of position i is ``[i - radius, i + radius]`` restricted
    to valid positions, enumerated left first.
    """

    def __init__(self, values: Sequence[float], radius: int):
        """
        Initialize operator.

        Args:
            values: The number sequence
            radius: Jump distance
        """
        self.numbers = numbers_from(values)
        self.radius = radius

    @property
    def name(self) -> str:
        return f"NeighborsUpUntilN(radius={self.radius})"

    def construct_neighborhood(self, solution: Number) -> Iterator[Number]:
        left = solution.index - self.radius
        right = solution.index + self.radius
        if left >= 0:
            yield self.numbers[left]
        if right < len(self.numbers):
            yield self.numbers[right]


class NeighborSwap(Operator):
    """Move one step to the left or to the right, chosen at random."""

    def __init__(self, values: Sequence[float]):
        self.numbers = numbers_from(values)

    def construct_neighborhood(self, solution: Number) -> Iterator[Number]:
        for index in (solution.index - 1, solution.index + 1):
            if 0 <= index < len(self.numbers):
                yield self.numbers[index]

    def shake(self, solution: Number, rng) -> Number:
        options = list(self.construct_neighborhood(solution))
        if len(options) == 1:
            return options[0]
        return options[int(rng.integers(0, len(options)))]
