"""
Operator roles consumed by the heuristics.
Operators build neighborhoods or draw single neighbors; destroyers and repairers serve LNS.
"""

from abc import ABC, abstractmethod
from typing import Any, Iterator

from heuristics.core.exceptions import EmptyNeighborhoodError


class Operator(ABC):
    """
    Base class for neighborhood operators.

    Subclasses implement ``construct_neighborhood`` (used by VNS), ``shake``
    (used by SA), or both. Operators never modify the solution they receive;
    every neighbor is a newly constructed solution.
    """

    @property
    def name(self) -> str:
        return self.__class__.__name__

    def construct_neighborhood(self, solution: Any) -> Iterator[Any]:
        """
        Lazily enumerate the neighborhood of a solution.

        Each call must return a fresh iterator, and the enumeration order
        must be deterministic for a fixed solution and configuration.

        Args:
            solution: Solution whose neighbors are requested

        Returns:
            Iterator over neighboring solutions
        """
        raise NotImplementedError(f"{self.name} does not construct neighborhoods")

    def shake(self, solution: Any, rng) -> Any:
        """
        Draw a single random neighbor.

        Args:
            solution: Solution to perturb
            rng: Randomness source (``random()`` and ``integers(low, high)``)

        Returns:
            Randomly drawn neighbor
        """
        raise NotImplementedError(f"{self.name} does not support shaking")

    def find_best_neighbor(self, solution: Any) -> Any:
        """
        Enumerate the whole neighborhood and return its lowest-objective member.

        Ties keep the first neighbor in enumeration order.

        Args:
            solution: Solution whose neighborhood is searched

        Returns:
            Best neighbor

        Raises:
            EmptyNeighborhoodError: If the neighborhood has no elements
        """
        best = None
        best_objective = None
        for neighbor in self.construct_neighborhood(solution):
            objective = neighbor.evaluate()
            if best is None or objective < best_objective:
                best = neighbor
                best_objective = objective

        if best is None:
            raise EmptyNeighborhoodError(operator=self.name)
        return best


class Destroyer(ABC):
    """Removes part of a solution, producing a partial solution."""

    @property
    def name(self) -> str:
        return self.__class__.__name__

    @abstractmethod
    def destroy(self, solution: Any, rng) -> Any:
        """
        Destroy part of a solution.

        Args:
            solution: Complete solution
            rng: Randomness source

        Returns:
            Partial solution
        """
        pass


class Repairer(ABC):
    """Rebuilds a complete solution from a partial one."""

    @property
    def name(self) -> str:
        return self.__class__.__name__

    @abstractmethod
    def repair(self, partial: Any, rng) -> Any:
        """
        Repair a partial solution.

        Args:
            partial: Partial solution produced by a destroyer
            rng: Randomness source

        Returns:
            Complete solution
        """
        pass
