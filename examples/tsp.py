"""
Travelling salesman example.
Tours over a distance matrix with 2-opt, swap, removal and insertion operators.
"""

from typing import Iterator, List, Optional, Sequence

import numpy as np

from heuristics import Destroyer, Evaluable, Operator, Repairer


class Tour(Evaluable):
    """
    Closed tour through a subset of cities.

    ``removed`` holds cities taken out by a destroyer and not yet reinserted;
    it is empty for complete tours.
    """

    def __init__(self, order: Sequence[int], distances: np.ndarray,
                 removed: Optional[Sequence[int]] = None):
        """
        Initialize tour.

        Args:
            order: Visiting order of city indices
            distances: Symmetric distance matrix
            removed: Cities waiting to be reinserted
        """
        self.order = list(order)
        self.distances = distances
        self.removed = list(removed or [])
        self._length: Optional[float] = None

    def evaluate(self) -> float:
        """Total length of the closed tour."""
        if self._length is None:
            if len(self.order) < 2:
                self._length = 0.0
            else:
                order = np.asarray(self.order)
                self._length = float(self.distances[order, np.roll(order, -1)].sum())
        return self._length

    def is_complete(self) -> bool:
        return not self.removed

    def __len__(self) -> int:
        return len(self.order)

    def __repr__(self):
        return f"Tour(length={self.evaluate():.2f}, order={self.order})"


def distance_matrix(coordinates: np.ndarray) -> np.ndarray:
    """Euclidean distance matrix of 2D coordinates."""
    diff = coordinates[:, np.newaxis, :] - coordinates[np.newaxis, :, :]
    return np.sqrt((diff ** 2).sum(axis=-1))


def random_cities(n_cities: int, rng, size: float = 100.0) -> np.ndarray:
    """
    Generate uniformly distributed city coordinates.

    Args:
        n_cities: Number of cities
        rng: Randomness source
        size: Side length of the square area

    Returns:
        Array of shape (n_cities, 2)
    """
    return np.array([[rng.random() * size, rng.random() * size] for _ in range(n_cities)])


def initial_tour(distances: np.ndarray) -> Tour:
    """Visit the cities in index order."""
    return Tour(range(len(distances)), distances)


def _sample_positions(rng, population: int, k: int) -> List[int]:
    """Draw ``k`` distinct positions from ``range(population)`` (partial Fisher-Yates)."""
    positions = list(range(population))
    for i in range(k):
        j = int(rng.integers(i, population))
        positions[i], positions[j] = positions[j], positions[i]
    return positions[:k]


class TwoOptOperator(Operator):
    """Reverse a segment of the tour. The first city stays in place."""

    def construct_neighborhood(self, solution: Tour) -> Iterator[Tour]:
        n = len(solution.order)
        for i in range(1, n - 1):
            for j in range(i + 1, n):
                yield self._reverse(solution, i, j)

    def shake(self, solution: Tour, rng) -> Tour:
        n = len(solution.order)
        i, j = sorted(_sample_positions(rng, n - 1, 2))
        return self._reverse(solution, i + 1, j + 1)

    @staticmethod
    def _reverse(solution: Tour, i: int, j: int) -> Tour:
        order = solution.order
        new_order = order[:i] + order[i:j + 1][::-1] + order[j + 1:]
        return Tour(new_order, solution.distances)


class SwapOperator(Operator):
    """Exchange the positions of two cities. The first city stays in place."""

    def construct_neighborhood(self, solution: Tour) -> Iterator[Tour]:
        n = len(solution.order)
        for i in range(1, n - 1):
            for j in range(i + 1, n):
                yield self._swap(solution, i, j)

    def shake(self, solution: Tour, rng) -> Tour:
        n = len(solution.order)
        i, j = _sample_positions(rng, n - 1, 2)
        return self._swap(solution, i + 1, j + 1)

    @staticmethod
    def _swap(solution: Tour, i: int, j: int) -> Tour:
        new_order = list(solution.order)
        new_order[i], new_order[j] = new_order[j], new_order[i]
        return Tour(new_order, solution.distances)


class RandomRemovalDestroyer(Destroyer):
    """Random removal: remove a random fraction of the cities."""

    def __init__(self, removal_rate: float = 0.2):
        self.removal_rate = removal_rate

    def destroy(self, solution: Tour, rng) -> Tour:
        n = len(solution.order)
        num_to_remove = min(n - 1, max(1, int(n * self.removal_rate)))
        positions = set(_sample_positions(rng, n, num_to_remove))

        kept = [city for pos, city in enumerate(solution.order) if pos not in positions]
        removed = [solution.order[pos] for pos in sorted(positions)]
        return Tour(kept, solution.distances, removed)


class WorstRemovalDestroyer(Destroyer):
    """
    Worst removal: remove the cities whose removal saves the most distance.

    Savings = d(prev, city) + d(city, next) - d(prev, next)
    """

    def __init__(self, num_remove: int = 3):
        self.num_remove = num_remove

    def destroy(self, solution: Tour, rng) -> Tour:
        order = solution.order
        d = solution.distances
        n = len(order)
        num_to_remove = min(n - 1, self.num_remove)

        savings = []
        for pos in range(n):
            prev_city, city, next_city = order[pos - 1], order[pos], order[(pos + 1) % n]
            saving = d[prev_city, city] + d[city, next_city] - d[prev_city, next_city]
            savings.append((saving, pos))

        # Highest savings first; position breaks ties for a deterministic order
        savings.sort(key=lambda item: (-item[0], item[1]))
        positions = {pos for _, pos in savings[:num_to_remove]}

        kept = [city for pos, city in enumerate(order) if pos not in positions]
        removed = [order[pos] for pos in sorted(positions)]
        return Tour(kept, solution.distances, removed)


class GreedyInsertionRepairer(Repairer):
    """Reinsert removed cities in random order, each at its cheapest position."""

    def repair(self, partial: Tour, rng) -> Tour:
        order = list(partial.order)
        d = partial.distances
        remaining = list(partial.removed)
        sequence = [remaining[i] for i in _sample_positions(rng, len(remaining), len(remaining))]

        for city in sequence:
            pos = _cheapest_position(order, city, d)[0]
            order.insert(pos, city)

        return Tour(order, d)


class RegretInsertionRepairer(Repairer):
    """
    Regret-2 insertion: insert the city with the highest regret first.

    Regret = Cost2 - Cost1 (difference between best and 2nd best insertion)
    """

    def repair(self, partial: Tour, rng) -> Tour:
        order = list(partial.order)
        d = partial.distances
        remaining = list(partial.removed)

        while remaining:
            regrets = []
            for city in remaining:
                costs = sorted(_insertion_costs(order, city, d))
                if len(costs) >= 2:
                    regret = costs[1][0] - costs[0][0]
                else:
                    regret = float('inf')
                regrets.append((regret, city, costs[0][1]))

            # Highest regret first; city id breaks ties
            regrets.sort(key=lambda item: (-item[0], item[1]))
            _, city, pos = regrets[0]
            order.insert(pos, city)
            remaining.remove(city)

        return Tour(order, d)


def _insertion_costs(order: List[int], city: int, d: np.ndarray) -> List:
    """(cost increase, position) for inserting ``city`` before each position of the closed tour."""
    if not order:
        return [(0.0, 0)]
    if len(order) == 1:
        return [(2 * d[order[0], city], 1)]

    costs = []
    n = len(order)
    for pos in range(1, n + 1):
        prev_city = order[pos - 1]
        next_city = order[pos % n]
        increase = d[prev_city, city] + d[city, next_city] - d[prev_city, next_city]
        costs.append((float(increase), pos))
    return costs


def _cheapest_position(order: List[int], city: int, d: np.ndarray):
    cost, pos = min(_insertion_costs(order, city, d))
    return pos, cost
