"""Result type for fast non-dominated sorting.

NonDominatedSortResult holds the rank of every individual together with the
ordered Pareto fronts. It is immutable (frozen dataclass); all numpy arrays
are copied on construction.
"""

from collections.abc import Iterator
from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class NonDominatedSortResult:
    """Ranks and fronts produced by a non-dominated sort.

    The result unpacks like a pair, so ``ranks, fronts = result`` works.

    Attributes:
        ranks: Front index for each individual, shape (n,). Rank 0 is the
            first (non-dominated) front.
        fronts: Index arrays, one per front, in increasing rank order. Within
            a front, indices appear in discovery order.

    Example:
        >>> result = NonDominatedSortResult(
        ...     ranks=np.array([0, 1, 0]),
        ...     fronts=[np.array([0, 2]), np.array([1])],
        ... )
        >>> result.pareto_front
        array([0, 2])
        >>> result.n_fronts
        2
    """

    ranks: np.ndarray
    fronts: list[np.ndarray]

    def __post_init__(self) -> None:
        """Validate shapes and copy arrays for immutability.

        Raises:
            TypeError: If ranks or any front is not a numpy array.
            ValueError: If ranks is not a 1D integer array, or the fronts do
                not partition the individuals consistently with ranks.
        """
        if not isinstance(self.ranks, np.ndarray):
            raise TypeError(f"ranks must be a numpy array, got {type(self.ranks).__name__}")
        if self.ranks.ndim != 1:
            raise ValueError(f"ranks must be 1D, got shape {self.ranks.shape}")
        if not np.issubdtype(self.ranks.dtype, np.integer):
            raise ValueError(f"ranks must have integer dtype, got {self.ranks.dtype}")

        n = self.ranks.shape[0]
        for rank, front in enumerate(self.fronts):
            if not isinstance(front, np.ndarray):
                raise TypeError(f"front {rank} must be a numpy array, got {type(front).__name__}")
            if front.ndim != 1 or front.size == 0:
                raise ValueError(f"front {rank} must be a non-empty 1D array, got shape {front.shape}")
            if not np.issubdtype(front.dtype, np.integer):
                raise ValueError(f"front {rank} must have integer dtype, got {front.dtype}")
            if np.any((front < 0) | (front >= n)):
                raise ValueError(f"front {rank} has indices out of bounds for {n} individuals")
            if np.any(self.ranks[front] != rank):
                raise ValueError(f"front {rank} contains individuals with a different rank")

        members = np.concatenate(self.fronts) if self.fronts else np.array([], dtype=np.intp)
        if members.size != n or np.unique(members).size != n:
            raise ValueError(f"fronts must hold each of the {n} individuals exactly once")

        object.__setattr__(self, "ranks", self.ranks.copy())
        object.__setattr__(self, "fronts", [front.copy() for front in self.fronts])

    def __iter__(self) -> Iterator[np.ndarray | list[np.ndarray]]:
        yield self.ranks
        yield self.fronts

    @property
    def n_fronts(self) -> int:
        """Return the number of fronts."""
        return len(self.fronts)

    @property
    def pareto_front(self) -> np.ndarray:
        """Return the indices of the first front (empty for an empty population)."""
        if not self.fronts:
            return np.array([], dtype=np.intp)
        return self.fronts[0].copy()
