"""Fast non-dominated sorting.

Implements Deb's fast non-dominated sort on top of ``compare``:

1. Pairwise phase: compare every pair once and build the domination graph
   (who dominates whom, and how many individuals dominate each one).
2. Level peeling: the individuals nobody dominates form front 0; removing a
   front releases the individuals it dominated, and those whose dominator
   count drops to zero form the next front.

Dominance follows the minimization convention: ``compare(p, q)`` being LESS
means p dominates q. Wrap measurements in ``Reverse`` to maximize.
"""

import logging
from collections.abc import Iterator, Sequence
from typing import Any

import numpy as np

from arb_ea.dominance import compare, dominance_matrix
from arb_ea.ordering import Dominance
from arb_ea.results import NonDominatedSortResult

logger = logging.getLogger(__name__)


def _is_numeric_matrix(population: Any) -> bool:
    return isinstance(population, np.ndarray) and population.ndim == 2 and population.dtype.kind in "biuf"


def _compare_rows(population: Sequence[Any], rows: Sequence[int]) -> list[list[Dominance]]:
    """Compare each row p against every q > p."""
    n = len(population)
    return [[compare(population[p], population[q]) for q in range(p + 1, n)] for p in rows]


def _pairwise_outcomes(population: Sequence[Any], n_workers: int) -> Iterator[list[Dominance]]:
    """Yield, for each p in ascending order, the outcomes against q = p+1 .. n-1."""
    n = len(population)
    if n_workers == 1:
        for p in range(n):
            yield _compare_rows(population, [p])[0]
        return

    from joblib import Parallel, delayed, effective_n_jobs

    # Row p costs n - p - 1 comparisons; striding the rows balances the chunks.
    n_chunks = max(1, min(n, effective_n_jobs(n_workers)))
    chunks = [list(range(k, n, n_chunks)) for k in range(n_chunks)]
    results: list[list[list[Dominance]]] = Parallel(n_jobs=n_workers)(  # type: ignore[assignment]
        delayed(_compare_rows)(population, rows) for rows in chunks
    )

    by_row: dict[int, list[Dominance]] = {}
    for rows, outcomes in zip(chunks, results, strict=True):
        by_row.update(zip(rows, outcomes, strict=True))
    for p in range(n):
        yield by_row[p]


def _domination_graph(population: Sequence[Any], n_workers: int) -> tuple[list[list[int]], list[int]]:
    """Build the domination graph.

    Returns:
        Tuple of (dominated, counts) where dominated[p] lists, in ascending
        order, the individuals p dominates and counts[q] is the number of
        individuals dominating q.
    """
    n = len(population)

    if _is_numeric_matrix(population):
        is_dominating = dominance_matrix(population) == Dominance.LESS.value
        dominated = [np.flatnonzero(row).tolist() for row in is_dominating]
        counts = is_dominating.sum(axis=0).tolist()
        return dominated, counts

    dominated = [[] for _ in range(n)]
    counts = [0] * n
    for p, outcomes in enumerate(_pairwise_outcomes(population, n_workers)):
        for q, outcome in enumerate(outcomes, start=p + 1):
            if outcome is Dominance.LESS:
                dominated[p].append(q)
                counts[q] += 1
            elif outcome is Dominance.GREATER:
                dominated[q].append(p)
                counts[p] += 1
    return dominated, counts


def fast_non_dominated_sort(population: Sequence[Any], n_workers: int = 1) -> NonDominatedSortResult:
    """Assign each individual to a Pareto front using Deb's fast algorithm.

    Time complexity: O(N^2) dominance comparisons plus O(N + E) peeling work,
    where E is the number of direct domination edges.

    Args:
        population: Fitness measurements, one per individual, pairwise
            comparable with ``compare``. A numeric 2D numpy array of shape
            (n, n_obj) is compared with the vectorized ``dominance_matrix``.
        n_workers: Number of parallel workers for the pairwise phase. Use -1
            for all CPU cores. The result does not depend on this value.

    Returns:
        NonDominatedSortResult with ``ranks`` (shape (n,)) and ``fronts``
        (index arrays in increasing rank order). Unpacks as ``ranks, fronts``.

    Raises:
        ValueError: If n_workers is invalid (must be positive or -1).

    Examples:
        >>> ranks, fronts = fast_non_dominated_sort([(1, 2), (2, 1), (3, 3)])
        >>> ranks
        array([0, 0, 1])
        >>> [front.tolist() for front in fronts]
        [[0, 1], [2]]
    """
    if n_workers < 1 and n_workers != -1:
        raise ValueError(f"n_workers must be positive or -1 (all cores), got {n_workers}")

    n = len(population)
    logger.debug("Sorting %d individuals (%d comparisons)", n, n * (n - 1) // 2)

    dominated, counts = _domination_graph(population, n_workers)

    ranks = np.full(n, -1, dtype=np.int64)
    fronts: list[np.ndarray] = []
    front = [p for p in range(n) if counts[p] == 0]
    for p in front:
        ranks[p] = 0

    remaining = n
    rank = 0
    while front:
        fronts.append(np.array(front, dtype=np.intp))
        remaining -= len(front)

        next_front: list[int] = []
        for p in front:
            for q in dominated[p]:
                counts[q] -= 1
                if counts[q] == 0:
                    ranks[q] = rank + 1
                    next_front.append(q)

        front = next_front
        rank += 1

    if remaining:
        # Only reachable with a non-transitive custom dominance relation.
        leftover = np.flatnonzero(ranks < 0)
        logger.warning("%d individuals lie on a domination cycle; assigning them rank %d", remaining, rank)
        ranks[leftover] = rank
        fronts.append(leftover.astype(np.intp))

    logger.debug("Found %d fronts", len(fronts))
    return NonDominatedSortResult(ranks=ranks, fronts=fronts)
