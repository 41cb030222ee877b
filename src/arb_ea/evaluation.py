"""Fitness extraction: turn individuals into fitness measurements.

An ordered sequence of evaluators, each mapping an individual to one objective
value, is applied to an individual to produce its fitness tuple. Output slot
order always matches evaluator order.

This module provides:
- evaluate: fitness tuple of one individual
- lift: evaluate a whole population
- lift_parallel: evaluate a whole population with parallel workers
- with_sense: attach a named objective sense to an evaluator
"""

from collections.abc import Callable, Iterable, Sequence
from typing import Any

from arb_ea.protocols import Evaluator
from arb_ea.registry import SenseRegistry


def evaluate(evaluators: Sequence[Evaluator], individual: Any) -> tuple[Any, ...]:
    """Apply every evaluator, in order, to one individual.

    Args:
        evaluators: Ordered objective evaluators.
        individual: The candidate solution. Read only.

    Returns:
        Tuple with one objective value per evaluator, in evaluator order.

    Example:
        >>> evaluate([len, sum], [3, 1, 2])
        (3, 6)
    """
    return tuple(fn(individual) for fn in evaluators)


def lift(evaluators: Sequence[Evaluator]) -> Callable[[Iterable[Any]], list[tuple[Any, ...]]]:
    """Lift a list of evaluators to work on a population.

    Args:
        evaluators: Ordered objective evaluators.

    Returns:
        A function mapping an iterable of individuals to the list of their
        fitness tuples, in population order.

    Example:
        >>> fitness_of = lift([min, max])
        >>> fitness_of([[1, 5], [2, 3]])
        [(1, 5), (2, 3)]
    """
    evaluators = tuple(evaluators)

    def lifted(population: Iterable[Any]) -> list[tuple[Any, ...]]:
        return [evaluate(evaluators, individual) for individual in population]

    return lifted


def lift_parallel(
    evaluators: Sequence[Evaluator], n_workers: int
) -> Callable[[Iterable[Any]], list[tuple[Any, ...]]]:
    """Lift a list of evaluators to work on a population with parallel execution.

    Args:
        evaluators: Ordered objective evaluators. Must be picklable for
            multiprocessing.
        n_workers: Number of parallel workers. Use -1 for all CPU cores.

    Returns:
        A function mapping an iterable of individuals to the list of their
        fitness tuples, in population order.

    Raises:
        ValueError: If n_workers is invalid (must be positive or -1).
    """
    from joblib import Parallel, delayed

    if n_workers < 1 and n_workers != -1:
        raise ValueError(f"n_workers must be positive or -1 (all cores), got {n_workers}")
    evaluators = tuple(evaluators)

    def lifted(population: Iterable[Any]) -> list[tuple[Any, ...]]:
        results: list[tuple[Any, ...]] = Parallel(n_jobs=n_workers)(  # type: ignore[assignment]
            delayed(evaluate)(evaluators, individual) for individual in population
        )
        return results

    return lifted


def with_sense(evaluator: Evaluator, sense: str) -> Callable[[Any], Any]:
    """Wrap an evaluator so its value is compared in the given sense.

    Args:
        evaluator: Objective evaluator.
        sense: Registered sense name, "min" or "max" out of the box.

    Returns:
        An evaluator returning the sense-wrapped objective value.

    Raises:
        KeyError: If sense is not registered.

    Example:
        >>> from arb_ea import compare
        >>> evaluators = [len, with_sense(sum, "max")]
        >>> compare(evaluate(evaluators, [1, 9]), evaluate(evaluators, [1, 2]))
        <Dominance.LESS: -1>
    """
    wrap = SenseRegistry.get(sense)

    def sensed(individual: Any) -> Any:
        return wrap(evaluator(individual))

    return sensed
