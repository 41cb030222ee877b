"""Short-circuiting folds over pairwise comparisons.

Plumbing shared by the fixed-arity and sparse dominance walks:
- partial_cmp_many: lazy per-position comparison of two sequences
- try_fold: fold with early exit through a Break sentinel
- reduce_until: try_fold seeded with the first item
"""

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from arb_ea.ordering import Dominance, partial_compare

T = TypeVar("T")
A = TypeVar("A")


@dataclass(frozen=True)
class Break(Generic[T]):
    """Returned by a fold step to stop folding; ``value`` becomes the result."""

    value: T


def partial_cmp_many(a: Iterable[Any], b: Iterable[Any]) -> Iterator[Dominance | None]:
    """Lazily compare two sequences position by position.

    Positions are compared only when the consumer asks for them, so a fold
    that breaks early never evaluates the remaining pairs. Iteration stops at
    the end of the shorter input; equal length is the caller's precondition.

    Args:
        a: Objective values of the first measurement.
        b: Objective values of the second measurement.

    Yields:
        The ``partial_compare`` result for each position.

    Examples:
        >>> list(partial_cmp_many((1, 5), (2, 5)))
        [<Dominance.LESS: -1>, <Dominance.EQUAL: 0>]
    """
    for x, y in zip(a, b):
        yield partial_compare(x, y)


def try_fold(items: Iterable[T], step: Callable[[A, T], "A | Break[A]"], initial: A) -> A:
    """Fold items into an accumulator, stopping as soon as step returns Break.

    Args:
        items: Values to fold, consumed lazily.
        step: Combines the accumulator with the next item. Returns the new
            accumulator, or ``Break(result)`` to end the fold with ``result``.
        initial: Starting accumulator, returned unchanged for empty input.

    Returns:
        The final accumulator, or the value carried by the first Break.

    Examples:
        >>> def add_until_ten(acc, x):
        ...     return Break(acc) if acc + x > 10 else acc + x
        >>> try_fold([4, 5, 6, 7], add_until_ten, 0)
        9
    """
    acc = initial
    for item in items:
        result = step(acc, item)
        if isinstance(result, Break):
            return result.value
        acc = result
    return acc


def reduce_until(items: Iterable[A], step: Callable[[A, A], "A | Break[A]"]) -> A:
    """Like try_fold, using the first item as the starting accumulator.

    Raises:
        ValueError: If items is empty.
    """
    iterator = iter(items)
    try:
        first = next(iterator)
    except StopIteration:
        raise ValueError("reduce_until() of empty iterable with no initial value") from None
    return try_fold(iterator, step, first)
