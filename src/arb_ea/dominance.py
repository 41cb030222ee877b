"""Generalized Pareto dominance.

This module provides the dominance relation used by the sort:
- compare: four-state dominance outcome for fixed-arity sequences, sparse
  key-ordered mappings, scalars and dominance-capable values
- dominates: boolean Pareto dominance check (minimization)
- dominance_matrix: vectorized pairwise outcomes for a numeric objective matrix
"""

from collections.abc import Iterator, Mapping, Sequence
from operator import itemgetter
from typing import Any

import numpy as np

from arb_ea.fold import Break, partial_cmp_many, try_fold
from arb_ea.ordering import Dominance, partial_compare
from arb_ea.protocols import SupportsDominance

_by_key = itemgetter(0)


def _refine(acc: Dominance, ordering: Dominance | None) -> "Dominance | Break[Dominance]":
    """Fold step: merge one position's direction into the accumulated one."""
    if ordering is None or ordering is Dominance.EQUAL or ordering is acc:
        return acc
    if acc is Dominance.EQUAL:
        return ordering
    return Break(Dominance.INCOMPARABLE)


def _merge_orderings(a: Mapping[Any, Any], b: Mapping[Any, Any]) -> Iterator[Dominance | None]:
    """Merge-join two mappings by sorted key, yielding one direction per key.

    A key only in ``a`` yields GREATER, a key only in ``b`` yields LESS and a
    shared key yields the comparison of both values.
    """
    first_iter = iter(sorted(a.items(), key=_by_key))
    second_iter = iter(sorted(b.items(), key=_by_key))
    first = next(first_iter, None)
    second = next(second_iter, None)

    while first is not None and second is not None:
        if first[0] < second[0]:
            yield Dominance.GREATER
            first = next(first_iter, None)
        elif second[0] < first[0]:
            yield Dominance.LESS
            second = next(second_iter, None)
        else:
            yield partial_compare(first[1], second[1])
            first = next(first_iter, None)
            second = next(second_iter, None)

    # Trailing entries on one side: a single step decides, repeats are idempotent.
    if first is not None:
        yield Dominance.GREATER
    elif second is not None:
        yield Dominance.LESS


def compare(a: Any, b: Any) -> Dominance:
    """Compute the dominance outcome of a relative to b.

    Dispatch, in order:
      - a implements ``SupportsDominance``: ``a.dominates(b)``
      - a is a Mapping: sparse merge-join over sorted keys, where a key present
        on one side only counts in that side's favour
      - a is a str or bytes, or not a sequence: a single objective
      - otherwise (tuple, list, 1-D array): position-by-position walk

    Positions whose values are not orderable (NaN, mismatched types) carry no
    information. The walk stops at the first position that contradicts the
    direction accumulated so far and returns INCOMPARABLE.

    Args:
        a: Fitness measurement of the first individual.
        b: Fitness measurement of the second individual, same shape as a.

    Returns:
        LESS if a is no larger everywhere and smaller somewhere, GREATER for
        the mirror case, EQUAL for a tie (or nothing comparable), INCOMPARABLE
        for conflicting directions.

    Examples:
        >>> compare((1.0, 2, 3, False), (2.0, 3, 4, True))
        <Dominance.LESS: -1>
        >>> compare((1.0, 2), (2.0, 1))
        <Dominance.INCOMPARABLE: 2>
        >>> compare({0: 1, 1: 1}, {1: 1})
        <Dominance.GREATER: 1>
    """
    if isinstance(a, SupportsDominance):
        return a.dominates(b)
    if isinstance(a, Mapping):
        return try_fold(_merge_orderings(a, b), _refine, Dominance.EQUAL)
    if isinstance(a, (str, bytes)) or not isinstance(a, (Sequence, np.ndarray)):
        ordering = partial_compare(a, b)
        return Dominance.EQUAL if ordering is None else ordering
    return try_fold(partial_cmp_many(a, b), _refine, Dominance.EQUAL)


def dominates(a: Any, b: Any) -> bool:
    """Check if a Pareto-dominates b (minimization).

    Examples:
        >>> dominates((1.0, 2.0), (2.0, 3.0))
        True
        >>> dominates((1.0, 3.0), (2.0, 2.0))
        False
    """
    return compare(a, b) is Dominance.LESS


def dominance_matrix(objectives: np.ndarray) -> np.ndarray:
    """Compute pairwise dominance outcomes for all individuals (vectorized).

    Uses broadcasting to compare every pair of rows at once. NaN entries
    compare neither less nor greater, so they carry no information exactly as
    in ``compare``.

    Args:
        objectives: Numeric objective values. Shape (n, n_obj).

    Returns:
        ``int8`` array of shape (n, n) where ``result[i, j]`` is the
        ``Dominance`` value of ``compare(objectives[i], objectives[j])``.

    Raises:
        ValueError: If objectives is not 2D.

    Examples:
        >>> objs = np.array([[1.0, 1.0], [2.0, 2.0], [0.0, 3.0]])
        >>> m = dominance_matrix(objs)
        >>> Dominance(m[0, 1]), Dominance(m[0, 2])
        (<Dominance.LESS: -1>, <Dominance.INCOMPARABLE: 2>)
    """
    objectives = np.asarray(objectives)
    if objectives.ndim != 2:
        raise ValueError(f"objectives must be 2D, got shape {objectives.shape}")

    # Reshape for broadcasting: (n, 1, n_obj) vs (1, n, n_obj)
    a = objectives[:, np.newaxis, :]
    b = objectives[np.newaxis, :, :]

    any_lt = np.any(a < b, axis=2)
    any_gt = np.any(a > b, axis=2)

    result = np.full(any_lt.shape, Dominance.EQUAL.value, dtype=np.int8)
    result[any_lt & ~any_gt] = Dominance.LESS.value
    result[any_gt & ~any_lt] = Dominance.GREATER.value
    result[any_lt & any_gt] = Dominance.INCOMPARABLE.value
    return result
