"""Dominance outcomes and per-position partial comparison.

This module provides the two leaf building blocks of the dominance relation:

- Dominance: the four-state outcome of comparing two fitness measurements
- partial_compare: compare a single pair of objective values, reporting
  ``None`` when the pair carries no ordering information
"""

from enum import Enum
from typing import Any

from arb_ea.protocols import SupportsDominance


class Dominance(Enum):
    """Outcome of a dominance comparison between two fitness measurements.

    Names describe the component-wise direction of ``self`` relative to
    ``other``: LESS means self is no larger on every compared objective and
    strictly smaller on at least one. Under minimization LESS therefore means
    "self dominates other".

    INCOMPARABLE (conflicting improvements) is deliberately distinct from
    EQUAL (a tie, or nothing could be compared). Both mean "no edge" in the
    domination graph.

    The values are stable ``int8`` codes used by ``dominance_matrix``.
    """

    LESS = -1
    EQUAL = 0
    GREATER = 1
    INCOMPARABLE = 2

    def reverse(self) -> "Dominance":
        """Swap LESS and GREATER; EQUAL and INCOMPARABLE are their own mirror.

        Examples:
            >>> Dominance.LESS.reverse()
            <Dominance.GREATER: 1>
            >>> Dominance.INCOMPARABLE.reverse()
            <Dominance.INCOMPARABLE: 2>
        """
        if self is Dominance.LESS:
            return Dominance.GREATER
        if self is Dominance.GREATER:
            return Dominance.LESS
        return self


def partial_compare(a: Any, b: Any) -> Dominance | None:
    """Compare two objective values, or return None if they are not orderable.

    Values that support dominance (the sense adapters) are compared through
    their ``dominates`` method, with INCOMPARABLE reported as None. Everything
    else goes through the rich comparison operators. NaN-like values, for
    which none of ``<``, ``>`` and ``==`` hold, and values whose comparison
    raises TypeError yield None.

    Array-valued components are not supported: a comparison whose result has
    no single truth value (a 1-D numpy array nested inside a tuple) raises
    ValueError. Flatten such components into separate objectives instead.

    Args:
        a: Objective value of the first measurement.
        b: Objective value of the second measurement at the same position.

    Returns:
        LESS, EQUAL or GREATER, or None when the pair carries no information.

    Examples:
        >>> partial_compare(1.0, 2.0)
        <Dominance.LESS: -1>
        >>> partial_compare(float("nan"), 2.0) is None
        True
    """
    if isinstance(a, SupportsDominance):
        outcome = a.dominates(b)
        return None if outcome is Dominance.INCOMPARABLE else outcome

    try:
        if a < b:
            return Dominance.LESS
        if a > b:
            return Dominance.GREATER
        if a == b:
            return Dominance.EQUAL
    except TypeError:
        return None
    return None
