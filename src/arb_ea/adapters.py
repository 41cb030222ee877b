"""Sense adapters for fitness measurements.

This module provides two small wrappers that change how a value is compared
without touching the value itself:

- Reverse: flips the dominance direction (minimize <-> maximize)
- DominationOrd: exposes the dominance outcome through ``==``, ``<``, ``>``...

Both are immutable (frozen dataclasses).
"""

from dataclasses import dataclass
from typing import Any

from arb_ea.dominance import compare
from arb_ea.ordering import Dominance


@dataclass(frozen=True, eq=False)
class Reverse:
    """Dominance-inverting wrapper.

    Wrapping a whole fitness measurement turns minimization into maximization
    for every objective; wrapping a single component does so for that
    objective only. The rich comparison operators are reversed as well, so
    ``sorted`` on Reverse values yields descending order.

    Attributes:
        value: The wrapped fitness measurement or objective value.

    Example:
        >>> compare(Reverse((1, 2)), Reverse((2, 3)))
        <Dominance.GREATER: 1>
        >>> compare((Reverse(3), 1), (Reverse(5), 1))
        <Dominance.GREATER: 1>
    """

    value: Any

    def dominates(self, other: "Reverse") -> Dominance:
        """Return the reversed dominance outcome of the wrapped values."""
        return compare(self.value, other.value).reverse()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Reverse):
            return NotImplemented
        return self.dominates(other) is Dominance.EQUAL

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Reverse):
            return NotImplemented
        return self.dominates(other) is Dominance.LESS

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Reverse):
            return NotImplemented
        return self.dominates(other) in (Dominance.LESS, Dominance.EQUAL)

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Reverse):
            return NotImplemented
        return self.dominates(other) is Dominance.GREATER

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Reverse):
            return NotImplemented
        return self.dominates(other) in (Dominance.GREATER, Dominance.EQUAL)

    __hash__ = None  # type: ignore[assignment]


@dataclass(frozen=True, eq=False)
class DominationOrd:
    """Ordering adapter exposing dominance through comparison operators.

    ``a == b`` iff the outcome is EQUAL, ``a < b`` iff LESS, ``a > b`` iff
    GREATER. For INCOMPARABLE values every operator answers False: this is a
    partial order, so code expecting a total order (``sorted``, ``max``) must
    be prepared for "none of the above".

    Used as a component of a fixed-arity measurement, an incomparable
    DominationOrd position carries no information, like NaN.

    Attributes:
        value: The wrapped dominance-capable value.

    Example:
        >>> a = DominationOrd({1: 0, 2: 1})
        >>> b = DominationOrd({1: 0, 2: 0})
        >>> a > b, a == b, a < b
        (True, False, False)
    """

    value: Any

    def dominates(self, other: "DominationOrd") -> Dominance:
        """Return the dominance outcome of the wrapped values."""
        return compare(self.value, other.value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DominationOrd):
            return NotImplemented
        return self.dominates(other) is Dominance.EQUAL

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, DominationOrd):
            return NotImplemented
        return self.dominates(other) is Dominance.LESS

    def __le__(self, other: object) -> bool:
        if not isinstance(other, DominationOrd):
            return NotImplemented
        return self.dominates(other) in (Dominance.LESS, Dominance.EQUAL)

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, DominationOrd):
            return NotImplemented
        return self.dominates(other) is Dominance.GREATER

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, DominationOrd):
            return NotImplemented
        return self.dominates(other) in (Dominance.GREATER, Dominance.EQUAL)

    __hash__ = None  # type: ignore[assignment]
