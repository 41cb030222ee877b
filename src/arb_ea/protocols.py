"""Protocol definitions for dominance-capable values and objective evaluators.

These protocols describe the two capabilities the rest of the package is
written against, so that user types can take part without subclassing:

1. **SupportsDominance**: a value that knows how to compare itself against
   another value of the same kind and produce a ``Dominance`` outcome. The
   sense adapters (``Reverse``, ``DominationOrd``) implement it, and so can any
   custom fitness type.

2. **Evaluator**: a callable that maps one individual to one objective value.
   An ordered sequence of evaluators produces a fitness measurement.

Example usage:
    ```python
    class Cost:
        def __init__(self, euros: float) -> None:
            self.euros = euros

        def dominates(self, other: "Cost") -> Dominance:
            return compare((self.euros,), (other.euros,))

    assert isinstance(Cost(1.0), SupportsDominance)
    ```
"""

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from arb_ea.ordering import Dominance


@runtime_checkable
class SupportsDominance(Protocol):
    """Protocol for values that compare themselves by Pareto dominance.

    ``compare`` and ``partial_compare`` dispatch to ``dominates`` whenever the
    first argument implements this protocol, before any structural handling of
    sequences or mappings.

    The method must be total (never raise for a value of the same kind) and
    antisymmetric: ``a.dominates(b)`` is LESS iff ``b.dominates(a)`` is GREATER.
    """

    def dominates(self, other: Any) -> "Dominance":
        """Compare self against other.

        Args:
            other: A value of the same kind as self.

        Returns:
            The dominance outcome of self relative to other.
        """
        ...


@runtime_checkable
class Evaluator(Protocol):
    """Protocol for a single objective evaluator.

    Parameters:
        individual: Any representation of a candidate solution. It is only
            read, never modified.

    Returns:
        One objective value. Any type comparable with ``partial_compare``
        works: numbers, booleans, ``Reverse``-wrapped values, or nested
        dominance-capable values wrapped in ``DominationOrd``.

    Example:
        ```python
        def path_length(route: list[tuple[float, float]]) -> float:
            return sum(math.dist(p, q) for p, q in itertools.pairwise(route))
        ```
    """

    def __call__(self, individual: Any) -> Any:
        """Evaluate one objective of one individual."""
        ...
