"""arb-ea: Pareto dominance over arbitrary fitness shapes.

Generalized dominance comparison and fast non-dominated sorting for
multi-objective evolutionary algorithms. Fitness measurements can be tuples of
mixed types, numpy rows, sparse key-indexed mappings, or any value
implementing ``SupportsDominance``.

Example (fixed-arity fitness, minimize both objectives):
    >>> from arb_ea import fast_non_dominated_sort
    >>> fitness = [(1, 2), (2, 1), (1.5, 1.5), (3, 4), (4, 3)]
    >>> ranks, fronts = fast_non_dominated_sort(fitness)
    >>> [front.tolist() for front in fronts]
    [[0, 1, 2], [3, 4]]

Example (mixed senses through fitness extraction):
    >>> from arb_ea import Dominance, compare, evaluate, with_sense
    >>> evaluators = [len, with_sense(sum, "max")]
    >>> compare(evaluate(evaluators, [5, 5]), evaluate(evaluators, [1, 2]))
    <Dominance.LESS: -1>
"""

from arb_ea.adapters import DominationOrd, Reverse
from arb_ea.dominance import compare, dominance_matrix, dominates
from arb_ea.evaluation import evaluate, lift, lift_parallel, with_sense
from arb_ea.fold import Break, partial_cmp_many, reduce_until, try_fold
from arb_ea.ordering import Dominance, partial_compare
from arb_ea.protocols import Evaluator, SupportsDominance
from arb_ea.registry import SenseRegistry, list_senses
from arb_ea.results import NonDominatedSortResult
from arb_ea.sorting import fast_non_dominated_sort

__all__ = [
    # Sorting
    "fast_non_dominated_sort",
    "NonDominatedSortResult",
    # Dominance relation
    "Dominance",
    "compare",
    "dominates",
    "dominance_matrix",
    "partial_compare",
    # Fold substrate
    "Break",
    "partial_cmp_many",
    "try_fold",
    "reduce_until",
    # Sense adapters
    "Reverse",
    "DominationOrd",
    # Fitness extraction
    "evaluate",
    "lift",
    "lift_parallel",
    "with_sense",
    # Registry system
    "SenseRegistry",
    "list_senses",
    # Protocols
    "SupportsDominance",
    "Evaluator",
]
