"""Tests for the generalized dominance relation.

Test suite covering:
- TestCompareFixedArity: tuples, lists and numpy rows of mixed types
- TestCompareSparse: key-indexed mappings compared by sorted-key merge
- TestCompareProperties: antisymmetry and identity over random inputs
- TestDominates: boolean minimization check
- TestDominanceMatrix: vectorized pairwise outcomes
"""

import itertools
import math

import numpy as np
import pytest

from arb_ea import Dominance, compare, dominance_matrix, dominates

# =============================================================================
# TestCompareFixedArity
# =============================================================================


class TestCompareFixedArity:
    """Tests for compare on fixed-length sequences."""

    def test_mixed_types_less(self) -> None:
        """Smaller on every position is LESS."""
        assert compare((1.0, 2, 3, False), (2.0, 3, 4, True)) is Dominance.LESS

    def test_mixed_types_greater(self) -> None:
        """Tie on one position and larger elsewhere is GREATER."""
        assert compare((3.0, 4, 5, True), (3.0, 3, 3, False)) is Dominance.GREATER

    def test_mixed_types_incomparable(self) -> None:
        """Conflicting directions are INCOMPARABLE, not EQUAL."""
        assert compare((1.0, 2, 3, False), (2.0, 1, 3, True)) is Dominance.INCOMPARABLE

    def test_identical_tuples_equal(self) -> None:
        """Identical measurements are EQUAL."""
        assert compare((1.0, 2, 3, False), (1.0, 2, 3, False)) is Dominance.EQUAL

    def test_empty_sequences_equal(self) -> None:
        """Empty measurements compare EQUAL."""
        assert compare((), ()) is Dominance.EQUAL
        assert compare([], []) is Dominance.EQUAL

    def test_lists_and_arrays(self) -> None:
        """Lists and 1D numpy arrays are fixed-arity measurements too."""
        assert compare([1, 2], [1, 3]) is Dominance.LESS
        assert compare(np.array([2.0, 2.0]), np.array([1.0, 2.0])) is Dominance.GREATER

    def test_nan_position_is_ignored(self) -> None:
        """A NaN position neither helps nor hurts."""
        assert compare((math.nan, 1.0), (0.0, 2.0)) is Dominance.LESS
        assert compare((math.nan, 1.0), (0.0, 1.0)) is Dominance.EQUAL

    def test_all_nan_is_equal(self) -> None:
        """Nothing comparable means EQUAL."""
        assert compare((math.nan, math.nan), (1.0, 2.0)) is Dominance.EQUAL

    def test_unorderable_position_is_ignored(self) -> None:
        """A position whose comparison raises TypeError carries no information."""
        assert compare((1, None), (2, 3)) is Dominance.LESS

    def test_short_circuits_on_conflict(self) -> None:
        """Positions after the first conflict are never compared."""

        class Exploding:
            def __lt__(self, other: object) -> bool:
                raise RuntimeError("compared after conflict")

            __gt__ = __lt__

        a = (1, 2, Exploding())
        b = (2, 1, Exploding())
        assert compare(a, b) is Dominance.INCOMPARABLE

    def test_equal_position_keeps_direction(self) -> None:
        """Ties after a direction is set do not change it."""
        assert compare((1, 5, 5), (2, 5, 5)) is Dominance.LESS
        assert compare((5, 5, 1), (5, 5, 2)) is Dominance.LESS

    def test_scalars_are_single_objectives(self) -> None:
        """Non-sequence values compare as one objective."""
        assert compare(1, 2) is Dominance.LESS
        assert compare(2.0, 2.0) is Dominance.EQUAL
        assert compare(math.nan, 1.0) is Dominance.EQUAL

    def test_strings_are_scalars(self) -> None:
        """Strings compare as whole values, not character by character."""
        assert compare("ab", "b") is Dominance.LESS


# =============================================================================
# TestCompareSparse
# =============================================================================


class TestCompareSparse:
    """Tests for compare on key-indexed mappings."""

    def test_empty_maps_equal(self) -> None:
        """Two empty mappings are EQUAL."""
        assert compare({}, {}) is Dominance.EQUAL

    def test_extra_key_favors_owner(self) -> None:
        """A key only one side has tips the outcome toward that side."""
        assert compare({1: 1}, {}) is Dominance.GREATER
        assert compare({}, {1: 1}) is Dominance.LESS

    def test_leading_extra_key_counts(self) -> None:
        """An extra key before the shared ones counts like a trailing one."""
        assert compare({0: 0, 1: 1}, {1: 1}) is Dominance.GREATER
        assert compare({1: 1}, {0: 0, 1: 1}) is Dominance.LESS

    def test_disjoint_keys_incomparable(self) -> None:
        """Each side owning a key the other lacks is a conflict."""
        assert compare({0: 1}, {1: 1}) is Dominance.INCOMPARABLE

    def test_shared_key_values(self) -> None:
        """Shared keys compare their values."""
        assert compare({1: 0, 2: 1}, {1: 0, 2: 0}) is Dominance.GREATER
        assert compare({1: 0, 2: 0}, {1: 0, 2: 1}) is Dominance.LESS

    def test_value_conflicts_with_extra_key(self) -> None:
        """A better value cannot outweigh the other side's extra key."""
        assert compare({1: 1}, {1: 0, 2: 0}) is Dominance.INCOMPARABLE

    def test_missing_key_is_not_zero(self) -> None:
        """Absence is not treated as an explicit zero entry."""
        assert compare({1: 0}, {1: 0, 2: 0}) is Dominance.LESS

    def test_nan_value_is_ignored(self) -> None:
        """A NaN value under a shared key carries no information."""
        assert compare({0: math.nan, 1: 1}, {0: 1, 1: 1}) is Dominance.EQUAL
        assert compare({0: math.nan, 1: 2}, {0: 1, 1: 1}) is Dominance.GREATER

    def test_insertion_order_is_irrelevant(self) -> None:
        """Keys are merged in sorted order regardless of dict order."""
        assert compare({2: 1, 1: 0}, {1: 0, 2: 0}) is Dominance.GREATER

    def test_known_relations(self, membership_maps, membership_dominations) -> None:
        """Raw comparison: more keys or larger values means GREATER."""
        for candidate, dominated in enumerate(membership_dominations):
            for other in dominated:
                assert compare(membership_maps[candidate], membership_maps[other]) is Dominance.GREATER


# =============================================================================
# TestCompareProperties
# =============================================================================


def _random_tuple(rng: np.random.Generator) -> tuple:
    values = rng.integers(0, 3, size=3).astype(float)
    values[rng.random(3) < 0.1] = np.nan
    return (float(values[0]), int(values[1]) if not np.isnan(values[1]) else 0, bool(values[2] > 1))


def _random_map(rng: np.random.Generator) -> dict[int, int]:
    keys = rng.choice(4, size=int(rng.integers(0, 4)), replace=False)
    return {int(k): int(rng.integers(0, 2)) for k in keys}


class TestCompareProperties:
    """Algebraic properties of compare."""

    @pytest.mark.parametrize("make", [_random_tuple, _random_map])
    def test_antisymmetry(self, rng: np.random.Generator, make) -> None:
        """compare(a, b) is the mirror of compare(b, a)."""
        population = [make(rng) for _ in range(30)]
        for a, b in itertools.product(population, repeat=2):
            assert compare(a, b) is compare(b, a).reverse()

    @pytest.mark.parametrize("make", [_random_tuple, _random_map])
    def test_identity(self, rng: np.random.Generator, make) -> None:
        """Every measurement is EQUAL to itself (NaN positions carry no information)."""
        for _ in range(30):
            a = make(rng)
            assert compare(a, a) is Dominance.EQUAL

    def test_pure(self) -> None:
        """Repeated calls give the same answer and leave inputs untouched."""
        a = {1: 0, 2: 1}
        b = {2: 0, 1: 0}
        first = compare(a, b)
        assert compare(a, b) is first
        assert a == {1: 0, 2: 1}
        assert list(b) == [2, 1]


# =============================================================================
# TestDominates
# =============================================================================


class TestDominates:
    """Tests for the boolean dominates check."""

    def test_clear_dominance(self) -> None:
        """Smaller everywhere dominates."""
        assert dominates((1.0, 1.0), (2.0, 2.0)) is True
        assert dominates((2.0, 2.0), (1.0, 1.0)) is False

    def test_identical_solutions_no_dominance(self) -> None:
        """Identical solutions do not dominate each other."""
        assert dominates((1.0, 2.0), (1.0, 2.0)) is False

    def test_tradeoff_no_dominance(self) -> None:
        """Solutions with tradeoffs do not dominate each other."""
        assert dominates((1.0, 3.0), (3.0, 1.0)) is False
        assert dominates((3.0, 1.0), (1.0, 3.0)) is False

    def test_partial_tie_with_one_better(self) -> None:
        """One tie and one strictly better gives dominance."""
        assert dominates((1.0, 2.0), (1.0, 3.0)) is True

    def test_epsilon_difference(self) -> None:
        """Very small differences still count as dominance."""
        assert dominates((1.0, 1.0), (1.0 + 1e-10, 1.0)) is True


# =============================================================================
# TestDominanceMatrix
# =============================================================================


class TestDominanceMatrix:
    """Tests for the vectorized dominance_matrix function."""

    def test_agrees_with_compare(self, simple_2d_objectives: np.ndarray) -> None:
        """Matrix entries equal compare() for every pair."""
        matrix = dominance_matrix(simple_2d_objectives)
        n = simple_2d_objectives.shape[0]
        for i in range(n):
            for j in range(n):
                expected = compare(simple_2d_objectives[i], simple_2d_objectives[j])
                assert Dominance(int(matrix[i, j])) is expected, f"Mismatch at ({i}, {j})"

    def test_agrees_with_compare_with_nan(self, rng: np.random.Generator) -> None:
        """NaN handling matches compare()."""
        objectives = rng.integers(0, 3, size=(12, 3)).astype(float)
        objectives[rng.random(objectives.shape) < 0.15] = np.nan
        matrix = dominance_matrix(objectives)
        for i in range(12):
            for j in range(12):
                assert Dominance(int(matrix[i, j])) is compare(objectives[i], objectives[j])

    def test_diagonal_is_equal(self, simple_2d_objectives: np.ndarray) -> None:
        """Every solution is EQUAL to itself."""
        matrix = dominance_matrix(simple_2d_objectives)
        assert np.all(np.diag(matrix) == Dominance.EQUAL.value)

    def test_antisymmetric(self, simple_2d_objectives: np.ndarray) -> None:
        """LESS at (i, j) iff GREATER at (j, i)."""
        matrix = dominance_matrix(simple_2d_objectives)
        np.testing.assert_array_equal(matrix == Dominance.LESS.value, (matrix == Dominance.GREATER.value).T)

    def test_incomparable_entries(self) -> None:
        """Tradeoffs are marked INCOMPARABLE."""
        matrix = dominance_matrix(np.array([[1.0, 3.0], [3.0, 1.0]]))
        assert matrix[0, 1] == Dominance.INCOMPARABLE.value
        assert matrix[1, 0] == Dominance.INCOMPARABLE.value

    def test_output_shape_and_dtype(self, simple_2d_objectives: np.ndarray) -> None:
        """Output is an (n, n) int8 array."""
        matrix = dominance_matrix(simple_2d_objectives)
        assert matrix.shape == (5, 5)
        assert matrix.dtype == np.int8

    def test_empty_objectives(self) -> None:
        """Empty objectives returns empty matrix."""
        assert dominance_matrix(np.zeros((0, 2))).shape == (0, 0)

    def test_rejects_non_2d(self) -> None:
        """1D input is rejected."""
        with pytest.raises(ValueError, match="must be 2D"):
            dominance_matrix(np.array([1.0, 2.0]))
