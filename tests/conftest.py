"""Shared test fixtures for arb-ea tests.

This module provides common fixtures used across test modules:
- rng: Seeded random number generator
- Fixed-arity populations with known front structure
- Sparse (mapping) populations with known dominance relations
"""

import numpy as np
import pytest


@pytest.fixture
def rng() -> np.random.Generator:
    """Provide a seeded random number generator for deterministic tests."""
    return np.random.default_rng(42)


@pytest.fixture
def tradeoff_pairs() -> list[tuple[float, float]]:
    """Five bi-objective tuples (minimize both).

    Individuals 0, 1, 2 trade off against each other and each dominates
    individuals 3 and 4, which trade off against each other.

    Resulting fronts:
        Front 0: 0, 1, 2
        Front 1: 3, 4
    """
    return [
        (1.0, 2.0),  # 0
        (2.0, 1.0),  # 1
        (1.5, 1.5),  # 2
        (3.0, 4.0),  # 3: dominated by 0, 1, 2
        (4.0, 3.0),  # 4: dominated by 0, 1, 2
    ]


@pytest.fixture
def simple_2d_objectives() -> np.ndarray:
    """Simple 2D objectives with clear dominance hierarchy.

    Layout (minimization):
        [1,1] dominates all others
        [2,2], [1,3], [3,1] trade off with each other and dominate [3,3]

    Resulting fronts:
        Front 0: 0
        Front 1: 1, 3, 4
        Front 2: 2
    """
    return np.array(
        [
            [1.0, 1.0],  # 0
            [2.0, 2.0],  # 1
            [3.0, 3.0],  # 2
            [1.0, 3.0],  # 3
            [3.0, 1.0],  # 4
        ]
    )


@pytest.fixture
def membership_maps() -> list[dict[int, int]]:
    """Sparse key-indexed fitness where owning more keys (or larger values) is better.

    Meant to be compared under ``Reverse``. Known relations (``c: dominated``):
        0: nothing (weakest)
        1: 0
        2: 0, 1
        3: 0
        4: 0
        5: 0, 3, 4
    """
    return [
        {},
        {1: 1},
        {0: 0, 1: 1},
        {2: 1},
        {1: 0, 2: 0},
        {1: 0, 2: 1},
    ]


@pytest.fixture
def membership_dominations() -> list[list[int]]:
    """For each individual of ``membership_maps``, the individuals it dominates."""
    return [[], [0], [0, 1], [0], [0], [0, 3, 4]]
