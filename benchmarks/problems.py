"""Objective sets for non-dominated sorting benchmarks.

Populations are random decision vectors pushed through the ZDT
(Zitzler-Deb-Thiele) objective functions, so the resulting fitness sets have
the front structure sorting meets inside a real multi-objective run: many
small fronts early on, one large front near convergence. ``spread`` moves the
decision vectors towards the Pareto-optimal set (x_i = 0 for i > 1), which
shrinks the number of fronts.

References:
    Zitzler, E., Deb, K., & Thiele, L. (2000). Comparison of multiobjective
    evolutionary algorithms: Empirical results. Evolutionary computation, 8(2), 173-195.
"""

from collections.abc import Callable

import numpy as np

from arb_ea import lift

# Problem configuration
N_VARS: int = 30
BOUNDS: tuple[float, float] = (0.0, 1.0)


def _g(x: np.ndarray) -> float:
    return 1 + 9 * float(np.sum(x[1:])) / (len(x) - 1)


def zdt1_f1(x: np.ndarray) -> float:
    """First ZDT objective, shared by all problems."""
    return float(x[0])


def zdt1_f2(x: np.ndarray) -> float:
    """ZDT1 second objective: convex front f2 = 1 - sqrt(f1)."""
    g = _g(x)
    return g * (1 - np.sqrt(x[0] / g))


def zdt2_f2(x: np.ndarray) -> float:
    """ZDT2 second objective: concave front f2 = 1 - f1^2."""
    g = _g(x)
    return g * (1 - (x[0] / g) ** 2)


def zdt3_f2(x: np.ndarray) -> float:
    """ZDT3 second objective: front split into disconnected parts."""
    g = _g(x)
    return g * (1 - np.sqrt(x[0] / g) - (x[0] / g) * np.sin(10 * np.pi * x[0]))


# Registry of all problems as ordered evaluator lists
PROBLEMS: dict[str, list[Callable[[np.ndarray], float]]] = {
    "zdt1": [zdt1_f1, zdt1_f2],
    "zdt2": [zdt1_f1, zdt2_f2],
    "zdt3": [zdt1_f1, zdt3_f2],
}


def sample_objectives(
    evaluators: list[Callable[[np.ndarray], float]],
    pop_size: int,
    rng: np.random.Generator,
    spread: float = 1.0,
) -> list[tuple[float, ...]]:
    """Evaluate a random population.

    Args:
        evaluators: Ordered objective functions of one problem.
        pop_size: Number of individuals.
        rng: Random generator.
        spread: Upper bound for the tail variables x_2..x_n, in (0, 1].

    Returns:
        One fitness tuple per individual.
    """
    heads = rng.uniform(BOUNDS[0], BOUNDS[1], size=(pop_size, 1))
    tails = rng.uniform(BOUNDS[0], spread, size=(pop_size, N_VARS - 1))
    population = np.hstack([heads, tails])
    return lift(evaluators)(population)
