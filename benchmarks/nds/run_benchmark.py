"""Benchmark runner comparing non-dominated sorting in arb-ea, Pymoo, and DEAP.

Every library sorts the same ZDT objective sets. The fronts each one returns
are checked against arb-ea's generic path before timings are recorded.

Usage:
    uv run python benchmarks/nds/run_benchmark.py
"""

import json
import logging
import sys
import time
from collections import defaultdict
from collections.abc import Callable
from datetime import UTC, datetime
from pathlib import Path

# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent.parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

import numpy as np
from pymoo.util.nds.non_dominated_sorting import NonDominatedSorting

from arb_ea import fast_non_dominated_sort
from benchmarks.problems import PROBLEMS, sample_objectives

# Configure logging
logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")
logger = logging.getLogger(__name__)


# Experiment parameters
POP_SIZES = [100, 200, 400]
SPREADS = [1.0, 0.1]
N_RUNS = 5
SEEDS = list(range(N_RUNS))

Fronts = list[set[int]]


def sort_generic(objectives: np.ndarray) -> Fronts:
    """Sort fitness tuples with the pairwise comparison path."""
    _, fronts = fast_non_dominated_sort([tuple(row) for row in objectives.tolist()])
    return [set(front.tolist()) for front in fronts]


def sort_matrix(objectives: np.ndarray) -> Fronts:
    """Sort the objective matrix with the vectorized path."""
    _, fronts = fast_non_dominated_sort(objectives)
    return [set(front.tolist()) for front in fronts]


def sort_pymoo(objectives: np.ndarray) -> Fronts:
    """Sort using Pymoo's default non-dominated sorting."""
    fronts = NonDominatedSorting().do(objectives)
    return [set(np.asarray(front).tolist()) for front in fronts]


def _setup_deap() -> None:
    """Set up DEAP creator classes (handles cleanup for multiple runs)."""
    from deap import base, creator

    # Clean up any existing creator classes
    if hasattr(creator, "FitnessMin"):
        del creator.FitnessMin
    if hasattr(creator, "Individual"):
        del creator.Individual

    creator.create("FitnessMin", base.Fitness, weights=(-1.0, -1.0))
    creator.create("Individual", list, fitness=creator.FitnessMin)


def sort_deap(objectives: np.ndarray) -> Fronts:
    """Sort using DEAP's sortNondominated."""
    from deap import creator, tools

    population = []
    for row in objectives.tolist():
        ind = creator.Individual(row)
        ind.fitness.values = tuple(row)
        population.append(ind)
    index_of = {id(ind): i for i, ind in enumerate(population)}

    fronts = tools.sortNondominated(population, len(population))
    return [{index_of[id(ind)] for ind in front} for front in fronts]


SORTERS: list[tuple[str, Callable[[np.ndarray], Fronts]]] = [
    ("arb-ea", sort_generic),
    ("arb-ea-matrix", sort_matrix),
    ("pymoo", sort_pymoo),
    ("deap", sort_deap),
]


def run_benchmark() -> dict:
    """Run the full benchmark suite.

    Returns:
        Dictionary containing metadata and results.

    Raises:
        RuntimeError: If a library disagrees with arb-ea on the fronts.
    """
    timestamp = datetime.now(UTC).isoformat()

    metadata = {
        "timestamp": timestamp,
        "parameters": {
            "pop_sizes": POP_SIZES,
            "spreads": SPREADS,
            "n_runs": N_RUNS,
            "seeds": SEEDS,
        },
    }

    _setup_deap()
    results = []

    total_runs = len(PROBLEMS) * len(POP_SIZES) * len(SPREADS) * N_RUNS
    current_run = 0

    for problem_name, evaluators in PROBLEMS.items():
        for pop_size in POP_SIZES:
            for spread in SPREADS:
                for seed in SEEDS:
                    current_run += 1
                    logger.info(
                        f"Running [{current_run}/{total_runs}]: {problem_name.upper()} "
                        f"(pop_size={pop_size}, spread={spread}, seed={seed})"
                    )
                    rng = np.random.default_rng(seed)
                    objectives = np.array(sample_objectives(evaluators, pop_size, rng, spread=spread))

                    expected = None
                    for library_name, sorter in SORTERS:
                        start_time = time.perf_counter()
                        fronts = sorter(objectives)
                        elapsed = time.perf_counter() - start_time

                        if expected is None:
                            expected = fronts
                        elif fronts != expected:
                            raise RuntimeError(
                                f"{library_name} disagrees with arb-ea on {problem_name.upper()} "
                                f"(pop_size={pop_size}, spread={spread}, seed={seed})"
                            )

                        results.append(
                            {
                                "library": library_name,
                                "problem": problem_name.upper(),
                                "pop_size": pop_size,
                                "spread": spread,
                                "seed": seed,
                                "n_fronts": len(fronts),
                                "time_seconds": elapsed,
                            }
                        )

                    logger.info(f"  Fronts: {len(expected)}")

    return {"metadata": metadata, "results": results}


def print_summary(results: dict) -> None:
    """Print a summary table of the benchmark results.

    Args:
        results: The benchmark results dictionary.
    """
    time_data = defaultdict(lambda: defaultdict(list))
    for r in results["results"]:
        time_data[(r["problem"], r["pop_size"])][r["library"]].append(r["time_seconds"])

    libraries = [name for name, _ in SORTERS]

    print("\n" + "=" * 80)
    print("BENCHMARK SUMMARY")
    print("=" * 80)
    print("\nTiming (mean milliseconds per sort):")

    header = f"{'Problem':<10}{'N':>6}"
    for lib in libraries:
        header += f"{lib:>16}"
    print(header)
    print("-" * (16 + 16 * len(libraries)))

    for problem, pop_size in sorted(time_data.keys()):
        row = f"{problem:<10}{pop_size:>6}"
        for lib in libraries:
            times = time_data[(problem, pop_size)][lib]
            if times:
                row += f"{1000 * np.mean(times):>16.2f}"
            else:
                row += f"{'N/A':>16}"
        print(row)

    print()


def main() -> None:
    """Main entry point for the benchmark."""
    logger.info("Starting non-dominated sorting benchmark suite")
    logger.info(f"Parameters: pop_sizes={POP_SIZES}, spreads={SPREADS}, runs={N_RUNS}")

    results = run_benchmark()

    # Save results to JSON
    output_path = Path(__file__).parent / "results" / "benchmark_results.json"
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, "w") as f:
        json.dump(results, f, indent=2)

    logger.info(f"Results saved to {output_path}")

    print_summary(results)


if __name__ == "__main__":
    main()
