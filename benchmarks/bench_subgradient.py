"""Benchmark subgradient descent iteration throughput."""

import time
from typing import Dict

import numpy as np

from subgrad import StepType, SubgradientConfig, run


def benchmark_subgradient_run(dim: int, max_iterations: int = 1000) -> Dict[str, float]:
    """Time a fixed-budget run on a separable non-smooth objective.

    Args:
        dim: Problem dimension.
        max_iterations: Iteration budget; tolerances are disabled so every
            run uses the full budget.

    Returns:
        Dictionary with timing results.
    """
    rng = np.random.default_rng(0)
    start = rng.normal(size=dim)

    config = SubgradientConfig(
        objective=lambda x: float(np.abs(x).sum()),
        subgradient=np.sign,
        start=start,
        step_type=StepType.DIMINISHING,
        initial_step=0.5,
        gradient_tolerance=0.0,
        value_tolerance=0.0,
        max_iterations=max_iterations,
    )

    # Warmup
    run(config)

    start_time = time.perf_counter()
    result = run(config)
    elapsed = time.perf_counter() - start_time

    return {
        "dim": float(dim),
        "iterations": float(result.nit),
        "total_time": elapsed,
        "time_per_iteration": elapsed / max(result.nit, 1),
    }


if __name__ == "__main__":
    print("Subgradient Descent Benchmark")
    print("=" * 60)

    for dim in [2, 10, 100, 1000]:
        timing = benchmark_subgradient_run(dim)
        print(
            f"dim={dim:5d}: {timing['iterations']:.0f} iterations, "
            f"{timing['total_time'] * 1e3:.2f} ms total, "
            f"{timing['time_per_iteration'] * 1e6:.2f} us/iter"
        )
