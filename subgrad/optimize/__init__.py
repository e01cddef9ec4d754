"""Subgradient descent for unconstrained, possibly non-smooth minimization.

Example
-------
>>> import numpy as np
>>> from subgrad.optimize import StepType, SubgradientConfig, run
>>> config = SubgradientConfig(
...     objective=lambda x: float(np.abs(x).sum()),
...     subgradient=np.sign,
...     start=[2.0, -3.0],
...     step_type=StepType.DIMINISHING,
...     initial_step=0.5,
... )
>>> res = run(config)
>>> res.reason.name in {"OPTIMAL", "VALUE_CONVERGED", "STEP_COLLAPSED", "ITERATION_LIMIT"}
True
"""

from .core import (
    UNLIMITED_ITERATIONS,
    CallableOracle,
    IterationRecord,
    OptimizeResult,
    Oracle,
    StepType,
    StopReason,
    SubgradientConfig,
    as_oracle,
)
from .problems import (
    DEFAULT_START,
    MULTIMODAL,
    NONSMOOTH,
    PROBLEMS,
    QUADRATIC,
    BenchmarkProblem,
    get_problem,
)
from .schedules import diminishing_step, first_collapsed_iteration, fixed_step, step_size
from .subgradient import run, subgradient_descent

__all__ = [
    "UNLIMITED_ITERATIONS",
    "BenchmarkProblem",
    "CallableOracle",
    "DEFAULT_START",
    "IterationRecord",
    "MULTIMODAL",
    "NONSMOOTH",
    "OptimizeResult",
    "Oracle",
    "PROBLEMS",
    "QUADRATIC",
    "StepType",
    "StopReason",
    "SubgradientConfig",
    "as_oracle",
    "diminishing_step",
    "first_collapsed_iteration",
    "fixed_step",
    "get_problem",
    "run",
    "step_size",
    "subgradient_descent",
]
