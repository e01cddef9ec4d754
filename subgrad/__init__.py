"""subgrad - subgradient descent for non-smooth minimization."""

__version__ = "0.1.0"

# Errors
from .errors import (
    ConfigurationError,
    DimensionMismatch,
    InvalidStepType,
    NumericInstability,
    SubgradientError,
)

# Diagnostics
from .diagnostics import (
    assert_dimension,
    assert_finite,
    debug_context,
    inf_norm,
    is_debug_enabled,
    is_finite,
    set_debug_enabled,
)

# Logging
from .logging import configure_logging, get_logger

# Optimizer
from .optimize import (
    DEFAULT_START,
    PROBLEMS,
    BenchmarkProblem,
    IterationRecord,
    OptimizeResult,
    Oracle,
    StepType,
    StopReason,
    SubgradientConfig,
    diminishing_step,
    first_collapsed_iteration,
    fixed_step,
    get_problem,
    run,
    step_size,
    subgradient_descent,
)

# Timing
from .timing import Timer, timed

__all__ = [
    "__version__",
    # Errors
    "SubgradientError",
    "ConfigurationError",
    "InvalidStepType",
    "DimensionMismatch",
    "NumericInstability",
    # Diagnostics
    "inf_norm",
    "is_finite",
    "assert_finite",
    "assert_dimension",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
    # Logging
    "get_logger",
    "configure_logging",
    # Optimizer
    "StepType",
    "StopReason",
    "SubgradientConfig",
    "IterationRecord",
    "OptimizeResult",
    "Oracle",
    "BenchmarkProblem",
    "DEFAULT_START",
    "PROBLEMS",
    "get_problem",
    "fixed_step",
    "diminishing_step",
    "step_size",
    "first_collapsed_iteration",
    "run",
    "subgradient_descent",
    # Timing
    "Timer",
    "timed",
]
