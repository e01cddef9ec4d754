"""Core interfaces shared by the subgradient optimizer.

A run is described by a :class:`SubgradientConfig` holding the objective, a
subgradient oracle, the starting point and the numeric knobs of the method.
Both oracles may be plain callables or any object exposing
``evaluate(point)``; :func:`as_oracle` puts them behind the same interface so
built-in test problems and user functions are interchangeable.

References:
    - Shor, *Minimization Methods for Non-Differentiable Functions* (1985)
    - Boyd, Xiao & Mutapcic, *Subgradient Methods* (lecture notes, 2003)
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Iterator, List, Protocol, Sequence, runtime_checkable

import numpy as np

from ..errors import (
    ConfigurationError,
    DimensionMismatch,
    InvalidStepType,
    NumericInstability,
    SubgradientError,
)

Array = np.ndarray
Objective = Callable[[Array], float]
Subgradient = Callable[[Array], Array]

# Iteration budget used when a caller asks for an "unlimited" run.
UNLIMITED_ITERATIONS = 1_000_000


@runtime_checkable
class Oracle(Protocol):
    """Anything that can be evaluated at a point of the search space."""

    def evaluate(self, point: Array) -> Any:
        ...


@dataclass(frozen=True)
class CallableOracle:
    """Adapter exposing a plain function through the :class:`Oracle` interface."""

    fn: Callable[[Array], Any]

    def evaluate(self, point: Array) -> Any:
        return self.fn(point)

    def __call__(self, point: Array) -> Any:
        return self.fn(point)


def as_oracle(obj: Any) -> Oracle:
    """Return ``obj`` as an :class:`Oracle`, wrapping plain callables."""
    if isinstance(obj, Oracle):
        return obj
    if callable(obj):
        return CallableOracle(obj)
    raise ConfigurationError(
        f"Expected a callable or an object with evaluate(), got {type(obj).__name__}."
    )


class StepType(Enum):
    """Step-size schedule of the subgradient method.

    The values double as the numeric codes accepted from menus and scripts
    (1 - fixed, 2 - diminishing).
    """

    FIXED = 1
    DIMINISHING = 2

    @classmethod
    def parse(cls, value: "StepType | int | str") -> "StepType":
        """Normalize an enum member, integer code or name to a StepType.

        Raises:
            InvalidStepType: If ``value`` names no known schedule.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().upper()
            if key in cls.__members__:
                return cls[key]
        elif isinstance(value, (int, np.integer)) and not isinstance(value, bool):
            for member in cls:
                if member.value == int(value):
                    return member
        supported = [m.name.lower() for m in cls]
        raise InvalidStepType(
            f"Unsupported step type {value!r}. Supported types: {supported}"
        )


class StopReason(Enum):
    """Why an optimizer run halted."""

    OPTIMAL = "optimal"
    STEP_COLLAPSED = "step_collapsed"
    VALUE_CONVERGED = "value_converged"
    ITERATION_LIMIT = "iteration_limit"


@dataclass(frozen=True)
class SubgradientConfig:
    """
    Configuration of one subgradient descent run.

    Args:
        objective: Function ``R^n -> R`` (callable or :class:`Oracle`).
        subgradient: Function returning a subgradient of ``objective`` with the
            same length as its input (callable or :class:`Oracle`).
        start: Initial point; fixes the problem dimension.
        step_type: Schedule selector, see :meth:`StepType.parse`. It is
            resolved on the first iteration of a run, so an unknown value
            raises :class:`InvalidStepType` from ``run`` before any update.
        initial_step: Base step size ``alpha_0``. Must be positive.
        min_step: Step floor; a smaller computed step stops the run.
        gradient_tolerance: Stop once every ``|g_j|`` is below this value.
        value_tolerance: Stop once ``|f(x_k) - f(x_{k-1})|`` is below this value.
        max_iterations: Iteration budget. Must be positive; use
            :meth:`resolve_max_iterations` to map an "unlimited" 0 first.
    """

    objective: Objective | Oracle
    subgradient: Subgradient | Oracle
    start: Sequence[float] | Array
    step_type: StepType | int | str = StepType.FIXED
    initial_step: float = 0.01
    min_step: float = 1e-8
    gradient_tolerance: float = 1e-6
    value_tolerance: float = 1e-6
    max_iterations: int = 1000

    def __post_init__(self) -> None:
        start = np.array(self.start, dtype=float)
        if start.ndim != 1 or start.size == 0:
            raise ConfigurationError("start must be a non-empty 1-D sequence of reals.")
        if not np.all(np.isfinite(start)):
            raise ConfigurationError("start must contain only finite values.")
        start.setflags(write=False)
        object.__setattr__(self, "start", start)

        as_oracle(self.objective)
        as_oracle(self.subgradient)

        for name in ("initial_step", "min_step"):
            value = getattr(self, name)
            if not math.isfinite(value) or value <= 0.0:
                raise ConfigurationError(f"{name} must be positive, got {value}.")
        for name in ("gradient_tolerance", "value_tolerance"):
            value = getattr(self, name)
            if math.isnan(value) or value < 0.0:
                raise ConfigurationError(f"{name} must be non-negative, got {value}.")
        max_iterations = self.max_iterations
        if isinstance(max_iterations, bool) or not isinstance(
            max_iterations, (int, float, np.integer, np.floating)
        ):
            raise ConfigurationError("max_iterations must be an integer.")
        if not float(max_iterations).is_integer():
            raise ConfigurationError("max_iterations must be an integer.")
        object.__setattr__(self, "max_iterations", int(max_iterations))
        if self.max_iterations <= 0:
            raise ConfigurationError(
                f"max_iterations must be positive, got {self.max_iterations}."
            )

    @property
    def dim(self) -> int:
        """Problem dimension fixed by ``start``."""
        return int(self.start.size)

    @staticmethod
    def resolve_max_iterations(max_iterations: int) -> int:
        """Map the caller-side sentinel ``0`` ("no limit") to a finite budget."""
        if max_iterations == 0:
            return UNLIMITED_ITERATIONS
        return max_iterations


@dataclass(frozen=True)
class IterationRecord:
    """Diagnostics emitted after every accepted iteration."""

    iteration: int
    value: float
    step_size: float


@dataclass
class OptimizeResult:
    """
    Result of a subgradient descent run.

    Attributes:
        x: Last point reached before the stop condition fired.
        fun: Objective value at ``x``.
        reason: Stop reason of the run.
        message: Human-readable explanation of ``reason``.
        nit: Number of loop passes executed.
        nfev: Number of objective evaluations.
        njev: Number of subgradient evaluations.
        trace: One :class:`IterationRecord` per accepted iteration, in order.
        history: Iterates visited (only filled when requested).

    Unpacking yields ``(x, trace)``, so ``point, trace = run(config)`` works.
    """

    x: Array
    fun: float
    reason: StopReason
    message: str
    nit: int
    nfev: int
    njev: int
    trace: List[IterationRecord] = field(default_factory=list)
    history: List[Array] = field(default_factory=list)

    @property
    def success(self) -> bool:
        """True if the run stopped at a near-stationary point or converged value."""
        return self.reason in (StopReason.OPTIMAL, StopReason.VALUE_CONVERGED)

    def __iter__(self) -> Iterator[Any]:
        yield self.x
        yield self.trace


__all__ = [
    "Array",
    "Objective",
    "Subgradient",
    "UNLIMITED_ITERATIONS",
    "Oracle",
    "CallableOracle",
    "as_oracle",
    "StepType",
    "StopReason",
    "SubgradientConfig",
    "IterationRecord",
    "OptimizeResult",
    "SubgradientError",
    "ConfigurationError",
    "InvalidStepType",
    "DimensionMismatch",
    "NumericInstability",
]
