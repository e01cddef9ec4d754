"""Built-in two-dimensional test problems for the subgradient method.

Three classic cases are provided: a smooth convex quadratic, a smooth
multimodal function and a non-smooth convex one. Each problem exposes its
objective and subgradient through the oracle interface, so it can be plugged
straight into :class:`~subgrad.optimize.core.SubgradientConfig`.

Example
-------
>>> from subgrad.optimize import get_problem, run
>>> problem = get_problem("quadratic")
>>> res = run(problem.config(start=(2.0, 2.0), initial_step=0.1))
>>> bool(abs(res.x[0] - 1.0) < 1e-2)
True
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Sequence

import numpy as np

from ..errors import ConfigurationError, DimensionMismatch
from .core import Array, CallableOracle, SubgradientConfig

# Classic starting point for the built-in problems.
DEFAULT_START = (2.0, -3.0)


@dataclass(frozen=True)
class BenchmarkProblem:
    """A named objective with its subgradient oracle and known minimizer."""

    name: str
    description: str
    objective: CallableOracle
    subgradient: CallableOracle
    minimizer: Optional[tuple[float, ...]] = None

    def config(self, start: Sequence[float] = DEFAULT_START, **kwargs: Any) -> SubgradientConfig:
        """Build a :class:`SubgradientConfig` for this problem.

        Raises:
            DimensionMismatch: If ``start`` is not a point of the plane.
        """
        if np.shape(start) != (2,):
            raise DimensionMismatch(
                f"{self.name} is defined on R^2, got start with shape {np.shape(start)}."
            )
        return SubgradientConfig(
            objective=self.objective,
            subgradient=self.subgradient,
            start=start,
            **kwargs,
        )


def _quadratic(x: Array) -> float:
    return float(x[0] * x[0] + x[1] * x[1] - 2.0 * x[0] - 2.0 * x[1])


def _quadratic_grad(x: Array) -> Array:
    return np.array([2.0 * x[0] - 2.0, 2.0 * x[1] - 2.0])


def _multimodal(x: Array) -> float:
    return float(np.sin(x[0]) + np.sin(x[1]))


def _multimodal_grad(x: Array) -> Array:
    return np.array([np.cos(x[0]), np.cos(x[1])])


def _abs_sum(x: Array) -> float:
    return float(abs(x[0]) + abs(x[1]))


def _abs_sum_subgrad(x: Array) -> Array:
    # np.sign(0) == 0 picks the zero element of the subdifferential [-1, 1].
    return np.sign(np.asarray(x[:2], dtype=float))


QUADRATIC = BenchmarkProblem(
    name="quadratic",
    description="f(x) = x1^2 + x2^2 - 2x1 - 2x2",
    objective=CallableOracle(_quadratic),
    subgradient=CallableOracle(_quadratic_grad),
    minimizer=(1.0, 1.0),
)

MULTIMODAL = BenchmarkProblem(
    name="multimodal",
    description="f(x) = sin(x1) + sin(x2)",
    objective=CallableOracle(_multimodal),
    subgradient=CallableOracle(_multimodal_grad),
)

NONSMOOTH = BenchmarkProblem(
    name="nonsmooth",
    description="f(x) = |x1| + |x2|",
    objective=CallableOracle(_abs_sum),
    subgradient=CallableOracle(_abs_sum_subgrad),
    minimizer=(0.0, 0.0),
)

PROBLEMS: Dict[str, BenchmarkProblem] = {
    p.name: p for p in (QUADRATIC, MULTIMODAL, NONSMOOTH)
}

# Numeric selectors 1-3.
_MENU = {1: QUADRATIC, 2: MULTIMODAL, 3: NONSMOOTH}


def get_problem(selector: int | str) -> BenchmarkProblem:
    """
    Look up a built-in problem by name or menu number (1-3).

    Raises:
        ConfigurationError: If ``selector`` matches no problem.
    """
    if isinstance(selector, str):
        key = selector.strip().lower()
        if key in PROBLEMS:
            return PROBLEMS[key]
    elif isinstance(selector, int) and not isinstance(selector, bool):
        if selector in _MENU:
            return _MENU[selector]
    raise ConfigurationError(
        f"Unknown problem {selector!r}. Choose one of {sorted(PROBLEMS)} or 1-3."
    )


__all__ = [
    "DEFAULT_START",
    "BenchmarkProblem",
    "QUADRATIC",
    "MULTIMODAL",
    "NONSMOOTH",
    "PROBLEMS",
    "get_problem",
]
