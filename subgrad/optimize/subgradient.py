"""Subgradient descent for unconstrained non-smooth minimization."""

from __future__ import annotations

from typing import Any, Callable, Optional, Sequence

import numpy as np

from ..diagnostics import assert_dimension, assert_finite, inf_norm, is_debug_enabled
from ..logging import get_logger
from .core import (
    IterationRecord,
    OptimizeResult,
    StepType,
    StopReason,
    SubgradientConfig,
    as_oracle,
)
from .schedules import step_size as schedule_step

logger = get_logger(__name__)

Callback = Callable[[np.ndarray, IterationRecord], None]

_MESSAGES = {
    StopReason.OPTIMAL: "Subgradient tolerance satisfied.",
    StopReason.STEP_COLLAPSED: "Step size fell below the minimum step.",
    StopReason.VALUE_CONVERGED: "Objective change below value tolerance.",
    StopReason.ITERATION_LIMIT: "Maximum iterations reached.",
}


def _evaluate_objective(oracle: Any, x: np.ndarray) -> float:
    value = oracle.evaluate(x)
    assert_finite(value, "objective")
    return float(value)


def _evaluate_subgradient(oracle: Any, x: np.ndarray) -> np.ndarray:
    g = np.asarray(oracle.evaluate(x), dtype=float)
    assert_dimension(g, x.size, "subgradient")
    assert_finite(g, "subgradient")
    return g


def run(
    config: SubgradientConfig,
    callback: Optional[Callback] = None,
    history: bool = False,
) -> OptimizeResult:
    """
    Minimize ``config.objective`` by subgradient descent.

    Each pass evaluates a subgradient ``g`` at the current point, stops if
    every ``|g_j|`` is below ``gradient_tolerance``, computes the scheduled
    step and stops if it is below ``min_step``, applies
    ``x <- x - step * g``, and stops if the objective moved by less than
    ``value_tolerance``. Otherwise an :class:`IterationRecord` is appended to
    the trace. The run ends with ``ITERATION_LIMIT`` once ``max_iterations``
    passes have been made.

    Parameters
    ----------
    config:
        Problem and method settings. Not modified.
    callback:
        Optional ``callback(x, record)`` invoked after every accepted
        iteration with a copy of the current point.
    history:
        If True, store every iterate (starting point included) in
        ``result.history``.

    Returns
    -------
    OptimizeResult
        Final point, objective value, stop reason and the diagnostic trace.

    Raises
    ------
    InvalidStepType
        On the first pass that reaches the step computation if
        ``config.step_type`` is not a known schedule. A start point that
        already satisfies the subgradient tolerance returns OPTIMAL first.
    DimensionMismatch
        If the subgradient oracle returns a vector of the wrong length.
    NumericInstability
        If either oracle produces NaN or infinite values.
    """
    objective = as_oracle(config.objective)
    subgradient = as_oracle(config.subgradient)
    verbose = is_debug_enabled()

    x = np.array(config.start, dtype=float)
    hist: list[np.ndarray] = [x.copy()] if history else []
    trace: list[IterationRecord] = []

    prev_value = _evaluate_objective(objective, x)
    nfev = 1
    njev = 0
    nit = 0
    reason = StopReason.ITERATION_LIMIT

    logger.debug(
        "Starting subgradient descent: dim=%d, step_type=%r, alpha_0=%g, max_iterations=%d",
        config.dim,
        config.step_type,
        config.initial_step,
        config.max_iterations,
    )

    for iteration in range(config.max_iterations):
        nit = iteration + 1
        g = _evaluate_subgradient(subgradient, x)
        njev += 1

        if inf_norm(g) < config.gradient_tolerance:
            reason = StopReason.OPTIMAL
            break

        alpha = schedule_step(config.step_type, config.initial_step, iteration)
        if alpha < config.min_step:
            reason = StopReason.STEP_COLLAPSED
            break

        x = x - alpha * g
        if history:
            hist.append(x.copy())

        current_value = _evaluate_objective(objective, x)
        nfev += 1
        if abs(current_value - prev_value) < config.value_tolerance:
            prev_value = current_value
            reason = StopReason.VALUE_CONVERGED
            break

        prev_value = current_value
        record = IterationRecord(iteration=iteration, value=current_value, step_size=alpha)
        trace.append(record)
        if verbose:
            logger.debug(
                "Iteration %d: value = %.10g, step = %.6g",
                record.iteration,
                record.value,
                record.step_size,
            )
        if callback is not None:
            callback(x.copy(), record)

    logger.info("%s Stopped with %s on iteration %d.", _MESSAGES[reason], reason.name, nit - 1)

    return OptimizeResult(
        x=x,
        fun=prev_value,
        reason=reason,
        message=_MESSAGES[reason],
        nit=nit,
        nfev=nfev,
        njev=njev,
        trace=trace,
        history=hist,
    )


def subgradient_descent(
    objective: Any,
    subgradient: Any,
    start: Sequence[float] | np.ndarray,
    step_type: StepType | int | str = StepType.FIXED,
    max_iter: int = 1000,
    epsilon: float = 1e-6,
    **overrides: Any,
) -> OptimizeResult:
    """
    Run subgradient descent from inline parameters.

    ``epsilon`` is used for both the subgradient and the value tolerance and
    ``max_iter=0`` means no practical limit. Remaining
    :class:`SubgradientConfig` fields (``initial_step``, ``min_step``, ...)
    may be passed as keyword overrides; ``callback`` and ``history`` are
    forwarded to :func:`run`.
    """
    callback = overrides.pop("callback", None)
    history = overrides.pop("history", False)
    settings = {
        "gradient_tolerance": epsilon,
        "value_tolerance": epsilon,
    }
    settings.update(overrides)
    config = SubgradientConfig(
        objective=objective,
        subgradient=subgradient,
        start=start,
        step_type=step_type,
        max_iterations=SubgradientConfig.resolve_max_iterations(max_iter),
        **settings,
    )
    return run(config, callback=callback, history=history)


__all__ = ["run", "subgradient_descent"]
