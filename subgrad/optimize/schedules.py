"""Step-size schedules for the subgradient method."""

from __future__ import annotations

import math

from .core import StepType


def fixed_step(initial_step: float, iteration: int) -> float:
    """Constant schedule ``alpha_k = alpha_0``."""
    return float(initial_step)


def diminishing_step(initial_step: float, iteration: int) -> float:
    """
    Square-root diminishing schedule ``alpha_k = alpha_0 / sqrt(k + 1)``.

    The sequence is strictly decreasing, bounded by ``alpha_0`` and tends to
    zero; its sum diverges while its square sum only grows logarithmically,
    which is what non-smooth convergence results require.

    Parameters
    ----------
    initial_step:
        Base step ``alpha_0``.
    iteration:
        Zero-based iteration index ``k``.
    """
    return float(initial_step) / math.sqrt(iteration + 1.0)


# Beyond this ratio the squared bound overflows a float.
_MAX_STEP_RATIO = 1e150

_SCHEDULES = {
    StepType.FIXED: fixed_step,
    StepType.DIMINISHING: diminishing_step,
}


def step_size(step_type: StepType | int | str, initial_step: float, iteration: int) -> float:
    """
    Return the step size of ``step_type`` at zero-based ``iteration``.

    Raises
    ------
    InvalidStepType
        If ``step_type`` is not a known schedule.
    ValueError
        If ``iteration`` is negative.
    """
    schedule = _SCHEDULES[StepType.parse(step_type)]
    if iteration < 0:
        raise ValueError(f"iteration must be non-negative, got {iteration}.")
    return schedule(initial_step, iteration)


def first_collapsed_iteration(initial_step: float, min_step: float) -> int:
    """
    Smallest iteration at which the diminishing step drops below ``min_step``.

    A DIMINISHING run that has not stopped earlier is guaranteed to end with
    ``StopReason.STEP_COLLAPSED`` on this iteration.
    """
    if initial_step <= 0.0 or min_step <= 0.0:
        raise ValueError("initial_step and min_step must be positive.")
    # alpha_0 / sqrt(k + 1) < min_step  <=>  k + 1 > (alpha_0 / min_step)^2
    ratio = initial_step / min_step
    if not math.isfinite(ratio) or ratio > _MAX_STEP_RATIO:
        raise ValueError(
            f"Step ratio {initial_step}/{min_step} is too large to count iterations."
        )
    k = max(0, math.floor(ratio * ratio) - 1)
    # Correct for floating point rounding at the boundary.
    while k > 0 and diminishing_step(initial_step, k - 1) < min_step:
        k -= 1
    while diminishing_step(initial_step, k) >= min_step:
        k += 1
    return k


__all__ = ["fixed_step", "diminishing_step", "step_size", "first_collapsed_iteration"]
