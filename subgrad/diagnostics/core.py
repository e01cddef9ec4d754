"""Numerical sanity checks applied to oracle outputs."""

from __future__ import annotations

import numpy as np

from ..errors import DimensionMismatch, NumericInstability


def inf_norm(vec: np.ndarray) -> float:
    """
    Return the infinity norm ``max_j |vec_j|`` of a vector.

    An empty vector has norm 0.0.
    """
    arr = np.asarray(vec, dtype=float)
    if arr.size == 0:
        return 0.0
    return float(np.max(np.abs(arr)))


def is_finite(value: float | np.ndarray) -> bool:
    """Return True if a scalar or every entry of an array is finite."""
    return bool(np.all(np.isfinite(np.asarray(value, dtype=float))))


def assert_finite(value: float | np.ndarray, what: str = "value") -> None:
    """
    Assert that a scalar or array holds only finite numbers.

    Parameters
    ----------
    value:
        Scalar or array to check.
    what:
        Name used in the error message (e.g. ``"objective"``).

    Raises
    ------
    NumericInstability
        If any entry is NaN or infinite.
    """
    if not is_finite(value):
        raise NumericInstability(f"{what} produced non-finite values: {value!r}")


def assert_dimension(vec: np.ndarray, dim: int, what: str = "vector") -> None:
    """
    Assert that ``vec`` is a 1-D vector of length ``dim``.

    Raises
    ------
    DimensionMismatch
        If the shape differs from ``(dim,)``.
    """
    shape = np.shape(vec)
    if shape != (dim,):
        raise DimensionMismatch(
            f"{what} has shape {shape}, expected ({dim},)."
        )


__all__ = ["inf_norm", "is_finite", "assert_finite", "assert_dimension"]
