"""Tests for numerical diagnostics."""

import numpy as np
import pytest

from subgrad.diagnostics import assert_dimension, assert_finite, inf_norm, is_finite
from subgrad.errors import DimensionMismatch, NumericInstability


def test_inf_norm() -> None:
    assert inf_norm(np.array([0.5, -3.0, 2.0])) == 3.0
    assert inf_norm(np.zeros(4)) == 0.0
    assert inf_norm(np.array([])) == 0.0


def test_is_finite_scalars_and_arrays() -> None:
    assert is_finite(1.0)
    assert is_finite(np.array([1.0, -2.0]))
    assert not is_finite(float("nan"))
    assert not is_finite(np.array([1.0, np.inf]))


def test_assert_finite_raises_numeric_instability() -> None:
    assert_finite(np.array([1.0, 2.0]), "subgradient")
    with pytest.raises(NumericInstability, match="objective"):
        assert_finite(float("inf"), "objective")
    with pytest.raises(ArithmeticError):
        assert_finite(np.array([np.nan]), "subgradient")


def test_assert_dimension() -> None:
    assert_dimension(np.zeros(3), 3)
    with pytest.raises(DimensionMismatch):
        assert_dimension(np.zeros(2), 3, "subgradient")
    with pytest.raises(DimensionMismatch):
        assert_dimension(np.zeros((3, 1)), 3)
    with pytest.raises(ValueError):
        assert_dimension(np.float64(1.0), 1)
