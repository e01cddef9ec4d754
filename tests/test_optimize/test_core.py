import numpy as np
import pytest

from subgrad.errors import ConfigurationError, InvalidStepType, SubgradientError
from subgrad.optimize import (
    UNLIMITED_ITERATIONS,
    CallableOracle,
    Oracle,
    StepType,
    StopReason,
    SubgradientConfig,
    as_oracle,
)


def objective(x: np.ndarray) -> float:
    return float(x @ x)


def gradient(x: np.ndarray) -> np.ndarray:
    return 2 * x


def test_config_defaults_and_dimension():
    config = SubgradientConfig(objective=objective, subgradient=gradient, start=[1.0, 2.0, 3.0])
    assert config.dim == 3
    assert config.step_type is StepType.FIXED
    assert config.initial_step == 0.01
    assert config.min_step == 1e-8
    assert config.max_iterations == 1000


def test_config_copies_start_read_only():
    start = [1.0, 2.0]
    config = SubgradientConfig(objective=objective, subgradient=gradient, start=start)
    start[0] = 100.0
    assert np.array_equal(config.start, np.array([1.0, 2.0]))
    with pytest.raises(ValueError):
        config.start[0] = 5.0


@pytest.mark.parametrize(
    "overrides",
    [
        {"start": []},
        {"start": [[1.0, 2.0]]},
        {"start": [1.0, np.nan]},
        {"initial_step": 0.0},
        {"initial_step": -0.1},
        {"min_step": 0.0},
        {"gradient_tolerance": -1e-6},
        {"value_tolerance": float("nan")},
        {"max_iterations": 0},
        {"max_iterations": -5},
        {"max_iterations": 2.5},
        {"max_iterations": "10"},
        {"max_iterations": True},
        {"objective": 42},
    ],
)
def test_config_rejects_invalid_settings(overrides):
    kwargs = {"objective": objective, "subgradient": gradient, "start": [1.0, 2.0]}
    kwargs.update(overrides)
    with pytest.raises(ConfigurationError):
        SubgradientConfig(**kwargs)


@pytest.mark.parametrize("budget", [10.0, np.float64(10), np.int32(10)])
def test_config_accepts_integral_iteration_budgets(budget):
    config = SubgradientConfig(
        objective=objective, subgradient=gradient, start=[1.0, 2.0], max_iterations=budget
    )
    assert config.max_iterations == 10
    assert type(config.max_iterations) is int
    assert len(range(config.max_iterations)) == 10


def test_config_defers_step_type_validation():
    config = SubgradientConfig(
        objective=objective, subgradient=gradient, start=[1.0], step_type=3
    )
    assert config.step_type == 3


def test_resolve_max_iterations_maps_unlimited_sentinel():
    assert SubgradientConfig.resolve_max_iterations(0) == UNLIMITED_ITERATIONS
    assert SubgradientConfig.resolve_max_iterations(250) == 250


def test_step_type_parse():
    assert StepType.parse(StepType.DIMINISHING) is StepType.DIMINISHING
    assert StepType.parse(1) is StepType.FIXED
    assert StepType.parse(np.int64(2)) is StepType.DIMINISHING
    assert StepType.parse(" Fixed ") is StepType.FIXED
    with pytest.raises(InvalidStepType, match="Unsupported step type"):
        StepType.parse(3)


def test_error_hierarchy_is_distinguishable():
    assert issubclass(InvalidStepType, ConfigurationError)
    assert issubclass(ConfigurationError, ValueError)
    assert issubclass(ConfigurationError, SubgradientError)
    assert not any(isinstance(reason, SubgradientError) for reason in StopReason)


def test_as_oracle_wraps_callables():
    oracle = as_oracle(objective)
    assert isinstance(oracle, CallableOracle)
    assert isinstance(oracle, Oracle)
    assert oracle.evaluate(np.array([1.0, 2.0])) == 5.0
    assert oracle(np.array([1.0])) == 1.0


def test_as_oracle_passes_through_oracles():
    class Constant:
        def evaluate(self, point: np.ndarray) -> float:
            return 1.0

    oracle = Constant()
    assert as_oracle(oracle) is oracle


def test_as_oracle_rejects_non_callables():
    with pytest.raises(ConfigurationError):
        as_oracle("not a function")
