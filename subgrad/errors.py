"""Exception hierarchy for subgrad.

Failures are kept apart from the normal stop reasons of an optimizer run: a
run either returns an :class:`~subgrad.optimize.core.OptimizeResult` or raises
one of the exceptions below.
"""

from __future__ import annotations


class SubgradientError(Exception):
    """Base class for all errors raised by subgrad."""


class ConfigurationError(SubgradientError, ValueError):
    """Raised when a configuration or a problem selector is invalid."""


class InvalidStepType(ConfigurationError):
    """Raised when the step-size schedule is not one of the known types."""


class DimensionMismatch(SubgradientError, ValueError):
    """Raised when an oracle returns a vector of the wrong length."""


class NumericInstability(SubgradientError, ArithmeticError):
    """Raised when an oracle produces NaN or infinite values."""


__all__ = [
    "SubgradientError",
    "ConfigurationError",
    "InvalidStepType",
    "DimensionMismatch",
    "NumericInstability",
]
