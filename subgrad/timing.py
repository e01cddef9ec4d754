"""Wall-clock timing around optimizer runs.

The timer lives outside the optimization loop: wrap a call to
:func:`subgrad.optimize.run` with :class:`Timer` or decorate a driver function
with :func:`timed`.
"""

from __future__ import annotations

import functools
import time
from typing import Any, Callable, Optional, TypeVar

from .logging import get_logger

logger = get_logger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


class Timer:
    """Context manager measuring elapsed wall-clock time.

    Example:
        >>> from subgrad.timing import Timer
        >>> with Timer("demo") as timer:
        ...     pass
        >>> timer.elapsed >= 0.0
        True
    """

    def __init__(self, label: str = "Minimization") -> None:
        self.label = label
        self.elapsed: float = 0.0
        self._start: Optional[float] = None

    def __enter__(self) -> "Timer":
        self._start = time.perf_counter()
        return self

    def __exit__(self, *exc_info: object) -> None:
        if self._start is None:
            raise RuntimeError("Timer was not entered")
        self.elapsed = time.perf_counter() - self._start
        logger.info("%s finished in %.6f s", self.label, self.elapsed)


def timed(fn: F) -> F:
    """Decorator logging how long each call to ``fn`` takes."""

    @functools.wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        with Timer(fn.__name__):
            return fn(*args, **kwargs)

    return wrapper  # type: ignore[return-value]


__all__ = ["Timer", "timed"]
