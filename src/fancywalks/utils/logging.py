"""
Timing of pipeline phases.

Each phase (load_kmz, extract_walks, export_csv) logs one line when it ends,
with ``phase`` and ``duration_ms`` attached for the JSON file log.
"""

import functools
import logging
import time
from typing import Any, Callable, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class PhaseTimer:
    """
    Context manager timing one pipeline phase.

    Usage:
        with PhaseTimer("extract_walks") as timer:
            result = extractor.extract(root)
        timer.duration_ms
    """

    def __init__(self, phase: str, level: int = logging.INFO):
        self.phase = phase
        self.level = level
        self.duration_ms: Optional[float] = None
        self._started = 0.0

    def __enter__(self) -> "PhaseTimer":
        self._started = time.perf_counter()
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.duration_ms = (time.perf_counter() - self._started) * 1000
        outcome = "failed" if exc_type is not None else "finished"
        logger.log(
            self.level,
            f"{self.phase} {outcome} in {self.duration_ms:.1f}ms",
            extra={"phase": self.phase, "duration_ms": self.duration_ms},
        )


def timed_phase(phase: str, level: int = logging.INFO) -> Callable[[Callable[..., T]], Callable[..., T]]:
    """Run the decorated function inside a PhaseTimer named ``phase``."""

    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> T:
            with PhaseTimer(phase, level):
                return func(*args, **kwargs)

        return wrapper

    return decorator
