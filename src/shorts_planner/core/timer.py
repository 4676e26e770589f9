"""
Step Timer — tracks elapsed time for each planning step.

Usage:
    timer = StepTimer()
    with timer.step("Model generation"):
        await generator.generate(request)
    log.info("Done in %.2fs", timer.total_elapsed)
"""

from __future__ import annotations

import logging
import time
from collections.abc import Generator
from contextlib import contextmanager
from dataclasses import dataclass, field

log = logging.getLogger(__name__)


@dataclass
class StepTimer:
    """Tracks elapsed time for the steps of a single request."""

    _start: float = field(default_factory=time.perf_counter, init=False, repr=False)

    @contextmanager
    def step(self, name: str) -> Generator[None, None, None]:
        """Time a step using a context manager.

        The step is logged even when the body raises.

        Args:
            name: Display name for the step.
        """
        started = time.perf_counter()
        try:
            yield
        finally:
            log.info("%s finished in %.2fs", name, time.perf_counter() - started)

    @property
    def total_elapsed(self) -> float:
        """Total elapsed time since timer creation."""
        return time.perf_counter() - self._start
