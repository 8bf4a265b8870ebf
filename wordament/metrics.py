import logging
import time
from contextlib import contextmanager

logger = logging.getLogger("wordament")


class StageTimer:
    """Wall-clock timing for the stages of one solver run (ms)."""

    def __init__(self):
        self.timings: dict[str, float] = {}
        self._start = time.perf_counter()

    @contextmanager
    def stage(self, name: str):
        t0 = time.perf_counter()
        try:
            yield
        finally:
            self.timings[name] = round((time.perf_counter() - t0) * 1000, 1)
            logger.debug("stage=%s elapsed=%.1fms", name, self.timings[name])

    @property
    def total_ms(self) -> float:
        return round((time.perf_counter() - self._start) * 1000, 1)

    def summary(self) -> dict:
        return {**self.timings, "total": self.total_ms}

    def format_summary(self) -> str:
        return " ".join(f"{name}={ms:.1f}ms" for name, ms in self.summary().items())
