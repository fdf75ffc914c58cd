#!filepath: gaussian_nb/observability/instrumentation.py
from __future__ import annotations

from collections import OrderedDict
from contextlib import contextmanager
from dataclasses import dataclass, field
from time import perf_counter
from typing import Any, Dict

from gaussian_nb import logs


@dataclass
class Instrumentation:
    """
    Wall time and model metrics for training / classification calls.

    - timeline: leaf timer name -> accumulated seconds (insertion ordered)
    - calls:    leaf timer name -> number of timed calls
    - metrics:  last recorded value per name (training_points, n_classes, ...)

    Rules:
    1. timeline only holds leaf timers (record=True)
    2. record=False timers are pure wall-time scopes with no side effects
    3. Instrumentation never logs on the hot path
    """

    enabled: bool = True
    timeline: Dict[str, float] = field(default_factory=OrderedDict)
    calls: Dict[str, int] = field(default_factory=dict)
    metrics: Dict[str, Any] = field(default_factory=dict)

    @contextmanager
    def timer(self, name: str, *, record: bool = True):
        """
        Repeated leaf timers with the same name accumulate, so a stream of
        single-point updates shows up as one timeline row.
        """
        if not self.enabled:
            yield
            return

        start = perf_counter()
        try:
            yield
        finally:
            if record:
                self.timeline[name] = self.timeline.get(name, 0.0) + perf_counter() - start
                self.calls[name] = self.calls.get(name, 0) + 1

    def record(self, name: str, value: Any) -> None:
        if not self.enabled:
            return
        self.metrics[name] = value

    def generate_timeline_report(self, title: str) -> float:
        logs.info(f"[Timeline] ===== {title} =====")

        total = 0.0
        for name, sec in self.timeline.items():
            logs.info(f"[Timeline] {str(name):<30} {sec:>8.3f}s  calls={self.calls.get(name, 0)}")
            total += sec

        logs.info(f"[Timeline] Total{'':<27} {total:>8.3f}s")
        for name, value in self.metrics.items():
            logs.info(f"[Metric] {name} = {value}")
        return total


# -------------------------------------------------------------
# No-op Instrumentation (observability disabled)
# -------------------------------------------------------------
class NoOpInstrumentation:

    def timer(self, name: str, *, record: bool = True):
        return _NoOpTimer()

    def record(self, name: str, value):
        pass


class _NoOpTimer:
    def __enter__(self):
        pass

    def __exit__(self, exc_type, exc, tb):
        pass
