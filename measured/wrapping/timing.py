"""
Per-invocation timing guard.
Opens when a wrapped call starts and emits exactly one MetricRecord when it
is closed, whichever way control leaves the call.
"""

import time
from typing import Optional
from measured.emission.emitter import emit
from measured.emission.record import MetricRecord, MetricsBackend


class TimingSpan:
    """
    Wall-clock span owned by a single invocation.

    Usable directly (open/close) or as a sync or async context manager.
    """

    def __init__(
        self,
        name: str,
        backend: Optional[MetricsBackend] = None,
        is_async: bool = False,
    ):
        self.name = name
        self.backend = backend
        self.is_async = is_async
        self.start_ns: Optional[int] = None
        self.duration_ns: Optional[int] = None

    @property
    def closed(self) -> bool:
        return self.duration_ns is not None

    def open(self) -> "TimingSpan":
        self.start_ns = time.perf_counter_ns()
        return self

    def close(self) -> Optional[MetricRecord]:
        """
        Stop the clock and emit the measurement.

        Returns:
            The emitted MetricRecord, or None if the span was never opened or
            is already closed
        """
        if self.start_ns is None or self.closed:
            return None

        self.duration_ns = max(0, time.perf_counter_ns() - self.start_ns)
        record = MetricRecord(name=self.name, duration_nanoseconds=self.duration_ns)
        emit(record, self.backend, self.is_async)
        return record

    def __enter__(self) -> "TimingSpan":
        return self.open()

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.close()
        return False

    async def __aenter__(self) -> "TimingSpan":
        self.is_async = True
        return self.open()

    async def __aexit__(self, exc_type, exc, tb) -> bool:
        self.close()
        return False


def timing_span(name: str, backend: Optional[MetricsBackend] = None) -> TimingSpan:
    """
    Measure a block instead of a whole function.

    Example:
        with timing_span("load_config"):
            ...

    Args:
        name: Metric name for the block
        backend: Optional backend, defaults to the process-wide one

    Returns:
        An unopened TimingSpan to use with `with` or `async with`
    """
    return TimingSpan(name, backend)
