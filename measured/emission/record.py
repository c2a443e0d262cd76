"""
Metric record shape and the backend interface it is delivered to.
"""

from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable


@dataclass(frozen=True)
class MetricRecord:
    """One measured invocation."""
    name: str
    duration_nanoseconds: int

    def __post_init__(self):
        if isinstance(self.duration_nanoseconds, bool) or not isinstance(self.duration_nanoseconds, int):
            raise ValueError(f"duration_nanoseconds must be an int, got {self.duration_nanoseconds!r}")
        if self.duration_nanoseconds < 0:
            raise ValueError(f"duration_nanoseconds must be non-negative, got {self.duration_nanoseconds}")


@runtime_checkable
class MetricsBackend(Protocol):
    """
    Anything with a record(name, duration_nanoseconds) method.
    The method may return an awaitable, which is then scheduled without waiting.
    """

    def record(self, name: str, duration_nanoseconds: int) -> Any:
        ...
