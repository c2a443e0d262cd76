"""
Metric emission: the record shape, the backend interface and the emit call.
"""

from measured.emission.record import MetricRecord, MetricsBackend
from measured.emission.emitter import emit, get_backend, set_backend

__all__ = [
    "MetricRecord",
    "MetricsBackend",
    "emit",
    "get_backend",
    "set_backend",
]
