"""
Metrics backends and a factory to build one by name.
"""

from typing import Optional
from measured.core.config import settings
from measured.core.exception import ConfigurationError
from measured.emission.record import MetricsBackend
from measured.backends.memory import InMemoryRecorder
from measured.backends.log import LogRecorder
from measured.backends.null import NullRecorder

MEMORY = "memory"
LOG = "log"
PROMETHEUS = "prometheus"
NULL = "null"


def create_backend(kind: str, metric_name: Optional[str] = None) -> MetricsBackend:
    """
    Factory function to build a metrics backend.

    Args:
        kind: One of memory, log, prometheus or null
        metric_name: Histogram family name, only used by prometheus

    Returns:
        Configured backend

    Raises:
        ConfigurationError: If the kind is unknown
    """
    kind = kind.lower()

    if kind == MEMORY:
        return InMemoryRecorder()
    if kind == LOG:
        return LogRecorder(level=settings.METRIC_LOG_LEVEL)
    if kind == NULL:
        return NullRecorder()
    if kind == PROMETHEUS:
        # prometheus_client is only needed when this backend is selected
        from measured.backends.prometheus import PrometheusRecorder
        return PrometheusRecorder(metric_name=metric_name or settings.SYNC_METRIC_NAME)

    raise ConfigurationError(
        f"Unknown metrics backend {kind!r}, expected one of {MEMORY}, {LOG}, {PROMETHEUS}, {NULL}"
    )


__all__ = [
    "InMemoryRecorder",
    "LogRecorder",
    "NullRecorder",
    "create_backend",
    "MEMORY",
    "LOG",
    "PROMETHEUS",
    "NULL",
]
