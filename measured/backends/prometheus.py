"""
Prometheus metrics backend.
Observes durations in seconds on a Histogram labelled by function name.
"""

from typing import Optional, Sequence
from prometheus_client import REGISTRY, CollectorRegistry, Histogram
from measured.core.config import settings
from measured.core.logger import logger


class PrometheusRecorder:
    """
    Records measurements into a prometheus_client Histogram.
    Queried as e.g. function_duration_seconds{function="process_data"}.
    """

    def __init__(
        self,
        metric_name: str = settings.SYNC_METRIC_NAME,
        description: str = "Execution time of measured functions",
        registry: Optional[CollectorRegistry] = REGISTRY,
        buckets: Sequence[float] = Histogram.DEFAULT_BUCKETS,
    ):
        """
        Register the histogram.

        Args:
            metric_name: Histogram family name
            description: Help text exported with the family
            registry: Registry to register with, None to skip registration
            buckets: Upper bounds in seconds
        """
        self.metric_name = metric_name
        self.registry = registry
        self.histogram = Histogram(
            metric_name,
            description,
            ["function"],
            registry=registry,
            buckets=buckets,
        )
        logger.info(f"Registered prometheus histogram: {metric_name}")

    def record(self, name: str, duration_nanoseconds: int):
        self.histogram.labels(function=name).observe(duration_nanoseconds / 1_000_000_000)

    def close(self):
        """Unregister the histogram so the family name can be registered again."""
        if self.registry is not None:
            self.registry.unregister(self.histogram)
            self.registry = None
            logger.info(f"Unregistered prometheus histogram: {self.metric_name}")
