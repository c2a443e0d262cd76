"""
Metrics backend that writes each measurement to the application log.
"""

from measured.core.config import settings
from measured.core.logger import logger


class LogRecorder:
    """Logs every record through loguru."""

    def __init__(self, level: str = settings.METRIC_LOG_LEVEL):
        self.level = level.upper()

    def record(self, name: str, duration_nanoseconds: int):
        logger.log(self.level, f"{name} latency: {duration_nanoseconds / 1_000_000:.2f} ms")
