"""
Execution-time instrumentation for sync and async functions.

    from measured import measured_function, measured_async_function

    @measured_function
    def add(a: int, b: int) -> int:
        return a + b

    @measured_async_function("fetch_user")
    async def get_user(user_id: str) -> dict:
        ...
"""

from measured.analysis.signature import FunctionDescriptor, analyze
from measured.backends import InMemoryRecorder, LogRecorder, NullRecorder, create_backend
from measured.core.exception import (
    ConfigurationError,
    CustomException,
    UnsupportedDeclarationError,
)
from measured.core.logger import configure_logging
from measured.core.monitor import measured_async_function, measured_function
from measured.emission import MetricRecord, MetricsBackend, emit, get_backend, set_backend
from measured.wrapping import TimingSpan, timing_span, wrap_async, wrap_sync

__version__ = "0.1.0"

__all__ = [
    "measured_function",
    "measured_async_function",
    "analyze",
    "wrap_sync",
    "wrap_async",
    "emit",
    "get_backend",
    "set_backend",
    "create_backend",
    "timing_span",
    "configure_logging",
    "TimingSpan",
    "FunctionDescriptor",
    "MetricRecord",
    "MetricsBackend",
    "InMemoryRecorder",
    "LogRecorder",
    "NullRecorder",
    "CustomException",
    "UnsupportedDeclarationError",
    "ConfigurationError",
]
