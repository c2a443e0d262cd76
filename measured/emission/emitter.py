"""
The single call both wrapper generators use to hand a measurement to a backend.
Emission never raises and never suspends the caller.
"""

import asyncio
import inspect
import threading
from typing import Dict, Optional, Set
from measured.core.config import settings
from measured.core.logger import logger
from measured.emission.record import MetricRecord, MetricsBackend


_backend_lock = threading.Lock()
_override: Optional[MetricsBackend] = None
_configured: Dict[str, MetricsBackend] = {}

# Strong references to fire-and-forget emissions until they finish
_pending: Set[asyncio.Future] = set()


def set_backend(backend: Optional[MetricsBackend]):
    """
    Install the process-wide backend used by decorated functions.

    Args:
        backend: Backend for every decorated function, or None to go back to
            the one built from settings, dropping any cached configured backends
    """
    global _override
    with _backend_lock:
        _override = backend
        if backend is None:
            # Rebuild from current settings on next use
            stale = list(_configured.values())
            _configured.clear()
            for cached in stale:
                close = getattr(cached, "close", None)
                if close is not None:
                    close()
    if backend is None:
        logger.info("Metrics backend reset to configured default")
    else:
        logger.info(f"Metrics backend set to {type(backend).__name__}")


def get_backend(is_async: bool = False) -> MetricsBackend:
    """
    Return the backend emissions go to when a decorator has none of its own.

    Args:
        is_async: Whether the emitting function is a coroutine function; the
            prometheus backend keeps a separate histogram family for those

    Returns:
        The installed backend, or the one built from settings
    """
    # Imported here, backends depend on the record module of this package
    from measured.backends import PROMETHEUS, create_backend

    with _backend_lock:
        if _override is not None:
            return _override

        kind = settings.METRICS_BACKEND.lower()
        metric_name = settings.ASYNC_METRIC_NAME if is_async else settings.SYNC_METRIC_NAME
        key = f"{kind}:{metric_name}" if kind == PROMETHEUS else kind

        if key not in _configured:
            _configured[key] = create_backend(kind, metric_name=metric_name)
            logger.info(f"Created {kind} metrics backend")
        return _configured[key]


def _on_emission_done(task: asyncio.Future):
    _pending.discard(task)
    if task.cancelled():
        return
    error = task.exception()
    if error is not None:
        logger.opt(exception=error).warning(f"Asynchronous metric emission failed: {error}")


def _schedule(awaitable, record: MetricRecord):
    try:
        loop = asyncio.get_running_loop()
    except RuntimeError:
        logger.warning(
            f"Backend returned an awaitable for {record.name} outside an event loop; dropping it"
        )
        if inspect.iscoroutine(awaitable):
            awaitable.close()
        return

    task = asyncio.ensure_future(awaitable, loop=loop)
    _pending.add(task)
    task.add_done_callback(_on_emission_done)


def emit(
    record: MetricRecord,
    backend: Optional[MetricsBackend] = None,
    is_async: bool = False,
):
    """
    Forward a MetricRecord to a backend on a best-effort basis.

    Args:
        record: The measurement to deliver
        backend: Explicit backend, defaults to get_backend(is_async)
        is_async: Whether the measurement came from a coroutine function
    """
    try:
        target = backend if backend is not None else get_backend(is_async)
        result = target.record(record.name, record.duration_nanoseconds)
        if inspect.isawaitable(result):
            _schedule(result, record)
    except Exception as e:
        logger.opt(exception=e).warning(f"Failed to record metric {record.name}: {e}")
