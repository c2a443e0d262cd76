"""
Wrapper generator for coroutine functions.
The span covers every suspension point, and cancelled or abandoned calls are
still measured.
"""

import asyncio
from functools import wraps
from typing import Any, Optional
from measured.analysis.signature import FunctionDescriptor
from measured.core.exception import UnsupportedDeclarationError
from measured.core.logger import logger
from measured.emission.record import MetricsBackend
from measured.wrapping.sync_wrapper import apply_binding
from measured.wrapping.timing import TimingSpan


def wrap_async(descriptor: FunctionDescriptor, backend: Optional[MetricsBackend] = None) -> Any:
    """
    Build the instrumented replacement for a coroutine function.

    Args:
        descriptor: Analyzed declaration, must be a coroutine function
        backend: Optional backend, resolved per call when omitted

    Returns:
        Coroutine function with the same name, signature and behaviour

    Raises:
        UnsupportedDeclarationError: If the declaration is not a coroutine function
    """
    if not descriptor.is_async:
        raise UnsupportedDeclarationError(
            f"{descriptor.qualname} is not a coroutine function; use measured_function"
        )

    body = descriptor.body
    name = descriptor.name

    @wraps(body)
    async def wrapper(*args, **kwargs):
        span = TimingSpan(name, backend, is_async=True).open()
        try:
            return await body(*args, **kwargs)
        except (asyncio.CancelledError, GeneratorExit):
            record = span.close()
            if record is not None:
                logger.debug(
                    f"{name} abandoned after {record.duration_nanoseconds / 1_000_000:.2f} ms"
                )
            raise
        finally:
            span.close()

    wrapper.__signature__ = descriptor.signature
    wrapper.__measured__ = descriptor
    return apply_binding(wrapper, descriptor)
