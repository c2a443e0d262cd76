"""
Wrapper generator for plain (non-coroutine) functions.
"""

from functools import wraps
from typing import Any, Callable, Optional
from measured.analysis.signature import CLASSMETHOD, STATICMETHOD, FunctionDescriptor
from measured.core.exception import UnsupportedDeclarationError
from measured.emission.record import MetricsBackend
from measured.wrapping.timing import TimingSpan


def apply_binding(wrapper: Callable[..., Any], descriptor: FunctionDescriptor) -> Any:
    """Re-apply the staticmethod/classmethod binding the declaration came with."""
    if descriptor.binding == STATICMETHOD:
        return staticmethod(wrapper)
    if descriptor.binding == CLASSMETHOD:
        return classmethod(wrapper)
    return wrapper


def wrap_sync(descriptor: FunctionDescriptor, backend: Optional[MetricsBackend] = None) -> Any:
    """
    Build the instrumented replacement for a synchronous function.

    Args:
        descriptor: Analyzed declaration, must not be a coroutine function
        backend: Optional backend, resolved per call when omitted

    Returns:
        Replacement with the same name, signature and behaviour

    Raises:
        UnsupportedDeclarationError: If the declaration is a coroutine function
    """
    if descriptor.is_async:
        raise UnsupportedDeclarationError(
            f"{descriptor.qualname} is a coroutine function; use measured_async_function"
        )

    body = descriptor.body
    name = descriptor.name

    @wraps(body)
    def wrapper(*args, **kwargs):
        span = TimingSpan(name, backend).open()
        try:
            return body(*args, **kwargs)
        finally:
            span.close()

    # Keep the original signature for introspection (FastAPI, inspect, IDEs)
    wrapper.__signature__ = descriptor.signature
    wrapper.__measured__ = descriptor
    return apply_binding(wrapper, descriptor)
