from typing import Any, Callable, Optional, Union
from measured.analysis.signature import analyze
from measured.core.exception import UnsupportedDeclarationError
from measured.emission.record import MetricsBackend
from measured.wrapping.async_wrapper import wrap_async
from measured.wrapping.sync_wrapper import wrap_sync


def _marker(
    generator: Callable[..., Any],
    func: Union[Callable[..., Any], str, None],
    name: Optional[str],
    backend: Optional[MetricsBackend],
):
    # @marker("custom_name") passes the label positionally
    if isinstance(func, str):
        if name is not None:
            raise UnsupportedDeclarationError("Metric name given both positionally and as name=")
        func, name = None, func

    def decorator(declaration):
        return generator(analyze(declaration, name=name), backend)

    if func is None:
        return decorator
    return decorator(func)


def measured_function(
    func: Union[Callable[..., Any], str, None] = None,
    *,
    name: Optional[str] = None,
    backend: Optional[MetricsBackend] = None,
):
    """
    Decorator to record the execution time of a synchronous function.

    Usage:
        @measured_function
        def process_data(): ...

        @measured_function("custom_process_name")
        def process_data(): ...

    Args:
        func: The function, or a custom metric name when used with arguments
        name: Custom metric name, defaults to the function name
        backend: Backend for this function only, defaults to the process-wide one

    Raises:
        UnsupportedDeclarationError: If applied to anything but a plain function
    """
    return _marker(wrap_sync, func, name, backend)


def measured_async_function(
    func: Union[Callable[..., Any], str, None] = None,
    *,
    name: Optional[str] = None,
    backend: Optional[MetricsBackend] = None,
):
    """
    Decorator to record the execution time of a coroutine function,
    including time spent suspended and calls that get cancelled.

    The clock starts when the coroutine first runs. A call whose task is
    cancelled before its first step never started executing and emits no
    record; once started, every cancellation or abandonment is measured.

    Same arguments as measured_function.

    Raises:
        UnsupportedDeclarationError: If applied to anything but an async def function
    """
    return _marker(wrap_async, func, name, backend)
