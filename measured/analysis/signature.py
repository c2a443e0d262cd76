"""
Signature analysis for decorated functions.
Extracts the metadata the wrapper generators need and rejects declarations
that cannot be instrumented.
"""

import inspect
import typing
from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Tuple
from measured.core.exception import UnsupportedDeclarationError


PUBLIC = "public"
PRIVATE = "private"
SPECIAL = "special"

FUNCTION = "function"
STATICMETHOD = "staticmethod"
CLASSMETHOD = "classmethod"

_TYPE_PARAMETER_TYPES = tuple(
    t for t in (
        typing.TypeVar,
        getattr(typing, "ParamSpec", None),
        getattr(typing, "TypeVarTuple", None),
    )
    if t is not None
)


@dataclass(frozen=True)
class FunctionDescriptor:
    """Immutable description of a function declaration."""
    name: str
    qualname: str
    is_async: bool
    visibility: str
    generic_parameters: Tuple[Any, ...]
    parameters: Tuple[inspect.Parameter, ...]
    return_type: Any
    signature: inspect.Signature
    binding: str
    body: Callable[..., Any]


def _unwrap_binding(declaration: Any) -> Tuple[Any, str]:
    if isinstance(declaration, staticmethod):
        return declaration.__func__, STATICMETHOD
    if isinstance(declaration, classmethod):
        return declaration.__func__, CLASSMETHOD
    return declaration, FUNCTION


def _visibility(name: str) -> str:
    if name.startswith("__") and name.endswith("__"):
        return SPECIAL
    if name.startswith("_"):
        return PRIVATE
    return PUBLIC


def _collect_type_parameters(annotation: Any, found: List[Any]):
    """Append type parameters referenced by an annotation in first-seen order."""
    # P.args / P.kwargs point back at their ParamSpec
    origin = getattr(annotation, "__origin__", None)
    if isinstance(origin, _TYPE_PARAMETER_TYPES) and not isinstance(annotation, _TYPE_PARAMETER_TYPES):
        annotation = origin

    if isinstance(annotation, _TYPE_PARAMETER_TYPES):
        if annotation not in found:
            found.append(annotation)
        return

    for arg in typing.get_args(annotation):
        if isinstance(arg, (list, tuple)):
            for item in arg:
                _collect_type_parameters(item, found)
        else:
            _collect_type_parameters(arg, found)


def _generic_parameters(func: Callable[..., Any], signature: inspect.Signature) -> Tuple[Any, ...]:
    declared = getattr(func, "__type_params__", ())
    if declared:
        return tuple(declared)

    found: List[Any] = []
    for parameter in signature.parameters.values():
        if parameter.annotation is not inspect.Parameter.empty:
            _collect_type_parameters(parameter.annotation, found)
    if signature.return_annotation is not inspect.Signature.empty:
        _collect_type_parameters(signature.return_annotation, found)
    return tuple(found)


def analyze(declaration: Any, name: Optional[str] = None) -> FunctionDescriptor:
    """
    Validate a declaration and extract its FunctionDescriptor.

    Args:
        declaration: A function, or a staticmethod/classmethod wrapping one
        name: Optional custom metric name, defaults to the function name

    Returns:
        FunctionDescriptor for the declaration

    Raises:
        UnsupportedDeclarationError: If the declaration cannot be instrumented
    """
    func, binding = _unwrap_binding(declaration)

    if not inspect.isfunction(func):
        raise UnsupportedDeclarationError(
            f"Only functions can be measured, got {type(declaration).__name__}: {declaration!r}"
        )

    if getattr(declaration, "__isabstractmethod__", False) or getattr(func, "__isabstractmethod__", False):
        raise UnsupportedDeclarationError(
            f"{func.__qualname__} is abstract and has no body to measure"
        )

    if inspect.isgeneratorfunction(func) or inspect.isasyncgenfunction(func):
        raise UnsupportedDeclarationError(
            f"{func.__qualname__} is a generator; only functions with a single exit can be measured"
        )

    if name is not None and (not isinstance(name, str) or not name):
        raise UnsupportedDeclarationError(f"Metric name must be a non-empty string, got {name!r}")

    signature = inspect.signature(func)

    return FunctionDescriptor(
        name=name or func.__name__,
        qualname=func.__qualname__,
        is_async=inspect.iscoroutinefunction(func),
        visibility=_visibility(func.__name__),
        generic_parameters=_generic_parameters(func, signature),
        parameters=tuple(signature.parameters.values()),
        return_type=signature.return_annotation,
        signature=signature,
        binding=binding,
        body=func,
    )
