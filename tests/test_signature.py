import abc
import dataclasses
import functools
import inspect
import math
from typing import Callable, Dict, List, Optional, TypeVar

import pytest

from measured.analysis.signature import (
    CLASSMETHOD,
    FUNCTION,
    PRIVATE,
    PUBLIC,
    SPECIAL,
    STATICMETHOD,
    analyze,
)
from measured.core.exception import CustomException, UnsupportedDeclarationError

T = TypeVar("T")
K = TypeVar("K")


def add(a: int, b: int = 1, *rest: int, scale: float = 1.0, **options: str) -> int:
    return a + b


async def fetch(url: str) -> bytes:
    return b""


def first(items: List[T], fallback: Optional[T] = None) -> T:
    return items[0] if items else fallback


def index(keys: List[K], factory: Callable[[K], T]) -> Dict[K, T]:
    return {k: factory(k) for k in keys}


def test_descriptor_for_sync_function():
    d = analyze(add)

    assert d.name == "add"
    assert d.qualname == "add"
    assert d.is_async is False
    assert d.visibility == PUBLIC
    assert d.binding == FUNCTION
    assert [p.name for p in d.parameters] == ["a", "b", "rest", "scale", "options"]
    assert d.parameters[2].kind is inspect.Parameter.VAR_POSITIONAL
    assert d.return_type is int
    assert d.signature == inspect.signature(add)
    assert d.body is add


def test_async_detection_is_syntactic():
    assert analyze(fetch).is_async is True

    def returns_coroutine(url: str):
        return fetch(url)

    assert analyze(returns_coroutine).is_async is False


def test_custom_name_overrides_label():
    d = analyze(add, name="custom_add")
    assert d.name == "custom_add"
    assert d.qualname == "add"


def test_generic_parameters_in_first_seen_order():
    assert analyze(first).generic_parameters == (T,)
    assert analyze(index).generic_parameters == (K, T)
    assert analyze(add).generic_parameters == ()


def test_visibility_from_declared_name():
    def _helper():
        pass

    def __call__():
        pass

    assert analyze(_helper).visibility == PRIVATE
    assert analyze(__call__).visibility == SPECIAL


def test_analysis_is_idempotent():
    assert analyze(first) == analyze(first)
    assert analyze(fetch, name="x") == analyze(fetch, name="x")


def test_descriptor_is_immutable():
    d = analyze(add)
    with pytest.raises(dataclasses.FrozenInstanceError):
        d.name = "other"


def test_static_and_class_methods_keep_binding():
    assert analyze(staticmethod(add)).binding == STATICMETHOD
    assert analyze(classmethod(add)).binding == CLASSMETHOD
    assert analyze(staticmethod(add)).body is add


@pytest.mark.parametrize(
    "item",
    [
        42,
        "add",
        math,
        len,
        functools.partial(add, 1),
        type("Widget", (), {}),
        object(),
    ],
)
def test_non_functions_are_rejected(item):
    with pytest.raises(UnsupportedDeclarationError):
        analyze(item)


def test_bound_methods_are_rejected():
    class Service:
        def run(self):
            pass

    with pytest.raises(UnsupportedDeclarationError):
        analyze(Service().run)


def test_unbounded_bodies_are_rejected():
    def numbers():
        yield 1

    async def stream():
        yield 1

    class Base(abc.ABC):
        @abc.abstractmethod
        def handle(self):
            ...

    for item in (numbers, stream, Base.handle):
        with pytest.raises(UnsupportedDeclarationError):
            analyze(item)


@pytest.mark.parametrize("name", ["", 5])
def test_bad_metric_names_are_rejected(name):
    with pytest.raises(UnsupportedDeclarationError):
        analyze(add, name=name)


def test_error_hierarchy():
    assert issubclass(UnsupportedDeclarationError, CustomException)
    assert issubclass(UnsupportedDeclarationError, TypeError)
