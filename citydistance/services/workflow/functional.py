from collections.abc import Callable
from functools import reduce
from typing import Any, TypeVar

T = TypeVar("T")
R = TypeVar("R")


def compose(*functions: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """Left-to-right composition: compose(f, g)(x) == g(f(x))."""
    if not functions:
        raise ValueError("compose() needs at least one function")
    return reduce(lambda f, g: lambda x: g(f(x)), functions)


def map_optional(function: Callable[[T], R]) -> Callable[[T | None], R | None]:
    def mapped(value: T | None) -> R | None:
        return None if value is None else function(value)

    return mapped


def spread(function: Callable[..., R]) -> Callable[[tuple], R]:
    """Adapt a multi-argument function to take a single tuple."""
    return lambda args: function(*args)
