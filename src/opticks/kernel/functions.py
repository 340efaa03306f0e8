"""Function utilities: currying and composition."""

from __future__ import annotations

import inspect
from collections.abc import Callable
from functools import partial, reduce, wraps
from typing import Any, TypeVar

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")

__all__ = ["curry", "compose", "pipe", "identity", "constant"]


def identity(x: A) -> A:
    return x


def constant(value: A) -> Callable[..., A]:
    """Return a function that ignores its arguments and returns ``value``."""
    def const(*_: Any, **__: Any) -> A:
        return value

    return const


def curry(fn: Callable[..., Any], arity: int | None = None) -> Callable[..., Any]:
    """Curry ``fn`` over its required positional parameters.

    Calling the result with fewer than ``arity`` arguments returns a new
    curried function waiting for the rest; once enough arguments have been
    supplied ``fn`` is called.

    Args:
        fn: Function to curry
        arity: Number of arguments to collect. Defaults to the number of
            required positional parameters of ``fn``.

    Returns:
        The curried function
    """
    if arity is None:
        arity = _required_arity(fn)

    @wraps(fn)
    def curried(*args: Any, **kwargs: Any) -> Any:
        if len(args) + len(kwargs) >= arity:
            return fn(*args, **kwargs)
        return curry(partial(fn, *args, **kwargs), arity - len(args) - len(kwargs))

    return curried


def compose2(f: Callable[[B], C], g: Callable[[A], B]) -> Callable[[A], C]:
    def composed(x: A) -> C:
        return f(g(x))

    return composed


def compose(*fns: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """Compose functions right to left: ``compose(f, g)(x) == f(g(x))``."""
    return reduce(compose2, fns, identity)


def pipe(*fns: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """Compose functions left to right: ``pipe(f, g)(x) == g(f(x))``."""
    return compose(*reversed(fns))


def _required_arity(fn: Callable[..., Any]) -> int:
    positional = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)
    return sum(
        1
        for param in inspect.signature(fn).parameters.values()
        if param.kind in positional and param.default is inspect.Parameter.empty
    )
