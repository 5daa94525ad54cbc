"""
One-argument stage adapters for `>>`, .flat_map(), sequence() and Pipeline.

Each adapter fixes the function argument of a combinator and leaves the value
open, so an ordinary function can sit to the right of `>>`:

    (
        Success(order)
        >> lifted(normalize)           # plain function, cannot fail
        >> try_lifted(parse_amount)    # may raise → Failure(exception)
        >> observed(audit)             # side effect, value unchanged
        >> observed_or_fail(check)     # side effect that may veto
        >> persist                     # already returns a Result
    )

functools.wraps keeps the wrapped function's name for stage tracing.
"""

from __future__ import annotations

import functools
from typing import Any, Callable, TypeVar

from rop.combinators import lift, observe, observe_or_fail, try_lift
from rop.result import Result

T = TypeVar("T")
U = TypeVar("U")

Stage = Callable[[Any], Any]


def lifted(func: Callable[[T], U]) -> Callable[[T], Result[U, Any]]:
    """Adapt a plain function with lift()."""

    @functools.wraps(func)
    def stage(value: T) -> Result[U, Any]:
        return lift(value, func)

    return stage


def try_lifted(func: Callable[[T], U]) -> Callable[[T], Result[U, Exception]]:
    """Adapt a function that may raise with try_lift()."""

    @functools.wraps(func)
    def stage(value: T) -> Result[U, Exception]:
        return try_lift(value, func)

    return stage


def observed(func: Callable[[T], Any]) -> Callable[[T], Result[T, Any]]:
    """Adapt a side-effecting function with observe()."""

    @functools.wraps(func)
    def stage(value: T) -> Result[T, Any]:
        return observe(value, func)

    return stage


def observed_or_fail(func: Callable[[T], Any]) -> Callable[[T], Result[T, Any]]:
    """Adapt a side-effecting function that may veto with observe_or_fail()."""

    @functools.wraps(func)
    def stage(value: T) -> Result[T, Any]:
        return observe_or_fail(value, func)

    return stage


def stage_name(stage: Stage) -> str:
    """Best-effort human name for a stage, used in logs."""
    return getattr(stage, "__qualname__", None) or getattr(stage, "__name__", None) or repr(stage)
