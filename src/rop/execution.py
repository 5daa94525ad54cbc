"""
Execution contexts — separate WHAT (the pipeline) from HOW it is run.

A pipeline is a pure description built from Results and stages. An execution
context wraps the evaluation of that description with something the pipeline
itself should not know about: timing, logging, a transaction, a lock.

    def pipeline(order: dict) -> Result:
        return Success(order) >> validate >> enrich >> persist

    result = LoggingExecutionContext(operation="CreateOrder").execute(
        lambda: pipeline(order)
    )

    # Or using the decorator
    @with_context(LoggingExecutionContext(operation="CreateOrder"))
    def handle(order: dict) -> Result:
        return pipeline(order)
"""

from __future__ import annotations

import functools
import logging
import time
from typing import Any, Callable, Protocol, TypeVar, runtime_checkable

import structlog

from rop.result import Failure, Result

T = TypeVar("T")
log = structlog.get_logger("rop.execution")


# ──────────────────────── Protocol (Interface) ────────────────────────


@runtime_checkable
class ExecutionContext(Protocol):
    """
    Protocol for execution contexts.

    Any class implementing execute(computation) satisfies this protocol
    via structural typing — no explicit inheritance needed.
    """

    def execute(self, computation: Callable[[], Result[T, Any]]) -> Result[T, Any]:
        """Execute a Result-returning computation within this context."""
        ...


# ──────────────────────── NoOp (Testing) ────────────────────────


class NoOpExecutionContext:
    """
    Passthrough execution context — runs computation without any wrapper.

    Use for unit tests and for code paths that need no instrumentation.
    """

    def execute(self, computation: Callable[[], Result[T, Any]]) -> Result[T, Any]:
        return computation()


# ──────────────────────── Logging ────────────────────────


class LoggingExecutionContext:
    """
    Execution context that logs entry, exit, duration, and result state.

    Wraps another context (decorator pattern) to add observability. An
    exception escaping the computation is logged and returned as
    Failure(exception), making this context a boundary like try_lift().

        ctx = LoggingExecutionContext(operation="CreateOrder")
    """

    def __init__(
        self,
        inner: ExecutionContext | None = None,
        operation: str = "unknown",
        log_level: int = logging.INFO,
    ) -> None:
        self._inner = inner or NoOpExecutionContext()
        self._operation = operation
        self._log_level = log_level

    def execute(self, computation: Callable[[], Result[T, Any]]) -> Result[T, Any]:
        log.log(self._log_level, "execution.started", operation=self._operation)
        start = time.monotonic()

        try:
            result = self._inner.execute(computation)
        except Exception as e:
            log.error(
                "execution.raised",
                operation=self._operation,
                elapsed_s=round(time.monotonic() - start, 3),
                error_type=type(e).__name__,
                error=str(e),
            )
            return Failure(e)

        log.log(
            self._log_level,
            "execution.completed",
            operation=self._operation,
            elapsed_s=round(time.monotonic() - start, 3),
            state="SUCCESS" if result.is_success() else "FAILURE",
        )
        return result


# ──────────────────────── Composable ────────────────────────


class ComposableExecutionContext:
    """
    Compose multiple execution contexts into a single one.

    The first context is the outermost:

        composed = ComposableExecutionContext(
            LoggingExecutionContext(operation="CreateOrder"),
            LockContext(lock),
        )
        # Logging wraps Lock wraps computation
    """

    def __init__(self, *contexts: ExecutionContext) -> None:
        if not contexts:
            raise ValueError("At least one execution context is required")
        self._contexts = tuple(contexts)

    def execute(self, computation: Callable[[], Result[T, Any]]) -> Result[T, Any]:
        # Fold from the last context outwards; each step hands the one inside it
        # over as a zero-argument computation.
        run = functools.reduce(
            lambda inner, ctx: functools.partial(ctx.execute, inner),
            reversed(self._contexts),
            computation,
        )
        return run()


# ──────────────────────── Decorator Helper ────────────────────────


def with_context(ctx: ExecutionContext) -> Callable:
    """
    Decorator running a Result-returning function inside an execution context.

        @with_context(LoggingExecutionContext(operation="CreateOrder"))
        def handle(order: dict) -> Result:
            return Success(order) >> validate >> persist
    """

    def decorator(fn: Callable[..., Result[T, Any]]) -> Callable[..., Result[T, Any]]:
        @functools.wraps(fn)
        def wrapper(*args: Any, **kwargs: Any) -> Result[T, Any]:
            return ctx.execute(lambda: fn(*args, **kwargs))
        return wrapper
    return decorator
