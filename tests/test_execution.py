"""Tests for ExecutionContext implementations."""

from __future__ import annotations

import pytest
import structlog
from tests.helpers import inc

from rop import (
    ComposableExecutionContext,
    ExecutionContext,
    Failure,
    LoggingExecutionContext,
    NoOpExecutionContext,
    Success,
    with_context,
)


class TestNoOpExecutionContext:
    def test_passthrough(self):
        assert NoOpExecutionContext().execute(lambda: Success(42)) == Success(42)

    def test_passthrough_failure(self):
        assert NoOpExecutionContext().execute(lambda: Failure("gone")) == Failure("gone")

    def test_satisfies_protocol(self):
        assert isinstance(NoOpExecutionContext(), ExecutionContext)


class TestLoggingExecutionContext:
    def test_logs_success(self):
        ctx = LoggingExecutionContext(operation="TestOp")
        with structlog.testing.capture_logs() as logs:
            result = ctx.execute(lambda: Success("ok"))
        assert result == Success("ok")
        assert [entry["event"] for entry in logs] == ["execution.started", "execution.completed"]
        assert logs[-1]["operation"] == "TestOp"
        assert logs[-1]["state"] == "SUCCESS"

    def test_logs_failure(self):
        ctx = LoggingExecutionContext(operation="TestOp")
        with structlog.testing.capture_logs() as logs:
            result = ctx.execute(lambda: Failure("missing"))
        assert result == Failure("missing")
        assert logs[-1]["state"] == "FAILURE"

    def test_catches_exception(self):
        def failing():
            raise RuntimeError("exploded")

        ctx = LoggingExecutionContext(operation="Boom")
        with structlog.testing.capture_logs() as logs:
            result = ctx.execute(failing)
        assert isinstance(result.error(), RuntimeError)
        assert logs[-1]["event"] == "execution.raised"
        assert logs[-1]["log_level"] == "error"
        assert logs[-1]["error"] == "exploded"

    def test_wraps_inner_context(self):
        ctx = LoggingExecutionContext(inner=NoOpExecutionContext(), operation="Wrapped")
        assert ctx.execute(lambda: Success(99)) == Success(99)


class TestComposableExecutionContext:
    def test_composes_multiple_contexts(self):
        order: list[str] = []

        class TrackingContext:
            def __init__(self, name: str):
                self.name = name

            def execute(self, computation):
                order.append(f"before-{self.name}")
                result = computation()
                order.append(f"after-{self.name}")
                return result

        composed = ComposableExecutionContext(
            TrackingContext("outer"),
            TrackingContext("inner"),
        )
        assert composed.execute(lambda: Success("done")) == Success("done")
        assert order == ["before-outer", "before-inner", "after-inner", "after-outer"]

    def test_requires_at_least_one_context(self):
        with pytest.raises(ValueError, match="(?i)at least one"):
            ComposableExecutionContext()


class TestWithContext:
    def test_decorator_wraps_function(self):
        @with_context(NoOpExecutionContext())
        def handle(x: int):
            return Success(x) >> inc

        assert handle(5) == Success(6)

    def test_decorator_preserves_name(self):
        @with_context(NoOpExecutionContext())
        def my_handler(x: int):
            """Handler docstring."""
            return Success(x)

        assert my_handler.__name__ == "my_handler"
        assert my_handler.__doc__ == "Handler docstring."

    def test_result_within_context(self):
        assert (Success(5) >> inc).within(NoOpExecutionContext()) == Success(6)
