"""
Railway-Oriented Programming (ROP) combinators for Python.

Chain fallible steps so that the first failure short-circuits the rest while
success values flow through unchanged.

    from rop import Success, Failure, lifted, try_lifted, observed

    def validate_age(age: int) -> Result:
        if age < 0:
            return Failure("age must be non-negative")
        return Success(age)

    result = (
        Success("30")
        >> try_lifted(int)
        >> validate_age
        >> observed(print)
        >> lifted(lambda age: f"Valid user, age {age}")
    )
"""

from rop.result import Result, Success, Failure
from rop.errors import RopError, FailureError, InvalidResultError
from rop.combinators import (
    wrap_success,
    wrap_failure,
    unwrap,
    sequence,
    lift,
    try_lift,
    observe,
    observe_or_fail,
    tee,
    error_tee,
)
from rop.stages import lifted, try_lifted, observed, observed_or_fail
from rop.pipeline import Pipeline
from rop.execution import (
    ExecutionContext,
    NoOpExecutionContext,
    LoggingExecutionContext,
    ComposableExecutionContext,
    with_context,
)
from rop.config import RopSettings, get_settings
from rop.log import configure_logging
from rop.assertions import ResultAssertions

__all__ = [
    "Result",
    "Success",
    "Failure",
    "RopError",
    "FailureError",
    "InvalidResultError",
    "wrap_success",
    "wrap_failure",
    "unwrap",
    "sequence",
    "lift",
    "try_lift",
    "observe",
    "observe_or_fail",
    "tee",
    "error_tee",
    "lifted",
    "try_lifted",
    "observed",
    "observed_or_fail",
    "Pipeline",
    "ExecutionContext",
    "NoOpExecutionContext",
    "LoggingExecutionContext",
    "ComposableExecutionContext",
    "with_context",
    "RopSettings",
    "get_settings",
    "configure_logging",
    "ResultAssertions",
]

__version__ = "0.6.0"
