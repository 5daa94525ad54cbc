"""
Combinators — the railway protocol as plain functions.

Every combinator takes (value, stage) in that order, so a pipeline reads the
way data flows through it:

    result = sequence(sequence(lift(1, str), validate), persist)

For infix chaining use `>>` on a Result together with the one-argument
adapters in rop.stages:

    result = Success(1) >> lifted(str) >> validate >> persist

Construction:  wrap_success, wrap_failure
Consumption:   unwrap
Sequencing:    sequence
Lifting:       lift, try_lift
Tees:          observe (tee), observe_or_fail (error_tee)

Failure payloads are opaque here: no combinator inspects or rewrites them.
"""

from __future__ import annotations

from typing import Any, Callable, TypeVar

import structlog

from rop.config import trace_enabled
from rop.errors import InvalidResultError
from rop.result import Failure, Result, Success

T = TypeVar("T")
U = TypeVar("U")

log = structlog.get_logger("rop.combinators")

_TRACKS = (Success, Failure)


# ──────────────────────── Construction & Consumption ────────────────────────


def wrap_success(value: Any) -> Result[Any, Any]:
    """
    Put a value on the success track unless it is already on a track.

        wrap_success(1)             # → Success(1)
        wrap_success(Success(1))    # → Success(1), not Success(Success(1))
        wrap_success(Failure("x"))  # → Failure("x"), failure is absorptive

    Note the asymmetry with wrap_failure(), which always wraps.
    """
    return Result.of(value)


def wrap_failure(value: Any) -> Result[Any, Any]:
    """
    Put a value on the failure track, unconditionally.

    Unlike wrap_success() there is no normalization: wrap_failure(Success(1))
    is Failure(Success(1)). Callers may rely on the nesting.
    """
    return Failure(value)


def unwrap(result: Any) -> Any:
    """
    Return the value of a Success, raise for anything else.

      - Success(v)              → v
      - Failure(exception)      → raises that exception
      - Failure(other payload)  → raises FailureError(payload)
      - not a Result            → raises InvalidResultError (API misuse)

    This is the one way out of the railway into exception-based code.
    """
    if not isinstance(result, _TRACKS):
        raise InvalidResultError(result, "unwrap")
    return result.unwrap()


# ──────────────────────── Sequencing ────────────────────────


def sequence(result: Any, stage: Callable[[Any], Any]) -> Any:
    """
    Feed a Success into the next stage; let a Failure through untouched.

    The stage's return is passed back as-is. For a Failure the stage is not
    called at all, which is what makes side effects in later stages safe.
    """
    if not isinstance(result, _TRACKS):
        raise InvalidResultError(result, "sequence")
    return result.flat_map(stage)


# ──────────────────────── Lifting ────────────────────────


def lift(value: T, func: Callable[[T], U]) -> Result[U, Any]:
    """
    Call an ordinary function and put its return on the success track.

    The return is always wrapped, even if it already is a Result. Exceptions
    raised by func propagate; use try_lift() at fault-raising boundaries.
    """
    return Success(func(value))


def try_lift(value: T, func: Callable[[T], U]) -> Result[U, Exception]:
    """
    Like lift(), but an exception raised by func becomes Failure(exception).

    KeyboardInterrupt, SystemExit and other non-Exception errors still
    propagate. With ROP_TRACE_STAGES set, each caught fault is logged at
    debug level.
    """
    try:
        return Success(func(value))
    except Exception as e:
        if trace_enabled():
            log.debug(
                "rop.try_lift.fault_caught",
                stage=getattr(func, "__name__", repr(func)),
                error_type=type(e).__name__,
                error=str(e),
            )
        return Failure(e)


# ──────────────────────── Tees ────────────────────────


def observe(value: T, func: Callable[[T], Any]) -> Result[T, Any]:
    """
    Run func for its side effect and pass the input on as Success(value).

    Named after the Unix tee utility. func's return value is discarded,
    Failures included.
    """
    func(value)
    return Success(value)


def observe_or_fail(value: T, func: Callable[[T], Any]) -> Result[T, Any]:
    """
    Run func for its side effect; let it veto the pipeline by returning a Failure.

        observe_or_fail(1, lambda x: Success(99))    # → Success(1)
        observe_or_fail(1, lambda x: Failure("bad")) # → Failure("bad")
    """
    outcome = func(value)
    if isinstance(outcome, Failure):
        return outcome
    return Success(value)


tee = observe
error_tee = observe_or_fail
