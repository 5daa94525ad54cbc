"""
Result — the tagged union at the heart of railway-oriented programming.

A Result[T, E] is either Success(value: T) or Failure(error: E). The error
payload is never interpreted: it may be an exception instance, a structured
error object or any plain value the caller chose to mean "this failed".

    ┌───────────┐      >>       ┌───────────┐      >>       ┌──────────┐
    │ validate  │──Success──────│  enrich   │──Success──────│ persist  │──→ Result
    │           │               │           │               │          │
    └─────┬─────┘               └─────┬─────┘               └─────┬────┘
          │ Failure                   │ Failure                   │ Failure
          └───────────────────────────┴───────────────────────────┴──→ Result

Stages are chained with `>>` (or the equivalent .flat_map()). A stage receives
the plain success value and its return is handed on untouched; a Failure skips
every stage to its right.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, TypeVar

from rop.errors import FailureError

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")
F = TypeVar("F")
R = TypeVar("R")


class Result(Generic[T, E]):
    """
    Railway-Oriented Programming Result.

    Two possible states:
      - Success(value) — the happy path
      - Failure(error) — the error track

    Usage:
        >>> inc = lambda x: Success(x + 1)
        >>> Success(1) >> inc >> inc
        Success(3)

        >>> (Failure("bad") >> inc).is_failure()
        True
    """

    __slots__ = ()

    def __new__(cls, *args: Any, **kwargs: Any) -> Result[T, E]:
        if cls is Result:
            raise TypeError("Result cannot be instantiated; use Success or Failure")
        return object.__new__(cls)

    # ──────────────────────── Introspection ────────────────────────

    def is_success(self) -> bool:
        """Check if this Result is a Success."""
        return isinstance(self, Success)

    def is_failure(self) -> bool:
        """Check if this Result is a Failure."""
        return isinstance(self, Failure)

    def value(self) -> T:
        """
        Extract the success value. Raises ValueError if called on a Failure.

        Prefer .either() or match/case for safe access, and .unwrap() when the
        failure should be escalated as an exception.
        """
        match self:
            case Success(v):
                return v
            case Failure(err):
                raise ValueError(f"Cannot get value from a Failure: {err!r}")
        raise TypeError("unreachable")  # pragma: no cover

    def error(self) -> E:
        """Extract the failure payload. Raises ValueError if called on a Success."""
        match self:
            case Failure(err):
                return err
            case Success(v):
                raise ValueError(f"Cannot get error from a Success: {v!r}")
        raise TypeError("unreachable")  # pragma: no cover

    def unwrap(self) -> T:
        """
        Leave the railway: return the success value or raise the failure.

        An exception payload is raised as-is; any other payload is raised
        wrapped in FailureError (available as `.payload`).
        """
        match self:
            case Success(v):
                return v
            case Failure(err):
                if isinstance(err, BaseException):
                    raise err
                raise FailureError(err)
        raise TypeError("unreachable")  # pragma: no cover

    # ──────────────────────── Core Transformations ────────────────────────

    def either(
        self,
        on_success: Callable[[T], R],
        on_failure: Callable[[E], R],
    ) -> R:
        """
        Apply one of two functions depending on the state.

            result.either(
                on_success=lambda user: f"Hello {user.name}",
                on_failure=lambda err: f"Error: {err}",
            )
        """
        match self:
            case Success(v):
                return on_success(v)
            case Failure(err):
                return on_failure(err)
        raise TypeError("unreachable")  # pragma: no cover

    def flat_map(self, stage: Callable[[T], Any]) -> Any:
        """
        Hand the success value to the next stage and return what it returns.

        This is the KEY operator of ROP, also spelled `>>`. The stage's return
        is not re-wrapped, so a stage should itself return a Result (or be
        adapted with one of the rop.stages wrappers).

            Success(5) >> validate   # → whatever validate(5) returns
            Failure(e) >> validate   # → Failure(e), validate never called
        """
        match self:
            case Success(v):
                return stage(v)
        return self

    __rshift__ = flat_map

    def map(self, mapper: Callable[[T], U]) -> Result[U, E]:
        """
        Transform the success value. Short-circuits on failure.

            Success(5).map(lambda x: x * 2)  # → Success(10)
        """
        match self:
            case Success(v):
                return Success(mapper(v))
        return self  # type: ignore[return-value]

    def try_map(self, mapper: Callable[[T], U]) -> Result[U, Any]:
        """Like .map(), but an exception raised by mapper becomes Failure(exception)."""
        match self:
            case Success(v):
                return Result.attempt(lambda: mapper(v))
        return self  # type: ignore[return-value]

    def map_failure(self, mapper: Callable[[E], F]) -> Result[T, F]:
        """Transform the failure payload. Passes through success unchanged."""
        match self:
            case Failure(err):
                return Failure(mapper(err))
        return self  # type: ignore[return-value]

    # ──────────────────────── Side Effects ────────────────────────

    def tee(self, action: Callable[[T], Any]) -> Result[T, E]:
        """
        Run action on the success value and pass the same value on.

        Whatever action returns is ignored, Failures included.
        """
        match self:
            case Success(v):
                action(v)
                return Success(v)
        return self

    def error_tee(self, action: Callable[[T], Any]) -> Result[T, Any]:
        """Like .tee(), but a Failure returned by action replaces this Result."""
        match self:
            case Success(v):
                outcome = action(v)
                if isinstance(outcome, Failure):
                    return outcome
                return Success(v)
        return self

    def peek(self, action: Callable[[T], Any]) -> Result[T, E]:
        """
        Execute a side effect on success value without altering the Result.

            result.peek(lambda user: log.info("user.created", user_id=user.id))
        """
        match self:
            case Success(v):
                action(v)
        return self

    def peek_failure(self, action: Callable[[E], Any]) -> Result[T, E]:
        """Execute a side effect on failure without altering the Result."""
        match self:
            case Failure(err):
                action(err)
        return self

    # ──────────────────────── Recovery ────────────────────────

    def recover(self, recovery_fn: Callable[[E], T]) -> Result[T, E]:
        """Recover from failure by producing a success value."""
        match self:
            case Failure(err):
                return Success(recovery_fn(err))
        return self

    def get_or_else(self, default: T) -> T:
        """Extract value or return a default on failure."""
        match self:
            case Success(v):
                return v
            case _:
                return default

    # ──────────────────────── Execution Context ────────────────────────

    def within(self, execution_context: Any) -> Result[T, E]:
        """
        Hand this Result to an execution context (see rop.execution).

            result = (Success(data) >> validate >> persist).within(ctx)
        """
        return execution_context.execute(lambda: self)

    # ──────────────────────── Static Factories ────────────────────────

    @staticmethod
    def success(value: T) -> Result[T, Any]:
        """Create a successful Result wrapping the given value."""
        return Success(value)

    @staticmethod
    def failure(error: E) -> Result[Any, E]:
        """Create a failed Result carrying the given payload."""
        return Failure(error)

    @staticmethod
    def of(value: Any) -> Result[Any, Any]:
        """
        Normalize a value into a Result.

        Results (of either variant) are returned unchanged, anything else is
        wrapped in Success. Never double-wraps, never hides a Failure.
        """
        if isinstance(value, Result):
            return value
        return Success(value)

    @staticmethod
    def attempt(computation: Callable[[], T]) -> Result[T, Exception]:
        """
        Run a zero-argument computation that may raise.

            Result.attempt(lambda: int("42"))    # → Success(42)
            Result.attempt(lambda: int("nope"))  # → Failure(ValueError(...))
        """
        try:
            return Success(computation())
        except Exception as e:
            return Failure(e)

    @staticmethod
    def all_of(results: Iterable[Result[T, E]]) -> Result[list[T], E]:
        """
        Collect Results into a Result of list.
        Returns the first failure encountered, or Success with all values.
        """
        values: list[T] = []
        for r in results:
            match r:
                case Success(v):
                    values.append(v)
                case Failure(_):
                    return r  # type: ignore[return-value]
        return Success(values)

    # ──────────────────────── Dunder methods ────────────────────────

    def __bool__(self) -> bool:
        """Allow truthiness check: `if result: ...` succeeds only on Success."""
        return self.is_success()


@dataclass(frozen=True, slots=True)
class Success(Result[T, E]):
    """The success track — wraps a value of type T (None included)."""

    _value: T

    def __repr__(self) -> str:
        return f"Success({self._value!r})"


@dataclass(frozen=True, slots=True)
class Failure(Result[T, E]):
    """The failure track — wraps an opaque error payload."""

    _error: E

    def __repr__(self) -> str:
        return f"Failure({self._error!r})"
