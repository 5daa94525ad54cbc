"""
Exceptions raised when a Result leaves the railway.

Two distinct channels, never conflated:

  - FailureError       — the pipeline said "fail" and the caller escalated it
                         with unwrap(). Carries the failure payload.
  - InvalidResultError — the caller handed a combinator something that is
                         not a Success or a Failure. This is API misuse.
"""

from __future__ import annotations

from typing import Any


class RopError(Exception):
    """Base class for every exception raised by rop itself."""


class FailureError(RopError):
    """
    An escalated Failure whose payload is not itself an exception.

        >>> try:
        ...     unwrap(Failure("some"))
        ... except FailureError as e:
        ...     e.payload
        'some'
    """

    def __init__(self, payload: Any) -> None:
        super().__init__(payload if isinstance(payload, str) else repr(payload))
        self.payload = payload


class InvalidResultError(RopError, TypeError):
    """A value that should have been a Result was not one."""

    def __init__(self, received: Any, operation: str = "unwrap") -> None:
        super().__init__(
            f"{operation}() expects a Success or Failure, "
            f"got {type(received).__name__}: {received!r}"
        )
        self.received = received
        self.operation = operation
