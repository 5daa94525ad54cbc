"""Stage stand-ins shared by the rop test modules."""

from __future__ import annotations

from typing import Any

from rop.result import Failure, Result, Success


class CallCounter:
    """Stage stand-in that records every value it is called with."""

    def __init__(self, returns: Any = None) -> None:
        self.calls: list[Any] = []
        self._returns = returns

    def __call__(self, value: Any) -> Any:
        self.calls.append(value)
        if callable(self._returns):
            return self._returns(value)
        return self._returns

    @property
    def count(self) -> int:
        return len(self.calls)


def inc(x: int) -> Result[int, Any]:
    """Result-returning increment, the canonical chain stage."""
    return Success(x + 1)


def bad(_: Any) -> Result[Any, str]:
    return Failure("bad")


def raiser(_: Any) -> Any:
    raise RuntimeError("some")
