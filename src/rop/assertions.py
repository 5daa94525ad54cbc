"""
Test assertions for Result values.

Expressive assert helpers that produce clear failure messages:

    from rop import ResultAssertions

    def test_parse_amount():
        result = Success("42") >> try_lifted(int)
        ResultAssertions.assert_success_value(result, 42)

    def test_parse_amount_rejects_text():
        result = Success("x") >> try_lifted(int)
        ResultAssertions.assert_failure_type(result, ValueError)
"""

from __future__ import annotations

from typing import Any, TypeVar

from rop.result import Result

T = TypeVar("T")


class ResultAssertions:
    """Expressive test assertions for Result values."""

    @staticmethod
    def assert_result(value: Any, message: str = "") -> Result[Any, Any]:
        """Assert the value is a Success or a Failure and return it."""
        context = f" — {message}" if message else ""
        assert isinstance(value, Result), (
            f"Expected a Result but got {type(value).__name__}: {value!r}{context}"
        )
        return value

    @staticmethod
    def assert_success(result: Result[T, Any], message: str = "") -> T:
        """
        Assert the Result is a Success and return the value.

            value = ResultAssertions.assert_success(result)
        """
        context = f" — {message}" if message else ""
        ResultAssertions.assert_result(result, message)
        assert result.is_success(), (
            f"Expected Success but got Failure({result.error()!r}){context}"
        )
        return result.value()

    @staticmethod
    def assert_failure(result: Result[Any, Any], message: str = "") -> Any:
        """
        Assert the Result is a Failure and return its payload.

            error = ResultAssertions.assert_failure(result)
        """
        context = f" — {message}" if message else ""
        ResultAssertions.assert_result(result, message)
        assert result.is_failure(), (
            f"Expected Failure but got Success({result.value()!r}){context}"
        )
        return result.error()

    @staticmethod
    def assert_success_value(result: Result[T, Any], expected_value: Any) -> None:
        """Assert the Result is a Success with the specific value."""
        value = ResultAssertions.assert_success(result)
        assert value == expected_value, (
            f"Expected success value {expected_value!r} but got {value!r}"
        )

    @staticmethod
    def assert_failure_value(result: Result[Any, Any], expected_error: Any) -> None:
        """Assert the Result is a Failure with the specific payload."""
        error = ResultAssertions.assert_failure(result)
        assert error == expected_error, (
            f"Expected failure payload {expected_error!r} but got {error!r}"
        )

    @staticmethod
    def assert_failure_type(
        result: Result[Any, Any],
        expected_type: type[BaseException],
    ) -> BaseException:
        """Assert the Result is a Failure carrying an exception of the given type."""
        error = ResultAssertions.assert_failure(result)
        assert isinstance(error, expected_type), (
            f"Expected failure payload of type {expected_type.__name__} "
            f"but got {type(error).__name__}: {error!r}"
        )
        return error
