"""
Shared test fixtures for the rop test suite.

Every test starts from structlog's default configuration and freshly loaded
settings, so log capture and environment overrides never leak between tests.
"""

from __future__ import annotations

from collections.abc import Iterator

import pytest
import structlog

from rop.config import get_settings, get_trace_settings
from tests.helpers import CallCounter, inc


def _clear_settings() -> None:
    get_settings.cache_clear()
    get_trace_settings.cache_clear()


@pytest.fixture(autouse=True)
def _isolate_global_state(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    for name in ("ROP_LOG_LEVEL", "ROP_LOG_FORMAT", "ROP_TRACE_STAGES"):
        monkeypatch.delenv(name, raising=False)
    _clear_settings()
    structlog.reset_defaults()
    yield
    _clear_settings()
    structlog.reset_defaults()


@pytest.fixture()
def counter() -> CallCounter:
    """A stage that returns Success(x + 1) and counts its calls."""
    return CallCounter(returns=inc)
