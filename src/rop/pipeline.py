"""
Pipeline — a fluent, reusable chain of stages.

`>>` chains stages onto a Result that already exists. A Pipeline describes the
chain first and runs it later, any number of times:

    normalize_order = (
        Pipeline("normalize_order")
        .try_lift(parse_json)
        .then(validate)
        .tee(audit)
        .error_tee(check_quota)
        .lift(to_record)
    )

    normalize_order.run(raw)           # → Result
    Success(raw) >> normalize_order    # a Pipeline is itself a stage

Builder methods return a new Pipeline; instances are immutable and can be
shared freely.
"""

from __future__ import annotations

from typing import Any, Callable

import structlog

from rop.combinators import sequence, wrap_success
from rop.config import trace_enabled
from rop.execution import ExecutionContext
from rop.result import Result
from rop.stages import Stage, lifted, observed, observed_or_fail, stage_name, try_lifted

log = structlog.get_logger("rop.pipeline")


def _state(outcome: Any) -> str:
    if not isinstance(outcome, Result):
        return "UNWRAPPED"
    return "SUCCESS" if outcome.is_success() else "FAILURE"


class Pipeline:
    """An ordered, immutable sequence of stages joined by sequence()."""

    def __init__(
        self,
        name: str = "pipeline",
        stages: tuple[Stage, ...] = (),
        trace: bool | None = None,
    ) -> None:
        self._name = name
        self._stages = tuple(stages)
        self._trace = trace

    @property
    def name(self) -> str:
        return self._name

    @property
    def stages(self) -> tuple[Stage, ...]:
        return self._stages

    # ──────────────────────── Builder ────────────────────────

    def then(self, stage: Stage) -> Pipeline:
        """Append a stage that takes the plain value and returns a Result."""
        return Pipeline(self._name, self._stages + (stage,), self._trace)

    def lift(self, func: Callable[[Any], Any]) -> Pipeline:
        """Append a plain function; its return goes on the success track."""
        return self.then(lifted(func))

    def try_lift(self, func: Callable[[Any], Any]) -> Pipeline:
        """Append a function that may raise; exceptions become Failures."""
        return self.then(try_lifted(func))

    def tee(self, func: Callable[[Any], Any]) -> Pipeline:
        """Append a side effect whose return is ignored."""
        return self.then(observed(func))

    def error_tee(self, func: Callable[[Any], Any]) -> Pipeline:
        """Append a side effect that may stop the pipeline by returning a Failure."""
        return self.then(observed_or_fail(func))

    # ──────────────────────── Execution ────────────────────────

    def run(self, value: Any, context: ExecutionContext | None = None) -> Any:
        """
        Run every stage against value, stopping at the first Failure.

        value is normalized with wrap_success(), so a Failure input skips
        every stage. With a context the whole run happens inside
        context.execute().
        """
        if context is not None:
            return context.execute(lambda: self._run(value))
        return self._run(value)

    __call__ = run

    def _run(self, value: Any) -> Any:
        trace = self._trace if self._trace is not None else trace_enabled()
        current = wrap_success(value)
        for index, stage in enumerate(self._stages):
            if trace and isinstance(current, Result) and current.is_failure():
                log.debug(
                    "rop.pipeline.short_circuited",
                    pipeline=self._name,
                    skipped_from=index,
                    skipped=len(self._stages) - index,
                )
                return current
            current = sequence(current, stage)
            if trace:
                log.debug(
                    "rop.pipeline.stage_completed",
                    pipeline=self._name,
                    index=index,
                    stage=stage_name(stage),
                    state=_state(current),
                )
        return current

    # ──────────────────────── Dunder methods ────────────────────────

    def __len__(self) -> int:
        return len(self._stages)

    def __repr__(self) -> str:
        names = ", ".join(stage_name(s) for s in self._stages)
        return f"Pipeline({self._name!r}, [{names}])"
