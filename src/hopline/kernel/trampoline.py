"""Trampoline evaluator - runs a step function to completion in constant stack."""

from __future__ import annotations

import functools
import logging
import time
from collections.abc import Callable
from typing import Any, TypeVar

from hopline.kernel.config import DEFAULT_CONFIG, TrampolineConfig
from hopline.kernel.errors import StepTypeError
from hopline.kernel.step import AsyncStepFn, Step, StepFn
from hopline.kernel.trace import Trace

In = TypeVar("In")
T = TypeVar("T")


def _checked(step: Any) -> Step[Any]:
    if not isinstance(step, Step) or step.kind not in ("done", "continue"):
        raise StepTypeError(
            f"step function must return Step.Done or Step.Continue, got {type(step).__name__}",
            raw_value=step,
        )
    return step


class _RunBookkeeping:
    """Logging and trace records shared by run and run_async.

    Holds counters only; never a step input or result.
    """

    def __init__(self, config: TrampolineConfig, trace: Trace | None) -> None:
        self.logger = logging.getLogger(config.logger_name)
        self.log_every = config.log_every
        self.trace = trace
        self.iterations = 0
        self.event_id: int | None = None
        self.started = 0.0

    def begin(self) -> None:
        self.logger.debug("trampoline started")
        if self.trace is not None:
            self.event_id = self.trace.begin("trampoline")
        self.started = time.perf_counter()

    def tick(self) -> None:
        self.iterations += 1
        if self.log_every and self.iterations % self.log_every == 0:
            self.logger.debug("trampoline progress: %d iterations", self.iterations)

    def end(self) -> None:
        duration_ms = (time.perf_counter() - self.started) * 1000
        self.logger.debug(
            "trampoline finished after %d iterations (%.3f ms)", self.iterations, duration_ms
        )
        if self.trace is not None:
            self.trace.finish(
                self.event_id,
                "trampoline_end",
                info={"iterations": self.iterations},
                duration_ms=duration_ms,
            )

    def fail(self, exc: BaseException) -> None:
        self.logger.debug(
            "step function raised %s on iteration %d", type(exc).__name__, self.iterations + 1
        )
        if self.trace is not None:
            self.trace.finish(
                self.event_id,
                "trampoline_error",
                info={"error": str(exc), "iterations": self.iterations},
            )

    def close(self) -> None:
        if self.trace is not None:
            self.trace.close(self.event_id)


def run(
    initial_input: In,
    step_fn: StepFn[In, T],
    *,
    config: TrampolineConfig | None = None,
    trace: Trace | None = None,
) -> T:
    """Evaluate step_fn from initial_input until it returns Step.Done.

    Each Step.Continue feeds its payload into the next call of step_fn.
    The calls are driven by a loop, so stack depth does not depend on
    how many steps the computation takes.

    Args:
        initial_input: Input for the first call of step_fn
        step_fn: Function returning Step.Done(result) or Step.Continue(next_input)
        config: Logging options; never bounds iteration
        trace: Optional trace receiving begin/end/error events for this run

    Returns:
        The payload of the first Step.Done

    Raises:
        StepTypeError: step_fn returned something other than a Step

    Exceptions raised by step_fn propagate unchanged and stop the run.
    A step_fn that never returns Step.Done makes run loop forever.
    """
    books = _RunBookkeeping(config or DEFAULT_CONFIG, trace)
    books.begin()
    current: Any = initial_input
    try:
        while True:
            try:
                raw = step_fn(current)
            except Exception as exc:
                books.fail(exc)
                raise
            step = _checked(raw)
            books.tick()
            if step.kind == "done":
                books.end()
                return step.value
            current = step.value
            del raw, step
    finally:
        books.close()


async def run_async(
    initial_input: In,
    step_fn: AsyncStepFn[In, T],
    *,
    config: TrampolineConfig | None = None,
    trace: Trace | None = None,
) -> T:
    """Coroutine form of run: step_fn returns an awaitable Step.

    Each step is awaited exactly once, in order. Semantics otherwise match run.
    """
    books = _RunBookkeeping(config or DEFAULT_CONFIG, trace)
    books.begin()
    current: Any = initial_input
    try:
        while True:
            try:
                raw = await step_fn(current)
            except Exception as exc:
                books.fail(exc)
                raise
            step = _checked(raw)
            books.tick()
            if step.kind == "done":
                books.end()
                return step.value
            current = step.value
            del raw, step
    finally:
        books.close()


def _as_call_step(fn: Callable[..., Step[T]]) -> StepFn[Any, T]:
    """Adapt fn to a step function over (args, kwargs) pairs."""
    def step(call: tuple[tuple[Any, ...], dict[str, Any]]) -> Step[T]:
        args, kwargs = call
        result = _checked(fn(*args, **kwargs))
        if result.kind == "done":
            return result
        next_args = result.value
        if not isinstance(next_args, tuple):
            raise StepTypeError(
                f"{fn.__name__} must continue with a tuple of arguments, "
                f"got {type(next_args).__name__}",
                raw_value=next_args,
            )
        return Step.Continue((next_args, {}))

    return step


def trampolined(fn: Callable[..., Step[T]]) -> Callable[..., T]:
    """Turn a Step-returning function into one evaluated through run.

    The decorated function returns Step.Done(result) to finish, or
    Step.Continue(args) to be called again with args, which must be a
    tuple of positional arguments. Keyword arguments are accepted on the
    first call only; omitted parameters fall back to their defaults on
    every call.

    Example:
        @trampolined
        def factorial(n, acc=1):
            if n <= 1:
                return Step.Done(acc)
            return Step.Continue((n - 1, acc * n))
    """
    step = _as_call_step(fn)

    @functools.wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> T:
        return run((args, kwargs), step)

    return wrapper
