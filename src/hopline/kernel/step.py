"""Step results - the tagged value a step function returns."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any, Generic, Literal, TypeVar

T = TypeVar("T")
In = TypeVar("In")


@dataclass(frozen=True)
class Step(Generic[T]):
    """
    Outcome of one invocation of a step function.

    Kinds:
    - done: The computation has terminated; value is the final result
    - continue: Not finished yet; value is the input for the next invocation
    """

    kind: Literal["done", "continue"]
    value: Any = None

    @staticmethod
    def Done(value: T) -> "Step[T]":
        return Step(kind="done", value=value)

    @staticmethod
    def Continue(next_input: Any) -> "Step[Any]":
        return Step(kind="continue", value=next_input)

    @property
    def is_done(self) -> bool:
        return self.kind == "done"

    @property
    def is_continue(self) -> bool:
        return self.kind == "continue"


StepFn = Callable[[In], Step[T]]
AsyncStepFn = Callable[[In], Awaitable[Step[T]]]
