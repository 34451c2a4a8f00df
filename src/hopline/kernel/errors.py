"""Error types for the trampoline evaluator."""

from __future__ import annotations


class StepTypeError(TypeError):
    """Error raised when a step function returns something other than a Step.

    The offending value is kept for debugging.
    """

    def __init__(self, message: str, raw_value: object) -> None:
        self.raw_value = raw_value
        super().__init__(message)

    def __repr__(self) -> str:
        return f"StepTypeError({super().__repr__()}, raw_value={self.raw_value!r})"
