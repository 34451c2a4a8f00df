"""Kernel layer - step results and the trampoline evaluator."""

from hopline.kernel.config import TrampolineConfig
from hopline.kernel.errors import StepTypeError
from hopline.kernel.step import AsyncStepFn, Step, StepFn
from hopline.kernel.trace import Evidence, Trace
from hopline.kernel.trampoline import run, run_async, trampolined

__all__ = [
    "Step",
    "StepFn",
    "AsyncStepFn",
    "run",
    "run_async",
    "trampolined",
    # Errors & config
    "StepTypeError",
    "TrampolineConfig",
    # Tracing
    "Evidence",
    "Trace",
]
