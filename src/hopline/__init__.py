from .combinators import apply, compose, const, fix, flip, identity, on, pipe
from .kernel import (
    Step,
    StepTypeError,
    Trace,
    TrampolineConfig,
    run,
    run_async,
    trampolined,
)

__all__ = [
    # Trampoline
    "Step",
    "run",
    "run_async",
    "trampolined",
    "StepTypeError",
    "TrampolineConfig",
    # Tracing
    "Trace",
    # Combinators
    "identity",
    "const",
    "compose",
    "flip",
    "apply",
    "pipe",
    "fix",
    "on",
]
