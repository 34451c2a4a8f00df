"""Combinators - generic higher-order function primitives."""

from .ops import apply, compose, const, fix, flip, identity, on, pipe

__all__ = [
    "identity",
    "const",
    "compose",
    "flip",
    "apply",
    "pipe",
    "fix",
    "on",
]
