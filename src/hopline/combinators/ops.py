"""Combinator primitives: identity, const, compose, flip, apply, pipe, fix, on."""

# Combinators satisfy the following algebraic laws:
#
# 1. Identity: compose(f, identity) == compose(identity, f) == f
#
# 2. Associativity: compose(compose(f, g), h) == compose(f, compose(g, h))
#
# 3. Reverse application: pipe(x, f, g) == g(f(x)) == compose(g, f)(x)
#
# 4. on with identity: on(op, identity) == op
#
# 5. on fusion: on(on(op, f), g) == on(op, compose(f, g))
#
# 6. Fixed point: fix(f)(*args) == f(fix(f))(*args)

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")


def identity(x: A) -> A:
    return x


def const(x: A) -> Callable[..., A]:
    """Return a function that ignores its arguments and returns x."""
    def _const(*_: Any, **__: Any) -> A:
        return x

    return _const


def compose(*fns: Callable[..., Any]) -> Callable[..., Any]:
    """Compose functions right to left.

    compose(f, g, h)(*args) evaluates to f(g(h(*args))). The rightmost
    function receives the original arguments; composing zero functions
    gives identity.
    """
    if not fns:
        return identity

    *rest, innermost = fns
    outer = tuple(reversed(rest))

    def _composed(*args: Any, **kwargs: Any) -> Any:
        result = innermost(*args, **kwargs)
        for fn in outer:
            result = fn(result)
        return result

    return _composed


def flip(fn: Callable[[A, B], C]) -> Callable[[B, A], C]:
    """Swap the first two arguments: flip(f)(a, b) == f(b, a)."""
    def _flipped(b: B, a: A) -> C:
        return fn(a, b)

    return _flipped


def apply(fn: Callable[[A], B], x: A) -> B:
    return fn(x)


def pipe(x: Any, *fns: Callable[[Any], Any]) -> Any:
    """Reverse application, left to right: pipe(x, f, g) == g(f(x)).

    With no functions, returns x.
    """
    for fn in fns:
        x = fn(x)
    return x


def fix(fn: Callable[[Callable[..., A]], Callable[..., A]]) -> Callable[..., A]:
    """Least fixed point of a function-valued functional.

    Arguments are evaluated eagerly, so the fixed point is taken over
    functions: fix(fn) returns g such that g(*args) == fn(g)(*args).
    Each call of g re-enters fn, so deep recursion through g grows the
    stack; use trampolined for unbounded depth.

    Example:
        fact = fix(lambda rec: lambda n: 1 if n == 0 else n * rec(n - 1))
    """
    def _fixed(*args: Any, **kwargs: Any) -> A:
        return fn(_fixed)(*args, **kwargs)

    return _fixed


def on(op: Callable[[B, B], C], key: Callable[[A], B]) -> Callable[[A, A], C]:
    """Lift a binary function through key: on(op, key)(x, y) == op(key(x), key(y)).

    Typical usage: on(operator.eq, str.lower)("Key", "KEY") is True.
    """
    def _on(x: A, y: A) -> C:
        return op(key(x), key(y))

    return _on
