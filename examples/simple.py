from __future__ import annotations

import logging
import operator

from hopline import Step, Trace, TrampolineConfig, compose, on, pipe, run, trampolined


def collatz_step(state: tuple[int, int]) -> Step[int]:
    """Count the steps of the Collatz sequence starting at n."""
    n, steps = state
    if n == 1:
        return Step.Done(steps)
    return Step.Continue((n // 2 if n % 2 == 0 else 3 * n + 1, steps + 1))


@trampolined
def gcd(a: int, b: int) -> Step[int]:
    if b == 0:
        return Step.Done(a)
    return Step.Continue((b, a % b))


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)

    trace = Trace()
    steps = run((27, 0), collatz_step, config=TrampolineConfig(log_every=50), trace=trace)
    print(f"collatz(27) takes {steps} steps")
    for event in trace.get_events():
        print(event.action, event.info, event.duration_ms)

    print("gcd(1071, 462) =", gcd(1071, 462))

    same_word = on(operator.eq, compose(str.strip, str.lower))
    print("same word:", same_word(" Hello", "hello "))
    print("piped:", pipe(" Trampoline ", str.strip, str.upper, len))
