"""Runtime trace of trampoline runs.

Trace is runtime infrastructure - it never sees the inputs or results a
step function produces, only that a run began, ended or failed.
Runs started while another run is open nest under it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any


@dataclass(frozen=True)
class Evidence:
    """A single recorded event."""

    action: str
    id: int = 0
    parent_id: int | None = None
    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))
    info: dict[str, Any] = field(default_factory=dict)
    duration_ms: float | None = None


class Trace:
    """Captures begin/end events for one or more runs.

    A run opens a scope with begin() and closes it with finish() or close().
    Not synchronized; give each thread its own Trace.
    """

    def __init__(self, enabled: bool = True) -> None:
        self.enabled = enabled
        self._events: list[Evidence] = []
        self._open: list[int] = []

    def begin(self, scope: str) -> int | None:
        """Record "<scope>_begin" under the innermost open scope and open a new one.

        Returns:
            The scope's event ID, or None if tracing is disabled
        """
        event_id = self.record(f"{scope}_begin", parent_id=self.current)
        if event_id is not None:
            self._open.append(event_id)
        return event_id

    def finish(
        self,
        event_id: int | None,
        action: str,
        info: dict[str, Any] | None = None,
        duration_ms: float | None = None,
    ) -> None:
        """Record the closing event of a scope and close it."""
        if event_id is None:
            return
        self.record(action, info=info, parent_id=event_id, duration_ms=duration_ms)
        self.close(event_id)

    def close(self, event_id: int | None) -> None:
        """Close a scope without recording; no-op if it is already closed."""
        if event_id in self._open:
            self._open.remove(event_id)

    @property
    def current(self) -> int | None:
        return self._open[-1] if self._open else None

    @property
    def depth(self) -> int:
        """Number of scopes still open."""
        return len(self._open)

    def record(
        self,
        action: str,
        info: dict[str, Any] | None = None,
        parent_id: int | None = None,
        duration_ms: float | None = None,
    ) -> int | None:
        if not self.enabled:
            return None
        event_id = len(self._events)
        self._events.append(
            Evidence(
                action=action,
                id=event_id,
                parent_id=parent_id,
                info=info or {},
                duration_ms=duration_ms,
            )
        )
        return event_id

    def get_events(self) -> list[Evidence]:
        return list(self._events)

    def as_tree(self) -> dict[int | None, list[int]]:
        """Map each parent_id to the ids of its children."""
        tree: dict[int | None, list[int]] = {}
        for ev in self._events:
            tree.setdefault(ev.parent_id, []).append(ev.id)
        return tree

    def __len__(self) -> int:
        return len(self._events)

    def clear(self) -> None:
        self._events.clear()
        self._open.clear()
