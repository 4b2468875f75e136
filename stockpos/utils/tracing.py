"""Action tracing for the session audit trail."""

import time
from collections import deque
from contextlib import contextmanager
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Generator

from stockpos.utils.clock import now
from stockpos.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass
class TraceEvent:
    """Individual trace event in the session."""

    timestamp: datetime
    event_type: str
    action_id: str
    duration_ms: float | None = None
    metadata: dict[str, Any] = field(default_factory=dict)


class ActionTracer:
    """Traces actions executed against the application state."""

    def __init__(self, max_events: int = 200):
        self.events: deque[TraceEvent] = deque(maxlen=max_events)
        self.start_time = time.time()

    def add_event(
        self,
        event_type: str,
        action_id: str,
        duration_ms: float | None = None,
        **metadata: Any,
    ) -> None:
        """Add a trace event."""
        event = TraceEvent(
            timestamp=now(),
            event_type=event_type,
            action_id=action_id,
            duration_ms=duration_ms,
            metadata=metadata,
        )
        self.events.append(event)

        logger.debug(
            "trace_event",
            event_type=event_type,
            action_id=action_id,
            duration_ms=duration_ms,
            **metadata,
        )

    @contextmanager
    def trace_operation(
        self, operation: str, action_id: str, **metadata: Any
    ) -> Generator[dict[str, Any], None, None]:
        """
        Context manager to trace an operation with timing.

        The yielded dict can be filled with extra metadata before the block
        exits.
        """
        start = time.time()
        extra: dict[str, Any] = {}
        try:
            yield extra
        finally:
            duration_ms = (time.time() - start) * 1000
            self.add_event(
                operation, action_id, duration_ms=duration_ms, **{**metadata, **extra}
            )

    def recent(self, limit: int = 5) -> list[TraceEvent]:
        """Most recent events, newest first."""
        return list(reversed(self.events))[:limit]

    def get_trace_summary(self) -> dict[str, Any]:
        """Get a summary of the trace."""
        total_duration = (time.time() - self.start_time) * 1000

        action_stats: dict[str, dict[str, Any]] = {}
        for event in self.events:
            if event.action_id not in action_stats:
                action_stats[event.action_id] = {
                    "event_count": 0,
                    "total_duration_ms": 0.0,
                }

            action_stats[event.action_id]["event_count"] += 1
            if event.duration_ms:
                action_stats[event.action_id]["total_duration_ms"] += event.duration_ms

        return {
            "total_duration_ms": total_duration,
            "total_events": len(self.events),
            "action_stats": action_stats,
            "events": [
                {
                    "timestamp": event.timestamp.isoformat(),
                    "event_type": event.event_type,
                    "action_id": event.action_id,
                    "duration_ms": event.duration_ms,
                    "metadata": event.metadata,
                }
                for event in self.events
            ],
        }
