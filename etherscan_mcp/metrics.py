"""In-process counters for requests and tool outcomes (single process only)."""

from __future__ import annotations

from collections import Counter, defaultdict
from threading import Lock
from typing import DefaultDict, Dict


class MetricsRecorder:
    def __init__(self) -> None:
        self._lock = Lock()
        self._requests = 0
        self._request_durations_ms: Dict[str, float] = {}
        self._tool_outcomes: DefaultDict[str, Counter[str]] = defaultdict(Counter)
        self._tool_error: Counter[str] = Counter()

    def incr_request(self) -> None:
        with self._lock:
            self._requests += 1

    def record_duration(self, request_id: str, duration_ms: float) -> None:
        with self._lock:
            self._request_durations_ms[request_id] = duration_ms

    def record_tool(self, tool: str, outcome: str, *, is_error: bool = False) -> None:
        """Count one tool call under its outcome kind (success, not_found, ...)."""
        with self._lock:
            self._tool_outcomes[tool][outcome] += 1
            if is_error:
                self._tool_error[tool] += 1

    def snapshot(self) -> Dict[str, object]:
        with self._lock:
            return {
                "requests": self._requests,
                "tool_outcomes": {tool: dict(counts) for tool, counts in self._tool_outcomes.items()},
                "tool_error": dict(self._tool_error),
                "recent_request_durations_ms": dict(self._request_durations_ms),
            }

    def reset(self) -> None:
        with self._lock:
            self._requests = 0
            self._request_durations_ms.clear()
            self._tool_outcomes.clear()
            self._tool_error.clear()


default_metrics = MetricsRecorder()
