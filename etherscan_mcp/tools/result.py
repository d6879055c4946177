"""Tagged tool results and their rendering into the MCP text envelope."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict


class ResultKind(str, Enum):
    SUCCESS = "success"
    NOT_FOUND = "not_found"
    UPSTREAM_FAILURE = "upstream_failure"
    TRANSPORT_FAILURE = "transport_failure"
    UNKNOWN_TOOL = "unknown_tool"


# Only an unknown tool is flagged; handler failures travel as plain text.
ERROR_KINDS = frozenset({ResultKind.UNKNOWN_TOOL})


@dataclass(frozen=True, slots=True)
class ToolResult:
    kind: ResultKind
    text: str

    @classmethod
    def success(cls, text: str) -> "ToolResult":
        return cls(ResultKind.SUCCESS, text)

    @classmethod
    def not_found(cls, text: str) -> "ToolResult":
        return cls(ResultKind.NOT_FOUND, text)

    @classmethod
    def upstream_failure(cls, text: str) -> "ToolResult":
        return cls(ResultKind.UPSTREAM_FAILURE, text)

    @classmethod
    def transport_failure(cls, text: str) -> "ToolResult":
        return cls(ResultKind.TRANSPORT_FAILURE, text)

    @property
    def is_error(self) -> bool:
        return self.kind in ERROR_KINDS

    def to_envelope(self) -> Dict[str, Any]:
        """Render as ``{"content": [{"type": "text", ...}], "isError"?: true}``."""
        envelope: Dict[str, Any] = {"content": [{"type": "text", "text": self.text}]}
        if self.is_error:
            envelope["isError"] = True
        return envelope
