"""Logging setup and per-tool outcome logging."""

from __future__ import annotations

import json
import logging
import sys
from typing import Optional

from etherscan_mcp.config import EtherscanMcpConfig, default_config
from etherscan_mcp.metrics import default_metrics
from etherscan_mcp.tools.result import ResultKind, ToolResult

logger = logging.getLogger("etherscan_mcp")

_LOG_EXTRAS = ("tool", "request_id", "error")


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "level": record.levelname,
            "message": record.getMessage(),
            "name": record.name,
        }
        for key in _LOG_EXTRAS:
            if hasattr(record, key):
                payload[key] = getattr(record, key)
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload)


def configure_logging(config: EtherscanMcpConfig = default_config) -> None:
    """
    Install a stderr handler on the root logger.

    stdout carries the stdio protocol stream, so logs must never go there.
    """
    level = getattr(logging, config.log_level.upper(), logging.INFO)
    handler = logging.StreamHandler(sys.stderr)
    if config.log_format.lower() == "json":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter("[%(levelname)s] %(name)s: %(message)s"))
    logging.basicConfig(level=level, handlers=[handler], force=True)


def log_tool_result(tool_name: str, result: Optional[ToolResult], request_id: Optional[str] = None) -> None:
    """Log a tool outcome and count it in the default metrics recorder."""
    if not isinstance(result, ToolResult):
        logger.warning(
            "tool=%s outcome=missing request_id=%s",
            tool_name,
            request_id,
            extra={"tool": tool_name, "request_id": request_id},
        )
        return
    if result.kind in (ResultKind.SUCCESS, ResultKind.NOT_FOUND):
        logger.info(
            "tool=%s outcome=%s request_id=%s",
            tool_name,
            result.kind.value,
            request_id,
            extra={"tool": tool_name, "request_id": request_id},
        )
    else:
        logger.warning(
            "tool=%s outcome=%s error=%s request_id=%s",
            tool_name,
            result.kind.value,
            result.text,
            request_id,
            extra={"tool": tool_name, "request_id": request_id, "error": result.kind.value},
        )
    default_metrics.record_tool(tool_name, result.kind.value, is_error=result.is_error)
