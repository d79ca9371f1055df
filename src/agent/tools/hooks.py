"""
agent.tools.hooks - Observability hooks invoked around every tool call.

The ToolRegistry calls each registered hook with the run's SessionContext
and a ToolCallRecord (name, arguments, output, error, duration) after the
call finishes. Tools themselves never log.
"""

from __future__ import annotations

import logging
from typing import Callable

from application.context import SessionContext
from application.dto import ToolCallRecord

logger = logging.getLogger(__name__)

ToolCallHook = Callable[[SessionContext, ToolCallRecord], None]

_ICONS = {
    "get_proverbs": "📖",
    "add_proverbs": "➕",
    "set_proverbs": "📝",
    "get_weather": "🌤️",
}


def log_tool_call(ctx: SessionContext, record: ToolCallRecord) -> None:
    """Default hook: one log line per tool call."""
    icon = _ICONS.get(record.name, "🔧")
    if record.ok:
        logger.info(
            "%s %s(%s) run=%s took %.1f ms",
            icon, record.name, _format_args(record.arguments), ctx.run_id, record.duration_ms,
        )
        if record.snapshot is not None:
            logger.debug("%s now holds %d proverb(s)", record.name, len(record.snapshot))
    else:
        logger.warning(
            "%s %s(%s) run=%s failed after %.1f ms: %s",
            icon, record.name, _format_args(record.arguments), ctx.run_id,
            record.duration_ms, record.error,
        )


def _format_args(arguments: dict) -> str:
    parts = []
    for key, value in arguments.items():
        if isinstance(value, list):
            value = ", ".join(str(v) for v in value)
        parts.append(f"{key}={value}")
    return "; ".join(parts)
