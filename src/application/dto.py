"""
application.dto - Data Transfer Objects for run input/output.

These are the structured results the agent executor returns to callers
(REST endpoint, CLI adapter).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from domain.models import ProverbsSnapshot


@dataclass(frozen=True)
class ChatTurn:
    """One prior message of the conversation, as sent by the client."""
    role: str
    content: str


@dataclass(frozen=True)
class ToolCallRecord:
    """What happened during one tool call. Passed to every ToolCallHook."""
    name: str
    arguments: dict[str, Any]
    output: Optional[dict[str, Any]] = None
    error: Optional[str] = None
    duration_ms: float = 0.0
    # Set only by state-mutating tools that succeeded
    snapshot: Optional[ProverbsSnapshot] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class RunResult:
    """Complete result of one agent run."""
    thread_id: str
    run_id: str
    reply: str
    tool_calls: list[ToolCallRecord] = field(default_factory=list)
    state: Optional[ProverbsSnapshot] = None
    failed: bool = False

    @property
    def mutated_state(self) -> bool:
        return self.state is not None
