"""
application.context - Run-scoped session context.

Carries the explicitly owned state handle into every tool invocation instead
of an ambient global. Two concurrent runs get two different SessionContext
instances that share only the injected store.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional
from uuid import uuid4

from application.dto import ToolCallRecord
from domain.models import ProverbsSnapshot
from domain.ports import ProverbsStorePort


@dataclass
class SessionContext:
    """Per-run context passed through all layers.

    Attributes:
        proverbs:    The shared proverb store (one instance per process).
        thread_id:   Client conversation thread, echoed back in the result.
        run_id:      Unique per run.
        request_id:  Unique per request, for tracing/logging.
        tool_calls:  Every tool call of this run, in call order. Appended
                     by the ToolRegistry dispatch layer.
    """
    proverbs: ProverbsStorePort
    thread_id: str = field(default_factory=lambda: uuid4().hex)
    run_id: str = field(default_factory=lambda: uuid4().hex)
    request_id: str = field(default_factory=lambda: uuid4().hex)
    tool_calls: list[ToolCallRecord] = field(default_factory=list)

    def new_request(self) -> None:
        """Reset per-run state for a new run within the same thread."""
        self.run_id = uuid4().hex
        self.request_id = uuid4().hex
        self.tool_calls = []

    @property
    def latest_snapshot(self) -> Optional[ProverbsSnapshot]:
        """Snapshot from the last successful state-mutating call, if any."""
        for record in reversed(self.tool_calls):
            if record.snapshot is not None:
                return record.snapshot
        return None
