"""
agent.tools.base - Base tool interface and result container.

All agent tools inherit from BaseTool and return ToolResult. A tool declares
its name, the model-facing description, and pydantic schemas for both its
input and its output.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Optional

from pydantic import BaseModel

from application.context import SessionContext
from domain.models import ProverbsSnapshot


@dataclass
class ToolResult:
    """Result returned by a tool execution.

    output:    JSON text shown to the model.
    data:      The same payload as a dict, shaped by the tool's output schema.
    snapshot:  Resulting list state; set only by state-mutating tools.
    """
    output: str
    data: dict[str, Any] = field(default_factory=dict)
    snapshot: Optional[ProverbsSnapshot] = None


class BaseTool(ABC):
    """Abstract base for all agent tools."""

    name: str
    description: str
    mutates_state: bool = False

    @abstractmethod
    async def execute(self, ctx: SessionContext, **kwargs) -> ToolResult:
        """Execute the tool with the given session context and validated arguments."""
        ...

    @abstractmethod
    def get_schema(self) -> type[BaseModel]:
        """Return the Pydantic schema for this tool's input arguments."""
        ...

    @abstractmethod
    def get_output_schema(self) -> type[BaseModel]:
        """Return the Pydantic schema for this tool's output payload."""
        ...

    def build_result(
        self,
        payload: BaseModel,
        snapshot: Optional[ProverbsSnapshot] = None,
    ) -> ToolResult:
        """Wrap an output-schema instance into a ToolResult (wire keys, by alias)."""
        return ToolResult(
            output=payload.model_dump_json(by_alias=True),
            data=payload.model_dump(by_alias=True),
            snapshot=snapshot,
        )
