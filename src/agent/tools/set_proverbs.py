"""
agent.tools.set_proverbs - Replace the entire shared list.
"""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field, StrictStr

from application.context import SessionContext
from agent.tools.base import BaseTool, ToolResult
from agent.tools.schemas import ProverbsOutput


class SetProverbsInput(BaseModel):
    """Input schema for the set_proverbs tool."""

    proverbs: List[StrictStr] = Field(..., description="The new list of proverbs")


class SetProverbsTool(BaseTool):
    """Discard the current list and store the given one, order preserved."""

    name = "set_proverbs"
    description = "Replace the entire list of proverbs."
    mutates_state = True

    def get_schema(self) -> type[BaseModel]:
        return SetProverbsInput

    def get_output_schema(self) -> type[BaseModel]:
        return ProverbsOutput

    async def execute(
        self,
        ctx: SessionContext,
        proverbs: List[str] | None = None,
        **kwargs,
    ) -> ToolResult:
        snapshot = ctx.proverbs.replace(proverbs or [])
        return self.build_result(ProverbsOutput.from_snapshot(snapshot), snapshot=snapshot)
