"""
agent.tools.add_proverbs - Append proverbs to the shared list.

Duplicates are allowed and the list has no size cap. The returned snapshot
is taken under the store lock, so it is exactly the list right after this
append.
"""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field, StrictStr

from application.context import SessionContext
from agent.tools.base import BaseTool, ToolResult
from agent.tools.schemas import ProverbsOutput


class AddProverbsInput(BaseModel):
    """Input schema for the add_proverbs tool."""

    proverbs: List[StrictStr] = Field(..., description="The proverbs to add")


class AddProverbsTool(BaseTool):
    """Append new proverbs to the end of the list."""

    name = "add_proverbs"
    description = "Add new proverbs to the list."
    mutates_state = True

    def get_schema(self) -> type[BaseModel]:
        return AddProverbsInput

    def get_output_schema(self) -> type[BaseModel]:
        return ProverbsOutput

    async def execute(
        self,
        ctx: SessionContext,
        proverbs: List[str] | None = None,
        **kwargs,
    ) -> ToolResult:
        snapshot = ctx.proverbs.append(proverbs or [])
        return self.build_result(ProverbsOutput.from_snapshot(snapshot), snapshot=snapshot)
