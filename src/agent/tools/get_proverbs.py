"""
agent.tools.get_proverbs - Read the shared proverb list.
"""

from __future__ import annotations

from pydantic import BaseModel

from application.context import SessionContext
from agent.tools.base import BaseTool, ToolResult
from agent.tools.schemas import ProverbsOutput


class GetProverbsInput(BaseModel):
    """get_proverbs takes no arguments."""


class GetProverbsTool(BaseTool):
    """Pure read of the current list."""

    name = "get_proverbs"
    description = "Get the current list of proverbs."

    def get_schema(self) -> type[BaseModel]:
        return GetProverbsInput

    def get_output_schema(self) -> type[BaseModel]:
        return ProverbsOutput

    async def execute(self, ctx: SessionContext, **kwargs) -> ToolResult:
        return self.build_result(ProverbsOutput(proverbs=list(ctx.proverbs.get_all())))
