"""
agent.tools.get_weather - Weather lookup for a location.

Side-effect free: never touches the proverb store.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, StrictStr, field_validator

from application.context import SessionContext
from domain.ports import WeatherProviderPort
from agent.tools.base import BaseTool, ToolResult
from agent.tools.schemas import WeatherOutput


class GetWeatherInput(BaseModel):
    """Input schema for the get_weather tool."""

    location: StrictStr = Field(..., description="The location to get the weather for")

    @field_validator("location")
    @classmethod
    def require_location(cls, v: str) -> str:
        """Reject empty or whitespace-only locations."""
        v = v.strip()
        if not v:
            raise ValueError("location must be a non-empty string")
        return v


class GetWeatherTool(BaseTool):
    """Report the weather for a fully spelled-out location."""

    name = "get_weather"
    description = "Get the weather for a given location. Ensure location is fully spelled out."

    def __init__(self, provider: WeatherProviderPort):
        self._provider = provider

    def get_schema(self) -> type[BaseModel]:
        return GetWeatherInput

    def get_output_schema(self) -> type[BaseModel]:
        return WeatherOutput

    async def execute(
        self,
        ctx: SessionContext,
        location: str = "",
        **kwargs,
    ) -> ToolResult:
        info = self._provider.lookup(location)
        return self.build_result(WeatherOutput.from_info(info))
