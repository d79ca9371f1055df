"""
agent.tools.schemas - Output schemas shared by the proverb tools.
"""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field

from domain.models import ProverbsSnapshot, WeatherInfo


class ProverbsOutput(BaseModel):
    """`{"proverbs": [...]}`, returned by get_proverbs, add_proverbs and set_proverbs."""

    proverbs: List[str] = Field(default_factory=list, description="The full list of proverbs")

    @classmethod
    def from_snapshot(cls, snapshot: ProverbsSnapshot) -> ProverbsOutput:
        return cls(proverbs=list(snapshot.proverbs))


class WeatherOutput(BaseModel):
    """Weather report. Serialized with the camelCase ``feelsLike`` key."""

    model_config = ConfigDict(populate_by_name=True)

    temperature: int
    conditions: str
    humidity: int
    wind_speed: int
    feels_like: int = Field(alias="feelsLike")

    @classmethod
    def from_info(cls, info: WeatherInfo) -> WeatherOutput:
        return cls(
            temperature=info.temperature,
            conditions=info.conditions,
            humidity=info.humidity,
            wind_speed=info.wind_speed,
            feels_like=info.feels_like,
        )
