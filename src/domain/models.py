"""
domain.models - Value objects shared by the store, the tools and the adapters.

Pure data, no I/O. Every value here is an immutable projection computed per
call; the only mutable entity (the proverb list) lives inside the store.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ProverbsSnapshot:
    """Point-in-time copy of the proverb list, taken right after a mutation."""
    proverbs: tuple[str, ...] = ()

    def __len__(self) -> int:
        return len(self.proverbs)

    def to_dict(self) -> dict[str, Any]:
        return {"proverbs": list(self.proverbs)}


@dataclass(frozen=True)
class WeatherInfo:
    """Weather report for a single location."""
    temperature: int
    conditions: str
    humidity: int
    wind_speed: int
    feels_like: int

    def to_dict(self) -> dict[str, Any]:
        """Wire form. Note the camelCase ``feelsLike`` key clients expect."""
        return {
            "temperature": self.temperature,
            "conditions": self.conditions,
            "humidity": self.humidity,
            "wind_speed": self.wind_speed,
            "feelsLike": self.feels_like,
        }
