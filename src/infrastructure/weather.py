"""
infrastructure.weather - Weather provider used by the get_weather tool.

The service reports a fixed synthetic reading for every location. Anything
that satisfies WeatherProviderPort (a real API client, a lookup table) can be
swapped in through the ServiceFactory.
"""

from __future__ import annotations

from domain.models import WeatherInfo


class SyntheticWeatherProvider:
    """Deterministic provider: same reading for every location."""

    def __init__(
        self,
        temperature: int = 20,
        conditions: str = "sunny",
        humidity: int = 50,
        wind_speed: int = 10,
        feels_like: int = 25,
    ):
        self._reading = WeatherInfo(
            temperature=temperature,
            conditions=conditions,
            humidity=humidity,
            wind_speed=wind_speed,
            feels_like=feels_like,
        )

    def lookup(self, location: str) -> WeatherInfo:
        return self._reading
