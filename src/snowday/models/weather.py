"""Weather models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

# WMO weather codes as reported by Open-Meteo
WEATHER_CODES: dict[int, str] = {
    0: "Clear",
    1: "Mostly Clear",
    2: "Partly Cloudy",
    3: "Overcast",
    45: "Fog",
    48: "Fog",
    51: "Light Drizzle",
    53: "Drizzle",
    55: "Heavy Drizzle",
    56: "Freezing Drizzle",
    57: "Freezing Drizzle",
    61: "Light Rain",
    63: "Rain",
    65: "Heavy Rain",
    66: "Freezing Rain",
    67: "Freezing Rain",
    71: "Light Snow",
    73: "Snow",
    75: "Heavy Snow",
    77: "Snow Grains",
    80: "Light Showers",
    81: "Showers",
    82: "Heavy Showers",
    85: "Snow Showers",
    86: "Snow Showers",
    95: "Thunderstorm",
    96: "Thunderstorm",
    99: "Thunderstorm",
}


def weather_code_to_condition(code: int | None) -> str:
    """Convert WMO weather code to human-readable condition."""
    if code is None:
        return "Unknown"
    return WEATHER_CODES.get(code, "Unknown")


class OpenMeteoCurrent(BaseModel):
    """The ``current`` block of an Open-Meteo forecast."""

    model_config = ConfigDict(frozen=True)

    time: str | None = None
    temperature_2m: float | None = None
    precipitation: float | None = None
    snowfall: float | None = None
    weather_code: int | None = None


class OpenMeteoDaily(BaseModel):
    """The ``daily`` block of an Open-Meteo forecast (one entry per day)."""

    model_config = ConfigDict(frozen=True)

    time: list[str] | None = None
    temperature_2m_min: list[float | None] | None = None
    temperature_2m_max: list[float | None] | None = None
    snowfall_sum: list[float | None] | None = None
    precipitation_sum: list[float | None] | None = None


class OpenMeteoForecast(BaseModel):
    """Top-level Open-Meteo forecast response."""

    model_config = ConfigDict(frozen=True)

    latitude: float | None = None
    longitude: float | None = None
    timezone: str | None = None
    current: OpenMeteoCurrent | None = None
    daily: OpenMeteoDaily | None = None


class WeatherSnapshot(BaseModel):
    """Today's weather at one location, in metric units.

    Fields are ``None`` when the provider omitted them. Consumers that need
    numbers call :meth:`with_defaults`, which reads every absent value as 0.
    """

    model_config = ConfigDict(frozen=True)

    current_temperature_c: float | None = None
    current_snowfall_cm: float | None = None
    current_precipitation_mm: float | None = None
    current_weather_code: int | None = None
    daily_min_temp_c: float | None = None
    daily_max_temp_c: float | None = None
    daily_snowfall_cm: float | None = None
    daily_precipitation_mm: float | None = None

    @property
    def missing_fields(self) -> list[str]:
        """Names of fields the provider did not supply."""
        return [name for name, value in self if value is None]

    @property
    def is_complete(self) -> bool:
        return not self.missing_fields

    @property
    def condition(self) -> str:
        return weather_code_to_condition(self.current_weather_code)

    def with_defaults(self) -> WeatherSnapshot:
        """Return a copy with every missing measurement set to zero."""
        return self.model_copy(
            update={name: 0 for name in self.missing_fields},
        )
