"""Synthetic weather for when the live providers are unreachable.

The values are fixed per country and do not come from any measurement.
"""

from __future__ import annotations

from snowday.models.enums import Country
from snowday.models.weather import WeatherSnapshot

_LIGHT_SNOW = 71

SAMPLE_SNAPSHOTS: dict[Country, WeatherSnapshot] = {
    Country.US: WeatherSnapshot(
        current_temperature_c=-2,
        current_snowfall_cm=0,
        current_precipitation_mm=0,
        current_weather_code=_LIGHT_SNOW,
        daily_min_temp_c=-5,
        daily_max_temp_c=2,
        daily_snowfall_cm=7.6,
        daily_precipitation_mm=8.2,
    ),
    Country.CA: WeatherSnapshot(
        current_temperature_c=-8,
        current_snowfall_cm=0,
        current_precipitation_mm=0,
        current_weather_code=_LIGHT_SNOW,
        daily_min_temp_c=-12,
        daily_max_temp_c=-3,
        daily_snowfall_cm=12.4,
        daily_precipitation_mm=15.1,
    ),
}


def sample_snapshot(country: Country | str) -> WeatherSnapshot:
    """Return the fixed sample snapshot for ``country``."""
    return SAMPLE_SNAPSHOTS[Country(country)]
