"""Coordinates to today's weather via Open-Meteo."""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError as PydanticValidationError

from snowday._http import DEFAULT_TIMEOUT, DEFAULT_USER_AGENT, AsyncTransport, SyncTransport
from snowday._logging import log_api_call
from snowday._params import build_query_params
from snowday.exceptions import InvalidDataError, NetworkError
from snowday.models.weather import OpenMeteoForecast, WeatherSnapshot

OPEN_METEO_URL = "https://api.open-meteo.com"
FORECAST_ENDPOINT = "/v1/forecast"

CURRENT_FIELDS = ("temperature_2m", "precipitation", "snowfall", "weather_code")
DAILY_FIELDS = ("temperature_2m_min", "temperature_2m_max", "snowfall_sum", "precipitation_sum")


def forecast_params(lat: float, lon: float) -> list[tuple[str, str]]:
    """Current conditions plus a one-day daily forecast in local time."""
    return build_query_params(
        latitude=lat,
        longitude=lon,
        current=CURRENT_FIELDS,
        daily=DAILY_FIELDS,
        timezone="auto",
        forecast_days=1,
    )


def _today(values: list[float | None] | None) -> float | None:
    return values[0] if values else None


def parse_snapshot(data: Any) -> WeatherSnapshot:
    """Turn an Open-Meteo response into a :class:`WeatherSnapshot`.

    Absent fields stay ``None``; only a missing section is an error.

    Raises:
        InvalidDataError: if the ``current`` or ``daily`` section is missing.
        NetworkError: if the body is not a forecast object.
    """
    try:
        forecast = OpenMeteoForecast.model_validate(data)
    except PydanticValidationError as exc:
        raise NetworkError(f"Failed to parse weather response: {exc}") from exc

    missing = [name for name in ("current", "daily") if getattr(forecast, name) is None]
    if missing:
        raise InvalidDataError(f"Invalid weather data received: missing {', '.join(missing)}")

    current = forecast.current
    daily = forecast.daily
    return WeatherSnapshot(
        current_temperature_c=current.temperature_2m,
        current_snowfall_cm=current.snowfall,
        current_precipitation_mm=current.precipitation,
        current_weather_code=current.weather_code,
        daily_min_temp_c=_today(daily.temperature_2m_min),
        daily_max_temp_c=_today(daily.temperature_2m_max),
        daily_snowfall_cm=_today(daily.snowfall_sum),
        daily_precipitation_mm=_today(daily.precipitation_sum),
    )


class WeatherFetcher:
    """Synchronous Open-Meteo client.

    Usage:
        with WeatherFetcher() as fetcher:
            snapshot = fetcher.fetch(42.36, -71.06)
    """

    def __init__(
        self,
        base_url: str = OPEN_METEO_URL,
        timeout: float = DEFAULT_TIMEOUT,
        user_agent: str = DEFAULT_USER_AGENT,
    ) -> None:
        self._transport = SyncTransport(base_url=base_url, timeout=timeout, user_agent=user_agent)

    def __enter__(self) -> WeatherFetcher:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP connection."""
        self._transport.close()

    @log_api_call
    def fetch(self, lat: float, lon: float) -> WeatherSnapshot:
        """Get current conditions and today's forecast at (lat, lon)."""
        data = self._transport.get(FORECAST_ENDPOINT, forecast_params(lat, lon))
        return parse_snapshot(data)


class AsyncWeatherFetcher:
    """Asynchronous Open-Meteo client.

    Usage:
        async with AsyncWeatherFetcher() as fetcher:
            snapshot = await fetcher.fetch(42.36, -71.06)
    """

    def __init__(
        self,
        base_url: str = OPEN_METEO_URL,
        timeout: float = DEFAULT_TIMEOUT,
        user_agent: str = DEFAULT_USER_AGENT,
    ) -> None:
        self._transport = AsyncTransport(base_url=base_url, timeout=timeout, user_agent=user_agent)

    async def __aenter__(self) -> AsyncWeatherFetcher:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the underlying HTTP connection."""
        await self._transport.close()

    @log_api_call
    async def fetch(self, lat: float, lon: float) -> WeatherSnapshot:
        """Get current conditions and today's forecast at (lat, lon)."""
        data = await self._transport.get(FORECAST_ENDPOINT, forecast_params(lat, lon))
        return parse_snapshot(data)
