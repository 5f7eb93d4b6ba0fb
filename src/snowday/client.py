"""Public pipeline clients: postal code in, snow day estimate out."""

from __future__ import annotations

from snowday._http import DEFAULT_TIMEOUT, DEFAULT_USER_AGENT
from snowday._logging import log_service_call
from snowday.forecast import OPEN_METEO_URL, AsyncWeatherFetcher, WeatherFetcher
from snowday.geocode import NOMINATIM_URL, AsyncLocationResolver, LocationResolver
from snowday.models.enums import Country, SchoolType
from snowday.models.estimate import Estimate
from snowday.models.location import GeoLocation
from snowday.models.postal import PostalCode
from snowday.models.weather import WeatherSnapshot
from snowday.sample import sample_snapshot
from snowday.scoring import assess
from snowday.sequencing import RequestSequencer


def _build_estimate(
    sequence: int,
    code: PostalCode,
    school_type: SchoolType | str,
    location: GeoLocation,
    snapshot: WeatherSnapshot,
    is_sample: bool = False,
) -> Estimate:
    school_type = SchoolType(school_type)
    return Estimate(
        sequence=sequence,
        postal_code=code,
        school_type=school_type,
        location=location,
        snapshot=snapshot,
        result=assess(snapshot, code.country, school_type),
        is_sample=is_sample,
    )


def _sample_location(country: Country) -> GeoLocation:
    return GeoLocation(latitude=0.0, longitude=0.0, display_name=f"Sample location, {country.value}")


class SnowDayClient:
    """Synchronous snow day client.

    Usage:
        with SnowDayClient() as client:
            estimate = client.estimate("90210", "US", "public")
            print(estimate.result.score)
    """

    def __init__(
        self,
        geocoder_url: str = NOMINATIM_URL,
        weather_url: str = OPEN_METEO_URL,
        timeout: float = DEFAULT_TIMEOUT,
        user_agent: str = DEFAULT_USER_AGENT,
    ) -> None:
        self._resolver = LocationResolver(base_url=geocoder_url, timeout=timeout, user_agent=user_agent)
        self._fetcher = WeatherFetcher(base_url=weather_url, timeout=timeout, user_agent=user_agent)
        self._sequencer = RequestSequencer()

    def __enter__(self) -> SnowDayClient:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP connections."""
        self._resolver.close()
        self._fetcher.close()

    def is_current(self, sequence: int) -> bool:
        """True if no newer :meth:`estimate` call has started since ``sequence``."""
        return self._sequencer.is_current(sequence)

    def resolve(self, postal_code: str, country: Country | str) -> GeoLocation:
        """Validate ``postal_code`` and geocode it."""
        return self._resolver.resolve(PostalCode.parse(postal_code, country))

    def fetch(self, lat: float, lon: float) -> WeatherSnapshot:
        """Fetch today's weather at (lat, lon)."""
        return self._fetcher.fetch(lat, lon)

    @log_service_call
    def estimate(
        self,
        postal_code: str,
        country: Country | str,
        school_type: SchoolType | str = SchoolType.PUBLIC,
    ) -> Estimate:
        """Validate, geocode, fetch and score, in that order.

        The first failing stage's exception propagates unchanged.
        """
        sequence = self._sequencer.next()
        code = PostalCode.parse(postal_code, country)
        location = self._resolver.resolve(code)
        snapshot = self._fetcher.fetch(location.latitude, location.longitude)
        return _build_estimate(sequence, code, school_type, location, snapshot)

    def sample_estimate(
        self,
        postal_code: str,
        country: Country | str,
        school_type: SchoolType | str = SchoolType.PUBLIC,
        location: GeoLocation | None = None,
    ) -> Estimate:
        """Score the fixed sample weather instead of live data."""
        sequence = self._sequencer.next()
        code = PostalCode.parse(postal_code, country)
        return _build_estimate(
            sequence,
            code,
            school_type,
            location or _sample_location(code.country),
            sample_snapshot(code.country),
            is_sample=True,
        )


class AsyncSnowDayClient:
    """Asynchronous snow day client.

    Usage:
        async with AsyncSnowDayClient() as client:
            estimate = await client.estimate("M5V 3L9", "CA")
            if client.is_current(estimate.sequence):
                show(estimate)
    """

    def __init__(
        self,
        geocoder_url: str = NOMINATIM_URL,
        weather_url: str = OPEN_METEO_URL,
        timeout: float = DEFAULT_TIMEOUT,
        user_agent: str = DEFAULT_USER_AGENT,
    ) -> None:
        self._resolver = AsyncLocationResolver(base_url=geocoder_url, timeout=timeout, user_agent=user_agent)
        self._fetcher = AsyncWeatherFetcher(base_url=weather_url, timeout=timeout, user_agent=user_agent)
        self._sequencer = RequestSequencer()

    async def __aenter__(self) -> AsyncSnowDayClient:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the underlying HTTP connections."""
        await self._resolver.close()
        await self._fetcher.close()

    def is_current(self, sequence: int) -> bool:
        """True if no newer :meth:`estimate` call has started since ``sequence``."""
        return self._sequencer.is_current(sequence)

    async def resolve(self, postal_code: str, country: Country | str) -> GeoLocation:
        """Validate ``postal_code`` and geocode it."""
        return await self._resolver.resolve(PostalCode.parse(postal_code, country))

    async def fetch(self, lat: float, lon: float) -> WeatherSnapshot:
        """Fetch today's weather at (lat, lon)."""
        return await self._fetcher.fetch(lat, lon)

    @log_service_call
    async def estimate(
        self,
        postal_code: str,
        country: Country | str,
        school_type: SchoolType | str = SchoolType.PUBLIC,
    ) -> Estimate:
        """Validate, geocode, fetch and score, in that order.

        The first failing stage's exception propagates unchanged.
        """
        sequence = self._sequencer.next()
        code = PostalCode.parse(postal_code, country)
        location = await self._resolver.resolve(code)
        snapshot = await self._fetcher.fetch(location.latitude, location.longitude)
        return _build_estimate(sequence, code, school_type, location, snapshot)

    def sample_estimate(
        self,
        postal_code: str,
        country: Country | str,
        school_type: SchoolType | str = SchoolType.PUBLIC,
        location: GeoLocation | None = None,
    ) -> Estimate:
        """Score the fixed sample weather instead of live data."""
        sequence = self._sequencer.next()
        code = PostalCode.parse(postal_code, country)
        return _build_estimate(
            sequence,
            code,
            school_type,
            location or _sample_location(code.country),
            sample_snapshot(code.country),
            is_sample=True,
        )
