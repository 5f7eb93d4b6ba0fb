"""Postal code to coordinates via OpenStreetMap Nominatim."""

from __future__ import annotations

from typing import Any

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from snowday._http import DEFAULT_TIMEOUT, DEFAULT_USER_AGENT, AsyncTransport, SyncTransport
from snowday._logging import log_api_call
from snowday._params import build_query_params
from snowday.exceptions import NetworkError, NotFoundError
from snowday.models.enums import Country
from snowday.models.location import GeoLocation, NominatimAddress, NominatimPlace
from snowday.models.postal import PostalCode

NOMINATIM_URL = "https://nominatim.openstreetmap.org"
SEARCH_ENDPOINT = "/search"

_PLACES = TypeAdapter(list[NominatimPlace])


def search_params(code: PostalCode) -> list[tuple[str, str]]:
    """Query for the single best match of ``code`` within its country."""
    return build_query_params(
        format="json",
        q=code.value,
        countrycodes=code.country.value.lower(),
        limit=1,
        addressdetails=True,
    )


def build_display_name(address: NominatimAddress | None, country: Country) -> str:
    """``"<city|town|village>, <state|province>"`` with fallbacks."""
    address = address or NominatimAddress()
    return f"{address.locality or 'Unknown'}, {address.region or country.value}"


def parse_location(data: Any, code: PostalCode) -> GeoLocation:
    """Turn a Nominatim search response into a :class:`GeoLocation`.

    Raises:
        NotFoundError: if the response holds no results.
        NetworkError: if the response is not a list of places.
    """
    try:
        places = _PLACES.validate_python(data)
    except PydanticValidationError as exc:
        raise NetworkError(f"Failed to parse geocoding response: {exc}") from exc
    if not places:
        raise NotFoundError(f"No location found for postal code {code}")

    place = places[0]
    return GeoLocation(
        latitude=place.lat,
        longitude=place.lon,
        display_name=build_display_name(place.address, code.country),
    )


class LocationResolver:
    """Synchronous postal code resolver.

    Usage:
        with LocationResolver() as resolver:
            location = resolver.resolve(PostalCode.parse("90210", Country.US))
    """

    def __init__(
        self,
        base_url: str = NOMINATIM_URL,
        timeout: float = DEFAULT_TIMEOUT,
        user_agent: str = DEFAULT_USER_AGENT,
    ) -> None:
        self._transport = SyncTransport(base_url=base_url, timeout=timeout, user_agent=user_agent)

    def __enter__(self) -> LocationResolver:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP connection."""
        self._transport.close()

    @log_api_call
    def resolve(self, code: PostalCode) -> GeoLocation:
        """Look up ``code``. Every call hits the network; nothing is cached."""
        data = self._transport.get(SEARCH_ENDPOINT, search_params(code))
        return parse_location(data, code)


class AsyncLocationResolver:
    """Asynchronous postal code resolver.

    Usage:
        async with AsyncLocationResolver() as resolver:
            location = await resolver.resolve(code)
    """

    def __init__(
        self,
        base_url: str = NOMINATIM_URL,
        timeout: float = DEFAULT_TIMEOUT,
        user_agent: str = DEFAULT_USER_AGENT,
    ) -> None:
        self._transport = AsyncTransport(base_url=base_url, timeout=timeout, user_agent=user_agent)

    async def __aenter__(self) -> AsyncLocationResolver:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the underlying HTTP connection."""
        await self._transport.close()

    @log_api_call
    async def resolve(self, code: PostalCode) -> GeoLocation:
        """Look up ``code``. Every call hits the network; nothing is cached."""
        data = await self._transport.get(SEARCH_ENDPOINT, search_params(code))
        return parse_location(data, code)
