"""Geocoding models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class NominatimAddress(BaseModel):
    """The ``address`` breakdown of a Nominatim search result."""

    model_config = ConfigDict(frozen=True)

    city: str | None = None
    town: str | None = None
    village: str | None = None
    state: str | None = None
    province: str | None = None
    country_code: str | None = None

    @property
    def locality(self) -> str | None:
        return self.city or self.town or self.village

    @property
    def region(self) -> str | None:
        return self.state or self.province


class NominatimPlace(BaseModel):
    """A single Nominatim search result."""

    model_config = ConfigDict(frozen=True)

    lat: float
    lon: float
    display_name: str | None = None
    address: NominatimAddress | None = None


class GeoLocation(BaseModel):
    """Resolved coordinates and a human-readable place name."""

    model_config = ConfigDict(frozen=True)

    latitude: float
    longitude: float
    display_name: str

    @property
    def coordinates(self) -> str:
        return f"{self.latitude:.4f}, {self.longitude:.4f}"
