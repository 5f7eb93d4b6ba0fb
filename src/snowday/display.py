"""Formatting helpers that project an estimate into display units."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from snowday.models.enums import Country
from snowday.models.estimate import Estimate
from snowday.units import celsius_to_fahrenheit, cm_to_inches


def format_snowfall(cm: float, country: Country) -> str:
    """Format snowfall as inches (US) or centimetres (CA), one decimal."""
    if country.is_imperial:
        return f"{cm_to_inches(cm):.1f} inches"
    return f"{cm:.1f} cm"


def format_temperature(celsius: float, country: Country) -> str:
    """Format a temperature as °F (US) or °C (CA), one decimal."""
    if country.is_imperial:
        return f"{celsius_to_fahrenheit(celsius):.1f}°F"
    return f"{celsius:.1f}°C"


class DisplayReport(BaseModel):
    """An estimate rendered as strings, ready for a UI."""

    model_config = ConfigDict(frozen=True)

    probability: int
    risk_level: str
    alert: str
    location: str
    coordinates: str
    snowfall: str
    temperature: str
    temp_min: str
    temp_max: str
    condition: str
    is_sample: bool = False

    @classmethod
    def from_estimate(cls, estimate: Estimate) -> DisplayReport:
        country = estimate.country
        weather = estimate.snapshot.with_defaults()
        return cls(
            probability=estimate.result.score,
            risk_level=estimate.result.risk_level.value,
            alert=estimate.result.alert,
            location=estimate.location.display_name,
            coordinates=estimate.location.coordinates,
            snowfall=format_snowfall(weather.daily_snowfall_cm, country),
            temperature=format_temperature(weather.current_temperature_c, country),
            temp_min=format_temperature(weather.daily_min_temp_c, country),
            temp_max=format_temperature(weather.daily_max_temp_c, country),
            condition=estimate.snapshot.condition,
            is_sample=estimate.is_sample,
        )
