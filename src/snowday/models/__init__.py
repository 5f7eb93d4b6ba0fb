"""snowday data models."""

from snowday.models.enums import Country, SchoolType
from snowday.models.estimate import Estimate
from snowday.models.location import GeoLocation, NominatimAddress, NominatimPlace
from snowday.models.postal import PostalCode, is_valid_postal_code, normalize_postal_code
from snowday.models.result import ProbabilityResult, RiskLevel, ScoreBreakdown
from snowday.models.weather import (
    OpenMeteoCurrent,
    OpenMeteoDaily,
    OpenMeteoForecast,
    WeatherSnapshot,
    weather_code_to_condition,
)

__all__ = [
    "Country",
    "Estimate",
    "GeoLocation",
    "NominatimAddress",
    "NominatimPlace",
    "OpenMeteoCurrent",
    "OpenMeteoDaily",
    "OpenMeteoForecast",
    "PostalCode",
    "ProbabilityResult",
    "RiskLevel",
    "SchoolType",
    "ScoreBreakdown",
    "WeatherSnapshot",
    "is_valid_postal_code",
    "normalize_postal_code",
    "weather_code_to_condition",
]
