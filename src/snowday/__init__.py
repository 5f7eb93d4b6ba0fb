"""snowday — Snow day probability for US ZIP codes and Canadian postal codes."""

from snowday.client import AsyncSnowDayClient, SnowDayClient
from snowday.display import DisplayReport
from snowday.exceptions import (
    APIError,
    InvalidDataError,
    NetworkError,
    NotFoundError,
    RequestTimeoutError,
    SnowDayError,
    ValidationError,
)
from snowday.forecast import AsyncWeatherFetcher, WeatherFetcher
from snowday.geocode import AsyncLocationResolver, LocationResolver
from snowday.models import (
    Country,
    Estimate,
    GeoLocation,
    PostalCode,
    ProbabilityResult,
    RiskLevel,
    SchoolType,
    WeatherSnapshot,
)
from snowday.sample import sample_snapshot
from snowday.scoring import assess, score
from snowday.sequencing import RequestSequencer

__all__ = [
    "APIError",
    "AsyncLocationResolver",
    "AsyncSnowDayClient",
    "AsyncWeatherFetcher",
    "Country",
    "DisplayReport",
    "Estimate",
    "GeoLocation",
    "InvalidDataError",
    "LocationResolver",
    "NetworkError",
    "NotFoundError",
    "PostalCode",
    "ProbabilityResult",
    "RequestSequencer",
    "RequestTimeoutError",
    "RiskLevel",
    "SchoolType",
    "SnowDayClient",
    "SnowDayError",
    "ValidationError",
    "WeatherFetcher",
    "WeatherSnapshot",
    "assess",
    "sample_snapshot",
    "score",
]

__version__ = "0.1.0"
