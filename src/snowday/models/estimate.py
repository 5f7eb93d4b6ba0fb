"""Pipeline output model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from snowday.models.enums import Country, SchoolType
from snowday.models.location import GeoLocation
from snowday.models.postal import PostalCode
from snowday.models.result import ProbabilityResult
from snowday.models.weather import WeatherSnapshot


class Estimate(BaseModel):
    """Everything one snow day request produced.

    ``sequence`` orders requests issued by the same client; a caller
    holding an older sequence than the client's latest should discard it.
    """

    model_config = ConfigDict(frozen=True)

    sequence: int
    postal_code: PostalCode
    school_type: SchoolType
    location: GeoLocation
    snapshot: WeatherSnapshot
    result: ProbabilityResult
    is_sample: bool = False

    @property
    def country(self) -> Country:
        return self.postal_code.country
