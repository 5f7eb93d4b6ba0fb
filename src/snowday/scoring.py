"""Snow day probability model.

Three additive bands, each a step table evaluated most-severe-first:

* snow (0-50 points) on today's forecast snowfall,
* cold (0-30 points) on today's forecast minimum temperature,
* bonus (0-20 points) when today's snowfall and the *current* temperature
  both clear a paired threshold.

The sum is multiplied by the school type damping factor and clamped to
[0, 100]. Each country scores in its own units: the US profile converts to
inches and Fahrenheit first, the Canadian profile uses centimetres and
Celsius as delivered.
"""

from __future__ import annotations

import math
from collections.abc import Callable
from dataclasses import dataclass

from snowday.models.enums import Country, SchoolType
from snowday.models.result import ProbabilityResult, RiskLevel, ScoreBreakdown
from snowday.models.weather import WeatherSnapshot
from snowday.units import celsius_to_fahrenheit, cm_to_inches

MIN_PROBABILITY = 0.0
MAX_PROBABILITY = 100.0


def _identity(value: float) -> float:
    return value


@dataclass(frozen=True)
class ScoringProfile:
    """Per-country thresholds, in the country's own units."""

    country: Country
    snowfall_unit: str
    temperature_unit: str
    convert_snowfall: Callable[[float], float]
    convert_temperature: Callable[[float], float]
    # (minimum snowfall, points), deepest first
    snow_steps: tuple[tuple[float, int], ...]
    # (maximum temperature, points), coldest first
    cold_steps: tuple[tuple[float, int], ...]
    # (minimum snowfall, maximum current temperature, points)
    bonus_steps: tuple[tuple[float, float, int], ...]


PROFILES: dict[Country, ScoringProfile] = {
    Country.US: ScoringProfile(
        country=Country.US,
        snowfall_unit="in",
        temperature_unit="°F",
        convert_snowfall=cm_to_inches,
        convert_temperature=celsius_to_fahrenheit,
        snow_steps=((8, 50), (6, 45), (4, 35), (2, 25), (1, 15), (0.5, 8)),
        cold_steps=((5, 30), (15, 25), (25, 20), (32, 10)),
        bonus_steps=((6, 20, 20), (4, 30, 15), (2, 32, 10)),
    ),
    Country.CA: ScoringProfile(
        country=Country.CA,
        snowfall_unit="cm",
        temperature_unit="°C",
        convert_snowfall=_identity,
        convert_temperature=_identity,
        snow_steps=((20, 50), (15, 45), (10, 35), (5, 25), (2, 15), (1, 8)),
        cold_steps=((-30, 30), (-25, 25), (-20, 20), (-15, 15), (-10, 10), (-5, 5)),
        bonus_steps=((15, -15, 20), (10, -10, 15), (5, -5, 10)),
    ),
}

_ALERTS: tuple[tuple[int, str], ...] = (
    (80, "Very High: Schools will likely close!"),
    (60, "High: Strong chance of closure or delays."),
    (40, "Moderate: Possible delays, monitor conditions."),
    (20, "Low: Unlikely closure, but watch weather."),
    (0, "Very Low: Normal school day expected."),
)


def step_at_least(value: float, steps: tuple[tuple[float, int], ...]) -> int:
    """Points of the first step whose threshold ``value`` reaches."""
    for threshold, points in steps:
        if value >= threshold:
            return points
    return 0


def step_at_most(value: float, steps: tuple[tuple[float, int], ...]) -> int:
    """Points of the first step whose ceiling ``value`` stays under."""
    for ceiling, points in steps:
        if value <= ceiling:
            return points
    return 0


def bonus_step(
    snowfall: float,
    temperature: float,
    steps: tuple[tuple[float, float, int], ...],
) -> int:
    for min_snowfall, max_temperature, points in steps:
        if snowfall >= min_snowfall and temperature <= max_temperature:
            return points
    return 0


def clamp(value: float) -> float:
    return min(max(value, MIN_PROBABILITY), MAX_PROBABILITY)


def breakdown(
    snapshot: WeatherSnapshot,
    country: Country | str,
    school_type: SchoolType | str = SchoolType.PUBLIC,
) -> ScoreBreakdown:
    """Score every band and return the intermediate values."""
    profile = PROFILES[Country(country)]
    school_type = SchoolType(school_type)
    weather = snapshot.with_defaults()

    snowfall = profile.convert_snowfall(weather.daily_snowfall_cm)
    min_temp = profile.convert_temperature(weather.daily_min_temp_c)
    current_temp = profile.convert_temperature(weather.current_temperature_c)

    snow_points = step_at_least(snowfall, profile.snow_steps)
    cold_points = step_at_most(min_temp, profile.cold_steps)
    bonus_points = bonus_step(snowfall, current_temp, profile.bonus_steps)

    total = snow_points + cold_points + bonus_points
    return ScoreBreakdown(
        snow_points=snow_points,
        cold_points=cold_points,
        bonus_points=bonus_points,
        damping=school_type.damping,
        probability=clamp(total * school_type.damping),
    )


def round_probability(probability: float) -> int:
    """Round half up, so 62.5 reads as 63."""
    return int(math.floor(probability + 0.5))


def score(
    snapshot: WeatherSnapshot,
    country: Country | str,
    school_type: SchoolType | str = SchoolType.PUBLIC,
) -> int:
    """Snow day probability as an integer percentage in [0, 100]."""
    return round_probability(breakdown(snapshot, country, school_type).probability)


def risk_level(probability: int) -> RiskLevel:
    if probability >= 70:
        return RiskLevel.HIGH
    if probability >= 40:
        return RiskLevel.MEDIUM
    return RiskLevel.LOW


def alert_for(probability: float) -> str:
    """One-line narrative for a probability."""
    for threshold, message in _ALERTS:
        if probability >= threshold:
            return message
    return _ALERTS[-1][1]


def assess(
    snapshot: WeatherSnapshot,
    country: Country | str,
    school_type: SchoolType | str = SchoolType.PUBLIC,
) -> ProbabilityResult:
    """Score ``snapshot`` and attach the risk level and alert."""
    parts = breakdown(snapshot, country, school_type)
    probability = round_probability(parts.probability)
    return ProbabilityResult(
        score=probability,
        risk_level=risk_level(probability),
        alert=alert_for(parts.probability),
        breakdown=parts,
    )
