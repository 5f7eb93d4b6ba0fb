"""Scoring result models."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class RiskLevel(str, Enum):
    """Coarse risk bucket shown next to the probability."""

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


class ScoreBreakdown(BaseModel):
    """Intermediate values of one scoring run."""

    model_config = ConfigDict(frozen=True)

    snow_points: int
    cold_points: int
    bonus_points: int
    damping: float
    probability: float = Field(ge=0, le=100)

    @property
    def raw_points(self) -> int:
        return self.snow_points + self.cold_points + self.bonus_points


class ProbabilityResult(BaseModel):
    """Snow day probability with its risk narrative."""

    model_config = ConfigDict(frozen=True)

    score: int = Field(ge=0, le=100)
    risk_level: RiskLevel
    alert: str
    breakdown: ScoreBreakdown
