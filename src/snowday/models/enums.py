"""Country and school type enumerations."""

from __future__ import annotations

from enum import Enum


class Country(str, Enum):
    """Supported countries."""

    US = "US"
    CA = "CA"

    @property
    def is_imperial(self) -> bool:
        return self is Country.US


class SchoolType(str, Enum):
    """School categories, each with its own closure tendency."""

    PUBLIC = "public"
    PRIVATE = "private"
    COLLEGE = "college"

    @property
    def damping(self) -> float:
        """Multiplier applied to the raw closure score."""
        return _DAMPING[self]


_DAMPING: dict[SchoolType, float] = {
    SchoolType.PUBLIC: 1.0,
    SchoolType.PRIVATE: 0.8,
    SchoolType.COLLEGE: 0.6,
}
