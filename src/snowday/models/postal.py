"""Postal code model."""

from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict

from snowday.exceptions import ValidationError
from snowday.models.enums import Country

_WHITESPACE_RE = re.compile(r"\s+")

POSTAL_PATTERNS: dict[Country, re.Pattern[str]] = {
    Country.US: re.compile(r"^\d{5}(-\d{4})?$", re.ASCII),
    Country.CA: re.compile(r"^[A-Z]\d[A-Z]\d[A-Z]\d$", re.ASCII),
}

_EXAMPLES: dict[Country, str] = {
    Country.US: "ZIP code (e.g., 90210)",
    Country.CA: "postal code (e.g., M5V3L9)",
}


def normalize_postal_code(raw: str) -> str:
    """Strip all whitespace and uppercase."""
    return _WHITESPACE_RE.sub("", raw).upper()


def is_valid_postal_code(raw: str, country: Country) -> bool:
    return POSTAL_PATTERNS[country].fullmatch(normalize_postal_code(raw)) is not None


class PostalCode(BaseModel):
    """A postal code that has passed its country's pattern check.

    Build instances with :meth:`parse`; direct construction skips validation.
    """

    model_config = ConfigDict(frozen=True)

    value: str
    country: Country

    @classmethod
    def parse(cls, raw: str, country: Country | str) -> PostalCode:
        """Normalize and validate ``raw`` for ``country``.

        Raises:
            ValidationError: if ``raw`` is blank or does not match the pattern.
        """
        country = Country(country)
        if not raw or not raw.strip():
            raise ValidationError("Please enter a postal code")
        value = normalize_postal_code(raw)
        if POSTAL_PATTERNS[country].fullmatch(value) is None:
            raise ValidationError(f"Invalid {_EXAMPLES[country]} format: {raw!r}")
        return cls(value=value, country=country)

    @property
    def formatted(self) -> str:
        """Canadian codes as ``A1A 1A1``; US codes unchanged."""
        if self.country is Country.CA:
            return f"{self.value[:3]} {self.value[3:]}"
        return self.value

    def __str__(self) -> str:
        return self.formatted
