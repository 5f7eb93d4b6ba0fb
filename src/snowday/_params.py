"""Query parameter builder for the upstream HTTP APIs."""

from __future__ import annotations

from enum import Enum
from typing import Any


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, (list, tuple)):
        return ",".join(_format_value(v) for v in value)
    return str(value)


def build_query_params(**kwargs: Any) -> list[tuple[str, str]]:
    """Build a list of query parameter tuples from keyword arguments.

    Booleans become ``1``/``0`` flags and sequences become comma-separated
    field lists, the form both Nominatim and Open-Meteo expect.

    Args:
        **kwargs: Keyword arguments where keys are parameter names. ``None``
                  values are skipped.

    Returns:
        List of (key, value) tuples suitable for httpx params.
    """
    params: list[tuple[str, str]] = []
    for key, value in kwargs.items():
        if value is None:
            continue
        params.append((key, _format_value(value)))
    return params
