"""Metric to imperial conversions."""

from __future__ import annotations

CM_PER_INCH_FACTOR = 0.393701


def cm_to_inches(cm: float) -> float:
    return cm * CM_PER_INCH_FACTOR


def celsius_to_fahrenheit(celsius: float) -> float:
    return celsius * 9 / 5 + 32
