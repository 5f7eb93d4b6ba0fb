"""Shared test fixtures and sample API responses."""

from __future__ import annotations

import pytest

import snowday._logging as api_logging

NOMINATIM_URL = "https://nominatim.openstreetmap.org"
OPEN_METEO_URL = "https://api.open-meteo.com"


SAMPLE_PLACE_US = {
    "place_id": 297_450_377,
    "licence": "Data © OpenStreetMap contributors, ODbL 1.0.",
    "lat": "34.0901",
    "lon": "-118.4065",
    "class": "place",
    "type": "postcode",
    "display_name": "Beverly Hills, Los Angeles County, California, 90210, United States",
    "address": {
        "city": "Beverly Hills",
        "county": "Los Angeles County",
        "state": "California",
        "ISO3166-2-lvl4": "US-CA",
        "postcode": "90210",
        "country": "United States",
        "country_code": "us",
    },
}

SAMPLE_PLACE_CA = {
    "place_id": 1_234_567,
    "lat": "43.6426",
    "lon": "-79.3871",
    "display_name": "M5V 3L9, Toronto, Ontario, Canada",
    "address": {
        "postcode": "M5V 3L9",
        "city": "Toronto",
        "state": "Ontario",
        "country": "Canada",
        "country_code": "ca",
    },
}

# 20.32 cm is 8 in; -15 °C is 5 °F
SAMPLE_FORECAST = {
    "latitude": 34.09,
    "longitude": -118.41,
    "generationtime_ms": 0.05,
    "utc_offset_seconds": -28800,
    "timezone": "America/Los_Angeles",
    "current_units": {
        "time": "iso8601",
        "temperature_2m": "°C",
        "precipitation": "mm",
        "snowfall": "cm",
        "weather_code": "wmo code",
    },
    "current": {
        "time": "2026-01-15T07:00",
        "interval": 900,
        "temperature_2m": -15.0,
        "precipitation": 0.4,
        "snowfall": 0.28,
        "weather_code": 75,
    },
    "daily_units": {
        "time": "iso8601",
        "temperature_2m_min": "°C",
        "temperature_2m_max": "°C",
        "snowfall_sum": "cm",
        "precipitation_sum": "mm",
    },
    "daily": {
        "time": ["2026-01-15"],
        "temperature_2m_min": [-15.0],
        "temperature_2m_max": [-6.2],
        "snowfall_sum": [20.32],
        "precipitation_sum": [21.5],
    },
}


@pytest.fixture(autouse=True)
def log_dir(tmp_path):
    """Send the API call log to tmp_path and restore the previous directory."""
    old_dir = api_logging._LOG_DIR
    api_logging.configure_log_dir(tmp_path)

    yield tmp_path

    api_logging.configure_log_dir(old_dir)
