"""Shared fixtures: sample weatherapi.com payloads."""
import pytest


@pytest.fixture
def current_payload():
    """Sample /current.json response for Paris."""
    return {
        "location": {
            "name": "Paris",
            "region": "Ile-de-France",
            "country": "France",
            "lat": 48.87,
            "lon": 2.33,
            "localtime": "2024-05-24 14:05",
        },
        "current": {
            "last_updated": "2024-05-24 14:00",
            "temp_c": 18.0,
            "temp_f": 64.4,
            "is_day": 1,
            "condition": {"text": "Partly cloudy", "code": 1003},
            "wind_kph": 11.2,
            "humidity": 63,
        },
    }


def _forecast_day(date, avg_c, avg_f, text, sunrise, sunset):
    return {
        "date": date,
        "day": {
            "maxtemp_c": avg_c + 4,
            "mintemp_c": avg_c - 4,
            "avgtemp_c": avg_c,
            "avgtemp_f": avg_f,
            "condition": {"text": text, "code": 1000},
        },
        "astro": {"sunrise": sunrise, "sunset": sunset},
    }


@pytest.fixture
def forecast_payload():
    """Sample /forecast.json response for Tokyo with three days."""
    return {
        "location": {"name": "Tokyo", "country": "Japan"},
        "current": {
            "temp_c": 22.5,
            "temp_f": 72.5,
            "condition": {"text": "Sunny"},
        },
        "forecast": {
            "forecastday": [
                _forecast_day("2024-05-24", 21.3, 70.3, "Sunny", "04:31 AM", "06:47 PM"),
                _forecast_day("2024-05-25", 19.8, 67.6, "Patchy rain nearby", "04:30 AM", "06:48 PM"),
                _forecast_day("2024-05-26", 17.0, 62.6, "Moderate rain", "04:30 AM", "06:48 PM"),
            ]
        },
    }
