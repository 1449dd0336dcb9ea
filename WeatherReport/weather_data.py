"""Weather domain model - pure data structures independent of the HTTP layer."""
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from weather_provider import WeatherProviderError


@dataclass(frozen=True)
class Query:
    """A normalized request: city, day count in [1, 5] and temperature scale."""
    city: str
    days: int = 1
    use_fahrenheit: bool = False


@dataclass(frozen=True)
class Location:
    name: str
    country: str


@dataclass(frozen=True)
class Conditions:
    """Current conditions at the resolved location."""
    temp_c: float
    temp_f: float
    text: str


@dataclass(frozen=True)
class ForecastDay:
    """One day of a multi-day forecast."""
    date: str  # e.g. "2024-05-24"
    avgtemp_c: float
    avgtemp_f: float
    condition_text: str
    sunrise: str  # e.g. "05:48 AM"
    sunset: str


@dataclass(frozen=True)
class WeatherResponse:
    """Domain model for a weatherapi.com current or forecast response."""
    location: Location
    current: Conditions
    forecast: Optional[Tuple[ForecastDay, ...]] = None

    @property
    def is_forecast(self) -> bool:
        return self.forecast is not None

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "WeatherResponse":
        """
        Build a response from the decoded JSON payload.

        Args:
            data: Decoded body of /current.json or /forecast.json

        Returns:
            WeatherResponse with forecast days in the order returned

        Raises:
            WeatherProviderError: If a required block is missing
        """
        if not isinstance(data, dict):
            raise WeatherProviderError("Response is not a JSON object")

        location = _require(data, "location")
        current = _require(data, "current")

        forecast = None
        forecast_block = data.get("forecast")
        if forecast_block:
            forecast = tuple(
                _parse_forecast_day(day) for day in forecast_block.get("forecastday", [])
            )

        return cls(
            location=Location(name=location["name"], country=location["country"]),
            current=Conditions(
                temp_c=current["temp_c"],
                temp_f=current["temp_f"],
                text=current["condition"]["text"],
            ),
            forecast=forecast,
        )


def _require(data: Dict[str, Any], key: str) -> Dict[str, Any]:
    block = data.get(key)
    if not block:
        raise WeatherProviderError(f"Response missing '{key}' block")
    return block


def _parse_forecast_day(entry: Dict[str, Any]) -> ForecastDay:
    day = entry["day"]
    astro = entry["astro"]
    return ForecastDay(
        date=entry["date"],
        avgtemp_c=day["avgtemp_c"],
        avgtemp_f=day["avgtemp_f"],
        condition_text=day["condition"]["text"],
        sunrise=astro["sunrise"],
        sunset=astro["sunset"],
    )
