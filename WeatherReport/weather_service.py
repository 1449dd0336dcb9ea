"""Weather service: one fetch, then check the provider resolved the requested city."""
import logging

from weather_data import Query, WeatherResponse
from weather_provider import WeatherProviderBase


class CityMismatchError(Exception):
    """The provider resolved the query to a differently named city."""

    def __init__(self, requested: str, resolved: str):
        self.requested = requested
        self.resolved = resolved
        super().__init__(
            f'No weather data for "{requested}" found. '
            f"Perhaps you meant {resolved}? Please check your spelling."
        )


def city_matches(requested: str, resolved: str) -> bool:
    """Case-insensitive exact comparison; no fuzzy or partial matching."""
    return requested.casefold() == resolved.casefold()


class WeatherService:
    """
    Service that wraps a weather provider with resolved-city validation.

    weatherapi.com silently "corrects" misspelt names (Londin -> London), so
    a response is only accepted when its location name matches the request.
    """

    def __init__(self, provider: WeatherProviderBase):
        self.provider = provider

    def get_report(self, query: Query) -> WeatherResponse:
        """
        Fetch weather for a query and validate the resolved city.

        Returns:
            WeatherResponse: Response whose location matches query.city

        Raises:
            WeatherProviderError: If the provider fails
            CityMismatchError: If the resolved city differs from the request
        """
        logging.info("Fetching weather for %r (%s day(s))", query.city, query.days)
        response = self.provider.get_weather(query)

        resolved = response.location.name
        if not city_matches(query.city, resolved):
            logging.warning("Requested city %r resolved to %r", query.city, resolved)
            raise CityMismatchError(query.city, resolved)

        return response
