"""Weather provider abstraction - allows swapping different weather APIs."""
from abc import ABC, abstractmethod
from typing import Optional


class WeatherProviderBase(ABC):
    """Abstract base class for weather data providers."""

    @abstractmethod
    def get_weather(self, query):
        """
        Fetch current conditions or a forecast for a query.

        Args:
            query: Normalized Query (city, days, scale)

        Returns:
            WeatherResponse: Parsed provider response

        Raises:
            WeatherProviderError: If the provider fails to fetch data
        """
        pass


class WeatherProviderError(Exception):
    """Exception raised when a weather provider fails."""
    pass


class WeatherApiError(WeatherProviderError):
    """The provider answered with an HTTP error status."""

    def __init__(
        self,
        status_code: int,
        status_text: str = "",
        message: Optional[str] = None,
        detail: Optional[str] = None,
    ):
        self.status_code = status_code
        self.status_text = status_text
        self.message = message or f"Request failed with status code {status_code}"
        self.detail = detail
        super().__init__(self.message)
