"""weatherapi.com provider implementation."""
import logging
from dataclasses import dataclass, field
from typing import Dict

import requests

from config import DEFAULT_BASE_URL
from weather_data import Query, WeatherResponse
from weather_provider import WeatherApiError, WeatherProviderBase, WeatherProviderError


@dataclass(frozen=True)
class WeatherRequest:
    """A fully built outbound request."""
    mode: str  # "current" or "forecast"
    url: str
    params: Dict[str, str] = field(default_factory=dict)


def build_request(query: Query, api_key: str, base_url: str = DEFAULT_BASE_URL) -> WeatherRequest:
    """
    Select the endpoint for a query and build its URL.

    One day uses /current.json with no day count; more than one day uses
    /forecast.json with days=N.

    Args:
        query: Normalized query
        api_key: weatherapi.com key
        base_url: API root, e.g. "https://api.weatherapi.com/v1"

    Returns:
        WeatherRequest: mode, encoded URL and the query parameters
    """
    params = {"key": api_key, "q": query.city}
    if query.days > 1:
        mode = "forecast"
        params["days"] = str(query.days)
    else:
        mode = "current"

    endpoint = f"{base_url.rstrip('/')}/{mode}.json"
    url = requests.Request("GET", endpoint, params=params).prepare().url
    return WeatherRequest(mode=mode, url=url, params=params)


class WeatherApiProvider(WeatherProviderBase):
    """
    Weather provider using the weatherapi.com v1 API.

    Current conditions: https://www.weatherapi.com/docs/#apis-realtime
    Forecast (the free plan returns at most 3 days): /forecast.json
    """

    def __init__(self, api_key: str, base_url: str = DEFAULT_BASE_URL):
        """
        Initialize the provider.

        Args:
            api_key: weatherapi.com API key (may be empty; the API answers 401)
            base_url: API root URL
        """
        self.api_key = api_key
        self.base_url = base_url

    def get_weather(self, query: Query) -> WeatherResponse:
        """
        Perform exactly one GET for the query.

        Returns:
            WeatherResponse: Parsed response

        Raises:
            WeatherApiError: If the API answers with an error status
            WeatherProviderError: On network failure or a malformed body
        """
        request = build_request(query, self.api_key, self.base_url)

        try:
            logging.info("Making weatherapi.com %s request for %r", request.mode, query.city)
            logging.debug("Request parameters: q=%s days=%s", query.city, request.params.get("days"))

            response = requests.get(request.url)

            logging.info("API response status: %s", response.status_code)

            if not response.ok:
                logging.error("API request failed with status %s", response.status_code)
                self._handle_error_response(response)

            try:
                data = response.json()
            except ValueError as e:
                logging.error("Response body is not JSON: %s", response.text[:500])
                raise WeatherProviderError(f"Failed to parse response: {e}") from e
            logging.debug("API response (truncated): %s...", str(data)[:500])

            weather = WeatherResponse.from_json(data)
            logging.info(
                "Parsed weather for %s, %s (forecast days: %s)",
                weather.location.name,
                weather.location.country,
                len(weather.forecast) if weather.forecast is not None else 0,
            )
            return weather

        except requests.exceptions.RequestException as e:
            logging.error("Network error during API request: %s", e)
            raise WeatherProviderError(f"Network error: {e}") from e
        except (KeyError, ValueError, TypeError) as e:
            logging.error("Failed to parse API response: %s", e, exc_info=True)
            raise WeatherProviderError(f"Failed to parse response: {e}") from e

    def _handle_error_response(self, response: requests.Response) -> None:
        """Raise WeatherApiError, keeping the provider's own message as detail."""
        detail = None
        try:
            error_data = response.json()
            logging.error("weatherapi.com error response: %s", error_data)
            if isinstance(error_data, dict):
                detail = (error_data.get("error") or {}).get("message")
        except ValueError:
            logging.error(
                "Non-JSON error response: HTTP %s, body: %s",
                response.status_code,
                response.text[:500],
            )

        raise WeatherApiError(
            status_code=response.status_code,
            status_text=response.reason or "",
            detail=detail,
        )
