"""Tests for the weatherapi.com provider."""
from unittest.mock import Mock, patch
from urllib.parse import parse_qs, urlparse

import pytest
import requests
from weather_data import Query, WeatherResponse
from weather_provider import WeatherApiError, WeatherProviderError
from weatherapi_provider import WeatherApiProvider, build_request


@pytest.fixture
def provider():
    """Create weatherapi.com provider instance."""
    return WeatherApiProvider(api_key="test_key", base_url="https://api.example.test/v1")


def _response(status_code=200, json_data=None, reason="OK"):
    response = Mock()
    response.status_code = status_code
    response.ok = 200 <= status_code < 300
    response.reason = reason
    response.text = ""
    response.json.return_value = json_data
    return response


def test_build_request_single_day():
    """Test one day uses the current endpoint without a day count."""
    request = build_request(Query(city="Paris", days=1), "abc", "https://api.example.test/v1")

    parsed = urlparse(request.url)
    params = parse_qs(parsed.query)
    assert request.mode == "current"
    assert parsed.path == "/v1/current.json"
    assert params == {"key": ["abc"], "q": ["Paris"]}
    assert "days" not in request.params


@pytest.mark.parametrize("days", [2, 3, 4, 5])
def test_build_request_forecast(days):
    """Test more than one day uses the forecast endpoint with days=N."""
    request = build_request(Query(city="Tokyo", days=days), "abc")

    parsed = urlparse(request.url)
    assert request.mode == "forecast"
    assert parsed.netloc == "api.weatherapi.com"
    assert parsed.path == "/v1/forecast.json"
    assert parse_qs(parsed.query)["days"] == [str(days)]


def test_build_request_encodes_city():
    request = build_request(Query(city="San José", days=1), "abc")

    assert parse_qs(urlparse(request.url).query)["q"] == ["San José"]
    assert " " not in request.url


def test_get_weather_current(provider, current_payload):
    """Test a successful current-conditions call."""
    with patch('weatherapi_provider.requests.get') as mock_get:
        mock_get.return_value = _response(json_data=current_payload)

        weather = provider.get_weather(Query(city="Paris"))

        assert isinstance(weather, WeatherResponse)
        assert weather.location.name == "Paris"
        assert weather.forecast is None
        mock_get.assert_called_once()
        url = mock_get.call_args[0][0]
        assert url.startswith("https://api.example.test/v1/current.json?")
        assert "timeout" not in mock_get.call_args[1]


def test_get_weather_forecast(provider, forecast_payload):
    """Test a successful forecast call."""
    with patch('weatherapi_provider.requests.get') as mock_get:
        mock_get.return_value = _response(json_data=forecast_payload)

        weather = provider.get_weather(Query(city="Tokyo", days=3, use_fahrenheit=True))

        assert len(weather.forecast) == 3
        assert "days=3" in mock_get.call_args[0][0]


def test_get_weather_http_error(provider):
    """Test handling of HTTP error statuses."""
    with patch('weatherapi_provider.requests.get') as mock_get:
        mock_get.return_value = _response(
            status_code=401,
            reason="Unauthorized",
            json_data={"error": {"code": 2006, "message": "API key is invalid."}},
        )

        with pytest.raises(WeatherApiError) as exc_info:
            provider.get_weather(Query(city="Paris"))

        error = exc_info.value
        assert error.status_code == 401
        assert error.status_text == "Unauthorized"
        assert error.message == "Request failed with status code 401"
        assert error.detail == "API key is invalid."


def test_get_weather_http_error_non_json(provider):
    """Test an error body that is not JSON still gives an API error."""
    with patch('weatherapi_provider.requests.get') as mock_get:
        response = _response(status_code=502, reason="Bad Gateway")
        response.json.side_effect = ValueError("No JSON")
        response.text = "<html>bad gateway</html>"
        mock_get.return_value = response

        with pytest.raises(WeatherApiError) as exc_info:
            provider.get_weather(Query(city="Paris"))

        assert exc_info.value.status_code == 502
        assert exc_info.value.detail is None


def test_get_weather_network_error(provider):
    """Test handling of network errors."""
    with patch('weatherapi_provider.requests.get') as mock_get:
        mock_get.side_effect = requests.exceptions.ConnectionError("Name or service not known")

        with pytest.raises(WeatherProviderError) as exc_info:
            provider.get_weather(Query(city="Paris"))

        assert not isinstance(exc_info.value, WeatherApiError)
        assert "Network error" in str(exc_info.value)


def test_get_weather_invalid_json(provider):
    """Test a 200 response with a body that is not JSON."""
    with patch('weatherapi_provider.requests.get') as mock_get:
        response = _response()
        response.json.side_effect = ValueError("Expecting value")
        mock_get.return_value = response

        with pytest.raises(WeatherProviderError) as exc_info:
            provider.get_weather(Query(city="Paris"))

        assert "Failed to parse response" in str(exc_info.value)


def test_get_weather_missing_field(provider, current_payload):
    """Test a response missing a nested field."""
    del current_payload["current"]["temp_f"]
    with patch('weatherapi_provider.requests.get') as mock_get:
        mock_get.return_value = _response(json_data=current_payload)

        with pytest.raises(WeatherProviderError) as exc_info:
            provider.get_weather(Query(city="Paris"))

        assert "Failed to parse response" in str(exc_info.value)
