"""Configuration loaded from the environment (and a .env file)."""
import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

DEFAULT_BASE_URL = "https://api.weatherapi.com/v1"


@dataclass(frozen=True)
class WeatherConfig:
    """Settings passed explicitly into the provider."""
    api_key: str
    base_url: str = DEFAULT_BASE_URL


def load_config() -> WeatherConfig:
    """
    Load configuration once at startup.

    A missing API key is not fatal here: the request goes out with an empty
    key and weatherapi.com answers 401, which is reported with a hint.

    Returns:
        WeatherConfig
    """
    load_dotenv()
    api_key = os.getenv("WEATHER_API_KEY") or os.getenv("API_KEY") or ""
    base_url = os.getenv("WEATHER_API_BASE_URL", DEFAULT_BASE_URL).rstrip("/")

    if not api_key:
        logging.warning("Missing WEATHER_API_KEY in environment")

    logging.info("Configuration loaded: base_url=%s", base_url)
    return WeatherConfig(api_key=api_key, base_url=base_url)
