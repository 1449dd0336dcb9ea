"""Map failures to user-facing messages."""
import logging

from report_writer import ReportWriter
from weather_provider import WeatherApiError

MIN_CITY_NAME_LENGTH = 3
API_KEY_SIGNUP_URL = "https://www.weatherapi.com"


def report_error(error: BaseException, writer: ReportWriter) -> None:
    """
    Print a diagnostic for a failed run.

    API errors print "<message>: <status text>", plus a troubleshooting hint
    for 400 (city name too short) and 401 (bad or missing key). Anything
    else is an unexpected fault and prints "Error: <description>".
    """
    if not isinstance(error, WeatherApiError):
        writer.line(("Error:", "error"), str(error) or type(error).__name__)
        return

    writer.line((f"{error.message}: {error.status_text}", "error"))
    if error.detail:
        logging.info("Provider said: %s", error.detail)

    if error.status_code == 400:
        writer.line((f"City names must be at least {MIN_CITY_NAME_LENGTH} characters long.", "hint"))
    elif error.status_code == 401:
        writer.line(("Check your WEATHER_API_KEY in the .env file", "error"))
        writer.line(
            f"or apply for an API key at {API_KEY_SIGNUP_URL} and add it to your .env file."
        )
        writer.blank()
