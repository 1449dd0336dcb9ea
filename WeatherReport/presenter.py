"""Report rendering - pure functions over a ReportWriter for testability."""
import logging
from typing import Union

from report_writer import ReportWriter
from weather_data import ForecastDay, Query, WeatherResponse

HEADER_TITLE = "WEATHER PROGRAM"
HEADER_BORDER = "*" * (len(HEADER_TITLE) + 4)

DAY_COUNT_WORDS = {
    2: "TWO",
    3: "THREE",
    4: "FOUR",
    5: "FIVE",
}


def day_count_word(count: int) -> str:
    """
    Spell out a forecast day count (2 -> "TWO" ... 5 -> "FIVE").

    Counts outside 2..5 never come from a normalized query; if the provider
    returns one anyway, the numeral itself is used.
    """
    try:
        return DAY_COUNT_WORDS[count]
    except KeyError:
        logging.debug("No word for day count %s, using the numeral", count)
        return str(count)


def _format_number(value: Union[int, float]) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_temperature(celsius: float, fahrenheit: float, use_fahrenheit: bool) -> str:
    """
    Pick the temperature for the scale and add its suffix.

    Returns:
        e.g. "21.3°C" or "70.3°F"
    """
    if use_fahrenheit:
        return f"{_format_number(fahrenheit)}°F"
    return f"{_format_number(celsius)}°C"


def render_header(writer: ReportWriter) -> None:
    writer.blank()
    writer.line((HEADER_BORDER, "header"))
    writer.line(("*", "header"), HEADER_TITLE, ("*", "header"))
    writer.line((HEADER_BORDER, "header"))


def render_todays_weather(response: WeatherResponse, temp: str, writer: ReportWriter) -> None:
    location = response.location
    writer.blank()
    writer.line(
        "It is now",
        (temp, "temperature"),
        "in",
        (f"{location.name}, {location.country}", "location"),
    )
    writer.line(
        "The current weather conditions are :",
        (f'"{response.current.text}"', "conditions"),
    )
    writer.blank()


def render_forecast_day(day: ForecastDay, use_fahrenheit: bool, writer: ReportWriter) -> None:
    temp = format_temperature(day.avgtemp_c, day.avgtemp_f, use_fahrenheit)
    writer.line("Day:", (day.date, "date"))
    writer.line("Average Temperature:", (temp, "temperature"))
    writer.line("Weather Conditions:", (day.condition_text, "value"))
    writer.line("Sunrise:", (day.sunrise, "value"))
    writer.line("Sunset:", (day.sunset, "value"))
    writer.blank()


def render_forecast(response: WeatherResponse, temp: str, use_fahrenheit: bool, writer: ReportWriter) -> None:
    """
    Current temperature, a banner naming the place and the number of
    days, then one block per forecast day in the order returned.
    """
    location = response.location
    days = response.forecast or ()
    count = day_count_word(len(days))

    writer.blank()
    writer.line("In", (location.name, "location"), "the current temperature is:", (temp, "temperature"))
    writer.blank()
    writer.line(
        ("* THE WEATHER FORECAST FOR", "banner"),
        (f"{location.name.upper()}, {location.country.upper()}", "location"),
        (f"FOR THE NEXT {count} DAYS *", "banner"),
    )
    writer.blank()

    for day in days:
        render_forecast_day(day, use_fahrenheit, writer)


def render_report(response: WeatherResponse, query: Query, writer: ReportWriter) -> None:
    """
    Render a validated response: header, then the single-day or forecast report.

    Args:
        response: Response already checked against the requested city
        query: Query whose scale selects the temperature field
        writer: Output target
    """
    render_header(writer)

    current = response.current
    temp = format_temperature(current.temp_c, current.temp_f, query.use_fahrenheit)

    if response.is_forecast:
        render_forecast(response, temp, query.use_fahrenheit, writer)
    else:
        render_todays_weather(response, temp, writer)
