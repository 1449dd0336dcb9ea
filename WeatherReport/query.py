"""Turn raw command-line tokens into a normalized Query."""
import logging
import re
from typing import Optional

from weather_data import Query

MIN_DAYS = 1
MAX_DAYS = 5

# Optional sign, ASCII digits, optional fractional part.
DECIMAL_LITERAL = re.compile(r"\s*([+-]?[0-9]+)(?:\.[0-9]*)?\s*")


def parse_number(token: Optional[str]) -> Optional[int]:
    """
    Parse a day-count token.

    Plain decimal literals are accepted (fractions truncate toward zero).
    Returns None for anything else, including None, exponents ("1e3"),
    digit separators ("1_000"), "nan" and "inf".
    """
    if token is None:
        return None
    match = DECIMAL_LITERAL.fullmatch(token)
    if match is None:
        return None
    return int(match.group(1))


def clamp_days(token: Optional[str]) -> int:
    """Clamp a day-count token into [1, 5]; unparsable input gives 1."""
    value = parse_number(token)
    if value is None:
        return MIN_DAYS
    return max(MIN_DAYS, min(value, MAX_DAYS))


def normalize_args(
    city: str,
    first: Optional[str] = None,
    second: Optional[str] = None,
) -> Query:
    """
    Build a Query from the city and the two optional trailing tokens.

    The optional tokens may come in either order: if the first one is
    numeric it is the day count and the second is the scale, otherwise the
    second is the day count and the first is the scale.

    Args:
        city: City name, used verbatim
        first: First optional token ("3", "F", ...)
        second: Second optional token

    Returns:
        Query: Never raises; bad input falls back to 1 day and Celsius
    """
    if parse_number(first) is not None:
        days_token, scale_token = first, second
    else:
        days_token, scale_token = second, first

    days = clamp_days(days_token)
    use_fahrenheit = (scale_token or "").strip().upper() == "F"

    logging.debug(
        "Normalized arguments: city=%r days=%s fahrenheit=%s (tokens: %r, %r)",
        city, days, use_fahrenheit, first, second,
    )
    return Query(city=city, days=days, use_fahrenheit=use_fahrenheit)
