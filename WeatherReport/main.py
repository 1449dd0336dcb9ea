"""Command-line weather report for a city, backed by weatherapi.com."""
import argparse
import logging
import sys
from typing import List, Optional, TextIO

from config import load_config
from error_reporter import report_error
from presenter import render_report
from query import normalize_args
from report_writer import ReportWriter, make_writer
from weather_provider import WeatherProviderError
from weather_service import CityMismatchError, WeatherService
from weatherapi_provider import WeatherApiProvider

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INVALID_ARGUMENT = 9


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        "weather-report",
        description="Current weather or a 2-5 day forecast for a city.",
        epilog="Days and scale may be given in either order: 'Paris 3 F' or 'Paris F 3'.",
    )
    parser.add_argument("city")
    parser.add_argument("first", nargs="?", metavar="days|scale")
    parser.add_argument("second", nargs="?", metavar="scale|days")
    parser.add_argument("--plain", action="store_true", help="Disable colors")
    parser.add_argument("--log-file", default=None)
    parser.add_argument("--verbose", action="store_true", help="Log diagnostics to stderr")
    return parser.parse_args(argv)


def setup_logging(log_file: Optional[str], verbose: bool) -> None:
    # The report and error messages go to stdout; stderr stays quiet unless --verbose.
    handlers: List[logging.Handler] = []
    if verbose:
        handlers.append(logging.StreamHandler(sys.stderr))
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    if not handlers:
        handlers.append(logging.NullHandler())
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
        handlers=handlers,
    )


def build_weather_service() -> WeatherService:
    config = load_config()
    provider = WeatherApiProvider(api_key=config.api_key, base_url=config.base_url)
    return WeatherService(provider=provider)


def run_report(service: WeatherService, args: argparse.Namespace, writer: ReportWriter) -> int:
    """Normalize, fetch, validate and render; returns the process exit code."""
    query = normalize_args(args.city, args.first, args.second)

    try:
        response = service.get_report(query)
    except CityMismatchError as err:
        writer.line(("Error:", "error"), str(err))
        return EXIT_INVALID_ARGUMENT
    except WeatherProviderError as err:
        logging.error("Weather fetch failed: %s", err)
        report_error(err, writer)
        return EXIT_FAILURE
    except Exception as exc:
        logging.exception("Unexpected error: %s", exc)
        report_error(exc, writer)
        return EXIT_FAILURE

    try:
        render_report(response, query, writer)
    except Exception as exc:
        logging.exception("Unexpected error while rendering: %s", exc)
        report_error(exc, writer)
        return EXIT_FAILURE

    return EXIT_OK


def run(argv: Optional[List[str]] = None, stream: Optional[TextIO] = None) -> int:
    args = parse_args(argv)
    setup_logging(args.log_file, args.verbose)
    writer = make_writer(stream, plain=args.plain)
    service = build_weather_service()
    return run_report(service, args, writer)


def main() -> None:
    sys.exit(run())


if __name__ == "__main__":
    main()
