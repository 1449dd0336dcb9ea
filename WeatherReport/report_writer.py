"""Output abstraction for reports - swaps a styled terminal writer with a plain one."""
import os
import sys
from abc import ABC, abstractmethod
from typing import Dict, Optional, TextIO, Tuple, Union

from rich.console import Console
from rich.text import Text

# A segment is plain text or a (text, style role) pair.
Segment = Union[str, Tuple[str, str]]

# Style roles used by the presenter and error reporter, mapped to rich styles.
RICH_STYLES: Dict[str, str] = {
    "header": "reverse white",
    "temperature": "yellow",
    "location": "green",
    "date": "red",
    "banner": "blue",
    "conditions": "bold magenta",
    "value": "yellow",
    "error": "red",
    "hint": "yellow",
}


class ReportWriter(ABC):
    """Abstract line writer; the style roles carry no meaning beyond looks."""

    @abstractmethod
    def line(self, *segments: Segment) -> None:
        """
        Write one line made of segments separated by single spaces.

        Args:
            segments: Plain strings or (text, role) pairs
        """
        pass

    def blank(self) -> None:
        """Write an empty line."""
        self.line()


def _text_of(segment: Segment) -> str:
    return segment if isinstance(segment, str) else segment[0]


class PlainWriter(ReportWriter):
    """Writer for pipes, files and tests: styles are dropped."""

    def __init__(self, stream: Optional[TextIO] = None):
        self._stream = stream if stream is not None else sys.stdout

    def line(self, *segments: Segment) -> None:
        self._stream.write(" ".join(_text_of(s) for s in segments) + "\n")


class RichWriter(ReportWriter):
    """Writer for interactive terminals, rendered with rich."""

    def __init__(self, console: Optional[Console] = None):
        self._console = console or Console(highlight=False)

    def line(self, *segments: Segment) -> None:
        parts = []
        for index, segment in enumerate(segments):
            if index:
                parts.append(" ")
            if isinstance(segment, str):
                parts.append(segment)
            else:
                text, role = segment
                parts.append((text, RICH_STYLES.get(role, "")))
        self._console.print(Text.assemble(*parts), soft_wrap=True)


def make_writer(stream: Optional[TextIO] = None, plain: bool = False) -> ReportWriter:
    """
    Pick a writer for the output stream.

    Styled output is used only for an interactive terminal, and never when
    plain is requested or NO_COLOR is set.
    """
    stream = stream if stream is not None else sys.stdout
    interactive = hasattr(stream, "isatty") and stream.isatty()
    if plain or os.getenv("NO_COLOR") or not interactive:
        return PlainWriter(stream)
    return RichWriter(Console(file=stream, highlight=False))
