"""Shared parser plumbing — line counting, diagnostics, finishing."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, Iterable, List, Optional, Tuple, TypeVar

from gitwrap.responses.models import ParseDiagnostic

R = TypeVar("R")


class ParseError(Exception):
    """Raised when git output cannot be turned into a response."""


class ParserClosedError(ParseError):
    """Raised when a line is fed to a parser whose response was already built."""


class DiagnosticLog:
    """Ordered list of (line number, error text) anomalies."""

    def __init__(self) -> None:
        self._entries: List[ParseDiagnostic] = []

    def record(self, line_number: int, error: str) -> None:
        self._entries.append(ParseDiagnostic(line_number, error))

    def snapshot(self) -> Tuple[ParseDiagnostic, ...]:
        return tuple(self._entries)

    def __len__(self) -> int:
        return len(self._entries)


class ResponseParser(ABC, Generic[R]):
    """Base class for line-oriented parsers of one git invocation.

    Usage::

        parser = StatusParser()
        for line in output.splitlines():
            parser.parse_line(line)
        response = parser.get_response()

    Lines are consumed once, in order, with no look-ahead. ``get_response``
    marks the end of input; calling it again returns the same response.
    """

    def __init__(self) -> None:
        self._line_number = 0
        self._diagnostics = DiagnosticLog()
        self._response: Optional[R] = None
        self._closed = False

    @property
    def lines_parsed(self) -> int:
        return self._line_number

    @property
    def finished(self) -> bool:
        return self._closed

    def parse_line(self, line: str) -> None:
        if self.finished:
            raise ParserClosedError(
                f"{type(self).__name__} already built its response; "
                f"cannot parse line {self._line_number + 1}"
            )
        self._line_number += 1
        self._consume(line.rstrip("\r\n"))

    def feed(self, lines: Iterable[str]) -> "ResponseParser[R]":
        for line in lines:
            self.parse_line(line)
        return self

    def get_response(self) -> R:
        self._closed = True
        if self._response is None:
            self._response = self._build()
        return self._response

    def _record(self, error: str) -> None:
        """Record *error* against the line currently being parsed."""
        self._diagnostics.record(self._line_number, error)

    @abstractmethod
    def _consume(self, line: str) -> None:
        """Handle one line; ``self.lines_parsed`` is its 1-based number."""

    @abstractmethod
    def _build(self) -> R:
        """Assemble the immutable response, or raise ParseError."""
