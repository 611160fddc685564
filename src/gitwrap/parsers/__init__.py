"""Output parsers — turn git's line-oriented text into response objects."""

from gitwrap.parsers.add import AddParser
from gitwrap.parsers.base import ParseError, ParserClosedError, ResponseParser
from gitwrap.parsers.checkout import CheckoutParser
from gitwrap.parsers.commit import CommitParseError, CommitParser
from gitwrap.parsers.status import StatusParser, StatusSection

PARSERS = {
    "status": StatusParser,
    "commit": CommitParser,
    "checkout": CheckoutParser,
    "add": AddParser,
}

__all__ = [
    "AddParser",
    "CheckoutParser",
    "CommitParseError",
    "CommitParser",
    "PARSERS",
    "ParseError",
    "ParserClosedError",
    "ResponseParser",
    "StatusParser",
    "StatusSection",
]
