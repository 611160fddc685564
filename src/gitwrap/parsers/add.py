"""``git add --verbose`` / ``--dry-run`` parser."""

from __future__ import annotations

from typing import List, Optional

from gitwrap.parsers import patterns
from gitwrap.parsers.base import ResponseParser
from gitwrap.responses.models import AddResponse


class AddParser(ResponseParser[AddResponse]):
    """Collect the paths git reports as ``add '<path>'``.

    The first ``fatal:`` or ``error:`` line becomes the response error; it is
    also kept as a diagnostic like any other unrecognised line.
    """

    def __init__(self, dry_run: bool = False) -> None:
        super().__init__()
        self.dry_run = dry_run
        self._files: List[str] = []
        self._error: Optional[str] = None

    def _consume(self, line: str) -> None:
        if not line.strip():
            return

        path = patterns.ADD_ENTRY.payload(line)
        if path is not None:
            self._files.append(path)
            return

        if self._error is None and patterns.GIT_ERROR.matches(line):
            self._error = line.strip()
        self._record(line)

    def _build(self) -> AddResponse:
        return AddResponse(
            files=tuple(self._files),
            dry_run=self.dry_run,
            error=self._error,
            diagnostics=self._diagnostics.snapshot(),
        )
