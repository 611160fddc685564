"""``git checkout`` parser — branch switch lines and A/M/D file lines."""

from __future__ import annotations

from typing import Dict, List, Optional

from gitwrap.parsers import patterns
from gitwrap.parsers.base import ResponseParser
from gitwrap.responses.models import CheckoutResponse

_BRANCH_SWITCHES = (patterns.SWITCHED_TO_BRANCH, patterns.RESET_BRANCH, patterns.ALREADY_ON)


class CheckoutParser(ResponseParser[CheckoutResponse]):
    """Parse ``git checkout`` output into a CheckoutResponse.

    Lines git prints for errors (``error: pathspec ...``) are kept as
    diagnostics; they never stop the parse.
    """

    def __init__(self) -> None:
        super().__init__()
        self._branch: Optional[str] = None
        self._new_branch: Optional[str] = None
        self._files: Dict[str, List[str]] = {"A": [], "M": [], "D": []}

    def _consume(self, line: str) -> None:
        if not line.strip() or patterns.TRACKING_INFO.matches(line):
            return

        name = patterns.SWITCHED_TO_NEW_BRANCH.payload(line)
        if name is not None:
            self._switch(new_branch=patterns.unquote(name), line=line)
            return

        for pattern in _BRANCH_SWITCHES:
            name = pattern.payload(line)
            if name is not None:
                self._switch(branch=patterns.unquote(name), line=line)
                return

        m = patterns.FILE_CHANGE.match(line)
        if m:
            self._files[m.group("status")].append(m.group("payload"))
            return

        self._record(line)

    def _switch(self, line: str, branch: Optional[str] = None, new_branch: Optional[str] = None) -> None:
        # One checkout switches to exactly one branch.
        if self._branch is not None or self._new_branch is not None:
            self._record(line)
            return
        self._branch = branch
        self._new_branch = new_branch

    def _build(self) -> CheckoutResponse:
        return CheckoutResponse(
            branch=self._branch,
            new_branch=self._new_branch,
            added_files=tuple(self._files["A"]),
            modified_files=tuple(self._files["M"]),
            deleted_files=tuple(self._files["D"]),
            diagnostics=self._diagnostics.snapshot(),
        )
