"""``git status`` parser — a section state machine over ``#``-prefixed output.

Git prints status in sections introduced by headers ("Changes to be
committed:", "Changed but not updated:", "Untracked files:"). The meaning of
an entry line depends on the header seen last, so the parser tracks the
current section and routes each entry into the matching category.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, List, Optional

from gitwrap.parsers import patterns
from gitwrap.parsers.base import ResponseParser
from gitwrap.responses.models import StatusFileCategory, StatusResponse


class StatusSection(str, Enum):
    INITIAL = "initial"
    ON_BRANCH = "on_branch"
    STAGED_CHANGES = "staged_changes"
    UNSTAGED_CHANGES = "unstaged_changes"
    UNTRACKED = "untracked"
    MESSAGE = "message"


_HEADER_SECTIONS = {
    patterns.STAGED_HEADER.name: StatusSection.STAGED_CHANGES,
    patterns.UNSTAGED_HEADER.name: StatusSection.UNSTAGED_CHANGES,
    patterns.UNTRACKED_HEADER.name: StatusSection.UNTRACKED,
}

# (section, entry pattern) -> category
_ROUTES = {
    (StatusSection.STAGED_CHANGES, patterns.NEW_FILE.name): StatusFileCategory.NEW_TO_COMMIT,
    (StatusSection.STAGED_CHANGES, patterns.DELETED.name): StatusFileCategory.DELETED_TO_COMMIT,
    (StatusSection.STAGED_CHANGES, patterns.MODIFIED.name): StatusFileCategory.MODIFIED_TO_COMMIT,
    (StatusSection.UNSTAGED_CHANGES, patterns.MODIFIED.name): StatusFileCategory.MODIFIED_NOT_UPDATED,
    (StatusSection.UNSTAGED_CHANGES, patterns.DELETED.name): StatusFileCategory.DELETED_NOT_UPDATED,
}

# Comment lines that carry no entry and are skipped in any section.
_SKIPPED = (patterns.EMPTY_COMMENT, patterns.INSTRUCTION, patterns.BRANCH_INFO)


class StatusParser(ResponseParser[StatusResponse]):
    """Parse the long format of ``git status`` (with the ``#`` comment prefix)."""

    def __init__(self) -> None:
        super().__init__()
        self.section = StatusSection.INITIAL
        self._branch: Optional[str] = None
        self._message: Optional[str] = None
        self._files: Dict[StatusFileCategory, List[str]] = {c: [] for c in StatusFileCategory}
        self._seen: Dict[str, StatusFileCategory] = {}

    def _consume(self, line: str) -> None:
        if not line.strip():
            return

        if self.section is StatusSection.MESSAGE:
            self._record(line)
            return

        if not patterns.is_comment(line):
            self._message = line.strip()
            self.section = StatusSection.MESSAGE
            return

        # Headers win over every keyword rule.
        for header in patterns.SECTION_HEADERS:
            if header.matches(line):
                self.section = _HEADER_SECTIONS[header.name]
                return

        branch = patterns.ON_BRANCH.payload(line)
        if branch is not None:
            self._branch = branch
            self.section = StatusSection.ON_BRANCH
            return

        if any(p.matches(line) for p in _SKIPPED):
            return

        if self.section is StatusSection.UNTRACKED:
            self._add(StatusFileCategory.UNTRACKED, patterns.COMMENT.payload(line), line)
            return

        entry = patterns.match_entry(line)
        if entry is None:
            self._record(line)
            return

        pattern, path = entry
        if pattern is patterns.RENAMED and self.section is StatusSection.STAGED_CHANGES:
            self._add_rename(path, line)
            return
        category = _ROUTES.get((self.section, pattern.name))
        if category is None:
            self._record(line)
        else:
            self._add(category, path, line)

    def _add_rename(self, payload: str, line: str) -> None:
        # A staged rename is the old path deleted plus the new path added.
        paths = patterns.split_rename(payload)
        if paths is None:
            self._record(line)
            return
        old, new = paths
        self._add(StatusFileCategory.DELETED_TO_COMMIT, old, line)
        self._add(StatusFileCategory.NEW_TO_COMMIT, new, line)

    def _add(self, category: StatusFileCategory, path: Optional[str], line: str) -> None:
        if path is None:
            self._record(line)
            return
        listed = self._seen.get(path)
        if listed is None:
            self._seen[path] = category
            self._files[category].append(path)
        elif listed is not category:
            self._record(line)

    def _build(self) -> StatusResponse:
        return StatusResponse(
            new_files_to_commit=tuple(self._files[StatusFileCategory.NEW_TO_COMMIT]),
            deleted_files_to_commit=tuple(self._files[StatusFileCategory.DELETED_TO_COMMIT]),
            modified_files_to_commit=tuple(self._files[StatusFileCategory.MODIFIED_TO_COMMIT]),
            deleted_files_not_updated=tuple(self._files[StatusFileCategory.DELETED_NOT_UPDATED]),
            modified_files_not_updated=tuple(self._files[StatusFileCategory.MODIFIED_NOT_UPDATED]),
            untracked_files=tuple(self._files[StatusFileCategory.UNTRACKED]),
            branch=self._branch,
            message=self._message,
            diagnostics=self._diagnostics.snapshot(),
        )
