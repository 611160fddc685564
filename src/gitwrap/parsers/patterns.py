"""Line classifier — named, anchored patterns for git's human-readable output.

Every pattern is anchored at the start of the line. Keywords such as
``modified:`` only count when they follow the ``#`` comment marker and
whitespace directly, so ``"# xyz modified: f"`` is not a modified-file entry.
Payloads run to the end of the line, which keeps filenames with spaces
(leading, inner or trailing) intact; only a stray ``\\r`` is dropped.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class LinePattern:
    """A named regex. The ``payload`` group, when present, is the extracted text."""

    name: str
    regex: re.Pattern[str]

    def match(self, line: str) -> Optional[re.Match[str]]:
        return self.regex.match(line)

    def matches(self, line: str) -> bool:
        return self.regex.match(line) is not None

    def payload(self, line: str) -> Optional[str]:
        m = self.regex.match(line)
        if m is None or "payload" not in m.groupdict():
            return None
        return m.group("payload")


def _pattern(name: str, regex: str) -> LinePattern:
    return LinePattern(name, re.compile(regex))


COMMENT_MARKER = "#"

# --- status ---

EMPTY_COMMENT = _pattern("EMPTY_COMMENT", r"^#\s*$")
ON_BRANCH = _pattern("ON_BRANCH", r"^#\s*On branch (?P<payload>\S.*?)\s*$")
STAGED_HEADER = _pattern("STAGED_HEADER", r"^#\s*Changes to be committed:\s*$")
UNSTAGED_HEADER = _pattern(
    "UNSTAGED_HEADER",
    r"^#\s*(?:Changed but not updated|Changes not staged for commit):\s*$",
)
UNTRACKED_HEADER = _pattern("UNTRACKED_HEADER", r"^#\s*Untracked files:\s*$")
NEW_FILE = _pattern("NEW_FILE", r"^#\s*new file:\s+(?P<payload>\S.*?)\r?$")
MODIFIED = _pattern("MODIFIED", r"^#\s*modified:\s+(?P<payload>\S.*?)\r?$")
DELETED = _pattern("DELETED", r"^#\s*deleted:\s+(?P<payload>\S.*?)\r?$")
RENAMED = _pattern("RENAMED", r"^#\s*renamed:\s+(?P<payload>\S.*?)\r?$")
INSTRUCTION = _pattern("INSTRUCTION", r"^#\s*\(use\s.*$")
BRANCH_INFO = _pattern(
    "BRANCH_INFO",
    r"^#\s*(?:Your branch\b|and have \d+ and \d+ different commits"
    r"|Initial commit\s*$|No commits yet\s*$|HEAD detached\b|Not currently on any branch)",
)
COMMENT = _pattern("COMMENT", r"^#\s*(?P<payload>\S.*?)\r?$")

_RENAME_ARROW = " -> "

SECTION_HEADERS: Tuple[LinePattern, ...] = (STAGED_HEADER, UNSTAGED_HEADER, UNTRACKED_HEADER)
ENTRY_PATTERNS: Tuple[LinePattern, ...] = (NEW_FILE, MODIFIED, DELETED, RENAMED)

# --- commit ---

CREATED_COMMIT = _pattern(
    "CREATED_COMMIT",
    r"^Created (?:initial )?commit (?P<hash>[^\s:]+):(?: (?P<comment>.*))?$",
)
COMMIT_SUMMARY = _pattern(
    "COMMIT_SUMMARY",
    r"^\[(?P<branch>.+?) (?:\(root-commit\) )?(?P<hash>[0-9a-fA-F]{4,})\] (?P<comment>.*)$",
)
FILE_STATS = _pattern(
    "FILE_STATS", r"^\s*\d+ (?:files? changed\b|insertions?\(|deletions?\()"
)
AUTHOR_OR_DATE = _pattern("AUTHOR_OR_DATE", r"^ (?:Author|Date):\s")
CREATE_OR_DELETE = _pattern(
    "CREATE_OR_DELETE",
    r"^ (?P<action>create|delete) mode (?P<mode>\S+) (?P<payload>.+?)\s*$",
)
COPY_OR_RENAME = _pattern("COPY_OR_RENAME", r"^ (?P<action>copy|rename) (?P<payload>.+?)\s*$")
MODE_CHANGE = _pattern("MODE_CHANGE", r"^ mode change ")

_FILES_CHANGED_RE = re.compile(r"^\s*(\d+) files? changed")
_INSERTIONS_RE = re.compile(r"(\d+) insertions?\b")
_DELETIONS_RE = re.compile(r"(\d+) deletions?\b")

# --- checkout ---

SWITCHED_TO_BRANCH = _pattern("SWITCHED_TO_BRANCH", r"^Switched to branch (?P<payload>.+?)\s*$")
SWITCHED_TO_NEW_BRANCH = _pattern(
    "SWITCHED_TO_NEW_BRANCH", r"^Switched to a new branch (?P<payload>.+?)\s*$"
)
RESET_BRANCH = _pattern("RESET_BRANCH", r"^Switched to and reset branch (?P<payload>.+?)\s*$")
ALREADY_ON = _pattern("ALREADY_ON", r"^Already on (?P<payload>.+?)\s*$")
FILE_CHANGE = _pattern("FILE_CHANGE", r"^(?P<status>[AMD])\s+(?P<payload>\S.*?)\s*$")
TRACKING_INFO = _pattern(
    "TRACKING_INFO",
    r"^(?:Your branch\b|and have \d+ and \d+ different commits|\s+\(use\s)",
)

# --- add ---

ADD_ENTRY = _pattern("ADD_ENTRY", r"^add '(?P<payload>.*)'\s*$")
GIT_ERROR = _pattern("GIT_ERROR", r"^(?:fatal|error): (?P<payload>.+?)\s*$")


def is_comment(line: str) -> bool:
    return line.startswith(COMMENT_MARKER)


def match_entry(line: str) -> Optional[Tuple[LinePattern, str]]:
    """Return (pattern, path) for a ``new file:`` / ``modified:`` / ``deleted:`` / ``renamed:`` line."""
    for pattern in ENTRY_PATTERNS:
        value = pattern.payload(line)
        if value is not None:
            return pattern, value
    return None


def split_rename(payload: str) -> Optional[Tuple[str, str]]:
    """Split a status ``old -> new`` payload; None without the arrow."""
    old, sep, new = payload.partition(_RENAME_ARROW)
    if not sep or not old or not new:
        return None
    return old, new


def unquote(name: str) -> str:
    """Strip one pair of matching single or double quotes."""
    if len(name) >= 2 and name[0] == name[-1] and name[0] in ("'", '"'):
        return name[1:-1]
    return name


def file_stats(line: str) -> Tuple[int, int, int]:
    """Return (files changed, insertions, deletions); a missing clause counts as 0."""
    return (
        _first_int(_FILES_CHANGED_RE, line),
        _first_int(_INSERTIONS_RE, line),
        _first_int(_DELETIONS_RE, line),
    )


def _first_int(regex: re.Pattern[str], line: str) -> int:
    m = regex.search(line)
    return int(m.group(1)) if m else 0
