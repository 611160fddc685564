"""``git commit`` parser and the decoders for its compound lines.

Expected output::

    Created commit deadbee: fix bug                    (or: [master deadbee] fix bug)
     2 files changed, 3 insertions(+), 1 deletions(-)
     create mode 100644 a/new.txt
     rename old/{a.txt => b.txt} (100%)

Line 1 is mandatory: without a recognised summary there is no commit, so
every following line is kept as context for a CommitParseError.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

from gitwrap.parsers import patterns
from gitwrap.parsers.base import ParseError, ResponseParser
from gitwrap.responses.models import AddedOrDeletedFile, CommitResponse, CopiedOrRenamedFile

_ARROW = " => "


class CommitParseError(ParseError):
    """Raised when commit output does not start with a commit summary line."""

    def __init__(self, context_lines: List[Tuple[int, str]]) -> None:
        self.context_lines = tuple(context_lines)
        detail = ", ".join(f"line{n}=[{text}]" for n, text in self.context_lines)
        super().__init__(f"git commit did not report a new commit: {{ {detail} }}")


@dataclass(frozen=True)
class CopyRenameEntry:
    """Decoded body of a copy/rename line. ``percentage`` is None when unparseable."""

    source: str
    destination: str
    percentage: Optional[int]


def decode_summary(line: str) -> Optional[Tuple[str, str]]:
    """Return (short hash, short comment) from a commit summary line."""
    m = patterns.CREATED_COMMIT.match(line) or patterns.COMMIT_SUMMARY.match(line)
    if m is None:
        return None
    return m.group("hash"), m.group("comment") or ""


def _join(prefix: str, middle: str, suffix: str) -> str:
    if middle:
        return prefix + middle + suffix
    # "dir/{ => sub}/a.txt": the empty side must not leave "dir//a.txt"
    if suffix.startswith("/") and (not prefix or prefix.endswith("/")):
        suffix = suffix[1:]
    return prefix + suffix


def decode_copy_or_rename(body: str) -> Optional[CopyRenameEntry]:
    """Decode ``old => new (NN%)`` or ``prefix{old => new}suffix (NN%)``.

    Returns None when the body has no ``=>`` arrow.
    """
    paths = body
    percentage: Optional[int] = None
    open_paren = body.rfind("(")
    if open_paren != -1:
        paths = body[:open_paren].rstrip()
        percent = body.rfind("%")
        try:
            percentage = int(body[open_paren + 1:percent]) if percent > open_paren else None
        except ValueError:
            percentage = None

    open_curly = paths.find("{")
    close_curly = paths.rfind("}")
    if open_curly != -1 and close_curly > open_curly:
        inner = paths[open_curly + 1:close_curly]
        if "=>" not in inner:
            return None
        old, new = (part.strip() for part in inner.split("=>", 1))
        prefix, suffix = paths[:open_curly], paths[close_curly + 1:]
        return CopyRenameEntry(_join(prefix, old, suffix), _join(prefix, new, suffix), percentage)

    if _ARROW not in paths:
        return None
    old, new = paths.split(_ARROW, 1)
    return CopyRenameEntry(old, new, percentage)


class CommitParser(ResponseParser[CommitResponse]):
    """Parse ``git commit`` output into a CommitResponse."""

    def __init__(self) -> None:
        super().__init__()
        self._summary: Optional[Tuple[str, str]] = None
        self._error_context: Optional[List[Tuple[int, str]]] = None
        self._stats: Optional[Tuple[int, int, int]] = None
        self._added: List[AddedOrDeletedFile] = []
        self._deleted: List[AddedOrDeletedFile] = []
        self._copied: List[CopiedOrRenamedFile] = []
        self._renamed: List[CopiedOrRenamedFile] = []

    def _consume(self, line: str) -> None:
        if self._error_context is not None:
            self._error_context.append((self.lines_parsed, line))
            return

        if self.lines_parsed == 1:
            self._summary = decode_summary(line)
            if self._summary is None:
                self._error_context = [(1, line)]
            return

        if self._stats is None and patterns.FILE_STATS.matches(line):
            self._stats = patterns.file_stats(line)
            return

        self._parse_entry(line)

    def _parse_entry(self, line: str) -> None:
        if not line.strip() or patterns.AUTHOR_OR_DATE.matches(line):
            return
        if patterns.MODE_CHANGE.matches(line):
            return

        m = patterns.CREATE_OR_DELETE.match(line)
        if m:
            entry = AddedOrDeletedFile(path=m.group("payload"), mode=m.group("mode"))
            (self._added if m.group("action") == "create" else self._deleted).append(entry)
            return

        m = patterns.COPY_OR_RENAME.match(line)
        if m:
            decoded = decode_copy_or_rename(m.group("payload"))
            if decoded is None:
                self._record(line)
                return
            if decoded.percentage is None:
                self._record(line)
            entry = CopiedOrRenamedFile(
                source=decoded.source,
                destination=decoded.destination,
                percentage=decoded.percentage or 0,
            )
            (self._copied if m.group("action") == "copy" else self._renamed).append(entry)
            return

        self._record(line)

    def _build(self) -> CommitResponse:
        if self._error_context is not None:
            raise CommitParseError(self._error_context)
        if self._summary is None:
            raise CommitParseError([])

        short_hash, short_comment = self._summary
        files_changed, lines_inserted, lines_deleted = self._stats or (0, 0, 0)
        return CommitResponse(
            short_hash=short_hash,
            short_comment=short_comment,
            files_changed=files_changed,
            lines_inserted=lines_inserted,
            lines_deleted=lines_deleted,
            added_files=tuple(self._added),
            deleted_files=tuple(self._deleted),
            copied_files=tuple(self._copied),
            renamed_files=tuple(self._renamed),
            diagnostics=self._diagnostics.snapshot(),
        )
