"""Immutable response objects built by the output parsers."""

from __future__ import annotations

from dataclasses import dataclass, fields
from enum import Enum
from typing import Iterator, Optional, Sequence, Tuple, TypeVar

from gitwrap.responses.checks import check_index_in_range, unordered_equal

T = TypeVar("T")


def _at(items: Sequence[T], index: int, what: str) -> T:
    check_index_in_range(items, index, what)
    return items[index]


def _freeze_sequences(obj: object) -> None:
    """Coerce list-valued fields of a frozen dataclass to tuples."""
    for f in fields(obj):  # type: ignore[arg-type]
        value = getattr(obj, f.name)
        if isinstance(value, list):
            object.__setattr__(obj, f.name, tuple(value))


@dataclass(frozen=True)
class ParseDiagnostic:
    """A non-fatal parse anomaly tied to its 1-based input line."""

    line_number: int
    error: str

    def __str__(self) -> str:
        return f"{self.line_number}. {self.error}"


class _Diagnostics:
    """Accessors for responses that carry a ``diagnostics`` tuple."""

    diagnostics: Tuple[ParseDiagnostic, ...]

    def error_state(self) -> bool:
        return len(self.diagnostics) > 0

    @property
    def error_count(self) -> int:
        return len(self.diagnostics)

    def get_error(self, index: int) -> str:
        """Return diagnostic *index* formatted as ``"<line>. <text>"``."""
        return str(_at(self.diagnostics, index, "error index"))


# ── status ────────────────────────────────────────────────────────────────────


class StatusFileCategory(str, Enum):
    NEW_TO_COMMIT = "new_files_to_commit"
    DELETED_TO_COMMIT = "deleted_files_to_commit"
    MODIFIED_TO_COMMIT = "modified_files_to_commit"
    DELETED_NOT_UPDATED = "deleted_files_not_updated"
    MODIFIED_NOT_UPDATED = "modified_files_not_updated"
    UNTRACKED = "untracked_files"


@dataclass(frozen=True)
class StatusResponse(_Diagnostics):
    """Parsed ``git status`` output.

    Each path is listed in at most one category. Use the category-keyed
    accessors (``count``, ``file_at``, ``iter_files``) or the tuple fields
    directly.
    """

    new_files_to_commit: Tuple[str, ...] = ()
    deleted_files_to_commit: Tuple[str, ...] = ()
    modified_files_to_commit: Tuple[str, ...] = ()
    deleted_files_not_updated: Tuple[str, ...] = ()
    modified_files_not_updated: Tuple[str, ...] = ()
    untracked_files: Tuple[str, ...] = ()
    branch: Optional[str] = None
    message: Optional[str] = None
    diagnostics: Tuple[ParseDiagnostic, ...] = ()

    def __post_init__(self) -> None:
        _freeze_sequences(self)

    def files(self, category: StatusFileCategory) -> Tuple[str, ...]:
        return getattr(self, StatusFileCategory(category).value)

    def count(self, category: StatusFileCategory) -> int:
        return len(self.files(category))

    def file_at(self, category: StatusFileCategory, index: int) -> str:
        return _at(self.files(category), index, f"{StatusFileCategory(category).name} index")

    def iter_files(self, category: StatusFileCategory) -> Iterator[str]:
        return iter(self.files(category))

    def category_of(self, path: str) -> Optional[StatusFileCategory]:
        for category in StatusFileCategory:
            if path in self.files(category):
                return category
        return None

    @property
    def is_clean(self) -> bool:
        return all(self.count(c) == 0 for c in StatusFileCategory)


# ── commit ────────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class AddedOrDeletedFile:
    """A ``create mode`` / ``delete mode`` line of commit output."""

    path: str
    mode: str


@dataclass(frozen=True)
class CopiedOrRenamedFile:
    """A ``copy`` / ``rename`` line of commit output."""

    source: str
    destination: str
    percentage: int = 0


@dataclass(frozen=True, eq=False)
class CommitResponse(_Diagnostics):
    """Parsed ``git commit`` output.

    Two responses are equal when hash, comment and counts match and the four
    file lists hold the same entries in any order. Diagnostics are ignored.
    """

    short_hash: str
    short_comment: str = ""
    files_changed: int = 0
    lines_inserted: int = 0
    lines_deleted: int = 0
    added_files: Tuple[AddedOrDeletedFile, ...] = ()
    deleted_files: Tuple[AddedOrDeletedFile, ...] = ()
    copied_files: Tuple[CopiedOrRenamedFile, ...] = ()
    renamed_files: Tuple[CopiedOrRenamedFile, ...] = ()
    diagnostics: Tuple[ParseDiagnostic, ...] = ()

    def __post_init__(self) -> None:
        _freeze_sequences(self)
        if not self.short_hash:
            raise ValueError("short_hash must be a non-empty string")
        for name in ("files_changed", "lines_inserted", "lines_deleted"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be >= 0")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CommitResponse):
            return NotImplemented
        return (
            self.short_hash == other.short_hash
            and self.short_comment == other.short_comment
            and self.files_changed == other.files_changed
            and self.lines_inserted == other.lines_inserted
            and self.lines_deleted == other.lines_deleted
            and unordered_equal(self.added_files, other.added_files)
            and unordered_equal(self.deleted_files, other.deleted_files)
            and unordered_equal(self.copied_files, other.copied_files)
            and unordered_equal(self.renamed_files, other.renamed_files)
        )

    def __hash__(self) -> int:
        return hash(self.short_hash)

    def added_file(self, index: int) -> AddedOrDeletedFile:
        return _at(self.added_files, index, "added file index")

    def deleted_file(self, index: int) -> AddedOrDeletedFile:
        return _at(self.deleted_files, index, "deleted file index")

    def copied_file(self, index: int) -> CopiedOrRenamedFile:
        return _at(self.copied_files, index, "copied file index")

    def renamed_file(self, index: int) -> CopiedOrRenamedFile:
        return _at(self.renamed_files, index, "renamed file index")

    def iter_added_files(self) -> Iterator[AddedOrDeletedFile]:
        return iter(self.added_files)

    def iter_deleted_files(self) -> Iterator[AddedOrDeletedFile]:
        return iter(self.deleted_files)

    def iter_copied_files(self) -> Iterator[CopiedOrRenamedFile]:
        return iter(self.copied_files)

    def iter_renamed_files(self) -> Iterator[CopiedOrRenamedFile]:
        return iter(self.renamed_files)


# ── checkout ──────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class CheckoutResponse(_Diagnostics):
    """Parsed ``git checkout`` output.

    ``branch`` is set when an existing branch was checked out, ``new_branch``
    when one was created. At most one of the two is set.
    """

    branch: Optional[str] = None
    new_branch: Optional[str] = None
    added_files: Tuple[str, ...] = ()
    modified_files: Tuple[str, ...] = ()
    deleted_files: Tuple[str, ...] = ()
    diagnostics: Tuple[ParseDiagnostic, ...] = ()

    def __post_init__(self) -> None:
        _freeze_sequences(self)

    @property
    def added_count(self) -> int:
        return len(self.added_files)

    @property
    def modified_count(self) -> int:
        return len(self.modified_files)

    @property
    def deleted_count(self) -> int:
        return len(self.deleted_files)

    def added_file(self, index: int) -> str:
        return _at(self.added_files, index, "added file index")

    def modified_file(self, index: int) -> str:
        return _at(self.modified_files, index, "modified file index")

    def deleted_file(self, index: int) -> str:
        return _at(self.deleted_files, index, "deleted file index")

    def iter_added_files(self) -> Iterator[str]:
        return iter(self.added_files)

    def iter_modified_files(self) -> Iterator[str]:
        return iter(self.modified_files)

    def iter_deleted_files(self) -> Iterator[str]:
        return iter(self.deleted_files)


# ── add ───────────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class AddResponse(_Diagnostics):
    """Parsed ``git add --verbose`` / ``--dry-run`` output."""

    files: Tuple[str, ...] = ()
    dry_run: bool = False
    error: Optional[str] = None
    diagnostics: Tuple[ParseDiagnostic, ...] = ()

    def __post_init__(self) -> None:
        _freeze_sequences(self)

    @property
    def file_count(self) -> int:
        return len(self.files)

    def file_at(self, index: int) -> str:
        return _at(self.files, index, "file index")

    def iter_files(self) -> Iterator[str]:
        return iter(self.files)
