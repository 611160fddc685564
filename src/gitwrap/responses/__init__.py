"""Response objects — immutable results of parsing git output."""

from gitwrap.responses.checks import ResponseIndexError, check_index_in_range
from gitwrap.responses.models import (
    AddedOrDeletedFile,
    AddResponse,
    CheckoutResponse,
    CommitResponse,
    CopiedOrRenamedFile,
    ParseDiagnostic,
    StatusFileCategory,
    StatusResponse,
)

__all__ = [
    "AddResponse",
    "AddedOrDeletedFile",
    "CheckoutResponse",
    "CommitResponse",
    "CopiedOrRenamedFile",
    "ParseDiagnostic",
    "ResponseIndexError",
    "StatusFileCategory",
    "StatusResponse",
    "check_index_in_range",
]
