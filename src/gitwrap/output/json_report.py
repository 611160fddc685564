"""JSON / YAML reports of parsed responses."""

from __future__ import annotations

import json
from dataclasses import asdict
from typing import Any, Dict, List, Union

import yaml

from gitwrap.responses.models import (
    AddResponse,
    CheckoutResponse,
    CommitResponse,
    ParseDiagnostic,
    StatusFileCategory,
    StatusResponse,
)

Response = Union[StatusResponse, CommitResponse, CheckoutResponse, AddResponse]


def _diagnostics(items: tuple[ParseDiagnostic, ...]) -> List[Dict[str, Any]]:
    return [{"line": d.line_number, "error": d.error} for d in items]


def to_dict(response: Response) -> Dict[str, Any]:
    """Convert a response to a JSON-serialisable dict."""
    if isinstance(response, StatusResponse):
        body: Dict[str, Any] = {
            "kind": "status",
            "branch": response.branch,
            "message": response.message,
            **{c.value: list(response.files(c)) for c in StatusFileCategory},
        }
    elif isinstance(response, CommitResponse):
        body = {
            "kind": "commit",
            "short_hash": response.short_hash,
            "short_comment": response.short_comment,
            "files_changed": response.files_changed,
            "lines_inserted": response.lines_inserted,
            "lines_deleted": response.lines_deleted,
            "added_files": [asdict(f) for f in response.added_files],
            "deleted_files": [asdict(f) for f in response.deleted_files],
            "copied_files": [asdict(f) for f in response.copied_files],
            "renamed_files": [asdict(f) for f in response.renamed_files],
        }
    elif isinstance(response, CheckoutResponse):
        body = {
            "kind": "checkout",
            "branch": response.branch,
            "new_branch": response.new_branch,
            "added_files": list(response.added_files),
            "modified_files": list(response.modified_files),
            "deleted_files": list(response.deleted_files),
        }
    elif isinstance(response, AddResponse):
        body = {
            "kind": "add",
            "dry_run": response.dry_run,
            "files": list(response.files),
            "error": response.error,
        }
    else:
        raise TypeError(f"Unsupported response type: {type(response).__name__}")

    body["error_state"] = response.error_state()
    body["diagnostics"] = _diagnostics(response.diagnostics)
    return body


def render(response: Response) -> str:
    """Return formatted JSON string."""
    return json.dumps(to_dict(response), indent=2)


def render_yaml(response: Response) -> str:
    """Return the same report as YAML."""
    return yaml.safe_dump(to_dict(response), sort_keys=False, default_flow_style=False)
