"""Client façade — one GitClient implementation, chosen at construction time."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Dict, Optional, Protocol, Sequence

from gitwrap.config.schema import GitWrapConfig
from gitwrap.git.adapter import GitError, check_repository_path, run_git
from gitwrap.git.options import (
    AddOptions,
    CheckoutOptions,
    CommitOptions,
    StatusOptions,
    build_add_command,
    build_checkout_command,
    build_commit_command,
    build_status_command,
)
from gitwrap.parsers import AddParser, CheckoutParser, CommitParser, ResponseParser, StatusParser
from gitwrap.parsers.base import R
from gitwrap.responses.models import AddResponse, CheckoutResponse, CommitResponse, StatusResponse

logger = logging.getLogger(__name__)


class GitClient(Protocol):
    """Git operations that return parsed responses."""

    def status(self, repo: Path, options: Optional[StatusOptions] = None) -> StatusResponse:
        """Run ``git status``."""

    def commit(
        self,
        repo: Path,
        message: str,
        options: Optional[CommitOptions] = None,
        paths: Sequence[str] = (),
    ) -> CommitResponse:
        """Run ``git commit``; raises CommitParseError when no commit was made."""

    def checkout(
        self, repo: Path, branch: str, options: Optional[CheckoutOptions] = None
    ) -> CheckoutResponse:
        """Run ``git checkout``."""

    def add(
        self, repo: Path, paths: Sequence[str], options: Optional[AddOptions] = None
    ) -> AddResponse:
        """Run ``git add``."""


class CliGitClient:
    """GitClient backed by the ``git`` executable."""

    def __init__(self, binary: str = "git", timeout: int = 30, comment_prefix: bool = True) -> None:
        self.binary = binary
        self.timeout = timeout
        self.comment_prefix = comment_prefix

    def _run(self, parser: ResponseParser[R], args: Sequence[str], repo: Path) -> R:
        repo = check_repository_path(repo)
        for line in run_git(list(args), cwd=repo, binary=self.binary, timeout=self.timeout):
            parser.parse_line(line)
        logger.debug("%s parsed %d lines", type(parser).__name__, parser.lines_parsed)
        return parser.get_response()

    def status(self, repo: Path, options: Optional[StatusOptions] = None) -> StatusResponse:
        args = build_status_command(options or StatusOptions(), comment_prefix=self.comment_prefix)
        return self._run(StatusParser(), args, repo)

    def commit(
        self,
        repo: Path,
        message: str,
        options: Optional[CommitOptions] = None,
        paths: Sequence[str] = (),
    ) -> CommitResponse:
        return self._run(CommitParser(), build_commit_command(message, options, paths), repo)

    def checkout(
        self, repo: Path, branch: str, options: Optional[CheckoutOptions] = None
    ) -> CheckoutResponse:
        return self._run(CheckoutParser(), build_checkout_command(branch, options), repo)

    def add(
        self, repo: Path, paths: Sequence[str], options: Optional[AddOptions] = None
    ) -> AddResponse:
        options = options or AddOptions()
        return self._run(AddParser(dry_run=options.dry_run), build_add_command(paths, options), repo)


def _cli_client(config: GitWrapConfig) -> GitClient:
    return CliGitClient(
        binary=config.git.binary,
        timeout=config.git.timeout,
        comment_prefix=config.git.comment_prefix,
    )


CLIENT_BACKENDS: Dict[str, Callable[[GitWrapConfig], GitClient]] = {
    "cli": _cli_client,
}


def get_client(config: Optional[GitWrapConfig] = None) -> GitClient:
    """Return the client selected by ``config.client.backend``."""
    config = config or GitWrapConfig()
    factory = CLIENT_BACKENDS.get(config.client.backend)
    if factory is None:
        known = ", ".join(sorted(CLIENT_BACKENDS))
        raise GitError(f"Unknown client backend {config.client.backend!r} (known: {known})")
    logger.debug("using %s client backend", config.client.backend)
    return factory(config)
