"""Git subprocess wrapper — run a command, hand back its output lines."""

from __future__ import annotations

import logging
import os
import subprocess
from pathlib import Path
from typing import List, Optional

logger = logging.getLogger(__name__)


class GitError(Exception):
    """Raised when git is unavailable, times out, or the repository path is invalid."""


def check_repository_path(path: Path) -> Path:
    """Return *path* resolved; raise GitError unless it is an existing directory."""
    resolved = Path(path).expanduser()
    if not resolved.exists():
        raise GitError(f"Repository path does not exist: {path}")
    if not resolved.is_dir():
        raise GitError(f"Repository path is not a directory: {path}")
    return resolved.resolve()


def _git_env() -> dict[str, str]:
    # Parsers match English output.
    env = dict(os.environ)
    env["LC_ALL"] = "C"
    env["LANG"] = "C"
    return env


def run_git(
    args: List[str],
    cwd: Path,
    *,
    binary: str = "git",
    timeout: int = 30,
) -> List[str]:
    """Run ``git *args`` in *cwd* and return stdout+stderr as lines.

    Stderr is merged into stdout because git reports some results there
    ("Switched to branch ..."). A non-zero exit status is not an error here;
    the output parsers decide what the text means.
    """
    cmd = [binary, *args]
    logger.debug("running %s in %s", " ".join(cmd), cwd)
    try:
        result = subprocess.run(
            cmd,
            cwd=cwd,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
            timeout=timeout,
            encoding="utf-8",
            errors="replace",
            env=_git_env(),
        )
    except FileNotFoundError:
        raise GitError(f"{binary} is not installed or not on PATH")
    except subprocess.TimeoutExpired:
        raise GitError(f"git command timed out after {timeout}s: {' '.join(cmd)}")

    logger.debug("exit status %d, %d bytes of output", result.returncode, len(result.stdout))
    return result.stdout.splitlines()


def get_repo_root(cwd: Optional[Path] = None, *, binary: str = "git") -> Path:
    """Return the root of the git repository containing *cwd*."""
    cwd = cwd or Path.cwd()
    lines = run_git(["rev-parse", "--show-toplevel"], cwd=cwd, binary=binary)
    if not lines or lines[0].startswith(("fatal:", "error:")):
        detail = lines[0] if lines else "no output"
        raise GitError(f"Not a git repository ({detail}): {cwd}")
    return Path(lines[0].strip())
