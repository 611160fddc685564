"""Option objects and the argument lists built from them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence


@dataclass
class StatusOptions:
    untracked_files: str = "normal"  # no | normal | all
    paths: List[str] = field(default_factory=list)


@dataclass
class CommitOptions:
    all: bool = False
    include: bool = False
    no_verify: bool = False
    only: bool = False
    signoff: bool = False
    author: Optional[str] = None


@dataclass
class CheckoutOptions:
    create_branch: bool = False  # -b
    force: bool = False
    paths: List[str] = field(default_factory=list)


@dataclass
class AddOptions:
    dry_run: bool = False
    force: bool = False
    verbose: bool = True


def build_status_command(options: StatusOptions, *, comment_prefix: bool = True) -> List[str]:
    cmd: List[str] = []
    if comment_prefix:
        # Current git dropped the "# " prefix the status parser keys on.
        cmd += ["-c", "status.displayCommentPrefix=true"]
    cmd += ["-c", "color.status=false", "status"]
    if options.untracked_files != "normal":
        cmd.append(f"--untracked-files={options.untracked_files}")
    if options.paths:
        cmd.append("--")
        cmd.extend(options.paths)
    return cmd


def build_commit_command(
    message: str,
    options: Optional[CommitOptions] = None,
    paths: Sequence[str] = (),
) -> List[str]:
    if not message:
        raise ValueError("commit message must be a non-empty string")
    cmd = ["commit"]
    if options is not None:
        if options.all:
            cmd.append("-a")
        if options.include:
            cmd.append("-i")
        if options.no_verify:
            cmd.append("--no-verify")
        if options.only:
            cmd.append("-o")
        if options.signoff:
            cmd.append("-s")
        if options.author:
            cmd += ["--author", options.author]
    cmd += ["-m", message]
    if paths:
        cmd.append("--")
        cmd.extend(paths)
    return cmd


def build_checkout_command(branch: str, options: Optional[CheckoutOptions] = None) -> List[str]:
    if not branch:
        raise ValueError("branch must be a non-empty string")
    options = options or CheckoutOptions()
    cmd = ["checkout"]
    if options.force:
        cmd.append("-f")
    if options.create_branch:
        cmd.append("-b")
    cmd.append(branch)
    if options.paths:
        cmd.append("--")
        cmd.extend(options.paths)
    return cmd


def build_add_command(paths: Sequence[str], options: Optional[AddOptions] = None) -> List[str]:
    if not paths:
        raise ValueError("at least one path is required")
    options = options or AddOptions()
    cmd = ["add"]
    if options.verbose:
        cmd.append("-v")
    if options.dry_run:
        cmd.append("-n")
    if options.force:
        cmd.append("-f")
    cmd.append("--")
    cmd.extend(paths)
    return cmd
