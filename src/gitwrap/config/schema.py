"""Configuration schema — dataclasses for every config section."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

OutputFormat = Literal["terminal", "json", "yaml"]

OUTPUT_FORMATS = ("terminal", "json", "yaml")


@dataclass
class GitConfig:
    binary: str = "git"
    timeout: int = 30  # seconds per git invocation
    comment_prefix: bool = True  # ask git for "# "-prefixed status output


@dataclass
class OutputConfig:
    format: OutputFormat = "terminal"
    show_diagnostics: bool = True


@dataclass
class ClientConfig:
    backend: str = "cli"  # key into gitwrap.git.client.CLIENT_BACKENDS


@dataclass
class GitWrapConfig:
    version: str = "1.0"
    git: GitConfig = field(default_factory=GitConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    client: ClientConfig = field(default_factory=ClientConfig)
