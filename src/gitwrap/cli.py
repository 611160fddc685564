"""gitwrap CLI — Typer application with status, commit, checkout, add, parse and init."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console

from gitwrap import __version__

app = typer.Typer(
    name="gitwrap",
    help="Run git and print its output as structured data.",
    add_completion=False,
    no_args_is_help=True,
)

console = Console(stderr=True)

_PARSE_KINDS = ("status", "commit", "checkout", "add")


def _configure_logging(verbose: bool) -> None:
    from rich.logging import RichHandler

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _resolve_repo_root(repo: Optional[Path]) -> Path:
    """Find the git repo root, exit 2 on failure."""
    from gitwrap.git.adapter import GitError, check_repository_path, get_repo_root

    try:
        start = check_repository_path(repo) if repo else None
        return get_repo_root(start)
    except GitError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc


def _load(root: Path, config: Optional[str], format: Optional[str]):
    """Load config for *root* and apply the --format override; exit 2 on failure."""
    from gitwrap.config.loader import ConfigError, load_config
    from gitwrap.config.schema import OUTPUT_FORMATS

    try:
        cfg = load_config(root, config)
    except ConfigError as exc:
        console.print(f"[bold red]Config error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc

    if format:
        if format not in OUTPUT_FORMATS:
            console.print(f"[bold red]Invalid format:[/bold red] {format}")
            raise typer.Exit(code=2)
        cfg.output.format = format  # type: ignore[assignment]
    return cfg


def _client(cfg):
    from gitwrap.git.adapter import GitError
    from gitwrap.git.client import get_client

    try:
        return get_client(cfg)
    except GitError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc


def _emit(response, cfg) -> None:
    """Render *response* in the configured format and exit with its status."""
    from gitwrap.output import json_report, terminal

    if cfg.output.format == "json":
        print(json_report.render(response))
    elif cfg.output.format == "yaml":
        print(json_report.render_yaml(response), end="")
    else:
        terminal.render(response, show_diagnostics=cfg.output.show_diagnostics)

    if response.error_state():
        raise typer.Exit(code=1)
    raise typer.Exit(code=0)


def _run(call):
    """Invoke a client call, turning git and parse failures into exit code 2."""
    from gitwrap.git.adapter import GitError
    from gitwrap.parsers.base import ParseError

    try:
        return call()
    except GitError as exc:
        console.print(f"[bold red]Git error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc
    except ParseError as exc:
        console.print(f"[bold red]Parse error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc


_REPO_OPTION = typer.Option(None, "--repo", "-C", help="Repository path (default: current directory)")
_CONFIG_OPTION = typer.Option(None, "--config", "-c", help="Path to .gitwrap.toml")
_FORMAT_OPTION = typer.Option(None, "--format", "-f", help="Output format: terminal | json | yaml")


# ── status ────────────────────────────────────────────────────────────────────


@app.command()
def status(
    repo: Optional[Path] = _REPO_OPTION,
    config: Optional[str] = _CONFIG_OPTION,
    format: Optional[str] = _FORMAT_OPTION,
    untracked: str = typer.Option("normal", "--untracked-files", "-u", help="no | normal | all"),
) -> None:
    """Show the working tree status."""
    from gitwrap.git.options import StatusOptions

    root = _resolve_repo_root(repo)
    cfg = _load(root, config, format)
    client = _client(cfg)
    response = _run(lambda: client.status(root, StatusOptions(untracked_files=untracked)))
    _emit(response, cfg)


# ── commit ────────────────────────────────────────────────────────────────────


@app.command()
def commit(
    message: str = typer.Option(..., "--message", "-m", help="Commit message"),
    paths: Optional[List[str]] = typer.Argument(None, help="Commit only these paths"),
    all: bool = typer.Option(False, "--all", "-a", help="Stage all tracked changes first"),
    signoff: bool = typer.Option(False, "--signoff", "-s", help="Add a Signed-off-by trailer"),
    no_verify: bool = typer.Option(False, "--no-verify", help="Skip pre-commit hooks"),
    author: Optional[str] = typer.Option(None, "--author", help="Override the commit author"),
    repo: Optional[Path] = _REPO_OPTION,
    config: Optional[str] = _CONFIG_OPTION,
    format: Optional[str] = _FORMAT_OPTION,
) -> None:
    """Record changes to the repository."""
    from gitwrap.git.options import CommitOptions

    root = _resolve_repo_root(repo)
    cfg = _load(root, config, format)
    client = _client(cfg)
    options = CommitOptions(all=all, signoff=signoff, no_verify=no_verify, author=author)
    response = _run(lambda: client.commit(root, message, options, paths or ()))
    _emit(response, cfg)


# ── checkout ──────────────────────────────────────────────────────────────────


@app.command()
def checkout(
    branch: str = typer.Argument(..., help="Branch to switch to"),
    create: bool = typer.Option(False, "-b", help="Create the branch first"),
    force: bool = typer.Option(False, "--force", help="Discard local changes"),
    repo: Optional[Path] = _REPO_OPTION,
    config: Optional[str] = _CONFIG_OPTION,
    format: Optional[str] = _FORMAT_OPTION,
) -> None:
    """Switch branches."""
    from gitwrap.git.options import CheckoutOptions

    root = _resolve_repo_root(repo)
    cfg = _load(root, config, format)
    client = _client(cfg)
    options = CheckoutOptions(create_branch=create, force=force)
    response = _run(lambda: client.checkout(root, branch, options))
    _emit(response, cfg)


# ── add ───────────────────────────────────────────────────────────────────────


@app.command()
def add(
    paths: List[str] = typer.Argument(..., help="Paths to stage"),
    dry_run: bool = typer.Option(False, "--dry-run", "-n", help="Only show what would be added"),
    force: bool = typer.Option(False, "--force", help="Allow adding ignored files"),
    repo: Optional[Path] = _REPO_OPTION,
    config: Optional[str] = _CONFIG_OPTION,
    format: Optional[str] = _FORMAT_OPTION,
) -> None:
    """Stage file contents."""
    from gitwrap.git.options import AddOptions

    root = _resolve_repo_root(repo)
    cfg = _load(root, config, format)
    client = _client(cfg)
    options = AddOptions(dry_run=dry_run, force=force)
    response = _run(lambda: client.add(root, paths, options))
    _emit(response, cfg)


# ── parse ─────────────────────────────────────────────────────────────────────


@app.command()
def parse(
    kind: str = typer.Argument(..., help="Output kind: status | commit | checkout | add"),
    source: Optional[Path] = typer.Argument(None, help="File with captured git output (default: stdin)"),
    config: Optional[str] = _CONFIG_OPTION,
    format: Optional[str] = _FORMAT_OPTION,
) -> None:
    """Parse previously captured git output without running git."""
    from gitwrap.parsers import PARSERS

    if kind not in _PARSE_KINDS:
        console.print(f"[bold red]Invalid kind:[/bold red] {kind}")
        raise typer.Exit(code=2)
    cfg = _load(Path.cwd(), config, format)

    if source is not None:
        try:
            text = source.read_text(encoding="utf-8", errors="replace")
        except OSError as exc:
            console.print(f"[bold red]Error:[/bold red] {exc}")
            raise typer.Exit(code=2) from exc
    else:
        text = sys.stdin.read()

    parser = PARSERS[kind]()
    for line in text.splitlines():
        parser.parse_line(line)
    response = _run(parser.get_response)
    _emit(response, cfg)


# ── init ──────────────────────────────────────────────────────────────────────


@app.command()
def init(repo: Optional[Path] = _REPO_OPTION) -> None:
    """Generate a starter .gitwrap.toml in the repo root."""
    from gitwrap.config.defaults import DEFAULT_TOML
    from gitwrap.config.loader import CONFIG_FILENAME

    root = _resolve_repo_root(repo)
    config_path = root / CONFIG_FILENAME

    if config_path.exists():
        console.print(f"[yellow]⚠[/yellow]  {CONFIG_FILENAME} already exists at {config_path}")
        raise typer.Exit(code=1)

    config_path.write_text(DEFAULT_TOML, encoding="utf-8")
    console.print(f"[green]✓[/green] Created {config_path}")


# ── version ───────────────────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        print(f"gitwrap {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version", "-V", callback=_version_callback,
        is_eager=True, help="Show version and exit",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log the git commands being run"),
) -> None:
    """gitwrap — git output as typed, structured responses."""
    _configure_logging(verbose)
