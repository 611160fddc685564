"""Rich terminal reporter — one table per response kind, then diagnostics."""

from __future__ import annotations

from typing import Iterable, Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from gitwrap.output.json_report import Response
from gitwrap.responses.models import (
    AddResponse,
    CheckoutResponse,
    CommitResponse,
    StatusFileCategory,
    StatusResponse,
)

_CATEGORY_LABEL = {
    StatusFileCategory.NEW_TO_COMMIT: ("new file", "green"),
    StatusFileCategory.DELETED_TO_COMMIT: ("deleted", "green"),
    StatusFileCategory.MODIFIED_TO_COMMIT: ("modified", "green"),
    StatusFileCategory.DELETED_NOT_UPDATED: ("deleted", "red"),
    StatusFileCategory.MODIFIED_NOT_UPDATED: ("modified", "red"),
    StatusFileCategory.UNTRACKED: ("untracked", "magenta"),
}

_STAGED = (
    StatusFileCategory.NEW_TO_COMMIT,
    StatusFileCategory.DELETED_TO_COMMIT,
    StatusFileCategory.MODIFIED_TO_COMMIT,
)


def _file_table(title: str, rows: Iterable[tuple[str, str, str]]) -> Optional[Table]:
    rows = list(rows)
    if not rows:
        return None
    table = Table(title=title, title_style="bold", border_style="dim", show_header=True)
    table.add_column("Change", justify="center", width=12)
    table.add_column("Path", style="cyan")
    for label, style, path in rows:
        table.add_row(f"[{style}]{label}[/{style}]", escape(path))
    return table


def _render_status(console: Console, response: StatusResponse) -> None:
    branch = escape(response.branch or "(no branch)")
    console.print(f"[bold]On branch[/bold] [cyan]{branch}[/cyan]")

    staged = [
        (*_CATEGORY_LABEL[c], path) for c in _STAGED for path in response.iter_files(c)
    ]
    unstaged = [
        (*_CATEGORY_LABEL[c], path)
        for c in (StatusFileCategory.MODIFIED_NOT_UPDATED, StatusFileCategory.DELETED_NOT_UPDATED)
        for path in response.iter_files(c)
    ]
    untracked = [
        (*_CATEGORY_LABEL[StatusFileCategory.UNTRACKED], path)
        for path in response.iter_files(StatusFileCategory.UNTRACKED)
    ]
    for title, rows in (
        ("Changes to be committed", staged),
        ("Changes not staged", unstaged),
        ("Untracked files", untracked),
    ):
        table = _file_table(title, rows)
        if table is not None:
            console.print(table)

    if response.message:
        console.print(f"[dim]{escape(response.message)}[/dim]")


def _render_commit(console: Console, response: CommitResponse) -> None:
    console.print(
        f"[bold green]✓[/bold green] Commit [yellow]{response.short_hash}[/yellow] "
        f"{escape(response.short_comment)}"
    )
    console.print(
        f"[dim]{response.files_changed} file(s) changed, "
        f"{response.lines_inserted} insertion(s), {response.lines_deleted} deletion(s)[/dim]"
    )

    rows = [("create", "green", f"{f.path} ({f.mode})") for f in response.added_files]
    rows += [("delete", "red", f"{f.path} ({f.mode})") for f in response.deleted_files]
    rows += [
        ("copy", "blue", f"{f.source} → {f.destination} ({f.percentage}%)")
        for f in response.copied_files
    ]
    rows += [
        ("rename", "yellow", f"{f.source} → {f.destination} ({f.percentage}%)")
        for f in response.renamed_files
    ]
    table = _file_table("Files", rows)
    if table is not None:
        console.print(table)


def _render_checkout(console: Console, response: CheckoutResponse) -> None:
    if response.new_branch:
        console.print(
            f"[bold green]✓[/bold green] Switched to a new branch "
            f"[cyan]{escape(response.new_branch)}[/cyan]"
        )
    elif response.branch:
        console.print(
            f"[bold green]✓[/bold green] Switched to branch [cyan]{escape(response.branch)}[/cyan]"
        )

    rows = [("added", "green", p) for p in response.added_files]
    rows += [("modified", "yellow", p) for p in response.modified_files]
    rows += [("deleted", "red", p) for p in response.deleted_files]
    table = _file_table("Working tree", rows)
    if table is not None:
        console.print(table)


def _render_add(console: Console, response: AddResponse) -> None:
    verb = "Would add" if response.dry_run else "Added"
    console.print(f"[bold]{verb} {response.file_count} path(s)[/bold]")
    for path in response.iter_files():
        console.print(f"  [cyan]{escape(path)}[/cyan]")
    if response.error:
        console.print(f"[bold red]✗[/bold red] {escape(response.error)}")


def _render_diagnostics(console: Console, response: Response) -> None:
    console.print()
    console.print(f"[bold yellow]⚠  {response.error_count} unparsed line(s):[/bold yellow]")
    for index in range(response.error_count):
        console.print(f"  [yellow]{escape(response.get_error(index))}[/yellow]", highlight=False)


def render(
    response: Response,
    *,
    show_diagnostics: bool = True,
    console: Optional[Console] = None,
) -> None:
    """Print a parsed response to the terminal using Rich."""
    console = console or Console()

    if isinstance(response, StatusResponse):
        _render_status(console, response)
    elif isinstance(response, CommitResponse):
        _render_commit(console, response)
    elif isinstance(response, CheckoutResponse):
        _render_checkout(console, response)
    elif isinstance(response, AddResponse):
        _render_add(console, response)
    else:
        raise TypeError(f"Unsupported response type: {type(response).__name__}")

    if show_diagnostics and response.error_state():
        _render_diagnostics(console, response)
