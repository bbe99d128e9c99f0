"""Main Typer application for postindex."""

import json
import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from postindex.cli.errorhandler import handle_cli_errors
from postindex.config import load_config
from postindex.content.authoring import new_post
from postindex.content.checks import Severity, check_site
from postindex.content.index import ContentIndex
from postindex.logging_setup import configure_logging
from postindex.rendering import rebuild_index
from postindex.utils.datetime_utils import extract_clean_date

app = typer.Typer(
    name="postindex",
    help="List, check and extend a curated index of Markdown posts.",
    add_completion=False,
)
console = Console()
logger = logging.getLogger(__name__)

SiteArg = Annotated[Path, typer.Argument(help="Site root directory", file_okay=False)]
DebugOpt = Annotated[bool, typer.Option("--debug", help="Show full tracebacks")]


@app.callback()
def _initialize_cli(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging")] = False,
) -> None:
    configure_logging(verbose=verbose)


@app.command("list")
def list_command(
    site: SiteArg = Path(),
    as_json: Annotated[bool, typer.Option("--json", help="Print entries as JSON")] = False,
    debug: DebugOpt = False,
) -> None:
    """Print the index entries in curated order."""
    with handle_cli_errors(debug=debug):
        index = ContentIndex.from_config(load_config(site))
        entries = list(index.list_posts())

        if as_json:
            typer.echo(json.dumps([entry._asdict() for entry in entries], indent=2, ensure_ascii=False))
            return

        if not entries:
            console.print(f"[yellow]No entries in {index.index_path}[/yellow]")
            return

        table = Table(title=f"Index ({len(entries)} posts)")
        table.add_column("#", justify="right", style="dim")
        table.add_column("Title", style="cyan")
        table.add_column("Path", style="green")
        for position, entry in enumerate(entries, start=1):
            table.add_row(str(position), entry.title, entry.path)
        console.print(table)


@app.command("check")
def check_command(
    site: SiteArg = Path(),
    strict: Annotated[bool, typer.Option("--strict", help="Fail on warnings too")] = False,
    debug: DebugOpt = False,
) -> None:
    """Verify that every index entry points at a well-formed post."""
    with handle_cli_errors(debug=debug):
        config = load_config(site)
        report = check_site(ContentIndex.from_config(config), config.paths.abs_posts_dir)

    for issue in report.issues:
        style = "red" if issue.severity is Severity.ERROR else "yellow"
        detail = escape(f"{issue.path}: {issue.message}")
        console.print(f"[{style}]{issue.severity.value}[/{style}] {issue.code.value} {detail}")

    console.print(
        f"Checked {report.checked_entries} entries: "
        f"{len(report.errors)} error(s), {len(report.warnings)} warning(s)"
    )
    if not report.ok or (strict and report.warnings):
        raise typer.Exit(1)


@app.command("new")
def new_command(
    title: Annotated[str, typer.Argument(help="Post title")],
    site: Annotated[Path, typer.Option("--site", help="Site root directory", file_okay=False)] = Path(),
    author: Annotated[str | None, typer.Option("--author", help="Post author")] = None,
    description: Annotated[str, typer.Option("--description", help="Short summary")] = "",
    tag: Annotated[list[str] | None, typer.Option("--tag", help="Tag (repeatable)")] = None,
    post_date: Annotated[str | None, typer.Option("--date", help="Publish date (YYYY-MM-DD)")] = None,
    no_index: Annotated[bool, typer.Option("--no-index", help="Do not add the post to the index")] = False,
    debug: DebugOpt = False,
) -> None:
    """Create a post and add it to the top of the index."""
    with handle_cli_errors(debug=debug):
        config = load_config(site)
        post = new_post(
            config,
            title,
            post_date=extract_clean_date(post_date) if post_date else None,
            author=author,
            description=description,
            tags=tag or (),
            register=not no_index,
        )
    console.print(f"[green]Created[/green] {post.path}")


@app.command("rebuild-index")
def rebuild_index_command(
    site: SiteArg = Path(),
    debug: DebugOpt = False,
) -> None:
    """Regenerate the index from the posts directory, newest first."""
    with handle_cli_errors(debug=debug):
        config = load_config(site)
        entries = rebuild_index(config)
    console.print(f"[green]Wrote[/green] {config.paths.abs_index_file} ({len(entries)} entries)")


def main() -> None:
    app()


__all__ = ["app", "main"]
