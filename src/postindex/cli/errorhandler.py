"""CLI error handling utilities."""

from collections.abc import Generator
from contextlib import contextmanager

import typer
from rich.console import Console

from postindex.config.exceptions import ConfigError
from postindex.content.exceptions import (
    ContentError,
    DuplicateIndexEntryError,
    PostExistsError,
    PostNotFoundError,
    PostValidationError,
)
from postindex.markdown.exceptions import FrontmatterError
from postindex.utils.exceptions import DateTimeError

console = Console()


@contextmanager
def handle_cli_errors(*, debug: bool = False) -> Generator[None, None, None]:
    """Context manager to handle CLI errors gracefully.

    Args:
        debug: If True, re-raise so the full traceback is shown.

    """
    try:
        yield
    except (KeyboardInterrupt, SystemExit, typer.Exit):
        raise
    except ConfigError as e:
        if debug:
            raise
        console.print(f"[bold red]Configuration Error:[/bold red] {e}")
        raise typer.Exit(1) from e
    except (PostExistsError, DuplicateIndexEntryError) as e:
        if debug:
            raise
        console.print(f"[bold red]Already Exists:[/bold red] {e}")
        raise typer.Exit(1) from e
    except PostNotFoundError as e:
        if debug:
            raise
        console.print(f"[bold red]Missing Post:[/bold red] {e}")
        raise typer.Exit(1) from e
    except (FrontmatterError, PostValidationError) as e:
        if debug:
            raise
        console.print(f"[bold red]Invalid Post:[/bold red] {e}")
        raise typer.Exit(1) from e
    except DateTimeError as e:
        if debug:
            raise
        console.print(f"[bold red]Invalid Date:[/bold red] {e}")
        raise typer.Exit(1) from e
    except ContentError as e:
        if debug:
            raise
        console.print(f"[bold red]Content Error:[/bold red] {e}")
        raise typer.Exit(1) from e
    except Exception as e:
        if debug:
            console.print_exception(show_locals=False)
            raise typer.Exit(1) from e

        console.print(f"[bold red]An unexpected error occurred:[/bold red] {e}")
        console.print("[dim]Run with [bold]--debug[/bold] for more details.[/dim]")
        raise typer.Exit(1) from e
