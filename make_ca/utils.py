"""Shared utility functions for make-ca.

Provides the Rich console used for every user-facing message, small
coloured output helpers, and a couple of file-system helpers shared by the
initializer and the generator.
"""

from __future__ import annotations

from pathlib import Path

from rich.console import Console
from rich.markup import escape

console = Console()
error_console = Console(stderr=True)


# ---------------------------------------------------------------------------
# File-system helpers
# ---------------------------------------------------------------------------


def ensure_dir(path: str | Path) -> Path:
    """Create a directory (and parents) if it does not exist.

    Args:
        path: Directory path.

    Returns:
        The resolved ``Path`` object.
    """
    dir_path = Path(path)
    dir_path.mkdir(parents=True, exist_ok=True)
    return dir_path.resolve()


def is_directory_empty(path: str | Path) -> bool:
    """Return ``True`` if *path* is a directory without any entries."""
    dir_path = Path(path)
    return not any(dir_path.iterdir())


def write_text(path: Path, content: str) -> None:
    """Synchronous helper: create parent dirs and write content."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_success(message: str) -> None:
    """Print a success message preceded by a green check mark."""
    console.print()
    console.print(f"[green]✓[/green] {escape(message)}")


def print_step(message: str) -> None:
    """Print a completed step in green (the end state of a spinner)."""
    console.print(f"[green]✓ {escape(message)}[/green]")


def print_error(message: str) -> None:
    """Print a red error message to stderr."""
    error_console.print(f"[bold red]{escape(message)}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{escape(message)}[/bold yellow]")


def print_info(message: str) -> None:
    """Print an informational message in blue."""
    console.print(f"[blue]{escape(message)}[/blue]")


def print_command_hint(message: str, command: str) -> None:
    """Print *message* followed by a highlighted *command* the user can run."""
    console.print(f"{escape(message)} [blue]{escape(command)}[/blue]")
