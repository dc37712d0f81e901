"""Provider factory functions for CLI.

Centralizes creation of sessions and version stores from environment variables.
Hides configuration details from command implementations.

Environment variables:
    UISTUDIO_VERSION_BACKEND: Version history backend (default: memory)
    UISTUDIO_THEME: TUI theme, "dark" or "light" (default: dark)
    UISTUDIO_LOG_LEVEL: TUI log panel level (default: unset, panel hidden)
"""

import os
from typing import Any

import typer
from rich.console import Console
from rich.markup import escape

from ..session import StudioSession
from ..versions import VersionStore, create_version_store

# Default console for output
_console = Console()


def get_version_store(console: Console | None = None) -> VersionStore:
    """Create the version history backend.

    Raises:
        typer.Exit: If UISTUDIO_VERSION_BACKEND names an unsupported backend
    """
    con = console or _console
    backend = os.getenv("UISTUDIO_VERSION_BACKEND", "memory")
    try:
        return create_version_store(backend)
    except ValueError as e:
        con.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1)


def get_session(console: Console | None = None, verbose: bool = False) -> StudioSession:
    """Create a studio session.

    Args:
        console: Optional Rich console for output
        verbose: Print the session's debug messages as they happen
    """
    con = console or _console
    session = StudioSession(versions=get_version_store(con))
    if verbose:
        session.set_debug_callback(make_console_debug_callback(con))
    return session


def make_console_debug_callback(console: Console) -> Any:
    """Debug callback that prints one dim line per message."""
    colors = {"warning": "yellow", "error": "red"}

    def _callback(level: str, component: str, message: str) -> None:
        style = colors.get(level, "dim")
        line = escape(f"{level.upper():<7} [{component}] {message}")
        console.print(f"[{style}]{line}[/{style}]")

    return _callback


def get_theme_mode() -> str:
    """TUI theme from UISTUDIO_THEME."""
    mode = os.getenv("UISTUDIO_THEME", "dark").lower()
    return mode if mode in ("dark", "light") else "dark"


def get_log_level() -> str | None:
    """TUI log panel level from UISTUDIO_LOG_LEVEL."""
    return os.getenv("UISTUDIO_LOG_LEVEL") or None
