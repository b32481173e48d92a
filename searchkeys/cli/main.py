"""
searchkeys CLI - Command-line interface for search service API keys.

Usage:
    searchkeys keys list      List keys
    searchkeys keys get       Show one key
    searchkeys keys create    Create a key
    searchkeys keys update    Change the name or description of a key
    searchkeys keys delete    Delete a key
"""

from typing import Optional

import typer
from rich.console import Console

from .commands import keys

# Create the main Typer app
app = typer.Typer(
    name="searchkeys",
    help="Manage API keys of a search service",
    add_completion=False,
)

# Create a Rich console for pretty output
console = Console()

# Add keys subcommand group
app.add_typer(keys.app, name="keys")


@app.callback()
def callback(
    ctx: typer.Context,
    host: Optional[str] = typer.Option(None, "--host", help="Search service URL"),
    api_key: Optional[str] = typer.Option(None, "--api-key", help="Master or admin key"),
    debug: bool = typer.Option(False, "--debug", help="Log requests and responses"),
) -> None:
    """
    searchkeys - API key management for the search service.

    Connection settings default to the SEARCHKEYS_* environment variables.
    """
    ctx.obj = {"host": host, "api_key": api_key, "debug": debug}


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
