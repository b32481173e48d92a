"""
CLI commands for API key management.
"""

import asyncio
from datetime import datetime
from typing import List, Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ...client import Client
from ...errors import SearchKeysError
from ...keys.models import Action, Key, KeyBuilder
from ...utils.logging import setup_logging

console = Console()
app = typer.Typer(help="Manage API keys of the search service")


def run_async(coro):
    """Run async function in sync context, reporting library and config errors."""
    try:
        return asyncio.run(coro)
    except (SearchKeysError, ValidationError) as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)


async def open_client(ctx: typer.Context) -> Client:
    """Create a Client from the global CLI options."""
    options = ctx.obj or {}
    kwargs = {}
    if options.get("debug"):
        kwargs["debug"] = True

    client = await Client.create(
        host=options.get("host"),
        api_key=options.get("api_key"),
        **kwargs,
    )
    setup_logging(client.config.debug)
    return client


def print_key(key: Key) -> None:
    console.print(f"[bold]{escape(key.name or '(unnamed)')}[/bold]")
    console.print(f"  Key: {escape(key.key)}")
    if key.description:
        console.print(f"  Description: {escape(key.description)}")
    console.print(f"  Actions: {', '.join(a.value for a in key.actions) or '-'}")
    console.print(f"  Indexes: {escape(', '.join(key.indexes)) or '-'}")
    console.print(f"  Expires: {key.expires_at or 'Never'}")
    console.print(f"  Created: {key.created_at}")
    console.print(f"  Updated: {key.updated_at}")


@app.command("list")
def keys_list_command(
    ctx: typer.Context,
    offset: Optional[int] = typer.Option(None, "--offset", "-o", help="Keys to skip"),
    limit: Optional[int] = typer.Option(None, "--limit", "-l", help="Maximum results"),
) -> None:
    """List API keys."""

    async def _list():
        client = await open_client(ctx)
        try:
            query = client.keys_query()
            if offset is not None:
                query.with_offset(offset)
            if limit is not None:
                query.with_limit(limit)

            page = await query.execute()

            if not page.results:
                console.print("[yellow]No API keys found[/yellow]")
                return

            table = Table(title=f"API Keys (offset {page.offset}, limit {page.limit})")
            table.add_column("Name", style="cyan")
            table.add_column("Key", style="yellow")
            table.add_column("Actions", style="blue")
            table.add_column("Indexes", style="green")
            table.add_column("Expires", style="dim")

            for key in page.results:
                actions_str = ", ".join(a.value for a in key.actions[:3])
                if len(key.actions) > 3:
                    actions_str += f"... (+{len(key.actions) - 3})"

                expires = key.expires_at.strftime("%Y-%m-%d") if key.expires_at else "Never"

                table.add_row(
                    escape(key.name or "-"),
                    escape(key.key[:8]),
                    actions_str or "-",
                    escape(", ".join(key.indexes)) or "-",
                    expires,
                )

            console.print(table)
        finally:
            await client.close()

    run_async(_list())


@app.command("get")
def keys_get_command(
    ctx: typer.Context,
    key: str = typer.Argument(..., help="Key string or uid"),
) -> None:
    """Get details of an API key."""

    async def _get():
        client = await open_client(ctx)
        try:
            print_key(await client.get_key(key))
        finally:
            await client.close()

    run_async(_get())


@app.command("create")
def keys_create_command(
    ctx: typer.Context,
    actions: List[Action] = typer.Option([], "--action", "-a", help="Action to grant (repeatable)"),
    indexes: List[str] = typer.Option([], "--index", "-i", help="Index pattern (repeatable)"),
    description: Optional[str] = typer.Option(None, "--description", "-d"),
    name: Optional[str] = typer.Option(None, "--name", "-n"),
    expires_at: Optional[datetime] = typer.Option(
        None,
        "--expires-at",
        "-e",
        formats=["%Y-%m-%d", "%Y-%m-%dT%H:%M:%S"],
        help="Expiration date (UTC)",
    ),
) -> None:
    """Create a new API key."""

    async def _create():
        client = await open_client(ctx)
        try:
            builder = KeyBuilder().with_actions(actions).with_indexes(indexes)
            if description is not None:
                builder.with_description(description)
            if name is not None:
                builder.with_name(name)
            if expires_at is not None:
                builder.with_expires_at(expires_at)

            key = await builder.execute(client)

            console.print("[green]✓[/green] API key created")
            console.print()
            print_key(key)
        finally:
            await client.close()

    run_async(_create())


@app.command("update")
def keys_update_command(
    ctx: typer.Context,
    key: str = typer.Argument(..., help="Key string or uid"),
    description: Optional[str] = typer.Option(None, "--description", "-d"),
    name: Optional[str] = typer.Option(None, "--name", "-n"),
) -> None:
    """Update the name or description of an API key."""
    if description is None and name is None:
        console.print("[yellow]Nothing to update[/yellow]")
        raise typer.Exit(1)

    async def _update():
        client = await open_client(ctx)
        try:
            current = await client.get_key(key)
            if description is not None:
                current.with_description(description)
            if name is not None:
                current.with_name(name)

            updated = await current.update(client)

            console.print("[green]✓[/green] API key updated")
            console.print()
            print_key(updated)
        finally:
            await client.close()

    run_async(_update())


@app.command("delete")
def keys_delete_command(
    ctx: typer.Context,
    key: str = typer.Argument(..., help="Key string or uid"),
    force: bool = typer.Option(False, "--force", "-f", help="Skip confirmation"),
) -> None:
    """Permanently delete an API key."""
    if not force:
        confirm = typer.confirm(f"Permanently delete API key {key[:8]}...?")
        if not confirm:
            raise typer.Abort()

    async def _delete():
        client = await open_client(ctx)
        try:
            await client.delete_key(key)
            console.print(f"[green]✓[/green] API key {key[:8]}... deleted")
        finally:
            await client.close()

    run_async(_delete())
