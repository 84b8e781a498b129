"""Clip management CLI commands."""

import asyncio

import typer
from rich.console import Console
from rich.table import Table

from mediashelf.models import Clip
from mediashelf.store import Collection, open_store

console = Console()
app = typer.Typer(help="Clip management commands")


@app.command("list")
def list_clips():
    """List every clip."""

    async def _list():
        async with open_store() as store:
            return await store.list(Collection.CLIPS)

    result = asyncio.run(_list())

    table = Table(title=f"Clips ({result.total})")
    table.add_column("ID", style="cyan")
    table.add_column("Title", style="green")
    table.add_column("Video", style="dim")

    for item in result.items:
        clip = Clip.model_validate(item)
        table.add_row(str(clip.id), clip.title or "-", clip.video_url or "-")

    console.print(table)


@app.command("delete")
def delete_clip(
    clip_id: int = typer.Argument(..., help="Clip ID"),
    force: bool = typer.Option(False, "--force", "-f", help="Skip confirmation"),
):
    """Delete a clip. Uploaded files are left in place."""
    if not force and not typer.confirm(f"Delete clip {clip_id}?"):
        console.print("[dim]Cancelled[/dim]")
        raise typer.Exit(0)

    async def _delete():
        async with open_store() as store:
            return await store.delete(Collection.CLIPS, clip_id)

    if not asyncio.run(_delete()):
        console.print(f"[red]Error:[/red] Clip {clip_id} not found")
        raise typer.Exit(1)

    console.print(f"[green]Deleted clip {clip_id}[/green]")
