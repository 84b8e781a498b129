"""Song management CLI commands."""

import asyncio

import typer
from rich.console import Console
from rich.table import Table

from mediashelf.models import Song, SongPayload
from mediashelf.services.ids import next_id
from mediashelf.services.records import new_song
from mediashelf.store import Collection, open_store

console = Console()
app = typer.Typer(help="Song management commands")


@app.command("list")
def list_songs(
    limit: int | None = typer.Option(None, "--limit", "-l", help="Maximum number of songs to show"),
):
    """List songs in stored order."""

    async def _list():
        async with open_store() as store:
            return await store.list(Collection.SONGS, 0, limit)

    result = asyncio.run(_list())

    table = Table(title=f"Songs ({result.total})")
    table.add_column("ID", style="cyan")
    table.add_column("Title", style="green")
    table.add_column("Artist", style="yellow")
    table.add_column("YouTube", style="dim")

    for item in result.items:
        song = Song.model_validate(item)
        table.add_row(str(song.id), song.title or "-", song.artist or "-", song.youtube_url or "-")

    console.print(table)


@app.command("add")
def add_song(
    title: str = typer.Argument(..., help="Song title"),
    youtube_url: str = typer.Argument(..., help="YouTube URL"),
    artist: str | None = typer.Option(None, "--artist", help="Artist name"),
    cover: str | None = typer.Option(None, "--cover", help="Cover image URL"),
):
    """Add a song."""
    payload = SongPayload(title=title, youtube_url=youtube_url, artist=artist, cover_image_url=cover)
    song = new_song(next_id(), payload)

    async def _add():
        async with open_store() as store:
            await store.create(Collection.SONGS, song.to_document())

    asyncio.run(_add())

    console.print(f"[green]Added song:[/green] {title}")
    console.print(f"  ID: {song.id}")


@app.command("delete")
def delete_song(
    song_id: int = typer.Argument(..., help="Song ID"),
    force: bool = typer.Option(False, "--force", "-f", help="Skip confirmation"),
):
    """Delete a song."""
    if not force and not typer.confirm(f"Delete song {song_id}?"):
        console.print("[dim]Cancelled[/dim]")
        raise typer.Exit(0)

    async def _delete():
        async with open_store() as store:
            return await store.delete(Collection.SONGS, song_id)

    if not asyncio.run(_delete()):
        console.print(f"[red]Error:[/red] Song {song_id} not found")
        raise typer.Exit(1)

    console.print(f"[green]Deleted song {song_id}[/green]")
