"""Record store management CLI commands."""

import asyncio

import typer
from rich.console import Console
from rich.table import Table

from mediashelf.models import Clip, Game
from mediashelf.services.storage import storage
from mediashelf.store import Collection, StoreError, open_store

console = Console()
app = typer.Typer(help="Record store management commands")


def _referenced_keys(games: list[dict], clips: list[dict]) -> set[str]:
    """Storage keys of every upload a record still points at."""
    urls = [Game.model_validate(game).image_url for game in games]
    for item in clips:
        clip = Clip.model_validate(item)
        urls.extend([clip.thumbnail_url, clip.video_url])

    keys = set()
    for url in urls:
        key = storage.key_for_url(url or "")
        if key:
            keys.add(key)
    return keys


@app.command("init")
def init():
    """Create the record store, or repair missing collections."""

    async def _init():
        async with open_store() as store:
            return await store.describe()

    try:
        info = asyncio.run(_init())
    except StoreError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1) from e

    console.print(f"[green]Store ready:[/green] {info.backend} at {info.location}")
    for name, count in info.counts.items():
        console.print(f"  {name}: {count}")


@app.command("stats")
def stats():
    """Show record counts and upload usage."""

    async def _stats():
        async with open_store() as store:
            info = await store.describe()
            games = await store.list(Collection.GAMES)
            clips = await store.list(Collection.CLIPS)
            uploads = await storage.list_files()
            referenced = _referenced_keys(games.items, clips.items)
            missing = [key for key in referenced if not await storage.file_exists(key)]
            return info, referenced, uploads, missing

    try:
        info, referenced, uploads, missing = asyncio.run(_stats())
    except StoreError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1) from e

    table = Table(title=f"Store ({info.backend})")
    table.add_column("Collection", style="green")
    table.add_column("Records", style="cyan", justify="right")
    for name, count in info.counts.items():
        table.add_row(name, str(count))
    console.print(table)

    orphaned = [key for key in uploads if key not in referenced]
    console.print(f"  Location: {info.location}")
    console.print(f"  Uploads: [blue]{len(uploads)}[/blue] files in {storage.upload_dir}")
    if orphaned:
        console.print(f"  Orphaned uploads: [yellow]{len(orphaned)}[/yellow]")
    if missing:
        console.print(f"  Missing uploads: [red]{len(missing)}[/red]")
