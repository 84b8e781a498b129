"""Game management CLI commands."""

import asyncio

import typer
from rich.console import Console
from rich.table import Table

from mediashelf.models import Game
from mediashelf.store import Collection, open_store

console = Console()
app = typer.Typer(help="Game management commands")


@app.command("list")
def list_games(
    limit: int | None = typer.Option(None, "--limit", "-l", help="Maximum number of games to show"),
):
    """List games in stored order."""

    async def _list():
        async with open_store() as store:
            return await store.list(Collection.GAMES, 0, limit)

    result = asyncio.run(_list())

    table = Table(title=f"Games ({result.total})")
    table.add_column("ID", style="cyan")
    table.add_column("Title", style="green")
    table.add_column("Status", style="yellow")
    table.add_column("Rating", style="magenta", justify="right")
    table.add_column("Launch", style="dim")

    for item in result.items:
        game = Game.model_validate(item)
        table.add_row(
            str(game.id),
            game.title or "-",
            game.status or "-",
            str(game.rating or "-"),
            game.launch_date or "-",
        )

    console.print(table)


@app.command("show")
def show_game(
    game_id: int = typer.Argument(..., help="Game ID"),
):
    """Show details for a game."""

    async def _show():
        async with open_store() as store:
            return await store.get(Collection.GAMES, game_id)

    record = asyncio.run(_show())
    if record is None:
        console.print(f"[red]Error:[/red] Game {game_id} not found")
        raise typer.Exit(1)

    game = Game.model_validate(record)
    console.print(f"[bold]{game.title}[/bold]")
    console.print(f"  ID: [cyan]{game.id}[/cyan]")
    console.print(f"  Status: [yellow]{game.status}[/yellow]")
    console.print(f"  Rating: {game.rating or '-'}")
    console.print(f"  Launch date: {game.launch_date or '-'}")
    if game.trailer_url:
        console.print(f"  Trailer: {game.trailer_url}")
    if game.image_url:
        console.print(f"  Image: {game.image_url}")
    if game.notes:
        notes = game.notes[:200] + "..." if len(game.notes) > 200 else game.notes
        console.print(f"  Notes: {notes}")


@app.command("delete")
def delete_game(
    game_id: int = typer.Argument(..., help="Game ID"),
    force: bool = typer.Option(False, "--force", "-f", help="Skip confirmation"),
):
    """Delete a game."""
    if not force and not typer.confirm(f"Delete game {game_id}?"):
        console.print("[dim]Cancelled[/dim]")
        raise typer.Exit(0)

    async def _delete():
        async with open_store() as store:
            return await store.delete(Collection.GAMES, game_id)

    if not asyncio.run(_delete()):
        console.print(f"[red]Error:[/red] Game {game_id} not found")
        raise typer.Exit(1)

    console.print(f"[green]Deleted game {game_id}[/green]")
