"""CLI commands using Typer."""

import typer

from mediashelf.cli.clips import app as clips_app
from mediashelf.cli.db import app as db_app
from mediashelf.cli.games import app as games_app
from mediashelf.cli.songs import app as songs_app

app = typer.Typer(name="mediashelf", help="mediashelf CLI")

# Register sub-apps
app.add_typer(db_app, name="db")
app.add_typer(games_app, name="games")
app.add_typer(songs_app, name="songs")
app.add_typer(clips_app, name="clips")


@app.callback()
def main():
    """Personal catalog for games, songs and clips."""
    from mediashelf.logging import setup_logging

    setup_logging()


@app.command()
def version():
    """Show version information."""
    from mediashelf import __version__

    typer.echo(f"mediashelf v{__version__}")


@app.command()
def serve(
    host: str | None = typer.Option(None, help="Host to bind to (default from settings)"),
    port: int | None = typer.Option(None, help="Port to bind to (default from settings)"),
    reload: bool = typer.Option(False, help="Enable auto-reload"),
):
    """Run the web server."""
    import uvicorn

    from mediashelf.config import settings
    from mediashelf.logging import get_uvicorn_log_config

    uvicorn.run(
        "mediashelf.main:app",
        host=host or settings.host,
        port=port or settings.port,
        reload=reload,
        log_config=get_uvicorn_log_config(),
    )


if __name__ == "__main__":
    app()
