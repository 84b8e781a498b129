"""Server-rendered snapshots of the gallery for clients without JavaScript.

Routes:
    GET /games      → first page of games
    GET /music      → first page of songs
    GET /clips      → every clip
    GET /dashboard  → collection counts
"""

import html as _html

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from mediashelf.api.deps import StoreDep
from mediashelf.config import settings
from mediashelf.store import Collection
from mediashelf.utils.youtube import thumbnail_url

router = APIRouter(default_response_class=HTMLResponse, include_in_schema=False)


def _esc(value: object) -> str:
    return _html.escape("" if value is None else str(value))


def _page(title: str, body: str) -> str:
    return (
        "<!DOCTYPE html>"
        '<html lang="en"><head>'
        '<meta charset="UTF-8">'
        '<meta name="viewport" content="width=device-width, initial-scale=1.0">'
        f"<title>{_esc(title)} - mediashelf</title>"
        '<link rel="stylesheet" href="/style.css">'
        "</head>"
        f'<body class="fallback">{body}</body></html>'
    )


def _footer(count: int, noun: str) -> str:
    return (
        '<div class="footer">'
        f"<p>{count} {noun} in total</p>"
        '<a href="/">Back to the gallery</a>'
        "</div>"
    )


def _title_tile(title: object) -> str:
    return f'<div class="tile-title"><span>{_esc(title)}</span></div>'


def render_game_card(game: dict) -> str:
    image = game.get("imageUrl")
    inner = (
        f'<img src="{_esc(image)}" alt="{_esc(game.get("title"))}">'
        if image
        else _title_tile(game.get("title"))
    )
    return f'<div class="card card-portrait">{inner}</div>'


def render_song_card(song: dict) -> str:
    cover = song.get("coverImageUrl") or thumbnail_url(song.get("youtubeUrl"))
    inner = (
        f'<img src="{_esc(cover)}" alt="{_esc(song.get("title"))}">'
        if cover
        else _title_tile(song.get("title"))
    )
    return f'<div class="card card-wide">{inner}</div>'


def render_clip_card(clip: dict) -> str:
    thumb = clip.get("thumbnailUrl")
    inner = (
        f'<img src="{_esc(thumb)}" alt="{_esc(clip.get("title"))}">'
        if thumb
        else _title_tile(clip.get("title"))
    )
    return (
        f'<div class="card card-wide">{inner}'
        f'<div class="caption"><h3>{_esc(clip.get("title"))}</h3></div>'
        "</div>"
    )


@router.get("/games")
async def games_page(store: StoreDep):
    result = await store.list(Collection.GAMES, 0, settings.games_page_size)
    cards = "".join(render_game_card(game) for game in result.items)
    body = (
        '<main class="fallback-main"><h1>My Games</h1>'
        f'<div class="grid grid-5">{cards}</div>'
        f"{_footer(result.total, 'games')}</main>"
    )
    return _page("My Games", body)


@router.get("/music")
async def music_page(store: StoreDep):
    result = await store.list(Collection.SONGS, 0, settings.songs_page_size)
    cards = "".join(render_song_card(song) for song in result.items)
    body = (
        '<main class="fallback-main"><h1>My Music</h1>'
        f'<div class="grid grid-4">{cards}</div>'
        f"{_footer(result.total, 'songs')}</main>"
    )
    return _page("My Music", body)


@router.get("/clips")
async def clips_page(store: StoreDep):
    result = await store.list(Collection.CLIPS)
    if result.items:
        cards = "".join(render_clip_card(clip) for clip in result.items)
        listing = f'<div class="grid grid-4">{cards}</div>'
    else:
        listing = '<p class="empty">No clips yet</p>'
    body = (
        '<main class="fallback-main"><h1>My Clips</h1>'
        f"{listing}"
        f"{_footer(result.total, 'clips')}</main>"
    )
    return _page("My Clips", body)


@router.get("/dashboard")
async def dashboard_page(store: StoreDep):
    stats = [
        ("Games", await store.count(Collection.GAMES), "/games", "See games"),
        ("Songs", await store.count(Collection.SONGS), "/music", "Listen"),
        ("Clips", await store.count(Collection.CLIPS), "/clips", "See clips"),
    ]
    tiles = "".join(
        f'<div class="stat"><h3>{count}</h3><h4>{label}</h4>'
        f'<a href="{href}">{link} &rarr;</a></div>'
        for label, count, href, link in stats
    )
    body = (
        '<main class="fallback-main dashboard">'
        "<h1>Welcome to mediashelf</h1>"
        "<p>Your personal shelf for games, music and clips.</p>"
        f'<div class="stats">{tiles}</div>'
        "</main>"
    )
    return _page("Dashboard", body)
