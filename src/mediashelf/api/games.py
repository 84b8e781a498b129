"""Game CRUD endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, File, Form, HTTPException, Query, UploadFile, status

from mediashelf.api.deps import StoreDep
from mediashelf.api.utils import parse_record_id, save_upload
from mediashelf.config import settings
from mediashelf.models import Game
from mediashelf.schemas import PageParams, PaginatedResponse, total_pages
from mediashelf.services.ids import next_id
from mediashelf.services.records import GameForm, merge_game, new_game
from mediashelf.services.storage import GAME_IMAGES
from mediashelf.store import Collection

logger = logging.getLogger(__name__)

router = APIRouter()

NOT_FOUND = "Game not found"

TitleField = Annotated[str | None, Form()]
RatingField = Annotated[str | None, Form()]
NotesField = Annotated[str | None, Form()]
TrailerUrlField = Annotated[str | None, Form(alias="trailerUrl")]
LaunchDateField = Annotated[str | None, Form(alias="launchDate")]
ImageUrlField = Annotated[str | None, Form(alias="imageUrl")]
ImageFile = Annotated[UploadFile | None, File()]


@router.get("", response_model=PaginatedResponse[Game])
async def list_games(
    store: StoreDep,
    page: Annotated[int, Query(ge=1)] = 1,
    limit: Annotated[int | None, Query(ge=1)] = None,
):
    """List games in stored order, one page at a time."""
    params = PageParams(page=page, limit=limit or settings.games_page_size)
    result = await store.list(Collection.GAMES, params.offset, params.limit)

    return PaginatedResponse[Game](
        items=[Game.model_validate(item) for item in result.items],
        total=result.total,
        total_pages=total_pages(result.total, params.limit),
        page=params.page,
        limit=params.limit,
    )


@router.get("/{game_id}", response_model=Game)
async def get_game(game_id: str, store: StoreDep):
    """Get a game by ID."""
    record = await store.get(Collection.GAMES, parse_record_id(game_id, NOT_FOUND))
    if record is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return Game.model_validate(record)


@router.post("", response_model=Game, status_code=status.HTTP_201_CREATED)
async def create_game(
    store: StoreDep,
    title: TitleField = None,
    status_: Annotated[str | None, Form(alias="status")] = None,
    rating: RatingField = None,
    notes: NotesField = None,
    trailer_url: TrailerUrlField = None,
    launch_date: LaunchDateField = None,
    image_url: ImageUrlField = None,
    image: ImageFile = None,
):
    """Create a game from a multipart form with an optional ``image`` file."""
    form = GameForm(
        title=title,
        status=status_,
        rating=rating,
        notes=notes,
        trailer_url=trailer_url,
        launch_date=launch_date,
        image_url=image_url,
    )
    uploaded = await save_upload(image, GAME_IMAGES)

    game = new_game(next_id(), form, uploaded)
    await store.create(Collection.GAMES, game.to_document())
    logger.info("Created game %s (%r)", game.id, game.title)

    return game


@router.put("/{game_id}", response_model=Game)
async def update_game(
    game_id: str,
    store: StoreDep,
    title: TitleField = None,
    status_: Annotated[str | None, Form(alias="status")] = None,
    rating: RatingField = None,
    notes: NotesField = None,
    trailer_url: TrailerUrlField = None,
    launch_date: LaunchDateField = None,
    image_url: ImageUrlField = None,
    image: ImageFile = None,
):
    """Update a game. Blank fields keep their current value."""
    record_id = parse_record_id(game_id, NOT_FOUND)
    record = await store.get(Collection.GAMES, record_id)
    if record is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)

    form = GameForm(
        title=title,
        status=status_,
        rating=rating,
        notes=notes,
        trailer_url=trailer_url,
        launch_date=launch_date,
        image_url=image_url,
    )
    uploaded = await save_upload(image, GAME_IMAGES)

    game = merge_game(Game.model_validate(record), form, uploaded)
    if await store.update(Collection.GAMES, record_id, game.to_document()) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    logger.info("Updated game %s", record_id)

    return game


@router.delete("/{game_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_game(game_id: str, store: StoreDep):
    """Delete a game."""
    record_id = parse_record_id(game_id, NOT_FOUND)
    if not await store.delete(Collection.GAMES, record_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    logger.info("Deleted game %s", record_id)
