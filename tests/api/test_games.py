"""Game endpoint tests."""

import math

import pytest
from httpx import AsyncClient

from mediashelf.models import Game
from mediashelf.store import Collection, RecordStore
from tests.conftest import seed_games


@pytest.mark.asyncio
async def test_list_games_empty(client: AsyncClient):
    """Test listing games on a fresh store."""
    response = await client.get("/api/games")
    assert response.status_code == 200
    assert response.json() == {"items": [], "total": 0, "totalPages": 0, "page": 1, "limit": 25}


@pytest.mark.asyncio
async def test_list_games_second_page(client: AsyncClient, store: RecordStore):
    """Test that 30 games split into a full page and a page of five."""
    await seed_games(store, 30)

    response = await client.get("/api/games", params={"page": 2, "limit": 25})
    assert response.status_code == 200
    data = response.json()
    assert len(data["items"]) == 5
    assert data["total"] == 30
    assert data["totalPages"] == 2
    assert data["page"] == 2
    assert [item["title"] for item in data["items"]] == [f"Game {i}" for i in range(26, 31)]


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("total", "page", "limit"),
    [(0, 1, 25), (7, 1, 3), (7, 3, 3), (7, 4, 3), (10, 2, 5), (3, 9, 1)],
)
async def test_list_games_page_sizes(
    client: AsyncClient, store: RecordStore, total: int, page: int, limit: int
):
    """Test page length and page count for a range of page windows."""
    await seed_games(store, total)

    response = await client.get("/api/games", params={"page": page, "limit": limit})
    data = response.json()
    assert len(data["items"]) == min(limit, max(0, total - (page - 1) * limit))
    assert data["totalPages"] == math.ceil(total / limit)


@pytest.mark.asyncio
@pytest.mark.parametrize("params", [{"page": 0}, {"limit": 0}, {"page": "x"}])
async def test_list_games_invalid_page(client: AsyncClient, params: dict):
    """Test that page and limit below one are rejected."""
    response = await client.get("/api/games", params=params)
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_get_game(client: AsyncClient, game: Game):
    """Test getting a game by ID."""
    response = await client.get(f"/api/games/{game.id}")
    assert response.status_code == 200
    data = response.json()
    assert data["title"] == "Test Game"
    assert data["trailerUrl"] == game.trailer_url
    assert data["launchDate"] == "2024-03-01"
    assert data["rating"] == 4.5


@pytest.mark.asyncio
@pytest.mark.parametrize("game_id", ["999", "abc"])
async def test_get_game_not_found(client: AsyncClient, game_id: str):
    """Test that unknown and non-numeric ids return 404."""
    response = await client.get(f"/api/games/{game_id}")
    assert response.status_code == 404
    assert response.json() == {"error": "Game not found"}


@pytest.mark.asyncio
async def test_create_game(client: AsyncClient):
    """Test creating a game and reading it back."""
    form = {
        "title": "Hollow Knight",
        "status": "Pending",
        "rating": "4",
        "notes": "Bug kingdom",
        "trailerUrl": "https://youtu.be/UAO2urG23S4",
        "launchDate": "2017-02-24",
        "imageUrl": "https://example.com/hk.png",
    }
    response = await client.post("/api/games", data=form)
    assert response.status_code == 201
    created = response.json()
    assert isinstance(created["id"], int)
    assert created["rating"] == 4.0

    response = await client.get(f"/api/games/{created['id']}")
    assert response.status_code == 200
    data = response.json()
    for key in ("title", "status", "notes", "trailerUrl", "launchDate", "imageUrl"):
        assert data[key] == form[key]


@pytest.mark.asyncio
async def test_create_game_defaults(client: AsyncClient):
    """Test that a game without a status starts as Playing."""
    response = await client.post("/api/games", data={"title": "Celeste"})
    assert response.status_code == 201
    data = response.json()
    assert data["status"] == "Playing"
    assert data["rating"] is None
    assert data["notes"] == ""
    assert data["imageUrl"] == ""


@pytest.mark.asyncio
async def test_create_game_ids_are_unique(client: AsyncClient):
    """Test that back-to-back creates get distinct ids."""
    ids = set()
    for i in range(5):
        response = await client.post("/api/games", data={"title": f"Game {i}"})
        ids.add(response.json()["id"])
    assert len(ids) == 5


@pytest.mark.asyncio
async def test_create_game_with_image(client: AsyncClient, png_content: bytes):
    """Test that an uploaded image wins over imageUrl and is served back."""
    response = await client.post(
        "/api/games",
        data={"title": "Hades", "imageUrl": "https://example.com/ignored.png"},
        files={"image": ("cover.png", png_content, "image/png")},
    )
    assert response.status_code == 201
    image_url = response.json()["imageUrl"]
    assert image_url.startswith("/uploads/games/")
    assert image_url.endswith(".png")

    response = await client.get(image_url)
    assert response.status_code == 200
    assert response.content == png_content


@pytest.mark.asyncio
async def test_update_game_partial(client: AsyncClient, game: Game):
    """Test that an update only changes the submitted fields."""
    response = await client.put(f"/api/games/{game.id}", data={"notes": "Finished it"})
    assert response.status_code == 200

    data = (await client.get(f"/api/games/{game.id}")).json()
    assert data["notes"] == "Finished it"
    assert data["title"] == game.title
    assert data["status"] == game.status
    assert data["rating"] == game.rating
    assert data["imageUrl"] == game.image_url


@pytest.mark.asyncio
async def test_update_game_empty_value_keeps_field(client: AsyncClient, game: Game):
    """Test that an empty string does not clear a stored value."""
    response = await client.put(
        f"/api/games/{game.id}",
        data={"title": "", "trailerUrl": "", "rating": "0"},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["title"] == "Test Game"
    assert data["trailerUrl"] == game.trailer_url
    assert data["rating"] == 4.5


@pytest.mark.asyncio
async def test_update_game_replaces_image(client: AsyncClient, game: Game, png_content: bytes):
    """Test that a new upload replaces the stored image URL."""
    response = await client.put(
        f"/api/games/{game.id}",
        files={"image": ("new.png", png_content, "image/png")},
    )
    assert response.status_code == 200
    assert response.json()["imageUrl"].startswith("/uploads/games/")


@pytest.mark.asyncio
async def test_update_game_not_found(client: AsyncClient):
    """Test updating a game that does not exist."""
    response = await client.put("/api/games/999", data={"title": "Nope"})
    assert response.status_code == 404
    assert response.json() == {"error": "Game not found"}


@pytest.mark.asyncio
async def test_delete_game(client: AsyncClient, game: Game, store: RecordStore):
    """Test deleting a game."""
    response = await client.delete(f"/api/games/{game.id}")
    assert response.status_code == 204
    assert await store.get(Collection.GAMES, game.id) is None


@pytest.mark.asyncio
async def test_delete_game_not_found(client: AsyncClient, store: RecordStore):
    """Test that deleting a missing game leaves the collection unchanged."""
    await seed_games(store, 3)

    response = await client.delete("/api/games/999")
    assert response.status_code == 404
    assert response.json() == {"error": "Game not found"}
    assert await store.count(Collection.GAMES) == 3


@pytest.mark.asyncio
async def test_store_failure_returns_500(client: AsyncClient, data_file):
    """Test that an unreadable data file surfaces as a JSON 500."""
    data_file.write_text("{not json")

    response = await client.get("/api/games")
    assert response.status_code == 500
    assert "not valid JSON" in response.json()["error"]


@pytest.mark.asyncio
async def test_update_game_image_url_without_file(client: AsyncClient, game: Game):
    """Test that an imageUrl field alone replaces the stored image."""
    response = await client.put(
        f"/api/games/{game.id}", data={"imageUrl": "https://example.com/new.png"}
    )
    assert response.status_code == 200
    assert response.json()["imageUrl"] == "https://example.com/new.png"

    data = (await client.get(f"/api/games/{game.id}")).json()
    assert data["imageUrl"] == "https://example.com/new.png"
    assert data["title"] == game.title


@pytest.mark.asyncio
async def test_list_games_with_numeric_title(client: AsyncClient, store: RecordStore):
    """Test that a number stored in a text field is listed as a string."""
    await seed_games(store, 1)
    await store.create(Collection.GAMES, {"id": 2, "title": 1999, "notes": 42})

    response = await client.get("/api/games")
    assert response.status_code == 200
    items = response.json()["items"]
    assert [item["title"] for item in items] == ["Game 1", "1999"]
    assert items[1]["notes"] == "42"

    response = await client.get("/api/games/2")
    assert response.status_code == 200
    assert response.json()["title"] == "1999"


@pytest.mark.asyncio
async def test_list_games_with_unreadable_record(client: AsyncClient, store: RecordStore):
    """Test that a record that cannot be read answers a JSON 500."""
    await store.create(Collection.GAMES, {"id": 1, "title": {"nested": True}})

    response = await client.get("/api/games")
    assert response.status_code == 500
    assert "invalid" in response.json()["error"]


@pytest.mark.asyncio
async def test_upload_filename_cannot_add_directories(
    client: AsyncClient, png_content: bytes
):
    """Test that a path-like suffix in the filename is not used as the extension."""
    response = await client.post(
        "/api/games",
        data={"title": "Sneaky"},
        files={"image": ("cover.png/../../escape", png_content, "image/png")},
    )
    assert response.status_code == 201
    image_url = response.json()["imageUrl"]
    key = image_url.removeprefix("/uploads/games/")
    assert "/" not in key
    assert key.endswith(".png")
