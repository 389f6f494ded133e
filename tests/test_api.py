"""HTTP surface tests driven through the FastAPI test client."""

from __future__ import annotations

from pathlib import Path
from typing import Iterator

import pytest
from fastapi.testclient import TestClient

from app.config import settings
from app.main import create_app


@pytest.fixture
def client(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[TestClient]:
    monkeypatch.setattr(settings, "database_url", f"sqlite+aiosqlite:///{tmp_path / 'api.db'}")
    monkeypatch.setattr(settings, "tmdb_api_key", None)
    monkeypatch.setattr(settings, "openrouter_api_key", None)
    monkeypatch.setattr(settings, "admin_user_ids", ("editor",))
    monkeypatch.setattr(settings, "search_debounce_seconds", 0)
    with TestClient(create_app()) as test_client:
        yield test_client


def test_healthcheck(client: TestClient) -> None:
    assert client.get("/healthz").json() == {"status": "ok"}


def test_anonymous_catalog_and_list_lookup(client: TestClient) -> None:
    catalog = client.get("/api/catalog").json()

    assert [category["title"] for category in catalog["categories"]] == [
        "THE GRANDMASTERS",
        "GENRES & UNIVERSES",
        "MOVEMENTS & WORLD",
        "THEMATIC",
    ]
    first = catalog["categories"][0]["lists"][0]
    assert first["id"] == "kubrick"
    assert "seriesTiers" in first

    response = client.get("/api/lists/nolan")
    assert response.status_code == 200
    assert response.json()["title"] == "CHRISTOPHER NOLAN"
    assert "progress" not in response.json()
    assert client.get("/api/lists/nope").status_code == 404


def test_film_lookups(client: TestClient) -> None:
    lists = client.get("/api/films/2001--a-space-odyssey/lists").json()["lists"]
    assert {entry["id"] for entry in lists} == {"kubrick", "machine"}

    details = client.get(
        "/api/films/2001--a-space-odyssey/details", params={"list": "machine"}
    )
    assert details.status_code == 200
    body = details.json()
    assert body["film"]["title"] == "2001: A Space Odyssey"
    assert body["synopsis"] == "No details available."
    assert body["significance"] == "A significant entry in cinema history."

    assert client.get("/api/films/not-a-film/details").status_code == 404
    assert client.get("/api/suggestions", params={"q": "heists"}).json() == {"items": []}
    assert client.get("/api/directors", params={"q": "mann"}).json() == {"items": []}


def test_user_routes_require_a_session(client: TestClient) -> None:
    response = client.get("/api/users/ghost/identity")

    assert response.status_code == 404
    assert response.json()["detail"] == "No active session for user ghost"


def test_watch_log_progress_and_identity(client: TestClient) -> None:
    login = client.post("/api/users/u1/session")
    assert login.status_code == 200
    assert login.json()["identity"]["rankTitle"] == "INITIATE EXPLORER"

    logged = client.put("/api/users/u1/logs/inception", json={"rating": 4.5})
    assert logged.status_code == 200
    assert logged.json() == {"filmId": "inception", "watched": True, "rating": 4.5, "notes": None}

    bad = client.put("/api/users/u1/logs/inception", json={"rating": 4.2})
    assert bad.status_code == 400

    assert client.put("/api/users/u1/vault/nolan").json() == {"listId": "nolan", "saved": True}
    assert client.put("/api/users/u1/vault/ghost").status_code == 404

    listing = client.get("/api/lists/nolan", params={"user": "u1"}).json()
    assert listing["saved"] is True
    assert listing["progress"] == 9

    identity = client.get("/api/users/u1/identity").json()
    assert identity["totalWatched"] == 1
    assert identity["rank"] == "INITIATE"

    vault = client.get("/api/users/u1/vault").json()
    assert [entry["id"] for entry in vault["active"]] == ["nolan"]
    assert client.get("/api/users/u1/badges").json() == {"badges": []}


def test_fork_edit_and_save_remix(client: TestClient) -> None:
    client.post("/api/users/u1/session")
    client.patch("/api/users/u1/profile", json={"username": "NIGHTOWL"})

    forked = client.post("/api/users/u1/forks/carpenter")
    assert forked.status_code == 201
    remix = forked.json()["list"]
    assert remix["title"] == "JOHN CARPENTER (REMIX)"
    assert remix["author"] == "NIGHTOWL"
    assert remix["originalListId"] == "carpenter"

    again = client.post("/api/users/u1/forks/carpenter")
    assert again.status_code == 200
    assert again.json()["created"] is False

    draft = client.post("/api/users/u1/draft/tiers", json={}).json()
    assert draft["target"] == "custom"
    new_index = len(draft["list"]["tiers"]) - 1

    for position in range(6):
        response = client.post(
            f"/api/users/u1/draft/tiers/{new_index}/films",
            json={"film": {"title": f"Deep Cut {position}", "year": 1990}},
        )
        assert response.status_code == 200
    full = client.post(
        f"/api/users/u1/draft/tiers/{new_index}/films",
        json={"film": {"title": "One Too Many", "year": 1990}},
    )
    assert full.status_code == 400
    assert full.json()["detail"] == "This tier is full (6 films max)"

    assert client.delete("/api/users/u1/draft/tiers/99").status_code == 400

    renamed = client.patch(
        f"/api/users/u1/draft/tiers/{new_index}", json={"name": "BONUS ROUND"}
    ).json()
    assert renamed["list"]["tiers"][new_index]["name"] == "BONUS ROUND"

    client.put(
        "/api/users/u1/draft/notes/halloween", json={"text": "The one that started it."}
    )
    client.patch("/api/users/u1/draft", json={"status": "published", "title": "MY CARPENTER"})
    saved = client.post("/api/users/u1/draft/save")
    assert saved.status_code == 200
    saved_list = saved.json()
    assert saved_list["title"] == "MY CARPENTER"
    assert saved_list["sherpaNotes"] == {"halloween": "The one that started it."}

    assert client.get("/api/users/u1/draft").status_code == 404
    vault = client.get("/api/users/u1/vault").json()
    assert [entry["id"] for entry in vault["published"]] == [saved_list["id"]]
    resolved = client.get(f"/api/lists/{saved_list['id']}", params={"user": "u1"}).json()
    assert resolved["title"] == "MY CARPENTER"


def test_canonical_edits_are_limited_to_editors(client: TestClient) -> None:
    client.post("/api/users/u1/session")
    denied = client.post("/api/users/u1/lists/kubrick/edit")
    assert denied.status_code == 403

    client.post("/api/users/editor/session")
    opened = client.post("/api/users/editor/lists/kubrick/edit")
    assert opened.status_code == 200
    assert opened.json()["target"] == "override"

    client.patch("/api/users/editor/draft", json={"subtitle": "The Perfectionist (Revised)"})
    saved = client.post("/api/users/editor/draft/save")
    assert saved.status_code == 200
    assert saved.json()["isCustom"] is False

    resolved = client.get("/api/lists/kubrick", params={"user": "editor"}).json()
    assert resolved["subtitle"] == "The Perfectionist (Revised)"


def test_journey_search_and_logout(client: TestClient) -> None:
    client.post("/api/users/u1/session")

    created = client.post("/api/users/u1/journeys", json={"title": "NIGHT DRIVES"})
    assert created.status_code == 201
    assert created.json()["status"] == "draft"
    assert client.get("/api/users/u1/draft").json()["list"]["title"] == "NIGHT DRIVES"

    moved = client.post(
        "/api/users/u1/draft/moves",
        json={"film": {"title": "Drive", "year": 2011}, "fromTier": None, "toTier": 0},
    )
    assert moved.status_code == 200
    assert moved.json()["list"]["tiers"][0]["films"][0]["id"] == "drive"

    assert client.delete("/api/users/u1/draft").json() == {"discarded": True}

    results = client.get("/api/users/u1/search", params={"q": "dark knight"}).json()
    assert results["superseded"] is False
    assert [film["id"] for film in results["results"]] == ["the-dark-knight"]

    sync = client.get("/api/users/u1/sync").json()
    assert sync["failures"] == []

    assert client.delete("/api/users/u1/session").json() == {"loggedOut": True}
    assert client.get("/api/users/u1/vault").status_code == 404
