"""Tests for session bootstrap and optimistic, queued mutations."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

from app.catalog import CatalogStore
from app.config import Settings
from app.database import Database
from app.models import Film
from app.services.fork import ForkEngine
from app.services.session import SessionManager
from app.services.sync import SyncQueue
from app.store import RemoteStore


@pytest.fixture
def anyio_backend() -> str:
    """Force AnyIO tests to run on asyncio without requiring trio."""

    return "asyncio"


class FlakyStore(RemoteStore):
    """Remote store whose named operations always fail."""

    def __init__(self, *args: Any, failing: set[str], **kwargs: Any):
        super().__init__(*args, **kwargs)
        self._failing = failing

    async def fetch_logs(self, user_id: str) -> list[dict[str, Any]]:
        if "fetch_logs" in self._failing:
            raise RuntimeError("logs unavailable")
        return await super().fetch_logs(user_id)

    async def upsert_log(self, user_id: str, film_id: str, **kwargs: Any) -> None:
        if "upsert_log" in self._failing:
            raise RuntimeError("write rejected")
        await super().upsert_log(user_id, film_id, **kwargs)


async def build_manager(
    tmp_path: Path,
    *,
    failing: set[str] | None = None,
    tokens: list[str] | None = None,
    **overrides: Any,
) -> tuple[Database, SessionManager, RemoteStore]:
    settings = Settings(
        _env_file=None,
        ADMIN_USER_IDS="editor",
        SEARCH_DEBOUNCE_SECONDS=0,
        SYNC_RETRY_LIMIT=0,
        **overrides,
    )
    database = Database(f"sqlite+aiosqlite:///{tmp_path / 'session.db'}")
    await database.create_all()
    store = FlakyStore(database.session_factory, failing=failing or set())
    catalog = CatalogStore()
    token_iter = iter(tokens or [])
    fork_engine = ForkEngine(
        catalog, token_factory=(lambda: next(token_iter)) if tokens else None
    )
    manager = SessionManager(
        settings, catalog, store, SyncQueue(settings), fork_engine=fork_engine
    )
    return database, manager, store


@pytest.mark.anyio("asyncio")
async def test_login_loads_persisted_state(tmp_path: Path) -> None:
    database, manager, store = await build_manager(tmp_path)
    try:
        await store.upsert_profile("u1", username="NIGHTOWL", motto="Onward", avatar_url=None)
        await store.upsert_log("u1", "the-shining", watched=True, rating=4, notes=None)
        await store.add_vault("u1", "kubrick")
        await store.upsert_custom_list(
            "custom_1",
            user_id="u1",
            title="MY NIGHTS",
            status="published",
            content={"tiers": [{"level": 1, "name": "ONE", "films": [{"title": "Heat"}]}]},
        )
        await store.upsert_override("nolan", content={"title": "NOLAN (CURATED)", "tiers": []})

        session = await manager.login("u1")
    finally:
        await manager.sync.drain()
        await database.dispose()

    assert session.profile.username == "NIGHTOWL"
    assert session.profile.motto == "Onward"
    assert session.logs["the-shining"].rating == 4
    assert session.vault == {"kubrick"}
    assert session.custom_lists["custom_1"].author == "NIGHTOWL"
    assert session.resolve("nolan").title == "NOLAN (CURATED)"
    assert session.list_progress("kubrick") == 8
    assert manager.get("u1") is session


@pytest.mark.anyio("asyncio")
async def test_first_login_creates_profile_row(tmp_path: Path) -> None:
    database, manager, store = await build_manager(tmp_path)
    try:
        session = await manager.login("newbie")
        await manager.sync.drain()
        profile = await store.fetch_profile("newbie")
    finally:
        await manager.sync.drain()
        await database.dispose()

    assert session.profile.display_name == "EXPLORER"
    assert profile is not None
    assert profile["username"] == "EXPLORER"


@pytest.mark.anyio("asyncio")
async def test_failed_bootstrap_step_does_not_block_the_rest(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    database, manager, store = await build_manager(tmp_path, failing={"fetch_logs"})
    try:
        await store.add_vault("u1", "carpenter")
        with caplog.at_level("ERROR"):
            session = await manager.login("u1")
    finally:
        await manager.sync.drain()
        await database.dispose()

    assert session.logs == {}
    assert session.vault == {"carpenter"}
    assert "Failed to load logs for u1" in caplog.text


@pytest.mark.anyio("asyncio")
async def test_rating_marks_watched_and_persists(tmp_path: Path) -> None:
    database, manager, store = await build_manager(tmp_path)
    try:
        session = await manager.login("u1")
        log = session.update_log("heat", rating=3.5)
        await manager.sync.drain()
        rows = await store.fetch_logs("u1")
    finally:
        await manager.sync.drain()
        await database.dispose()

    assert log.watched is True
    assert session.logs["heat"].rating == 3.5
    assert rows == [{"film_id": "heat", "watched": True, "rating": 3.5, "notes": ""}]


@pytest.mark.anyio("asyncio")
async def test_invalid_rating_changes_nothing(tmp_path: Path) -> None:
    database, manager, _ = await build_manager(tmp_path)
    try:
        session = await manager.login("u1")
        await manager.sync.drain()
        with pytest.raises(ValueError):
            session.update_log("heat", rating=7)
    finally:
        await manager.sync.drain()
        await database.dispose()

    assert "heat" not in session.logs
    assert manager.sync.pending == 0


@pytest.mark.anyio("asyncio")
async def test_failed_write_keeps_local_change(tmp_path: Path) -> None:
    database, manager, store = await build_manager(tmp_path, failing={"upsert_log"})
    try:
        session = await manager.login("u1")
        session.update_log("heat", watched=True)
        await manager.sync.drain()
        rows = await store.fetch_logs("u1")
    finally:
        await manager.sync.drain()
        await database.dispose()

    assert session.logs["heat"].watched is True
    assert rows == []
    assert [failure.label for failure in session.sync_failures()] == ["u1:user_logs:heat"]


@pytest.mark.anyio("asyncio")
async def test_fork_persists_and_survives_relogin(tmp_path: Path) -> None:
    database, manager, _ = await build_manager(tmp_path, tokens=["f00d"])
    try:
        session = await manager.login("u1")
        await manager.sync.drain()
        session.update_profile(username="NIGHTOWL")
        result = session.fork("tarantino")
        await manager.sync.drain()

        assert session.editing is not None
        assert session.editing.target == "custom"
        assert session.editing.draft.id == "custom_f00d"

        reloaded = await manager.login("u1")
    finally:
        await manager.sync.drain()
        await database.dispose()

    assert result.created is True
    remix = reloaded.custom_lists["custom_f00d"]
    assert remix.title == "QUENTIN TARANTINO (REMIX)"
    assert remix.original_list_id == "tarantino"
    assert remix.author == "NIGHTOWL"
    assert "custom_f00d" in reloaded.vault
    assert reloaded.fork("tarantino").created is False


@pytest.mark.anyio("asyncio")
async def test_non_admin_cannot_edit_canonical_lists(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    database, manager, store = await build_manager(tmp_path)
    try:
        session = await manager.login("u1")
        with caplog.at_level("ERROR"), pytest.raises(PermissionError):
            session.edit_list("kubrick")

        admin_result = session.fork("kubrick")
        await manager.sync.drain()
        overrides = await store.fetch_overrides()
    finally:
        await manager.sync.drain()
        await database.dispose()

    assert "without privileges" in caplog.text
    assert admin_result.admin_override is False
    assert overrides == []


@pytest.mark.anyio("asyncio")
async def test_admin_saves_override_visible_to_later_sessions(tmp_path: Path) -> None:
    database, manager, store = await build_manager(tmp_path)
    try:
        admin = await manager.login("editor")
        result = admin.fork("carpenter")
        assert result.admin_override is True
        assert admin.editing.target == "override"

        admin.add_tier()
        admin.update_draft(title="JOHN CARPENTER (DIRECTOR'S CUT)")
        saved = admin.save_draft()
        await manager.sync.drain()

        viewer = await manager.login("u1")
        public = await manager.public_resolver()
        overrides = await store.fetch_overrides()
    finally:
        await manager.sync.drain()
        await database.dispose()

    assert saved.id == "carpenter"
    assert saved.is_custom is False
    assert admin.editing is None
    assert admin.resolve("carpenter").title == "JOHN CARPENTER (DIRECTOR'S CUT)"
    assert viewer.resolve("carpenter").title == "JOHN CARPENTER (DIRECTOR'S CUT)"
    assert public.resolve("carpenter").title == "JOHN CARPENTER (DIRECTOR'S CUT)"
    assert [row["list_id"] for row in overrides] == ["carpenter"]
    assert overrides[0]["content"]["tiers"][-1]["name"] == "TIER 5"


@pytest.mark.anyio("asyncio")
async def test_override_save_revalidates_privilege(tmp_path: Path) -> None:
    database, manager, store = await build_manager(tmp_path)
    try:
        admin = await manager.login("editor")
        admin.edit_list("nolan")
        admin.profile = admin.profile.model_copy(update={"is_admin": False})
        with pytest.raises(PermissionError):
            admin.save_draft()
        await manager.sync.drain()
        overrides = await store.fetch_overrides()
    finally:
        await manager.sync.drain()
        await database.dispose()

    assert overrides == []
    assert admin.editing is not None


@pytest.mark.anyio("asyncio")
async def test_journey_authoring_flow(tmp_path: Path) -> None:
    database, manager, store = await build_manager(tmp_path, tokens=["j1"])
    try:
        session = await manager.login("u1")
        journey = session.create_journey("  ")
        session.add_film(0, Film(title="Thief", year=1981))
        session.set_sherpa_note("thief", "Start with the safe-cracking.")
        session.update_draft(status="published")
        saved = session.save_draft()
        await manager.sync.drain()
        rows = await store.fetch_custom_lists("u1")
        vault = session.vault_view()
    finally:
        await manager.sync.drain()
        await database.dispose()

    assert journey.id == "custom_j1"
    assert journey.title == "NEW JOURNEY"
    assert journey.status == "draft"
    assert [tier.name for tier in journey.tiers] == ["TIER 1"]
    assert saved.status == "published"
    assert rows[0]["status"] == "published"
    assert rows[0]["content"]["sherpaNotes"] == {"thief": "Start with the safe-cracking."}
    assert [entry["id"] for entry in vault["published"]] == ["custom_j1"]
    assert vault["drafts"] == []


@pytest.mark.anyio("asyncio")
async def test_draft_operations_require_an_open_draft(tmp_path: Path) -> None:
    database, manager, _ = await build_manager(tmp_path)
    try:
        session = await manager.login("u1")
        with pytest.raises(KeyError):
            session.add_tier()
        with pytest.raises(KeyError):
            session.save_draft()
    finally:
        await manager.sync.drain()
        await database.dispose()


@pytest.mark.anyio("asyncio")
async def test_vault_view_and_identity(tmp_path: Path) -> None:
    database, manager, _ = await build_manager(tmp_path)
    try:
        session = await manager.login("u1")
        session.add_to_vault("villeneuve")
        session.add_to_vault("kubrick")
        for film in session.resolve("kubrick").all_films():
            session.update_log(film.id, watched=True)
        await manager.sync.drain()

        view = session.vault_view()
        identity = session.identity()
        badges = session.badges()
        with pytest.raises(KeyError):
            session.add_to_vault("ghost")
    finally:
        await manager.sync.drain()
        await database.dispose()

    assert [entry["id"] for entry in view["completed"]] == ["kubrick"]
    assert [entry["id"] for entry in view["active"]] == ["villeneuve"]
    assert view["completed"][0]["progress"] == 100
    assert identity.total_watched == 13
    assert identity.total_completed == 1
    assert identity.rank == "ADEPT"
    # catalog runtimes of the thirteen Kubrick films sum to 1751 minutes
    assert identity.total_hours == 29
    assert [badge.list_id for badge in badges] == ["kubrick"]


@pytest.mark.anyio("asyncio")
async def test_logout_clears_session(tmp_path: Path) -> None:
    database, manager, _ = await build_manager(tmp_path)
    try:
        session = await manager.login("u1")
        session.update_log("heat", watched=True)
        await manager.sync.drain()
        assert manager.logout("u1") is True
        assert manager.logout("u1") is False
    finally:
        await manager.sync.drain()
        await database.dispose()

    assert session.logs == {}
    with pytest.raises(KeyError):
        manager.get("u1")


@pytest.mark.anyio("asyncio")
async def test_search_returns_catalog_matches(tmp_path: Path) -> None:
    database, manager, _ = await build_manager(tmp_path)
    try:
        session = await manager.login("u1")
        results = await session.search("inception")
    finally:
        await manager.sync.drain()
        await database.dispose()

    assert [film.id for film in results] == ["inception"]


@pytest.mark.anyio("asyncio")
async def test_draft_film_removal_is_scoped_to_one_tier(tmp_path: Path) -> None:
    database, manager, _ = await build_manager(tmp_path, tokens=["j2"])
    try:
        session = await manager.login("u1")
        session.create_journey("DOUBLE BILL")
        session.add_tier()
        session.add_film(0, Film(title="Heat", year=1995))
        session.add_film(1, Film(title="Heat", year=1995))
        session.move_film(Film(title="Thief", year=1981), None, 1)
        draft = session.remove_film("heat", 1)
        with pytest.raises(ValueError):
            session.add_film(0, Film(title="Heat", year=1995))
    finally:
        await manager.sync.drain()
        await database.dispose()

    assert [film.id for film in draft.tiers[0].films] == ["heat"]
    assert [film.id for film in draft.tiers[1].films] == ["thief"]
    assert session.require_editing().draft == draft


@pytest.mark.anyio("asyncio")
async def test_editor_ceilings_come_from_settings(tmp_path: Path) -> None:
    database, manager, _ = await build_manager(
        tmp_path, tokens=["j3"], TIER_LIMIT=2, TIER_FILM_LIMIT=1
    )
    try:
        session = await manager.login("u1")
        session.create_journey("TIGHT")
        session.add_tier()
        with pytest.raises(ValueError, match="at most 2 tiers"):
            session.add_tier()
        session.add_film(0, Film(title="Heat", year=1995))
        with pytest.raises(ValueError, match=r"\(1 films max\)"):
            session.add_film(0, Film(title="Thief", year=1981))
    finally:
        await manager.sync.drain()
        await database.dispose()
