"""Tests for list forking and remix ownership."""

from __future__ import annotations

from itertools import cycle
from typing import Iterable

import pytest

from app.catalog import CatalogStore
from app.config import Settings
from app.models import CuratedList
from app.services.fork import ForkEngine
from app.services.session import UserSession
from app.services.sync import SyncQueue


def build_session(
    user_id: str = "viewer",
    *,
    admin_ids: str = "",
    tokens: Iterable[str] | None = None,
) -> tuple[UserSession, ForkEngine]:
    """Return a session wired to an in-process fork engine."""

    settings = Settings(_env_file=None, ADMIN_USER_IDS=admin_ids)
    catalog = CatalogStore()
    token_iter = iter(tokens) if tokens is not None else None
    engine = ForkEngine(
        catalog, token_factory=(lambda: next(token_iter)) if token_iter else None
    )
    session = UserSession(
        user_id,
        settings=settings,
        catalog=catalog,
        store=None,  # type: ignore[arg-type]
        sync=SyncQueue(settings),
        fork_engine=engine,
    )
    session.profile = session.profile.model_copy(update={"username": "NIGHTOWL"})
    return session, engine


def test_fork_creates_owned_draft_remix() -> None:
    session, engine = build_session(tokens=["abc123"])

    result = engine.fork("kubrick", session)

    remix = result.list
    assert result.created is True
    assert result.admin_override is False
    assert remix.id == "custom_abc123"
    assert remix.title == "STANLEY KUBRICK (REMIX)"
    assert remix.author == "NIGHTOWL"
    assert remix.is_custom is True
    assert remix.status == "draft"
    assert remix.privacy == "public"
    assert remix.original_list_id == "kubrick"
    assert remix.sherpa_notes == {}
    assert [film.id for film in remix.all_films()] == [
        film.id for film in session.resolve("kubrick").all_films()
    ]
    assert "custom_abc123" in session.custom_lists
    assert "custom_abc123" in session.vault


def test_fork_is_idempotent_per_source() -> None:
    session, engine = build_session(tokens=cycle(["one", "two"]))

    first = engine.fork("nolan", session)
    second = engine.fork("nolan", session)

    assert second.created is False
    assert second.list.id == first.list.id
    assert len(session.custom_lists) == 1


def test_fork_does_not_alias_the_source() -> None:
    session, engine = build_session(tokens=["abc"])

    result = engine.fork("nolan", session)
    session.custom_lists[result.list.id].tiers[0].films.clear()

    assert session.resolve("nolan").tiers[0].films


def test_admin_fork_edits_canonical_list_in_place() -> None:
    session, engine = build_session("editor", admin_ids="editor")

    result = engine.fork("kubrick", session)

    assert result.admin_override is True
    assert result.created is False
    assert result.list.id == "kubrick"
    assert session.custom_lists == {}


def test_admin_forking_a_custom_list_makes_a_normal_remix() -> None:
    session, engine = build_session("editor", admin_ids="editor", tokens=["a"])
    session.custom_lists["custom_mine"] = CuratedList(
        id="custom_mine", title="MINE", is_custom=True, status="published"
    )

    remix = engine.fork("custom_mine", session)

    assert remix.created is True
    assert remix.admin_override is False
    assert remix.list.id == "custom_a"
    assert remix.list.title == "MINE (REMIX)"
    assert remix.list.original_list_id == "custom_mine"


def test_fork_unknown_list_raises_key_error() -> None:
    session, engine = build_session()

    with pytest.raises(KeyError):
        engine.fork("does-not-exist", session)


def test_new_list_id_skips_taken_ids() -> None:
    session, engine = build_session(tokens=["taken", "taken", "fresh"])

    first = engine.fork("nolan", session)
    second = engine.fork("tarantino", session)

    assert first.list.id == "custom_taken"
    assert second.list.id == "custom_fresh"
