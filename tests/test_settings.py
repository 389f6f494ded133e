"""Configuration settings behaviour tests."""

from __future__ import annotations

import pytest

from app.config import Settings


def test_admin_user_ids_parse_comma_separated_values() -> None:
    """Privileged editor ids should be split, trimmed and de-duplicated."""

    settings = Settings(_env_file=None, ADMIN_USER_IDS="alice, bob,,alice")

    assert settings.admin_user_ids == ("alice", "bob")
    assert settings.is_admin("bob")
    assert not settings.is_admin("carol")
    assert not settings.is_admin(None)


def test_admin_user_ids_read_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """A plain comma separated environment value must not be JSON decoded."""

    monkeypatch.setenv("ADMIN_USER_IDS", "root,editor")

    settings = Settings(_env_file=None)

    assert settings.admin_user_ids == ("root", "editor")


def test_admin_user_ids_accept_iterables() -> None:
    settings = Settings(_env_file=None, ADMIN_USER_IDS=[" curator ", "curator"])

    assert settings.admin_user_ids == ("curator",)


def test_tier_ceilings_default_to_catalog_limits() -> None:
    settings = Settings(_env_file=None)

    assert settings.tier_limit == 30
    assert settings.tier_film_limit == 6
    assert settings.default_runtime_minutes == 120


def test_tier_limit_must_be_positive() -> None:
    with pytest.raises(ValueError):
        Settings(_env_file=None, TIER_LIMIT=0)
