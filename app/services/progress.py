"""Completion percentages and the identity rank derived from watch logs."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Iterable, Mapping

from ..catalog import BADGE_TITLES
from ..models import Badge, CuratedList, Film, Identity, RankLevel, UserFilmLog
from ..utils import round_half_up

# Evaluated low to high; the last threshold strictly exceeded wins.
RANK_THRESHOLDS: tuple[tuple[int, RankLevel], ...] = (
    (10, "ADEPT"),
    (50, "MASTER"),
)


def _is_watched(logs: Mapping[str, UserFilmLog], film_id: str) -> bool:
    log = logs.get(film_id)
    return bool(log and log.watched)


def list_progress(curated: CuratedList, logs: Mapping[str, UserFilmLog]) -> int:
    """Return the watched percentage across tiers and series tiers."""

    films = curated.all_films()
    if not films:
        return 0
    watched = sum(1 for film in films if _is_watched(logs, film.id))
    return round_half_up(100 * watched / len(films))


def rank_for(total_watched: int) -> RankLevel:
    rank: RankLevel = "INITIATE"
    for threshold, level in RANK_THRESHOLDS:
        if total_watched > threshold:
            rank = level
    return rank


def rank_title(total_watched: int) -> str:
    return f"{rank_for(total_watched)} EXPLORER"


def identity(
    logs: Mapping[str, UserFilmLog],
    lists: Iterable[CuratedList],
    *,
    default_runtime: int,
    known_films: Iterable[Film] = (),
) -> Identity:
    """Summarise watch totals, completed lists and rank for a user.

    Runtimes are looked up from the films of ``lists`` and ``known_films``;
    watched films without a known runtime count ``default_runtime`` minutes.
    """

    lists = list(lists)
    runtimes: dict[str, int] = {}
    for film in known_films:
        if film.runtime:
            runtimes.setdefault(film.id, film.runtime)
    for curated in lists:
        for film in curated.all_films():
            if film.runtime:
                runtimes.setdefault(film.id, film.runtime)

    watched_ids = [film_id for film_id, log in logs.items() if log.watched]
    total_minutes = sum(runtimes.get(film_id, default_runtime) for film_id in watched_ids)

    seen: set[str] = set()
    completed = 0
    for curated in lists:
        if curated.id in seen:
            continue
        seen.add(curated.id)
        if list_progress(curated, logs) == 100:
            completed += 1

    total_watched = len(watched_ids)
    return Identity(
        total_watched=total_watched,
        total_hours=total_minutes // 60,
        total_completed=completed,
        rank=rank_for(total_watched),
        rank_title=rank_title(total_watched),
    )


def partition_lists(
    lists: Iterable[CuratedList], logs: Mapping[str, UserFilmLog]
) -> tuple[list[CuratedList], list[CuratedList]]:
    """Split lists into ``(active, completed)``."""

    active: list[CuratedList] = []
    completed: list[CuratedList] = []
    for curated in lists:
        if list_progress(curated, logs) == 100:
            completed.append(curated)
        else:
            active.append(curated)
    return active, completed


def earned_badges(
    lists: Iterable[CuratedList],
    logs: Mapping[str, UserFilmLog],
    *,
    now: datetime | None = None,
) -> list[Badge]:
    """Return a badge for every completed canonical list that carries one."""

    unlocked_at = now or datetime.now(timezone.utc)
    badges: list[Badge] = []
    for curated in lists:
        if curated.is_custom:
            continue
        title = BADGE_TITLES.get(curated.id)
        if title is None or list_progress(curated, logs) != 100:
            continue
        badges.append(
            Badge(
                id=f"badge-{curated.id}",
                title=title,
                list_id=curated.id,
                unlocked_date=unlocked_at,
            )
        )
    return badges
