"""Structural edits applied to a list draft.

Every operation returns a new draft and leaves its input untouched. The
``series_track`` flag switches the target from ``tiers`` to the alternate
``series_tiers`` ordering.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from ..models import CuratedList, Film, ListPrivacy, ListStatus, Tier

SaveTarget = Literal["custom", "override"]


class TierLimitError(ValueError):
    """Raised when an edit would exceed a tier ceiling."""


@dataclass
class EditingSession:
    """A working copy of a list and where saving it will store it."""

    draft: CuratedList
    target: SaveTarget

    @property
    def list_id(self) -> str:
        return self.draft.id


def _tiers(draft: CuratedList, series_track: bool) -> list[Tier]:
    if series_track:
        return list(draft.series_tiers or [])
    return list(draft.tiers)


def _with_tiers(draft: CuratedList, tiers: list[Tier], series_track: bool) -> CuratedList:
    key = "series_tiers" if series_track else "tiers"
    return draft.model_copy(update={key: tiers})


def _tier_at(tiers: list[Tier], index: int) -> Tier:
    if index < 0 or index >= len(tiers):
        raise IndexError(f"Tier {index} does not exist")
    return tiers[index]


def _copy(draft: CuratedList) -> CuratedList:
    return draft.model_copy(deep=True)


def add_tier(
    draft: CuratedList, *, limit: int, series_track: bool = False
) -> CuratedList:
    draft = _copy(draft)
    tiers = _tiers(draft, series_track)
    if len(tiers) >= limit:
        raise TierLimitError(f"A list can hold at most {limit} tiers")
    level = len(tiers) + 1
    tiers.append(Tier(level=level, name=f"TIER {level}", films=[]))
    return _with_tiers(draft, tiers, series_track)


def remove_tier(
    draft: CuratedList, index: int, *, series_track: bool = False
) -> CuratedList:
    """Remove the tier at ``index`` and re-level the ones that remain."""

    draft = _copy(draft)
    tiers = _tiers(draft, series_track)
    _tier_at(tiers, index)
    del tiers[index]
    for position, tier in enumerate(tiers, start=1):
        tier.level = position
    return _with_tiers(draft, tiers, series_track)


def rename_tier(
    draft: CuratedList, index: int, name: str, *, series_track: bool = False
) -> CuratedList:
    draft = _copy(draft)
    tiers = _tiers(draft, series_track)
    _tier_at(tiers, index).name = name
    return _with_tiers(draft, tiers, series_track)


def _admit(tier: Tier, film: Film, limit: int) -> None:
    if any(entry.id == film.id for entry in tier.films):
        raise ValueError(f"{film.title} is already in this tier")
    if len(tier.films) >= limit:
        raise TierLimitError(f"This tier is full ({limit} films max)")


def add_film_to_tier(
    draft: CuratedList,
    tier_index: int,
    film: Film,
    *,
    series_track: bool = False,
    limit: int,
) -> CuratedList:
    draft = _copy(draft)
    tiers = _tiers(draft, series_track)
    tier = _tier_at(tiers, tier_index)
    _admit(tier, film, limit)
    tier.films.append(film.model_copy())
    return _with_tiers(draft, tiers, series_track)


def remove_film_from_tier(
    draft: CuratedList,
    film_id: str,
    tier_index: int,
    *,
    series_track: bool = False,
) -> CuratedList:
    draft = _copy(draft)
    tiers = _tiers(draft, series_track)
    tier = _tier_at(tiers, tier_index)
    tier.films = [film for film in tier.films if film.id != film_id]
    return _with_tiers(draft, tiers, series_track)


def move_film(
    draft: CuratedList,
    film: Film,
    from_tier_index: int | None,
    to_tier_index: int,
    *,
    series_track: bool = False,
    limit: int,
) -> CuratedList:
    """Move a film between tiers, or drop it in from outside the draft."""

    if from_tier_index is None:
        return add_film_to_tier(
            draft, to_tier_index, film, series_track=series_track, limit=limit
        )
    if from_tier_index == to_tier_index:
        _tier_at(_tiers(draft, series_track), to_tier_index)
        return _copy(draft)

    draft = _copy(draft)
    tiers = _tiers(draft, series_track)
    source = _tier_at(tiers, from_tier_index)
    destination = _tier_at(tiers, to_tier_index)
    if not any(entry.id == film.id for entry in source.films):
        raise ValueError(f"{film.title} is not in tier {from_tier_index}")
    _admit(destination, film, limit)
    source.films = [entry for entry in source.films if entry.id != film.id]
    destination.films.append(film.model_copy())
    return _with_tiers(draft, tiers, series_track)


def update_details(
    draft: CuratedList,
    *,
    title: str | None = None,
    subtitle: str | None = None,
    description: str | None = None,
    privacy: ListPrivacy | None = None,
    status: ListStatus | None = None,
) -> CuratedList:
    update: dict[str, object] = {}
    if title is not None:
        update["title"] = title
    if subtitle is not None:
        update["subtitle"] = subtitle
    if description is not None:
        update["description"] = description or None
    if privacy is not None:
        update["privacy"] = privacy
    if status is not None:
        update["status"] = status
    return _copy(draft).model_copy(update=update)


def set_sherpa_note(draft: CuratedList, film_id: str, text: str) -> CuratedList:
    """Attach a curator note to a film; blank text removes it."""

    draft = _copy(draft)
    notes = dict(draft.sherpa_notes)
    if text.strip():
        notes[film_id] = text.strip()
    else:
        notes.pop(film_id, None)
    return draft.model_copy(update={"sherpa_notes": notes})
