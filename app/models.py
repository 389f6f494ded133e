"""Pydantic models describing films, tiers, lists and user state."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Literal, Mapping

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
)
from pydantic.alias_generators import to_camel

from .utils import film_id_from_title

logger = logging.getLogger(__name__)

ListStatus = Literal["draft", "published"]
ListPrivacy = Literal["public", "private"]
RankLevel = Literal["INITIATE", "ADEPT", "MASTER"]


class Film(BaseModel):
    """A single film entry placed in a tier."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = ""
    title: str
    year: int = 0
    director: str = "Unknown"
    runtime: int | None = None
    poster_url: str | None = Field(
        default=None,
        validation_alias=AliasChoices("posterUrl", "poster_url"),
        serialization_alias="posterUrl",
    )
    rt_score: int | None = Field(
        default=None,
        ge=0,
        le=100,
        validation_alias=AliasChoices("rtScore", "rt_score"),
        serialization_alias="rtScore",
    )
    imdb_score: float | None = Field(
        default=None,
        ge=0,
        le=10,
        validation_alias=AliasChoices("imdbScore", "imdb_score"),
        serialization_alias="imdbScore",
    )
    is_custom_entry: bool = Field(
        default=False,
        validation_alias=AliasChoices("isCustomEntry", "is_custom_entry"),
        serialization_alias="isCustomEntry",
    )
    plot: str | None = None
    tmdb_id: int | None = Field(
        default=None,
        validation_alias=AliasChoices("tmdbId", "tmdb_id"),
        serialization_alias="tmdbId",
    )

    def model_post_init(self, __context: Any) -> None:
        if not self.id:
            self.id = film_id_from_title(self.title, self.tmdb_id)


class Tier(BaseModel):
    """An ordered rank bucket within a list."""

    level: int = Field(default=1, ge=1)
    name: str = ""
    films: list[Film] = Field(default_factory=list)


class CuratedList(BaseModel):
    """A named, tiered list of films."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    title: str = "UNTITLED"
    subtitle: str = ""
    description: str | None = None
    author: str | None = None
    tiers: list[Tier] = Field(default_factory=list)
    series_tiers: list[Tier] | None = Field(
        default=None,
        validation_alias=AliasChoices("seriesTiers", "series_tiers"),
        serialization_alias="seriesTiers",
    )
    is_custom: bool = Field(
        default=False,
        validation_alias=AliasChoices("isCustom", "is_custom"),
        serialization_alias="isCustom",
    )
    status: ListStatus = "published"
    privacy: ListPrivacy = "public"
    original_list_id: str | None = Field(
        default=None,
        validation_alias=AliasChoices("originalListId", "original_list_id"),
        serialization_alias="originalListId",
    )
    sherpa_notes: dict[str, str] = Field(
        default_factory=dict,
        validation_alias=AliasChoices("sherpaNotes", "sherpa_notes"),
        serialization_alias="sherpaNotes",
    )

    def all_films(self) -> list[Film]:
        """Return every film in ``tiers`` followed by ``series_tiers``."""

        films = [film for tier in self.tiers for film in tier.films]
        for tier in self.series_tiers or []:
            films.extend(tier.films)
        return films

    def contains_film(self, film_id: str) -> bool:
        return any(film.id == film_id for film in self.all_films())

    def to_content(self) -> dict[str, Any]:
        """Return the stored body of the list without its id."""

        payload = self.model_dump(mode="json", by_alias=True)
        payload.pop("id", None)
        return payload

    @classmethod
    def from_custom_row(
        cls, row: Mapping[str, Any], *, author: str | None = None
    ) -> "CuratedList | None":
        """Rebuild a user-authored list from a ``custom_lists`` row."""

        list_id = str(row.get("id") or "").strip()
        if not list_id:
            return None
        content = row.get("content")
        if not isinstance(content, Mapping):
            content = {}

        status = row.get("status") or content.get("status")
        privacy = content.get("privacy")
        original = content.get("originalListId") or content.get("original_list_id")
        return cls(
            id=list_id,
            title=str(row.get("title") or content.get("title") or "UNTITLED"),
            subtitle=str(content.get("subtitle") or ""),
            description=_optional_text(content.get("description")),
            author=author or _optional_text(content.get("author")),
            tiers=_parse_tiers(content.get("tiers"), list_id=list_id),
            series_tiers=_parse_optional_tiers(
                content.get("seriesTiers", content.get("series_tiers")),
                list_id=list_id,
            ),
            is_custom=True,
            status=status if status in ("draft", "published") else "draft",
            privacy=privacy if privacy in ("public", "private") else "public",
            original_list_id=str(original) if original else None,
            sherpa_notes=_parse_notes(
                content.get("sherpaNotes", content.get("sherpa_notes"))
            ),
        )

    @classmethod
    def from_override_row(cls, row: Mapping[str, Any]) -> "CuratedList | None":
        """Rebuild an admin override from a ``master_overrides`` row."""

        list_id = str(row.get("list_id") or "").strip()
        if not list_id:
            return None
        content = row.get("content")
        if not isinstance(content, Mapping):
            return None

        status = content.get("status")
        privacy = content.get("privacy")
        return cls(
            id=list_id,
            title=str(content.get("title") or "UNTITLED"),
            subtitle=str(content.get("subtitle") or ""),
            description=_optional_text(content.get("description")),
            author=_optional_text(content.get("author")),
            tiers=_parse_tiers(content.get("tiers"), list_id=list_id),
            series_tiers=_parse_optional_tiers(
                content.get("seriesTiers", content.get("series_tiers")),
                list_id=list_id,
            ),
            is_custom=False,
            status=status if status in ("draft", "published") else "published",
            privacy=privacy if privacy in ("public", "private") else "public",
            original_list_id=None,
            sherpa_notes=_parse_notes(
                content.get("sherpaNotes", content.get("sherpa_notes"))
            ),
        )


class ListCategory(BaseModel):
    """A titled group of lists on the home catalog."""

    title: str
    lists: list[CuratedList] = Field(default_factory=list)


class UserFilmLog(BaseModel):
    """Per-user watch state for a single film."""

    watched: bool = False
    rating: float = Field(default=0, ge=0, le=5)
    notes: str | None = None

    @field_validator("rating")
    @classmethod
    def _half_point_scale(cls, value: float) -> float:
        if (value * 2) != int(value * 2):
            raise ValueError("Rating must use half-point steps")
        return value


class UserProfile(BaseModel):
    """Public profile of a signed-in user."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    username: str = "EXPLORER"
    motto: str | None = None
    avatar_url: str | None = None
    is_admin: bool = False

    @property
    def display_name(self) -> str:
        return self.username or "EXPLORER"


class Identity(BaseModel):
    """Derived identity summary for the profile screen."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    total_watched: int
    total_hours: int
    total_completed: int
    rank: RankLevel
    rank_title: str


class Badge(BaseModel):
    """A badge unlocked by completing a canonical list."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    title: str
    list_id: str
    level: Literal["initiate", "adept", "master"] = "master"
    unlocked_date: datetime


class FilmAnalysis(BaseModel):
    """Short AI-written commentary on a film."""

    analysis: str
    trivia: str = ""


class ListSuggestion(BaseModel):
    """A film suggested by the text-generation service."""

    title: str
    year: int = 0
    director: str = "Unknown"


class FilmCredits(BaseModel):
    """Credits and details returned by the metadata provider."""

    director: str = "Unknown"
    cast: list[str] = Field(default_factory=list)
    runtime: int = 0
    screenplay: list[str] = Field(default_factory=list)
    music: list[str] = Field(default_factory=list)
    cinematography: list[str] = Field(default_factory=list)
    overview: str = ""
    vote_average: float = 0
    tagline: str = ""
    keywords: list[str] = Field(default_factory=list)


class FilmDetails(BaseModel):
    """A film merged with whatever enrichment was available."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    film: Film
    poster_url: str | None = None
    director: str
    cast: list[str] = Field(default_factory=list)
    runtime: int | None = None
    synopsis: str
    significance: str
    trivia: str | None = None
    sherpa_note: str | None = None
    lists: list[dict[str, str]] = Field(default_factory=list)


class RequestModel(BaseModel):
    """Base for JSON request bodies accepted in camelCase or snake_case."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="ignore"
    )


class LogUpdate(RequestModel):
    watched: bool | None = None
    rating: float | None = None
    notes: str | None = None


class ProfileUpdate(RequestModel):
    username: str | None = None
    motto: str | None = None
    avatar_url: str | None = None


class JourneyCreate(RequestModel):
    title: str | None = None


class TierCreate(RequestModel):
    series_track: bool = False


class TierRename(RequestModel):
    name: str
    series_track: bool = False


class FilmPlacement(RequestModel):
    film: Film
    series_track: bool = False


class FilmMove(RequestModel):
    film: Film
    from_tier: int | None = None
    to_tier: int
    series_track: bool = False


class DraftUpdate(RequestModel):
    title: str | None = None
    subtitle: str | None = None
    description: str | None = None
    privacy: ListPrivacy | None = None
    status: ListStatus | None = None


class NoteUpdate(RequestModel):
    text: str = ""


def _optional_text(value: object) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _parse_tiers(raw: object, *, list_id: str) -> list[Tier]:
    if not isinstance(raw, list):
        return []
    tiers: list[Tier] = []
    for position, entry in enumerate(raw, start=1):
        if not isinstance(entry, Mapping):
            logger.warning("Skipping malformed tier %s in list %s", position, list_id)
            continue
        films: list[Film] = []
        for film_entry in entry.get("films") or []:
            if not isinstance(film_entry, Mapping):
                continue
            try:
                films.append(Film.model_validate(film_entry))
            except ValidationError:
                logger.warning("Skipping malformed film in list %s", list_id)
        level = entry.get("level")
        tiers.append(
            Tier(
                level=level if isinstance(level, int) and level >= 1 else position,
                name=str(entry.get("name") or f"TIER {position}"),
                films=films,
            )
        )
    return tiers


def _parse_optional_tiers(raw: object, *, list_id: str) -> list[Tier] | None:
    if raw is None:
        return None
    return _parse_tiers(raw, list_id=list_id)


def _parse_notes(raw: object) -> dict[str, str]:
    if not isinstance(raw, Mapping):
        return {}
    return {str(key): str(value) for key, value in raw.items() if value}
