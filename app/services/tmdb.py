"""Utilities for resolving metadata from The Movie Database (TMDB)."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

import httpx

from ..config import Settings
from ..models import Film, FilmCredits

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class DirectorPick:
    """A film from a person's filmography, ranked by popularity."""

    title: str
    year: int
    director: str
    poster_url: str | None
    overview: str | None
    vote_average: float | None

    def to_payload(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "year": self.year,
            "director": self.director,
            "posterUrl": self.poster_url,
            "overview": self.overview,
            "voteAverage": self.vote_average,
        }


class TMDBClient:
    """Read-only TMDB lookups that degrade to ``None``/``[]`` on any failure."""

    def __init__(self, settings: Settings, http_client: httpx.AsyncClient):
        self._settings = settings
        self._client = http_client
        self._image_base_url = settings.tmdb_image_url.rstrip("/")
        self._poster_cache: dict[str, str] = {}
        self._credits_cache: dict[str, FilmCredits] = {}

    @property
    def enabled(self) -> bool:
        return bool(self._settings.tmdb_api_key)

    async def get_poster(self, title: str, year: int | None) -> str | None:
        """Return the poster URL of the best match for a title/year."""

        if not self.enabled:
            return None
        cache_key = f"{title}-{year}"
        if cache_key in self._poster_cache:
            return self._poster_cache[cache_key]

        movie_id = await self._find_movie_id(title, year)
        if movie_id is None:
            return None
        data = await self._get_json(f"/movie/{movie_id}")
        if not data or not data.get("poster_path"):
            return None
        poster = self._build_image_url(data["poster_path"])
        self._poster_cache[cache_key] = poster
        return poster

    async def get_credits(self, title: str, year: int | None) -> FilmCredits | None:
        """Return credits and details of the best match for a title/year."""

        if not self.enabled:
            return None
        cache_key = f"{title}-{year}-credits"
        if cache_key in self._credits_cache:
            return self._credits_cache[cache_key]

        movie_id = await self._find_movie_id(title, year)
        if movie_id is None:
            return None
        data = await self._get_json(
            f"/movie/{movie_id}",
            append_to_response="credits,keywords",
        )
        if not data:
            return None

        credits = data.get("credits") or {}
        crew = [member for member in credits.get("crew") or [] if isinstance(member, dict)]
        director = next(
            (member.get("name") for member in crew if member.get("job") == "Director"),
            None,
        )
        keywords = (data.get("keywords") or {}).get("keywords") or []
        result = FilmCredits(
            director=director or "Unknown",
            cast=[
                person.get("name")
                for person in (credits.get("cast") or [])[:5]
                if isinstance(person, dict) and person.get("name")
            ],
            runtime=data.get("runtime") or 0,
            screenplay=self._crew_names(crew, {"Screenplay", "Writer"}),
            music=self._crew_names(crew, {"Original Music Composer", "Music"}),
            cinematography=self._crew_names(
                crew, {"Director of Photography", "Cinematographer"}
            ),
            overview=data.get("overview") or "",
            vote_average=data.get("vote_average") or 0,
            tagline=data.get("tagline") or "",
            keywords=[
                keyword.get("name")
                for keyword in keywords[:5]
                if isinstance(keyword, dict) and keyword.get("name")
            ],
        )
        self._credits_cache[cache_key] = result
        return result

    async def search_movies(self, query: str) -> list[Film]:
        """Return search results as films tagged with their TMDB id."""

        if not self.enabled or not query.strip():
            return []
        data = await self._get_json("/search/movie", query=query)
        if not data:
            return []

        films: list[Film] = []
        for result in data.get("results") or []:
            if not isinstance(result, dict) or not result.get("title"):
                continue
            poster_path = result.get("poster_path")
            films.append(
                Film(
                    title=result["title"],
                    year=self._extract_year(result) or 0,
                    director="Unknown",
                    poster_url=self._build_image_url(poster_path) if poster_path else None,
                    plot=result.get("overview"),
                    imdb_score=result.get("vote_average"),
                    tmdb_id=result.get("id"),
                    is_custom_entry=True,
                )
            )
        return films

    async def director_picks(self, query: str, *, limit: int = 10) -> list[DirectorPick]:
        """Return the most popular films directed by the best matching person.

        Falls back to acting credits when the person has never directed.
        """

        if not self.enabled or not query.strip():
            return []
        people = await self._get_json("/search/person", query=query)
        results = (people or {}).get("results") or []
        if not results:
            return []
        person = results[0]
        if not isinstance(person, dict) or person.get("id") is None:
            return []
        credits = await self._get_json(f"/person/{person['id']}/movie_credits")
        if not credits:
            return []

        movies = [
            entry
            for entry in credits.get("crew") or []
            if isinstance(entry, dict) and entry.get("job") == "Director"
        ]
        if not movies:
            movies = [entry for entry in credits.get("cast") or [] if isinstance(entry, dict)]
        movies.sort(key=lambda entry: entry.get("popularity") or 0, reverse=True)

        return [
            DirectorPick(
                title=entry.get("title") or "",
                year=self._extract_year(entry) or 0,
                director=person.get("name") or query,
                poster_url=(
                    self._build_image_url(entry["poster_path"])
                    if entry.get("poster_path")
                    else None
                ),
                overview=entry.get("overview"),
                vote_average=entry.get("vote_average"),
            )
            for entry in movies[:limit]
        ]

    async def _find_movie_id(self, title: str, year: int | None) -> int | None:
        params: dict[str, Any] = {"query": title}
        if year:
            params["year"] = year
        data = await self._get_json("/search/movie", **params)
        results = (data or {}).get("results") or []
        if not results:
            return None
        try:
            return int(results[0]["id"])
        except (KeyError, TypeError, ValueError):
            return None

    async def _get_json(self, endpoint: str, **params: Any) -> dict[str, Any] | None:
        params["api_key"] = self._settings.tmdb_api_key
        try:
            response = await self._client.get(endpoint, params=params)
        except httpx.HTTPError as exc:
            logger.warning("TMDB request to %s failed: %s", endpoint, exc)
            return None
        if response.status_code >= 400:
            logger.warning(
                "TMDB request to %s failed: %s", endpoint, response.text
            )
            return None
        try:
            payload = response.json()
        except ValueError:
            logger.debug("TMDB returned invalid JSON for %s", endpoint)
            return None
        return payload if isinstance(payload, dict) else None

    @staticmethod
    def _crew_names(crew: list[dict[str, Any]], jobs: set[str]) -> list[str]:
        return [
            member["name"]
            for member in crew
            if member.get("job") in jobs and member.get("name")
        ][:2]

    @staticmethod
    def _extract_year(result: dict[str, Any]) -> int | None:
        date_value = result.get("release_date")
        if not isinstance(date_value, str) or len(date_value) < 4:
            return None
        try:
            return int(date_value[:4])
        except ValueError:
            return None

    def _build_image_url(self, path: str) -> str:
        if path.startswith("http"):
            return path
        return f"{self._image_base_url}{path}"
