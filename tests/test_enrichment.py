from __future__ import annotations

import asyncio

from app.catalog import CatalogStore
from app.models import CuratedList, Film, FilmAnalysis, FilmCredits, Tier
from app.services.enrichment import DEFAULT_SIGNIFICANCE, NO_SYNOPSIS, FilmEnricher


class _StubTMDB:
    def __init__(self, credits=None, poster=None, error: Exception | None = None):
        self._credits = credits
        self._poster = poster
        self._error = error

    async def get_credits(self, title, year):
        if self._error is not None:
            raise self._error
        return self._credits

    async def get_poster(self, title, year):
        return self._poster


class _StubOpenRouter:
    def __init__(self, analysis=None):
        self._analysis = analysis
        self.contexts: list[str | None] = []

    async def film_analysis(self, title, director, year, *, context=None):
        self.contexts.append(context)
        return self._analysis


def test_details_merge_collaborator_data() -> None:
    catalog = CatalogStore()
    film = catalog.find_film("2001--a-space-odyssey")
    curated = catalog.get("machine").model_copy(
        update={"sherpa_notes": {film.id: "Watch on the biggest screen you can."}}
    )
    openrouter = _StubOpenRouter(FilmAnalysis(analysis="The machine awakens.", trivia="Slit-scan."))
    enricher = FilmEnricher(
        catalog,
        _StubTMDB(
            credits=FilmCredits(
                director="Stanley Kubrick", cast=["Keir Dullea"], runtime=149, overview="Monolith."
            ),
            poster="https://img/2001.jpg",
        ),
        openrouter,
    )

    details = asyncio.run(enricher.details(film, curated))

    assert details.director == "Stanley Kubrick"
    assert details.runtime == 149
    assert details.poster_url == "https://img/2001.jpg"
    assert details.synopsis == "Monolith."
    assert details.significance == "The machine awakens."
    assert details.trivia == "Slit-scan."
    assert details.sherpa_note == "Watch on the biggest screen you can."
    assert {entry["id"] for entry in details.lists} == {"kubrick", "machine"}
    assert openrouter.contexts == [curated.title]
    payload = details.model_dump(by_alias=True)
    assert payload["sherpaNote"] == "Watch on the biggest screen you can."
    assert payload["film"]["posterUrl"] == film.poster_url


def test_details_fall_back_to_local_fields_when_collaborators_fail() -> None:
    film = Film(title="Home Movie", year=2024, director="Me", runtime=12, poster_url="local.jpg")
    curated = CuratedList(id="custom_1", is_custom=True, tiers=[Tier(films=[film])])
    enricher = FilmEnricher(
        CatalogStore(), _StubTMDB(error=RuntimeError("down")), _StubOpenRouter()
    )

    details = asyncio.run(enricher.details(film, curated))

    assert details.director == "Me"
    assert details.runtime == 12
    assert details.poster_url == "local.jpg"
    assert details.synopsis == NO_SYNOPSIS
    assert details.significance == DEFAULT_SIGNIFICANCE
    assert details.trivia is None
    assert details.sherpa_note is None
    assert details.lists == []
