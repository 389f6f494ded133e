"""Merge collaborator metadata over locally known film fields."""

from __future__ import annotations

import asyncio
import logging

from ..catalog import CatalogStore
from ..models import CuratedList, Film, FilmDetails
from .openrouter import OpenRouterClient
from .tmdb import TMDBClient

logger = logging.getLogger(__name__)

NO_SYNOPSIS = "No details available."
DEFAULT_SIGNIFICANCE = "A significant entry in cinema history."


class FilmEnricher:
    """Builds the film detail view, tolerating every missing collaborator."""

    def __init__(
        self,
        catalog: CatalogStore,
        tmdb: TMDBClient,
        openrouter: OpenRouterClient,
    ):
        self._catalog = catalog
        self._tmdb = tmdb
        self._ai = openrouter

    async def details(self, film: Film, curated: CuratedList | None = None) -> FilmDetails:
        list_title = curated.title if curated is not None else None
        credits, poster, analysis = await asyncio.gather(
            self._tmdb.get_credits(film.title, film.year),
            self._tmdb.get_poster(film.title, film.year),
            self._ai.film_analysis(
                film.title, film.director, film.year, context=list_title
            ),
            return_exceptions=True,
        )
        for label, value in (("credits", credits), ("poster", poster), ("analysis", analysis)):
            if isinstance(value, Exception):
                logger.warning("Film %s %s lookup failed: %s", film.id, label, value)
        if isinstance(credits, Exception):
            credits = None
        if isinstance(poster, Exception):
            poster = None
        if isinstance(analysis, Exception):
            analysis = None

        director = film.director
        if credits is not None and credits.director != "Unknown":
            director = credits.director
        significance = DEFAULT_SIGNIFICANCE
        if analysis is not None and analysis.analysis:
            significance = analysis.analysis
        elif credits is not None and credits.tagline:
            significance = credits.tagline

        return FilmDetails(
            film=film,
            poster_url=poster or film.poster_url,
            director=director,
            cast=credits.cast if credits is not None else [],
            runtime=(credits.runtime if credits is not None and credits.runtime else film.runtime),
            synopsis=(credits.overview if credits is not None and credits.overview else None)
            or film.plot
            or NO_SYNOPSIS,
            significance=significance,
            trivia=analysis.trivia if analysis is not None and analysis.trivia else None,
            sherpa_note=(curated.sherpa_notes.get(film.id) if curated is not None else None),
            lists=self._catalog.lists_containing_film(film.id),
        )
