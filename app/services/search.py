"""Debounced film search across the catalog and the metadata provider."""

from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Callable, Generic, TypeVar

from ..catalog import CatalogStore
from ..models import Film
from .tmdb import TMDBClient

logger = logging.getLogger(__name__)

T = TypeVar("T")


class SearchDebouncer(Generic[T]):
    """Buffer queries and discard responses that a later query superseded.

    Each query is tagged with a sequence number. A query replaced while it
    waits out the debounce delay is abandoned before dispatch; a response
    that arrives after a newer query was submitted is dropped. In-flight
    requests are never cancelled.
    """

    def __init__(
        self,
        search: Callable[[str], Awaitable[T]],
        *,
        delay: float = 0.3,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        self._search = search
        self._delay = delay
        self._sleep = sleep
        self._sequence = 0
        self._applied: tuple[int, str] | None = None
        self.results: T | None = None

    @property
    def applied_query(self) -> str | None:
        return self._applied[1] if self._applied else None

    async def submit(self, query: str) -> T | None:
        """Return results for ``query`` or ``None`` if it was superseded."""

        self._sequence += 1
        tag = (self._sequence, query)
        await self._sleep(self._delay)
        if tag[0] != self._sequence:
            return None

        results = await self._search(query)
        if tag[0] != self._sequence:
            logger.debug("Discarding stale search response for %r", query)
            return None
        self._applied = tag
        self.results = results
        return results


class FilmSearch:
    """Catalog matches first, then provider results not already listed."""

    def __init__(self, catalog: CatalogStore, tmdb: TMDBClient | None = None):
        self._catalog = catalog
        self._tmdb = tmdb

    async def search(self, query: str) -> list[Film]:
        if not query.strip():
            return []
        results = self._catalog.search_films(query)
        if self._tmdb is None:
            return results

        seen = {(film.title.casefold(), film.year) for film in results}
        for film in await self._tmdb.search_movies(query):
            key = (film.title.casefold(), film.year)
            if key in seen:
                continue
            seen.add(key)
            results.append(film)
        return results
