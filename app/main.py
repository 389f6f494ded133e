"""Entry point for the CineVault FastAPI service."""

from __future__ import annotations

import json
import logging
from contextlib import AsyncExitStack, asynccontextmanager, contextmanager
from typing import Any, Iterator, TypeVar

import httpx
from fastapi import FastAPI, HTTPException, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ValidationError

from .catalog import CatalogStore
from .config import settings
from .database import Database
from .models import (
    CuratedList,
    DraftUpdate,
    Film,
    FilmMove,
    FilmPlacement,
    JourneyCreate,
    LogUpdate,
    NoteUpdate,
    ProfileUpdate,
    TierCreate,
    TierRename,
)
from .services.enrichment import FilmEnricher
from .services.openrouter import OpenRouterClient
from .services.resolver import ListResolver
from .services.search import FilmSearch
from .services.session import SessionManager, UserSession
from .services.sync import SyncQueue
from .services.tmdb import TMDBClient
from .store import RemoteStore

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

app: FastAPI

RequestModelT = TypeVar("RequestModelT", bound=BaseModel)


@asynccontextmanager
async def lifespan(fastapi_app: FastAPI):
    exit_stack = AsyncExitStack()
    tmdb_http_client = await exit_stack.enter_async_context(
        httpx.AsyncClient(
            base_url=str(settings.tmdb_api_url),
            timeout=httpx.Timeout(15.0, connect=5.0),
        )
    )
    openrouter_http_client = await exit_stack.enter_async_context(
        httpx.AsyncClient(
            base_url=str(settings.openrouter_api_url),
            timeout=httpx.Timeout(60.0, connect=10.0),
        )
    )
    database = Database(settings.database_url)
    await database.create_all()

    catalog = CatalogStore()
    tmdb = TMDBClient(settings, tmdb_http_client)
    openrouter = OpenRouterClient(settings, openrouter_http_client)
    sync_queue = SyncQueue(settings)
    session_manager = SessionManager(
        settings,
        catalog,
        RemoteStore(database.session_factory),
        sync_queue,
        film_search=FilmSearch(catalog, tmdb),
    )

    fastapi_app.state.database = database
    fastapi_app.state.catalog = catalog
    fastapi_app.state.tmdb = tmdb
    fastapi_app.state.openrouter = openrouter
    fastapi_app.state.enricher = FilmEnricher(catalog, tmdb, openrouter)
    fastapi_app.state.session_manager = session_manager

    try:
        yield
    finally:  # pragma: no cover - teardown path exercised at runtime
        await sync_queue.close()
        await database.dispose()
        await exit_stack.aclose()


def create_app() -> FastAPI:
    fastapi_app = FastAPI(
        title=settings.app_name,
        description="Curated, tiered film lists with personal progress tracking",
        version="1.0.0",
        lifespan=lifespan,
    )

    fastapi_app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE"],
        allow_headers=["*"],
    )

    register_routes(fastapi_app)
    return fastapi_app


def get_session_manager(app: FastAPI) -> SessionManager:
    manager = getattr(app.state, "session_manager", None)
    if not isinstance(manager, SessionManager):
        raise RuntimeError("Session manager not initialised")
    return manager


def get_enricher(app: FastAPI) -> FilmEnricher:
    enricher = getattr(app.state, "enricher", None)
    if not isinstance(enricher, FilmEnricher):
        raise RuntimeError("Film enricher not initialised")
    return enricher


@contextmanager
def translate_errors() -> Iterator[None]:
    """Map domain exceptions raised inside the block to HTTP errors."""

    try:
        yield
    except ValidationError as exc:
        raise HTTPException(
            status_code=400, detail=exc.errors(include_url=False, include_context=False)
        ) from exc
    except KeyError as exc:
        raise HTTPException(status_code=404, detail=_error_message(exc)) from exc
    except IndexError as exc:
        raise HTTPException(status_code=400, detail=_error_message(exc)) from exc
    except PermissionError as exc:
        raise HTTPException(status_code=403, detail=_error_message(exc)) from exc
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=_error_message(exc)) from exc


def register_routes(fastapi_app: FastAPI) -> None:
    def _session(user_id: str) -> UserSession:
        with translate_errors():
            return get_session_manager(fastapi_app).get(user_id)

    async def _resolver(user_id: str | None) -> ListResolver:
        manager = get_session_manager(fastapi_app)
        session = manager.find(user_id)
        if session is not None:
            return session.resolver
        return await manager.public_resolver()

    def _draft_payload(session: UserSession, draft: CuratedList) -> JSONResponse:
        editing = session.require_editing()
        return JSONResponse(
            {"target": editing.target, "list": _list_payload(draft)}
        )

    @fastapi_app.get("/healthz")
    async def healthcheck() -> dict[str, str]:
        return {"status": "ok"}

    @fastapi_app.get("/api/catalog")
    async def home_catalog(user: str | None = None) -> JSONResponse:
        resolver = await _resolver(user)
        return JSONResponse(
            {
                "categories": [
                    {
                        "title": category.title,
                        "lists": [_list_payload(curated) for curated in category.lists],
                    }
                    for category in resolver.home_categories()
                ]
            }
        )

    @fastapi_app.get("/api/lists/{list_id}")
    async def list_detail(list_id: str, user: str | None = None) -> JSONResponse:
        resolver = await _resolver(user)
        curated = resolver.resolve(list_id)
        if curated is None:
            raise HTTPException(status_code=404, detail=f"List {list_id} not found")
        payload = _list_payload(curated)
        session = get_session_manager(fastapi_app).find(user)
        if session is not None:
            payload["progress"] = session.summarise(curated)["progress"]
            payload["saved"] = list_id in session.vault
        return JSONResponse(payload)

    @fastapi_app.get("/api/films/{film_id}/lists")
    async def film_lists(film_id: str) -> dict[str, Any]:
        catalog: CatalogStore = fastapi_app.state.catalog
        return {"lists": catalog.lists_containing_film(film_id)}

    @fastapi_app.get("/api/films/{film_id}/details")
    async def film_details(
        film_id: str,
        list_id: str | None = Query(default=None, alias="list"),
        user: str | None = None,
    ) -> JSONResponse:
        catalog: CatalogStore = fastapi_app.state.catalog
        curated: CuratedList | None = None
        film: Film | None = None
        if list_id:
            curated = (await _resolver(user)).resolve(list_id)
            if curated is None:
                raise HTTPException(status_code=404, detail=f"List {list_id} not found")
            film = next(
                (entry for entry in curated.all_films() if entry.id == film_id), None
            )
        if film is None:
            film = catalog.find_film(film_id)
        if film is None:
            raise HTTPException(status_code=404, detail=f"Film {film_id} not found")
        details = await get_enricher(fastapi_app).details(film, curated)
        return JSONResponse(details.model_dump(mode="json", by_alias=True))

    @fastapi_app.get("/api/suggestions")
    async def list_suggestions(q: str = "") -> dict[str, Any]:
        openrouter: OpenRouterClient = fastapi_app.state.openrouter
        suggestions = await openrouter.list_suggestions(q)
        return {"items": [suggestion.model_dump() for suggestion in suggestions]}

    @fastapi_app.get("/api/directors")
    async def director_picks(q: str = "") -> dict[str, Any]:
        tmdb: TMDBClient = fastapi_app.state.tmdb
        picks = await tmdb.director_picks(q)
        return {"items": [pick.to_payload() for pick in picks]}

    @fastapi_app.post("/api/users/{user_id}/session")
    async def login(user_id: str) -> JSONResponse:
        with translate_errors():
            session = await get_session_manager(fastapi_app).login(user_id)
        return JSONResponse(
            {
                "profile": session.profile.model_dump(mode="json", by_alias=True),
                "identity": session.identity().model_dump(mode="json", by_alias=True),
            }
        )

    @fastapi_app.delete("/api/users/{user_id}/session")
    async def logout(user_id: str) -> dict[str, bool]:
        return {"loggedOut": get_session_manager(fastapi_app).logout(user_id)}

    @fastapi_app.get("/api/users/{user_id}/profile")
    async def get_profile(user_id: str) -> JSONResponse:
        session = _session(user_id)
        return JSONResponse(session.profile.model_dump(mode="json", by_alias=True))

    @fastapi_app.patch("/api/users/{user_id}/profile")
    async def update_profile(user_id: str, request: Request) -> JSONResponse:
        session = _session(user_id)
        with translate_errors():
            body = await _read_body(request, ProfileUpdate)
            profile = session.update_profile(
                username=body.username,
                motto=body.motto,
                avatar_url=body.avatar_url,
            )
        return JSONResponse(profile.model_dump(mode="json", by_alias=True))

    @fastapi_app.get("/api/users/{user_id}/identity")
    async def get_identity(user_id: str) -> JSONResponse:
        session = _session(user_id)
        return JSONResponse(session.identity().model_dump(mode="json", by_alias=True))

    @fastapi_app.get("/api/users/{user_id}/vault")
    async def get_vault(user_id: str) -> JSONResponse:
        return JSONResponse(_session(user_id).vault_view())

    @fastapi_app.get("/api/users/{user_id}/badges")
    async def get_badges(user_id: str) -> JSONResponse:
        badges = _session(user_id).badges()
        return JSONResponse(
            {"badges": [badge.model_dump(mode="json", by_alias=True) for badge in badges]}
        )

    @fastapi_app.put("/api/users/{user_id}/logs/{film_id}")
    async def update_log(user_id: str, film_id: str, request: Request) -> JSONResponse:
        session = _session(user_id)
        with translate_errors():
            body = await _read_body(request, LogUpdate)
            log = session.update_log(
                film_id, watched=body.watched, rating=body.rating, notes=body.notes
            )
        return JSONResponse({"filmId": film_id, **log.model_dump(mode="json")})

    @fastapi_app.put("/api/users/{user_id}/vault/{list_id}")
    async def save_to_vault(user_id: str, list_id: str) -> dict[str, Any]:
        session = _session(user_id)
        with translate_errors():
            session.add_to_vault(list_id)
        return {"listId": list_id, "saved": True}

    @fastapi_app.delete("/api/users/{user_id}/vault/{list_id}")
    async def remove_from_vault(user_id: str, list_id: str) -> dict[str, Any]:
        _session(user_id).remove_from_vault(list_id)
        return {"listId": list_id, "saved": False}

    @fastapi_app.post("/api/users/{user_id}/forks/{list_id}")
    async def fork_list(user_id: str, list_id: str) -> JSONResponse:
        session = _session(user_id)
        with translate_errors():
            result = session.fork(list_id)
        return JSONResponse(
            {
                "created": result.created,
                "adminOverride": result.admin_override,
                "list": _list_payload(result.list),
            },
            status_code=201 if result.created else 200,
        )

    @fastapi_app.post("/api/users/{user_id}/journeys")
    async def create_journey(user_id: str, request: Request) -> JSONResponse:
        session = _session(user_id)
        with translate_errors():
            body = await _read_body(request, JourneyCreate)
            journey = session.create_journey(body.title)
        return JSONResponse(_list_payload(journey), status_code=201)

    @fastapi_app.post("/api/users/{user_id}/lists/{list_id}/edit")
    async def edit_list(user_id: str, list_id: str) -> JSONResponse:
        session = _session(user_id)
        with translate_errors():
            editing = session.edit_list(list_id)
        return _draft_payload(session, editing.draft)

    @fastapi_app.get("/api/users/{user_id}/draft")
    async def get_draft(user_id: str) -> JSONResponse:
        session = _session(user_id)
        with translate_errors():
            editing = session.require_editing()
        return _draft_payload(session, editing.draft)

    @fastapi_app.patch("/api/users/{user_id}/draft")
    async def update_draft(user_id: str, request: Request) -> JSONResponse:
        session = _session(user_id)
        with translate_errors():
            body = await _read_body(request, DraftUpdate)
            draft = session.update_draft(
                title=body.title,
                subtitle=body.subtitle,
                description=body.description,
                privacy=body.privacy,
                status=body.status,
            )
        return _draft_payload(session, draft)

    @fastapi_app.delete("/api/users/{user_id}/draft")
    async def discard_draft(user_id: str) -> dict[str, bool]:
        _session(user_id).discard_draft()
        return {"discarded": True}

    @fastapi_app.post("/api/users/{user_id}/draft/tiers")
    async def add_tier(user_id: str, request: Request) -> JSONResponse:
        session = _session(user_id)
        with translate_errors():
            body = await _read_body(request, TierCreate)
            draft = session.add_tier(series_track=body.series_track)
        return _draft_payload(session, draft)

    @fastapi_app.delete("/api/users/{user_id}/draft/tiers/{index}")
    async def remove_tier(user_id: str, index: int, series: bool = False) -> JSONResponse:
        session = _session(user_id)
        with translate_errors():
            draft = session.remove_tier(index, series_track=series)
        return _draft_payload(session, draft)

    @fastapi_app.patch("/api/users/{user_id}/draft/tiers/{index}")
    async def rename_tier(user_id: str, index: int, request: Request) -> JSONResponse:
        session = _session(user_id)
        with translate_errors():
            body = await _read_body(request, TierRename)
            draft = session.rename_tier(index, body.name, series_track=body.series_track)
        return _draft_payload(session, draft)

    @fastapi_app.post("/api/users/{user_id}/draft/tiers/{index}/films")
    async def add_film(user_id: str, index: int, request: Request) -> JSONResponse:
        session = _session(user_id)
        with translate_errors():
            body = await _read_body(request, FilmPlacement)
            draft = session.add_film(index, body.film, series_track=body.series_track)
        return _draft_payload(session, draft)

    @fastapi_app.delete("/api/users/{user_id}/draft/tiers/{index}/films/{film_id}")
    async def remove_film(
        user_id: str, index: int, film_id: str, series: bool = False
    ) -> JSONResponse:
        session = _session(user_id)
        with translate_errors():
            draft = session.remove_film(film_id, index, series_track=series)
        return _draft_payload(session, draft)

    @fastapi_app.post("/api/users/{user_id}/draft/moves")
    async def move_film(user_id: str, request: Request) -> JSONResponse:
        session = _session(user_id)
        with translate_errors():
            body = await _read_body(request, FilmMove)
            draft = session.move_film(
                body.film, body.from_tier, body.to_tier, series_track=body.series_track
            )
        return _draft_payload(session, draft)

    @fastapi_app.put("/api/users/{user_id}/draft/notes/{film_id}")
    async def set_note(user_id: str, film_id: str, request: Request) -> JSONResponse:
        session = _session(user_id)
        with translate_errors():
            body = await _read_body(request, NoteUpdate)
            draft = session.set_sherpa_note(film_id, body.text)
        return _draft_payload(session, draft)

    @fastapi_app.post("/api/users/{user_id}/draft/save")
    async def save_draft(user_id: str) -> JSONResponse:
        session = _session(user_id)
        with translate_errors():
            saved = session.save_draft()
        return JSONResponse(_list_payload(saved))

    @fastapi_app.get("/api/users/{user_id}/search")
    async def search_films(user_id: str, q: str = "") -> JSONResponse:
        session = _session(user_id)
        results = await session.search(q)
        if results is None:
            return JSONResponse({"query": q, "superseded": True, "results": []})
        return JSONResponse(
            {
                "query": q,
                "superseded": False,
                "results": [
                    film.model_dump(mode="json", by_alias=True) for film in results
                ],
            }
        )

    @fastapi_app.get("/api/users/{user_id}/sync")
    async def sync_status(user_id: str) -> dict[str, Any]:
        session = _session(user_id)
        manager = get_session_manager(fastapi_app)
        return {
            "pending": manager.sync.pending,
            "failures": [failure.to_payload() for failure in session.sync_failures()],
        }


async def _read_body(request: Request, model: type[RequestModelT]) -> RequestModelT:
    try:
        payload = await request.json()
    except json.JSONDecodeError:
        payload = {}
    if not isinstance(payload, dict):
        raise ValueError("Invalid payload")
    return model.model_validate(payload)


def _list_payload(curated: CuratedList) -> dict[str, Any]:
    return curated.model_dump(mode="json", by_alias=True)


def _error_message(exc: Exception) -> str:
    if exc.args and isinstance(exc.args[0], str):
        return exc.args[0]
    return str(exc) or exc.__class__.__name__


app = create_app()
