"""Per-user session state and the operations that mutate it.

Every mutation is applied to the in-memory session first and the matching
remote write is then queued on the :class:`SyncQueue`. A failed write never
rolls the local change back; the two may diverge until the next successful
write or a fresh login.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Awaitable, Callable, TypeVar

from ..catalog import CatalogStore
from ..config import Settings
from ..models import (
    Badge,
    CuratedList,
    Film,
    Identity,
    ListCategory,
    ListPrivacy,
    ListStatus,
    Tier,
    UserFilmLog,
    UserProfile,
)
from ..store import RemoteStore
from . import progress, tier_editor
from .fork import ForkEngine, ForkResult
from .resolver import ListResolver
from .search import FilmSearch, SearchDebouncer
from .sync import SyncFailure, SyncQueue
from .tier_editor import EditingSession

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_USERNAME = "EXPLORER"
NEW_JOURNEY_TITLE = "NEW JOURNEY"


class UserSession:
    """State owned by one signed-in user and the actions they can take."""

    def __init__(
        self,
        user_id: str,
        *,
        settings: Settings,
        catalog: CatalogStore,
        store: RemoteStore,
        sync: SyncQueue,
        fork_engine: ForkEngine,
        film_search: FilmSearch | None = None,
    ):
        self.user_id = user_id
        self._settings = settings
        self._catalog = catalog
        self._store = store
        self._sync = sync
        self._fork_engine = fork_engine
        self.profile = UserProfile(
            id=user_id,
            username=DEFAULT_USERNAME,
            is_admin=settings.is_admin(user_id),
        )
        self.logs: dict[str, UserFilmLog] = {}
        self.vault: set[str] = set()
        self.custom_lists: dict[str, CuratedList] = {}
        self.overrides: dict[str, CuratedList] = {}
        self.editing: EditingSession | None = None
        self.resolver = ListResolver(catalog, self.overrides, self.custom_lists)
        self._search = SearchDebouncer(
            (film_search or FilmSearch(catalog)).search,
            delay=settings.search_debounce_seconds,
        )

    @property
    def is_admin(self) -> bool:
        return self.profile.is_admin

    def reset(self) -> None:
        """Return the session to its signed-out defaults."""

        self.profile = UserProfile(id=self.user_id, username=DEFAULT_USERNAME)
        self.logs.clear()
        self.vault.clear()
        self.custom_lists.clear()
        self.overrides.clear()
        self.editing = None

    def resolve(self, list_id: str) -> CuratedList | None:
        return self.resolver.resolve(list_id)

    def require_list(self, list_id: str) -> CuratedList:
        curated = self.resolve(list_id)
        if curated is None:
            raise KeyError(f"List {list_id} not found")
        return curated

    def home_categories(self) -> list[ListCategory]:
        return self.resolver.home_categories()

    def saved_lists(self) -> list[CuratedList]:
        return self.resolver.vault_lists(sorted(self.vault))

    def list_progress(self, list_id: str) -> int:
        return progress.list_progress(self.require_list(list_id), self.logs)

    def identity(self) -> Identity:
        return progress.identity(
            self.logs,
            self.saved_lists(),
            known_films=self._catalog.all_films(),
            default_runtime=self._settings.default_runtime_minutes,
        )

    def badges(self) -> list[Badge]:
        return progress.earned_badges(self.saved_lists(), self.logs)

    def vault_view(self) -> dict[str, list[dict[str, Any]]]:
        saved = self.saved_lists()
        active, completed = progress.partition_lists(saved, self.logs)
        journeys = list(self.custom_lists.values())
        return {
            "active": [self.summarise(curated) for curated in active],
            "completed": [self.summarise(curated) for curated in completed],
            "published": [
                self.summarise(curated)
                for curated in journeys
                if curated.status == "published"
            ],
            "drafts": [
                self.summarise(curated)
                for curated in journeys
                if curated.status == "draft"
            ],
        }

    def summarise(self, curated: CuratedList) -> dict[str, Any]:
        return {
            "id": curated.id,
            "title": curated.title,
            "subtitle": curated.subtitle,
            "author": curated.author,
            "isCustom": curated.is_custom,
            "status": curated.status,
            "privacy": curated.privacy,
            "originalListId": curated.original_list_id,
            "filmCount": len(curated.all_films()),
            "progress": progress.list_progress(curated, self.logs),
        }

    async def search(self, query: str) -> list[Film] | None:
        return await self._search.submit(query)

    def sync_failures(self) -> list[SyncFailure]:
        return self._sync.failures_for(f"{self.user_id}:")

    def update_log(
        self,
        film_id: str,
        *,
        watched: bool | None = None,
        rating: float | None = None,
        notes: str | None = None,
    ) -> UserFilmLog:
        """Upsert the user's log for a film; any rating marks it watched."""

        current = self.logs.get(film_id) or UserFilmLog()
        values = current.model_dump()
        if watched is not None:
            values["watched"] = watched
        if rating is not None:
            values["rating"] = rating
        if notes is not None:
            values["notes"] = notes
        if values["rating"] > 0:
            values["watched"] = True
        log = UserFilmLog.model_validate(values)

        self.logs[film_id] = log
        self._submit(
            f"{self.user_id}:user_logs:{film_id}",
            lambda: self._store.upsert_log(
                self.user_id,
                film_id,
                watched=log.watched,
                rating=log.rating,
                notes=log.notes,
            ),
        )
        return log

    def add_to_vault(self, list_id: str) -> None:
        self.require_list(list_id)
        if list_id in self.vault:
            return
        self.vault.add(list_id)
        self._persist_vault_add(list_id)

    def remove_from_vault(self, list_id: str) -> None:
        if list_id not in self.vault:
            return
        self.vault.discard(list_id)
        self._submit(
            f"{self.user_id}:vault:{list_id}",
            lambda: self._store.remove_vault(self.user_id, list_id),
        )

    def fork(self, source_list_id: str) -> ForkResult:
        """Fork a list (or resume the existing fork) and open it for editing."""

        result = self._fork_engine.fork(source_list_id, self)
        if result.admin_override:
            self.editing = EditingSession(draft=result.list, target="override")
            return result
        if result.created:
            self._persist_custom_list(result.list)
            self._persist_vault_add(result.list.id)
        self.editing = EditingSession(draft=result.list, target="custom")
        return result

    def create_journey(self, title: str | None = None) -> CuratedList:
        """Create a freestanding custom list and open it for editing."""

        journey = CuratedList(
            id=self._fork_engine.new_list_id(self),
            title=(title or "").strip() or NEW_JOURNEY_TITLE,
            subtitle="",
            author=self.profile.display_name,
            tiers=[Tier(level=1, name="TIER 1", films=[])],
            is_custom=True,
            status="draft",
            privacy="public",
        )
        self.custom_lists[journey.id] = journey
        self._persist_custom_list(journey)
        self.editing = EditingSession(draft=journey.model_copy(deep=True), target="custom")
        return journey.model_copy(deep=True)

    def edit_list(self, list_id: str) -> EditingSession:
        """Open an editing session on an owned custom list or, for admins, a canonical one."""

        curated = self.require_list(list_id)
        if curated.is_custom:
            if list_id not in self.custom_lists:
                raise PermissionError(f"List {list_id} belongs to another author")
            self.editing = EditingSession(draft=curated, target="custom")
        elif self.is_admin:
            self.editing = EditingSession(draft=curated, target="override")
        else:
            logger.error(
                "User %s attempted to edit canonical list %s without privileges",
                self.user_id,
                list_id,
            )
            raise PermissionError("Only editors can change canonical lists")
        return self.editing

    def require_editing(self) -> EditingSession:
        if self.editing is None:
            raise KeyError("No list is open for editing")
        return self.editing

    def add_tier(self, *, series_track: bool = False) -> CuratedList:
        return self._edit(
            lambda draft: tier_editor.add_tier(
                draft, series_track=series_track, limit=self._settings.tier_limit
            )
        )

    def remove_tier(self, index: int, *, series_track: bool = False) -> CuratedList:
        return self._edit(
            lambda draft: tier_editor.remove_tier(draft, index, series_track=series_track)
        )

    def rename_tier(
        self, index: int, name: str, *, series_track: bool = False
    ) -> CuratedList:
        return self._edit(
            lambda draft: tier_editor.rename_tier(
                draft, index, name, series_track=series_track
            )
        )

    def add_film(
        self, tier_index: int, film: Film, *, series_track: bool = False
    ) -> CuratedList:
        return self._edit(
            lambda draft: tier_editor.add_film_to_tier(
                draft,
                tier_index,
                film,
                series_track=series_track,
                limit=self._settings.tier_film_limit,
            )
        )

    def remove_film(
        self, film_id: str, tier_index: int, *, series_track: bool = False
    ) -> CuratedList:
        return self._edit(
            lambda draft: tier_editor.remove_film_from_tier(
                draft, film_id, tier_index, series_track=series_track
            )
        )

    def move_film(
        self,
        film: Film,
        from_tier_index: int | None,
        to_tier_index: int,
        *,
        series_track: bool = False,
    ) -> CuratedList:
        return self._edit(
            lambda draft: tier_editor.move_film(
                draft,
                film,
                from_tier_index,
                to_tier_index,
                series_track=series_track,
                limit=self._settings.tier_film_limit,
            )
        )

    def update_draft(
        self,
        *,
        title: str | None = None,
        subtitle: str | None = None,
        description: str | None = None,
        privacy: ListPrivacy | None = None,
        status: ListStatus | None = None,
    ) -> CuratedList:
        return self._edit(
            lambda draft: tier_editor.update_details(
                draft,
                title=title,
                subtitle=subtitle,
                description=description,
                privacy=privacy,
                status=status,
            )
        )

    def set_sherpa_note(self, film_id: str, text: str) -> CuratedList:
        return self._edit(lambda draft: tier_editor.set_sherpa_note(draft, film_id, text))

    def save_draft(self) -> CuratedList:
        """Store the open draft in its home and close the editing session."""

        editing = self.require_editing()
        draft = editing.draft
        if editing.target == "override" or not draft.is_custom:
            if not self.is_admin:
                logger.error(
                    "User %s attempted to save canonical list %s without privileges",
                    self.user_id,
                    draft.id,
                )
                raise PermissionError("Only editors can change canonical lists")
            body = draft.model_copy(
                deep=True, update={"is_custom": False, "original_list_id": None}
            )
            self.overrides[body.id] = body
            self._submit(
                f"{self.user_id}:master_overrides:{body.id}",
                lambda: self._store.upsert_override(body.id, content=body.to_content()),
            )
        else:
            body = draft.model_copy(deep=True)
            self.custom_lists[body.id] = body
            self._persist_custom_list(body)
        self.editing = None
        return body.model_copy(deep=True)

    def discard_draft(self) -> None:
        self.editing = None

    def update_profile(
        self,
        *,
        username: str | None = None,
        motto: str | None = None,
        avatar_url: str | None = None,
    ) -> UserProfile:
        update: dict[str, Any] = {}
        if username is not None and username.strip():
            update["username"] = username.strip()
        if motto is not None:
            update["motto"] = motto.strip() or None
        if avatar_url is not None:
            update["avatar_url"] = avatar_url.strip() or None
        self.profile = self.profile.model_copy(update=update)
        self._persist_profile()
        return self.profile

    def _edit(self, operation: Callable[[CuratedList], CuratedList]) -> CuratedList:
        editing = self.require_editing()
        editing.draft = operation(editing.draft)
        return editing.draft.model_copy(deep=True)

    def _submit(self, label: str, operation: Callable[[], Awaitable[None]]) -> None:
        self._sync.submit(label, operation)

    def _persist_vault_add(self, list_id: str) -> None:
        self._submit(
            f"{self.user_id}:vault:{list_id}",
            lambda: self._store.add_vault(self.user_id, list_id),
        )

    def _persist_custom_list(self, curated: CuratedList) -> None:
        snapshot = curated.model_copy(deep=True)
        self._submit(
            f"{self.user_id}:custom_lists:{snapshot.id}",
            lambda: self._store.upsert_custom_list(
                snapshot.id,
                user_id=self.user_id,
                title=snapshot.title,
                status=snapshot.status,
                content=snapshot.to_content(),
            ),
        )

    def _persist_profile(self) -> None:
        profile = self.profile
        self._submit(
            f"{self.user_id}:profiles",
            lambda: self._store.upsert_profile(
                self.user_id,
                username=profile.username,
                motto=profile.motto,
                avatar_url=profile.avatar_url,
            ),
        )


class SessionManager:
    """Owns the active sessions and their load/reset lifecycle."""

    def __init__(
        self,
        settings: Settings,
        catalog: CatalogStore,
        store: RemoteStore,
        sync: SyncQueue,
        *,
        fork_engine: ForkEngine | None = None,
        film_search: FilmSearch | None = None,
    ):
        self._settings = settings
        self._catalog = catalog
        self._store = store
        self._sync = sync
        self._fork_engine = fork_engine or ForkEngine(catalog)
        self._film_search = film_search or FilmSearch(catalog)
        self._sessions: dict[str, UserSession] = {}
        self._locks: dict[str, asyncio.Lock] = {}

    @property
    def sync(self) -> SyncQueue:
        return self._sync

    def get(self, user_id: str) -> UserSession:
        session = self._sessions.get(user_id)
        if session is None:
            raise KeyError(f"No active session for user {user_id}")
        return session

    def find(self, user_id: str | None) -> UserSession | None:
        if not user_id:
            return None
        return self._sessions.get(user_id)

    async def login(self, user_id: str) -> UserSession:
        """Load the user's state in order: profile, logs, vault, lists, overrides."""

        user_id = user_id.strip()
        if not user_id:
            raise ValueError("A user id is required")
        lock = self._locks.setdefault(user_id, asyncio.Lock())
        async with lock:
            previous = self._sessions.pop(user_id, None)
            if previous is not None:
                previous.reset()
            session = UserSession(
                user_id,
                settings=self._settings,
                catalog=self._catalog,
                store=self._store,
                sync=self._sync,
                fork_engine=self._fork_engine,
                film_search=self._film_search,
            )

            profile_row = await self._load(
                "profile", user_id, lambda: self._store.fetch_profile(user_id), None
            )
            if profile_row is None:
                session.update_profile(username=DEFAULT_USERNAME)
            else:
                session.profile = UserProfile(
                    id=user_id,
                    username=profile_row.get("username") or DEFAULT_USERNAME,
                    motto=profile_row.get("motto"),
                    avatar_url=profile_row.get("avatar_url"),
                    is_admin=self._settings.is_admin(user_id),
                )

            log_rows = await self._load(
                "logs", user_id, lambda: self._store.fetch_logs(user_id), []
            )
            session.logs.update(self._map_logs(log_rows, user_id))

            vault_ids = await self._load(
                "vault", user_id, lambda: self._store.fetch_vault(user_id), []
            )
            session.vault.update(str(list_id) for list_id in vault_ids)

            list_rows = await self._load(
                "custom lists",
                user_id,
                lambda: self._store.fetch_custom_lists(user_id),
                [],
            )
            for row in list_rows:
                curated = CuratedList.from_custom_row(
                    row, author=session.profile.display_name
                )
                if curated is not None:
                    session.custom_lists[curated.id] = curated

            override_rows = await self._load(
                "overrides", user_id, self._store.fetch_overrides, []
            )
            for row in override_rows:
                curated = CuratedList.from_override_row(row)
                if curated is not None:
                    session.overrides[curated.id] = curated

            self._sessions[user_id] = session
            logger.info(
                "Loaded session for %s: %s logs, %s saved, %s custom, %s overrides",
                user_id,
                len(session.logs),
                len(session.vault),
                len(session.custom_lists),
                len(session.overrides),
            )
            return session

    def logout(self, user_id: str) -> bool:
        session = self._sessions.pop(user_id, None)
        if session is None:
            return False
        session.reset()
        return True

    async def public_resolver(self) -> ListResolver:
        """Resolver for signed-out reads, over freshly fetched overrides."""

        rows = await self._load("overrides", "anonymous", self._store.fetch_overrides, [])
        overrides: dict[str, CuratedList] = {}
        for row in rows:
            curated = CuratedList.from_override_row(row)
            if curated is not None:
                overrides[curated.id] = curated
        return ListResolver(self._catalog, overrides, {})

    async def _load(
        self,
        label: str,
        user_id: str,
        fetch: Callable[[], Awaitable[T]],
        default: T,
    ) -> T:
        try:
            return await fetch()
        except Exception:
            logger.exception("Failed to load %s for %s; using defaults", label, user_id)
            return default

    @staticmethod
    def _map_logs(rows: list[dict[str, Any]], user_id: str) -> dict[str, UserFilmLog]:
        logs: dict[str, UserFilmLog] = {}
        for row in rows:
            film_id = str(row.get("film_id") or "").strip()
            if not film_id:
                continue
            rating = row.get("rating") or 0
            try:
                logs[film_id] = UserFilmLog(
                    watched=bool(row.get("watched")) or rating > 0,
                    rating=rating,
                    notes=row.get("notes") or None,
                )
            except (TypeError, ValueError):
                logger.warning("Skipping malformed log %s for %s", film_id, user_id)
        return logs
