"""Creation of user-owned remixes of resolved lists."""

from __future__ import annotations

import logging
import secrets
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

from ..catalog import CatalogStore
from ..models import CuratedList

if TYPE_CHECKING:
    from .session import UserSession

logger = logging.getLogger(__name__)

CUSTOM_ID_PREFIX = "custom_"
REMIX_SUFFIX = " (REMIX)"


@dataclass
class ForkResult:
    """Outcome of a fork request.

    ``created`` is false when an existing fork of the same source was found.
    ``admin_override`` marks a privileged edit of the canonical list itself.
    """

    list: CuratedList
    created: bool
    admin_override: bool = False


class ForkEngine:
    """Deep-copies resolved lists into the user's custom list store."""

    def __init__(
        self,
        catalog: CatalogStore,
        *,
        token_factory: Callable[[], str] | None = None,
    ):
        self._catalog = catalog
        self._token_factory = token_factory or (lambda: secrets.token_hex(6))

    def fork(self, source_list_id: str, session: "UserSession") -> ForkResult:
        source = session.resolver.resolve(source_list_id)
        if source is None:
            raise KeyError(f"List {source_list_id} not found")

        if session.is_admin and not source.is_custom:
            logger.info(
                "Admin %s editing canonical list %s as an override",
                session.user_id,
                source_list_id,
            )
            return ForkResult(list=source, created=False, admin_override=True)

        existing = self.find_existing_fork(source_list_id, session)
        if existing is not None:
            return ForkResult(list=existing, created=False)

        remix = source.model_copy(
            deep=True,
            update={
                "id": self.new_list_id(session),
                "title": f"{source.title}{REMIX_SUFFIX}",
                "author": session.profile.display_name,
                "is_custom": True,
                "status": "draft",
                "privacy": "public",
                "original_list_id": source_list_id,
                "sherpa_notes": {},
            },
        )
        session.custom_lists[remix.id] = remix
        session.vault.add(remix.id)
        logger.info(
            "User %s forked %s into %s", session.user_id, source_list_id, remix.id
        )
        return ForkResult(list=remix.model_copy(deep=True), created=True)

    def find_existing_fork(
        self, source_list_id: str, session: "UserSession"
    ) -> CuratedList | None:
        for curated in session.custom_lists.values():
            if curated.original_list_id == source_list_id:
                return curated.model_copy(deep=True)
        return None

    def new_list_id(self, session: "UserSession") -> str:
        while True:
            candidate = f"{CUSTOM_ID_PREFIX}{self._token_factory()}"
            if candidate in self._catalog or session.resolver.is_known(candidate):
                continue
            return candidate
