"""Row-shaped async access to the persisted collections."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from .db_models import (
    CustomListRecord,
    MasterOverrideRecord,
    ProfileRecord,
    UserLogRecord,
    VaultRecord,
)

logger = logging.getLogger(__name__)


class RemoteStore:
    """Select/upsert/delete operations keyed the way the collections are.

    Every upsert merges on the collection's conflict key so repeated or
    reordered writes converge on the same row.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory

    async def fetch_profile(self, user_id: str) -> dict[str, Any] | None:
        async with self._session_factory() as session:
            record = await session.get(ProfileRecord, user_id)
            if record is None:
                return None
            return {
                "id": record.id,
                "username": record.username,
                "motto": record.motto,
                "avatar_url": record.avatar_url,
            }

    async def fetch_logs(self, user_id: str) -> list[dict[str, Any]]:
        async with self._session_factory() as session:
            result = await session.execute(
                select(UserLogRecord).where(UserLogRecord.user_id == user_id)
            )
            return [
                {
                    "film_id": record.film_id,
                    "watched": record.watched,
                    "rating": record.rating,
                    "notes": record.notes,
                }
                for record in result.scalars()
            ]

    async def fetch_vault(self, user_id: str) -> list[str]:
        async with self._session_factory() as session:
            result = await session.execute(
                select(VaultRecord.list_id).where(VaultRecord.user_id == user_id)
            )
            return [row[0] for row in result.all()]

    async def fetch_custom_lists(self, user_id: str) -> list[dict[str, Any]]:
        async with self._session_factory() as session:
            result = await session.execute(
                select(CustomListRecord)
                .where(CustomListRecord.user_id == user_id)
                .order_by(CustomListRecord.updated_at)
            )
            return [
                {
                    "id": record.id,
                    "user_id": record.user_id,
                    "title": record.title,
                    "status": record.status,
                    "content": record.content,
                    "updated_at": record.updated_at,
                }
                for record in result.scalars()
            ]

    async def fetch_overrides(self) -> list[dict[str, Any]]:
        async with self._session_factory() as session:
            result = await session.execute(select(MasterOverrideRecord))
            return [
                {
                    "list_id": record.list_id,
                    "content": record.content,
                    "updated_at": record.updated_at,
                }
                for record in result.scalars()
            ]

    async def upsert_profile(
        self,
        user_id: str,
        *,
        username: str | None,
        motto: str | None,
        avatar_url: str | None,
    ) -> None:
        async with self._session_factory() as session:
            await session.merge(
                ProfileRecord(
                    id=user_id,
                    username=username,
                    motto=motto,
                    avatar_url=avatar_url,
                    updated_at=datetime.now(timezone.utc),
                )
            )
            await session.commit()

    async def upsert_log(
        self,
        user_id: str,
        film_id: str,
        *,
        watched: bool,
        rating: float,
        notes: str | None,
    ) -> None:
        async with self._session_factory() as session:
            await session.merge(
                UserLogRecord(
                    user_id=user_id,
                    film_id=film_id,
                    watched=watched,
                    rating=rating,
                    notes=notes or "",
                )
            )
            await session.commit()

    async def add_vault(self, user_id: str, list_id: str) -> None:
        async with self._session_factory() as session:
            existing = await session.get(VaultRecord, (user_id, list_id))
            if existing is not None:
                return
            session.add(VaultRecord(user_id=user_id, list_id=list_id))
            await session.commit()

    async def remove_vault(self, user_id: str, list_id: str) -> None:
        async with self._session_factory() as session:
            await session.execute(
                delete(VaultRecord).where(
                    VaultRecord.user_id == user_id,
                    VaultRecord.list_id == list_id,
                )
            )
            await session.commit()

    async def upsert_custom_list(
        self,
        list_id: str,
        *,
        user_id: str,
        title: str,
        status: str,
        content: dict[str, Any],
    ) -> None:
        async with self._session_factory() as session:
            await session.merge(
                CustomListRecord(
                    id=list_id,
                    user_id=user_id,
                    title=title,
                    status=status,
                    content=content,
                    updated_at=datetime.now(timezone.utc),
                )
            )
            await session.commit()

    async def upsert_override(self, list_id: str, *, content: dict[str, Any]) -> None:
        async with self._session_factory() as session:
            await session.merge(
                MasterOverrideRecord(
                    list_id=list_id,
                    content=content,
                    updated_at=datetime.now(timezone.utc),
                )
            )
            await session.commit()
        logger.info("Stored override for canonical list %s", list_id)
