"""Fire-and-forget persistence of optimistic local changes."""

from __future__ import annotations

import asyncio
import logging
from collections import deque
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Awaitable, Callable

from ..config import Settings

logger = logging.getLogger(__name__)

WriteOperation = Callable[[], Awaitable[None]]


@dataclass(slots=True)
class SyncFailure:
    """A remote write that exhausted its retries."""

    label: str
    error: str
    attempts: int
    failed_at: datetime

    def to_payload(self) -> dict[str, object]:
        return {
            "label": self.label,
            "error": self.error,
            "attempts": self.attempts,
            "failedAt": self.failed_at.isoformat(),
        }


class SyncQueue:
    """Dispatch remote writes in the background with retry and backoff.

    Callers mutate local state first and then ``submit`` the matching write;
    ``submit`` never blocks and never raises for remote failures. A failed
    write is not rolled back locally, it is logged and kept in ``failures``
    so it can be surfaced.
    """

    def __init__(
        self,
        settings: Settings,
        *,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
        max_failures: int = 100,
    ):
        self._retry_limit = settings.sync_retry_limit
        self._base_delay = settings.sync_retry_base_delay
        self._max_delay = settings.sync_retry_max_delay
        self._sleep = sleep
        self._pending: set[asyncio.Task[None]] = set()
        self._failures: deque[SyncFailure] = deque(maxlen=max_failures)
        self._key_locks: dict[str, asyncio.Lock] = {}
        self._key_waiters: dict[str, int] = {}

    @property
    def pending(self) -> int:
        return len(self._pending)

    @property
    def failures(self) -> list[SyncFailure]:
        return list(self._failures)

    def failures_for(self, prefix: str) -> list[SyncFailure]:
        return [failure for failure in self._failures if failure.label.startswith(prefix)]

    def submit(self, label: str, operation: WriteOperation) -> asyncio.Task[None]:
        """Schedule ``operation`` and return without awaiting it."""

        task = asyncio.create_task(self._run(label, operation))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return task

    async def _run(self, label: str, operation: WriteOperation) -> None:
        # Writes sharing a label target the same row and apply in submission order.
        lock = self._key_locks.setdefault(label, asyncio.Lock())
        self._key_waiters[label] = self._key_waiters.get(label, 0) + 1
        try:
            async with lock:
                await self._attempt(label, operation)
        finally:
            self._key_waiters[label] -= 1
            if not self._key_waiters[label]:
                del self._key_waiters[label]
                del self._key_locks[label]

    async def _attempt(self, label: str, operation: WriteOperation) -> None:
        attempts = self._retry_limit + 1
        for attempt in range(attempts):
            try:
                await operation()
                return
            except Exception as exc:
                if attempt < attempts - 1:
                    delay = min(self._base_delay * (2**attempt), self._max_delay)
                    logger.warning(
                        "Retry %s/%s for %s after %s. Waiting %ss...",
                        attempt + 1,
                        self._retry_limit,
                        label,
                        exc.__class__.__name__,
                        delay,
                    )
                    await self._sleep(delay)
                    continue
                logger.exception(
                    "Remote write %s failed after %s attempts", label, attempts
                )
                self._failures.append(
                    SyncFailure(
                        label=label,
                        error=str(exc) or exc.__class__.__name__,
                        attempts=attempts,
                        failed_at=datetime.now(timezone.utc),
                    )
                )

    async def drain(self) -> None:
        """Wait until every submitted write has finished."""

        while self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)

    async def close(self) -> None:
        await self.drain()
