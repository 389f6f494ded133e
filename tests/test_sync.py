"""Tests for background persistence with retries."""

from __future__ import annotations

import asyncio
from datetime import timezone

import pytest

from app.config import Settings
from app.services.sync import SyncQueue


@pytest.fixture
def anyio_backend() -> str:
    """Force AnyIO tests to run on asyncio without requiring trio."""

    return "asyncio"


def build_queue(delays: list[float], **overrides: object) -> SyncQueue:
    base = {
        "SYNC_RETRY_LIMIT": 2,
        "SYNC_RETRY_BASE_DELAY": 0.5,
        "SYNC_RETRY_MAX_DELAY": 0.75,
    }
    base.update(overrides)
    settings = Settings(_env_file=None, **base)  # type: ignore[arg-type]

    async def fake_sleep(delay: float) -> None:
        delays.append(delay)

    return SyncQueue(settings, sleep=fake_sleep)


@pytest.mark.anyio("asyncio")
async def test_submit_returns_before_the_write_runs() -> None:
    calls: list[str] = []
    queue = build_queue([])

    async def write() -> None:
        calls.append("written")

    queue.submit("u1:profiles", write)
    assert calls == []
    assert queue.pending == 1

    await queue.drain()

    assert calls == ["written"]
    assert queue.pending == 0
    assert queue.failures == []


@pytest.mark.anyio("asyncio")
async def test_transient_failures_are_retried_with_backoff() -> None:
    delays: list[float] = []
    attempts: list[int] = []
    queue = build_queue(delays)

    async def flaky() -> None:
        attempts.append(1)
        if len(attempts) < 3:
            raise ConnectionError("offline")

    queue.submit("u1:user_logs:heat", flaky)
    await queue.drain()

    assert len(attempts) == 3
    assert delays == [0.5, 0.75]
    assert queue.failures == []


@pytest.mark.anyio("asyncio")
async def test_exhausted_write_is_recorded_not_raised(caplog: pytest.LogCaptureFixture) -> None:
    queue = build_queue([], SYNC_RETRY_LIMIT=1)

    async def broken() -> None:
        raise RuntimeError("constraint violated")

    with caplog.at_level("ERROR"):
        queue.submit("u1:custom_lists:custom_x", broken)
        queue.submit("u2:vault:kubrick", broken)
        await queue.drain()

    assert [failure.label for failure in queue.failures] == [
        "u1:custom_lists:custom_x",
        "u2:vault:kubrick",
    ]
    failure = queue.failures_for("u1:")[0]
    assert failure.attempts == 2
    assert failure.error == "constraint violated"
    assert failure.failed_at.tzinfo is timezone.utc
    assert failure.to_payload()["label"] == "u1:custom_lists:custom_x"
    assert "u1:custom_lists:custom_x" in caplog.text


@pytest.mark.anyio("asyncio")
async def test_writes_to_the_same_row_apply_in_submission_order() -> None:
    queue = build_queue([])
    applied: list[str] = []

    async def slow_first() -> None:
        for _ in range(5):
            await asyncio.sleep(0)
        applied.append("first")

    async def fast_second() -> None:
        applied.append("second")

    async def unrelated() -> None:
        applied.append("other")

    queue.submit("u1:custom_lists:custom_x", slow_first)
    queue.submit("u1:custom_lists:custom_x", fast_second)
    queue.submit("u1:vault:kubrick", unrelated)
    await queue.drain()

    assert applied.index("first") < applied.index("second")
    assert applied[0] == "other"
    assert queue._key_locks == {}


@pytest.mark.anyio("asyncio")
async def test_row_locks_are_released_once_writes_finish() -> None:
    queue = build_queue([], SYNC_RETRY_LIMIT=0)

    async def write() -> None:
        await asyncio.sleep(0)

    async def broken() -> None:
        raise RuntimeError("offline")

    for index in range(500):
        queue.submit(f"u1:user_logs:film-{index}", write)
    queue.submit("u1:user_logs:film-0", write)
    queue.submit("u1:vault:kubrick", broken)

    await queue.drain()

    assert queue.pending == 0
    assert queue._key_locks == {}
    assert queue._key_waiters == {}
    assert [failure.label for failure in queue.failures] == ["u1:vault:kubrick"]
