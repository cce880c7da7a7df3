"""Stored Value Source — verifies the constant fetch and the timeout wrapper.

Tests:
    - get_x yields STORED_VALUE (7)
    - with_timeout(None) is the identity
    - Slow fetch → FetchTimeoutError; other errors pass through unchanged
"""

import asyncio

import pytest

from layered_add.core.errors import FetchTimeoutError
from layered_add.infrastructure import stored_value


async def test_get_x_returns_seven():
    assert stored_value.STORED_VALUE == 7
    assert await stored_value.get_x() == 7


def test_no_timeout_returns_fetch_unwrapped():
    assert stored_value.with_timeout(stored_value.get_x, None) is stored_value.get_x


async def test_timeout_passes_value_through():
    fetch = stored_value.with_timeout(stored_value.get_x, 1.0)
    assert await fetch() == 7


async def test_slow_fetch_raises_timeout():
    async def slow_fetch() -> int:
        await asyncio.sleep(5)
        return 1

    fetch = stored_value.with_timeout(slow_fetch, 0.01)

    with pytest.raises(FetchTimeoutError) as exc_info:
        await fetch()
    assert exc_info.value.seconds == 0.01


async def test_other_errors_pass_through():
    error = ConnectionError("db down")

    async def broken_fetch() -> int:
        raise error

    fetch = stored_value.with_timeout(broken_fetch, 1.0)

    with pytest.raises(ConnectionError) as exc_info:
        await fetch()
    assert exc_info.value is error


async def test_timeout_logs_warning(caplog):
    async def slow_fetch() -> int:
        await asyncio.sleep(5)
        return 1

    with caplog.at_level("WARNING", logger="layered_add.infrastructure.stored_value"):
        with pytest.raises(FetchTimeoutError):
            await stored_value.with_timeout(slow_fetch, 0.01)()

    assert any(getattr(r, "timeout_seconds", None) == 0.01 for r in caplog.records)


async def test_fetch_own_timeout_error_passes_through(caplog):
    error = TimeoutError("db driver timed out")

    async def driver_timeout_fetch() -> int:
        raise error

    fetch = stored_value.with_timeout(driver_timeout_fetch, 5.0)

    with caplog.at_level("WARNING", logger="layered_add.infrastructure.stored_value"):
        with pytest.raises(TimeoutError) as exc_info:
            await fetch()

    assert exc_info.value is error
    assert not isinstance(exc_info.value, FetchTimeoutError)
    assert not any("timed out after" in r.getMessage() for r in caplog.records)


async def test_timeout_error_is_not_chained():
    async def slow_fetch() -> int:
        await asyncio.sleep(5)
        return 1

    with pytest.raises(FetchTimeoutError) as exc_info:
        await stored_value.with_timeout(slow_fetch, 0.01)()

    assert exc_info.value.__cause__ is None
    assert exc_info.value.__context__ is None


async def test_slow_fetch_is_cancelled_on_timeout():
    cancelled = asyncio.Event()

    async def slow_fetch() -> int:
        try:
            await asyncio.sleep(5)
        except asyncio.CancelledError:
            cancelled.set()
            raise
        return 1

    with pytest.raises(FetchTimeoutError):
        await stored_value.with_timeout(slow_fetch, 0.01)()

    assert cancelled.is_set()
