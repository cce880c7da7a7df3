"""Stored Value Source — concrete FetchX implementation plus a timeout wrapper.

Invariants:
    - get_x always succeeds with STORED_VALUE
    - with_timeout raises FetchTimeoutError only when its own deadline fired;
      every exception from the wrapped fetch, TimeoutError included, passes through unchanged
    - with_timeout(fetch, None) returns fetch itself
"""

import asyncio
import logging

from layered_add.core.errors import FetchTimeoutError
from layered_add.core.value_source_protocols import FetchX

logger = logging.getLogger(__name__)

STORED_VALUE = 7


async def get_x() -> int:
    """Fetch the stored operand. Stands in for a database round-trip."""
    logger.debug("Fetching stored value")
    return STORED_VALUE


def with_timeout(fetch: FetchX, seconds: float | None) -> FetchX:
    """Bound a fetch by a deadline, leaving its shape unchanged."""
    if seconds is None:
        return fetch

    async def fetch_with_timeout() -> int:
        task = asyncio.ensure_future(fetch())
        try:
            done, _ = await asyncio.wait({task}, timeout=seconds)
        except asyncio.CancelledError:
            task.cancel()
            raise
        if task in done:
            return task.result()

        task.cancel()
        await asyncio.wait({task})
        logger.warning(
            f"Stored value fetch timed out after {seconds}s",
            extra={"timeout_seconds": seconds},
        )
        raise FetchTimeoutError(seconds)

    return fetch_with_timeout
