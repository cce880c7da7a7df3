"""Composition Root — binds concrete infrastructure into the generic services.

Invariants:
    - stored_value.get_x is the FetchX injected into services.add_stored_value
    - The configured timeout wraps the fetch at the infrastructure boundary only
    - Failures propagate to the caller
"""

from layered_add.config import get_settings
from layered_add.infrastructure import stored_value
from layered_add.services import add_stored_value


async def add(y: int) -> int:
    """Add y to the stored value."""
    get_x = stored_value.with_timeout(
        stored_value.get_x, get_settings().fetch_timeout_seconds,
    )
    return await add_stored_value.add(get_x, y)
