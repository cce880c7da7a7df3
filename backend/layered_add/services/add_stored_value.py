"""Add Stored Value — awaits the injected fetch, then delegates to core arithmetic.

Invariants:
    - get_x invoked exactly once per call
    - Fetch failures propagate unchanged; core.add is not reached
    - No knowledge of how get_x is implemented
"""

import logging

from layered_add.core import arithmetic
from layered_add.core.value_source_protocols import FetchX

logger = logging.getLogger(__name__)


async def add(get_x: FetchX, y: int) -> int:
    """Add y to the value produced by get_x."""
    x = await get_x()
    result = arithmetic.add(x, y)
    logger.debug(
        f"Added operand {y} to stored value: {result}",
        extra={"operand": y, "result": result},
    )
    return result
