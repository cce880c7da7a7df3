"""Process Entry Point — adds 3 to the stored value and prints the outcome.

Invariants:
    - Exit status is 0 whether the call succeeds or fails
    - Failures are reported in the printed line, never re-raised
"""

import asyncio
import logging

from layered_add.api import compose
from layered_add.config import get_settings
from layered_add.infrastructure.observability import setup_logging
from layered_add.infrastructure.stored_value import STORED_VALUE

logger = logging.getLogger(__name__)

OPERAND = 3


def format_outcome(y: int, result: int | None = None, error: Exception | None = None) -> str:
    """Render the Ok/Err line printed by the entry point."""
    outcome = f"Err({error})" if error is not None else f"Ok({result})"
    return f"When we add {y} to the DB value ({STORED_VALUE}), we get {outcome}"


async def run(y: int) -> str:
    try:
        result = await compose.add(y)
    except Exception as e:
        logger.error(f"Add failed for operand {y}: {e}", exc_info=True)
        return format_outcome(y, error=e)
    return format_outcome(y, result=result)


def main() -> None:
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    print(asyncio.run(run(OPERAND)))


if __name__ == "__main__":
    main()
