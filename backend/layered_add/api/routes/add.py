"""Add Route — exposes the composition root over HTTP.

Invariants:
    - Non-integer operands rejected by FastAPI validation (400 via error handlers)
    - Fetch failures surface through the LayeredAddError handler
"""

import logging

from fastapi import APIRouter

from layered_add.api import compose
from layered_add.schemas.add import AddResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/add", tags=["add"])


@router.get("/{y}", response_model=AddResponse)
async def add_to_stored_value(y: int):
    result = await compose.add(y)
    logger.info(f"Add request for operand {y}", extra={"operand": y})
    return AddResponse(operand=y, result=result)
