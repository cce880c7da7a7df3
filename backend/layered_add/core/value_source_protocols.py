"""Boundary Protocols — contract between the services layer and whatever supplies the stored value.

Invariants:
    - Services depend on FetchX only, never on a concrete implementation
    - A FetchX call completes exactly once with an int or raises
    - Implementations provided by the api layer via dependency injection

Design Decisions:
    - Protocol over ABC: any plain ``async def get_x() -> int`` satisfies it structurally
"""

from typing import Protocol


class FetchX(Protocol):
    """Zero-argument async operation producing the stored operand."""
    async def __call__(self) -> int: ...
