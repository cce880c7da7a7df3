"""Arithmetic — the pure calculation the rest of the stack is built around.

Invariants:
    - add is total over int: no error conditions, no side effects
"""


def add(x: int, y: int) -> int:
    return x + y
