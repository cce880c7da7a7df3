"""Layered Add — a four-layer example: pure core, IO-agnostic services, concrete infrastructure, wiring api.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""

__version__ = "1.0.0"
