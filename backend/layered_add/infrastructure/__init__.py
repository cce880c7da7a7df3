"""Infrastructure Layer — concrete IO implementations and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from services/ or api/
    - Failures surfaced as LayeredAddError subclasses (core/errors.py)
"""
