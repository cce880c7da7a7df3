"""API Layer — composition root, FastAPI routes, and error handlers.

Invariants:
    - compose.py is the only place concrete infrastructure is chosen
    - Routes never contain business logic (delegate to compose)
"""
