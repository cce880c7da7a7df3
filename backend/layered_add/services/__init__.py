"""Services Layer — async orchestration around pure core functions.

Invariants:
    - Services receive IO capabilities as parameters (core/value_source_protocols.py)
    - Services never import from infrastructure/ or api/
"""
