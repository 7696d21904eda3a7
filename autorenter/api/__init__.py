"""API Layer — FastAPI routes, controllers and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Routes delegate to controllers; controllers delegate to services

Design Decisions:
    - Status codes decided in one place (respond.py via core.map_result_code)
"""
