"""Infrastructure Layer — database engine and logging setup.

Invariants:
    - Initialized once from the FastAPI lifespan, never at import time
"""
