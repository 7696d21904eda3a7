"""Database Package — declarative base and startup data.

Invariants:
    - All ORM models share the single Base in db/base.py
"""
