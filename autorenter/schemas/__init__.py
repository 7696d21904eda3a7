"""Pydantic Schemas — request/response contracts for API endpoints.

Invariants:
    - Schemas validate types and lengths at the system boundary
    - Required-field rules live in core/validate_entities.py, not here,
      so missing fields reach the validation gate and yield BAD_REQUEST

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
    - to_entity()/from_entity() are the only projections between the two
"""
