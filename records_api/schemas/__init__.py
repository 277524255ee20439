"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate at the system boundary (enum membership, JSON types)
    - Domain enums from core/ used for every enum field

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
