"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate at system boundary (user input, API responses)
    - Core dataclasses converted at the edge (to_domain/from_domain)

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
