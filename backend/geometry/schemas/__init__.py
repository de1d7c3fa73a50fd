"""Pydantic Schemas — request/response DTOs for API endpoints.

Invariants:
    - Wire format is camelCase (sideLength); Python attributes are snake_case
    - Dimension positivity is NOT enforced here; routes check it and name the field
    - Request bodies accept finite numbers only; sideLength must be a JSON integer

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
