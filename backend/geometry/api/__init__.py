"""API Layer — FastAPI routes, DTO mappers and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All error responses share the GeometryError envelope
"""
