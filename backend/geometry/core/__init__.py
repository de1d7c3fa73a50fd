"""Core Layer — entities, identity types, errors and repository protocols.

Invariants:
    - No IO, no framework imports (FastAPI/SQLAlchemy live in the shell)
"""
