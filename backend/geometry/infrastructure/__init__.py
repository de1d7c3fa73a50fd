"""Infrastructure Layer — database session management, repositories and logging.

Invariants:
    - Repositories implement the protocols in core/repository_protocols.py
    - All SQLAlchemy errors leave this layer as DatabaseError
"""
