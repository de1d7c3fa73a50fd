"""Cube ORM — flat storage row mirroring the Cube entity's public fields.

Invariants:
    - id is UUID primary key, supplied by the caller (no default)
    - side_length is non-nullable; positivity is NOT checked here
"""

import uuid

from sqlalchemy import Integer, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from geometry.db.base import Base


class CubeModel(Base):
    """Cube storage row."""
    __tablename__ = "cubes"

    id: Mapped[uuid.UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True)
    side_length: Mapped[int] = mapped_column(Integer, nullable=False)
