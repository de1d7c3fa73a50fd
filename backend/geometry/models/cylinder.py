"""Cylinder ORM — flat storage row mirroring the Cylinder entity's public fields.

Invariants:
    - id is UUID primary key, supplied by the caller (no default)
    - radius and height are non-nullable; positivity is NOT checked here
"""

import uuid

from sqlalchemy import Float, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from geometry.db.base import Base


class CylinderModel(Base):
    """Cylinder storage row."""
    __tablename__ = "cylinders"

    id: Mapped[uuid.UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True)
    radius: Mapped[float] = mapped_column(Float, nullable=False)
    height: Mapped[float] = mapped_column(Float, nullable=False)
