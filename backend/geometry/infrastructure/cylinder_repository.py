"""Cylinder Repository — SQLAlchemy implementation of the CylinderRepository protocol.

Invariants:
    - insert always adds a row; a duplicate id fails at commit (DatabaseError)
    - update issues UPDATE ... WHERE id; no matching row means no change
    - delete of an unknown id is a no-op
"""

from sqlalchemy import update

from geometry.core.cylinder import Cylinder
from geometry.core.domain_types import CylinderId
from geometry.core.errors import NullArgumentError
from geometry.infrastructure import cylinder_mapper
from geometry.infrastructure.database import DatabaseSessionManager
from geometry.models.cylinder import CylinderModel


class SqlCylinderRepository:
    """Cylinder persistence over an async SQLAlchemy session manager."""

    def __init__(self, db_manager: DatabaseSessionManager):
        if db_manager is None:
            raise NullArgumentError("db_manager")
        self._db_manager = db_manager

    async def read_by_id(self, cylinder_id: CylinderId) -> Cylinder | None:
        async with self._db_manager.session() as db:
            row = await db.get(CylinderModel, cylinder_id)
            return None if row is None else cylinder_mapper.to_domain(row)

    async def insert(self, cylinder: Cylinder) -> CylinderId:
        row = cylinder_mapper.to_row(cylinder)
        async with self._db_manager.session() as db:
            db.add(row)
            await db.commit()
        return CylinderId(row.id)

    async def update(self, cylinder: Cylinder) -> None:
        row = cylinder_mapper.to_row(cylinder)
        async with self._db_manager.session() as db:
            await db.execute(
                update(CylinderModel)
                .where(CylinderModel.id == row.id)
                .values(radius=row.radius, height=row.height)
            )
            await db.commit()

    async def delete(self, cylinder_id: CylinderId) -> None:
        async with self._db_manager.session() as db:
            row = await db.get(CylinderModel, cylinder_id)
            if row is not None:
                await db.delete(row)
                await db.commit()
