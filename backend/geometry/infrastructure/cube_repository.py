"""Cube Repository — SQLAlchemy implementation of the CubeRepository protocol.

Invariants:
    - insert is an upsert: an existing row with the same id has its side_length overwritten
    - read_by_id returns None for an unknown id
    - One session per call, committed before returning

Design Decisions:
    - Session scope per call (not per request): the repository owns the unit of work
"""

import logging

from geometry.core.cube import Cube
from geometry.core.domain_types import CubeId
from geometry.core.errors import NullArgumentError
from geometry.infrastructure import cube_mapper
from geometry.infrastructure.database import DatabaseSessionManager
from geometry.models.cube import CubeModel

logger = logging.getLogger(__name__)


class SqlCubeRepository:
    """Cube persistence over an async SQLAlchemy session manager."""

    def __init__(self, db_manager: DatabaseSessionManager):
        if db_manager is None:
            raise NullArgumentError("db_manager")
        self._db_manager = db_manager

    async def read_by_id(self, cube_id: CubeId) -> Cube | None:
        async with self._db_manager.session() as db:
            row = await db.get(CubeModel, cube_id)
            return None if row is None else cube_mapper.to_domain(row)

    async def insert(self, cube: Cube) -> CubeId:
        if cube is None:
            raise NullArgumentError("cube")

        async with self._db_manager.session() as db:
            existing = await db.get(CubeModel, cube.id)
            if existing is not None:
                existing.side_length = cube.side_length
                logger.debug(
                    f"Overwriting cube {cube.id}",
                    extra={"entity_id": str(cube.id), "operation": "insert"},
                )
            else:
                db.add(cube_mapper.to_row(cube))
            await db.commit()

        return cube.id
