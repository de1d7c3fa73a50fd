"""Cube Service — application entry point for cube operations.

Invariants:
    - Pure delegation to the CubeRepository (no validation, no transformation)
    - An unwired repository (None) fails at the point of use, not at construction
"""

from geometry.core.cube import Cube
from geometry.core.domain_types import CubeId
from geometry.core.repository_protocols import CubeRepository


class CubeService:
    """Cube operations exposed to the API layer."""

    def __init__(self, repository: CubeRepository | None):
        self._repository = repository

    async def insert(self, cube: Cube) -> CubeId:
        return await self._repository.insert(cube)

    async def read_by_id(self, cube_id: CubeId) -> Cube | None:
        return await self._repository.read_by_id(cube_id)
