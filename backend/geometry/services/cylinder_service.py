"""Cylinder Service — application entry point for cylinder operations.

Invariants:
    - Pure delegation to the CylinderRepository
    - Existence checks before update/delete belong to the caller
"""

from geometry.core.cylinder import Cylinder
from geometry.core.domain_types import CylinderId
from geometry.core.repository_protocols import CylinderRepository


class CylinderService:
    """Cylinder operations exposed to the API layer."""

    def __init__(self, repository: CylinderRepository | None):
        self._repository = repository

    async def insert(self, cylinder: Cylinder) -> CylinderId:
        return await self._repository.insert(cylinder)

    async def read_by_id(self, cylinder_id: CylinderId) -> Cylinder | None:
        return await self._repository.read_by_id(cylinder_id)

    async def update(self, cylinder: Cylinder) -> None:
        await self._repository.update(cylinder)

    async def delete(self, cylinder_id: CylinderId) -> None:
        await self._repository.delete(cylinder_id)
