"""Boundary Protocols — persistence contracts between core and shell.

Invariants:
    - Core NEVER imports from shell; dependency arrows point inward only
    - read_by_id returns None for an unknown id (never raises)
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Cube insert is an upsert; Cylinder insert always adds and has separate
      update/delete
"""

from typing import Protocol

from geometry.core.cube import Cube
from geometry.core.cylinder import Cylinder
from geometry.core.domain_types import CubeId, CylinderId


class CubeRepository(Protocol):
    """Contract for cube persistence, implemented by shell."""
    async def insert(self, cube: Cube) -> CubeId: ...
    async def read_by_id(self, cube_id: CubeId) -> Cube | None: ...


class CylinderRepository(Protocol):
    """Contract for cylinder persistence, implemented by shell."""
    async def insert(self, cylinder: Cylinder) -> CylinderId: ...
    async def read_by_id(self, cylinder_id: CylinderId) -> Cylinder | None: ...
    async def update(self, cylinder: Cylinder) -> None: ...
    async def delete(self, cylinder_id: CylinderId) -> None: ...
