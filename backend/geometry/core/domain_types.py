"""Domain Types — identity types that replace bare UUIDs across the codebase.

Invariants:
    - CubeId, CylinderId wrap UUIDs; never use bare UUID in domain logic
    - Identifiers are generated server-side by new_cube_id / new_cylinder_id

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
"""

from typing import NewType
from uuid import UUID, uuid4


# ─── Identity Types ──────────────────────────────────────────────

CubeId = NewType("CubeId", UUID)
CylinderId = NewType("CylinderId", UUID)


def new_cube_id() -> CubeId:
    return CubeId(uuid4())


def new_cylinder_id() -> CylinderId:
    return CylinderId(uuid4())
