"""Cube Row Mapper — Cube entity <-> CubeModel storage row.

Invariants:
    - Field-for-field copy, no transformation
    - Both directions reject None with NullArgumentError
"""

from geometry.core.cube import Cube
from geometry.core.domain_types import CubeId
from geometry.core.errors import NullArgumentError
from geometry.models.cube import CubeModel


def to_row(cube: Cube | None) -> CubeModel:
    if cube is None:
        raise NullArgumentError("cube")
    return CubeModel(id=cube.id, side_length=cube.side_length)


def to_domain(row: CubeModel | None) -> Cube:
    if row is None:
        raise NullArgumentError("row")
    return Cube(CubeId(row.id), row.side_length)
