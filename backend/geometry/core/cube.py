"""Cube Entity — identity plus a strictly positive integer side length.

Invariants:
    - id is set once in __init__ and exposed read-only
    - side_length > 0 on construction and after every assignment
    - A rejected assignment leaves the previous side_length in place
"""

from geometry.core.domain_types import CubeId
from geometry.core.errors import DimensionValidationError


class Cube:
    """Cube aggregate, validated on every write."""

    __slots__ = ("_id", "_side_length")

    def __init__(self, cube_id: CubeId, side_length: int):
        self._id = cube_id
        self.side_length = side_length

    @property
    def id(self) -> CubeId:
        return self._id

    @property
    def side_length(self) -> int:
        return self._side_length

    @side_length.setter
    def side_length(self, value: int) -> None:
        if not value > 0:
            raise DimensionValidationError("sideLength")
        self._side_length = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cube):
            return NotImplemented
        return self._id == other._id and self._side_length == other._side_length

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"Cube(id={self._id}, side_length={self._side_length})"
