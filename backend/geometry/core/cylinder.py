"""Cylinder Entity — identity plus strictly positive radius and height.

Invariants:
    - id is set once in __init__ and exposed read-only
    - radius > 0 and height > 0 on construction and after every assignment
    - NaN is rejected (comparison `not value > 0`)
"""

from geometry.core.domain_types import CylinderId
from geometry.core.errors import DimensionValidationError


def _require_positive(field: str, value: float) -> float:
    if not value > 0:
        raise DimensionValidationError(field)
    return value


class Cylinder:
    """Cylinder aggregate, validated on every write."""

    __slots__ = ("_id", "_radius", "_height")

    def __init__(self, cylinder_id: CylinderId, radius: float, height: float):
        self._id = cylinder_id
        self.radius = radius
        self.height = height

    @property
    def id(self) -> CylinderId:
        return self._id

    @property
    def radius(self) -> float:
        return self._radius

    @radius.setter
    def radius(self, value: float) -> None:
        self._radius = _require_positive("radius", value)

    @property
    def height(self) -> float:
        return self._height

    @height.setter
    def height(self, value: float) -> None:
        self._height = _require_positive("height", value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cylinder):
            return NotImplemented
        return (
            self._id == other._id
            and self._radius == other._radius
            and self._height == other._height
        )

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return (
            f"Cylinder(id={self._id}, radius={self._radius}, "
            f"height={self._height})"
        )
