"""Cylinder Row Mapper — Cylinder entity <-> CylinderModel storage row."""

from geometry.core.cylinder import Cylinder
from geometry.core.domain_types import CylinderId
from geometry.models.cylinder import CylinderModel


def to_row(cylinder: Cylinder) -> CylinderModel:
    return CylinderModel(
        id=cylinder.id, radius=cylinder.radius, height=cylinder.height,
    )


def to_domain(row: CylinderModel) -> Cylinder:
    return Cylinder(CylinderId(row.id), row.radius, row.height)
