"""Cylinder DTO Mapper — create/update requests -> Cylinder -> CylinderResponse.

Invariants:
    - create_request_to_domain assigns a fresh CylinderId
    - update_request_to_domain reuses the caller-supplied id
"""

from geometry.core.cylinder import Cylinder
from geometry.core.domain_types import CylinderId, new_cylinder_id
from geometry.schemas.cylinder import (
    CreateCylinderRequest, UpdateCylinderRequest, CylinderResponse,
)


def create_request_to_domain(request: CreateCylinderRequest) -> Cylinder:
    return Cylinder(new_cylinder_id(), request.radius, request.height)


def update_request_to_domain(request: UpdateCylinderRequest) -> Cylinder:
    return Cylinder(CylinderId(request.id), request.radius, request.height)


def to_response(cylinder: Cylinder) -> CylinderResponse:
    return CylinderResponse(
        id=cylinder.id, radius=cylinder.radius, height=cylinder.height,
    )
