"""Cube DTO Mapper — CreateCubeRequest -> Cube -> CubeResponse.

Invariants:
    - create_request_to_domain always assigns a fresh CubeId
    - Both functions reject None with NullArgumentError
"""

from geometry.core.cube import Cube
from geometry.core.domain_types import new_cube_id
from geometry.core.errors import NullArgumentError
from geometry.schemas.cube import CreateCubeRequest, CubeResponse


def to_response(cube: Cube | None) -> CubeResponse:
    if cube is None:
        raise NullArgumentError("cube")
    return CubeResponse(id=cube.id, side_length=cube.side_length)


def create_request_to_domain(request: CreateCubeRequest | None) -> Cube:
    if request is None:
        raise NullArgumentError("request")
    return Cube(new_cube_id(), request.side_length)
