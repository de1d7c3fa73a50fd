"""Cube Routes — create and read-by-id for cubes.

Invariants:
    - Absent body or sideLength <= 0 rejected with 400 before touching the service
    - DomainValidationError from deeper layers surfaces as 400 with its message
    - Any other failure becomes OperationFailedError (500, generic message)
    - Every branch logs one event with entity_id, operation, outcome

Design Decisions:
    - Service built per request from the shared DatabaseSessionManager
    - 201 body is the bare id; Location points at get_cube_by_id
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from geometry.api.mappers import cube as cube_dto
from geometry.core.domain_types import CubeId
from geometry.core.errors import (
    BadRequestError, DimensionValidationError, DomainValidationError,
    ErrorContext, OperationFailedError, ResourceNotFoundError,
)
from geometry.infrastructure.cube_repository import SqlCubeRepository
from geometry.infrastructure.database import DatabaseSessionManager, get_db_manager
from geometry.schemas.cube import CreateCubeRequest, CubeResponse
from geometry.services.cube_service import CubeService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/cube", tags=["cube"])


def get_cube_service(
    db_manager: DatabaseSessionManager = Depends(get_db_manager),
) -> CubeService:
    return CubeService(SqlCubeRepository(db_manager))


@router.post(
    "", status_code=status.HTTP_201_CREATED,
    responses={400: {"description": "Invalid request"}},
)
async def create_cube(
    request: Request,
    body: CreateCubeRequest | None = None,
    service: CubeService = Depends(get_cube_service),
):
    """Create a cube and return its new id."""
    ctx = ErrorContext(operation="create_cube")
    if body is None:
        logger.warning(
            "create_cube called with null request",
            extra={"operation": "create_cube", "outcome": "rejected"},
        )
        raise BadRequestError("Request body cannot be null.", ctx)
    if body.side_length <= 0:
        logger.warning(
            f"create_cube called with invalid side length: {body.side_length}",
            extra={"operation": "create_cube", "outcome": "rejected"},
        )
        raise DimensionValidationError("sideLength", ctx)

    try:
        cube = cube_dto.create_request_to_domain(body)
        cube_id = await service.insert(cube)
    except DomainValidationError as e:
        logger.error(
            f"Validation failed while creating cube: {e.message}",
            extra={"operation": "create_cube", "outcome": "rejected"},
        )
        raise
    except Exception as e:
        logger.error(
            f"Unexpected error while creating cube: {e}",
            extra={"operation": "create_cube", "outcome": "failed"},
            exc_info=True,
        )
        raise OperationFailedError(
            "An error occurred while creating the cube.", ctx,
        ) from e

    logger.info(
        f"Cube created with side length {body.side_length}",
        extra={
            "entity_id": str(cube_id), "operation": "create_cube",
            "outcome": "created",
        },
    )
    location = request.url_for("get_cube_by_id", cube_id=str(cube_id))
    return JSONResponse(
        status_code=status.HTTP_201_CREATED,
        content=str(cube_id),
        headers={"Location": str(location)},
    )


@router.get(
    "/{cube_id}", response_model=CubeResponse, name="get_cube_by_id",
    responses={404: {"description": "Cube not found"}},
)
async def get_cube_by_id(
    cube_id: UUID, service: CubeService = Depends(get_cube_service),
):
    """Get a cube by id."""
    ctx = ErrorContext(entity_id=str(cube_id), operation="read_cube")
    try:
        cube = await service.read_by_id(CubeId(cube_id))
        response = None if cube is None else cube_dto.to_response(cube)
    except Exception as e:
        logger.error(
            f"Unexpected error while retrieving cube {cube_id}: {e}",
            extra={
                "entity_id": str(cube_id), "operation": "read_cube",
                "outcome": "failed",
            },
            exc_info=True,
        )
        raise OperationFailedError(
            "An error occurred while retrieving the cube.", ctx,
        ) from e

    if response is None:
        logger.warning(
            f"Cube {cube_id} not found",
            extra={
                "entity_id": str(cube_id), "operation": "read_cube",
                "outcome": "not_found",
            },
        )
        raise ResourceNotFoundError("Cube", str(cube_id), ctx)

    logger.info(
        f"Cube {cube_id} retrieved",
        extra={
            "entity_id": str(cube_id), "operation": "read_cube",
            "outcome": "retrieved",
        },
    )
    return response
