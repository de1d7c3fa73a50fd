"""Cylinder Routes — create, read, update and delete for cylinders.

Invariants:
    - Create/update reject absent body or radius/height <= 0 with 400
    - Update rejects a body id that differs from the URL id with 400
    - Update/delete check existence first and return 404 when the row is absent
    - Any unanticipated failure becomes OperationFailedError (500, generic message)
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import JSONResponse

from geometry.api.mappers import cylinder as cylinder_dto
from geometry.core.domain_types import CylinderId
from geometry.core.errors import (
    BadRequestError, DimensionValidationError, DomainValidationError,
    ErrorContext, OperationFailedError, ResourceNotFoundError,
)
from geometry.infrastructure.cylinder_repository import SqlCylinderRepository
from geometry.infrastructure.database import DatabaseSessionManager, get_db_manager
from geometry.schemas.cylinder import (
    CreateCylinderRequest, UpdateCylinderRequest, CylinderResponse,
)
from geometry.services.cylinder_service import CylinderService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/cylinder", tags=["cylinder"])


def get_cylinder_service(
    db_manager: DatabaseSessionManager = Depends(get_db_manager),
) -> CylinderService:
    return CylinderService(SqlCylinderRepository(db_manager))


def _log(level: int, message: str, operation: str, outcome: str,
         cylinder_id: UUID | None = None, exc_info: bool = False) -> None:
    logger.log(
        level, message,
        extra={
            "entity_id": str(cylinder_id) if cylinder_id is not None else None,
            "operation": operation,
            "outcome": outcome,
        },
        exc_info=exc_info,
    )


def _check_dimensions(
    radius: float, height: float, operation: str, ctx: ErrorContext,
    cylinder_id: UUID | None = None,
) -> None:
    if radius <= 0:
        _log(logging.WARNING, f"{operation} called with invalid radius: {radius}",
             operation, "rejected", cylinder_id)
        raise DimensionValidationError("radius", ctx)
    if height <= 0:
        _log(logging.WARNING, f"{operation} called with invalid height: {height}",
             operation, "rejected", cylinder_id)
        raise DimensionValidationError("height", ctx)


@router.post(
    "", status_code=status.HTTP_201_CREATED,
    responses={400: {"description": "Invalid request"}},
)
async def create_cylinder(
    request: Request,
    body: CreateCylinderRequest | None = None,
    service: CylinderService = Depends(get_cylinder_service),
):
    """Create a cylinder and return its new id."""
    op = "create_cylinder"
    ctx = ErrorContext(operation=op)
    if body is None:
        _log(logging.WARNING, f"{op} called with null request", op, "rejected")
        raise BadRequestError("Request body cannot be null.", ctx)
    _check_dimensions(body.radius, body.height, op, ctx)

    try:
        cylinder = cylinder_dto.create_request_to_domain(body)
        cylinder_id = await service.insert(cylinder)
    except DomainValidationError as e:
        _log(logging.ERROR, f"Validation failed while creating cylinder: {e.message}",
             op, "rejected")
        raise
    except Exception as e:
        _log(logging.ERROR, f"Unexpected error while creating cylinder: {e}",
             op, "failed", exc_info=True)
        raise OperationFailedError(
            "An error occurred while creating the cylinder.", ctx,
        ) from e

    _log(logging.INFO,
         f"Cylinder created with radius {body.radius} and height {body.height}",
         op, "created", cylinder_id)
    location = request.url_for("get_cylinder_by_id", cylinder_id=str(cylinder_id))
    return JSONResponse(
        status_code=status.HTTP_201_CREATED,
        content=str(cylinder_id),
        headers={"Location": str(location)},
    )


@router.get(
    "/{cylinder_id}", response_model=CylinderResponse,
    name="get_cylinder_by_id",
    responses={404: {"description": "Cylinder not found"}},
)
async def get_cylinder_by_id(
    cylinder_id: UUID, service: CylinderService = Depends(get_cylinder_service),
):
    """Get a cylinder by id."""
    op = "read_cylinder"
    ctx = ErrorContext(entity_id=str(cylinder_id), operation=op)
    try:
        cylinder = await service.read_by_id(CylinderId(cylinder_id))
        response = None if cylinder is None else cylinder_dto.to_response(cylinder)
    except Exception as e:
        _log(logging.ERROR, f"Unexpected error while retrieving cylinder: {e}",
             op, "failed", cylinder_id, exc_info=True)
        raise OperationFailedError(
            "An error occurred while retrieving the cylinder.", ctx,
        ) from e

    if response is None:
        _log(logging.WARNING, f"Cylinder {cylinder_id} not found",
             op, "not_found", cylinder_id)
        raise ResourceNotFoundError("Cylinder", str(cylinder_id), ctx)

    _log(logging.INFO, f"Cylinder {cylinder_id} retrieved", op, "retrieved", cylinder_id)
    return response


@router.put(
    "/{cylinder_id}", status_code=status.HTTP_204_NO_CONTENT,
    responses={
        400: {"description": "Invalid request"},
        404: {"description": "Cylinder not found"},
    },
)
async def update_cylinder(
    cylinder_id: UUID,
    body: UpdateCylinderRequest | None = None,
    service: CylinderService = Depends(get_cylinder_service),
):
    """Replace a cylinder's dimensions."""
    op = "update_cylinder"
    ctx = ErrorContext(entity_id=str(cylinder_id), operation=op)
    if body is None:
        _log(logging.WARNING, f"{op} called with null request", op, "rejected", cylinder_id)
        raise BadRequestError("Request body cannot be null.", ctx)
    if body.id != cylinder_id:
        _log(logging.WARNING,
             f"{op} called with mismatched id. URL id: {cylinder_id}, body id: {body.id}",
             op, "rejected", cylinder_id)
        raise BadRequestError(
            "The Id in the URL does not match the Id in the request body.", ctx,
        )
    _check_dimensions(body.radius, body.height, op, ctx, cylinder_id)

    try:
        existing = await service.read_by_id(CylinderId(cylinder_id))
        if existing is not None:
            await service.update(cylinder_dto.update_request_to_domain(body))
    except DomainValidationError as e:
        _log(logging.ERROR, f"Validation failed while updating cylinder: {e.message}",
             op, "rejected", cylinder_id)
        raise
    except Exception as e:
        _log(logging.ERROR, f"Unexpected error while updating cylinder: {e}",
             op, "failed", cylinder_id, exc_info=True)
        raise OperationFailedError(
            "An error occurred while updating the cylinder.", ctx,
        ) from e

    if existing is None:
        _log(logging.WARNING, f"Cylinder {cylinder_id} not found for update",
             op, "not_found", cylinder_id)
        raise ResourceNotFoundError("Cylinder", str(cylinder_id), ctx)

    _log(logging.INFO, f"Cylinder {cylinder_id} updated", op, "updated", cylinder_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/{cylinder_id}", status_code=status.HTTP_204_NO_CONTENT,
    responses={404: {"description": "Cylinder not found"}},
)
async def delete_cylinder(
    cylinder_id: UUID, service: CylinderService = Depends(get_cylinder_service),
):
    """Delete a cylinder."""
    op = "delete_cylinder"
    ctx = ErrorContext(entity_id=str(cylinder_id), operation=op)
    try:
        existing = await service.read_by_id(CylinderId(cylinder_id))
        if existing is not None:
            await service.delete(CylinderId(cylinder_id))
    except Exception as e:
        _log(logging.ERROR, f"Unexpected error while deleting cylinder: {e}",
             op, "failed", cylinder_id, exc_info=True)
        raise OperationFailedError(
            "An error occurred while deleting the cylinder.", ctx,
        ) from e

    if existing is None:
        _log(logging.WARNING, f"Cylinder {cylinder_id} not found for deletion",
             op, "not_found", cylinder_id)
        raise ResourceNotFoundError("Cylinder", str(cylinder_id), ctx)

    _log(logging.INFO, f"Cylinder {cylinder_id} deleted", op, "deleted", cylinder_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
