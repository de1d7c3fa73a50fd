"""Cylinder Schemas — create/update requests and read response."""

from uuid import UUID

from geometry.schemas.base import CamelModel, RequestModel


class CreateCylinderRequest(RequestModel):
    """Body of POST /api/cylinder."""
    radius: float
    height: float


class UpdateCylinderRequest(RequestModel):
    """Body of PUT /api/cylinder/{id}; id must match the URL."""
    id: UUID
    radius: float
    height: float


class CylinderResponse(CamelModel):
    """Body of GET /api/cylinder/{id}."""
    id: UUID
    radius: float
    height: float
