"""Cube Schemas — create request and read response."""

from uuid import UUID

from pydantic import StrictInt

from geometry.schemas.base import CamelModel, RequestModel


class CreateCubeRequest(RequestModel):
    """Body of POST /api/cube. Booleans and numeric strings are not ints."""
    side_length: StrictInt


class CubeResponse(CamelModel):
    """Body of GET /api/cube/{id}."""
    id: UUID
    side_length: int
