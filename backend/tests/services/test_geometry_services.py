"""CubeService / CylinderService — pure delegation to the repository."""

from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from geometry.core.cube import Cube
from geometry.core.cylinder import Cylinder
from geometry.core.domain_types import CubeId, CylinderId
from geometry.services.cube_service import CubeService
from geometry.services.cylinder_service import CylinderService


async def test_cube_insert_delegates_and_returns_repository_id():
    cube = Cube(CubeId(uuid4()), 5)
    repo = AsyncMock()
    repo.insert.return_value = cube.id

    assert await CubeService(repo).insert(cube) == cube.id
    repo.insert.assert_awaited_once_with(cube)


async def test_cube_read_passes_through_none():
    repo = AsyncMock()
    repo.read_by_id.return_value = None
    cube_id = CubeId(uuid4())

    assert await CubeService(repo).read_by_id(cube_id) is None
    repo.read_by_id.assert_awaited_once_with(cube_id)


async def test_cylinder_operations_delegate():
    cylinder = Cylinder(CylinderId(uuid4()), 1.0, 2.0)
    repo = AsyncMock()
    repo.insert.return_value = cylinder.id
    repo.read_by_id.return_value = cylinder
    service = CylinderService(repo)

    assert await service.insert(cylinder) == cylinder.id
    assert await service.read_by_id(cylinder.id) is cylinder
    await service.update(cylinder)
    await service.delete(cylinder.id)

    repo.update.assert_awaited_once_with(cylinder)
    repo.delete.assert_awaited_once_with(cylinder.id)


async def test_repository_errors_propagate():
    repo = AsyncMock()
    repo.insert.side_effect = RuntimeError("storage down")
    with pytest.raises(RuntimeError):
        await CylinderService(repo).insert(Cylinder(CylinderId(uuid4()), 1.0, 1.0))


def test_unwired_service_constructs():
    CubeService(None)
    CylinderService(None)


async def test_unwired_service_fails_at_point_of_use():
    with pytest.raises(AttributeError):
        await CubeService(None).read_by_id(CubeId(uuid4()))
    with pytest.raises(AttributeError):
        await CylinderService(None).delete(CylinderId(uuid4()))
