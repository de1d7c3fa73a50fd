"""Cube entity — side length must stay strictly positive.

Tests:
    - Construction with sideLength <= 0 raises DimensionValidationError naming the field
    - Assignment applies the same check and keeps the prior value on failure
    - id is read-only
"""

from uuid import uuid4

import pytest

from geometry.core.cube import Cube
from geometry.core.domain_types import CubeId
from geometry.core.errors import DimensionValidationError


@pytest.mark.parametrize("side_length", [1, 5, 10_000])
def test_valid_side_length_round_trips(side_length):
    cube_id = CubeId(uuid4())
    cube = Cube(cube_id, side_length)
    assert cube.id == cube_id
    assert cube.side_length == side_length


@pytest.mark.parametrize("side_length", [0, -1, -100])
def test_non_positive_side_length_rejected_on_construction(side_length):
    with pytest.raises(DimensionValidationError) as exc_info:
        Cube(CubeId(uuid4()), side_length)
    assert exc_info.value.field == "sideLength"
    assert "must be greater than 0" in exc_info.value.message


def test_assignment_accepts_positive_value():
    cube = Cube(CubeId(uuid4()), 3)
    cube.side_length = 7
    assert cube.side_length == 7


@pytest.mark.parametrize("side_length", [0, -5])
def test_rejected_assignment_keeps_previous_value(side_length):
    cube = Cube(CubeId(uuid4()), 3)
    with pytest.raises(DimensionValidationError):
        cube.side_length = side_length
    assert cube.side_length == 3


def test_id_is_read_only():
    cube = Cube(CubeId(uuid4()), 3)
    with pytest.raises(AttributeError):
        cube.id = uuid4()


def test_equality_compares_id_and_fields():
    cube_id = CubeId(uuid4())
    assert Cube(cube_id, 4) == Cube(cube_id, 4)
    assert Cube(cube_id, 4) != Cube(cube_id, 5)
    assert Cube(cube_id, 4) != Cube(CubeId(uuid4()), 4)
