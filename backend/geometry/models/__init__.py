"""ORM Models — storage rows for the geometry entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Rows carry no validation; entities in core/ own every invariant

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is complete before create_all/autogenerate
"""

from geometry.models.cube import CubeModel  # noqa: F401
from geometry.models.cylinder import CylinderModel  # noqa: F401
