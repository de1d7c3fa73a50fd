"""Geometry Application Package — REST CRUD service for cubes and cylinders.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
