"""Services Layer — per-entity application services.

Invariants:
    - Services delegate to a repository protocol and add no logic of their own
"""
