"""Infrastructure Layer — database access, logging and metrics.

Invariants:
    - Database failures leave this layer as StoreError (core/errors.py)
"""
