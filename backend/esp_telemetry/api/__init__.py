"""API Layer — FastAPI routes, dependencies, middleware and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Success paths return JSON (or the dashboard HTML); error paths return the error envelope
"""
