"""Core Layer — domain rules with no IO, no async, no DB.

Invariants:
    - No module in core/ imports from api/, infrastructure/, or db/
    - Functions are pure; the clock is injected where time matters
"""
