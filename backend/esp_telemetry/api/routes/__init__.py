"""Route Modules — one file per resource/concern.

Invariants:
    - Each module defines its own APIRouter
    - Routes delegate rules to core/ and persistence to infrastructure/
"""
