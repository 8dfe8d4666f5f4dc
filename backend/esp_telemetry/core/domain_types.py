"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - EpochSeconds is whole seconds since 1970-01-01T00:00:00Z (UTC)

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
"""

from typing import NewType


# ─── Value Types ─────────────────────────────────────────────────

EpochSeconds = NewType("EpochSeconds", int)
