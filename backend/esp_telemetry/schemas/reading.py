"""Reading Schemas — wire contracts for the /data endpoint.

Invariants:
    - Wire names are camelCase (tempCo, tempRoom) to match the device firmware
    - ReadingPayload.tempCo / tempRoom are required numbers; JSON integers accepted
    - ReadingPayload.timestamp is optional; null is treated as absent
    - Unknown fields are ignored, never rejected

Design Decisions:
    - strict=True on numeric fields: "25.5" (string) is a validation error, not a coercion
    - allow_inf_nan=False: Infinity, NaN and overflowing literals like 1e400 are rejected
    - Aliases only, no population by field name: temp_co / temp_room on the wire are ignored
    - ReadingResponse uses serialization_alias only: built from ORM attributes by
      field name, emitted with camelCase keys
"""

from pydantic import BaseModel, ConfigDict, Field

BIGINT_MIN = -(2 ** 63)
BIGINT_MAX = 2 ** 63 - 1


class ReadingPayload(BaseModel):
    """Inbound reading as POSTed by the device."""
    model_config = ConfigDict(extra="ignore")

    temp_co: float = Field(alias="tempCo", strict=True, allow_inf_nan=False)
    temp_room: float = Field(alias="tempRoom", strict=True, allow_inf_nan=False)
    timestamp: int | None = Field(
        None, strict=True, ge=BIGINT_MIN, le=BIGINT_MAX,
    )


class ReadingResponse(BaseModel):
    """Persisted reading as returned to clients."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    temp_co: float = Field(serialization_alias="tempCo")
    temp_room: float = Field(serialization_alias="tempRoom")
    timestamp: int | None = None
