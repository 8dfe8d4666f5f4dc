"""Reading Schemas — camelCase wire names, strict numbers, optional timestamp."""

import pytest
from pydantic import ValidationError

from esp_telemetry.models.reading import Reading
from esp_telemetry.schemas.reading import ReadingPayload, ReadingResponse


def test_payload_parses_camel_case():
    p = ReadingPayload.model_validate_json(
        '{"tempCo": 25.5, "tempRoom": 22.0, "timestamp": 1761388101}',
    )
    assert (p.temp_co, p.temp_room, p.timestamp) == (25.5, 22.0, 1761388101)


def test_payload_timestamp_optional():
    assert ReadingPayload.model_validate_json('{"tempCo": 1, "tempRoom": 2}').timestamp is None


def test_payload_ignores_extra_fields():
    p = ReadingPayload.model_validate_json('{"tempCo": 1, "tempRoom": 2, "x": 3}')
    assert not hasattr(p, "x")


@pytest.mark.parametrize("raw", [
    '{"tempCo": "1", "tempRoom": 2}',
    '{"tempCo": 1}',
    '{"tempCo": 1, "tempRoom": 2, "timestamp": 9223372036854775808}',
    'nope',
])
def test_payload_rejects_invalid(raw):
    with pytest.raises(ValidationError):
        ReadingPayload.model_validate_json(raw)


@pytest.mark.parametrize("raw", [
    '{"tempCo": Infinity, "tempRoom": 2}',
    '{"tempCo": 1, "tempRoom": -Infinity}',
    '{"tempCo": NaN, "tempRoom": 2}',
    '{"tempCo": 1e400, "tempRoom": 2}',
    '{"tempCo": 1, "tempRoom": -1e400}',
])
def test_payload_rejects_non_finite_temperatures(raw):
    with pytest.raises(ValidationError):
        ReadingPayload.model_validate_json(raw)


def test_payload_ignores_snake_case_field_names():
    with pytest.raises(ValidationError) as exc:
        ReadingPayload.model_validate_json('{"temp_co": 25.5, "temp_room": 22.0}')
    missing = {err["loc"][0] for err in exc.value.errors() if err["type"] == "missing"}
    assert missing == {"tempCo", "tempRoom"}


def test_response_serializes_camel_case_from_orm():
    row = Reading(id=7, temp_co=25.5, temp_room=22.0, timestamp=1761388101)
    body = ReadingResponse.model_validate(row).model_dump(by_alias=True)
    assert body == {"id": 7, "tempCo": 25.5, "tempRoom": 22.0, "timestamp": 1761388101}
