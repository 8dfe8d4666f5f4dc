"""Error Hierarchy — each failure mode maps to its status code and envelope."""

import pytest

from esp_telemetry.core.errors import (
    AssetError, AuthError, ErrorCategory, ErrorContext, MethodError,
    PayloadValidationError, StoreError, TelemetryError,
)


@pytest.mark.parametrize("error,status,code", [
    (PayloadValidationError("Bad request", field="tempCo"), 422, "VALIDATION_ERROR"),
    (AuthError(), 403, "AUTH_FAILED"),
    (MethodError("PUT", "/data"), 405, "METHOD_NOT_ALLOWED"),
    (StoreError("Could not persist reading", "insert"), 500, "STORE_ERROR"),
    (AssetError("index.html"), 500, "ASSET_UNAVAILABLE"),
])
def test_error_status_and_code(error, status, code):
    assert isinstance(error, TelemetryError)
    assert error.http_status == status
    assert error.code == code


def test_to_response_envelope():
    body = StoreError("Could not load readings", "query").to_response()["error"]
    assert body["code"] == "STORE_ERROR"
    assert body["category"] == ErrorCategory.DATABASE.value
    assert body["severity"] == "critical"
    assert body["message"] == "Database query failed: Could not load readings"
    assert "timestamp" in body


def test_validation_error_records_field():
    err = PayloadValidationError("Bad request", field="tempRoom")
    assert err.field == "tempRoom"
    assert err.context.field == "tempRoom"


def test_context_carries_request_id():
    err = AuthError(ErrorContext(request_id="abc"))
    assert err.context.request_id == "abc"
