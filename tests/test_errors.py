"""Error type and error payload tests."""

from predcheck.errors import (
    ApiError,
    IndexedElementError,
    InvalidType,
    MissingField,
    ValidationError,
    format_error_response,
)


def test_validation_error_carries_status_and_type():
    err = ValidationError("Market validation failed", {"missingFields": ["id"]})
    assert isinstance(err, ApiError)
    assert err.status_code == 400
    assert err.error_type == "VALIDATION_ERROR"
    assert str(err) == "Market validation failed"
    assert err.details == {"missingFields": ["id"]}
    assert err.violations == []


def test_missing_and_invalid_field_helpers():
    err = ValidationError(
        "x",
        violations=[
            MissingField(field="id"),
            InvalidType(field="active", expected="boolean", received="string"),
            IndexedElementError(index=0, message="nested"),
        ],
    )
    assert err.missing_fields == ["id"]
    assert err.invalid_fields == ["active"]


def test_format_validation_error():
    err = ValidationError(
        "Trade validation failed",
        {"missingFields": ["side"]},
        [MissingField(field="side")],
    )
    payload = format_error_response(err).model_dump(mode="json")
    assert payload["error"] == "VALIDATION_ERROR"
    assert payload["statusCode"] == 400
    assert payload["message"] == "Trade validation failed"
    assert payload["details"] == {"missingFields": ["side"]}
    assert payload["violations"] == [{"kind": "missing_field", "field": "side"}]
    assert payload["timestamp"]


def test_format_unexpected_error():
    payload = format_error_response(RuntimeError("boom"))
    assert payload.error == "INTERNAL_ERROR"
    assert payload.statusCode == 500
    assert payload.message == "boom"
    assert payload.violations == []
