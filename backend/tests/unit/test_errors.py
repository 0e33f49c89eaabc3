"""Unit tests for error types and formatting."""

from utils.errors import (
    ErrorCodes,
    HttpException,
    format_api_error,
    format_log_error,
    format_validation_errors,
)


def test_bad_request_uses_fixed_message_by_default():
    exc = HttpException.bad_request()
    assert exc.status_code == 400
    assert exc.message == "Bad request"
    assert exc.error_code == "BAD_REQUEST"


def test_bad_request_can_carry_underlying_message():
    exc = HttpException.bad_request("title: field required")
    assert exc.message == "title: field required"
    assert exc.error_code == ErrorCodes.BAD_REQUEST.code


def test_from_error_code():
    exc = HttpException.from_error_code(404, ErrorCodes.NOT_FOUND)
    assert exc.status_code == 404
    assert format_api_error(exc) == {
        "error": {"code": "NOT_FOUND", "message": "Document not found"}
    }


def test_format_log_error():
    assert format_log_error(ValueError("bad id")) == "ValueError: bad id"
    assert format_log_error(RuntimeError()) == "RuntimeError"


def test_format_validation_errors_names_fields():
    errors = [
        {"type": "missing", "loc": ("body", "title"), "msg": "Field required"},
        {"type": "greater_than_equal", "loc": ("query", "page_size"), "msg": "Input should be greater than or equal to 0"},
    ]

    message = format_validation_errors(errors)

    assert message == (
        "title: Field required; page_size: Input should be greater than or equal to 0"
    )


def test_format_validation_errors_without_location():
    assert format_validation_errors([{"loc": (), "msg": "Invalid"}]) == "Invalid"
