"""
Error types and formatting for API responses and logs.

Every failure leaving the service layer is an HttpException carrying an
HTTP status, a human readable message and a stable error code.
"""

from typing import Any, Dict, NamedTuple, Optional, Sequence


class ErrorCode(NamedTuple):
    code: str
    message: str


class ErrorCodes:
    """Stable error codes returned in API error bodies."""

    BAD_REQUEST = ErrorCode("BAD_REQUEST", "Bad request")
    UNAUTHORIZED = ErrorCode("UNAUTHORIZED", "Missing or invalid caller identity")
    FORBIDDEN = ErrorCode("FORBIDDEN", "Administrator role required")
    NOT_FOUND = ErrorCode("NOT_FOUND", "Document not found")


class HttpException(Exception):
    """Exception carrying the HTTP status code and error code for the response."""

    def __init__(
        self,
        status_code: int,
        message: Optional[str],
        error_code: str = ErrorCodes.BAD_REQUEST.code,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.message = message
        self.error_code = error_code

    @classmethod
    def bad_request(cls, message: Optional[str] = None) -> "HttpException":
        return cls(
            400,
            message if message is not None else ErrorCodes.BAD_REQUEST.message,
            ErrorCodes.BAD_REQUEST.code,
        )

    @classmethod
    def from_error_code(cls, status_code: int, error: ErrorCode) -> "HttpException":
        return cls(status_code, error.message, error.code)


def format_api_error(exc: HttpException) -> Dict[str, Any]:
    """Convert an HttpException to the JSON error body."""
    return {"error": {"code": exc.error_code, "message": exc.message}}


def format_log_error(exc: BaseException) -> str:
    """One-line description of an exception for log messages."""
    text = str(exc)
    return f"{type(exc).__name__}: {text}" if text else type(exc).__name__


def format_validation_errors(errors: Sequence[Dict[str, Any]]) -> str:
    """
    Collapse pydantic/FastAPI validation errors into one message.

    Each error becomes "field: reason"; the request section of the
    location (body, query, header) is dropped.
    """
    parts = []
    for error in errors:
        loc = [str(p) for p in error.get("loc", ())]
        if len(loc) > 1 and loc[0] in ("body", "query", "path", "header"):
            loc = loc[1:]
        field = ".".join(loc)
        parts.append(f"{field}: {error.get('msg', '')}" if field else str(error.get("msg", "")))
    return "; ".join(parts)
