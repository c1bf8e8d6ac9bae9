from collections.abc import Mapping
from typing import Any, Dict, Optional

from rest_framework import status
from rest_framework.exceptions import ValidationError
from rest_framework.response import Response
from rest_framework.serializers import as_serializer_error

DEFAULT_ERROR_STATUS = status.HTTP_400_BAD_REQUEST

# Cart rule violations use BAD_REQUEST, request-shape problems VALIDATION_ERROR.
ERROR_STATUS_MAP = {
    "BAD_REQUEST": status.HTTP_400_BAD_REQUEST,
    "VALIDATION_ERROR": status.HTTP_400_BAD_REQUEST,
    "UNAUTHORIZED": status.HTTP_401_UNAUTHORIZED,
    "FORBIDDEN": status.HTTP_403_FORBIDDEN,
    "NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "METHOD_NOT_ALLOWED": status.HTTP_405_METHOD_NOT_ALLOWED,
    "UNSUPPORTED_MEDIA_TYPE": status.HTTP_415_UNSUPPORTED_MEDIA_TYPE,
    "SERVER_ERROR": status.HTTP_500_INTERNAL_SERVER_ERROR,
    "SERVICE_UNAVAILABLE": status.HTTP_503_SERVICE_UNAVAILABLE,
}


def resolve_status(code: str, http_status: Optional[int] = None) -> int:
    """Status for an error code, honouring an explicit override."""
    if http_status is not None:
        return int(http_status)
    return ERROR_STATUS_MAP.get(code.strip().upper(), DEFAULT_ERROR_STATUS)


def _plain_details(details: Any) -> Any:
    if isinstance(details, ValidationError):
        return as_serializer_error(details)
    if isinstance(details, Exception):
        return {"type": type(details).__name__}
    if isinstance(details, Mapping):
        return dict(details)
    return details


def build_error_payload(
    code: str,
    message: str,
    status_code: int,
    details: Optional[Any] = None,
    hint: Optional[str] = None,
) -> Dict[str, Any]:
    """The ``{"error": {...}}`` body; optional keys are left out when empty."""
    body: Dict[str, Any] = {
        "code": code.strip().upper(),
        "message": message.strip(),
        "status": status_code,
    }
    if details is not None:
        body["details"] = _plain_details(details)
    if hint is not None:
        body["hint"] = hint
    return {"error": body}


def error_response(
    code: str,
    message: str,
    details: Optional[Any] = None,
    http_status: Optional[int] = None,
    *,
    hint: Optional[str] = None,
    headers: Optional[Mapping[str, str]] = None,
) -> Response:
    """
    Return the error envelope shared by every endpoint.

    Args:
        code: Machine-readable error identifier (``NOT_FOUND``, ``BAD_REQUEST``...).
        message: Human-readable explanation, surfaced to clients verbatim.
        details: Optional context, e.g. validation errors or offending ids.
        http_status: Explicit HTTP status code to override the code mapping.
        hint: Optional actionable message for clients.
        headers: Optional response headers.
    """
    for name, value in (("code", code), ("message", message)):
        if not isinstance(value, str) or not value.strip():
            raise ValueError(f"error_response requires a non-empty string {name}")
    if headers is not None and not isinstance(headers, Mapping):
        raise TypeError("error_response headers must be a mapping if provided")

    status_code = resolve_status(code, http_status)
    if not 100 <= status_code <= 599:
        raise ValueError("error_response status must be a valid HTTP status code")

    return Response(
        build_error_payload(code, message, status_code, details, hint),
        status=status_code,
        headers={str(k): str(v) for k, v in headers.items()} if headers else None,
    )
