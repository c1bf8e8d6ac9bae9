from __future__ import annotations

from typing import Any, Dict, Mapping, Optional, Tuple

from django.core.exceptions import (
    PermissionDenied as DjangoPermissionDenied,
    ValidationError as DjangoValidationError,
)
from django.http import Http404
from rest_framework import status
from rest_framework.exceptions import (
    AuthenticationFailed,
    MethodNotAllowed,
    NotAuthenticated,
    NotFound,
    ParseError,
    PermissionDenied,
    UnsupportedMediaType,
    ValidationError,
)
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

from apps.api.utils import error_response, resolve_status
from apps.common import get_logger

logger = get_logger(__name__).bind(component="api", layer="exception")

GENERIC_SERVER_MESSAGE = "Something went wrong"
FORWARDED_HEADERS = ("WWW-Authenticate", "Allow", "Retry-After")

# First match wins. The last item says whether the DRF payload is echoed as details.
DRF_ERROR_CODES: Tuple[Tuple[Tuple[type, ...], str, str, bool], ...] = (
    ((ValidationError,), "VALIDATION_ERROR", "Validation failed", True),
    ((ParseError,), "VALIDATION_ERROR", "Malformed request", True),
    ((AuthenticationFailed,), "UNAUTHORIZED", "Authentication failed", False),
    ((NotAuthenticated,), "UNAUTHORIZED", "Authentication required", False),
    (
        (PermissionDenied, DjangoPermissionDenied),
        "FORBIDDEN",
        "You do not have permission to perform this action",
        False,
    ),
    ((NotFound, Http404), "NOT_FOUND", "Resource not found", False),
    ((MethodNotAllowed,), "METHOD_NOT_ALLOWED", "Method not allowed", False),
    ((UnsupportedMediaType,), "UNSUPPORTED_MEDIA_TYPE", "Unsupported media type", False),
)


class ApplicationError(Exception):
    """
    Error raised by services and rendered as the ``{"error": {...}}`` envelope.

    Args:
        code: Machine readable error code. Falls back to ``default_code``.
        message: Human readable explanation, returned to clients as is.
        status_code: Explicit HTTP status. Derived from ``code`` when omitted.
        details: Optional structured context.
        hint: Optional remediation hint.
        headers: Optional extra response headers.
    """

    default_code = "BAD_REQUEST"

    def __init__(
        self,
        code: Optional[str] = None,
        message: str = "",
        *,
        status_code: Optional[int] = None,
        details: Optional[Any] = None,
        hint: Optional[str] = None,
        headers: Optional[Mapping[str, Any]] = None,
    ):
        super().__init__(message)
        self.code = code or self.default_code
        self.message = message
        self.status_code = resolve_status(self.code, status_code)
        self.details = details
        self.hint = hint
        self.headers = headers

    def to_response(self) -> Response:
        return error_response(
            self.code,
            self.message,
            self.details,
            http_status=self.status_code,
            hint=self.hint,
            headers=self.headers,
        )


class _ClassifiedError(ApplicationError):
    def __init__(self, message: str, **kwargs: Any):
        super().__init__(self.default_code, message, **kwargs)


class NotFoundError(_ClassifiedError):
    """The requested entity does not exist."""

    default_code = "NOT_FOUND"


class BadRequestError(_ClassifiedError):
    """The operation is invalid for the current state of the entities involved."""

    default_code = "BAD_REQUEST"


class InternalError(_ClassifiedError):
    """Persisting a new record failed."""

    default_code = "SERVER_ERROR"


def global_exception_handler(exc: Exception, context: Dict[str, Any]) -> Response:
    """DRF ``EXCEPTION_HANDLER``: every error leaves the API in the same envelope."""
    log = _request_logger(context)

    if isinstance(exc, ApplicationError):
        emit = log.error if exc.status_code >= 500 else log.info
        emit("Handled application error", code=exc.code, status=exc.status_code, detail=exc.message)
        return exc.to_response()

    if isinstance(exc, DjangoValidationError):
        exc = ValidationError(getattr(exc, "message_dict", None) or list(exc.messages))

    response = drf_exception_handler(exc, context)
    if response is None:
        log.exception("Unhandled exception bubbled to global handler")
        return error_response(
            "SERVER_ERROR",
            GENERIC_SERVER_MESSAGE,
            http_status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    code, message, details = _classify(exc, response)
    log.info("Converted API exception", code=code, status=response.status_code)
    return error_response(
        code,
        message,
        details,
        http_status=response.status_code,
        headers=_forwarded_headers(response),
    )


def _request_logger(context: Dict[str, Any]):
    bound = logger
    view = context.get("view")
    request = context.get("request")
    if view is not None:
        bound = bound.bind(view=type(view).__name__)
    if request is not None:
        bound = bound.bind(method=request.method, path=request.path)
    return bound


def _classify(exc: Exception, response: Response) -> Tuple[str, str, Optional[Any]]:
    payload = response.data
    for types, code, fallback, echo_payload in DRF_ERROR_CODES:
        if isinstance(exc, types):
            return code, _message_from(payload, fallback), payload if echo_payload else None

    if response.status_code >= 500:
        return "SERVER_ERROR", GENERIC_SERVER_MESSAGE, None
    details = payload if isinstance(payload, (dict, list)) and payload else None
    return "UNKNOWN_ERROR", _message_from(payload, "Request failed"), details


def _forwarded_headers(response: Response) -> Optional[Dict[str, str]]:
    headers = {
        name: response[name] for name in FORWARDED_HEADERS if response.has_header(name)
    }
    return headers or None


def _message_from(payload: Any, fallback: str) -> str:
    if isinstance(payload, str):
        return payload
    if isinstance(payload, dict) and isinstance(payload.get("detail"), str):
        return payload["detail"]
    if isinstance(payload, list) and payload and isinstance(payload[0], str):
        return payload[0]
    return fallback


__all__ = [
    "ApplicationError",
    "BadRequestError",
    "InternalError",
    "NotFoundError",
    "global_exception_handler",
]
