"""Maps domain and request errors to HTTP responses without exposing internals."""

import logging

from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from events.domain.errors import DomainError, ErrorCode

logger = logging.getLogger(__name__)

STATUS_BY_CODE = {
    ErrorCode.INVALID_EVENT_ID: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_STATUS_FILTER: status.HTTP_400_BAD_REQUEST,
    ErrorCode.VALIDATION_FAILED: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_EMAIL: status.HTTP_400_BAD_REQUEST,
    ErrorCode.PASSWORD_MISMATCH: status.HTTP_400_BAD_REQUEST,
    ErrorCode.YEAR_NOT_CONFIRMED: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_CREDENTIALS: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.PROFILE_NOT_FOUND: status.HTTP_403_FORBIDDEN,
    ErrorCode.ROLE_MISMATCH: status.HTTP_403_FORBIDDEN,
    ErrorCode.ADMIN_REQUIRED: status.HTTP_403_FORBIDDEN,
    ErrorCode.EVENT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.REGISTRATION_CLOSED: status.HTTP_409_CONFLICT,
    ErrorCode.ALREADY_REGISTERED: status.HTTP_409_CONFLICT,
    ErrorCode.NOT_REGISTERED: status.HTTP_409_CONFLICT,
    ErrorCode.EVENT_LOCKED: status.HTTP_409_CONFLICT,
    ErrorCode.EMAIL_TAKEN: status.HTTP_409_CONFLICT,
    ErrorCode.STORE_WRITE_FAILED: status.HTTP_503_SERVICE_UNAVAILABLE,
}


def error_body(code: str, message: str, fields: dict | list | None = None) -> dict:
    error = {"code": code, "message": message}
    if fields:
        error["fields"] = fields
    return {"error": error}


def domain_exception_handler(exc, context):
    """DRF EXCEPTION_HANDLER: every error response uses the same envelope.

    Domain errors are mapped by code. DRF's own exceptions keep the status
    and headers DRF chose, with the body rewritten.
    """
    if isinstance(exc, DomainError):
        http_status = STATUS_BY_CODE.get(exc.code, status.HTTP_400_BAD_REQUEST)
        if http_status >= 500:
            logger.error("Request failed: %s", exc)
        return Response(error_body(exc.code.value, exc.message), status=http_status)
    response = exception_handler(exc, context)
    if response is None:
        return None
    if isinstance(exc, exceptions.ValidationError):
        response.data = error_body(
            ErrorCode.VALIDATION_FAILED.value, "Invalid input", fields=response.data
        )
    elif isinstance(response.data, dict) and "detail" in response.data:
        detail = response.data["detail"]
        response.data = error_body(getattr(detail, "code", "error").upper(), str(detail))
    return response
