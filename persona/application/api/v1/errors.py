"""Centralized error transformation for API routes.

Every failure leaves the API in one envelope: ``{success: false, message,
errors?}``. ``errors`` is only present for field-level validation failures.
"""

from typing import Any

from fastapi import HTTPException
from fastapi.encoders import jsonable_encoder

from persona.domain.shared.error import (
    AuthenticationError,
    AuthorizationError,
    DomainError,
    FieldError,
    NotFoundError,
    PersonaError,
    ValidationError,
)

DOMAIN_ERROR_STATUS_MAP: dict[type[DomainError], int] = {
    ValidationError: 400,
    AuthenticationError: 401,
    AuthorizationError: 403,
    NotFoundError: 404,
}

INTERNAL_ERROR_MESSAGE = "Internal server error"


def _status_for(error: DomainError) -> int:
    for error_type, status in DOMAIN_ERROR_STATUS_MAP.items():
        if isinstance(error, error_type):
            return status
    return 400


def field_errors_payload(errors: list[FieldError]) -> list[dict[str, Any]]:
    payload = []
    for e in errors:
        item: dict[str, Any] = {"field": e.field, "message": e.message}
        if e.value is not None:
            item["value"] = e.value
        payload.append(item)
    return jsonable_encoder(payload)


def error_envelope(message: str, errors: list[FieldError] | None = None) -> dict[str, Any]:
    body: dict[str, Any] = {"success": False, "message": message}
    if errors:
        body["errors"] = field_errors_payload(errors)
    return body


def map_persona_error(error: PersonaError, *, redact_internal: bool = False) -> HTTPException:
    """Map a catalog error to an HTTPException whose detail is the error envelope.

    Infrastructure failures become 500; their message is replaced with a
    generic one when ``redact_internal`` is set.
    """
    if isinstance(error, DomainError):
        status_code = _status_for(error)
        errors = error.errors if isinstance(error, ValidationError) else None
        headers = {"WWW-Authenticate": "Bearer"} if status_code == 401 else None
        return HTTPException(
            status_code=status_code,
            detail=error_envelope(error.message, errors),
            headers=headers,
        )

    # InfrastructureError and any other PersonaError
    message = INTERNAL_ERROR_MESSAGE if redact_internal else error.message
    return HTTPException(status_code=500, detail=error_envelope(message))
