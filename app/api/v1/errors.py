"""Translate domain errors into HTTP responses."""

from fastapi import HTTPException, status

from app.core.errors import (
    CodeGenerationError,
    CodeGenerationExhaustedError,
    CodeTooLongError,
    DuplicateCodeError,
    RegistryUnavailableError,
)

UNIQUE_CODE_UNAVAILABLE = "Could not generate a unique code, please retry"


def code_generation_http_error(exc: CodeGenerationError) -> HTTPException:
    """Map a code generation failure onto the matching HTTP error."""
    if isinstance(exc, DuplicateCodeError):
        return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc))
    if isinstance(exc, CodeTooLongError):
        return HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc))
    if isinstance(exc, (CodeGenerationExhaustedError, RegistryUnavailableError)):
        return HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=UNIQUE_CODE_UNAVAILABLE,
        )
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc))


def not_found(entity: str, code: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"{entity.capitalize()} with code '{code}' not found",
    )
