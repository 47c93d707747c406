"""
FastAPI integration for strict payload validation.

`strict_body(Schema)` is a dependency that reads the request body, rejects
unknown or mis-cased fields, decodes it and checks declared constraints. Errors
propagate as PayloadValidationError subclasses; `register_exception_handlers`
turns them into JSON responses.
"""

from typing import Awaitable, Callable, Optional, TypeVar

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from payload_guard.errors import (
    BodyReadFailure,
    ConstraintViolation,
    MalformedPayload,
    PayloadValidationError,
    TypeMismatch,
    UnknownField,
)
from payload_guard.utils.logging import get_logger
from payload_guard.validation.constraints import enforce_schema_rules
from payload_guard.validation.decoder import check_schema
from payload_guard.validation.rules import RuleEngine

logger = get_logger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

ERROR_STATUS_CODES: dict[type[PayloadValidationError], int] = {
    BodyReadFailure: 400,
    MalformedPayload: 400,
    UnknownField: 400,
    TypeMismatch: 422,
    ConstraintViolation: 422,
}


def strict_body(
    schema: type[ModelT],
    engine: Optional[RuleEngine] = None,
) -> Callable[[Request], Awaitable[ModelT]]:
    """
    Build a dependency that returns a strictly decoded, validated `schema`.

    Usage:
        >>> @router.post("/users")
        ... async def create_user(user: Annotated[UserPayload, Depends(strict_body(UserPayload))]):
        ...     ...
    """

    async def dependency(request: Request) -> ModelT:
        value = await check_schema(schema, request)
        enforce_schema_rules(value, engine)
        return value

    dependency.__name__ = f"strict_{schema.__name__}_body"
    return dependency


def status_code_for(exc: PayloadValidationError) -> int:
    """HTTP status for an error kind (400 for anything unmapped)."""
    for error_type in type(exc).__mro__:
        if error_type in ERROR_STATUS_CODES:
            return ERROR_STATUS_CODES[error_type]
    return 400


async def payload_validation_exception_handler(
    request: Request, exc: PayloadValidationError
) -> JSONResponse:
    """Render a payload validation error as a JSON error response."""
    status_code = status_code_for(exc)
    logger.warning(
        f"Payload rejected on {request.method} {request.url.path}: "
        f"{exc.code} ({status_code})"
    )
    return JSONResponse(
        status_code=status_code,
        content={
            "error": exc.code,
            "details": exc.message,
        },
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the payload validation error handler on an app."""
    app.add_exception_handler(PayloadValidationError, payload_validation_exception_handler)
