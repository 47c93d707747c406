"""
Strict decoding of request payloads.

A payload is decoded only after every top-level key has been matched, with
exact case, against the schema's accepted field names. Decoding runs pydantic
in strict mode, so values of the wrong JSON type are reported as type
mismatches instead of being coerced.
"""

import json
from typing import Any, TypeVar, overload

from pydantic import BaseModel, TypeAdapter, ValidationError
from starlette.requests import ClientDisconnect, Request

from payload_guard.errors import (
    BodyReadFailure,
    ConstraintViolation,
    MalformedPayload,
    TypeMismatch,
    UnknownField,
)
from payload_guard.utils.logging import get_logger
from payload_guard.validation.failures import ValidationFailure
from payload_guard.validation.fields import get_field_names, schema_model

logger = get_logger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

# pydantic error type prefix -> type name used in TypeMismatch messages
_TYPE_NAMES = {
    "int": "int",
    "float": "float",
    "decimal": "decimal",
    "string": "string",
    "bytes": "bytes",
    "bool": "bool",
    "model": "object",
    "model_attributes": "object",
    "dataclass": "object",
    "dict": "object",
    "list": "list",
    "tuple": "list",
    "set": "list",
    "frozen_set": "list",
    "date": "date",
    "datetime": "datetime",
    "time": "time",
    "timedelta": "duration",
    "uuid": "uuid",
}

_TYPE_ERROR_SUFFIXES = ("_type", "_parsing", "_from_float")


def _expected_type(error_type: str) -> str | None:
    """Type name for a pydantic type error, or None if it isn't one."""
    for suffix in _TYPE_ERROR_SUFFIXES:
        if error_type.endswith(suffix):
            prefix = error_type[: -len(suffix)]
            return _TYPE_NAMES.get(prefix, prefix)
    return None


def _location(loc: tuple[Any, ...]) -> str:
    return ".".join(str(part) for part in loc)


def translate_validation_error(exc: ValidationError) -> TypeMismatch | ConstraintViolation:
    """
    Map a pydantic decode error onto the package's error kinds.

    Type errors take precedence: the first one becomes a TypeMismatch. Any
    other decode error (missing fields without defaults, pydantic-native
    constraints) is reported as a ConstraintViolation.
    """
    errors = exc.errors(include_url=False)

    for error in errors:
        expected = _expected_type(error["type"])
        if expected is not None:
            return TypeMismatch(_location(error["loc"]), expected)

    failures = []
    for error in errors:
        path = _location(error["loc"]).lower()
        if error["type"] == "missing":
            message = f"{path} is required"
        else:
            message = f"{path} is invalid: {error['msg']}"
        failures.append(
            ValidationFailure(field=path, rule=error["type"], param=None, message=message)
        )
    return ConstraintViolation(failures)


def parse_payload(body: bytes | str) -> dict[str, Any]:
    """
    Parse a raw body into a generic JSON object.

    Raises:
        MalformedPayload: If the body isn't valid JSON or isn't a JSON object
    """
    try:
        payload = json.loads(body)
    except ValueError as e:
        # JSONDecodeError, or UnicodeDecodeError for bodies that aren't UTF-8
        raise MalformedPayload(str(e)) from e

    if not isinstance(payload, dict):
        raise MalformedPayload("expected a JSON object")
    return payload


def reject_unknown_fields(payload: dict[str, Any], accepted: set[str]) -> None:
    """
    Ensure every payload key is an accepted field name (case-sensitive).

    Raises:
        UnknownField: For the first key found outside the accepted set
    """
    for key in payload:
        if key not in accepted:
            logger.warning(f"Rejected payload: unknown field '{key}'")
            raise UnknownField(key)


@overload
def decode_strict(schema: type[ModelT] | ModelT, body: bytes | str) -> ModelT: ...


@overload
def decode_strict(schema: Any, body: bytes | str) -> Any: ...


def decode_strict(schema: Any, body: bytes | str) -> Any:
    """
    Decode a raw JSON body into `schema`, rejecting unknown or mis-cased keys.

    Args:
        schema: Pydantic model class or instance describing the payload
        body: Raw request body (UTF-8 JSON)

    Returns:
        A new instance of the schema populated from the payload

    Raises:
        MalformedPayload: Body is not a JSON object
        UnknownField: A top-level key is not declared by the schema
        TypeMismatch: A value doesn't match its field's declared type
        ConstraintViolation: The schema itself declares pydantic-native
            constraints (or fields without defaults) that the payload violates
    """
    payload = parse_payload(body)
    reject_unknown_fields(payload, get_field_names(schema))

    model = schema_model(schema)
    try:
        if model is not None:
            return model.model_validate_json(body, strict=True)
        target = schema if isinstance(schema, type) else type(schema)
        return TypeAdapter(target).validate_json(body, strict=True)
    except ValidationError as e:
        error = translate_validation_error(e)
        logger.info(f"Rejected payload during decoding: {error.code}")
        raise error from e


async def read_body(request: Request) -> bytes:
    """
    Read the full request body once.

    Starlette keeps the bytes on the request, so later `request.body()` or
    `request.json()` calls (including FastAPI's own body parsing) see the
    same payload.

    Raises:
        BodyReadFailure: Client disconnected, or the stream was already
            consumed without being buffered
    """
    try:
        return await request.body()
    except (ClientDisconnect, RuntimeError) as e:
        logger.warning(f"Failed to read request body on {request.method} {request.url.path}: {e!r}")
        raise BodyReadFailure() from e


async def check_schema(schema: Any, request: Request) -> Any:
    """
    Strictly decode a request body into `schema`.

    Args:
        schema: Pydantic model class or instance describing the payload
        request: Incoming request; its body remains readable afterwards

    Returns:
        The decoded schema instance

    Raises:
        BodyReadFailure, MalformedPayload, UnknownField, TypeMismatch,
        ConstraintViolation (see decode_strict)
    """
    body = await read_body(request)
    return decode_strict(schema, body)
