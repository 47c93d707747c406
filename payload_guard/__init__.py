"""
Payload Guard: strict request payload validation.

Rejects payloads with unknown or mis-cased fields, decodes them into pydantic
schemas and checks declarative per-field constraints.
"""

from payload_guard.errors import (
    BodyReadFailure,
    ConstraintViolation,
    MalformedPayload,
    PayloadValidationError,
    TypeMismatch,
    UnknownField,
)
from payload_guard.validation.constraints import enforce_schema_rules
from payload_guard.validation.decoder import check_schema, decode_strict
from payload_guard.validation.failures import ValidationFailure
from payload_guard.validation.fields import get_field_names
from payload_guard.validation.rules import (
    RuleEngine,
    Rules,
    UnknownRuleError,
    default_engine,
)

__all__ = [
    "BodyReadFailure",
    "ConstraintViolation",
    "MalformedPayload",
    "PayloadValidationError",
    "TypeMismatch",
    "UnknownField",
    "ValidationFailure",
    "RuleEngine",
    "Rules",
    "UnknownRuleError",
    "default_engine",
    "get_field_names",
    "decode_strict",
    "check_schema",
    "enforce_schema_rules",
]
