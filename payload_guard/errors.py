"""
Error taxonomy for payload validation.

Every failure raised by this package derives from PayloadValidationError and
carries a single human-readable message. The `code` class attribute is the
machine-friendly identifier used by the HTTP layer when building responses.
"""

from typing import Sequence

from payload_guard.validation.failures import ValidationFailure


class PayloadValidationError(Exception):
    """Base class for all payload validation errors."""

    code: str = "validation_error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class BodyReadFailure(PayloadValidationError):
    """The request body stream could not be fully read."""

    code = "body_read_failure"

    def __init__(self, message: str = "failed to read request body") -> None:
        super().__init__(message)


class MalformedPayload(PayloadValidationError):
    """The request body is not a JSON object."""

    code = "malformed_payload"

    def __init__(self, detail: str) -> None:
        super().__init__(f"invalid JSON format: {detail}")
        self.detail = detail


class UnknownField(PayloadValidationError):
    """A payload key is not declared by the schema (including casing mismatches)."""

    code = "unknown_field"

    def __init__(self, key: str) -> None:
        super().__init__(f"invalid field name or incorrect casing: {key}")
        self.key = key


class TypeMismatch(PayloadValidationError):
    """A payload value cannot be decoded into the field's declared type."""

    code = "type_mismatch"

    def __init__(self, field: str, expected_type: str) -> None:
        super().__init__(f"{field} should be a {expected_type}")
        self.field = field
        self.expected_type = expected_type


class ConstraintViolation(PayloadValidationError):
    """
    One or more declared field constraints failed.

    All failures found in a single validation call are reported together,
    in field declaration order.
    """

    code = "constraint_violation"

    def __init__(self, failures: Sequence[ValidationFailure]) -> None:
        self.failures = list(failures)
        super().__init__(
            "validation failed: " + ", ".join(f.message for f in self.failures)
        )

    @property
    def fields(self) -> list[str]:
        """Field paths of every failure, in reporting order."""
        return [f.field for f in self.failures]
