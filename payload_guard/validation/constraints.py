"""
Constraint validation for decoded payloads.

Walks a populated model, checks every field against the `Rules` declared in its
`Annotated` metadata and raises a single ConstraintViolation listing every
offending field. Nested models are validated recursively once the field holding
them passes its own rules.
"""

from typing import Optional

from pydantic import BaseModel
from pydantic.fields import FieldInfo

from payload_guard.errors import ConstraintViolation
from payload_guard.utils.logging import get_logger
from payload_guard.validation.failures import ValidationFailure
from payload_guard.validation.fields import external_name
from payload_guard.validation.rules import RuleEngine, Rules, default_engine, is_zero

logger = get_logger(__name__)

_NO_RULES = Rules()


def _declared_rules(field: FieldInfo) -> Rules:
    for item in field.metadata:
        if isinstance(item, Rules):
            return item
    return _NO_RULES


def _collect_failures(
    value: BaseModel,
    engine: RuleEngine,
    prefix: str,
    failures: list[ValidationFailure],
) -> None:
    for name, field in type(value).model_fields.items():
        if field.exclude:
            continue

        path = (prefix + external_name(name, field)).lower()
        field_value = getattr(value, name)
        rules = _declared_rules(field)

        failed = engine.first_failure(field_value, rules)
        if failed is not None:
            rule, param = failed
            failures.append(
                ValidationFailure(
                    field=path,
                    rule=rule.name,
                    param=param,
                    message=f"{path} {rule.describe(param)}",
                )
            )
            continue

        if isinstance(field_value, BaseModel):
            if rules.omits_empty and is_zero(field_value):
                continue
            _collect_failures(field_value, engine, path + ".", failures)


def enforce_schema_rules(value: BaseModel, engine: Optional[RuleEngine] = None) -> None:
    """
    Check a decoded payload against its declared field constraints.

    Args:
        value: Populated model instance (typically returned by the strict decoder)
        engine: Rule registry to use (defaults to the shared default_engine)

    Raises:
        ConstraintViolation: If any field violates its rules; every offending
            field is listed, in declaration order
        TypeError: If `value` is not a pydantic model instance
        UnknownRuleError: If a field declares a rule the engine doesn't know
    """
    if not isinstance(value, BaseModel):
        raise TypeError(
            f"enforce_schema_rules expects a pydantic model instance, got {type(value).__name__}"
        )

    failures: list[ValidationFailure] = []
    _collect_failures(value, engine or default_engine, "", failures)

    if failures:
        logger.info(
            f"Constraint validation failed for {type(value).__name__}: "
            f"{[(f.field, f.rule) for f in failures]}"
        )
        raise ConstraintViolation(failures)
