"""
Accepted field names for a schema.

A payload may only use the external-facing names a schema declares: the keys
pydantic reads the field from (its validation alias or alias when one is set),
otherwise the attribute name. Matching is case-sensitive. Fields declared with
`Field(exclude=True)` are skipped and therefore never accepted from a payload.
"""

from typing import Any

from pydantic import AliasChoices, AliasPath, BaseModel
from pydantic.fields import FieldInfo


def schema_model(schema: Any) -> type[BaseModel] | None:
    """
    Resolve a schema argument to its model class.

    Accepts a model class or a model instance; returns None for anything else.
    """
    model = schema if isinstance(schema, type) else type(schema)
    if issubclass(model, BaseModel):
        return model
    return None


def _alias_key(alias: str | AliasPath) -> str:
    if isinstance(alias, str):
        return alias
    key = alias.path[0]
    if not isinstance(key, str):
        raise TypeError(f"alias path must start with a field name, got {key!r}")
    return key


def accepted_names(name: str, field: FieldInfo) -> list[str]:
    """
    Top-level payload keys pydantic reads a field from.

    Every choice of an AliasChoices is accepted; an AliasPath is accepted by
    its first element.

    Raises:
        TypeError: If the validation alias is of a kind that can't be mapped
            to top-level keys
    """
    alias = field.validation_alias
    if alias is None:
        return [field.alias or name]
    if isinstance(alias, AliasChoices):
        return [_alias_key(choice) for choice in alias.choices]
    if isinstance(alias, (str, AliasPath)):
        return [_alias_key(alias)]
    raise TypeError(f"unsupported validation alias for field '{name}': {alias!r}")


def external_name(name: str, field: FieldInfo) -> str:
    """Name a field is reported by (its first accepted payload key)."""
    return accepted_names(name, field)[0]


def get_field_names(schema: Any) -> set[str]:
    """
    Build the set of field names a schema accepts.

    Args:
        schema: Pydantic model class or instance

    Returns:
        External field names, excluding skipped fields. Empty when `schema`
        is not a pydantic model (every non-empty payload is then rejected).
    """
    model = schema_model(schema)
    if model is None:
        return set()

    return {
        key
        for name, field in model.model_fields.items()
        if not field.exclude
        for key in accepted_names(name, field)
    }
