"""Failure records produced while checking field constraints."""

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class ValidationFailure:
    """
    A single offending field.

    Attributes:
        field: Lower-cased external field path (e.g. 'address.zip')
        rule: Name of the violated rule (e.g. 'required', 'max')
        param: Rule parameter, if the rule takes one (e.g. the bound for 'max')
        message: Human-readable description, '<field> <suffix>'
    """
    field: str
    rule: str
    param: Optional[Any]
    message: str
