"""
Rule registry for declarative field constraints.

Constraints are attached to schema fields through `Annotated` metadata:

    age: Annotated[int, Rules("required", min=10, max=20)] = 0
    phone: Annotated[str, Rules("omitempty", "e164")] = ""

Rule names map to predicates held by a RuleEngine. `default_engine` is built
once at import time with every built-in rule (including `notblank`) and is
shared by all validation calls.
"""

import re
from decimal import Decimal
from numbers import Real
from dataclasses import dataclass
from typing import Any, Callable, Optional

from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel

Predicate = Callable[[Any, Optional[Any]], bool]

OMIT_EMPTY = "omitempty"

E164_PATTERN = re.compile(r"^\+[1-9]?[0-9]{7,14}$")


class UnknownRuleError(ValueError):
    """A field declares a rule name that is not registered."""


class Rules:
    """
    Constraints declared on a single field.

    Positional arguments are parameterless rule names, keyword arguments are
    rules taking a parameter. Rules are checked in the order given, positional
    names first.
    """

    __slots__ = ("checks",)

    def __init__(self, *names: str, **params: Any) -> None:
        checks: list[tuple[str, Optional[Any]]] = [(name, None) for name in names]
        checks.extend(params.items())
        self.checks: tuple[tuple[str, Optional[Any]], ...] = tuple(checks)

    @property
    def omits_empty(self) -> bool:
        return any(name == OMIT_EMPTY for name, _ in self.checks)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Rules) and self.checks == other.checks

    def __hash__(self) -> int:
        return hash(self.checks)

    def __repr__(self) -> str:
        parts = [name if param is None else f"{name}={param!r}" for name, param in self.checks]
        return f"Rules({', '.join(parts)})"


@dataclass(frozen=True)
class Rule:
    """A registered rule: predicate plus the message suffix used on failure."""
    name: str
    predicate: Predicate
    suffix: str

    def describe(self, param: Optional[Any]) -> str:
        return self.suffix.format(param=param)


def is_zero(value: Any) -> bool:
    """
    Check whether a value is the zero value of its type.

    Nested models are zero when every one of their fields is zero.
    """
    if value is None:
        return True
    if isinstance(value, BaseModel):
        return all(is_zero(getattr(value, name)) for name in type(value).model_fields)
    if isinstance(value, (str, bytes, list, tuple, set, dict)):
        return len(value) == 0
    if isinstance(value, (bool, int, float)):
        return value == 0
    return False


def _measure(value: Any) -> Optional[Real | Decimal]:
    # Strings and containers are bounded by length, numbers by value
    if isinstance(value, (str, bytes, list, tuple, set, dict)):
        return len(value)
    if isinstance(value, (Real, Decimal)) and not isinstance(value, bool):
        return value
    return None


def _required(value: Any, _param: Optional[Any]) -> bool:
    return not is_zero(value)


def _not_blank(value: Any, _param: Optional[Any]) -> bool:
    if isinstance(value, str):
        return value.strip() != ""
    return not is_zero(value)


def _min(value: Any, param: Optional[Any]) -> bool:
    measured = _measure(value)
    return measured is not None and measured >= param


def _max(value: Any, param: Optional[Any]) -> bool:
    measured = _measure(value)
    return measured is not None and measured <= param


def _email(value: Any, _param: Optional[Any]) -> bool:
    if not isinstance(value, str):
        return False
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def _e164(value: Any, _param: Optional[Any]) -> bool:
    return isinstance(value, str) and E164_PATTERN.match(value) is not None


class RuleEngine:
    """Registry mapping rule names to predicates."""

    def __init__(self) -> None:
        self._rules: dict[str, Rule] = {}

    def register(self, name: str, predicate: Predicate, suffix: str) -> "RuleEngine":
        """
        Register (or replace) a rule.

        Args:
            name: Rule name used in `Rules(...)` declarations
            predicate: Callable(value, param) returning True when the value passes
            suffix: Failure message suffix; may reference `{param}`

        Returns:
            The engine, so registrations can be chained
        """
        if name == OMIT_EMPTY:
            raise ValueError(f"'{OMIT_EMPTY}' is a reserved modifier, not a rule")
        self._rules[name] = Rule(name=name, predicate=predicate, suffix=suffix)
        return self

    def get(self, name: str) -> Rule:
        try:
            return self._rules[name]
        except KeyError:
            raise UnknownRuleError(f"undefined validation rule '{name}'") from None

    def __contains__(self, name: str) -> bool:
        return name in self._rules

    def first_failure(self, value: Any, rules: Rules) -> Optional[tuple[Rule, Optional[Any]]]:
        """
        Check a value against declared rules.

        Returns:
            (rule, param) for the first rule the value violates, or None when
            the value passes every rule (or is empty and marked omitempty).
        """
        if rules.omits_empty and is_zero(value):
            return None

        for name, param in rules.checks:
            if name == OMIT_EMPTY:
                continue
            rule = self.get(name)
            if not rule.predicate(value, param):
                return rule, param
        return None

    @classmethod
    def with_builtins(cls) -> "RuleEngine":
        return (
            cls()
            .register("required", _required, "is required")
            .register("notblank", _not_blank, "must not be blank")
            .register("min", _min, "must be at least {param}")
            .register("max", _max, "must be at most {param}")
            .register("email", _email, "must be a valid email address")
            .register("e164", _e164, "must be a valid E.164 phone number")
        )


default_engine = RuleEngine.with_builtins()
