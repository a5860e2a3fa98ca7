"""
Rule declarations for mutation argument fields.

A rule pairs a name (used as the key in violation reports and message
tables) with a predicate. Type rules are guards: once one fails, the
remaining rules of that field are skipped because they assume the type.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from types import MappingProxyType
from typing import Any, Callable, Mapping, Type, Union

from shared.constants import (
    RULE_IS_BOOLEAN,
    RULE_IS_DATE,
    RULE_IS_ENUM,
    RULE_IS_NUMBER,
    RULE_IS_STRING,
    RULE_IS_UUID,
    RULE_MAX_DECIMAL_PLACES,
    RULE_MAX_LENGTH,
    RULE_MIN,
    RULE_MIN_LENGTH,
)
from shared.utils import validators as checks

Number = Union[int, float, Decimal]


@dataclass(frozen=True)
class Rule:
    """A named value predicate attached to a field."""

    name: str
    check: Callable[[Any], bool]
    params: Mapping[str, Any] = field(default_factory=dict)
    guard: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "params", MappingProxyType(dict(self.params)))

    def __call__(self, value: Any) -> bool:
        return self.check(value)


# =============================================================================
# TYPE RULES (guards)
# =============================================================================


def is_string() -> Rule:
    return Rule(RULE_IS_STRING, checks.is_string, guard=True)


def is_boolean() -> Rule:
    return Rule(RULE_IS_BOOLEAN, checks.is_boolean, guard=True)


def is_number() -> Rule:
    return Rule(RULE_IS_NUMBER, checks.is_number, guard=True)


def is_uuid() -> Rule:
    return Rule(RULE_IS_UUID, checks.is_uuid, guard=True)


def is_date() -> Rule:
    return Rule(RULE_IS_DATE, checks.is_datetime, guard=True)


def is_enum(enum_cls: Type[Enum]) -> Rule:
    return Rule(
        RULE_IS_ENUM,
        lambda value: checks.is_enum_member(value, enum_cls),
        params={
            "enum": enum_cls,
            "members": ", ".join(str(member.value) for member in enum_cls),
        },
        guard=True,
    )


# =============================================================================
# VALUE RULES
# =============================================================================


def min_length(length: int) -> Rule:
    return Rule(
        RULE_MIN_LENGTH,
        lambda value: checks.is_length_between(value, min_len=length),
        params={"min_length": length},
    )


def max_length(length: int) -> Rule:
    return Rule(
        RULE_MAX_LENGTH,
        lambda value: checks.is_length_between(value, max_len=length),
        params={"max_length": length},
    )


def max_decimal_places(places: int) -> Rule:
    return Rule(
        RULE_MAX_DECIMAL_PLACES,
        lambda value: checks.has_max_decimal_places(value, places),
        params={"places": places},
    )


def min_value(minimum: Number) -> Rule:
    return Rule(
        RULE_MIN,
        lambda value: checks.is_at_least(value, minimum),
        params={"min_value": minimum},
    )


# =============================================================================
# COERCERS
# =============================================================================


def to_number(value: Any) -> Any:
    """
    Turns numeric text into a Decimal before the rules run.

    Anything that is not parseable text is returned untouched so that the
    number rule reports it.
    """
    if isinstance(value, str):
        parsed = checks.parse_decimal(value)
        if parsed is not None:
            return parsed
    return value


def to_datetime(value: Any) -> Any:
    parsed = checks.parse_date(value)
    return value if parsed is None else parsed
