"""
Explicit schema descriptions for mutation arguments.

An ``InputSchema`` is an ordered collection of ``FieldSpec`` entries, each
declaring the field's wire name, GraphQL type, presence rule and ordered
value rules. Schemas are plain immutable data, consumed by
``shared.validation.validator.validate_input``.
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple, Type

from shared.constants import DEFAULT_RULE_MESSAGES, RULE_IS_ENUM
from shared.validation.rules import Rule


class WireType(str, Enum):
    """GraphQL type names used for schema exposure."""

    STRING = "String"
    BOOLEAN = "Boolean"
    FLOAT = "Float"
    DATE_TIME = "DateTime"


@dataclass(frozen=True)
class FieldSpec:
    """Declaration of one input field."""

    name: str
    wire_type: str
    required: bool = False
    rules: Tuple[Rule, ...] = ()
    coerce: Optional[Callable[[Any], Any]] = None
    description: Optional[str] = None

    def __post_init__(self) -> None:
        if isinstance(self.wire_type, WireType):
            object.__setattr__(self, "wire_type", self.wire_type.value)
        object.__setattr__(self, "rules", tuple(self.rules))

    @property
    def enum_type(self) -> Optional[Type[Enum]]:
        for rule in self.rules:
            if rule.name == RULE_IS_ENUM:
                return rule.params["enum"]
        return None


@dataclass(frozen=True)
class InputSchema:
    """Ordered field declarations plus the per-field message table."""

    name: str
    fields: Tuple[FieldSpec, ...]
    messages: Mapping[Tuple[str, str], str] = field(default_factory=dict)
    description: Optional[str] = None

    def __post_init__(self) -> None:
        fields = tuple(self.fields)
        names = [spec.name for spec in fields]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise ValueError(
                f"{self.name}: duplicate field declarations {duplicates}"
            )

        unknown = sorted(
            {name for name, _ in self.messages if name not in names}
        )
        if unknown:
            raise ValueError(
                f"{self.name}: messages declared for unknown fields {unknown}"
            )

        object.__setattr__(self, "fields", fields)
        object.__setattr__(
            self, "messages", MappingProxyType(dict(self.messages))
        )

    @property
    def field_names(self) -> List[str]:
        return [spec.name for spec in self.fields]

    @property
    def required_fields(self) -> List[str]:
        return [spec.name for spec in self.fields if spec.required]

    def get_field(self, name: str) -> FieldSpec:
        for spec in self.fields:
            if spec.name == name:
                return spec
        raise KeyError(f"{self.name} has no field named {name!r}")

    def message_for(self, spec: FieldSpec, rule_name: str) -> str:
        """
        Resolve the message for a (field, rule) failure.

        The schema's own table wins; otherwise the default template for the
        rule is formatted with the field name and the rule params.
        """
        custom = self.messages.get((spec.name, rule_name))
        if custom is not None:
            return custom

        params: Dict[str, Any] = {}
        for rule in spec.rules:
            if rule.name == rule_name:
                params = dict(rule.params)
                break
        template = DEFAULT_RULE_MESSAGES.get(rule_name, "{field} is invalid")
        return template.format(field=spec.name, **params)
