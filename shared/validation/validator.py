from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, List, Mapping, Tuple

from shared.constants import RULE_REQUIRED
from shared.core.exceptions import InputValidationError
from shared.core.logging_config import get_logger
from shared.utils.validators import is_not_empty
from shared.validation.schema import FieldSpec, InputSchema
from shared.validation.violations import Violation, ViolationKind

logger = get_logger(__name__)


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of one validation pass over a raw argument mapping."""

    schema: InputSchema
    values: Mapping[str, Any]
    violations: Tuple[Violation, ...]

    @property
    def is_valid(self) -> bool:
        return not self.violations


def _missing(schema: InputSchema, spec: FieldSpec) -> Violation:
    return Violation(
        field=spec.name,
        rule=RULE_REQUIRED,
        kind=ViolationKind.REQUIRED_FIELD_MISSING,
        message=schema.message_for(spec, RULE_REQUIRED),
    )


def _check_rules(
    schema: InputSchema, spec: FieldSpec, value: Any
) -> List[Violation]:
    violations: List[Violation] = []
    for rule in spec.rules:
        if rule(value):
            continue
        violations.append(
            Violation(
                field=spec.name,
                rule=rule.name,
                kind=ViolationKind.CONSTRAINT_VIOLATION,
                message=schema.message_for(spec, rule.name),
                value=value,
            )
        )
        if rule.guard:
            break
    return violations


def validate_input(
    schema: InputSchema, raw: Mapping[str, Any]
) -> ValidationResult:
    """
    Validate a raw argument mapping against a schema.

    Every field is checked and all violations are collected in schema
    order. Absent optional fields (or ones sent as null) are skipped; an
    absent or empty required field yields a single ``required`` violation
    and none of its other rules run. Keys the schema does not declare are
    ignored.

    Returns:
        ValidationResult: accepted values keyed by wire name, coerced where
        the field declares a coercer, plus the violations found.
    """
    if not isinstance(raw, Mapping):
        raise TypeError(
            f"{schema.name} expects a mapping, got {type(raw).__name__}"
        )

    unknown = [key for key in raw if key not in schema.field_names]
    if unknown:
        logger.debug("%s ignoring undeclared keys: %s", schema.name, unknown)

    values: dict[str, Any] = {}
    violations: List[Violation] = []

    for spec in schema.fields:
        value = raw.get(spec.name)
        if spec.required and not is_not_empty(value):
            violations.append(_missing(schema, spec))
            continue
        if value is None:
            continue

        if spec.coerce is not None:
            value = spec.coerce(value)

        field_violations = _check_rules(schema, spec, value)
        if field_violations:
            violations.extend(field_violations)
        else:
            values[spec.name] = value

    return ValidationResult(
        schema=schema,
        values=MappingProxyType(values),
        violations=tuple(violations),
    )


def validate_or_raise(
    schema: InputSchema, raw: Mapping[str, Any]
) -> Mapping[str, Any]:
    """Run ``validate_input`` and raise ``InputValidationError`` on failure."""
    result = validate_input(schema, raw)
    if not result.is_valid:
        error = InputValidationError(result.violations, schema_name=schema.name)
        logger.warning(
            "%s rejected with %d violation(s) on fields %s",
            schema.name,
            len(error.violations),
            error.fields,
        )
        raise error
    return result.values
