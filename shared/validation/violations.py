from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ViolationKind(str, Enum):
    """Violation kind enumeration."""

    REQUIRED_FIELD_MISSING = "RequiredFieldMissing"
    CONSTRAINT_VIOLATION = "ConstraintViolation"


class Violation(BaseModel):
    """A single rule failure for one field of a mutation argument."""

    field: str = Field(..., description="Wire name of the offending field")
    rule: str = Field(..., description="Name of the rule that failed")
    kind: ViolationKind = Field(..., description="Violation category")
    message: str = Field(..., description="Human-readable explanation")
    value: Any = Field(
        default=None,
        exclude=True,
        description="Offending value, kept for logging only",
    )

    model_config = ConfigDict(frozen=True)
