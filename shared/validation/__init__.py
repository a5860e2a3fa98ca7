from .schema import FieldSpec, InputSchema, WireType
from .sdl import render_input_type, render_sdl
from .validator import ValidationResult, validate_input, validate_or_raise
from .violations import Violation, ViolationKind

__all__ = [
    "FieldSpec",
    "InputSchema",
    "WireType",
    "render_input_type",
    "render_sdl",
    "ValidationResult",
    "validate_input",
    "validate_or_raise",
    "Violation",
    "ViolationKind",
]
