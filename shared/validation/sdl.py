"""
GraphQL SDL rendering for declared input schemas.
"""

from enum import Enum
from typing import Dict, List, Type

from shared.constants import BUILTIN_SCALARS
from shared.validation.schema import FieldSpec, InputSchema


def _description(text: str, indent: str = "") -> List[str]:
    escaped = text.replace('"""', '\\"""')
    return [f'{indent}"""{escaped}"""']


def _field_type(spec: FieldSpec) -> str:
    return f"{spec.wire_type}!" if spec.required else spec.wire_type


def render_enum(enum_cls: Type[Enum]) -> str:
    lines = [f"enum {enum_cls.__name__} {{"]
    lines.extend(f"  {member.value}" for member in enum_cls)
    lines.append("}")
    return "\n".join(lines)


def render_input_type(schema: InputSchema) -> str:
    lines: List[str] = []
    if schema.description:
        lines.extend(_description(schema.description))
    lines.append(f"input {schema.name} {{")
    for spec in schema.fields:
        if spec.description:
            lines.extend(_description(spec.description, indent="  "))
        lines.append(f"  {spec.name}: {_field_type(spec)}")
    lines.append("}")
    return "\n".join(lines)


def render_sdl(*schemas: InputSchema) -> str:
    """
    Render scalars, enums and input types for the given schemas.

    Custom scalars and enums referenced by several schemas are emitted
    once, before the input types, in first-use order.
    """
    scalars: List[str] = []
    enums: Dict[str, Type[Enum]] = {}

    for schema in schemas:
        for spec in schema.fields:
            enum_cls = spec.enum_type
            if enum_cls is not None:
                enums.setdefault(enum_cls.__name__, enum_cls)
            elif (
                spec.wire_type not in BUILTIN_SCALARS
                and spec.wire_type not in scalars
            ):
                scalars.append(spec.wire_type)

    blocks = [f"scalar {name}" for name in scalars]
    blocks.extend(render_enum(enum_cls) for enum_cls in enums.values())
    blocks.extend(render_input_type(schema) for schema in schemas)
    return "\n\n".join(blocks) + "\n"
