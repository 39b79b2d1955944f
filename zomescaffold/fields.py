"""Parsing of field definitions given on the command line."""

from __future__ import annotations

import re
from typing import Optional

from .definitions import (
    AgentReference,
    Cardinality,
    EntryTypeReference,
    FieldDefinition,
    FieldKind,
    FieldType,
    Referenceable,
    parse_field_type,
)
from .naming import Case, InvalidArgumentsError, check_case, to_case

__all__ = ["parse_fields"]

_VEC = re.compile(r"Vec<(?P<a>.*)>\Z")
_OPTION = re.compile(r"Option<(?P<a>.*)>\Z")

_FORMAT_HINT = (
    "fields must be written as "
    "FIELD_NAME:FIELD_TYPE[:WIDGET][:LINKED_FROM] or "
    "FIELD_NAME:Enum:WIDGET:LABEL:VARIANT1.VARIANT2"
)


def _parse_enum(parts: list[str]) -> FieldType:
    if len(parts) < 5:
        raise InvalidArgumentsError(_FORMAT_HINT)
    label = to_case(parts[3], Case.PASCAL)
    variants = tuple(to_case(v, Case.PASCAL) for v in parts[4].split("."))
    return FieldType(FieldKind.ENUM, label, variants)


def _split_cardinality(type_str: str) -> tuple[str, Cardinality]:
    for pattern, cardinality in ((_VEC, Cardinality.VECTOR), (_OPTION, Cardinality.OPTION)):
        if pattern.search(type_str):
            return pattern.sub(r"\g<a>", type_str, count=1), cardinality
    return type_str, Cardinality.SINGLE


def _linked_from(field_type: FieldType, parts: list[str]) -> Optional[Referenceable]:
    if len(parts) != 4:
        return None
    if field_type.kind is FieldKind.AGENT_PUB_KEY:
        return AgentReference(parts[3])
    if field_type.kind in (FieldKind.ENTRY_HASH, FieldKind.ACTION_HASH):
        return EntryTypeReference(parts[3], field_type.kind is FieldKind.ENTRY_HASH)
    return None


def parse_fields(fields_str: str) -> FieldDefinition:
    """Parse one ``name:type[:widget][:linked_from]`` field description."""
    parts = fields_str.split(":")
    field_name = parts[0]
    check_case(field_name, "field_name", Case.SNAKE)
    if len(parts) < 2:
        raise InvalidArgumentsError(_FORMAT_HINT)

    type_name, cardinality = _split_cardinality(parts[1])
    if type_name == "Enum":
        field_type = _parse_enum(parts)
    else:
        field_type = parse_field_type(type_name)

    widget = parts[2] if len(parts) > 2 and parts[2] else None

    return FieldDefinition(
        field_name=field_name,
        field_type=field_type,
        widget=widget,
        cardinality=cardinality,
        linked_from=_linked_from(field_type, parts),
    )