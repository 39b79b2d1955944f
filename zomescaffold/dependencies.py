"""Validation of the entries that a new entry depends on through its fields."""

from __future__ import annotations

from textwrap import indent

from .definitions import Cardinality, EntryDefinition, EntryTypeReference, FieldDefinition
from .naming import Case, to_case

__all__ = [
    "entry_type_dependencies",
    "dependency_validation",
    "create_entry_argument",
]

_MISSING_ENTRY = (
    "Dependant action must be accompanied by an entry"
)


def entry_type_dependencies(
    entry_def: EntryDefinition,
) -> list[tuple[FieldDefinition, EntryTypeReference]]:
    """Fields linked from another entry type, paired with that entry type's reference."""
    return [
        (field_def, field_def.linked_from)
        for field_def in entry_def.fields
        if isinstance(field_def.linked_from, EntryTypeReference)
    ]


def create_entry_argument(entry_def: EntryDefinition) -> str:
    """Name of the entry argument of the create validation function.

    It carries a leading underscore when the body does not use it, that is
    when the entry has no dependencies to validate.
    """
    snake = to_case(entry_def.name, Case.SNAKE)
    return snake if entry_type_dependencies(entry_def) else f"_{snake}"


def _fetch_statements(reference: EntryTypeReference, source: str) -> list[str]:
    dependant_snake = f"_{to_case(reference.entry_type, Case.SNAKE)}"
    dependant_pascal = to_case(reference.entry_type, Case.PASCAL)
    if reference.reference_entry_hash:
        return [
            f"let entry = must_get_entry({source})?;",
            "",
            f"let {dependant_snake} = crate::{dependant_pascal}::try_from(entry)?;",
        ]
    return [
        f"let record = must_get_valid_record({source})?;",
        "",
        f"let {dependant_snake}: crate::{dependant_pascal} = record.entry().to_app_option()",
        "    .map_err(|e| wasm_error!(e))?",
        "    .ok_or(wasm_error!(WasmErrorInner::Guest(String::from("
        f'"{_MISSING_ENTRY}"))))?;',
    ]


def dependency_validation(
    field_def: FieldDefinition,
    reference: EntryTypeReference,
    entry_arg: str,
) -> str:
    """Statements checking that the entries referenced by ``field_def`` exist and are valid."""
    value = f"{entry_arg}.{field_def.field_name}.clone()"
    hash_var = "entry_hash" if reference.reference_entry_hash else "action_hash"

    if field_def.cardinality is Cardinality.SINGLE:
        return "\n".join(_fetch_statements(reference, value)) + "\n"

    if field_def.cardinality is Cardinality.OPTION:
        opening = f"if let Some({hash_var}) = {value} {{"
    else:
        opening = f"for {hash_var} in {value} {{"

    body = indent("\n".join(_fetch_statements(reference, hash_var)), "    ")
    return f"{opening}\n{body}\n}}\n"