"""Source text of the entry definition file generated for an integrity zome."""

from __future__ import annotations

from textwrap import indent

from .crud import Crud
from .definitions import EntryDefinition
from .dependencies import create_entry_argument, dependency_validation, entry_type_dependencies
from .naming import Case, pluralize, to_case

__all__ = [
    "render_entry_definition_struct",
    "render_validate_create",
    "render_validate_update",
    "render_validate_delete",
    "render_entry_definition_file",
]

_TODO = "/// TODO: add the appropriate validation rules"
_VALID = "Ok(ValidateCallbackResult::Valid)"
_RESULT = ") -> ExternResult<ValidateCallbackResult> {"


def _body(text: str) -> str:
    return indent(text, "    ")


def _plural_title(entry_def: EntryDefinition) -> str:
    return to_case(pluralize(entry_def.name, 2), Case.TITLE)


def _function(name: str, params: list[str], body: str) -> str:
    args = "".join(f"    {param},\n" for param in params)
    return f"pub fn {name}(\n{args}{_RESULT}\n{_body(body)}\n}}\n"


def _outcome(allowed: bool, invalid_reason: str) -> str:
    if allowed:
        return f"{_TODO}\n{_VALID}"
    return f'Ok(ValidateCallbackResult::Invalid(String::from("{invalid_reason}")))'


def render_entry_definition_struct(entry_def: EntryDefinition) -> str:
    """The struct holding the entry's fields."""
    name = to_case(entry_def.name, Case.PASCAL)
    if not entry_def.fields:
        return f"pub struct {name} {{}}\n"
    fields = "".join(
        f"    pub {to_case(f.field_name, Case.SNAKE)}: {f.rust_type()},\n"
        for f in entry_def.fields
    )
    return f"pub struct {name} {{\n{fields}}}\n"


def render_validate_create(entry_def: EntryDefinition) -> str:
    """The create validation function, checking every entry the new one depends on."""
    snake = to_case(entry_def.name, Case.SNAKE)
    pascal = to_case(entry_def.name, Case.PASCAL)
    entry_arg = create_entry_argument(entry_def)
    checks = "\n".join(
        dependency_validation(field_def, reference, entry_arg)
        for field_def, reference in entry_type_dependencies(entry_def)
    )
    body = f"{checks}\n{_TODO}\n{_VALID}" if checks else f"{_TODO}\n{_VALID}"
    return _function(
        f"validate_create_{snake}",
        ["_action: EntryCreationAction", f"{entry_arg}: {pascal}"],
        body,
    )


def render_validate_update(entry_def: EntryDefinition, crud: Crud) -> str:
    """The update validation function; it rejects updates unless the entry can be updated."""
    snake = to_case(entry_def.name, Case.SNAKE)
    pascal = to_case(entry_def.name, Case.PASCAL)
    return _function(
        f"validate_update_{snake}",
        [
            "_action: Update",
            f"_{snake}: {pascal}",
            "_original_action: EntryCreationAction",
            f"_original_{snake}: {pascal}",
        ],
        _outcome(crud.update, f"{_plural_title(entry_def)} cannot be updated"),
    )


def render_validate_delete(entry_def: EntryDefinition, crud: Crud) -> str:
    """The delete validation function; it rejects deletes unless the entry can be deleted."""
    snake = to_case(entry_def.name, Case.SNAKE)
    pascal = to_case(entry_def.name, Case.PASCAL)
    return _function(
        f"validate_delete_{snake}",
        [
            "_action: Delete",
            "_original_action: EntryCreationAction",
            f"_original_{snake}: {pascal}",
        ],
        _outcome(crud.delete, f"{_plural_title(entry_def)} cannot be deleted"),
    )


def render_entry_definition_file(entry_def: EntryDefinition, crud: Crud) -> str:
    """The whole module defining the entry type and its validation functions."""
    type_definitions = [
        definition
        for definition in (f.field_type.rust_type_definition() for f in entry_def.fields)
        if definition is not None
    ]
    entry_struct = (
        "#[hdk_entry_helper]\n#[derive(Clone, PartialEq)]\n"
        + render_entry_definition_struct(entry_def)
    )
    items = [
        "use hdi::prelude::*;\n",
        *type_definitions,
        entry_struct,
        render_validate_create(entry_def),
        render_validate_update(entry_def, crud),
        render_validate_delete(entry_def, crud),
    ]
    return "\n".join(items)