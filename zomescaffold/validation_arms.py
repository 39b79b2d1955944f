"""Source text of the items and match arms added to an integrity zome's validation."""

from __future__ import annotations

from .definitions import EntryDefinition
from .naming import Case, to_case

__all__ = [
    "entry_types_enum_item",
    "entry_type_variant",
    "integrity_module_header",
    "store_record_create_arm",
    "store_record_update_arm",
    "store_record_delete_arm",
    "store_entry_create_arm",
    "store_entry_update_arm",
    "register_update_arm",
    "register_delete_arm",
]

_DIFFERENT_ENTRY_TYPE = "The updated entry type must be the same as the original entry type"


def _names(entry_def: EntryDefinition) -> tuple[str, str]:
    return to_case(entry_def.name, Case.PASCAL), to_case(entry_def.name, Case.SNAKE)


def entry_types_enum_item() -> str:
    """The empty entry types enum added to a zome that defines none yet."""
    return "\n".join(
        [
            "#[derive(Serialize, Deserialize)]",
            '#[serde(tag = "type")]',
            "#[hdk_entry_defs]",
            "#[unit_enum(UnitEntryTypes)]",
            "pub enum EntryTypes {}",
        ]
    )


def entry_type_variant(entry_def: EntryDefinition) -> str:
    """The entry types enum variant carrying the entry struct."""
    pascal, _ = _names(entry_def)
    return f"{pascal}({pascal})"


def integrity_module_header(entry_def: EntryDefinition) -> str:
    """Lines declaring the entry's module, prepended to the crate's lib.rs."""
    _, snake = _names(entry_def)
    return f"pub mod {snake};\npub use {snake}::*;\n\n"


def _create_arm(entry_def: EntryDefinition, creation: str) -> str:
    pascal, snake = _names(entry_def)
    return (
        f"EntryTypes::{pascal}({snake}) => "
        f"validate_create_{snake}(EntryCreationAction::{creation}(action), {snake}),"
    )


def store_record_create_arm(entry_def: EntryDefinition) -> str:
    """Arm validating the creation of a record holding this entry type."""
    return _create_arm(entry_def, "Create")


def store_record_update_arm(entry_def: EntryDefinition) -> str:
    """Arm validating an update of a record, checking the original has the same type."""
    pascal, snake = _names(entry_def)
    return "\n".join(
        [
            f"EntryTypes::{pascal}({snake}) => {{",
            f"    let result = validate_create_{snake}("
            f"EntryCreationAction::Update(action.clone()), {snake}.clone())?;",
            "    if let ValidateCallbackResult::Valid = result {",
            f"        let original_{snake}: Option<{pascal}> = original_record.entry()"
            ".to_app_option().map_err(|e| wasm_error!(e))?;",
            f"        let original_{snake} = match original_{snake} {{",
            f"            Some({snake}) => {snake},",
            "            None => {",
            "                return Ok(ValidateCallbackResult::Invalid("
            f'"{_DIFFERENT_ENTRY_TYPE}".to_string()));',
            "            }",
            "        };",
            f"        validate_update_{snake}(action, {snake}, original_action, original_{snake})",
            "    } else {",
            "        Ok(result)",
            "    }",
            "},",
        ]
    )


def store_record_delete_arm(entry_def: EntryDefinition) -> str:
    """Arm validating the deletion of a record holding this entry type."""
    pascal, snake = _names(entry_def)
    return (
        f"EntryTypes::{pascal}(original_{snake}) => "
        f"validate_delete_{snake}(action, original_action, original_{snake}),"
    )


def store_entry_create_arm(entry_def: EntryDefinition) -> str:
    """Arm validating a stored entry created by a create action."""
    return _create_arm(entry_def, "Create")


def store_entry_update_arm(entry_def: EntryDefinition) -> str:
    """Arm validating a stored entry created by an update action."""
    return _create_arm(entry_def, "Update")


def register_update_arm(entry_def: EntryDefinition) -> str:
    """Arm validating an update whose original entry has the same type."""
    pascal, snake = _names(entry_def)
    return (
        f"(EntryTypes::{pascal}({snake}), EntryTypes::{pascal}(original_{snake})) => \n"
        f"    validate_update_{snake}(action, {snake}, original_action, original_{snake}),"
    )


def register_delete_arm(entry_def: EntryDefinition) -> str:
    """Arm validating the registration of a delete of this entry type."""
    pascal, snake = _names(entry_def)
    return (
        f"EntryTypes::{pascal}({snake}) => "
        f"validate_delete_{snake}(action, original_action, {snake}),"
    )