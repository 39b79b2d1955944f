"""Source text of the CRUD handlers generated for a coordinator zome."""

from __future__ import annotations

from .definitions import Cardinality, EntryDefinition
from .link_type import link_type_name
from .naming import Case, to_case

__all__ = [
    "no_update_read_handler",
    "read_handler_without_linking_to_updates",
    "updates_link_name",
    "read_handler_with_linking_to_updates",
    "create_link_for_cardinality",
    "create_handler",
    "update_handler",
    "update_handler_without_linking_on_each_update",
    "update_handler_linking_on_each_update",
    "delete_handler",
]


def _snake(name: str) -> str:
    return to_case(name, Case.SNAKE)


def _pascal(name: str) -> str:
    return to_case(name, Case.PASCAL)


def _lines(*lines: str) -> str:
    return "\n".join(lines)


def no_update_read_handler(entry_def: EntryDefinition) -> str:
    """Read handler for an entry type that can never be updated."""
    hash_type = str(entry_def.referenceable().hash_type())
    s = _snake(entry_def.name)
    return _lines(
        "#[hdk_extern]",
        f"pub fn get_{s}({s}_hash: {hash_type}) -> ExternResult<Option<Record>> {{",
        f"  get({s}_hash, GetOptions::default())",
        "}",
    )


def read_handler_without_linking_to_updates(entry_def: EntryDefinition) -> str:
    """Read handler that follows the update chain to the latest version."""
    s = _snake(entry_def.name)
    p = _pascal(entry_def.name)
    return _lines(
        "#[hdk_extern]",
        f"pub fn get_{s}(original_{s}_hash: ActionHash) -> ExternResult<Option<Record>> {{",
        f"  get_latest_{s}(original_{s}_hash)",
        "}",
        "",
        f"fn get_latest_{s}({s}_hash: ActionHash) -> ExternResult<Option<Record>> {{",
        f"  let details = get_details({s}_hash, GetOptions::default())?",
        f'      .ok_or(wasm_error!(WasmErrorInner::Guest("{p} not found".into())))?;',
        "",
        "  let record_details = match details {",
        "    Details::Entry(_) => Err(wasm_error!(WasmErrorInner::Guest(",
        '      "Malformed details".into()',
        "    ))),",
        "    Details::Record(record_details) => Ok(record_details)",
        "  }?;",
        "",
        "  // If there is some delete action, it means that the whole entry is deleted",
        "  if record_details.deletes.len() > 0 {",
        "    return Ok(None);",
        "  }",
        "    ",
        "  match record_details.updates.last() {",
        f"    Some(update) => get_latest_{s}(update.action_address().clone()),",
        "    None => Ok(Some(record_details.record)),",
        "  }",
        "}",
        "",
    )


def updates_link_name(entry_def_name: str) -> str:
    """Name of the link type from an original entry to its updates."""
    return f"{_pascal(entry_def_name)}Updates"


def read_handler_with_linking_to_updates(entry_def_name: str) -> str:
    """Read handler that follows the newest link from the original to its updates."""
    s = _snake(entry_def_name)
    link = updates_link_name(entry_def_name)
    return _lines(
        "#[hdk_extern]",
        f"pub fn get_{s}(original_{s}_hash: ActionHash) -> ExternResult<Option<Record>> {{",
        f"  let links = get_links(original_{s}_hash.clone(), LinkTypes::{link}, None)?;",
        "",
        "  let latest_link = links.into_iter().max_by(|link_a, link_b| "
        "link_a.timestamp.cmp(&link_b.timestamp));",
        "  ",
        f"  let latest_{s}_hash = match latest_link {{",
        "    Some(link) => ActionHash::from(link.target.clone()),",
        f"    None => original_{s}_hash.clone()   ",
        "  };",
        " ",
        f"  get(latest_{s}_hash, GetOptions::default())",
        "}",
        "",
    )


def create_link_for_cardinality(
    entry_def: EntryDefinition,
    field_name: str,
    link_type_name: str,
    cardinality: Cardinality,
) -> str:
    """Statements creating links from a field's value(s) to the new entry."""
    s = _snake(entry_def.name)
    target = f"{s}_entry_hash" if entry_def.reference_entry_hash else f"{s}_hash"
    if cardinality is Cardinality.SINGLE:
        return (
            f"  create_link({s}.{field_name}.clone(), {target}.clone(), "
            f"LinkTypes::{link_type_name}, ())?;"
        )
    if cardinality is Cardinality.OPTION:
        return _lines(
            f"  if let Some(base) = {s}.{field_name}.clone() {{",
            f"    create_link(base, {target}.clone(), LinkTypes::{link_type_name}, ())?;",
            "  }",
        )
    return _lines(
        f"  for base in {s}.{field_name}.clone() {{",
        f"    create_link(base, {target}.clone(), LinkTypes::{link_type_name}, ())?;",
        "  }",
    )


def create_handler(entry_def: EntryDefinition) -> str:
    """Create handler, also linking from every field that declares a link."""
    s = _snake(entry_def.name)
    p = _pascal(entry_def.name)
    linked = [f for f in entry_def.fields if f.linked_from is not None]

    statements: list[str] = []
    if entry_def.reference_entry_hash and linked:
        statements.append(f"let {s}_entry_hash = hash_entry(&{s})?;")
    statements.extend(
        create_link_for_cardinality(
            entry_def,
            f.field_name,
            link_type_name(f.linked_from, entry_def.referenceable()),
            f.cardinality,
        )
        for f in linked
    )

    return _lines(
        "#[hdk_extern]",
        f"pub fn create_{s}({s}: {p}) -> ExternResult<Record> {{",
        f"  let {s}_hash = create_entry(&EntryTypes::{p}({s}.clone()))?;",
        "\n\n".join(statements),
        "    ",
        f"  let record = get({s}_hash.clone(), GetOptions::default())?",
        "        .ok_or(wasm_error!(WasmErrorInner::Guest(String::from("
        f'"Could not find the newly created {p}"))))?;',
        "",
        "  Ok(record)",
        "}",
        "",
    )


def update_handler(entry_def_name: str, link_from_original_to_each_update: bool) -> str:
    """Update handler, linking from the original when asked to."""
    if link_from_original_to_each_update:
        return update_handler_linking_on_each_update(entry_def_name)
    return update_handler_without_linking_on_each_update(entry_def_name)


def update_handler_without_linking_on_each_update(entry_def_name: str) -> str:
    """Update handler that only updates the previous version."""
    s = _snake(entry_def_name)
    p = _pascal(entry_def_name)
    return _lines(
        "#[derive(Serialize, Deserialize, Debug)]",
        f"pub struct Update{p}Input {{",
        f"  pub previous_{s}_hash: ActionHash,",
        f"  pub updated_{s}: {p}",
        "}",
        "",
        "#[hdk_extern]",
        f"pub fn update_{s}(input: Update{p}Input) -> ExternResult<Record> {{",
        f"  let updated_{s}_hash = update_entry(input.previous_{s}_hash, &input.updated_{s})?;",
        "",
        f"  let record = get(updated_{s}_hash.clone(), GetOptions::default())?",
        "        .ok_or(wasm_error!(WasmErrorInner::Guest(String::from("
        f'"Could not find the newly updated {p}"))))?;',
        "    ",
        "  Ok(record)",
        "}",
        "",
    )


def update_handler_linking_on_each_update(entry_def_name: str) -> str:
    """Update handler that also links the original entry to the new version."""
    s = _snake(entry_def_name)
    p = _pascal(entry_def_name)
    link = updates_link_name(entry_def_name)
    return _lines(
        "#[derive(Serialize, Deserialize, Debug)]",
        f"pub struct Update{p}Input {{",
        f"  pub original_{s}_hash: ActionHash,",
        f"  pub previous_{s}_hash: ActionHash,",
        f"  pub updated_{s}: {p}",
        "}",
        "",
        "#[hdk_extern]",
        f"pub fn update_{s}(input: Update{p}Input) -> ExternResult<Record> {{",
        f"  let updated_{s}_hash = update_entry(input.previous_{s}_hash.clone(), "
        f"&input.updated_{s})?;",
        "        ",
        f"  create_link(input.original_{s}_hash.clone(), updated_{s}_hash.clone(), "
        f"LinkTypes::{link}, ())?;",
        "",
        f"  let record = get(updated_{s}_hash.clone(), GetOptions::default())?",
        "        .ok_or(wasm_error!(WasmErrorInner::Guest(String::from("
        f'"Could not find the newly updated {p}"))))?;',
        "    ",
        "  Ok(record)",
        "}",
        "",
    )


def delete_handler(entry_def_name: str) -> str:
    """Delete handler for an entry type."""
    s = _snake(entry_def_name)
    return _lines(
        "#[hdk_extern]",
        f"pub fn delete_{s}(original_{s}_hash: ActionHash) -> ExternResult<ActionHash> {{",
        f"  delete_entry(original_{s}_hash)",
        "}",
        "",
    )