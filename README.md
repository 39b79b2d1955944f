# zomescaffold

`zomescaffold` generates Rust source text for Holochain zomes. It covers entry
type definitions and their validation functions, CRUD handlers for coordinator
zomes, and the names of link types between entry types and agents.

It is a library with no dependencies outside the standard library. You
describe an entry type with plain Python values and get strings of Rust code
back.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Describing an entry type

Fields use a compact syntax, `name:Type[:widget[:linked_from]]`. Wrapping the
type in `Vec<...>` or `Option<...>` sets the cardinality. Enums are written
`name:Enum:widget:Label:variant_a.variant_b`.

```python
from zomescaffold.crud import parse_crud
from zomescaffold.definitions import EntryDefinition
from zomescaffold.fields import parse_fields

fields = [
    parse_fields("title:String:TextField"),
    parse_fields("author:AgentPubKey::author"),
    parse_fields("tags:Vec<String>"),
]
post = EntryDefinition(name="post", fields=fields, reference_entry_hash=False)
crud = parse_crud("crud")
```

A fourth part on an `AgentPubKey`, `ActionHash` or `EntryHash` field names
what the field is linked from: an `AgentReference` with that role, or an
`EntryTypeReference` to that entry type.

`parse_crud` returns a `Crud` with `update` and `delete` flags. Create and read
are always present; it raises `InvalidArgumentsError` (a `ValueError`) unless
both `c` and `r` appear and only `c`, `r`, `u` and `d` are used.

`zomescaffold.definitions` also provides `FieldType`, `FieldKind`,
`Cardinality`, `FieldDefinition`, `field_types()`, `parse_field_type()`,
`parse_entry_type_reference()` (`entry_type[:EntryHash|:ActionHash]`) and
`parse_referenceable()` (`agent[:role]` or an entry type reference).

## The integrity side

```python
from zomescaffold.integrity import render_entry_definition_file

source = render_entry_definition_file(post, crud)
```

This gives the entry struct, the enum types its fields need, and the
`validate_create_*`, `validate_update_*` and `validate_delete_*` functions.
Update and delete validation reject the operation unless `crud` allows it.
The pieces are also available one at a time: `render_entry_definition_struct`,
`render_validate_create`, `render_validate_update` and
`render_validate_delete`.

`zomescaffold.dependencies` builds the checks in the create validation that
every entry referenced through a linked field exists: `entry_type_dependencies`,
`dependency_validation` and `create_entry_argument`.

`zomescaffold.validation_arms` produces the fragments for an existing
`validate` callback and crate: `entry_types_enum_item`, `entry_type_variant`,
`integrity_module_header`, and one match arm per op:
`store_record_create_arm`, `store_record_update_arm`,
`store_record_delete_arm`, `store_entry_create_arm`, `store_entry_update_arm`,
`register_update_arm` and `register_delete_arm`.

## The coordinator side

```python
from zomescaffold.coordinator import create_handler, delete_handler, update_handler

code = "\n".join([
    create_handler(post),
    update_handler(post.name, True),
    delete_handler(post.name),
])
```

`create_handler` also creates a link from every linked field. The read
handlers match the update strategy: `no_update_read_handler`,
`read_handler_with_linking_to_updates` and
`read_handler_without_linking_to_updates`. `updates_link_name` gives the link
type used to link an original entry to its updates, and
`create_link_for_cardinality` the link statements for a single field.

## Link types

```python
from zomescaffold.definitions import parse_referenceable
from zomescaffold.link_type import link_type_name, link_type_module_header

link_type_name(parse_referenceable("agent:creator"), parse_referenceable("post"))
# 'CreatorToPosts'
link_type_module_header("CreatorToPosts")
# 'pub mod creator_to_posts;\npub use creator_to_posts::*;\n\n'
```

## Names and errors

`zomescaffold.naming` holds case conversion (`to_case` and `check_case`, with
the `Case` enum) and `pluralize`. Errors derive from `ScaffoldError`:
`InvalidArgumentsError`, `InvalidCaseError` and `InvalidExampleTypeError`.

## What it does not do

The package only returns text. It has no command-line program and asks no
questions interactively. It does not read, edit or write the files of a zome
crate: inserting the generated items into an existing `lib.rs` or `validate`
callback, and writing files to disk, are left to the caller. It does not
generate example applications or user-interface templates.