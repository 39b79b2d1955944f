"""Entry type, field and reference definitions used when scaffolding zomes."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union

from .naming import Case, InvalidArgumentsError, check_case, pluralize, to_case

__all__ = [
    "FieldKind",
    "FieldType",
    "field_types",
    "parse_field_type",
    "Cardinality",
    "FieldDefinition",
    "EntryTypeReference",
    "AgentReference",
    "Referenceable",
    "parse_entry_type_reference",
    "parse_referenceable",
    "EntryDefinition",
]


class FieldKind(Enum):
    """The kinds of field an entry may hold, named as in the generated code."""

    BOOL = "bool"
    STRING = "String"
    U32 = "u32"
    I32 = "i32"
    F32 = "f32"
    TIMESTAMP = "Timestamp"
    AGENT_PUB_KEY = "AgentPubKey"
    ACTION_HASH = "ActionHash"
    ENTRY_HASH = "EntryHash"
    DNA_HASH = "DnaHash"
    ENUM = "Enum"


@dataclass(frozen=True)
class FieldType:
    """A field type; enums carry a label and their variants."""

    kind: FieldKind
    label: str = ""
    variants: tuple[str, ...] = ()

    def __str__(self) -> str:
        return self.kind.value

    def rust_type(self) -> str:
        """The type as written in generated code."""
        if self.kind is FieldKind.ENUM:
            return self.label
        return self.kind.value

    def rust_type_definition(self) -> Optional[str]:
        """The type definition this field needs, for enums only."""
        if self.kind is not FieldKind.ENUM:
            return None
        variants = "".join(f"    {to_case(v, Case.PASCAL)},\n" for v in self.variants)
        return (
            "#[derive(Serialize, Deserialize, Debug, Clone, PartialEq)]\n"
            '#[serde(tag = "type")]\n'
            f"pub enum {self.label} {{\n{variants}}}\n"
        )

    def to_dict(self) -> dict:
        """Serialized form handed to templates."""
        data: dict = {"type": self.kind.value}
        if self.kind is FieldKind.ENUM:
            data["label"] = self.label
            data["variants"] = list(self.variants)
        return data


def field_types() -> list[FieldType]:
    """Every selectable field type, in the order they are offered."""
    order = [
        FieldKind.STRING,
        FieldKind.BOOL,
        FieldKind.U32,
        FieldKind.I32,
        FieldKind.F32,
        FieldKind.TIMESTAMP,
        FieldKind.ACTION_HASH,
        FieldKind.ENTRY_HASH,
        FieldKind.DNA_HASH,
        FieldKind.AGENT_PUB_KEY,
        FieldKind.ENUM,
    ]
    return [FieldType(kind) for kind in order]


def parse_field_type(name: str) -> FieldType:
    """Look up a field type by its name."""
    for field_type in field_types():
        if str(field_type) == name:
            return field_type
    allowed = "".join(str(ft) for ft in field_types())
    raise InvalidArgumentsError(f'Invalid field type: only "{allowed}" are allowed')


class Cardinality(Enum):
    """How many values a field holds."""

    SINGLE = "single"
    VECTOR = "vector"
    OPTION = "option"


@dataclass(frozen=True, order=True)
class EntryTypeReference:
    """A reference to an entry type, by entry hash or by action hash."""

    entry_type: str
    reference_entry_hash: bool

    def hash_type(self) -> FieldType:
        kind = FieldKind.ENTRY_HASH if self.reference_entry_hash else FieldKind.ACTION_HASH
        return FieldType(kind)

    def field_name(self, cardinality: Cardinality) -> str:
        if cardinality is Cardinality.VECTOR:
            return f"{to_case(pluralize(self.entry_type, 2), Case.SNAKE)}_hashes"
        return f"{to_case(self.entry_type, Case.SNAKE)}_hash"

    def display_name(self, cardinality: Cardinality) -> str:
        """The entry type name in singular or plural form."""
        return pluralize(self.entry_type, 2 if cardinality is Cardinality.VECTOR else 1)

    def label(self, cardinality: Cardinality) -> str:
        """The entry type name, pluralized only for vectors."""
        if cardinality is Cardinality.VECTOR:
            return pluralize(self.entry_type, 2)
        return self.entry_type

    def to_dict(self) -> dict:
        return {
            "name": self.label(Cardinality.SINGLE),
            "hash_type": str(self.hash_type()),
            "singular_arg": self.field_name(Cardinality.SINGLE),
        }


@dataclass(frozen=True)
class AgentReference:
    """A reference to an agent playing a role."""

    role: str

    def hash_type(self) -> FieldType:
        return FieldType(FieldKind.AGENT_PUB_KEY)

    def field_name(self, cardinality: Cardinality) -> str:
        return to_case(self.label(cardinality), Case.SNAKE)

    def label(self, cardinality: Cardinality) -> str:
        if cardinality is Cardinality.VECTOR:
            return pluralize(self.role, 2)
        return self.role

    def to_dict(self) -> dict:
        return {
            "name": self.label(Cardinality.SINGLE),
            "hash_type": str(self.hash_type()),
            "singular_arg": self.field_name(Cardinality.SINGLE),
        }


Referenceable = Union[EntryTypeReference, AgentReference]


@dataclass(frozen=True)
class FieldDefinition:
    """One field of an entry definition."""

    field_name: str
    field_type: FieldType
    widget: Optional[str]
    cardinality: Cardinality
    linked_from: Optional[Referenceable] = None

    def rust_type(self) -> str:
        inner = self.field_type.rust_type()
        if self.cardinality is Cardinality.OPTION:
            return f"Option<{inner}>"
        if self.cardinality is Cardinality.VECTOR:
            return f"Vec<{inner}>"
        return inner


def parse_entry_type_reference(text: str) -> EntryTypeReference:
    """Parse ``entry_type[:EntryHash|:ActionHash]``."""
    parts = text.split(":")
    check_case(parts[0], "entry type reference", Case.SNAKE)
    reference_entry_hash = False
    if len(parts) > 1:
        if parts[1] == "EntryHash":
            reference_entry_hash = True
        elif parts[1] != "ActionHash":
            raise InvalidArgumentsError(
                'second argument for reference type must be "EntryHash" or "ActionHash"'
            )
    return EntryTypeReference(to_case(parts[0], Case.PASCAL), reference_entry_hash)


def parse_referenceable(text: str) -> Referenceable:
    """Parse ``agent[:role]`` or an entry type reference."""
    parts = text.split(":")
    check_case(parts[0], "referenceable", Case.SNAKE)
    if parts[0] == "agent":
        return AgentReference(parts[1] if len(parts) > 1 else "agent")
    return parse_entry_type_reference(text)


@dataclass
class EntryDefinition:
    """An entry type to scaffold, with its fields."""

    name: str
    fields: list[FieldDefinition] = field(default_factory=list)
    reference_entry_hash: bool = False

    def referenceable(self) -> EntryTypeReference:
        return EntryTypeReference(self.name, self.reference_entry_hash)