"""Naming of link types between referenceable things."""

from __future__ import annotations

from .definitions import Cardinality, Referenceable
from .naming import Case, pluralize, to_case

__all__ = ["link_type_name", "link_type_module_header"]


def link_type_name(from_referenceable: Referenceable, to_referenceable: Referenceable) -> str:
    """Name of the link type, e.g. ``PostToComments``."""
    source = to_case(pluralize(from_referenceable.label(Cardinality.SINGLE), 1), Case.PASCAL)
    target = to_case(pluralize(to_referenceable.label(Cardinality.VECTOR), 2), Case.PASCAL)
    return f"{source}To{target}"


def link_type_module_header(link_type: str) -> str:
    """Lines declaring the link type's module, prepended to the crate's lib.rs."""
    module = to_case(link_type, Case.SNAKE)
    return f"pub mod {module};\npub use {module}::*;\n\n"