"""Which update and delete operations an entry type supports."""

from __future__ import annotations

from dataclasses import dataclass

from .naming import InvalidArgumentsError

__all__ = ["Crud", "parse_crud"]


@dataclass(frozen=True)
class Crud:
    """Optional operations; create and read always exist."""

    update: bool = False
    delete: bool = False


def parse_crud(crud_str: str) -> Crud:
    """Parse a string made of the letters c, r, u and d."""
    if "c" not in crud_str:
        raise InvalidArgumentsError("create ('c') must be present")
    if "r" not in crud_str:
        raise InvalidArgumentsError("read ('r') must be present")
    invalid = set(crud_str) - set("crud")
    if invalid:
        raise InvalidArgumentsError(
            "Only 'c', 'r', 'u' and 'd' are allowed in the crud argument"
        )
    return Crud(update="u" in crud_str, delete="d" in crud_str)