"""Attributes of identifiers recorded in the symbol table."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from splcodegen.file_location import FileLocation


class IdKind(Enum):
    """Kinds of entries in the symbol table."""

    CONSTANT = 0
    VARIABLE = 1
    PROCEDURE = 2

    def __str__(self) -> str:
        return id_kind_string(self)


@dataclass
class IdAttrs:
    """Where an identifier was declared, what it is, and its offset.

    ``offset_count`` is the number of constant or variable declarations
    before this one in its scope.
    """

    file_loc: FileLocation
    kind: IdKind
    offset_count: int = 0


def proc_attrs(file_loc: FileLocation) -> IdAttrs:
    """Return attributes for a procedure declared at ``file_loc``."""
    return IdAttrs(file_loc, IdKind.PROCEDURE)


def id_kind_string(kind: IdKind) -> str:
    """Return the lowercase name of ``kind``."""
    return kind.name.lower()