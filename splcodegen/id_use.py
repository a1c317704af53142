"""Results of looking a name up in the symbol table."""

from __future__ import annotations

from dataclasses import dataclass

from splcodegen.id_attrs import IdAttrs


@dataclass(frozen=True)
class LexicalAddress:
    """Scopes outward from the use, and word offset in that activation record."""

    levels_outward: int
    offset_in_ar: int


@dataclass
class IdUse:
    """The attributes found for a name and how many scopes out they were declared."""

    attrs: IdAttrs
    levels_outward: int

    def __post_init__(self) -> None:
        if self.attrs is None:
            raise ValueError("an identifier use needs attributes")

    def lexical_address(self) -> LexicalAddress:
        """Return the lexical address of this use."""
        return LexicalAddress(self.levels_outward, self.attrs.offset_count)