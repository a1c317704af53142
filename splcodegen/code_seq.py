"""Sequences of machine instructions built during code generation."""

from __future__ import annotations

from typing import Iterable, Iterator, List

from splcodegen.code import Instr


class CodeSeq:
    """An ordered, growable sequence of instructions."""

    def __init__(self, instrs: Iterable[Instr] = ()) -> None:
        self._instrs: List[Instr] = list(instrs)

    def __iter__(self) -> Iterator[Instr]:
        return iter(self._instrs)

    def __len__(self) -> int:
        return len(self._instrs)

    def __add__(self, other: CodeSeq) -> CodeSeq:
        if not isinstance(other, CodeSeq):
            return NotImplemented
        return CodeSeq(self._instrs + other._instrs)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CodeSeq):
            return NotImplemented
        return self._instrs == other._instrs

    def __repr__(self) -> str:
        return f"CodeSeq({self._instrs!r})"

    def is_empty(self) -> bool:
        """Is this sequence empty?"""
        return not self._instrs

    def first(self) -> Instr:
        """Return the first instruction; the sequence must not be empty."""
        if not self._instrs:
            raise IndexError("first of an empty code sequence")
        return self._instrs[0]

    def rest(self) -> CodeSeq:
        """Return a new sequence without the first instruction."""
        if not self._instrs:
            raise IndexError("rest of an empty code sequence")
        return CodeSeq(self._instrs[1:])

    def last(self) -> Instr:
        """Return the last instruction; the sequence must not be empty."""
        if not self._instrs:
            raise IndexError("last of an empty code sequence")
        return self._instrs[-1]

    def append(self, instr: Instr) -> None:
        """Add ``instr`` to the end of this sequence."""
        if instr is None:
            raise ValueError("cannot append None to a code sequence")
        self._instrs.append(instr)

    def extend(self, other: Iterable[Instr]) -> None:
        """Add every instruction of ``other`` to the end of this sequence."""
        self._instrs.extend(other)