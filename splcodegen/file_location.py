"""Source file locations, used in error messages and AST nodes."""

from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass
class FileLocation:
    """A position in a source file: its name and the line of the first token."""

    filename: str
    line: int

    def __post_init__(self) -> None:
        if self.filename is None:
            raise ValueError("a file location needs a filename")

    def copy(self) -> FileLocation:
        """Return a fresh, independent copy of this location."""
        return replace(self)

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}"