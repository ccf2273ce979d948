"""Data models for parsed unified diffs."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class LineType(StrEnum):
    """Kind of a line inside a diff block."""

    insert = "insert"
    delete = "delete"
    context = "context"


@dataclass(frozen=True)
class DiffLine:
    """A single line of a diff block, without its +/-/space prefix."""

    type: LineType
    content: str
    old_number: int | None
    new_number: int | None

    @property
    def prefix(self) -> str:
        """Return the unified-diff prefix character for this line."""
        if self.type == LineType.insert:
            return "+"
        if self.type == LineType.delete:
            return "-"
        return " "


@dataclass(frozen=True)
class DiffBlock:
    """A hunk: the ``@@`` header and its lines."""

    header: str
    old_start_line: int
    new_start_line: int
    lines: tuple[DiffLine, ...]


@dataclass(frozen=True)
class DiffFile:
    """All changes made to one file."""

    old_name: str
    new_name: str
    language: str
    added_lines: int
    deleted_lines: int
    is_new: bool = False
    is_deleted: bool = False
    is_rename: bool = False
    is_binary: bool = False
    blocks: tuple[DiffBlock, ...] = ()

    @property
    def display_name(self) -> str:
        """Name shown in file headers, ``old → new`` for renames."""
        if self.is_rename and self.old_name != self.new_name:
            return f"{self.old_name} → {self.new_name}"
        if self.is_deleted:
            return self.old_name
        return self.new_name or self.old_name

    @property
    def tag(self) -> str:
        """Short status label for the file header."""
        if self.is_new:
            return "ADDED"
        if self.is_deleted:
            return "DELETED"
        if self.is_rename:
            return "RENAMED"
        return "CHANGED"
