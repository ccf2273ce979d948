"""Unified diff parser.

Reads the output of ``git diff`` (or any unified diff) into
:class:`~diff2html_cli.core.models.DiffFile` records.  Hunk line counts
from the ``@@`` headers are tracked so that content lines beginning with
``---`` or ``+++`` are not mistaken for file headers.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import PurePosixPath

from diff2html_cli.core.models import DiffBlock, DiffFile, DiffLine, LineType

_HUNK_HEADER = re.compile(r"^@@ -(\d+)(?:,(\d+))? \+(\d+)(?:,(\d+))? @@")
_GIT_HEADER = re.compile(r'^diff --git "?a/(.*?)"? "?b/(.*?)"?$')
_DEV_NULL = "/dev/null"


def _strip_name(raw: str) -> str:
    """Strip the a/ b/ prefix, quotes and trailing timestamp from a header name."""
    name = raw.split("\t", 1)[0].strip().strip('"')
    if name == _DEV_NULL:
        return name
    if name.startswith(("a/", "b/")):
        return name[2:]
    return name


def _language(name: str) -> str:
    """Guess a language tag from the file extension."""
    return PurePosixPath(name).suffix.lstrip(".").lower()


@dataclass
class _BlockBuilder:
    header: str
    old_start: int
    new_start: int
    old_left: int
    new_left: int
    old_line: int
    new_line: int
    lines: list[DiffLine] = field(default_factory=list)

    @property
    def is_open(self) -> bool:
        return self.old_left > 0 or self.new_left > 0

    def build(self) -> DiffBlock:
        return DiffBlock(
            header=self.header,
            old_start_line=self.old_start,
            new_start_line=self.new_start,
            lines=tuple(self.lines),
        )


@dataclass
class _FileBuilder:
    old_name: str = ""
    new_name: str = ""
    is_new: bool = False
    is_deleted: bool = False
    is_rename: bool = False
    is_binary: bool = False
    blocks: list[DiffBlock] = field(default_factory=list)
    current: _BlockBuilder | None = None
    seen_headers: bool = False

    def close_block(self) -> None:
        if self.current is not None:
            self.blocks.append(self.current.build())
            self.current = None

    def build(self) -> DiffFile:
        self.close_block()
        old_name, new_name = self.old_name, self.new_name
        if old_name == _DEV_NULL:
            old_name = new_name
        if new_name == _DEV_NULL:
            new_name = old_name
        lines = [line for block in self.blocks for line in block.lines]
        return DiffFile(
            old_name=old_name,
            new_name=new_name,
            language=_language(new_name or old_name),
            added_lines=sum(1 for line in lines if line.type == LineType.insert),
            deleted_lines=sum(1 for line in lines if line.type == LineType.delete),
            is_new=self.is_new,
            is_deleted=self.is_deleted,
            is_rename=self.is_rename,
            is_binary=self.is_binary,
            blocks=tuple(self.blocks),
        )


class DiffParser:
    """Line-oriented state machine over unified diff text."""

    def __init__(self) -> None:
        self._files: list[DiffFile] = []
        self._file: _FileBuilder | None = None

    def parse(self, text: str) -> tuple[DiffFile, ...]:
        """Parse *text* and return one DiffFile per changed file."""
        # Only "\n" ends a diff line; form feeds and the like are content
        lines = [line.removesuffix("\r") for line in text.split("\n")]
        if lines and not lines[-1]:
            lines.pop()
        for index, line in enumerate(lines):
            next_line = lines[index + 1] if index + 1 < len(lines) else ""
            self._feed(line, next_line)
        self._finish_file()
        return tuple(self._files)

    def _feed(self, line: str, next_line: str) -> None:
        diff_file = self._file
        block = diff_file.current if diff_file is not None else None

        if block is not None and block.is_open and self._feed_content(block, line):
            return

        if line.startswith("diff --git "):
            diff_file = self._start_file()
            match = _GIT_HEADER.match(line)
            if match:
                diff_file.old_name, diff_file.new_name = match.group(1), match.group(2)
            return

        if line.startswith("--- ") and next_line.startswith("+++ "):
            if diff_file is None or diff_file.seen_headers or diff_file.blocks:
                diff_file = self._start_file()
            diff_file.old_name = _strip_name(line[4:])
            diff_file.seen_headers = True
            if diff_file.old_name == _DEV_NULL:
                diff_file.is_new = True
            return

        if line.startswith("+++ ") and diff_file is not None and diff_file.current is None:
            diff_file.new_name = _strip_name(line[4:])
            if diff_file.new_name == _DEV_NULL:
                diff_file.is_deleted = True
            return

        match = _HUNK_HEADER.match(line)
        if match:
            if diff_file is None:
                diff_file = self._start_file()
            self._start_block(diff_file, line, match)
            return

        if diff_file is not None:
            self._feed_extended_header(diff_file, line)

    def _feed_content(self, block: _BlockBuilder, line: str) -> bool:
        """Consume a hunk content line; return False if it is not one."""
        marker = line[:1]
        content = line[1:]
        if marker == "+":
            block.lines.append(DiffLine(LineType.insert, content, None, block.new_line))
            block.new_line += 1
            block.new_left -= 1
        elif marker == "-":
            block.lines.append(DiffLine(LineType.delete, content, block.old_line, None))
            block.old_line += 1
            block.old_left -= 1
        elif marker in (" ", ""):
            block.lines.append(
                DiffLine(LineType.context, content, block.old_line, block.new_line)
            )
            block.old_line += 1
            block.new_line += 1
            block.old_left -= 1
            block.new_left -= 1
        elif marker == "\\":
            # "\ No newline at end of file"
            pass
        else:
            return False
        return True

    @staticmethod
    def _feed_extended_header(diff_file: _FileBuilder, line: str) -> None:
        if line.startswith("new file mode"):
            diff_file.is_new = True
        elif line.startswith("deleted file mode"):
            diff_file.is_deleted = True
        elif line.startswith("rename from "):
            diff_file.is_rename = True
            diff_file.old_name = line[len("rename from ") :]
        elif line.startswith("rename to "):
            diff_file.is_rename = True
            diff_file.new_name = line[len("rename to ") :]
        elif line.startswith("Binary files ") or line.startswith("GIT binary patch"):
            diff_file.is_binary = True

    @staticmethod
    def _start_block(diff_file: _FileBuilder, header: str, match: re.Match[str]) -> None:
        diff_file.close_block()
        old_start = int(match.group(1))
        old_count = int(match.group(2)) if match.group(2) is not None else 1
        new_start = int(match.group(3))
        new_count = int(match.group(4)) if match.group(4) is not None else 1
        diff_file.current = _BlockBuilder(
            header=header,
            old_start=old_start,
            new_start=new_start,
            old_left=old_count,
            new_left=new_count,
            old_line=old_start,
            new_line=new_start,
        )

    def _start_file(self) -> _FileBuilder:
        self._finish_file()
        self._file = _FileBuilder()
        return self._file

    def _finish_file(self) -> None:
        if self._file is not None:
            self._files.append(self._file.build())
            self._file = None


def parse_diff(text: str) -> tuple[DiffFile, ...]:
    """Parse unified diff text into DiffFile records."""
    return DiffParser().parse(text)
