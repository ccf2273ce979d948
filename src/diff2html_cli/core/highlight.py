"""Intra-line change highlighting using difflib."""

from __future__ import annotations

import difflib
import html
import re
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

from diff2html_cli.core.models import LineType

if TYPE_CHECKING:
    from collections.abc import Sequence

    from diff2html_cli.core.models import DiffLine

_WORD_TOKENS = re.compile(r"\w+|\s+|[^\w\s]")


class DiffGranularity(StrEnum):
    """Unit at which changed lines are compared."""

    word = "word"
    char = "char"


@dataclass(frozen=True)
class HighlightConfig:
    """Engine flags for intra-line comparison.

    Exactly one of the two flags is set when built with
    :meth:`from_granularity`.
    """

    word_by_word: bool = True
    char_by_char: bool = False

    @classmethod
    def from_granularity(cls, granularity: DiffGranularity) -> HighlightConfig:
        """Map a granularity choice onto the two engine flags."""
        return cls(
            word_by_word=granularity == DiffGranularity.word,
            char_by_char=granularity == DiffGranularity.char,
        )


def _tokenize(text: str, config: HighlightConfig) -> list[str]:
    if config.char_by_char:
        return list(text)
    return _WORD_TOKENS.findall(text)


def highlight_pair(old: str, new: str, config: HighlightConfig) -> tuple[str, str]:
    """Return HTML for a deleted/inserted line pair with changes marked.

    Removed tokens are wrapped in ``<del>`` on the old side and added
    tokens in ``<ins>`` on the new side.  All text is HTML-escaped.
    """
    old_tokens = _tokenize(old, config)
    new_tokens = _tokenize(new, config)
    matcher = difflib.SequenceMatcher(None, old_tokens, new_tokens, autojunk=False)

    old_parts: list[str] = []
    new_parts: list[str] = []
    for tag, i1, i2, j1, j2 in matcher.get_opcodes():
        old_chunk = html.escape("".join(old_tokens[i1:i2]))
        new_chunk = html.escape("".join(new_tokens[j1:j2]))
        if tag == "equal":
            old_parts.append(old_chunk)
            new_parts.append(new_chunk)
            continue
        if old_chunk:
            old_parts.append(f"<del>{old_chunk}</del>")
        if new_chunk:
            new_parts.append(f"<ins>{new_chunk}</ins>")

    return "".join(old_parts), "".join(new_parts)


@dataclass(frozen=True)
class ChangeRun:
    """Either a single context line or a run of deletions then insertions."""

    context: DiffLine | None = None
    deleted: tuple[DiffLine, ...] = ()
    inserted: tuple[DiffLine, ...] = ()


def pair_changes(lines: Sequence[DiffLine]) -> list[ChangeRun]:
    """Group a block's lines, in order, into context lines and change runs.

    A change run is the deletions immediately followed by the insertions
    that replace them.
    """
    runs: list[ChangeRun] = []
    deleted: list[DiffLine] = []
    inserted: list[DiffLine] = []

    def flush() -> None:
        if deleted or inserted:
            runs.append(ChangeRun(deleted=tuple(deleted), inserted=tuple(inserted)))
            deleted.clear()
            inserted.clear()

    for line in lines:
        if line.type == LineType.context:
            flush()
            runs.append(ChangeRun(context=line))
        elif line.type == LineType.delete:
            if inserted:
                flush()
            deleted.append(line)
        else:
            inserted.append(line)
    flush()
    return runs


def render_run(
    deleted: Sequence[DiffLine],
    inserted: Sequence[DiffLine],
    config: HighlightConfig,
) -> tuple[list[str], list[str]]:
    """Return escaped HTML contents for a run of deleted and inserted lines.

    Lines are paired in order; paired lines get intra-line highlighting,
    the rest are escaped as-is.
    """
    old_html = [html.escape(line.content) for line in deleted]
    new_html = [html.escape(line.content) for line in inserted]
    for index in range(min(len(deleted), len(inserted))):
        old_html[index], new_html[index] = highlight_pair(
            deleted[index].content, inserted[index].content, config
        )
    return old_html, new_html
