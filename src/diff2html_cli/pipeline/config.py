"""Immutable run configuration built once from CLI flags."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

from diff2html_cli.core.highlight import DiffGranularity

if TYPE_CHECKING:
    from pathlib import Path


class Layout(StrEnum):
    """Visual arrangement of rendered HTML."""

    line = "line"
    side = "side"


class OutputFormat(StrEnum):
    """Rendered artifact format."""

    html = "html"
    json = "json"


class InputMode(StrEnum):
    """Where the raw diff comes from."""

    file = "file"
    command = "command"


class Destination(StrEnum):
    """Where rendered output goes when no file path is given."""

    preview = "preview"
    stdout = "stdout"


class UploadTarget(StrEnum):
    """Follow-up action after a successful upload."""

    browser = "browser"
    pbcopy = "pbcopy"
    print = "print"


@dataclass(frozen=True)
class InputConfig:
    """How to acquire the raw diff.

    In file mode the first argument is the diff file; in command mode
    all arguments are passed through to ``git diff``.
    """

    mode: InputMode = InputMode.command
    args: tuple[str, ...] = ()

    @property
    def file_arg(self) -> str | None:
        """Return the diff file path given in file mode, if any."""
        return self.args[0] if self.args else None


@dataclass(frozen=True)
class RenderConfig:
    """Controls how the raw diff is rendered."""

    granularity: DiffGranularity = DiffGranularity.word
    layout: Layout = Layout.line
    format: OutputFormat = OutputFormat.html


@dataclass(frozen=True)
class DeliveryConfig:
    """Controls where the result goes.

    Precedence: ``upload_target`` over ``file_path`` over ``destination``.
    """

    destination: Destination = Destination.preview
    file_path: Path | None = None
    upload_target: UploadTarget | None = None


@dataclass(frozen=True)
class RenderedArtifact:
    """Rendered output tagged with its format."""

    content: str
    format: OutputFormat

    @property
    def extension(self) -> str:
        """File extension for this artifact, without the dot."""
        return self.format.value
