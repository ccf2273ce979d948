"""Output distribution: route a rendered artifact to exactly one destination."""

from __future__ import annotations

import logging
import sys
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from diff2html_cli.pipeline.config import Destination
from diff2html_cli.system.files import write_text
from diff2html_cli.system.process import open_in_viewer

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import TextIO

    from diff2html_cli.pipeline.config import DeliveryConfig, RenderedArtifact

logger = logging.getLogger(__name__)


class OutputDistributor:
    """Delivers rendered artifacts to a file, a preview, or a text stream.

    Args:
        output: Stream for stdout delivery. Defaults to sys.stdout.
        preview_dir: Directory for preview files. Defaults to the system
            temporary directory.
        viewer: Callable that opens a path in the default viewer.
    """

    def __init__(
        self,
        output: TextIO | None = None,
        *,
        preview_dir: Path | None = None,
        viewer: Callable[[str], None] | None = None,
    ) -> None:
        self._output = output or sys.stdout
        self._preview_dir = preview_dir or Path(tempfile.gettempdir())
        self._viewer = viewer or open_in_viewer

    def distribute(self, artifact: RenderedArtifact, config: DeliveryConfig) -> None:
        """Deliver *artifact* to the destination selected by *config*."""
        rule = select_rule(config)
        logger.debug("Delivering %s output via %s", artifact.format, rule.name)
        rule.deliver(self, artifact, config)

    def preview_path(self, artifact: RenderedArtifact) -> Path:
        """Return the fixed preview path for an artifact's format."""
        return self._preview_dir / f"diff.{artifact.extension}"

    def preview(self, artifact: RenderedArtifact) -> Path:
        """Write *artifact* to its preview path and open it in the viewer."""
        path = write_text(self.preview_path(artifact), artifact.content)
        self._viewer(str(path))
        return path

    def _to_file(self, artifact: RenderedArtifact, config: DeliveryConfig) -> Path:
        if config.file_path is None:
            msg = "no output file configured"
            raise ValueError(msg)
        return write_text(config.file_path, artifact.content)

    def _to_preview(self, artifact: RenderedArtifact, _config: DeliveryConfig) -> Path:
        return self.preview(artifact)

    def _to_stream(self, artifact: RenderedArtifact, _config: DeliveryConfig) -> None:
        self._output.write(artifact.content)
        self._output.write("\n")


@dataclass(frozen=True)
class DeliveryRule:
    """One row of the precedence table."""

    name: str
    applies: Callable[[DeliveryConfig], bool]
    deliver: Callable[[OutputDistributor, RenderedArtifact, DeliveryConfig], object]


# Evaluated in order; the first rule that applies wins.
DELIVERY_RULES: tuple[DeliveryRule, ...] = (
    DeliveryRule(
        "file",
        lambda config: config.file_path is not None,
        OutputDistributor._to_file,
    ),
    DeliveryRule(
        "preview",
        lambda config: config.destination == Destination.preview,
        OutputDistributor._to_preview,
    ),
    DeliveryRule("stdout", lambda config: True, OutputDistributor._to_stream),
)


def select_rule(config: DeliveryConfig) -> DeliveryRule:
    """Return the first delivery rule that applies to *config*."""
    return next(rule for rule in DELIVERY_RULES if rule.applies(config))
