"""Acquire, render and deliver pipeline."""

from diff2html_cli.pipeline.config import (
    DeliveryConfig,
    Destination,
    InputConfig,
    InputMode,
    Layout,
    OutputFormat,
    RenderConfig,
    RenderedArtifact,
    UploadTarget,
)

__all__ = [
    "DeliveryConfig",
    "Destination",
    "InputConfig",
    "InputMode",
    "Layout",
    "OutputFormat",
    "RenderConfig",
    "RenderedArtifact",
    "UploadTarget",
]
