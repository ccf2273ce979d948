"""Top-level sequencing of acquisition, rendering and delivery."""

from __future__ import annotations

import logging
from enum import StrEnum
from typing import TYPE_CHECKING

from diff2html_cli.errors import EmptyInputError
from diff2html_cli.pipeline.acquire import acquire
from diff2html_cli.pipeline.distribute import OutputDistributor
from diff2html_cli.pipeline.render import render
from diff2html_cli.upload.client import UploadClient

if TYPE_CHECKING:
    from collections.abc import Callable

    from diff2html_cli.pipeline.config import (
        DeliveryConfig,
        InputConfig,
        RenderConfig,
        RenderedArtifact,
    )

logger = logging.getLogger(__name__)

EMPTY_INPUT_MESSAGE = "The input is empty. Try again."


class PipelineState(StrEnum):
    """Lifecycle of a single run."""

    idle = "idle"
    acquiring = "acquiring"
    uploading = "uploading"
    rendering = "rendering"
    distributing = "distributing"
    done = "done"
    errored = "errored"


class PipelineController:
    """Runs one invocation: acquire, then upload or render and distribute.

    Collaborators are injectable for testing; the defaults are the real
    implementations. The upload future is awaited before the run is
    done, so follow-up actions always complete before process exit.
    """

    def __init__(
        self,
        input_config: InputConfig,
        render_config: RenderConfig,
        delivery_config: DeliveryConfig,
        *,
        acquirer: Callable[..., str] = acquire,
        renderer: Callable[[str, RenderConfig], RenderedArtifact] = render,
        distributor: OutputDistributor | None = None,
        uploader: UploadClient | None = None,
    ) -> None:
        self._input = input_config
        self._render = render_config
        self._delivery = delivery_config
        self._acquirer = acquirer
        self._renderer = renderer
        self._distributor = distributor
        self._uploader = uploader
        self.state = PipelineState.idle

    def run(self) -> None:
        """Execute the pipeline.

        Raises:
            EmptyInputError: If the acquired diff is empty.
            OSError, Diff2HtmlError: Propagated unchanged from any step.
        """
        try:
            self._run()
        except Exception:
            self._transition(PipelineState.errored)
            raise

    def _run(self) -> None:
        self._transition(PipelineState.acquiring)
        raw = self._acquirer(self._input.mode, self._input.file_arg, self._input.args)
        if not raw:
            raise EmptyInputError(EMPTY_INPUT_MESSAGE)

        target = self._delivery.upload_target
        if target is not None:
            self._transition(PipelineState.uploading)
            uploader = self._uploader or UploadClient()
            uploader.upload(raw, target).result()
        else:
            self._transition(PipelineState.rendering)
            artifact = self._renderer(raw, self._render)
            self._transition(PipelineState.distributing)
            distributor = self._distributor or OutputDistributor()
            distributor.distribute(artifact, self._delivery)

        self._transition(PipelineState.done)

    def _transition(self, state: PipelineState) -> None:
        logger.debug("Pipeline %s -> %s", self.state, state)
        self.state = state
