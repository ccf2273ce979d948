"""
Client for sharing a diff through the diffy.org pastebin.

The raw diff is posted as a form field on a single worker thread. The
caller gets a :class:`~concurrent.futures.Future` that resolves once the
response has been reported and the follow-up action (open, copy, or
print the link) has run.

Transport failures, unreadable responses and server-side errors are
reported on the error stream from inside the worker and resolve the
future with ``None``; they never fail the run.
"""

from __future__ import annotations

import json
import logging
import sys
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import requests

from diff2html_cli.errors import ResponseParseError, TransportError
from diff2html_cli.pipeline.config import UploadTarget
from diff2html_cli.system.process import copy_to_clipboard, open_in_viewer

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping
    from typing import TextIO

logger = logging.getLogger(__name__)

DIFFY_API_URL = "http://diffy.org/api/new"
LINK_BANNER = "Link powered by diffy.org:"


@dataclass(frozen=True)
class UploadResponse:
    """Parsed body of a diffy.org ``/api/new`` response."""

    status: str
    url: str | None = None
    message: str | None = None

    @property
    def is_error(self) -> bool:
        return self.status == "error"

    @classmethod
    def from_body(cls, body: str) -> UploadResponse:
        """Parse a response body.

        Raises:
            ResponseParseError: If the body is not a JSON object, or if a
                non-error response carries no link.
        """
        try:
            data: Any = json.loads(body)
        except ValueError as exc:
            msg = "could not parse response"
            raise ResponseParseError(msg) from exc
        if not isinstance(data, dict):
            msg = "could not parse response"
            raise ResponseParseError(msg)
        status = str(data.get("status", ""))
        url = data.get("url")
        if status != "error" and not url:
            msg = "response has no link"
            raise ResponseParseError(msg)
        return cls(status=status, url=url, message=data.get("message"))


def _print_only(url: str) -> None:
    """The link has already been printed; nothing else to do."""


DEFAULT_FOLLOW_UPS: dict[UploadTarget, Callable[[str], None]] = {
    UploadTarget.browser: open_in_viewer,
    UploadTarget.pbcopy: copy_to_clipboard,
    UploadTarget.print: _print_only,
}


class UploadClient:
    """Posts raw diffs to diffy.org and acts on the returned link.

    Parameters
    ----------
    endpoint : str
        URL of the upload API.
    timeout : float, optional
        Timeout in seconds for the request. ``None`` waits indefinitely.
    follow_ups : mapping, optional
        Action per upload target, called with the returned URL.
    output, errors : TextIO, optional
        Streams for the link and for failure reports. Default to
        sys.stdout and sys.stderr.
    """

    def __init__(
        self,
        *,
        endpoint: str = DIFFY_API_URL,
        timeout: float | None = None,
        follow_ups: Mapping[UploadTarget, Callable[[str], None]] | None = None,
        output: TextIO | None = None,
        errors: TextIO | None = None,
    ) -> None:
        self._endpoint = endpoint
        self._timeout = timeout
        self._follow_ups = dict(follow_ups or DEFAULT_FOLLOW_UPS)
        self._output = output or sys.stdout
        self._errors = errors or sys.stderr

    def upload(self, diff: str, target: UploadTarget) -> Future[UploadResponse | None]:
        """Start the upload and return its completion future.

        The future resolves with the parsed response, or ``None`` when the
        upload failed and the failure was reported. A failing follow-up
        command is raised from :meth:`Future.result`.
        """
        executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="diffy-upload")
        try:
            return executor.submit(self._run, diff, target)
        finally:
            executor.shutdown(wait=False)

    def _run(self, diff: str, target: UploadTarget) -> UploadResponse | None:
        try:
            body = self._post(diff)
        except TransportError as exc:
            self._on_error(exc)
            return None

        try:
            response = UploadResponse.from_body(body)
        except ResponseParseError as exc:
            self._on_error(exc)
            return None

        self._on_response(response, target)
        return response

    def _post(self, diff: str) -> str:
        """Send the diff and return the response body text.

        Raises:
            TransportError: If the request cannot be completed.
        """
        logger.debug("Posting %d characters to %s", len(diff), self._endpoint)
        try:
            resp = requests.post(
                self._endpoint,
                data={"udiff": diff},
                timeout=self._timeout,
            )
        except requests.RequestException as exc:
            raise TransportError(str(exc)) from exc
        logger.debug("Upload answered with HTTP %s", resp.status_code)
        return resp.text

    def _on_error(self, exc: Exception) -> None:
        logger.debug("Upload failed: %s", exc)
        self._errors.write(f"Error: {exc}\n")

    def _on_response(self, response: UploadResponse, target: UploadTarget) -> None:
        if response.is_error:
            self._errors.write(f"Error: {response.message or 'upload rejected'}\n")
            return

        self._output.write(f"{LINK_BANNER}\n")
        self._output.write(f"{response.url}\n")
        if response.url:
            self._follow_ups[target](response.url)
