"""Upload of raw diffs to diffy.org."""

from diff2html_cli.upload.client import DIFFY_API_URL, UploadClient, UploadResponse

__all__ = ["DIFFY_API_URL", "UploadClient", "UploadResponse"]
