"""
types.py.

Does: Define the transport protocol and callback aliases the upload workflow
depends on, so tests and alternative HTTP stacks can plug in.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from photo_tagger.tagging.models import ImagePayload, UploadResult
    from photo_tagger.tagging.router import ImaggaRequest

ByteProgress = Callable[[int, int], None]
ProgressCallback = Callable[[float], None]
CompletionCallback = Callable[["UploadResult"], None]


@runtime_checkable
class TransportProtocol(Protocol):
    """
    Structural contract for the HTTP collaborator of UploadWorkflow.

    - upload(request, payload, on_progress): send payload as multipart part
      'imagefile', report (bytes_written, total_bytes) as the body streams,
      return the decoded JSON body.
    - get(request): send a parameterized request, return the decoded JSON body.

    Both raise TransportError on network failure, timeout, HTTP error status
    or an undecodable body.
    """

    def upload(
        self, request: ImaggaRequest, payload: ImagePayload, on_progress: ByteProgress | None = None
    ) -> Any: ...
    def get(self, request: ImaggaRequest) -> Any: ...


__all__ = ["ByteProgress", "ProgressCallback", "CompletionCallback", "TransportProtocol"]

__docformat__ = "google"
