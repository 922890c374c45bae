"""
transport.py
============

Does: Send ImaggaRequest objects over HTTP with a shared requests.Session:
      multipart image upload with byte-progress reporting, plain GETs, and
      JSON decoding. Every failure is raised as TransportError.
Returns: Decoded JSON bodies (dict/list/...).
Used by: UploadWorkflow (default transport).
"""

from __future__ import annotations

import logging
from typing import Any

import requests  # type: ignore[import-untyped]
from urllib3 import encode_multipart_formdata

from photo_tagger.tagging.models import ImagePayload
from photo_tagger.tagging.router import ImaggaRequest
from photo_tagger.tagging.types import ByteProgress

logger = logging.getLogger(__name__)

UPLOAD_FIELD = "imagefile"
CHUNK_SIZE = 8192

# Single session for connection reuse
_session = requests.Session()

__all__ = ["TransportError", "ProgressBody", "ImaggaTransport", "UPLOAD_FIELD"]


class TransportError(RuntimeError):
    """Raise when a request cannot produce a decoded JSON body."""


class ProgressBody:
    """Does: Stream an in-memory request body while reporting bytes sent.
    Args: body: encoded bytes; on_progress: (bytes_written, total_bytes) callback;
          chunk_size: default read size when the caller does not pass one.
    Returns: File-like object with a length, so requests sends Content-Length.
    """

    def __init__(self, body: bytes, on_progress: ByteProgress | None = None, chunk_size: int = CHUNK_SIZE):
        self._body = body
        self._on_progress = on_progress
        self._chunk_size = chunk_size
        self._offset = 0

    def __len__(self) -> int:
        return len(self._body)

    def read(self, size: int | None = -1) -> bytes:
        if size is None or size < 0:
            size = len(self._body) - self._offset
        chunk = self._body[self._offset : self._offset + size]
        if chunk:
            self._offset += len(chunk)
            if self._on_progress is not None:
                self._on_progress(self._offset, len(self._body))
        return chunk

    def __iter__(self):
        while True:
            chunk = self.read(self._chunk_size)
            if not chunk:
                return
            yield chunk


class ImaggaTransport:
    """Does: HTTP transport for the tagging API backed by requests.
    Args: session: optional requests.Session-like object; defaults to the module session.
    """

    def __init__(self, session: requests.Session | None = None):
        self.session = session

    def _send(
        self,
        request: ImaggaRequest,
        headers: dict | None = None,
        data: Any = None,
    ) -> Any:
        """Does: Issue one request and decode its JSON body.
        Args: request: ImaggaRequest; headers: overrides request.headers; data: body.
        Returns: Decoded JSON; raises TransportError on any failure.
        """
        session = self.session or _session
        label = f"{request.method} {request.path}"
        try:
            response = session.request(
                request.method,
                request.url,
                params=request.params or None,
                headers=headers if headers is not None else dict(request.headers),
                data=data,
                timeout=request.timeout,
            )
        except requests.RequestException as e:
            raise TransportError(f"{label} failed: {e}") from e

        if response.status_code >= 400:
            raise TransportError(f"{label} returned status={response.status_code} body={response.text[:200]}")

        try:
            return response.json()
        except ValueError as e:
            raise TransportError(f"{label} returned invalid JSON: {e}") from e

    def upload(
        self,
        request: ImaggaRequest,
        payload: ImagePayload,
        on_progress: ByteProgress | None = None,
    ) -> Any:
        """Does: POST payload as the 'imagefile' multipart part, reporting progress."""
        body, content_type = encode_multipart_formdata(
            {UPLOAD_FIELD: (payload.filename, bytes(payload.data), payload.mime_type)}
        )
        headers = {**request.headers, "Content-Type": content_type}
        logger.debug("[UPLOAD] %s bytes (%s) → %s", len(body), payload.mime_type, request.url)
        return self._send(request, headers=headers, data=ProgressBody(body, on_progress))

    def get(self, request: ImaggaRequest) -> Any:
        """Does: Send a parameterized request without a body."""
        logger.debug("[REQUEST] %s %s params=%s", request.method, request.url, request.params)
        return self._send(request)
