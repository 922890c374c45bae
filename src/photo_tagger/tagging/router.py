"""
router.py
=========

Does: Map a logical Imagga operation (submit / fetch tags / fetch colors) to a
      fully specified request description: method, path, params, headers, timeout.
Returns: ImaggaRequest (frozen, pure data; no I/O).
Used by: UploadWorkflow before each transport call.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from photo_tagger.tagging.config import ImaggaConfig

__all__ = ["Operation", "ImaggaRequest", "RequestBuilder"]


class Operation(str, Enum):
    SUBMIT = "submit"
    FETCH_TAGS = "fetch_tags"
    FETCH_COLORS = "fetch_colors"


@dataclass(frozen=True)
class ImaggaRequest:
    method: str
    path: str
    base_url: str
    timeout: float
    params: dict = field(default_factory=dict)
    headers: dict = field(default_factory=dict)

    @property
    def url(self) -> str:
        return f"{self.base_url.rstrip('/')}{self.path}"


class RequestBuilder:
    """Does: Build ImaggaRequest objects with the injected credential and timeout.
    Args: config: ImaggaConfig.
    Returns: Instance exposing build() and per-operation shortcuts.
    """

    def __init__(self, config: ImaggaConfig):
        self.config = config

    def _headers(self) -> dict:
        return {"Authorization": self.config.authorization}

    def build(self, operation: Operation | str, content_id: str | None = None) -> ImaggaRequest:
        """Does: Resolve operation → (method, path, params) and wrap it with headers/timeout.
        Args: operation: Operation or its value; content_id: required for fetches.
        Returns: ImaggaRequest. Raises ValueError for a fetch without content_id.
        """
        operation = Operation(operation)

        if operation is Operation.SUBMIT:
            method, path, params = "POST", "/content", {}
        else:
            if content_id is None:
                raise ValueError(f"{operation.value} requires a content id")
            if operation is Operation.FETCH_TAGS:
                method, path, params = "GET", "/tagging", {"content": content_id}
            else:
                # extract_object_colors=0 keeps the response to whole-image colors
                method, path = "GET", "/colors"
                params = {"content": content_id, "extract_object_colors": 0}

        return ImaggaRequest(
            method=method,
            path=path,
            base_url=self.config.base_url,
            timeout=self.config.timeout,
            params=params,
            headers=self._headers(),
        )

    def submit(self) -> ImaggaRequest:
        return self.build(Operation.SUBMIT)

    def fetch_tags(self, content_id: str) -> ImaggaRequest:
        return self.build(Operation.FETCH_TAGS, content_id)

    def fetch_colors(self, content_id: str) -> ImaggaRequest:
        return self.build(Operation.FETCH_COLORS, content_id)
