"""
tagging
=======

Does: Expose the public Imagga tagging interface: configuration, request
      building, response decoding, the HTTP transport and the upload workflow.
Returns: Re-exports of stable symbols for external use.
Used by: The CLI demo and any caller wanting tags/colors for a photo.
Example:
    result = start_upload(ImagePayload.from_path("cat.jpg"), print)
"""

from __future__ import annotations

# ── Public API re-exports ─────────────────────────────────────────────────────
from .config import ImaggaConfig, basic_authorization, has_credentials
from .models import ImagePayload, UploadResult
from .parsing import decode_colors, decode_tags, decode_upload_ack
from .router import ImaggaRequest, Operation, RequestBuilder
from .transport import ImaggaTransport, TransportError
from .types import TransportProtocol
from .workflow import UploadWorkflow, WorkflowState, get_upload_workflow, start_upload

__all__ = [
    "ImaggaConfig",
    "basic_authorization",
    "has_credentials",
    "ImagePayload",
    "UploadResult",
    "decode_upload_ack",
    "decode_tags",
    "decode_colors",
    "ImaggaRequest",
    "Operation",
    "RequestBuilder",
    "ImaggaTransport",
    "TransportError",
    "TransportProtocol",
    "UploadWorkflow",
    "WorkflowState",
    "get_upload_workflow",
    "start_upload",
]

# Keep docformat explicit for tooling consistency.
__docformat__ = "google"
