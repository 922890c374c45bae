"""
workflow.py
===========

Does: Drive one upload-and-enrich run: submit the image, read the content id,
      fetch tags then colors, and deliver a single UploadResult. Any stage
      failure is logged and folds into empty data; completion happens exactly once.
Returns: UploadResult (also passed to on_complete).
Used by: start_upload (public entry point) and the CLI demo.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from enum import Enum
from typing import Any

from photo_tagger.color import PhotoColor
from photo_tagger.tagging.config import ImaggaConfig, has_credentials
from photo_tagger.tagging.models import ImagePayload, UploadResult
from photo_tagger.tagging.parsing import decode_colors, decode_tags, decode_upload_ack
from photo_tagger.tagging.router import ImaggaRequest, RequestBuilder
from photo_tagger.tagging.transport import ImaggaTransport, TransportError
from photo_tagger.tagging.types import CompletionCallback, ProgressCallback, TransportProtocol

logger = logging.getLogger(__name__)

__all__ = [
    "WorkflowState",
    "UploadWorkflow",
    "start_upload",
    "get_upload_workflow",
]


class WorkflowState(str, Enum):
    IDLE = "idle"
    UPLOADING = "uploading"
    AWAITING_UPLOAD_ACK = "awaiting_upload_ack"
    FETCHING_ENRICHMENT = "fetching_enrichment"
    COMPLETED = "completed"


class UploadWorkflow:
    """Single-use driver for one upload-and-enrich run.

    The instance owns the run's state (content id, tags, colors); build a new
    workflow for every image. Callbacks are invoked on the thread calling run().
    """

    def __init__(self, builder: RequestBuilder, transport: TransportProtocol | None = None):
        self.builder = builder
        self.transport = transport if transport is not None else ImaggaTransport()
        self.state = WorkflowState.IDLE
        self.content_id: str | None = None
        self._completed = False

    def _transition(self, state: WorkflowState) -> None:
        logger.debug("[WORKFLOW] %s → %s", self.state.value, state.value)
        self.state = state

    # ── Stages ───────────────────────────────────────────────────────────────
    def _upload(self, payload: ImagePayload, on_progress: ProgressCallback | None) -> str | None:
        def report(bytes_written: int, total_bytes: int) -> None:
            if on_progress is None or total_bytes <= 0:
                return
            fraction = min(1.0, max(0.0, bytes_written / total_bytes))
            try:
                on_progress(fraction)
            except Exception:
                logger.exception("[PROGRESS] callback raised at %.3f", fraction)

        self._transition(WorkflowState.UPLOADING)
        try:
            body = self.transport.upload(self.builder.submit(), payload, report)
        except TransportError as e:
            logger.warning("[UPLOAD FAILURE] Error while uploading file: %s", e)
            return None
        finally:
            self._transition(WorkflowState.AWAITING_UPLOAD_ACK)

        content_id = decode_upload_ack(body)
        if content_id is None:
            logger.warning("[UPLOAD INVALID] Invalid information received from service: %r", body)
            return None
        logger.info("Content uploaded with ID: %s", content_id)
        return content_id

    def _fetch(self, stage: str, request: ImaggaRequest, decode: Callable[[Any], list]) -> list:
        try:
            body = self.transport.get(request)
        except TransportError as e:
            logger.warning("[%s FAILURE] Error while fetching %s: %s", stage.upper(), stage, e)
            return []
        items = decode(body)
        if not items:
            logger.info("[%s EMPTY] No usable %s in the service response", stage.upper(), stage)
        return items

    def fetch_tags(self, content_id: str) -> list[str]:
        return self._fetch("tags", self.builder.fetch_tags(content_id), decode_tags)

    def fetch_colors(self, content_id: str) -> list[PhotoColor]:
        return self._fetch("colors", self.builder.fetch_colors(content_id), decode_colors)

    # ── Driver ───────────────────────────────────────────────────────────────
    def _complete(self, result: UploadResult, on_complete: CompletionCallback | None) -> UploadResult:
        if self._completed:
            raise RuntimeError("workflow already completed")
        self._completed = True
        self._transition(WorkflowState.COMPLETED)
        if on_complete is not None:
            on_complete(result)
        return result

    def run(
        self,
        payload: ImagePayload,
        on_progress: ProgressCallback | None = None,
        on_complete: CompletionCallback | None = None,
    ) -> UploadResult:
        """Does: Execute the full sequence once.
        Args: payload: image to upload; on_progress: fraction in [0, 1] per
              transport update; on_complete: receives the final UploadResult.
        Returns: The same UploadResult handed to on_complete.
        """
        if self.state is not WorkflowState.IDLE:
            raise RuntimeError(f"workflow can only run once (state={self.state.value})")

        content_id = self._upload(payload, on_progress)
        if content_id is None:
            return self._complete(UploadResult.empty(), on_complete)

        self.content_id = content_id
        self._transition(WorkflowState.FETCHING_ENRICHMENT)
        # tags strictly before colors; a failed tag fetch does not stop colors
        tags = self.fetch_tags(content_id)
        colors = self.fetch_colors(content_id)
        return self._complete(UploadResult(tags=tags, colors=colors), on_complete)


# ── Public entry points ──────────────────────────────────────────────────────
def get_upload_workflow(debug: bool = False) -> UploadWorkflow | None:
    """Does: Factory returning a workflow configured from the environment.
    Args: debug: if True, logs credential presence.
    Returns: UploadWorkflow or None when no credential is configured.
    """
    ok = has_credentials()
    if debug:
        logger.debug("Imagga credential present: %s", ok)
    return UploadWorkflow(RequestBuilder(ImaggaConfig.from_env())) if ok else None


def start_upload(
    payload: ImagePayload,
    on_progress: ProgressCallback | None = None,
    on_complete: CompletionCallback | None = None,
    *,
    config: ImaggaConfig | None = None,
    transport: TransportProtocol | None = None,
    background: bool = False,
) -> UploadResult | threading.Thread:
    """Does: Run a fresh UploadWorkflow for payload.
    Args: payload, on_progress, on_complete: see UploadWorkflow.run;
          config: defaults to ImaggaConfig.from_env(); transport: defaults to
          ImaggaTransport; background: run on a new thread.
    Returns: UploadResult, or the started Thread when background=True (all
             callbacks then fire on that thread; join() it to wait for completion).
    """
    workflow = UploadWorkflow(RequestBuilder(config or ImaggaConfig.from_env()), transport)
    if not background:
        return workflow.run(payload, on_progress, on_complete)

    thread = threading.Thread(
        target=workflow.run,
        args=(payload, on_progress, on_complete),
        name="photo-tagger-upload",
        daemon=False,
    )
    thread.start()
    return thread
