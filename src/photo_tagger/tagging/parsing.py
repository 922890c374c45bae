"""
parsing.py
==========

Does: Decode the three Imagga response shapes (upload ack, tag list, color list)
      from loosely typed JSON into strict values. Every decoder is total: shape
      problems give None / [] and malformed list items are filtered out.
Returns: decode_upload_ack → str | None; decode_tags → list[str];
         decode_colors → list[PhotoColor].
Used by: UploadWorkflow after each successful transport call.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from photo_tagger.color import PhotoColor

__all__ = ["decode_upload_ack", "decode_tags", "decode_colors"]

logger = logging.getLogger(__name__)


# ── Shape helpers ────────────────────────────────────────────────────────────
def _first(payload: Any, key: str) -> Mapping | None:
    """Does: Return payload[key][0] if payload[key] is a non-empty list of a mapping."""
    if not isinstance(payload, Mapping):
        return None
    items = payload.get(key)
    if not isinstance(items, list) or not items:
        return None
    head = items[0]
    return head if isinstance(head, Mapping) else None


def _mapping_items(items: Any) -> list[Mapping] | None:
    """Does: Keep only the mapping entries of a JSON list; None if not a list."""
    if not isinstance(items, list):
        return None
    return [item for item in items if isinstance(item, Mapping)]


# ── Decoders ─────────────────────────────────────────────────────────────────
def decode_upload_ack(payload: Any) -> str | None:
    """Does: Extract the content id from {"uploaded": [{"id": ...}, ...]}.
    Args: payload: decoded JSON body of POST /content.
    Returns: The first upload's id, or None when the shape is invalid.
    """
    first = _first(payload, "uploaded")
    if first is None:
        return None
    content_id = first.get("id")
    return content_id if isinstance(content_id, str) else None


def decode_tags(payload: Any) -> list[str]:
    """Does: Collect results[0].tags[*].tag, in service order.
    Args: payload: decoded JSON body of GET /tagging.
    Returns: List of tag strings; [] when the top-level shape is absent.
    """
    first = _first(payload, "results")
    entries = _mapping_items(first.get("tags")) if first is not None else None
    if entries is None:
        logger.warning("[TAGS INVALID] Invalid tag information received from the service: %r", payload)
        return []

    tags = [entry["tag"] for entry in entries if isinstance(entry.get("tag"), str)]
    if len(tags) != len(entries):
        logger.debug("[TAGS] skipped %d malformed entries", len(entries) - len(tags))
    return tags


def decode_colors(payload: Any) -> list[PhotoColor]:
    """Does: Build PhotoColor objects from results[0].info.image_colors.
    Args: payload: decoded JSON body of GET /colors.
    Returns: Colors in service order, entries missing/failing r, g, b or
             closest_palette_color dropped; [] when the shape is absent.
    """
    first = _first(payload, "results")
    info = first.get("info") if first is not None else None
    entries = _mapping_items(info.get("image_colors")) if isinstance(info, Mapping) else None
    if entries is None:
        logger.warning("[COLORS INVALID] Invalid color information received from the service: %r", payload)
        return []

    colors: list[PhotoColor] = []
    for entry in entries:
        color = PhotoColor.from_strings(
            entry.get("r"),
            entry.get("g"),
            entry.get("b"),
            entry.get("closest_palette_color"),
        )
        if color is not None:
            colors.append(color)
    return colors
