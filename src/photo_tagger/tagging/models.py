"""
models.py
=========

Does: Define the workflow's input (ImagePayload) and terminal value (UploadResult).
Used by: UploadWorkflow, transport (multipart body), CLI demo.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from io import BytesIO
from pathlib import Path

from PIL import Image

from photo_tagger.color import PhotoColor

__all__ = ["ImagePayload", "UploadResult", "DEFAULT_FILENAME", "DEFAULT_MIME_TYPE", "JPEG_QUALITY"]

DEFAULT_FILENAME = "image.jpg"
DEFAULT_MIME_TYPE = "image/jpeg"
# Matches the 0.5 compression the mobile client applied before upload
JPEG_QUALITY = 50

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ImagePayload:
    """Raw image bytes plus the multipart filename and MIME type to send."""

    data: bytes
    mime_type: str = DEFAULT_MIME_TYPE
    filename: str = DEFAULT_FILENAME

    def __post_init__(self) -> None:
        if not isinstance(self.data, (bytes, bytearray)):
            raise TypeError(f"image data must be bytes, got {type(self.data).__name__}")

    def __len__(self) -> int:
        return len(self.data)

    @classmethod
    def from_image(cls, image: Image.Image, quality: int = JPEG_QUALITY) -> ImagePayload:
        """Does: Encode a PIL image as JPEG for upload.
        Args: image: any PIL image (alpha is composited onto white); quality: 1-100.
        Returns: ImagePayload named image.jpg with type image/jpeg.
        """
        if image.mode in ("RGBA", "LA") or (image.mode == "P" and "transparency" in image.info):
            alpha = image.convert("RGBA")
            background = Image.new("RGBA", alpha.size, (255, 255, 255, 255))
            image = Image.alpha_composite(background, alpha).convert("RGB")
        else:
            image = image.convert("RGB")

        buf = BytesIO()
        image.save(buf, format="JPEG", quality=quality)
        return cls(data=buf.getvalue())

    @classmethod
    def from_path(cls, path: str | os.PathLike[str], quality: int = JPEG_QUALITY) -> ImagePayload:
        """Does: Read an image file and re-encode it as JPEG for upload.
        Args: path: image file on disk (any format Pillow opens); quality: 1-100.
        Returns: ImagePayload; raises OSError when the file cannot be read or decoded.
        """
        with Image.open(Path(path)) as image:
            payload = cls.from_image(image, quality)
        logger.debug("[PAYLOAD] %s re-encoded to %d JPEG bytes (quality=%d)", path, len(payload), quality)
        return payload


@dataclass(frozen=True)
class UploadResult:
    """Tags and colors found for one upload; empty sequences mean degraded stages."""

    tags: tuple[str, ...] = ()
    colors: tuple[PhotoColor, ...] = ()

    def __post_init__(self) -> None:
        # accept any iterable, store tuples
        object.__setattr__(self, "tags", tuple(self.tags))
        object.__setattr__(self, "colors", tuple(self.colors))

    @classmethod
    def empty(cls) -> UploadResult:
        return cls()

    @property
    def is_empty(self) -> bool:
        return not self.tags and not self.colors

    def to_dict(self) -> dict:
        return {
            "tags": list(self.tags),
            "colors": [c.to_dict() for c in self.colors],
        }
