"""
photo_color.py
==============

Does: Define the PhotoColor value type (RGB triple + closest palette name)
      returned by the colors endpoint, with strict channel parsing.
Used By: Response parsing (decode_colors), upload results, CLI rendering.
Returns: Immutable PhotoColor instances; from_strings → PhotoColor | None.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from webcolors import rgb_to_hex

__all__ = ["RGB", "PhotoColor", "parse_channel"]
__docformat__ = "google"

logger = logging.getLogger(__name__)

# ── Types ─────────────────────────────────────────────────────────────────────
RGB = tuple[int, int, int]

_CHANNEL_RE = re.compile(r"[+-]?\d+")
_CHANNEL_MIN = 0
_CHANNEL_MAX = 255


def parse_channel(value: object) -> int | None:
    """Does: Parse one RGB channel from an integer string.
    Args: value: raw JSON value; only strings are accepted.
    Returns: int in [0, 255] or None when not an in-range integer string.
    """
    if not isinstance(value, str) or not _CHANNEL_RE.fullmatch(value):
        return None
    channel = int(value)
    if not _CHANNEL_MIN <= channel <= _CHANNEL_MAX:
        return None
    return channel


@dataclass(frozen=True)
class PhotoColor:
    """A dominant image color as reported by the tagging service."""

    red: int
    green: int
    blue: int
    color_name: str

    def __post_init__(self) -> None:
        for channel in (self.red, self.green, self.blue):
            if isinstance(channel, bool) or not isinstance(channel, int):
                raise TypeError(f"RGB channel must be int, got {type(channel).__name__}")
            if not _CHANNEL_MIN <= channel <= _CHANNEL_MAX:
                raise ValueError(f"RGB out of bounds: {self.rgb}")

    @classmethod
    def from_strings(
        cls, red: object, green: object, blue: object, color_name: object
    ) -> PhotoColor | None:
        """Does: Build a PhotoColor from raw service fields.
        Args: red/green/blue: integer strings; color_name: palette name.
        Returns: PhotoColor, or None if any field fails to parse.
        """
        if not isinstance(color_name, str):
            return None
        channels = [parse_channel(v) for v in (red, green, blue)]
        if any(c is None for c in channels):
            logger.debug("[COLOR SKIP] unparsable channels %r for %r", (red, green, blue), color_name)
            return None
        r, g, b = channels
        return cls(r, g, b, color_name)

    @property
    def rgb(self) -> RGB:
        return self.red, self.green, self.blue

    @property
    def hex(self) -> str:
        """Lowercase #rrggbb form."""
        return rgb_to_hex(self.rgb)

    def to_dict(self) -> dict:
        return {
            "red": self.red,
            "green": self.green,
            "blue": self.blue,
            "color_name": self.color_name,
            "hex": self.hex,
        }
