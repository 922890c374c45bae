"""
color.
=====

Does: Expose the PhotoColor value type and channel parsing helper.
Used By: Tagging response parsing and result rendering.
"""

from .photo_color import RGB, PhotoColor, parse_channel

__all__ = ["RGB", "PhotoColor", "parse_channel"]

__docformat__ = "google"
