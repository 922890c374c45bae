"""
photo_tagger
============

Does: Root package initializer for the photo tagging client.
Returns: Exposes subpackages (`tagging`, `color`) through a stable namespace.
Used by: All imports starting from `photo_tagger.*`.
"""

__all__: list[str] = []
__docformat__ = "google"
__version__ = "0.1.0"
