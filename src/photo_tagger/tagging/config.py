"""
config.py
=========

Does: Resolve Imagga API settings (base URL, credential, timeout) from the
      environment into an immutable ImaggaConfig injected into the builder.
Returns: ImaggaConfig; has_credentials() → bool.
Used by: RequestBuilder, start_upload/get_upload_workflow, CLI demo.
"""

from __future__ import annotations

import base64
import logging
import os
from dataclasses import dataclass

logger = logging.getLogger(__name__)

# ── Defaults (env-overridable) ───────────────────────────────────────────────
DEFAULT_BASE_URL = "http://api.imagga.com/v1"
# Generous ceiling inherited from the mobile client (10 * 1000 seconds).
DEFAULT_TIMEOUT = 10 * 1000.0

ENV_BASE_URL = "IMAGGA_API_URL"
ENV_TIMEOUT = "IMAGGA_TIMEOUT"
ENV_AUTHORIZATION = "IMAGGA_AUTHORIZATION"
ENV_API_KEY = "IMAGGA_API_KEY"
ENV_API_SECRET = "IMAGGA_API_SECRET"

__all__ = [
    "DEFAULT_BASE_URL",
    "DEFAULT_TIMEOUT",
    "ImaggaConfig",
    "basic_authorization",
    "has_credentials",
]


def basic_authorization(api_key: str, api_secret: str) -> str:
    """Does: Build an HTTP Basic Authorization header value.
    Args: api_key, api_secret: Imagga account credentials.
    Returns: 'Basic <base64(key:secret)>'.
    """
    token = base64.b64encode(f"{api_key}:{api_secret}".encode("utf-8")).decode("ascii")
    return f"Basic {token}"


def _authorization_from_env() -> str | None:
    explicit = os.getenv(ENV_AUTHORIZATION, "").strip()
    if explicit:
        return explicit
    key = os.getenv(ENV_API_KEY, "").strip()
    secret = os.getenv(ENV_API_SECRET, "").strip()
    if key and secret:
        return basic_authorization(key, secret)
    return None


def has_credentials() -> bool:
    """Does: Check whether an Imagga credential is configured in the environment."""
    return _authorization_from_env() is not None


@dataclass(frozen=True)
class ImaggaConfig:
    """Settings shared by every request of a workflow."""

    authorization: str
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT

    def __post_init__(self) -> None:
        if not self.authorization:
            raise ValueError("authorization must be a non-empty header value")
        if self.timeout <= 0:
            raise ValueError(f"timeout must be positive, got {self.timeout}")

    @classmethod
    def from_env(cls) -> ImaggaConfig:
        """Does: Read settings from IMAGGA_* environment variables.
        Returns: ImaggaConfig; raises RuntimeError if no credential is set.
        """
        authorization = _authorization_from_env()
        if authorization is None:
            raise RuntimeError(
                f"{ENV_AUTHORIZATION} (or {ENV_API_KEY}/{ENV_API_SECRET}) missing"
            )

        raw_timeout = os.getenv(ENV_TIMEOUT, "").strip()
        try:
            timeout = float(raw_timeout) if raw_timeout else DEFAULT_TIMEOUT
        except ValueError:
            logger.warning("[CONFIG] invalid %s=%r, using %s", ENV_TIMEOUT, raw_timeout, DEFAULT_TIMEOUT)
            timeout = DEFAULT_TIMEOUT

        base_url = os.getenv(ENV_BASE_URL, "").strip() or DEFAULT_BASE_URL
        return cls(authorization=authorization, base_url=base_url.rstrip("/"), timeout=timeout)
