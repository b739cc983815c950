"""
AIWF Client - Configuration

Client settings and their environment variable overrides:

    AIWF_BASE_URL - Server base URL (default http://127.0.0.1:8080)
    AIWF_API_KEY  - API key sent in the X-API-Key header
    AIWF_TIMEOUT  - Request timeout in seconds (default 60)
"""

from __future__ import annotations

import math
import os
from dataclasses import dataclass
from typing import Mapping, Optional


DEFAULT_BASE_URL = "http://127.0.0.1:8080"
DEFAULT_TIMEOUT = 60.0


def normalize_base_url(base_url: str) -> str:
    """Strip trailing slashes and reject empty URLs."""
    normalized = (base_url or "").strip().rstrip("/")
    if not normalized:
        raise ValueError("base_url must not be empty")
    return normalized


@dataclass
class ClientSettings:
    """Connection settings for an AIWF server."""

    base_url: str = DEFAULT_BASE_URL
    api_key: Optional[str] = None
    timeout: float = DEFAULT_TIMEOUT

    def __post_init__(self) -> None:
        self.base_url = normalize_base_url(self.base_url)
        if not math.isfinite(self.timeout) or self.timeout <= 0:
            raise ValueError(f"timeout must be positive and finite, got {self.timeout}")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> ClientSettings:
        """Load settings from AIWF_* environment variables."""
        env = os.environ if environ is None else environ

        raw_timeout = env.get("AIWF_TIMEOUT")
        if raw_timeout:
            try:
                timeout = float(raw_timeout)
            except ValueError:
                raise ValueError(f"AIWF_TIMEOUT must be a number, got {raw_timeout!r}") from None
        else:
            timeout = DEFAULT_TIMEOUT

        return cls(
            base_url=env.get("AIWF_BASE_URL") or DEFAULT_BASE_URL,
            api_key=env.get("AIWF_API_KEY") or None,
            timeout=timeout,
        )

    @property
    def masked_api_key(self) -> str:
        """API key safe for display."""
        if not self.api_key:
            return "(not set)"
        if len(self.api_key) <= 8:
            return "*" * len(self.api_key)
        return f"{self.api_key[:4]}...{self.api_key[-4:]}"
