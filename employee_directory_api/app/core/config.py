"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields.  The
upstream employee service address is the only setting the directory
core depends on; it is handed to the upstream client as an explicit
``UpstreamConfig`` value rather than read from this module.
"""

import os
from dataclasses import dataclass
from typing import Optional


def _optional_float(value: Optional[str]) -> Optional[float]:
    if value is None or not value.strip():
        return None
    return float(value)


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Employee Directory API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    # Origin plus the fixed employee path prefix of the upstream service.
    upstream_base_url: str = os.getenv("UPSTREAM_BASE_URL", "http://localhost:8112/api/v1/employee")

    # Seconds.  Left unset, requests waits as long as the transport does.
    upstream_timeout: Optional[float] = _optional_float(os.getenv("UPSTREAM_TIMEOUT"))


@dataclass(frozen=True)
class UpstreamConfig:
    """Immutable address of the upstream employee service."""

    base_url: str
    timeout: Optional[float] = None

    @classmethod
    def from_settings(cls, settings: Settings) -> "UpstreamConfig":
        return cls(base_url=settings.upstream_base_url.rstrip("/"), timeout=settings.upstream_timeout)


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
