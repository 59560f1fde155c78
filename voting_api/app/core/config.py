"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields, so the
API runs out of the box; override them via environment variables in a
deployment.
"""

import os
from dataclasses import dataclass, field
from typing import Optional


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = field(default_factory=lambda: os.getenv("PROJECT_NAME", "School Election Voting API"))
    api_version: str = field(default_factory=lambda: os.getenv("API_VERSION", "1.0.0"))

    # When enabled, the interactive documentation (``/docs``, ``/redoc``)
    # and the OpenAPI schema are served.  Keep it off in production.
    debug: bool = field(default_factory=lambda: _env_flag("DEBUG"))

    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    log_file: Optional[str] = field(default_factory=lambda: os.getenv("LOG_FILE") or None)

    # Prefix under which the candidate and vote routes are mounted.
    api_prefix: str = field(default_factory=lambda: os.getenv("API_PREFIX", "/api"))

    host: str = field(default_factory=lambda: os.getenv("HOST", "0.0.0.0"))
    port: int = field(default_factory=lambda: int(os.getenv("PORT", "8000")))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
