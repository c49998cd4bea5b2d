"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
API can be started without any configuration for local demos.
"""

import os
from dataclasses import dataclass
from typing import Optional


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Civic Pulse API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = _env_flag("DEBUG", "false")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    # When disabled the application starts with an empty store.  Useful
    # for integration tests that want full control over the records.
    seed_data: bool = _env_flag("SEED_DATA", "true")

    # Bind address used by ``run.py``.
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8000"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Because the dataclass
# computes values at class definition time, environment variables should
# be set before importing this module.
settings = Settings()
