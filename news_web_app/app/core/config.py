"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from environment
variables each time it is instantiated.  Defaults are provided for all
fields, so the service starts with no configuration at all.  Tests
build their own ``Settings`` instances and pass them to ``create_app``.
"""

import os
from dataclasses import dataclass, field
from typing import List


def _env(name: str, default: str):
    return field(default_factory=lambda: os.getenv(name, default))


def _env_int(name: str, default: int):
    return field(default_factory=lambda: int(os.getenv(name, str(default))))


def _env_bool(name: str, default: str = "false"):
    return field(default_factory=lambda: os.getenv(name, default).lower() in {"1", "true", "yes"})


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = _env("PROJECT_NAME", "News Web App")
    api_version: str = _env("API_VERSION", "1.0.0")
    debug: bool = _env_bool("DEBUG")
    log_level: str = _env("LOG_LEVEL", "INFO")
    # Empty means console logging only.
    log_file: str = _env("LOG_FILE", "")

    # Bind address used by ``run.py``.  The bundled web UI talks to
    # port 8080.
    host: str = _env("HOST", "0.0.0.0")
    port: int = _env_int("PORT", 8080)

    # Comma‑separated list of origins allowed to call the API from a
    # browser.  Use ``*`` to allow any origin.
    cors_origins: str = _env("CORS_ORIGINS", "http://localhost:4200")

    # Number of articles returned by ``GET /news`` when no ``limit`` is given.
    default_limit: int = _env_int("DEFAULT_LIMIT", 10)

    @property
    def cors_origin_list(self) -> List[str]:
        """Return ``cors_origins`` split into a list, ignoring blanks."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables must
# be set before this module is imported.
settings = Settings()
