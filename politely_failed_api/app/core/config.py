"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields.  A
``.env`` file in the working directory is loaded first so that local
deployments can keep their overrides out of the shell environment.
"""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

# Project root (the directory holding ``data/`` and ``run.py``).
BASE_DIR = Path(__file__).resolve().parent.parent.parent.parent


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Politely Failed API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # Location of the message database.  Relative paths are resolved
    # against the project root by ``get_messages_path``.
    messages_file_path: str = os.getenv("MESSAGES_FILE_PATH", "data/messages.json")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))

    # Comma‑separated list of allowed CORS origins; ``*`` allows any.
    cors_origins: str = os.getenv("CORS_ORIGINS", "*")

    # Exposes ``POST /api/v1/admin/reload``.  There is no authentication
    # on this route, so keep it off unless the service is private.
    enable_reload_endpoint: bool = os.getenv("ENABLE_RELOAD_ENDPOINT", "false").lower() in {"1", "true", "yes"}

    @property
    def cors_origin_list(self) -> list:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


def get_messages_path(config: Settings) -> Path:
    """Compute the path to the messages file.

    If ``config.messages_file_path`` is an absolute path, use it
    directly.  Otherwise resolve it relative to the project root.
    """
    path = Path(config.messages_file_path)
    if path.is_absolute():
        return path
    return (BASE_DIR / path).resolve()


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
