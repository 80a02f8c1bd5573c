"""
Configuration settings for the job portal core.
Loads values from a .env file and the process environment and provides typed access.
"""

import os
from dataclasses import dataclass, field
from typing import Optional

from dotenv import load_dotenv

# Load .env from the project root; real environment variables win.
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
load_dotenv(os.path.join(project_root, ".env"))


def _optional_env(name: str) -> Optional[str]:
    value = os.getenv(name, "").strip()
    return value or None


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    # JSearch (RapidAPI) credentials; the connector is skipped without a key
    jsearch_api_key: Optional[str] = field(
        default_factory=lambda: _optional_env("JSEARCH_API_KEY")
    )
    jsearch_host: str = field(
        default_factory=lambda: os.getenv("JSEARCH_HOST", "jsearch.p.rapidapi.com")
    )

    # Per-provider deadline in seconds; one attempt per request
    provider_timeout: float = field(
        default_factory=lambda: float(os.getenv("PROVIDER_TIMEOUT_SECONDS", "10"))
    )

    # Logging
    log_level: str = field(
        default_factory=lambda: os.getenv("LOG_LEVEL", "INFO")
    )

    # HTTP API
    api_prefix: str = field(
        default_factory=lambda: os.getenv("API_PREFIX", "")
    )
    host: str = field(
        default_factory=lambda: os.getenv("HOST", "127.0.0.1")
    )
    port: int = field(
        default_factory=lambda: int(os.getenv("PORT", "8000"))
    )

    # Read-only JSON snapshots of the local job and profile stores
    jobs_file: Optional[str] = field(
        default_factory=lambda: _optional_env("JOBS_FILE")
    )
    profiles_file: Optional[str] = field(
        default_factory=lambda: _optional_env("PROFILES_FILE")
    )


# Singleton instance
settings = Settings()
