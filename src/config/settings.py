# src/config/settings.py — v1
"""Typed configuration loaded from .env via pydantic-settings.

Single source of truth for the remote host location, the on-disk cache
directory and its validity window, HTTP behaviour and logging.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

import platformdirs
from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ConfigurationError(Exception):
    """Raised when configuration is internally inconsistent."""


class Settings(BaseSettings):
    """Application settings loaded from .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # === Application ===
    app_id: str = "agentdocs"

    # === Remote content host ===
    docs_repo: str = "MicrosoftDocs/m365copilot-docs"
    docs_branch: str = "main"
    docs_path: str = "docs"
    api_base_url: str = "https://api.github.com"
    raw_base_url: str = "https://raw.githubusercontent.com"
    user_agent: str = "agentdocs"
    http_timeout_s: float = 30.0

    # === Cache ===
    # None = <user cache dir>/<app_id>/docs
    cache_root: Path | None = None
    cache_ttl_hours: float = 24.0

    # === Batch loading ===
    # 0 = one concurrent fetch per document, no cap
    fetch_concurrency: int = 0

    # === Logging ===
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_format: Literal["json", "text"] = "json"
    log_file: Path | None = None
    log_rotation: str = "10MB"
    log_retention: int = 30

    # --- Validators ---

    @field_validator("fetch_concurrency")
    @classmethod
    def validate_fetch_concurrency(cls, v: int) -> int:  # noqa: N805
        if v < 0:
            raise ValueError("fetch_concurrency must be >= 0")
        return v

    @field_validator("api_base_url", "raw_base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:  # noqa: N805
        return v.rstrip("/")

    @model_validator(mode="after")
    def validate_config_consistency(self) -> Settings:
        """Validate cross-field consistency rules."""
        errors: list[str] = []

        if self.cache_ttl_hours <= 0:
            errors.append("CACHE_TTL_HOURS must be > 0")

        if self.http_timeout_s <= 0:
            errors.append("HTTP_TIMEOUT_S must be > 0")

        if "/" not in self.docs_repo.strip("/"):
            errors.append("DOCS_REPO must look like '<owner>/<name>'")

        if errors:
            raise ConfigurationError("; ".join(errors))

        return self

    # --- Helpers ---

    @property
    def resolved_cache_dir(self) -> Path:
        """Directory holding document blobs and metadata.json."""
        if self.cache_root is not None:
            return Path(self.cache_root).expanduser()
        return Path(platformdirs.user_cache_dir(self.app_id)) / "docs"

    @property
    def cache_ttl_seconds(self) -> float:
        return self.cache_ttl_hours * 3600.0

    @property
    def listing_url(self) -> str:
        """Contents API endpoint for the documentation directory."""
        return (
            f"{self.api_base_url}/repos/{self.docs_repo}/contents/{self.docs_path}"
        )

    def raw_url_for(self, name: str) -> str:
        """Raw content URL for a file in the documentation directory."""
        return (
            f"{self.raw_base_url}/{self.docs_repo}/refs/heads/"
            f"{self.docs_branch}/{self.docs_path}/{name}"
        )


def load_settings(**overrides: object) -> Settings:
    """Load settings from .env with optional overrides.

    Args:
        **overrides: Field-level overrides (for testing or one-off runs).

    Returns:
        Validated Settings instance.

    Raises:
        ConfigurationError: If configuration is internally inconsistent.
    """
    return Settings(**overrides)  # type: ignore[arg-type]
