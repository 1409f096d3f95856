"""Application settings loaded from environment variables.

Configuration file discovery (in priority order):
1. OS environment variables (always highest priority)
2. BILANCIO_ENV_FILE environment variable (path to a .env file)
3. config/.env.dev - local development
4. config/.env - installed/production use

Uses pydantic-settings for automatic type coercion and validation.
Variables carry the BILANCIO_ prefix (BILANCIO_API_BASE_URL, ...).
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _find_project_root() -> Path:
    """Find the project root directory."""
    current = Path(__file__).resolve().parent

    for parent in [current, *current.parents]:
        if (parent / "config").is_dir():
            return parent
        if (parent / ".git").is_dir():
            return parent

    return Path.cwd()


def get_config_dir() -> Path:
    return _find_project_root() / "config"


def _resolve_env_file_path() -> Path | None:
    """Resolve the .env file path.

    Priority:
    1. BILANCIO_ENV_FILE env var
    2. config/.env.dev (local development)
    3. config/.env
    """
    env_file_path = os.environ.get("BILANCIO_ENV_FILE")
    if env_file_path:
        path = Path(env_file_path)
        if not path.is_absolute():
            path = _find_project_root() / path
        if path.exists():
            return path

    config_dir = get_config_dir()

    dev_env = config_dir / ".env.dev"
    if dev_env.exists():
        return dev_env

    prod_env = config_dir / ".env"
    if prod_env.exists():
        return prod_env

    return None


class Settings(BaseSettings):
    """Client configuration loaded from environment variables.

    Values are loaded from:
    1. OS environment variables (highest priority)
    2. .env file (config/.env.dev or config/.env)
    3. Default values
    """

    model_config = SettingsConfigDict(
        env_prefix="BILANCIO_",
        env_file=_resolve_env_file_path(),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "Bilancio"

    # Backend API
    api_base_url: str = "http://localhost:8080/api"
    api_timeout: float = Field(default=10.0, gt=0)

    # Listing
    page_size: int = Field(default=50, ge=1, le=1000)

    # Display
    currency: str = "EUR"

    # Where the session (token + user) is persisted between CLI runs
    state_dir: Path = Path.home() / ".bilancio"

    # Logging
    log_level: str = "INFO"

    @field_validator("api_base_url")
    @classmethod
    def _strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @field_validator("currency")
    @classmethod
    def _normalize_currency(cls, v: str) -> str:
        code = v.strip().upper()
        if len(code) != 3 or not code.isalpha():
            msg = f"Currency code must be 3 letters: {v}"
            raise ValueError(msg)
        return code

    @property
    def session_file(self) -> Path:
        return self.state_dir.expanduser() / "session.json"


@lru_cache()
def get_settings() -> Settings:
    """Return cached application settings."""
    return Settings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for tests)."""
    get_settings.cache_clear()
