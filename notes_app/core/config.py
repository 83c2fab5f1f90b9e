"""
Configuration Management.

Loads settings from config/settings/*.yaml and environment overrides from
config/.env. No hardcoded values in code; all configuration comes from
these sources.

Overrides (.env / environment, prefix NOTES_):
    NOTES_DATABASE_URL

Settings (YAML):
    application.yaml   - App identity, UI behaviour
    database.yaml      - Local SQLite database settings
    logging.yaml       - Logging configuration
"""

from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from notes_app.core.config_schema import (
    ApplicationSchema,
    DatabaseSchema,
    LoggingSchema,
)


def find_project_root() -> Path:
    """Find project root by looking for .project_root marker file."""
    current = Path.cwd()
    while current != current.parent:
        if (current / ".project_root").exists():
            return current
        current = current.parent
    raise RuntimeError("Project root not found. Ensure .project_root file exists.")


def load_yaml_config(filename: str) -> dict[str, Any]:
    """Load a YAML configuration file from config/settings/."""
    project_root = find_project_root()
    config_path = project_root / "config" / "settings" / filename

    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_path) as f:
        return yaml.safe_load(f) or {}


class Settings(BaseSettings):
    """Environment overrides loaded from config/.env or the process environment."""

    database_url: str | None = None

    model_config = SettingsConfigDict(
        env_prefix="NOTES_",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


def _load_validated(schema_cls: type, filename: str) -> Any:
    """Load YAML and validate against schema. Returns typed model instance."""
    raw = load_yaml_config(filename)
    try:
        return schema_cls(**raw)
    except ValidationError as e:
        raise ValueError(
            f"Invalid configuration in {filename}:\n{e}"
        ) from e


class AppConfig:
    """
    Application configuration loaded from YAML files.

    Each YAML file is validated against its Pydantic schema at load time.
    Missing keys, wrong types, or unknown fields raise a clear error
    immediately instead of causing cryptic KeyErrors later.
    """

    def __init__(self) -> None:
        self._application = _load_validated(ApplicationSchema, "application.yaml")
        self._database = _load_validated(DatabaseSchema, "database.yaml")
        self._logging = _load_validated(LoggingSchema, "logging.yaml")

    @property
    def application(self) -> ApplicationSchema:
        """Application settings."""
        return self._application

    @property
    def database(self) -> DatabaseSchema:
        """Database settings."""
        return self._database

    @property
    def logging(self) -> LoggingSchema:
        """Logging settings."""
        return self._logging


@lru_cache
def get_settings() -> Settings:
    """Get cached overrides. Resolves .env path from project root."""
    env_path = find_project_root() / "config" / ".env"
    if env_path.exists():
        return Settings(_env_file=str(env_path))
    return Settings()


@lru_cache
def get_app_config() -> AppConfig:
    """Get cached application configuration."""
    return AppConfig()


def get_database_url() -> str:
    """
    Construct the database URL from YAML config and overrides.

    NOTES_DATABASE_URL wins when set. Otherwise the SQLite file named in
    database.yaml is resolved relative to the project root.

    Returns:
        SQLAlchemy async connection URL string.
    """
    override = get_settings().database_url
    if override:
        return override

    db_path = find_project_root() / get_app_config().database.path
    return f"sqlite+aiosqlite:///{db_path}"
