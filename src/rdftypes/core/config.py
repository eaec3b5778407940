"""Configuration management for rdftypes.

This module provides the RdfTypesSettings class for managing all
configuration options, supporting both environment variables and
configuration files.
"""

from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class RdfTypesSettings(BaseSettings):
    """Global configuration for rdftypes.

    Settings can be configured via:
    - Environment variables (prefixed with RDFTYPES_)
    - .env file
    - Direct instantiation

    Example:
        >>> settings = RdfTypesSettings(app_root="/srv/repository")
        >>> # Or via environment: RDFTYPES_APP_ROOT=/srv/repository
    """

    # Rule file resolution
    app_root: Path = Field(
        default_factory=Path.cwd,
        description="Root of the host application; its config/ directory may override the bundled rules",
    )
    rules_path: Path | None = Field(
        default=None,
        description="Explicit path to the rdf:type rule file, checked before any default location",
    )

    # Search integration
    search_rows: int = Field(
        default=11,
        ge=1,
        description="Page size reported by the canonical empty search result",
    )

    # Presentation
    institution_name: str = Field(
        default="Institution",
        description="Label shown on badges for institution-registered visibility",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    log_format: str = Field(
        default="plain",
        description="Log format: 'structured' or 'plain'",
    )

    model_config = SettingsConfigDict(
        env_prefix="RDFTYPES_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    def to_dict(self) -> dict[str, Any]:
        """Convert settings to dictionary."""
        return self.model_dump()


# Global settings instance (lazy-loaded)
_settings: RdfTypesSettings | None = None


def get_settings() -> RdfTypesSettings:
    """Get the global settings instance.

    Returns:
        The global RdfTypesSettings instance, creating it if needed.
    """
    global _settings
    if _settings is None:
        _settings = RdfTypesSettings()
    return _settings


def configure(**kwargs: Any) -> RdfTypesSettings:
    """Configure global settings.

    Args:
        **kwargs: Settings to override

    Returns:
        The updated global settings instance

    Example:
        >>> configure(rules_path="config/rdf_type_validation.yml", log_level="DEBUG")
    """
    global _settings
    _settings = RdfTypesSettings(**kwargs)
    return _settings
