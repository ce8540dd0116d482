"""
Application settings and configuration management.

Supports loading from:
1. SOPS-encrypted YAML files (config.enc.yaml)
2. Plain YAML files (any other *.yaml path, for local development)
3. Environment variables (fallback)
"""

import logging
import os
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import Any, Optional

import yaml

from .constants import (
    DEFAULT_SQLITE_DB_PATH,
    DEFAULT_WINDOW_DAYS,
    TOP_RECORDERS_LIMIT,
    TOP_RESIDENCES_LIMIT,
    TOP_ZONES_LIMIT,
)

logger = logging.getLogger(__name__)


# =============================================================================
# Reporting Settings
# =============================================================================


@dataclass
class ReportingSettings:
    """
    Configuration for the reporting engine.

    The ranking limits are independent of each other: the recorder ranking
    shows more rows than the location and zone rankings, and each view may
    be tuned on its own.
    """

    default_window_days: int = DEFAULT_WINDOW_DAYS

    # Display limits for the Top-N rankings
    top_recorders_limit: int = TOP_RECORDERS_LIMIT
    top_residences_limit: int = TOP_RESIDENCES_LIMIT
    top_zones_limit: int = TOP_ZONES_LIMIT

    def validate(self) -> list[str]:
        """Validate settings values. Returns list of errors."""
        errors = []

        if self.default_window_days < 1:
            errors.append(
                f"default_window_days must be >= 1, got {self.default_window_days}"
            )
        for name in ("top_recorders_limit", "top_residences_limit", "top_zones_limit"):
            value = getattr(self, name)
            if value < 1:
                errors.append(f"{name} must be >= 1, got {value}")

        return errors

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "default_window_days": self.default_window_days,
            "top_recorders_limit": self.top_recorders_limit,
            "top_residences_limit": self.top_residences_limit,
            "top_zones_limit": self.top_zones_limit,
        }

    @classmethod
    def from_dict(cls, config: dict[str, Any]) -> "ReportingSettings":
        """Create from configuration dictionary."""
        return cls(
            default_window_days=config.get("default_window_days", DEFAULT_WINDOW_DAYS),
            top_recorders_limit=config.get("top_recorders_limit", TOP_RECORDERS_LIMIT),
            top_residences_limit=config.get(
                "top_residences_limit", TOP_RESIDENCES_LIMIT
            ),
            top_zones_limit=config.get("top_zones_limit", TOP_ZONES_LIMIT),
        )

    @classmethod
    def from_env(cls) -> "ReportingSettings":
        """Create from environment variables."""

        def safe_int(key: str, default: int) -> int:
            """Safely parse int from env var, using default on error."""
            try:
                return int(os.environ.get(key, str(default)))
            except ValueError:
                return default

        return cls(
            default_window_days=safe_int(
                "REPORT_DEFAULT_WINDOW_DAYS", DEFAULT_WINDOW_DAYS
            ),
            top_recorders_limit=safe_int(
                "REPORT_TOP_RECORDERS_LIMIT", TOP_RECORDERS_LIMIT
            ),
            top_residences_limit=safe_int(
                "REPORT_TOP_RESIDENCES_LIMIT", TOP_RESIDENCES_LIMIT
            ),
            top_zones_limit=safe_int("REPORT_TOP_ZONES_LIMIT", TOP_ZONES_LIMIT),
        )


# =============================================================================
# Main Settings
# =============================================================================


@dataclass
class Settings:
    """Application settings for the SQLite entry store and reporting."""

    # Storage Backend Settings
    storage_backend: str = "sqlite"
    sqlite_db_path: str = DEFAULT_SQLITE_DB_PATH

    reporting: ReportingSettings = field(default_factory=ReportingSettings)

    def validate(self) -> list[str]:
        """Validate required settings are present. Returns list of errors."""
        errors = []

        if self.storage_backend != "sqlite":
            errors.append("Only SQLite backend is supported in this version")

        if not self.sqlite_db_path:
            errors.append("storage.sqlite_db_path is required")

        errors.extend(self.reporting.validate())

        return errors

    @classmethod
    def from_dict(cls, config: dict[str, Any]) -> "Settings":
        """Create Settings from configuration dictionary (e.g., from SOPS)."""
        storage = config.get("storage", {})
        reporting = config.get("reporting", {})

        return cls(
            storage_backend=storage.get("backend", "sqlite"),
            sqlite_db_path=storage.get("sqlite_db_path", DEFAULT_SQLITE_DB_PATH),
            reporting=ReportingSettings.from_dict(reporting),
        )

    @classmethod
    def from_env(cls) -> "Settings":
        """Create Settings from environment variables."""
        return cls(
            storage_backend="sqlite",
            sqlite_db_path=os.environ.get("SQLITE_DB_PATH", DEFAULT_SQLITE_DB_PATH),
            reporting=ReportingSettings.from_env(),
        )


# Default config file path
DEFAULT_CONFIG_PATH = Path("config.enc.yaml")


@lru_cache
def get_settings(config_path: Optional[str] = None) -> Settings:
    """
    Get cached settings instance.

    Loads from the config file if available, otherwise from env vars.

    Args:
        config_path: Optional path to a SOPS-encrypted or plain YAML config file

    Returns:
        Settings instance
    """
    path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH

    if path.exists():
        try:
            from .sops_loader import decrypt_sops_file, load_yaml_file

            # Only *.enc.yaml files go through SOPS
            if path.name.endswith(".enc.yaml"):
                config = decrypt_sops_file(path)
            else:
                config = load_yaml_file(path)
            return Settings.from_dict(config)
        except (RuntimeError, FileNotFoundError, yaml.YAMLError) as e:
            logger.warning(f"Failed to load config from {path}: {e}")
            logger.warning("Falling back to environment variables")

    return Settings.from_env()


def clear_settings_cache() -> None:
    """Clear the cached settings (useful for testing)."""
    get_settings.cache_clear()
