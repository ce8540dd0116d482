"""Configuration module."""

from .constants import (
    AGE_BANDS,
    CATEGORIES,
    CATEGORY_LABELS,
    DAILY_GRANULARITY_MAX_SPAN_DAYS,
    DEFAULT_WINDOW_DAYS,
    SUCCESS_CATEGORIES,
    WINDOW_ALL_TIME,
    WINDOW_OPTIONS,
)
from .settings import ReportingSettings, Settings, clear_settings_cache, get_settings
from .sops_loader import (
    check_sops_installed,
    decrypt_sops_file,
    load_config,
    load_yaml_file,
)

__all__ = [
    # Reporting windows
    "WINDOW_OPTIONS",
    "WINDOW_ALL_TIME",
    "DEFAULT_WINDOW_DAYS",
    "DAILY_GRANULARITY_MAX_SPAN_DAYS",
    # Vocabulary
    "CATEGORIES",
    "CATEGORY_LABELS",
    "SUCCESS_CATEGORIES",
    "AGE_BANDS",
    # Settings
    "Settings",
    "ReportingSettings",
    "get_settings",
    "clear_settings_cache",
    # Config loading
    "load_config",
    "load_yaml_file",
    "decrypt_sops_file",
    "check_sops_installed",
]
