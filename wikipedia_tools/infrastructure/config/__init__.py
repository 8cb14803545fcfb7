"""Configuration infrastructure package."""

from .settings import (
    AppSettings,
    RetrySettings,
    WikipediaConfig,
    WikipediaSettings,
    get_settings,
    parse_config_slice,
    reload_settings,
)

__all__ = [
    'AppSettings',
    'RetrySettings',
    'WikipediaConfig',
    'WikipediaSettings',
    'get_settings',
    'parse_config_slice',
    'reload_settings',
]
