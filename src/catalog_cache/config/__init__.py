"""Configuration management module."""

from catalog_cache.config.settings import (
    CacheConfig,
    EvictionPolicy,
    ObservabilityConfig,
    Settings,
    StoreConfig,
    get_settings,
    reset_settings,
)

__all__ = [
    "CacheConfig",
    "EvictionPolicy",
    "ObservabilityConfig",
    "Settings",
    "StoreConfig",
    "get_settings",
    "reset_settings",
]
