"""Configuration management for the catalog metadata cache.

This module defines all configuration settings using Pydantic for validation
and type safety. Configuration is loaded from environment variables with
sensible defaults.
"""

from enum import StrEnum
from typing import Literal

from pydantic import BaseModel, Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class EvictionPolicy(StrEnum):
    """Eviction strategy applied to a single descriptor store."""

    NONE = "none"
    LRU = "lru"
    TTL = "ttl"


class StoreConfig(BaseModel):
    """Eviction settings for one descriptor store.

    The default keeps every entry until it is explicitly invalidated.
    """

    policy: EvictionPolicy = Field(default=EvictionPolicy.NONE, description="Eviction policy")
    max_size: int = Field(
        default=10000, ge=1, le=10_000_000, description="Maximum entries for LRU/TTL stores"
    )
    ttl_seconds: float | None = Field(
        default=None, gt=0, description="Entry time-to-live in seconds (TTL policy only)"
    )

    @model_validator(mode="after")
    def check_ttl(self) -> "StoreConfig":
        """Require a TTL when the TTL policy is selected."""
        if self.policy == EvictionPolicy.TTL and self.ttl_seconds is None:
            raise ValueError("ttl_seconds is required when policy is 'ttl'")
        return self


class CacheConfig(BaseSettings):
    """Metadata cache configuration.

    The naming constants encode the admission policy. They are fixed in
    production and overridden only in tests.
    """

    model_config = SettingsConfigDict(env_prefix="CACHE_", env_nested_delimiter="__")

    enabled: bool = Field(default=True, description="Enable metadata caching")

    default_db_name: str = Field(default="default", description="Default database name")
    system_db_name: str = Field(default="okera_system", description="System database name")
    internal_db_prefix: str = Field(default="_okera", description="Internal namespace prefix")
    crawler_db_prefix: str = Field(
        default="_okera_crawler", description="Crawler namespace prefix (never cached)"
    )
    escape_char: str = Field(
        default="`", min_length=1, max_length=1, description="Identifier escape character"
    )

    database_store: StoreConfig = Field(default_factory=StoreConfig)
    table_store: StoreConfig = Field(default_factory=StoreConfig)

    @field_validator(
        "default_db_name", "system_db_name", "internal_db_prefix", "crawler_db_prefix"
    )
    @classmethod
    def normalize_policy_name(cls, v: str) -> str:
        """Policy names are compared against canonical names, so store them lower-cased."""
        v = v.strip().lower()
        if not v:
            raise ValueError("Policy names must not be empty")
        return v


class ObservabilityConfig(BaseSettings):
    """Observability and monitoring configuration."""

    model_config = SettingsConfigDict(env_prefix="OBSERVABILITY_")

    metrics_enabled: bool = Field(default=True, description="Enable Prometheus metrics")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Logging level"
    )
    log_format: Literal["json", "text"] = Field(default="text", description="Log format")


class Settings(BaseSettings):
    """Main application settings aggregating all config sections."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    cache: CacheConfig = Field(default_factory=CacheConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


# Global settings instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get or create global settings instance.

    Returns:
        Settings: The global settings instance.
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset global settings instance. Useful for testing."""
    global _settings
    _settings = None
