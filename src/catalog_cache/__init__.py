"""Catalog Metadata Cache.

A process-wide, in-memory cache of database and table descriptors for a
catalog service, with selective admission of internal namespaces and
cascade invalidation of a database's tables.
"""

__version__ = "0.1.0"

from catalog_cache.cache import (
    AdmissionPolicy,
    CacheStats,
    MetadataCache,
    canonicalize,
    fully_qualified_table_key,
    get_metadata_cache,
    reset_metadata_cache,
)
from catalog_cache.config.settings import Settings, get_settings
from catalog_cache.models.catalog import ColumnInfo, DatabaseInfo, TableInfo
from catalog_cache.models.errors import (
    CatalogCacheError,
    ConfigurationError,
    ErrorCode,
    InvalidArgumentError,
)

__all__ = [
    "__version__",
    # Config
    "Settings",
    "get_settings",
    # Cache
    "AdmissionPolicy",
    "CacheStats",
    "MetadataCache",
    "canonicalize",
    "fully_qualified_table_key",
    "get_metadata_cache",
    "reset_metadata_cache",
    # Models
    "ColumnInfo",
    "DatabaseInfo",
    "TableInfo",
    # Errors
    "CatalogCacheError",
    "ConfigurationError",
    "InvalidArgumentError",
    "ErrorCode",
]
