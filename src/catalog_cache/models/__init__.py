"""Data models module."""

from catalog_cache.models.catalog import ColumnInfo, DatabaseInfo, TableInfo
from catalog_cache.models.errors import (
    CatalogCacheError,
    ConfigurationError,
    ErrorCode,
    ErrorDetail,
    InvalidArgumentError,
)

__all__ = [
    # Catalog models
    "ColumnInfo",
    "DatabaseInfo",
    "TableInfo",
    # Error models
    "ErrorCode",
    "ErrorDetail",
    "CatalogCacheError",
    "ConfigurationError",
    "InvalidArgumentError",
]
