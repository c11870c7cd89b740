"""Caching layer for catalog metadata.

This package caches database and table descriptors fetched from an upstream
catalog so that repeated lookups for internal namespaces skip the metastore.
"""

from catalog_cache.cache.metadata_cache import (
    CacheStats,
    MetadataCache,
    get_metadata_cache,
    reset_metadata_cache,
)
from catalog_cache.cache.naming import canonicalize, fully_qualified_table_key
from catalog_cache.cache.policy import AdmissionPolicy
from catalog_cache.cache.store import DescriptorStore

__all__ = [
    "AdmissionPolicy",
    "CacheStats",
    "DescriptorStore",
    "MetadataCache",
    "canonicalize",
    "fully_qualified_table_key",
    "get_metadata_cache",
    "reset_metadata_cache",
]
