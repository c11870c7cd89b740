"""Process-wide metadata cache for catalog database and table descriptors.

Database descriptors are keyed by canonical database name and table
descriptors by fully-qualified table key (see
:mod:`catalog_cache.cache.naming`). The two stores are independent: a
nested ``{db: {table: descriptor}}`` map was rejected because reads of the
inner map would not be atomic with writes to it. The price is that
invalidating a database has to scan the whole table store.

Concurrency: every single-key operation is atomic. The cascade in
:meth:`MetadataCache.invalidate_db` works on a snapshot of the table keys, so
a ``set_tbl`` racing with it may survive the scan (stale entry) or be
evicted. Callers that need strict consistency must serialize invalidation
against writers themselves.
"""

import logging
import threading
from typing import Any

import cachetools
from pydantic import BaseModel, Field

from catalog_cache.cache.naming import canonicalize, fully_qualified_table_key
from catalog_cache.cache.policy import AdmissionPolicy
from catalog_cache.cache.store import DescriptorStore
from catalog_cache.config.settings import CacheConfig, get_settings
from catalog_cache.observability.metrics import MetricsCollector, metrics as default_metrics

logger = logging.getLogger(__name__)

DATABASE_STORE = "database"
TABLE_STORE = "table"


class CacheStats(BaseModel):
    """Point-in-time view of cache occupancy and hit rates."""

    database_entries: int = Field(..., description="Cached database descriptors")
    table_entries: int = Field(..., description="Cached table descriptors")
    hits: int = Field(default=0, description="Lookups that found an entry")
    misses: int = Field(default=0, description="Lookups that found nothing")

    @property
    def hit_ratio(self) -> float:
        total = self.hits + self.misses
        return self.hits / total if total else 0.0


class MetadataCache:
    """Cache for database and table descriptors with selective admission.

    Only databases admitted by the :class:`AdmissionPolicy` are stored;
    lookups and invalidations are never gated, so a name outside the cached
    namespaces is simply a guaranteed miss or no-op.

    Attributes:
        config: Cache configuration.
        policy: Admission policy applied on writes.

    Example:
        >>> cache = MetadataCache()
        >>> cache.set_db("Default", db)
        True
        >>> cache.get_db(" DEFAULT ") is db
        True
        >>> cache.invalidate_db("default")
    """

    def __init__(
        self,
        config: CacheConfig | None = None,
        policy: AdmissionPolicy | None = None,
        metrics: MetricsCollector | None = None,
        metrics_enabled: bool = True,
        database_backend: cachetools.Cache | None = None,
        table_backend: cachetools.Cache | None = None,
    ) -> None:
        """Initialize metadata cache.

        Args:
            config: Cache configuration. Defaults to ``CacheConfig()``.
            policy: Admission policy. Defaults to one built from ``config``.
            metrics: Metrics collector. Defaults to the process-wide collector.
            metrics_enabled: Record nothing when false.
            database_backend: Optional ``cachetools`` mapping for the database
                store, overriding ``config.database_store``.
            table_backend: Optional ``cachetools`` mapping for the table store,
                overriding ``config.table_store``.
        """
        self.config = config or CacheConfig()
        self.policy = policy or AdmissionPolicy.from_config(self.config)
        self._metrics: MetricsCollector | None = (
            (metrics or default_metrics) if metrics_enabled else None
        )
        self._db_store: DescriptorStore[str, Any] = DescriptorStore(
            DATABASE_STORE, self.config.database_store, backend=database_backend
        )
        self._tbl_store: DescriptorStore[str, Any] = DescriptorStore(
            TABLE_STORE, self.config.table_store, backend=table_backend
        )
        self._counter_lock = threading.Lock()
        self._hits = 0
        self._misses = 0

    # Naming helpers

    def canonical_name(self, name: str) -> str:
        """Canonicalize a database or table name with the configured escape character."""
        return canonicalize(name, self.config.escape_char)

    def table_key(self, db_name: str, tbl_name: str) -> str:
        """Build the fully-qualified table key for a database/table pair."""
        return fully_qualified_table_key(db_name, tbl_name, self.config.escape_char)

    def _canonical_db(self, db_name: str) -> str:
        return canonicalize(db_name, self.config.escape_char, argument="db_name")

    def is_cacheable(self, db_name: str) -> bool:
        """Check whether ``db_name`` (raw or canonical) is admitted into the cache."""
        return self.policy.is_cacheable(self._canonical_db(db_name))

    # Databases

    def get_db(self, db_name: str) -> Any | None:
        """Get a cached database descriptor.

        Args:
            db_name: Raw database name.

        Returns:
            The cached descriptor, or None on a miss.

        Raises:
            InvalidArgumentError: If ``db_name`` is None.
        """
        key = self._canonical_db(db_name)
        return self._lookup(self._db_store, key)

    def set_db(self, db_name: str, db: Any) -> bool:
        """Cache a database descriptor if its namespace is cacheable.

        Args:
            db_name: Raw database name.
            db: Database descriptor to store. Replaces any previous entry.

        Returns:
            bool: True if the descriptor was stored, False if the admission
                policy (or a disabled cache) turned the call into a no-op.

        Raises:
            InvalidArgumentError: If ``db_name`` is None.
        """
        key = self._canonical_db(db_name)
        return self._admit(self._db_store, key, key, db)

    def invalidate_db(self, db_name: str) -> None:
        """Drop a database and, for cacheable databases, all of its tables.

        The database entry is removed unconditionally. If the database is
        cacheable, every table key containing the canonical database name is
        removed as well. Containment rather than prefix matching is
        intentional for key compatibility; it means invalidating ``_okera_a``
        also evicts tables of ``_okera_ab`` and any table whose name contains
        ``_okera_a``. Over-eviction only costs a reload.

        Args:
            db_name: Raw database name.

        Raises:
            InvalidArgumentError: If ``db_name`` is None.
        """
        key = self._canonical_db(db_name)
        removed = self._db_store.pop(key)
        if self._metrics is not None:
            self._metrics.record_invalidation(DATABASE_STORE, int(removed))
            self._metrics.set_entries(DATABASE_STORE, len(self._db_store))

        if not self.policy.is_cacheable(key):
            return

        evicted = 0
        for tbl_key in self._tbl_store.keys():
            if key in tbl_key and self._tbl_store.pop(tbl_key):
                evicted += 1

        if self._metrics is not None:
            self._metrics.record_invalidation(TABLE_STORE, evicted)
            self._metrics.set_entries(TABLE_STORE, len(self._tbl_store))
        logger.debug("Invalidated database %r and %d cached table(s)", key, evicted)

    # Tables

    def get_tbl(self, db_name: str, tbl_name: str) -> Any | None:
        """Get a cached table descriptor.

        Args:
            db_name: Raw database name.
            tbl_name: Raw table name.

        Returns:
            The cached descriptor, or None on a miss.

        Raises:
            InvalidArgumentError: If either name is None.
        """
        return self._lookup(self._tbl_store, self.table_key(db_name, tbl_name))

    def set_tbl(self, db_name: str, tbl_name: str, table: Any) -> bool:
        """Cache a table descriptor if its database namespace is cacheable.

        Args:
            db_name: Raw database name.
            tbl_name: Raw table name.
            table: Table descriptor to store. Replaces any previous entry.

        Returns:
            bool: True if the descriptor was stored.

        Raises:
            InvalidArgumentError: If either name is None.
        """
        tbl_key = self.table_key(db_name, tbl_name)
        canonical_db = self._canonical_db(db_name)
        return self._admit(self._tbl_store, canonical_db, tbl_key, table)

    def invalidate_table(self, db_name: str, tbl_name: str) -> None:
        """Drop a single cached table. Not gated by the admission policy.

        Raises:
            InvalidArgumentError: If either name is None.
        """
        tbl_key = self.table_key(db_name, tbl_name)
        removed = self._tbl_store.pop(tbl_key)
        if removed:
            logger.debug("Invalidated table %r", tbl_key)
        if self._metrics is not None:
            self._metrics.record_invalidation(TABLE_STORE, int(removed))
            self._metrics.set_entries(TABLE_STORE, len(self._tbl_store))

    # Housekeeping

    def clear(self) -> None:
        """Drop every cached database and table and reset the lookup counters."""
        self._db_store.clear()
        self._tbl_store.clear()
        with self._counter_lock:
            self._hits = 0
            self._misses = 0
        if self._metrics is not None:
            self._metrics.set_entries(DATABASE_STORE, 0)
            self._metrics.set_entries(TABLE_STORE, 0)

    def cached_databases(self) -> list[str]:
        """Get canonical names of the databases currently cached.

        Returns:
            list[str]: Canonical database names.
        """
        return self._db_store.keys()

    def stats(self) -> CacheStats:
        """Get a snapshot of store sizes and lookup counters."""
        with self._counter_lock:
            hits, misses = self._hits, self._misses
        return CacheStats(
            database_entries=len(self._db_store),
            table_entries=len(self._tbl_store),
            hits=hits,
            misses=misses,
        )

    def _lookup(self, store: DescriptorStore[str, Any], key: str) -> Any | None:
        value = store.get(key)
        hit = value is not None
        with self._counter_lock:
            if hit:
                self._hits += 1
            else:
                self._misses += 1
        if self._metrics is not None:
            self._metrics.record_lookup(store.name, hit=hit)
        return value

    def _admit(
        self,
        store: DescriptorStore[str, Any],
        canonical_db: str,
        key: str,
        value: Any,
    ) -> bool:
        if not self.config.enabled or not self.policy.is_cacheable(canonical_db):
            logger.debug(
                "Not caching %s entry %r: database %r is not cacheable",
                store.name,
                key,
                canonical_db,
            )
            if self._metrics is not None:
                self._metrics.record_write(store.name, stored=False)
            return False

        store.set(key, value)
        if self._metrics is not None:
            self._metrics.record_write(store.name, stored=True)
            self._metrics.set_entries(store.name, len(store))
        return True

    def __repr__(self) -> str:
        return (
            f"MetadataCache(databases={len(self._db_store)}, tables={len(self._tbl_store)}, "
            f"policy={self.policy!r})"
        )


# Process-wide instance
_instance: MetadataCache | None = None
_instance_lock = threading.Lock()


def get_metadata_cache() -> MetadataCache:
    """Get or lazily create the process-wide metadata cache.

    The instance lives for the lifetime of the process and is configured
    from :func:`~catalog_cache.config.settings.get_settings` on first use.

    Returns:
        MetadataCache: The global cache instance.
    """
    global _instance
    if _instance is None:
        with _instance_lock:
            if _instance is None:
                settings = get_settings()
                _instance = MetadataCache(
                    settings.cache,
                    metrics_enabled=settings.observability.metrics_enabled,
                )
                logger.info("Created process-wide metadata cache: %r", _instance)
    return _instance


def reset_metadata_cache() -> None:
    """Forget the process-wide instance. Useful for testing."""
    global _instance
    with _instance_lock:
        _instance = None
