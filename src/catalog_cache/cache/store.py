"""Thread-safe descriptor store with a pluggable eviction policy.

``cachetools`` mappings are not safe for concurrent use on their own, so
every access goes through a re-entrant lock. Single-key operations are
therefore atomic with respect to each other, and :meth:`DescriptorStore.keys`
returns a snapshot that callers may iterate while other threads keep
writing.
"""

import math
import threading
from collections.abc import Hashable
from typing import Generic, TypeVar

import cachetools

from catalog_cache.config.settings import EvictionPolicy, StoreConfig
from catalog_cache.models.errors import ConfigurationError

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

_MISSING = object()


def build_backend(config: StoreConfig) -> cachetools.Cache:
    """Create the underlying ``cachetools`` mapping for a store.

    Args:
        config: Store configuration selecting the eviction policy.

    Returns:
        cachetools.Cache: Unbounded cache, LRU cache or TTL cache.

    Raises:
        ConfigurationError: If the TTL policy is selected without a TTL.
    """
    if config.policy == EvictionPolicy.NONE:
        return cachetools.Cache(maxsize=math.inf)
    if config.policy == EvictionPolicy.LRU:
        return cachetools.LRUCache(maxsize=config.max_size)
    if config.policy == EvictionPolicy.TTL:
        if config.ttl_seconds is None:
            raise ConfigurationError(
                "TTL eviction requires ttl_seconds", details={"policy": config.policy}
            )
        return cachetools.TTLCache(maxsize=config.max_size, ttl=config.ttl_seconds)
    raise ConfigurationError(f"Unknown eviction policy: {config.policy}")


class DescriptorStore(Generic[K, V]):
    """Key-value store owning cached descriptors.

    Attributes:
        name: Store name used in logs and metrics ("database" or "table").
        config: Eviction settings the store was built with.

    Example:
        >>> store = DescriptorStore("table", StoreConfig(policy="lru", max_size=2))
        >>> store.set("default" + "orders", orders)
        >>> store.get("defaultorders") is orders
        True
    """

    def __init__(
        self,
        name: str,
        config: StoreConfig | None = None,
        backend: cachetools.Cache | None = None,
    ) -> None:
        """Initialize the store.

        Args:
            name: Store name used in logs and metrics.
            config: Eviction settings. Defaults to an unbounded store.
            backend: Pre-built ``cachetools`` mapping to use instead of the
                one ``config`` describes, e.g. a ``TTLCache`` with a custom
                timer or a cache class with its own eviction rules.
        """
        self.name = name
        self.config = config or StoreConfig()
        self._data: cachetools.Cache = (
            backend if backend is not None else build_backend(self.config)
        )
        self._lock = threading.RLock()

    def get(self, key: K) -> V | None:
        """Return the value for ``key`` or None if absent or expired."""
        with self._lock:
            return self._data.get(key)

    def set(self, key: K, value: V) -> None:
        """Insert ``value`` under ``key``, replacing any previous entry."""
        with self._lock:
            self._data[key] = value

    def pop(self, key: K) -> bool:
        """Remove ``key`` if present.

        Returns:
            bool: True if an entry was removed.
        """
        with self._lock:
            return self._data.pop(key, _MISSING) is not _MISSING

    def keys(self) -> list[K]:
        """Return a snapshot of the keys currently stored."""
        with self._lock:
            if isinstance(self._data, cachetools.TTLCache):
                self._data.expire()
            return list(self._data.keys())

    def clear(self) -> None:
        with self._lock:
            self._data.clear()

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._data

    def __len__(self) -> int:
        with self._lock:
            if isinstance(self._data, cachetools.TTLCache):
                self._data.expire()
            return len(self._data)

    def __repr__(self) -> str:
        return f"DescriptorStore(name={self.name!r}, policy={self.config.policy}, size={len(self)})"
