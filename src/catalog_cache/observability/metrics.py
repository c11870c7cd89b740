"""Prometheus metrics collector for the catalog metadata cache.

This module implements cache activity metrics using prometheus_client.
"""

from prometheus_client import CollectorRegistry, Counter, Gauge


class MetricsCollector:
    """Centralized metrics collector using Prometheus client.

    This class provides singleton access to all cache metrics.

    Metrics:
    - Lookups by store and result (hit/miss)
    - Writes by store and result (stored/rejected)
    - Invalidated entries by store
    - Current entry count by store

    Example:
        >>> metrics = MetricsCollector()
        >>> metrics.record_lookup("database", hit=True)
    """

    _instance: "MetricsCollector | None" = None

    def __new__(cls) -> "MetricsCollector":
        """Ensure singleton instance."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialize_metrics()
        return cls._instance

    def _initialize_metrics(self) -> None:
        """Initialize all Prometheus metrics on a private registry.

        A private registry lets :meth:`reset_all_metrics` rebuild the metrics
        without tripping over duplicate names in the default registry.
        """
        self.registry = CollectorRegistry()

        self.lookups: Counter = Counter(
            "catalog_cache_lookups_total",
            "Total number of cache lookups",
            labelnames=["store", "result"],
            registry=self.registry,
        )

        self.writes: Counter = Counter(
            "catalog_cache_writes_total",
            "Total number of cache writes, including writes rejected by admission",
            labelnames=["store", "result"],
            registry=self.registry,
        )

        self.invalidations: Counter = Counter(
            "catalog_cache_invalidations_total",
            "Total number of entries removed by invalidation",
            labelnames=["store"],
            registry=self.registry,
        )

        self.entries: Gauge = Gauge(
            "catalog_cache_entries",
            "Number of entries currently cached",
            labelnames=["store"],
            registry=self.registry,
        )

    def record_lookup(self, store: str, hit: bool) -> None:
        """Increment lookup counter.

        Args:
            store: Store name ("database" or "table").
            hit: Whether the lookup found an entry.
        """
        self.lookups.labels(store=store, result="hit" if hit else "miss").inc()

    def record_write(self, store: str, stored: bool) -> None:
        """Increment write counter.

        Args:
            store: Store name.
            stored: False if the admission policy rejected the write.
        """
        self.writes.labels(store=store, result="stored" if stored else "rejected").inc()

    def record_invalidation(self, store: str, count: int = 1) -> None:
        """Increment invalidation counter by the number of removed entries."""
        if count:
            self.invalidations.labels(store=store).inc(count)

    def set_entries(self, store: str, count: int) -> None:
        self.entries.labels(store=store).set(count)

    def reset_all_metrics(self) -> None:
        """Reset all metrics to initial state.

        This method is primarily useful for testing purposes.
        """
        self._initialize_metrics()


# Singleton instance
metrics = MetricsCollector()
