"""Observability module for the catalog metadata cache.

This module provides:
- Prometheus metrics for cache lookups, writes and invalidations
- JSON and text logging configuration

Example:
    >>> from catalog_cache.observability import configure_logging, metrics
    >>>
    >>> configure_logging(level="INFO", log_format="json")
    >>> metrics.record_lookup("table", hit=False)
"""

from catalog_cache.observability.logging import (
    JSONFormatter,
    TextFormatter,
    configure_logging,
    configure_logging_from_config,
)
from catalog_cache.observability.metrics import MetricsCollector, metrics

__all__ = [
    # Metrics
    "MetricsCollector",
    "metrics",
    # Logging
    "configure_logging",
    "configure_logging_from_config",
    "JSONFormatter",
    "TextFormatter",
]
