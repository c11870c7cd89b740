"""Pytest configuration and shared fixtures.

This module provides shared fixtures and configuration for all tests.
"""

import os

import pytest

from catalog_cache.cache.metadata_cache import reset_metadata_cache
from catalog_cache.config.settings import reset_settings
from catalog_cache.models.catalog import ColumnInfo, DatabaseInfo, TableInfo
from catalog_cache.observability.metrics import metrics


@pytest.fixture(autouse=True)
def reset_config() -> None:
    """Reset global settings and the process-wide cache before each test."""
    reset_settings()
    reset_metadata_cache()


@pytest.fixture(autouse=True)
def reset_metrics():
    """Start every test with fresh metric values."""
    os.environ["OBSERVABILITY_METRICS_ENABLED"] = "true"
    metrics.reset_all_metrics()
    yield
    if "OBSERVABILITY_METRICS_ENABLED" in os.environ:
        del os.environ["OBSERVABILITY_METRICS_ENABLED"]


@pytest.fixture
def sample_db() -> DatabaseInfo:
    """Create a sample database descriptor."""
    return DatabaseInfo(
        name="_okera_sales",
        description="Sales reporting",
        location_uri="s3://warehouse/_okera_sales",
    )


@pytest.fixture
def sample_table() -> TableInfo:
    """Create a sample table descriptor."""
    return TableInfo(
        db_name="_okera_sales",
        table_name="orders",
        columns=(
            ColumnInfo(name="order_id", type="bigint"),
            ColumnInfo(name="amount", type="decimal(10,2)", comment="Order total"),
        ),
        partition_keys=(ColumnInfo(name="ds", type="string"),),
        location="s3://warehouse/_okera_sales/orders",
    )
