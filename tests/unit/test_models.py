"""Unit tests for data models.

Tests for catalog descriptor and error models to ensure correct validation
and behavior.
"""

import pytest
from pydantic import ValidationError

from catalog_cache.models.catalog import ColumnInfo, DatabaseInfo, TableInfo
from catalog_cache.models.errors import (
    CatalogCacheError,
    ConfigurationError,
    ErrorCode,
    ErrorDetail,
    InvalidArgumentError,
)


class TestDatabaseInfo:
    """Tests for DatabaseInfo model."""

    def test_basic_database(self) -> None:
        """Test basic database creation."""
        db = DatabaseInfo(name="_okera_sales", location_uri="s3://warehouse/sales")
        assert db.name == "_okera_sales"
        assert db.parameters == {}
        assert db.description is None

    def test_name_required(self) -> None:
        """Test that name is required."""
        with pytest.raises(ValidationError):
            DatabaseInfo()  # type: ignore[call-arg]

    def test_frozen(self) -> None:
        """Test that cached descriptors cannot be mutated in place."""
        db = DatabaseInfo(name="default")
        with pytest.raises(ValidationError):
            db.name = "other"  # type: ignore[misc]

    def test_parameters_read_only(self) -> None:
        """Test that parameters cannot be changed through a cached descriptor."""
        source = {"owner_team": "finance"}
        db = DatabaseInfo(name="_okera_sales", parameters=source)

        with pytest.raises(TypeError):
            db.parameters["owner_team"] = "ops"  # type: ignore[index]

        source["owner_team"] = "ops"
        assert db.parameters == {"owner_team": "finance"}
        assert db.model_dump()["parameters"] == {"owner_team": "finance"}


class TestTableInfo:
    """Tests for TableInfo model."""

    def test_full_name(self, sample_table: TableInfo) -> None:
        """Test dotted name."""
        assert sample_table.full_name == "_okera_sales.orders"

    def test_is_partitioned(self, sample_table: TableInfo) -> None:
        """Test partition detection."""
        assert sample_table.is_partitioned
        assert not TableInfo(db_name="default", table_name="t").is_partitioned

    def test_get_column(self, sample_table: TableInfo) -> None:
        """Test case-insensitive column lookup across data and partition columns."""
        amount = sample_table.get_column("AMOUNT")
        assert amount is not None
        assert amount.comment == "Order total"
        assert sample_table.get_column("ds") == ColumnInfo(name="ds", type="string")
        assert sample_table.get_column("missing") is None

    def test_columns_coerced_to_tuple(self) -> None:
        """Test that list input is stored immutably."""
        table = TableInfo(
            db_name="default",
            table_name="t",
            columns=[ColumnInfo(name="id", type="int")],  # type: ignore[arg-type]
        )
        assert isinstance(table.columns, tuple)

    def test_frozen(self, sample_table: TableInfo) -> None:
        """Test that table descriptors cannot be mutated in place."""
        with pytest.raises(ValidationError):
            sample_table.table_name = "other"  # type: ignore[misc]

        with pytest.raises(TypeError):
            sample_table.parameters["format"] = "parquet"  # type: ignore[index]


class TestErrors:
    """Tests for error classes."""

    def test_base_error(self) -> None:
        """Test base error defaults."""
        err = CatalogCacheError("boom")
        assert err.message == "boom"
        assert err.code == ErrorCode.INTERNAL_ERROR
        assert err.details == {}
        assert repr(err) == "CatalogCacheError(code=internal_error, message='boom')"

    def test_invalid_argument_error(self) -> None:
        """Test invalid argument error."""
        err = InvalidArgumentError("db_name must not be None", details={"argument": "db_name"})
        assert err.code == ErrorCode.INVALID_ARGUMENT
        assert isinstance(err, CatalogCacheError)
        assert isinstance(err, ValueError)

    def test_configuration_error(self) -> None:
        """Test configuration error."""
        err = ConfigurationError("bad store")
        assert err.code == ErrorCode.CONFIGURATION_ERROR

    def test_to_error_detail(self) -> None:
        """Test conversion to ErrorDetail."""
        err = InvalidArgumentError("missing", details={"argument": "tbl_name"})
        detail = err.to_error_detail()

        assert isinstance(detail, ErrorDetail)
        assert detail.to_dict() == {
            "code": ErrorCode.INVALID_ARGUMENT,
            "message": "missing",
            "details": {"argument": "tbl_name"},
        }

    def test_error_detail_without_details(self) -> None:
        """Test that empty details are omitted."""
        detail = ErrorDetail(code=ErrorCode.INTERNAL_ERROR, message="x")
        assert detail.to_dict() == {"code": ErrorCode.INTERNAL_ERROR, "message": "x"}
