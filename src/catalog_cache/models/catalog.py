"""Catalog descriptor models.

These models describe databases and tables as returned by an upstream
catalog/metastore client. The metadata cache stores them without looking
inside; they are frozen so a cached descriptor can be shared between
threads and is only ever replaced wholesale.
"""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, PlainSerializer


def _read_only(value: Mapping[str, str]) -> Mapping[str, str]:
    return MappingProxyType(dict(value))


# Key/value parameters that cannot be changed in place once validated.
Parameters = Annotated[
    Mapping[str, str],
    AfterValidator(_read_only),
    PlainSerializer(dict, return_type=dict[str, str]),
]


class ColumnInfo(BaseModel):
    """A single column (or partition key) of a catalog table."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Column name")
    type: str = Field(..., description="Hive type string, e.g. 'bigint' or 'array<string>'")
    comment: str | None = Field(None, description="Column comment")


class DatabaseInfo(BaseModel):
    """Database descriptor."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Database name")
    description: str | None = Field(None, description="Database description")
    location_uri: str | None = Field(None, description="Storage location of the database")
    owner_name: str | None = Field(None, description="Owner principal")
    parameters: Parameters = Field(
        default_factory=lambda: MappingProxyType({}), description="Database parameters"
    )


class TableInfo(BaseModel):
    """Table descriptor."""

    model_config = ConfigDict(frozen=True)

    db_name: str = Field(..., description="Owning database name")
    table_name: str = Field(..., description="Table name")
    table_type: str = Field(default="EXTERNAL_TABLE", description="Metastore table type")
    columns: tuple[ColumnInfo, ...] = Field(default=(), description="Data columns")
    partition_keys: tuple[ColumnInfo, ...] = Field(default=(), description="Partition columns")
    location: str | None = Field(None, description="Storage location of the table data")
    owner: str | None = Field(None, description="Owner principal")
    parameters: Parameters = Field(
        default_factory=lambda: MappingProxyType({}), description="Table parameters"
    )

    @property
    def full_name(self) -> str:
        """Get the dotted db.table name.

        Returns:
            str: Database-qualified table name.
        """
        return f"{self.db_name}.{self.table_name}"

    @property
    def is_partitioned(self) -> bool:
        return bool(self.partition_keys)

    def get_column(self, name: str) -> ColumnInfo | None:
        """Find a data or partition column by name (case-insensitive).

        Args:
            name: Column name to find.

        Returns:
            ColumnInfo if found, None otherwise.
        """
        wanted = name.lower()
        for column in (*self.columns, *self.partition_keys):
            if column.name.lower() == wanted:
                return column
        return None
