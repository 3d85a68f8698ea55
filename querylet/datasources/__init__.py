"""Data source connectors."""

from .base import DataSource, PreparedStatement
from .postgresql import PostgreSQLDataSource
from .duckdb import DuckDBDataSource


def create_datasource(ds_config) -> DataSource:
    """Build the data source described by a DataSourceConfig."""
    if ds_config.type == "duckdb":
        return DuckDBDataSource(ds_config.name, ds_config.config)
    if ds_config.type == "postgresql":
        return PostgreSQLDataSource(ds_config.name, ds_config.config)
    raise ValueError(f"Unsupported data source type: {ds_config.type}")


__all__ = [
    "DataSource",
    "PreparedStatement",
    "PostgreSQLDataSource",
    "DuckDBDataSource",
    "create_datasource",
]
