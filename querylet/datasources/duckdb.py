"""DuckDB data source implementation."""

from typing import List, Dict, Any, Optional
import pyarrow as pa
import duckdb
import logging

from .base import DataSource, PreparedStatement

logger = logging.getLogger(__name__)


class DuckDBStatement(PreparedStatement):
    """Statement executed on a DuckDB connection, results fetched as Arrow."""

    def __init__(self, datasource: "DuckDBDataSource", sql: str):
        super().__init__(sql)
        self.datasource = datasource
        self._table: Optional[pa.Table] = None
        self._executed = False

    def execute(self, *params: Any) -> None:
        connection = self.datasource.connection
        if connection is None:
            raise RuntimeError(f"Not connected to {self.datasource.name}")
        logger.debug(f"Executing query on {self.datasource.name}: {self.sql[:100]}...")
        try:
            result = connection.execute(self.sql, list(params))
            if result.description:
                self._table = result.fetch_arrow_table()
            else:
                self._table = None
            self._executed = True
        except duckdb.Error as e:
            logger.error(f"Query execution failed on {self.datasource.name}: {e}")
            raise

    def column_names(self) -> List[str]:
        if not self._executed:
            raise RuntimeError("Statement has not been executed")
        if self._table is None:
            return []
        return list(self._table.schema.names)

    def fetch_rows(self) -> List[Dict[str, Any]]:
        if not self._executed:
            raise RuntimeError("Statement has not been executed")
        if self._table is None:
            return []
        return self._table.to_pylist()


class DuckDBDataSource(DataSource):
    """DuckDB data source connector."""

    def __init__(self, name: str, config: Dict[str, Any]):
        """Initialize DuckDB data source.

        Config should include:
            - path: Path to DuckDB database file (or :memory: for in-memory)
            - read_only: Whether to open in read-only mode (default: True
              for files, False for :memory:)
        """
        super().__init__(name, config)
        self.connection = None
        self.db_path = config.get("path", ":memory:")
        # An in-memory database cannot be opened read-only.
        self.read_only = config.get("read_only", self.db_path != ":memory:")

    def connect(self) -> None:
        """Establish connection to DuckDB."""
        logger.info(f"Connecting to DuckDB at '{self.db_path}'")
        self.connection = duckdb.connect(self.db_path, read_only=self.read_only)
        self._connected = True
        logger.info(f"Successfully connected to DuckDB: {self.name}")

    def disconnect(self) -> None:
        """Close DuckDB connection."""
        if self.connection:
            self.connection.close()
            logger.info(f"Disconnected from DuckDB: {self.name}")
            self.connection = None
            self._connected = False

    def prepare(self, sql: str) -> DuckDBStatement:
        """Prepare a statement; DuckDB binds ``?`` and ``$n`` placeholders."""
        return DuckDBStatement(self, sql)
