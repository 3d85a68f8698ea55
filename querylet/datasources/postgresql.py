"""PostgreSQL data source implementation."""

from typing import List, Dict, Any
import psycopg2
from psycopg2.extras import RealDictCursor
import logging

from .base import DataSource, PreparedStatement

logger = logging.getLogger(__name__)


class PostgreSQLStatement(PreparedStatement):
    """Statement executed with psycopg2; binds ``%s`` placeholders."""

    def __init__(self, datasource: "PostgreSQLDataSource", sql: str):
        super().__init__(sql)
        self.datasource = datasource
        self._columns: List[str] = []
        self._rows: List[Dict[str, Any]] = []

    def execute(self, *params: Any) -> None:
        conn = self.datasource.connection
        if conn is None:
            raise RuntimeError(f"Not connected to {self.datasource.name}")
        try:
            with conn.cursor(cursor_factory=RealDictCursor) as cursor:
                logger.debug(
                    f"Executing query on {self.datasource.name}: {self.sql[:100]}..."
                )
                cursor.execute(self.sql, params or None)
                self._columns = self._extract_column_names(cursor.description)
                rows = []
                if cursor.description is not None:
                    for row in cursor.fetchall():
                        rows.append(dict(row))
                self._rows = rows
        except psycopg2.Error as e:
            logger.error(f"Query execution failed on {self.datasource.name}: {e}")
            conn.rollback()
            raise

    def column_names(self) -> List[str]:
        return list(self._columns)

    def fetch_rows(self) -> List[Dict[str, Any]]:
        return self._rows

    def _extract_column_names(self, description) -> List[str]:
        """Extract column names from cursor description."""
        columns = []
        for desc in description or []:
            columns.append(desc[0])
        return columns


class PostgreSQLDataSource(DataSource):
    """PostgreSQL data source connector over a single connection."""

    def __init__(self, name: str, config: Dict[str, Any]):
        """Initialize PostgreSQL data source.

        Config should include:
            - host: Database host
            - port: Database port (default: 5432)
            - database: Database name
            - user: Username
            - password: Password
        """
        super().__init__(name, config)

    def connect(self) -> None:
        """Open a connection to PostgreSQL."""
        try:
            logger.info(
                f"Connecting to PostgreSQL database '{self.config['database']}' "
                f"at {self.config['host']}"
            )
            self.connection = psycopg2.connect(
                host=self.config["host"],
                port=self.config.get("port", 5432),
                database=self.config["database"],
                user=self.config["user"],
                password=self.config["password"],
            )
            self._connected = True
            logger.info(f"Successfully connected to PostgreSQL: {self.name}")
        except psycopg2.Error as e:
            logger.error(f"Failed to connect to PostgreSQL {self.name}: {e}")
            raise ConnectionError(f"PostgreSQL connection failed: {e}") from e

    def disconnect(self) -> None:
        """Close the connection."""
        if self.connection:
            self.connection.close()
            logger.info(f"Disconnected from PostgreSQL: {self.name}")
            self.connection = None
            self._connected = False

    def prepare(self, sql: str) -> PostgreSQLStatement:
        return PostgreSQLStatement(self, sql)
