"""Base data source interface."""

from abc import ABC, abstractmethod
from typing import List, Dict, Any


class PreparedStatement(ABC):
    """A query prepared against a data source, executed once per report."""

    def __init__(self, sql: str):
        self.sql = sql

    @abstractmethod
    def execute(self, *params: Any) -> None:
        """Execute the statement with positional bind parameters."""
        pass

    @abstractmethod
    def column_names(self) -> List[str]:
        """Return result column names in select order."""
        pass

    @abstractmethod
    def fetch_rows(self) -> List[Dict[str, Any]]:
        """Return all result rows, each an independent column-name -> value dict."""
        pass


class DataSource(ABC):
    """Abstract base class for data sources."""

    def __init__(self, name: str, config: Dict[str, Any]):
        """Initialize data source.

        Args:
            name: Name for this data source, used in log messages
            config: Configuration dictionary
        """
        self.name = name
        self.config = config
        self.connection = None
        self._connected = False

    @abstractmethod
    def connect(self) -> None:
        """Establish connection to the data source."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Close connection to the data source."""
        pass

    @abstractmethod
    def prepare(self, sql: str) -> PreparedStatement:
        """Prepare a SQL statement for execution.

        Args:
            sql: SQL text, using the driver's placeholder style

        Returns:
            Statement ready to execute
        """
        pass

    def is_connected(self) -> bool:
        """Check if data source is connected.

        Returns:
            True if connected, False otherwise
        """
        return self._connected

    def ensure_connected(self) -> None:
        """Ensure data source is connected.

        Raises:
            ConnectionError: If connection cannot be established
        """
        if not self.is_connected():
            self.connect()
            self._connected = True

    def __enter__(self):
        """Context manager entry."""
        self.ensure_connected()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.disconnect()
        self._connected = False
        return False

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name})"
