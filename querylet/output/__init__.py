"""Output handlers: turn query results into formatted output."""

from .csv import as_csv
from .template import DEFAULT_TEMPLATE, as_template
from .tabbed import TabbedOutput, as_tabbed
from .parquet import ParquetOutput, as_parquet

__all__ = [
    "as_csv",
    "as_template",
    "DEFAULT_TEMPLATE",
    "TabbedOutput",
    "as_tabbed",
    "ParquetOutput",
    "as_parquet",
]
